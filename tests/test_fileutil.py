import os

import pytest

from shexpand.fileutil import ScriptConfidence, could_be_script, has_shebang


@pytest.mark.parametrize(
    "body",
    [
        "#!/bin/sh\n foo",
        "#!/bin/bash\n foo",
        "#!/usr/bin/sh\n foo",
        "#!/usr/bin/env bash\n foo",
        "#!/bin/env sh\n foo",
        "#! /bin/sh\n foo",
        "#!\t/bin/env\tsh\n foo",
        "#!/bin/bash -e -x\nfoo",
    ],
)
def test_has_shebang_true(body):
    assert has_shebang(body.encode()) is True


@pytest.mark.parametrize(
    "body",
    [
        "#!/bin/shfoo",
        "#!/bin/envsh\n foo",
        " foo long enough",
        "",
    ],
)
def test_has_shebang_false(body):
    assert has_shebang(body.encode()) is False


def test_has_shebang_accepts_str():
    assert has_shebang("#!/bin/sh\n") is True


def _write(tmp_path, name, body):
    path = tmp_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body)
    return path


@pytest.mark.parametrize(
    "name, body, want",
    [
        ("ext.sh", " foo", ScriptConfidence.IS_SCRIPT),
        ("ext.bash", " foo", ScriptConfidence.IS_SCRIPT),
        ("ext-shebang.sh", "#!/bin/sh\n foo", ScriptConfidence.IS_SCRIPT),
        ("shebang-1", "#!/bin/sh\n foo", ScriptConfidence.IF_SHEBANG),
        ("noext-noshebang", " foo long enough", ScriptConfidence.IF_SHEBANG),
        (".hidden", " foo long enough", ScriptConfidence.NOT_SCRIPT),
        (".hidden-shebang", "#!/bin/sh\n foo", ScriptConfidence.NOT_SCRIPT),
        ("noext-empty", " foo", ScriptConfidence.NOT_SCRIPT),
        ("ext.other", " foo", ScriptConfidence.NOT_SCRIPT),
        ("ext-shebang.other", "#!/bin/sh\n foo", ScriptConfidence.NOT_SCRIPT),
    ],
)
def test_could_be_script(tmp_path, name, body, want):
    path = _write(tmp_path, name, body)
    assert could_be_script(path) is want


def test_could_be_script_directory(tmp_path):
    directory = tmp_path / "dir.sh"
    directory.mkdir()
    assert could_be_script(directory) is ScriptConfidence.NOT_SCRIPT


def test_could_be_script_symlink(tmp_path):
    target = _write(tmp_path, "ext-shebang.sh", "#!/bin/sh\n foo")
    link = tmp_path / "symlink-file.sh"
    os.symlink(target, link)
    assert could_be_script(link) is ScriptConfidence.NOT_SCRIPT
    assert could_be_script(target) is ScriptConfidence.IS_SCRIPT


def test_could_be_script_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        could_be_script(tmp_path / "nonexistent")


def test_confidence_ordering_of_results(tmp_path):
    not_script = could_be_script(_write(tmp_path, "ext.other", " foo"))
    if_shebang = could_be_script(_write(tmp_path, "shebang-1", "#!/bin/sh\n foo"))
    is_script = could_be_script(_write(tmp_path, "ext.sh", " foo"))
    assert not_script < if_shebang < is_script
    assert sorted([is_script, not_script, if_shebang]) == [
        ScriptConfidence.NOT_SCRIPT,
        ScriptConfidence.IF_SHEBANG,
        ScriptConfidence.IS_SCRIPT,
    ]