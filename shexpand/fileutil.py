"""Helpers to recognise shell scripts among files."""

from __future__ import annotations

import enum
import os
import re
import stat

_SHEBANG_RE = re.compile(rb"^#![\t\n\f\r ]?/(usr/)?bin/(env[\t\n\f\r ]+)?(sh|bash)[\t\n\f\r ]")
_EXT_RE = re.compile(r"\.(sh|bash)\Z")

_MIN_SCRIPT_SIZE = len("#/bin/sh\n")


class ScriptConfidence(enum.IntEnum):
    """How likely a file is to be a shell script."""

    NOT_SCRIPT = 0
    IF_SHEBANG = 1
    IS_SCRIPT = 2


def has_shebang(data: bytes | str) -> bool:
    """Whether ``data`` begins with an sh or bash shebang.

    Variations with ``/usr`` and ``env`` are accepted.
    """
    if isinstance(data, str):
        data = data.encode()
    return _SHEBANG_RE.match(data) is not None


def could_be_script(path: str | os.PathLike[str]) -> ScriptConfidence:
    """Report how likely the file at ``path`` is to be a shell script.

    Directories, symlinks, hidden files and files with other extensions are
    discarded; files without an extension need a shebang.
    """
    path = os.fspath(path)
    name = os.path.basename(os.path.normpath(path))
    info = os.lstat(path)
    if stat.S_ISDIR(info.st_mode) or name.startswith("."):
        return ScriptConfidence.NOT_SCRIPT
    if stat.S_ISLNK(info.st_mode):
        return ScriptConfidence.NOT_SCRIPT
    if _EXT_RE.search(name):
        return ScriptConfidence.IS_SCRIPT
    if name.find(".") > 0:
        return ScriptConfidence.NOT_SCRIPT
    if info.st_size < _MIN_SCRIPT_SIZE:
        return ScriptConfidence.NOT_SCRIPT
    return ScriptConfidence.IF_SHEBANG