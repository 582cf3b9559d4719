# shexpand

Building blocks for shell-style expansion in Python:

- **Environments** (`shexpand.environ`): `Variable`, `ValueKind`, the
  abstract `Environ` and `WriteEnviron` interfaces, and two ready-made
  read-only environments, `FuncEnviron` (backed by a function) and
  `ListEnviron` (backed by `"name=value"` strings), plus the `list_environ`
  helper.
- **Expansion helpers** (`shexpand.expand`): a `Config` holding the
  environment and its field separators, `expand_format` for printf-style
  format strings and backslash escapes, and `read_fields` for splitting a
  line the way the `read` builtin does.
- **Script detection** (`shexpand.fileutil`): `has_shebang` and
  `could_be_script`, which returns a `ScriptConfidence`.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Environments

```python
import os
from shexpand.environ import ListEnviron, list_environ

env = ListEnviron(["HOME=/home/me", "SHELL=/bin/sh"])
print(env.get("HOME"))               # /home/me
print(env.get("MISSING").is_set())   # False

for name, variable in env.each():
    print(name, variable)

system_env = list_environ(*(f"{k}={v}" for k, v in os.environ.items()))
```

`ListEnviron` sorts its pairs, drops entries without `=` or with an empty
name, and when a name occurs more than once keeps the pair that sorts last.
Every variable it returns is exported and of kind `ValueKind.STRING`; the
sorted pairs are available as `env.pairs`.

`list_environ(*pairs, upper=None)` builds a `ListEnviron`. With `upper=True`
names are uppercased before duplicates are removed; by default this happens
only on Windows, where environment names are case-insensitive.

`FuncEnviron(fn)` looks names up through `fn`; an empty string counts as
unset, and `each()` yields nothing.

A `Variable` has `local`, `exported` and `read_only` flags, a `kind`, and a
value in `value` (strings and name references), `values` (indexed arrays) or
`mapping` (associative arrays). `str(variable)` gives the string value, or
the first element of an indexed array, or `""`. A name reference can be
followed with `variable.resolve(env)`, which returns the last name followed
and the variable it points to; after 100 references it gives up and returns
an unset variable.

To have a writable environment, subclass `WriteEnviron` and implement `get`,
`each` and `set`.

## Formatting and field splitting

```python
from shexpand.environ import ListEnviron
from shexpand.expand import Config, expand_format, read_fields

cfg = Config(ListEnviron(["IFS=:"]))

text, used = expand_format(cfg, "%s-%d\\n", ["a", "42"])
# text == "a-42\n", used == 2

read_fields(cfg, "a:b:c", -1, False)   # ["a", "b", "c"]
read_fields(cfg, "a:b:c", 2, False)    # ["a", "b:c"]
```

`Config(env=None)` takes its separators from the `IFS` variable, defaulting
to space, tab and newline; `cfg.is_ifs(char)` and `cfg.ifs_join(strings)`
test and join with them. Both functions also accept `None` for the config.

`expand_format` handles the escapes `\a \b \e \E \f \n \r \t \v`, octal
`\NNN`, `\xHH`, `\uHHHH` and `\UHHHHHHHH`, and the directives `%s %d %i %u
%o %x %c %%` with an optional flag and width. It raises `FormatError` (a
`ValueError`) on an invalid or missing format character. Passing `None` as
`args` turns off `%` directives and only processes backslash escapes.

`read_fields(cfg, text, n=-1, raw=False)` returns at most `n` fields, the
last one holding the rest of the input; `n=-1` means no limit and `n=1`
keeps the whole input, separators included. Unless `raw` is true,
backslashes escape the next character and are removed. Any other `n` below
1 raises `ValueError`.

## Spotting shell scripts

```python
from shexpand.fileutil import ScriptConfidence, could_be_script, has_shebang

has_shebang(b"#!/usr/bin/env bash\necho hi\n")   # True

confidence = could_be_script("deploy")
if confidence is ScriptConfidence.IF_SHEBANG:
    with open("deploy", "rb") as f:
        is_script = has_shebang(f.read(32))
```

`has_shebang` accepts bytes or text. `could_be_script` inspects the file
without following symlinks and rules out directories, symlinks, hidden
files, files with a non-shell extension and files too small to hold a
shebang; `.sh` and `.bash` files are scripts outright. It raises `OSError`
if the path does not exist.

## What this package does not do

There is no shell parser here, so nothing expands words of a shell script:
no parameter, command, arithmetic, brace or tilde expansion, and no
globbing. There is also no command-line tool; the package is a library only.

## Running the tests

```
pip install .[test]
pytest
```