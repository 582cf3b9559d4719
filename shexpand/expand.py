"""Shell expansion helpers: printf-style formats and field splitting."""

from __future__ import annotations

from shexpand.environ import Environ, FuncEnviron

_DEFAULT_IFS = " \t\n"

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64 = 1 << 64

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "E": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "?": "?",
}

_OCTAL_START = "01234567"
_DECIMAL = "0123456789"
_HEX = "0123456789abcdefABCDEF"
_HEX_WIDTHS = {"x": 2, "u": 4, "U": 8}


class FormatError(ValueError):
    """Raised when a format string is malformed."""


class Config:
    """Settings for shell expansion.

    ``env`` supplies the variables; when omitted no variables are set. The
    field separators come from the ``IFS`` variable, defaulting to space,
    tab and newline.
    """

    def __init__(self, env: Environ | None = None) -> None:
        if env is None:
            env = FuncEnviron(lambda name: "")
        self.env = env
        ifs = env.get("IFS")
        self.ifs = str(ifs) if ifs.is_set() else _DEFAULT_IFS

    def is_ifs(self, char: str) -> bool:
        """Whether ``char`` is one of the field separators."""
        return len(char) == 1 and char in self.ifs

    def ifs_join(self, strings: list[str]) -> str:
        """Join strings with the first field separator, or nothing."""
        return self.ifs[:1].join(strings)


def _read_digits(text: str, start: int, limit: int, hexadecimal: bool) -> tuple[str, int]:
    allowed = _HEX if hexadecimal else _DECIMAL
    end = start
    while end < len(text) and end - start < limit and text[end] in allowed:
        end += 1
    return text[start:end], end


def _rune(code: int) -> str:
    if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
        return "\ufffd"
    return chr(code)


def _parse_int(text: str) -> int:
    """Parse an integer with an optional base prefix; invalid input gives 0."""
    body = text
    sign = 1
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if not body:
        return 0
    lowered = body.lower()
    if lowered.startswith("0x"):
        base, body = 16, body[2:]
    elif lowered.startswith("0b"):
        base, body = 2, body[2:]
    elif lowered.startswith("0o"):
        base, body = 8, body[2:]
    elif body.startswith("0") and len(body) > 1:
        base, body = 8, body[1:]
    else:
        base = 10
    if not body or body.strip() != body:
        return 0
    try:
        value = sign * int(body, base)
    except ValueError:
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, value))


def _format_string(spec: str, arg: str) -> str:
    body = spec[1:]
    minus = False
    if body[:1] in ("+", "-", " "):
        minus = body[0] == "-"
        body = body[1:]
    width = int(body) if body else 0
    if len(arg) >= width:
        return arg
    if minus:
        return arg.ljust(width)
    if body.startswith("0"):
        return arg.rjust(width, "0")
    return arg.rjust(width)


def expand_format(cfg: Config | None, fmt: str, args: list[str] | None) -> tuple[str, int]:
    """Expand a printf-style format string.

    Backslash escapes are always processed. Format directives are only
    processed when ``args`` is not None. Returns the result and the number of
    arguments consumed. Raises :class:`FormatError` on a malformed format.
    """
    if cfg is None:
        cfg = Config()
    remaining = list(args) if args is not None else None
    out: list[str] = []
    spec = ""
    i = 0
    length = len(fmt)
    while i < length:
        c = fmt[i]
        if c == "\\":
            i += 1
            if i >= length:
                out.append("\\")
                break
            c = fmt[i]
            if c in _SIMPLE_ESCAPES:
                out.append(_SIMPLE_ESCAPES[c])
                i += 1
                continue
            if c in _OCTAL_START:
                digits, i = _read_digits(fmt, i, 3, False)
                try:
                    code = min(int(digits, 8), 0xFF)
                except ValueError:
                    code = 0
                out.append(chr(code))
                continue
            if c in _HEX_WIDTHS:
                digits, end = _read_digits(fmt, i + 1, _HEX_WIDTHS[c], True)
                if digits:
                    code = int(digits, 16)
                    out.append(chr(code & 0xFF) if c == "x" else _rune(code))
                    i = end
                    continue
            out.append("\\" + c)
            i += 1
            continue
        if spec:
            if c == "%":
                out.append("%")
                spec = ""
            elif c == "c":
                char = "\x00"
                if remaining:
                    arg = remaining.pop(0)
                    if arg:
                        char = arg[0]
                out.append(char)
                spec = ""
            elif c in "+- ":
                if len(spec) > 1:
                    raise FormatError(f"invalid format char: {c}")
                spec += c
            elif c in _DECIMAL:
                spec += c
            elif c in "sdiuox":
                arg = remaining.pop(0) if remaining else ""
                if c == "s":
                    out.append(_format_string(spec, arg))
                else:
                    value = _parse_int(arg)
                    if c not in "di":
                        value %= _UINT64
                    conversion = "d" if c in "iu" else c
                    out.append((spec + conversion) % value)
                spec = ""
            else:
                raise FormatError(f"invalid format char: {c}")
        elif remaining is not None and c == "%":
            spec = "%"
        else:
            out.append(c)
        i += 1
    if spec:
        raise FormatError("missing format char")
    used = 0 if remaining is None else len(args) - len(remaining)
    return "".join(out), used


def read_fields(cfg: Config | None, text: str, n: int = -1, raw: bool = False) -> list[str]:
    """Split ``text`` into fields as the ``read`` builtin does.

    At most ``n`` fields are returned, the last one holding the rest of the
    input; ``n == -1`` means no limit and ``n == 1`` keeps the whole input,
    separators included. Unless ``raw`` is true, backslashes escape the
    following character and are removed.
    """
    if cfg is None:
        cfg = Config()
    if n == 0 or n < -1:
        raise ValueError("n must be positive or -1")
    positions: list[list[int]] = []
    chars: list[str] = []
    in_field = False
    escaped = False
    for ch in text:
        if in_field:
            if cfg.is_ifs(ch) and (raw or not escaped):
                positions[-1][1] = len(chars)
                in_field = False
        elif not cfg.is_ifs(ch) and (raw or not escaped):
            positions.append([len(chars), -1])
            in_field = True
        if ch == "\\":
            if raw or escaped:
                chars.append(ch)
            escaped = not escaped
            continue
        chars.append(ch)
        escaped = False
    if not positions:
        return []
    if in_field:
        positions[-1][1] = len(chars)
    if n == 1:
        positions = [[0, len(chars)]]
    elif n != -1 and n < len(positions):
        positions[n - 1][1] = positions[-1][1]
        positions = positions[:n]
    return ["".join(chars[start:end]) for start, end in positions]