"""
Tokenizer for the literal subset of PHP used by locale message files.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import PhpEvaluationError

# Token kinds
OPEN_TAG = "OPEN_TAG"
CLOSE_TAG = "CLOSE_TAG"
STRING = "STRING"
INT = "INT"
FLOAT = "FLOAT"
NAME = "NAME"
PUNCT = "PUNCT"
EOF = "EOF"

_OPEN_TAG_RE = re.compile(r"\A(?:\ufeff)?\s*<\?php\b", re.IGNORECASE)

_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+)
  | (?P<line_comment>(?://|\#)[^\n]*?(?=\?>|\n|\Z))
  | (?P<block_comment>/\*.*?\*/)
  | (?P<close>\?>)
  | (?P<sq>'(?:[^'\\]|\\.)*')
  | (?P<dq>"(?:[^"\\]|\\.)*")
  | (?P<float>
        \d[\d_]*\.\d[\d_]*(?:[eE][+-]?\d+)?
      | \.\d[\d_]*(?:[eE][+-]?\d+)?
      | \d[\d_]*[eE][+-]?\d+
    )
  | (?P<int>0[xX][0-9a-fA-F_]+|0[bB][01_]+|0[oO][0-7_]+|0[0-7_]+|\d[\d_]*)
  | (?P<var>\$[A-Za-z_\x80-\uffff]?)
  | (?P<name>\\?[A-Za-z_\x80-\uffff][A-Za-z0-9_\x80-\uffff]*
             (?:\\[A-Za-z_\x80-\uffff][A-Za-z0-9_\x80-\uffff]*)*)
  | (?P<punct>=>|::|[\[\](),;.\-+=])
    """,
    re.VERBOSE | re.DOTALL,
)

_SQ_ESCAPE_RE = re.compile(r"\\([\\'])")
_DQ_ESCAPE_RE = re.compile(
    r"""\\(?:
        (?P<simple>[ntrvef\\$"])
      | (?P<oct>[0-7]{1,3})
      | x(?P<hex>[0-9A-Fa-f]{1,2})
      | u\{(?P<uni>[0-9A-Fa-f]+)\}
    )""",
    re.VERBOSE,
)
_DQ_SIMPLE = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "v": "\v",
    "e": "\x1b",
    "f": "\f",
    "\\": "\\",
    "$": "$",
    '"': '"',
}
_INTERPOLATION_RE = re.compile(r"(?<!\\)(?:\\\\)*\$[A-Za-z_{\x80-\uffff]")


@dataclass(frozen=True, slots=True)
class Token:
    kind: str
    value: object
    pos: int


def position(text: str, pos: int) -> tuple[int, int]:
    """Return the 1-based ``(line, column)`` of an offset in *text*."""
    line = text.count("\n", 0, pos) + 1
    column = pos - (text.rfind("\n", 0, pos) + 1) + 1
    return line, column


def _error(text: str, pos: int, message: str) -> PhpEvaluationError:
    line, column = position(text, pos)
    return PhpEvaluationError(message, line=line, column=column)


def _decode_single(raw: str) -> str:
    return _SQ_ESCAPE_RE.sub(lambda m: m.group(1), raw)


def _decode_double(text: str, raw: str, pos: int) -> str:
    if _INTERPOLATION_RE.search(raw):
        raise _error(text, pos, "variable interpolation is not supported")

    # Octal and hex escapes are raw bytes, so the literal is rebuilt as bytes.
    buf = bytearray()
    last = 0
    for m in _DQ_ESCAPE_RE.finditer(raw):
        buf += raw[last : m.start()].encode("utf-8")
        last = m.end()
        if m.group("simple"):
            buf += _DQ_SIMPLE[m.group("simple")].encode("utf-8")
        elif m.group("oct"):
            buf.append(int(m.group("oct"), 8) & 0xFF)
        elif m.group("hex"):
            buf.append(int(m.group("hex"), 16))
        else:
            try:
                buf += chr(int(m.group("uni"), 16)).encode("utf-8")
            except ValueError:
                raise _error(text, pos, "invalid unicode escape sequence") from None
    buf += raw[last:].encode("utf-8")

    try:
        return buf.decode("utf-8")
    except UnicodeDecodeError:
        raise _error(text, pos, "string is not valid UTF-8") from None


def _parse_int(raw: str) -> int:
    digits = raw.replace("_", "")
    lowered = digits.lower()
    if lowered.startswith("0x"):
        return int(digits[2:], 16)
    if lowered.startswith("0b"):
        return int(digits[2:], 2)
    if lowered.startswith("0o"):
        return int(digits[2:], 8)
    if len(digits) > 1 and digits.startswith("0"):
        return int(digits[1:], 8)
    return int(digits)


def tokenize(text: str) -> Iterator[Token]:
    """Yield tokens for a PHP source file.

    The file must start with a ``<?php`` open tag (optionally preceded by a
    byte order mark or whitespace). Tokenizing stops at the first ``?>``.

    Raises:
        PhpEvaluationError: On any construct outside the supported subset.
    """
    match = _OPEN_TAG_RE.match(text)
    if match is None:
        raise _error(text, 0, "missing '<?php' open tag")
    yield Token(OPEN_TAG, None, match.start())

    pos = match.end()
    end = len(text)
    while pos < end:
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise _error(text, pos, f"unexpected character {text[pos]!r}")

        kind = m.lastgroup
        raw = m.group()
        if kind in ("ws", "line_comment", "block_comment"):
            pass
        elif kind == "close":
            yield Token(CLOSE_TAG, None, pos)
            return
        elif kind == "sq":
            yield Token(STRING, _decode_single(raw[1:-1]), pos)
        elif kind == "dq":
            yield Token(STRING, _decode_double(text, raw[1:-1], pos), pos)
        elif kind == "float":
            yield Token(FLOAT, float(raw.replace("_", "")), pos)
        elif kind == "int":
            try:
                value = _parse_int(raw)
            except ValueError:
                raise _error(text, pos, f"invalid numeric literal {raw!r}") from None
            yield Token(INT, value, pos)
        elif kind == "var":
            raise _error(text, pos, "variables are not supported")
        elif kind == "name":
            yield Token(NAME, raw, pos)
        else:
            yield Token(PUNCT, raw, pos)
        pos = m.end()

    yield Token(EOF, None, end)
