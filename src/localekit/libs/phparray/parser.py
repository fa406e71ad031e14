"""
Recursive descent evaluator for PHP files that ``return`` literal arrays.

Only data is understood: arrays, strings, numbers, booleans, ``null`` and
string concatenation. Nothing in the file is ever executed.
"""

from __future__ import annotations

import math
import re
from typing import Any

from .errors import PhpEvaluationError
from .tokenizer import (
    CLOSE_TAG,
    EOF,
    FLOAT,
    INT,
    NAME,
    OPEN_TAG,
    PUNCT,
    STRING,
    Token,
    position,
    tokenize,
)

_INT_KEY_RE = re.compile(r"^(?:0|-?[1-9][0-9]*)$")
_PHP_INT_MAX = 2**63 - 1
_PHP_INT_MIN = -(2**63)

_PREAMBLE = frozenset({"declare", "namespace", "use"})


class PhpArray:
    """Ordered PHP array with PHP key coercion rules."""

    __slots__ = ("_items", "_next_index")

    def __init__(self) -> None:
        self._items: dict[int | str, Any] = {}
        self._next_index = 0

    def append(self, value: Any) -> None:
        self._items[self._next_index] = value
        self._next_index += 1

    def set(self, key: int | str, value: Any) -> None:
        self._items[key] = value
        if isinstance(key, int) and key >= self._next_index:
            self._next_index = key + 1

    def to_python(self) -> list[Any] | dict[str, Any]:
        """Convert to a list when keys are exactly ``0..n-1``, else a dict."""
        keys = list(self._items)
        if keys == list(range(len(keys))):
            return list(self._items.values())
        return {str(k): v for k, v in self._items.items()}


class Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._tokens = list(tokenize(text))
        self._index = 0

    # ------------------------------------------------------------------
    # Token helpers
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind != EOF:
            self._index += 1
        return token

    def _error(self, token: Token, message: str) -> PhpEvaluationError:
        line, column = position(self._text, token.pos)
        return PhpEvaluationError(message, line=line, column=column)

    def _is_punct(self, value: str) -> bool:
        token = self._peek()
        return token.kind == PUNCT and token.value == value

    def _is_name(self, value: str) -> bool:
        token = self._peek()
        return token.kind == NAME and str(token.value).lower() == value

    def _expect_punct(self, value: str) -> Token:
        token = self._advance()
        if token.kind != PUNCT or token.value != value:
            raise self._error(token, f"expected {value!r}, got {_describe(token)}")
        return token

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def parse_file(self) -> Any:
        """Evaluate the file and return the value of its ``return`` statement."""
        token = self._advance()
        if token.kind != OPEN_TAG:
            raise self._error(token, "missing '<?php' open tag")

        while True:
            token = self._peek()
            if token.kind in (EOF, CLOSE_TAG):
                raise self._error(token, "file does not return a value")
            if token.kind != NAME:
                raise self._error(token, f"unexpected {_describe(token)}")

            keyword = str(token.value).lower()
            if keyword == "return":
                self._advance()
                value = self._expression()
                self._expect_punct(";")
                return _finalize(value)
            if keyword == "declare":
                self._advance()
                self._declare()
            elif keyword in _PREAMBLE:
                self._advance()
                self._skip_statement()
            else:
                raise self._error(token, f"unsupported statement {token.value!r}")

    def _declare(self) -> None:
        self._expect_punct("(")
        while True:
            token = self._advance()
            if token.kind != NAME:
                raise self._error(token, f"expected directive, got {_describe(token)}")
            self._expect_punct("=")
            self._unary()
            if self._is_punct(","):
                self._advance()
                continue
            break
        self._expect_punct(")")
        self._expect_punct(";")

    def _skip_statement(self) -> None:
        while not self._is_punct(";"):
            token = self._advance()
            if token.kind == NAME or (token.kind == PUNCT and token.value == ","):
                continue
            raise self._error(token, f"unexpected {_describe(token)}")
        self._advance()

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _expression(self) -> Any:
        start = self._peek()
        value = self._unary()
        if not self._is_punct("."):
            return value

        parts = [_to_string(value, self._error(start, "array to string conversion"))]
        while self._is_punct("."):
            self._advance()
            operand_token = self._peek()
            operand = self._unary()
            err = self._error(operand_token, "array to string conversion")
            parts.append(_to_string(operand, err))
        return "".join(parts)

    def _unary(self) -> Any:
        token = self._peek()
        if token.kind == PUNCT and token.value in ("-", "+"):
            self._advance()
            operand = self._unary()
            if isinstance(operand, bool) or not isinstance(operand, (int, float)):
                raise self._error(token, f"unary {token.value!r} needs a number")
            return -operand if token.value == "-" else operand
        return self._primary()

    def _primary(self) -> Any:
        token = self._advance()

        if token.kind in (STRING, INT, FLOAT):
            return token.value

        if token.kind == PUNCT:
            if token.value == "[":
                return self._array_items("]")
            if token.value == "(":
                value = self._expression()
                self._expect_punct(")")
                return value

        if token.kind == NAME:
            name = str(token.value).lower()
            if name == "true":
                return True
            if name == "false":
                return False
            if name == "null":
                return None
            if name == "array" and self._is_punct("("):
                self._advance()
                return self._array_items(")")
            if self._is_punct("("):
                raise self._error(token, f"function call {token.value!r} is not supported")
            raise self._error(token, f"constant {token.value!r} is not supported")

        raise self._error(token, f"unexpected {_describe(token)}")

    def _array_items(self, closer: str) -> PhpArray:
        array = PhpArray()
        while not self._is_punct(closer):
            key_token = self._peek()
            value = self._expression()
            if self._is_punct("=>"):
                self._advance()
                array.set(self._coerce_key(value, key_token), self._expression())
            else:
                array.append(value)

            if self._is_punct(","):
                self._advance()
            elif not self._is_punct(closer):
                token = self._peek()
                raise self._error(token, f"expected ',' or {closer!r}, got {_describe(token)}")
        self._advance()
        return array

    def _coerce_key(self, key: Any, token: Token) -> int | str:
        if isinstance(key, bool):
            return int(key)
        if isinstance(key, int):
            return key
        if isinstance(key, float):
            if not math.isfinite(key):
                raise self._error(token, f"non-finite float key {key!r}")
            return int(key)
        if key is None:
            return ""
        if isinstance(key, str):
            if _INT_KEY_RE.match(key) and _PHP_INT_MIN <= int(key) <= _PHP_INT_MAX:
                return int(key)
            return key
        raise self._error(token, "illegal offset type")


def _to_string(value: Any, error: PhpEvaluationError) -> str:
    if isinstance(value, str):
        return value
    if value is True:
        return "1"
    if value is False or value is None:
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e15:
            return str(int(value))
        return repr(value)
    raise error


def _finalize(value: Any) -> Any:
    """Recursively convert :class:`PhpArray` nodes into lists and dicts."""
    if isinstance(value, PhpArray):
        converted = value.to_python()
        if isinstance(converted, list):
            return [_finalize(v) for v in converted]
        return {k: _finalize(v) for k, v in converted.items()}
    return value


def _describe(token: Token) -> str:
    if token.kind == EOF:
        return "end of file"
    if token.kind == CLOSE_TAG:
        return "'?>'"
    if token.kind == STRING:
        return "string literal"
    if token.kind in (INT, FLOAT):
        return f"number {token.value!r}"
    return repr(token.value)
