"""
Safe evaluation of PHP files that return literal arrays.

Laravel-style locale files are PHP scripts of the form::

    <?php

    return [
        'failed' => 'These credentials do not match our records.',
    ];

Instead of executing them, this package parses the literal subset and
converts PHP arrays into Python lists and dicts.
"""

__all__ = [
    "PhpEvaluationError",
    "load",
    "loads",
]

from pathlib import Path
from typing import Any

from .errors import PhpEvaluationError
from .parser import Parser


def loads(text: str) -> Any:
    """Evaluate PHP source text and return its ``return`` value.

    Raises:
        PhpEvaluationError: If the source uses anything beyond literal data.
    """
    return Parser(text).parse_file()


def load(path: str | Path) -> Any:
    """Read a PHP file as UTF-8 and evaluate it with :func:`loads`."""
    return loads(Path(path).read_text(encoding="utf-8"))
