from typing import Any, TypeAlias

MessageTree: TypeAlias = dict[str, Any]
"""Nested mapping of translation keys to strings, lists or sub-trees."""
