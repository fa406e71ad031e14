"""
Collects every message file of a lang directory into one nested mapping.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from localekit.core.errors import ExecutionFailure, InvalidInput, SourceNotFound
from localekit.core.keys import (
    JSON_EXTENSION,
    MESSAGE_EXTENSIONS,
    file_extension,
    is_excluded,
    message_key,
)
from localekit.libs import phparray
from localekit.libs.filesystem import iter_files
from localekit.schemas import MessageTree

logger = logging.getLogger(__name__)


class MessageCollector:
    """Walks a lang directory and builds the messages tree.

    Each PHP or JSON file contributes one top-level entry, keyed by the
    dotted key derived from its path (see :mod:`localekit.core.keys`).
    """

    def collect(
        self,
        source_path: str | Path,
        included: list[str] | None = None,
        skip_sort: bool = False,
    ) -> MessageTree:
        """Return all messages found below *source_path*.

        Args:
            source_path: The lang directory.
            included: Optional allow-list of message names (``"validation"``,
                ``"admin/users"``). Empty means every file is kept.
            skip_sort: Keep discovery order instead of sorting keys.

        Returns:
            The messages tree, keyed by message key.

        Raises:
            SourceNotFound: If *source_path* is not an existing directory.
            InvalidInput: If a JSON file cannot be decoded.
            ExecutionFailure: If a PHP file cannot be evaluated.
        """
        root = Path(source_path)
        if not root.is_dir():
            raise SourceNotFound(f"{root} doesn't exist!")

        messages: MessageTree = {}
        for relative in iter_files(root):
            extension = file_extension(relative)
            if extension not in MESSAGE_EXTENSIONS:
                logger.debug("Skipping non-message file: %s", relative)
                continue

            if is_excluded(relative, included):
                logger.debug("Skipping excluded message file: %s", relative)
                continue

            key = message_key(relative)
            full_path = root / relative
            if extension == JSON_EXTENSION:
                value = self._load_json(full_path)
            else:
                value = self._load_php(full_path)

            if key in messages:
                logger.warning(
                    "Message key %r from %s overrides an earlier file", key, relative
                )
            messages[key] = value
            logger.debug("Loaded %s as %r", relative, key)

        if not skip_sort:
            sort_messages(messages)

        return messages

    @staticmethod
    def _load_json(path: Path) -> Any:
        try:
            return json.loads(
                path.read_text(encoding="utf-8"), parse_constant=_reject_constant
            )
        except (OSError, ValueError) as e:
            raise InvalidInput(f"Error while decode {path.name}: {e}") from e

    @staticmethod
    def _load_php(path: Path) -> Any:
        try:
            return phparray.load(path)
        except (OSError, ValueError, phparray.PhpEvaluationError) as e:
            raise ExecutionFailure(f"Error while evaluate {path.name}: {e}") from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def sort_messages(messages: Any) -> None:
    """Recursively sort every mapping in *messages* by key, in place.

    Lists keep their element order; mappings nested inside them are sorted.
    """
    if isinstance(messages, dict):
        items = sorted(messages.items(), key=lambda item: item[0])
        messages.clear()
        messages.update(items)
        for value in messages.values():
            sort_messages(value)
    elif isinstance(messages, list):
        for value in messages:
            sort_messages(value)
