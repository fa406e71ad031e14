"""
Renders a messages tree into one of the output templates and writes it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import rjsmin

from localekit.core.errors import InvalidInput, WriteFailure
from localekit.infra.paths import (
    LANGJS_FILE,
    TEMPLATE_LANGJS_WITH_MESSAGES,
    TEMPLATE_MESSAGES,
    TEMPLATE_MESSAGES_JSON,
    TEMPLATE_WINDOW_OBJECT,
)
from localekit.libs.filesystem import locale_filename
from localekit.schemas import MessageTree, OutputOptions, TemplateMode

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)

MESSAGES_PLACEHOLDER = "'{ messages }'"
LANGJS_PLACEHOLDER = "'{ langjs }';"

_TEMPLATES: dict[TemplateMode, Traversable] = {
    TemplateMode.DATA: TEMPLATE_MESSAGES,
    TemplateMode.JSON: TEMPLATE_MESSAGES_JSON,
    TemplateMode.WINDOW: TEMPLATE_WINDOW_OBJECT,
    TemplateMode.LIBRARY: TEMPLATE_LANGJS_WITH_MESSAGES,
}


class MessageEmitter:
    """Writes messages to disk as a script or a JSON document."""

    def emit(
        self,
        target: str | Path,
        messages: MessageTree,
        options: OutputOptions,
    ) -> list[Path]:
        """Write *messages* to *target* according to *options*.

        With ``group_locales`` set, one file is written per locale, named
        after *target* with ``-<locale>`` before the extension. Files are
        written one after another; a failure stops the remaining locales but
        leaves files already written in place.

        Args:
            target: Output file path.
            messages: The collected messages tree.
            options: Output options for the run.

        Returns:
            The paths of all files written.

        Raises:
            WriteFailure: If a directory or file cannot be written.
            InvalidInput: If the messages cannot be encoded as JSON.
        """
        target = Path(target)
        if not options.group_locales:
            return [self._write_messages(target, messages, options)]

        written: list[Path] = []
        for locale, group in group_by_locale(messages).items():
            locale_target = locale_filename(target, locale)
            written.append(self._write_messages(locale_target, group, options))
        return written

    def render(self, messages: MessageTree, options: OutputOptions) -> str:
        """Render *messages* into the template selected by *options*."""
        mode = options.template_mode
        template = _TEMPLATES[mode].read_text(encoding="utf-8")

        if mode is TemplateMode.LIBRARY:
            langjs = LANGJS_FILE.read_text(encoding="utf-8")
            template = template.replace(LANGJS_PLACEHOLDER, langjs, 1)

        template = template.replace(MESSAGES_PLACEHOLDER, encode_messages(messages), 1)

        if options.compress:
            template = rjsmin.jsmin(template)

        return template

    def _write_messages(
        self,
        target: Path,
        messages: MessageTree,
        options: OutputOptions,
    ) -> Path:
        content = self.render(messages, options)

        prepare_target(target)
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            raise WriteFailure(f"Unable to write {target}: {e}") from e

        logger.info("Messages written: %s", target)
        return target


def encode_messages(messages: MessageTree) -> str:
    """Serialize messages as compact, ASCII-only JSON on a single line.

    Raises:
        InvalidInput: If the tree holds a value JSON cannot represent
            (``NaN`` or an infinite float).
    """
    try:
        return json.dumps(messages, separators=(",", ":"), allow_nan=False)
    except ValueError as e:
        raise InvalidInput(f"Messages cannot be encoded as JSON: {e}") from e


def group_by_locale(messages: MessageTree) -> dict[str, MessageTree]:
    """Split messages by the locale segment (text before the first ``.``).

    Keys are kept intact, so ``en.auth`` stays ``en.auth`` in the ``en``
    group. Groups appear in the order their first key is seen.
    """
    groups: dict[str, MessageTree] = {}
    for key, value in messages.items():
        locale = key.split(".", 1)[0]
        groups.setdefault(locale, {})[key] = value
    return groups


def prepare_target(target: Path) -> None:
    """Create the parent directory of *target* if it does not exist."""
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteFailure(f"Unable to create directory {target.parent}: {e}") from e
