from __future__ import annotations

import logging
from pathlib import Path

from localekit.core.collector import MessageCollector
from localekit.core.emitter import MessageEmitter
from localekit.schemas import GeneratorConfig, OutputOptions

logger = logging.getLogger(__name__)


class MessageGenerator:
    """Generate a client-side messages bundle from a lang directory.

    Args:
        source_path: The lang directory to read message files from.
        messages: Optional allow-list of message files to include.
        collector: Collector used to read the lang directory.
        emitter: Emitter used to write the bundle.
    """

    def __init__(
        self,
        source_path: str | Path,
        messages: list[str] | None = None,
        *,
        collector: MessageCollector | None = None,
        emitter: MessageEmitter | None = None,
    ) -> None:
        self._source_path = Path(source_path)
        self._messages = list(messages or [])
        self._collector = collector or MessageCollector()
        self._emitter = emitter or MessageEmitter()

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> MessageGenerator:
        return cls(config.source_path, config.messages)

    @property
    def source_path(self) -> Path:
        return self._source_path

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    def generate(self, target: str | Path, options: OutputOptions) -> list[Path]:
        """Collect all messages and write them to *target*.

        ``options.source`` overrides the lang directory for this call only.

        Returns:
            The paths of all files written.

        Raises:
            LocalizationError: If collecting or writing fails. Nothing is
                written when collecting fails.
        """
        source = Path(options.source) if options.source else self._source_path
        logger.debug("Collecting messages from %s", source)

        messages = self._collector.collect(source, self._messages, options.no_sort)
        return self._emitter.emit(target, messages, options)
