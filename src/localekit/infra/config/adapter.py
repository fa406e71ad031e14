from __future__ import annotations

from pathlib import Path
from typing import Any

from localekit.schemas import GeneratorConfig, OutputOptions

DEFAULT_SOURCE = "lang"
DEFAULT_TARGET = "public/js/messages.js"

_OUTPUT_FLAGS = (
    "no_sort",
    "group_locales",
    "no_lib",
    "json",
    "window_object",
    "compress",
)


class ConfigAdapter:
    """Typed accessor over a loaded settings mapping.

    Settings live in a ``general`` block; output flags in ``general.output``
    and logging in ``general.debug``. Missing or malformed blocks fall back
    to built-in defaults.

    Args:
        config (dict[str, Any]): Settings mapping as returned by
            :func:`localekit.infra.config.load_config`.
    """

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self._config: dict[str, Any] = dict(config or {})

    def get_config(self) -> dict[str, Any]:
        """Return the full raw settings mapping."""
        return self._config

    def get_source_path(self) -> Path:
        """Return the lang directory.

        Returns:
            Path: Configured ``source`` or ``./lang``.
        """
        source = self._gen_cfg().get("source") or DEFAULT_SOURCE
        return Path(source).expanduser()

    def get_target_path(self) -> Path:
        """Return the default output file.

        Returns:
            Path: Configured ``target`` or ``./public/js/messages.js``.
        """
        target = self._gen_cfg().get("target") or DEFAULT_TARGET
        return Path(target).expanduser()

    def get_messages(self) -> list[str]:
        """Return the allow-list of message files.

        Returns:
            list[str]: Message names; empty means everything is exported.

        Raises:
            ValueError: If ``messages`` is not a string or a list of strings.
        """
        raw = self._gen_cfg().get("messages") or []
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, list) or not all(isinstance(m, str) for m in raw):
            raise ValueError("messages must be a list of strings")
        return [m.strip() for m in raw if m.strip()]

    def get_output_options(self, **overrides: Any) -> OutputOptions:
        """Build OutputOptions from ``general.output`` and explicit overrides.

        A flag is enabled when it is set either in the settings or in
        *overrides*; ``source`` from *overrides* replaces the configured one
        when given.

        Args:
            **overrides: Values coming from the command line.

        Returns:
            OutputOptions: Resolved output options.
        """
        out = self._output_cfg()
        flags = {
            name: bool(out.get(name, False)) or bool(overrides.get(name, False))
            for name in _OUTPUT_FLAGS
        }
        return OutputOptions(source=overrides.get("source") or None, **flags)

    def get_generator_config(
        self,
        target: str | Path | None = None,
        **overrides: Any,
    ) -> GeneratorConfig:
        """Assemble the complete settings for one generator run.

        Args:
            target: Output path overriding the configured ``target``.
            **overrides: Output option overrides, see :meth:`get_output_options`.

        Returns:
            GeneratorConfig: Resolved generator configuration.
        """
        return GeneratorConfig(
            source_path=self.get_source_path(),
            target_path=Path(target) if target else self.get_target_path(),
            messages=self.get_messages(),
            options=self.get_output_options(**overrides),
        )

    def get_log_level(self) -> str:
        """Return the configured logging level.

        Returns:
            str: Logging level or ``"INFO"`` if missing.
        """
        debug_cfg = self._gen_cfg().get("debug") or {}
        if not isinstance(debug_cfg, dict):
            return "INFO"
        return str(debug_cfg.get("log_level") or "INFO").upper()

    def _gen_cfg(self) -> dict[str, Any]:
        general = self._config.get("general")
        return general if isinstance(general, dict) else {}

    def _output_cfg(self) -> dict[str, Any]:
        output = self._gen_cfg().get("output")
        return output if isinstance(output, dict) else {}
