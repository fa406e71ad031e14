from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

from localekit.infra.paths import DEFAULT_CONFIG_FILE, SETTING_PATH

logger = logging.getLogger(__name__)

LOCAL_SETTING_FILES = ("localekit.toml", "localekit.json")


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _read_toml(path: Path) -> Any:
    with path.open("rb") as f:
        return tomllib.load(f)


_READERS: dict[str, tuple[str, Callable[[Path], Any]]] = {
    ".json": ("JSON", _read_json),
    ".toml": ("TOML", _read_toml),
}


def find_settings_file(config_path: str | Path | None = None) -> Path | None:
    """
    Locate the settings file to use.

    An explicit *config_path* is authoritative: when it is given but missing,
    no other location is tried. Otherwise ``localekit.toml`` and
    ``localekit.json`` in the working directory are checked, then the user
    settings file under the platform config directory.

    Returns:
        The resolved settings path, or None if nothing was found.
    """
    if config_path:
        path = Path(config_path).expanduser().resolve()
        if path.is_file():
            return path
        logger.warning("Specified settings file not found: %s", path)
        return None

    for name in LOCAL_SETTING_FILES:
        local_path = (Path.cwd() / name).resolve()
        if local_path.is_file():
            logger.debug("Using local settings file: %s", local_path)
            return local_path

    if SETTING_PATH.is_file():
        return SETTING_PATH.resolve()

    return None


def read_settings(path: Path) -> dict[str, Any]:
    """
    Parse a ``.toml`` or ``.json`` settings file.

    Raises:
        ValueError: On an unsupported extension, a syntax error, or a root
            value that is not a table.
    """
    ext = path.suffix.lower()
    if ext not in _READERS:
        raise ValueError(f"Unsupported config file extension: {ext}")

    fmt, reader = _READERS[ext]
    try:
        data = reader(path)
    except (OSError, ValueError) as e:
        raise ValueError(f"Invalid {fmt} in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a dict, got {type(data)} in {path}")
    return data


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Find and parse the settings file.

    Raises:
        FileNotFoundError: If no settings file is found.
        ValueError: If the file cannot be parsed.
    """
    path = find_settings_file(config_path)
    if path is None:
        raise FileNotFoundError("No valid config file found.")

    logger.debug("Loading configuration from: %s", path)
    return read_settings(path)


def copy_default_config(target: Path) -> None:
    """Write the bundled sample settings to *target*."""
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(DEFAULT_CONFIG_FILE.read_bytes())


def default_config() -> dict[str, Any]:
    """Return the bundled sample settings as a mapping."""
    return tomllib.loads(DEFAULT_CONFIG_FILE.read_text(encoding="utf-8"))


def save_config(
    config: dict[str, Any],
    output_path: str | Path = SETTING_PATH,
) -> Path:
    """
    Write *config* as JSON, by default to the user settings file.

    Returns:
        The resolved path that was written.

    Raises:
        OSError: If the file cannot be written.
    """
    output = Path(output_path).expanduser().resolve()
    output.parent.mkdir(parents=True, exist_ok=True)

    try:
        with output.open("w", encoding="utf-8") as f:
            json.dump(config, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error("Failed to write config JSON '%s': %s", output, e)
        raise

    logger.info("Configuration saved to JSON: %s", output)
    return output


def save_config_file(
    source_path: str | Path,
    output_path: str | Path = SETTING_PATH,
) -> Path:
    """
    Convert a TOML or JSON settings file into the JSON user settings file.

    Raises:
        FileNotFoundError: If *source_path* does not exist.
        ValueError: If *source_path* cannot be parsed.
        OSError: If the output cannot be written.
    """
    source = Path(source_path).expanduser().resolve()
    if not source.is_file():
        raise FileNotFoundError(f"Source file not found: {source}")

    return save_config(read_settings(source), output_path)
