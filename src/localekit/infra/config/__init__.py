"""
Loading and adapting localekit settings files.
"""

__all__ = [
    "copy_default_config",
    "default_config",
    "find_settings_file",
    "load_config",
    "read_settings",
    "save_config",
    "save_config_file",
    "ConfigAdapter",
]

from .adapter import ConfigAdapter
from .file_io import (
    copy_default_config,
    default_config,
    find_settings_file,
    load_config,
    read_settings,
    save_config,
    save_config_file,
)
