"""
Filesystem utilities, including per-locale target naming and tree walking.
"""

__all__ = [
    "iter_files",
    "locale_filename",
]

from .filename import locale_filename
from .walk import iter_files
