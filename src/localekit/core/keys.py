"""
Derivation of message keys from paths inside the lang directory.

A lang directory is laid out as::

    lang/
        en/auth.php                 -> en.auth
        en/admin/users.php          -> en.admin.users
        en.json                     -> en.strings
        vendor/acme/en/messages.php -> en.acme::messages

JSON files hold flat "translation strings" and are stored under the
``strings`` domain of their key.
"""

from __future__ import annotations

from pathlib import PurePath

PHP_EXTENSION = "php"
JSON_EXTENSION = "json"
MESSAGE_EXTENSIONS = frozenset({PHP_EXTENSION, JSON_EXTENSION})

STRINGS_DOMAIN = "strings"
VENDOR_SEGMENT = "vendor"

# Length of ".php"; ".json" files keep a trailing dot after the strip.
_EXTENSION_LENGTH = 4


def file_extension(relative_path: str | PurePath) -> str:
    """Return the extension of a path without the leading dot."""
    return PurePath(relative_path).suffix[1:]


def _to_posix(relative_path: str | PurePath) -> str:
    return str(relative_path).replace("\\", "/")


def message_key(relative_path: str | PurePath) -> str:
    """Derive the dotted message key for a file in the lang directory.

    Args:
        relative_path: Path of the file relative to the lang directory.

    Returns:
        The key the file's messages are stored under.
    """
    path = _to_posix(relative_path)
    key = path[:-_EXTENSION_LENGTH].replace("/", ".")

    if key.split(".", 1)[0] == VENDOR_SEGMENT:
        key = vendor_key(key)

    if file_extension(path) == JSON_EXTENSION:
        key += STRINGS_DOMAIN

    return key


def vendor_key(key: str) -> str:
    """Reorder a ``vendor.<package>.<locale>.<rest>`` key.

    The result is ``<locale>.<package>::<rest>``, the namespaced form used by
    package translations (``trans('package::file.key')``).

    >>> vendor_key("vendor.acme.en.messages")
    'en.acme::messages'
    """
    parts = key.split(".", 3)
    parts += [""] * (4 - len(parts))
    _, package, locale, rest = parts
    return f"{locale}.{package}::{rest}"


def included_name(relative_path: str | PurePath) -> str:
    """Normalize a path for comparison against the inclusion list.

    The locale directory and the extension are removed, so
    ``en/admin/users.php`` becomes ``admin/users``.
    """
    path = _to_posix(relative_path)
    separator = path.find("/")
    if separator != -1:
        path = path[separator:]
    return path.lstrip("/")[:-_EXTENSION_LENGTH]


def is_excluded(relative_path: str | PurePath, included: list[str] | None) -> bool:
    """Return True if *relative_path* is filtered out by *included*.

    An empty or missing inclusion list keeps every file.
    """
    if not included:
        return False
    return included_name(relative_path) not in included
