from pathlib import Path


def locale_filename(target: str | Path, locale: str) -> Path:
    """Derive the per-locale output path for grouped output.

    ``-<locale>`` is inserted before the file extension. A target without an
    extension gets the suffix appended instead.

    Examples:
        >>> locale_filename("public/js/messages.js", "en").as_posix()
        'public/js/messages-en.js'
        >>> locale_filename("dist/messages", "fr").as_posix()
        'dist/messages-fr'

    Args:
        target: The base output path.
        locale: Locale segment taken from the message keys.

    Returns:
        The path the locale's messages should be written to.
    """
    path = Path(target)
    return path.with_name(f"{path.stem}-{locale}{path.suffix}")
