class LocalizationError(Exception):
    """Generic failure while generating the messages bundle."""


class SourceNotFound(LocalizationError, FileNotFoundError):
    """The configured lang source directory does not exist."""


class InvalidInput(LocalizationError, ValueError):
    """A JSON message file could not be decoded."""


class ExecutionFailure(LocalizationError, RuntimeError):
    """A PHP message file could not be evaluated."""


class WriteFailure(LocalizationError, OSError):
    """The target directory or file could not be written."""
