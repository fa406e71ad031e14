"""
Message collection, rendering and bundle generation.
"""

__all__ = [
    "ExecutionFailure",
    "InvalidInput",
    "LocalizationError",
    "MessageCollector",
    "MessageEmitter",
    "MessageGenerator",
    "SourceNotFound",
    "WriteFailure",
    "message_key",
    "sort_messages",
]

from .collector import MessageCollector, sort_messages
from .emitter import MessageEmitter
from .errors import (
    ExecutionFailure,
    InvalidInput,
    LocalizationError,
    SourceNotFound,
    WriteFailure,
)
from .generator import MessageGenerator
from .keys import message_key
