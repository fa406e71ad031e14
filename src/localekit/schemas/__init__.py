"""
Data contracts and type definitions.
"""

__all__ = [
    "GeneratorConfig",
    "MessageTree",
    "OutputOptions",
    "TemplateMode",
]

from .messages import MessageTree
from .options import GeneratorConfig, OutputOptions, TemplateMode
