"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class TemplateMode(str, Enum):
    """Render strategy used when emitting messages."""

    DATA = "data"
    JSON = "json"
    WINDOW = "window"
    LIBRARY = "library"


@dataclass(frozen=True, slots=True)
class OutputOptions:
    """Options controlling a single generate run.

    Attributes:
        source: Optional override for the lang source directory.
        no_sort: Skip the recursive key sort.
        group_locales: Write one file per top-level locale.
        no_lib: Emit the messages only, without the runtime library.
        json: Emit a bare JSON document instead of a script.
        window_object: Assign the messages onto the global ``window`` object.
        compress: Minify the rendered output.
    """

    source: str | Path | None = None
    no_sort: bool = False
    group_locales: bool = False
    no_lib: bool = False
    json: bool = False
    window_object: bool = False
    compress: bool = False

    @property
    def template_mode(self) -> TemplateMode:
        """Resolve the active template.

        The flags are checked in a fixed order and the first one set wins:
        ``no_lib``, ``json``, ``window_object``, then the library bundle.
        """
        if self.no_lib:
            return TemplateMode.DATA
        if self.json:
            return TemplateMode.JSON
        if self.window_object:
            return TemplateMode.WINDOW
        return TemplateMode.LIBRARY


@dataclass
class GeneratorConfig:
    """Fully resolved settings for one generator invocation.

    Attributes:
        source_path: Directory holding the locale message files.
        target_path: File the messages are written to.
        messages: Optional allow-list of message files (``"validation"``).
        options: Output options for the run.
    """

    source_path: Path
    target_path: Path
    messages: list[str] = field(default_factory=list)
    options: OutputOptions = field(default_factory=OutputOptions)
