from collections.abc import Iterator
from pathlib import Path


def iter_files(root: Path) -> Iterator[Path]:
    """Yield every non-hidden regular file below *root*, relative to it.

    Paths are yielded in sorted order so repeated walks over the same tree
    produce the same sequence. Any file whose relative path has a component
    starting with ``.`` is skipped.

    Args:
        root: Directory to walk.

    Yields:
        Paths relative to *root*.
    """
    for path in sorted(root.rglob("*"), key=lambda p: p.parts):
        if not path.is_file():
            continue
        relative = path.relative_to(root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        yield relative
