"""Creation of the ``src/`` skeleton inside a new project."""

from __future__ import annotations

from pathlib import Path

from expressgen.progress import ProgressCallback
from expressgen.utils import make_dir

# Created in this order, one progress tick each.
DIRECTORY_LAYOUT: tuple[str, ...] = (
    "src",
    "src/configs",
    "src/models",
    "src/routes",
    "src/controllers",
    "src/services",
    "src/middlewares",
    "src/utils",
)


async def build_directories(
    project_root: str | Path, progress_callback: ProgressCallback
) -> list[Path]:
    """Create the source root and its functional subdirectories.

    Directories are created one after another.  The first ``OSError`` stops
    the build and propagates; directories made before it are left in place.

    Returns:
        The created directory paths, in creation order.
    """
    root = Path(project_root)
    created: list[Path] = []
    for relative in DIRECTORY_LAYOUT:
        created.append(await make_dir(root / relative))
        progress_callback()
    return created
