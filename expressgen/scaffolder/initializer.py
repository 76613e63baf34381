"""Project root creation and ``npm init``."""

from __future__ import annotations

from pathlib import Path

from expressgen.progress import ProgressCallback
from expressgen.utils import make_dir, run_command


class InitializerError(Exception):
    """Raised when the package manifest could not be created."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


async def initialize(
    project_root: str | Path,
    progress_callback: ProgressCallback,
    *,
    npm_command: str = "npm",
    timeout: int = 120,
) -> None:
    """Create *project_root* and run ``npm init -y`` inside it.

    Two units of work, one progress tick after each.

    Raises:
        OSError: If the project directory cannot be created.
        InitializerError: If npm cannot be started, times out or exits
            with a non-zero status.
    """
    root = await make_dir(project_root)
    progress_callback()

    cmd = [npm_command, "init", "-y"]
    try:
        returncode, _stdout, stderr = await run_command(cmd, cwd=root, timeout=timeout)
    except OSError as exc:
        raise InitializerError(f"Could not run '{' '.join(cmd)}': {exc}") from exc

    if returncode != 0:
        raise InitializerError(
            f"'{' '.join(cmd)}' failed with exit code {returncode}: {stderr}",
            returncode=returncode,
            stderr=stderr,
        )
    progress_callback()
