"""Rendering and writing of the generated project files."""

from __future__ import annotations

from pathlib import Path

from expressgen.progress import ProgressCallback
from expressgen.utils import console, write_file

from .models import AuthLibrary, Database, FileSpec, Language
from .templates import (
    render_db_connector,
    render_readme,
    render_server_entry,
    render_ts_config,
    render_user_model,
)


def plan_files(
    language: Language | str,
    auth_library: AuthLibrary | str,
    database: Database | str,
) -> list[FileSpec]:
    """Return the files to write for the given options, in write order.

    Paths are relative to the project root.  The db connector and user model
    keep the ``.js`` extension for both languages.
    """
    language = Language(language)
    database = Database(database)

    files = [
        FileSpec(
            Path("src") / f"server.{language.extension}",
            render_server_entry(language, auth_library),
        )
    ]
    if language is Language.TYPESCRIPT:
        files.append(FileSpec(Path("tsconfig.json"), render_ts_config()))
    if database is Database.MONGODB:
        files.append(FileSpec(Path("src/configs/db.js"), render_db_connector(language)))
        files.append(FileSpec(Path("src/models/userModel.js"), render_user_model(language)))
    files.append(FileSpec(Path("readme.md"), render_readme()))
    return files


async def emit_files(
    project_root: str | Path,
    progress_callback: ProgressCallback,
    language: Language | str,
    auth_library: AuthLibrary | str,
    database: Database | str,
) -> list[Path]:
    """Write the project files one after another.

    The callback fires once per written file.  The first write error aborts
    the remaining writes and propagates; files already written stay on disk.

    Returns:
        Paths of the written files, in write order.
    """
    root = Path(project_root)
    written: list[Path] = []
    for spec in plan_files(language, auth_library, database):
        written.append(await write_file(root / spec.path, spec.content))
        console.print(f"[green]Created {spec.path.as_posix()}[/green]")
        progress_callback()
    return written
