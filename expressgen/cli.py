"""Command-line entry point.

Usage::

    expressgen
    expressgen --language TypeScript --auth JWT --database MongoDB -o ./work
    python -m expressgen

The project name is always read from standard input.  Options that are not
given as flags are asked for interactively.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import traceback
from pathlib import Path
from typing import Optional, Sequence, TextIO

from rich.markup import escape
from rich.prompt import Prompt

from expressgen.config import Config
from expressgen.scaffolder.generator import GenerationError, ProjectGenerator
from expressgen.scaffolder.initializer import InitializerError
from expressgen.scaffolder.models import AuthLibrary, Database, Language, ProjectOptions
from expressgen.utils import console, print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expressgen",
        description="Generate an Express.js project skeleton.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  expressgen\n"
            "  echo demo | expressgen --language JavaScript --auth None --database None\n"
            "  expressgen -o ./work --language TypeScript --auth JWT --database MongoDB\n"
        ),
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )
    parser.add_argument(
        "--language",
        choices=[lang.value for lang in Language],
        default=None,
        help="Language of the generated server",
    )
    parser.add_argument(
        "--auth",
        choices=[auth.value for auth in AuthLibrary],
        default=None,
        help="Authentication library to scaffold",
    )
    parser.add_argument(
        "--database",
        choices=[db.value for db in Database],
        default=None,
        help="Database integration to generate",
    )
    return parser


def _ask_choice(question: str, enum_type: type, stdin: Optional[TextIO]) -> str:
    choices = [member.value for member in enum_type]
    return Prompt.ask(
        f"[blue]{question}[/blue]",
        console=console,
        choices=choices,
        default=choices[0],
        stream=stdin,
    )


def collect_options(
    args: argparse.Namespace, config: Config, stdin: Optional[TextIO] = None
) -> ProjectOptions:
    """Read the project name and any options missing from *args*."""
    name = Prompt.ask(
        "[blue]Enter Project Name[/blue]",
        console=console,
        default=config.default_project_name,
        stream=stdin,
    )
    name = name.strip() or config.default_project_name

    language = args.language or _ask_choice("Select a language", Language, stdin)
    auth = args.auth or _ask_choice("Add an authentication library", AuthLibrary, stdin)
    database = args.database or _ask_choice("Add a database", Database, stdin)

    return ProjectOptions(
        project_name=name,
        language=language,
        auth_library=auth,
        database=database,
    )


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None) -> None:
    """CLI entry point for ``expressgen`` and ``python -m expressgen``."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Invalid configuration: {escape(str(exc))}")
        sys.exit(1)
    if args.output:
        config.output_dir = Path(args.output)

    options = collect_options(args, config, stdin)
    generator = ProjectGenerator(options, config)

    try:
        asyncio.run(generator.generate())
    except GenerationError as exc:
        console.print()
        print_error(f"Error generating project: {escape(str(exc))}")
        if not isinstance(exc.cause, (OSError, InitializerError)):
            console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        sys.exit(1)

    console.print()
    console.print("[blue][100%][/blue] ", end="")
    print_success("Project setup completed!")
    print_summary_table(
        {
            "Project": str(generator.project_root),
            "Language": options.language.value,
            "Auth": options.auth_library.value,
            "Database": options.database.value,
            "Files": ", ".join(
                p.relative_to(generator.project_root).as_posix()
                for p in generator.written_files
            ),
        },
        title="Generated project",
    )


if __name__ == "__main__":
    main()
