"""Jinja2 template rendering for the generated Express project.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``expressgen/scaffolder/templates/`` directory, plus one render function per
generated file.  The render functions are pure: the same options always give
the same text, and nothing touches the filesystem beyond reading the packaged
templates.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .models import AuthLibrary, Language


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Server entry template per language; the auth library is a template flag.
SERVER_TEMPLATES: dict[Language, str] = {
    Language.JAVASCRIPT: "server.js.j2",
    Language.TYPESCRIPT: "server.ts.j2",
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the Jinja2 templates that make up a generated project.

    Templates are ``.j2`` files under a configurable template directory and are
    rendered with a small context dictionary built from the project options.
    Undefined variables raise instead of rendering as empty text.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any] | None = None) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"server.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**(context or {}))


@lru_cache(maxsize=1)
def get_renderer() -> TemplateRenderer:
    """Return the shared renderer for the packaged templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Per-file render functions
# ---------------------------------------------------------------------------


def render_server_entry(language: Language | str, auth_library: AuthLibrary | str) -> str:
    """Render ``src/server.js`` or ``src/server.ts``.

    The entry starts an Express app with CORS, body parsing, static files, a
    single ``GET /`` route and a single error-handling middleware.  With
    ``AuthLibrary.JWT`` it also imports ``jsonwebtoken``; no route uses it.

    Raises:
        ValueError: If *language* or *auth_library* is not a known option.
    """
    language = Language(language)
    auth_library = AuthLibrary(auth_library)
    return get_renderer().render(
        SERVER_TEMPLATES[language],
        {"use_jwt": auth_library is AuthLibrary.JWT},
    )


def render_ts_config() -> str:
    """Render the TypeScript compiler configuration."""
    return get_renderer().render("tsconfig.json.j2")


def render_db_connector(language: Language | str) -> str:
    """Render the MongoDB connection module for *language*."""
    language = Language(language)
    return get_renderer().render(
        "db.js.j2", {"typescript": language is Language.TYPESCRIPT}
    )


def render_user_model(language: Language | str) -> str:
    """Render the Mongoose ``User`` model for *language*."""
    language = Language(language)
    return get_renderer().render(
        "userModel.js.j2", {"typescript": language is Language.TYPESCRIPT}
    )


def render_readme() -> str:
    return get_renderer().render("readme.md.j2")
