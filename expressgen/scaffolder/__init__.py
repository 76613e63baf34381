"""expressgen scaffolder -- generates an Express.js project skeleton.

This module takes a ``ProjectOptions`` as input and produces a project
directory with an Express server entry (JavaScript or TypeScript), an optional
MongoDB connector and user model, a readme and the ``package.json`` created by
``npm init``.

Quick usage::

    from expressgen.scaffolder import ProjectGenerator, ProjectOptions

    options = ProjectOptions(project_name="demo", language="TypeScript")
    generator = ProjectGenerator(options)
    project_path = await generator.generate()
"""

from expressgen.scaffolder.generator import GenerationError, GenerationState, ProjectGenerator
from expressgen.scaffolder.models import (
    AuthLibrary,
    Database,
    FileSpec,
    Language,
    ProjectOptions,
    count_total_steps,
)
from expressgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "AuthLibrary",
    "Database",
    "FileSpec",
    "GenerationError",
    "GenerationState",
    "Language",
    "ProjectGenerator",
    "ProjectOptions",
    "TemplateRenderer",
    "count_total_steps",
]
