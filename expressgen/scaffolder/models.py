"""Option and file models for project scaffolding.

``ProjectOptions`` is built once from user input and then only read by the
pipeline stages.  The step-counting helpers live here as well so that the
orchestrator and the stages agree on how many progress ticks a run produces.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Language(str, Enum):
    """Language of the generated server code."""

    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"

    @property
    def extension(self) -> str:
        return "ts" if self is Language.TYPESCRIPT else "js"


class AuthLibrary(str, Enum):
    """Authentication library scaffolded into the server entry."""

    NONE = "None"
    JWT = "JWT"


class Database(str, Enum):
    """Database integration emitted alongside the server."""

    NONE = "None"
    MONGODB = "MongoDB"


# ---------------------------------------------------------------------------
# Step accounting
# ---------------------------------------------------------------------------

INIT_STEPS = 2
DIRECTORY_STEPS = 8

# Total used by the first releases, which ignored optional files.
LEGACY_TOTAL_STEPS = 12


# ---------------------------------------------------------------------------
# Project options
# ---------------------------------------------------------------------------


class ProjectOptions(BaseModel):
    """Immutable description of the project to generate."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1, description="Directory name of the new project")
    language: Language = Field(default=Language.JAVASCRIPT)
    auth_library: AuthLibrary = Field(default=AuthLibrary.NONE)
    database: Database = Field(default=Database.NONE)

    @field_validator("project_name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def typescript(self) -> bool:
        return self.language is Language.TYPESCRIPT

    @property
    def use_jwt(self) -> bool:
        return self.auth_library is AuthLibrary.JWT

    @property
    def use_mongodb(self) -> bool:
        return self.database is Database.MONGODB


def count_file_steps(options: ProjectOptions) -> int:
    """Return how many files the emitter writes for *options* (2 to 5)."""
    steps = 2
    if options.typescript:
        steps += 1
    if options.use_mongodb:
        steps += 2
    return steps


def count_total_steps(options: ProjectOptions) -> int:
    """Return the number of progress ticks a full run produces."""
    return INIT_STEPS + DIRECTORY_STEPS + count_file_steps(options)


# ---------------------------------------------------------------------------
# Rendered files
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileSpec:
    """A rendered file waiting to be written, relative to the project root."""

    path: Path
    content: str
