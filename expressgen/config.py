"""expressgen configuration.

Typed settings for a generation run.  The model is a Pydantic v2 model so
values coming from environment variables or command-line flags are validated
once at construction time.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global expressgen configuration.

    Created once by the CLI entry point and passed to ``ProjectGenerator``.
    """

    output_dir: Path = Field(default=Path("."), description="Parent directory of new projects")
    npm_command: str = Field(default="npm", min_length=1)
    init_timeout: int = Field(default=120, ge=1, description="npm init timeout in seconds")
    fixed_total_steps: Optional[int] = Field(
        default=None,
        ge=1,
        description="Force a fixed progress total instead of counting the selected options",
    )
    default_project_name: str = Field(default="my-app", min_length=1)

    def project_root(self, project_name: str) -> Path:
        """Directory the project named *project_name* is generated into."""
        return self.output_dir / project_name

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            EXPRESSGEN_OUTPUT_DIR, EXPRESSGEN_NPM, EXPRESSGEN_INIT_TIMEOUT,
            EXPRESSGEN_FIXED_TOTAL_STEPS.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EXPRESSGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["EXPRESSGEN_OUTPUT_DIR"])
        if os.environ.get("EXPRESSGEN_NPM"):
            kwargs["npm_command"] = os.environ["EXPRESSGEN_NPM"]
        if os.environ.get("EXPRESSGEN_INIT_TIMEOUT"):
            kwargs["init_timeout"] = int(os.environ["EXPRESSGEN_INIT_TIMEOUT"])
        if os.environ.get("EXPRESSGEN_FIXED_TOTAL_STEPS"):
            kwargs["fixed_total_steps"] = int(os.environ["EXPRESSGEN_FIXED_TOTAL_STEPS"])
        return cls(**kwargs)
