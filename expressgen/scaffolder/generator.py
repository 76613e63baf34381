"""Main scaffolding orchestrator.

Takes a ``ProjectOptions`` and generates an Express.js project in three
stages:

Stage 1: INITIALIZING         -- Create the project root, run ``npm init -y``.
Stage 2: BUILDING_DIRECTORIES -- Create ``src/`` and its subdirectories.
Stage 3: EMITTING_FILES       -- Render and write the project files.

Stages run strictly one after another and the first failure stops the run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Awaitable, Callable, Optional

from expressgen.config import Config
from expressgen.progress import ProgressTracker

from .directories import build_directories
from .emitter import emit_files
from .initializer import initialize
from .models import ProjectOptions, count_total_steps


# ---------------------------------------------------------------------------
# States & errors
# ---------------------------------------------------------------------------


class GenerationState(str, Enum):
    AWAITING_INPUT = "awaiting_input"
    INITIALIZING = "initializing"
    BUILDING_DIRECTORIES = "building_directories"
    EMITTING_FILES = "emitting_files"
    COMPLETED = "completed"
    FAILED = "failed"


class GenerationError(Exception):
    """Raised when a stage fails; the original exception is the ``cause``."""

    def __init__(self, stage: str, message: str, cause: Optional[BaseException] = None) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage}: {message}")


@dataclass(frozen=True)
class Stage:
    """One step of the pipeline and the state the generator is in while it runs."""

    name: str
    state: GenerationState
    run: Callable[[Path], Awaitable[object]]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Drives one project generation from options to a finished directory.

    Attributes:
        options: What to generate.
        config: Where to generate it and how to run npm.
        tracker: Progress tracker shared by every stage.
        state: Current ``GenerationState``.
        written_files: Files written by the emitting stage.
    """

    def __init__(
        self,
        options: ProjectOptions,
        config: Optional[Config] = None,
        tracker: Optional[ProgressTracker] = None,
    ) -> None:
        self.options = options
        self.config = config or Config()
        if tracker is None:
            total = self.config.fixed_total_steps or count_total_steps(options)
            tracker = ProgressTracker(total)
        self.tracker = tracker
        self.state = GenerationState.AWAITING_INPUT
        self.written_files: list[Path] = []
        self.stages: list[Stage] = [
            Stage("initialize", GenerationState.INITIALIZING, self._initialize),
            Stage("build directories", GenerationState.BUILDING_DIRECTORIES, self._build_directories),
            Stage("emit files", GenerationState.EMITTING_FILES, self._emit_files),
        ]

    @property
    def project_root(self) -> Path:
        return self.config.project_root(self.options.project_name)

    # -- Public API --------------------------------------------------------

    async def generate(self) -> Path:
        """Run every stage in order.

        Returns:
            Path to the generated project root.

        Raises:
            GenerationError: If a stage fails, or if this generator has
                already run.
        """
        if self.state is not GenerationState.AWAITING_INPUT:
            raise GenerationError(
                "generate", f"generator already ran (state: {self.state.value})"
            )

        root = self.project_root
        for stage in self.stages:
            self.state = stage.state
            try:
                await stage.run(root)
            except Exception as exc:
                self.state = GenerationState.FAILED
                raise GenerationError(stage.name, str(exc) or type(exc).__name__, exc) from exc

        self.state = GenerationState.COMPLETED
        return root

    # -- Stages ------------------------------------------------------------

    async def _initialize(self, root: Path) -> None:
        await initialize(
            root,
            self.tracker.tick,
            npm_command=self.config.npm_command,
            timeout=self.config.init_timeout,
        )

    async def _build_directories(self, root: Path) -> None:
        await build_directories(root, self.tracker.tick)

    async def _emit_files(self, root: Path) -> None:
        self.written_files = await emit_files(
            root,
            self.tracker.tick,
            self.options.language,
            self.options.auth_library,
            self.options.database,
        )
