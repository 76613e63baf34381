"""Shared pytest fixtures for the expressgen test suite.

Provides reusable fixtures for:
- Output directories and project options
- A fake ``npm init`` that writes ``package.json`` without running npm
- Mock subprocess helpers
- A recording progress tracker
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from expressgen.config import Config
from expressgen.progress import ProgressTracker
from expressgen.scaffolder.models import AuthLibrary, Database, Language, ProjectOptions


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory generated projects are written into."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def app_config(output_dir: Path) -> Config:
    return Config(output_dir=output_dir)


# ---------------------------------------------------------------------------
# Project options
# ---------------------------------------------------------------------------


@pytest.fixture
def js_options() -> ProjectOptions:
    """JavaScript, no auth, no database."""
    return ProjectOptions(project_name="demo")


@pytest.fixture
def full_options() -> ProjectOptions:
    """TypeScript with JWT and MongoDB."""
    return ProjectOptions(
        project_name="api",
        language=Language.TYPESCRIPT,
        auth_library=AuthLibrary.JWT,
        database=Database.MONGODB,
    )


# ---------------------------------------------------------------------------
# npm / subprocess
# ---------------------------------------------------------------------------


async def _fake_npm_init(cmd: list[str], cwd: Any = None, **kwargs: Any) -> tuple[int, str, str]:
    manifest = {"name": Path(cwd).name, "version": "1.0.0", "main": "index.js"}
    (Path(cwd) / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return (0, "Wrote to package.json", "")


@pytest.fixture
def fake_npm():
    """Replace the initializer's ``run_command`` with a fake ``npm init -y``.

    The fake writes a minimal ``package.json`` into the working directory and
    reports success.  The mock is yielded so tests can assert on the call.
    """
    mock = AsyncMock(side_effect=_fake_npm_init)
    with patch("expressgen.scaffolder.initializer.run_command", mock):
        yield mock


@pytest.fixture
def mock_subprocess():
    """Factory for mock asyncio subprocesses.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


# ---------------------------------------------------------------------------
# Progress
# ---------------------------------------------------------------------------


@pytest.fixture
def recording_tracker():
    """Factory for trackers that collect emitted percentages in ``.emitted``."""
    def factory(total_steps: int) -> ProgressTracker:
        emitted: list[int] = []
        tracker = ProgressTracker(total_steps, emit=emitted.append)
        tracker.emitted = emitted  # type: ignore[attr-defined]
        return tracker

    return factory
