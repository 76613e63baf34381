"""Percentage progress reporting for a generation run.

Each stage receives the bound ``ProgressTracker.tick`` method and calls it
once per completed unit of work.  The tracker keeps its own ``ProgressState``
so several runs (or tests) never share a counter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from expressgen.utils import console

ProgressCallback = Callable[[], None]


@dataclass
class ProgressState:
    """Counter for one run."""

    total_steps: int
    completed_steps: int = 0
    last_reported_percentage: int = -1


def compute_percentage(completed: int, total: int) -> int:
    """Return ``completed / total`` as a percentage rounded half up."""
    # Integer arithmetic so 0.5 always rounds up, unlike round().
    return (completed * 200 + total) // (total * 2)


def print_percentage(percentage: int) -> None:
    console.print(f"[blue][{percentage}%][/blue] ", end="")


class ProgressTracker:
    """Counts completed steps and emits each new percentage once.

    Args:
        total_steps: Number of ticks that make up 100%.
        emit: Called with each newly reached percentage.  Defaults to
            printing ``[<n>%] `` on the shared console.
    """

    def __init__(
        self,
        total_steps: int,
        emit: Optional[Callable[[int], None]] = None,
    ) -> None:
        if total_steps < 1:
            raise ValueError(f"total_steps must be positive, got {total_steps}")
        self.state = ProgressState(total_steps=total_steps)
        self.emit = emit or print_percentage

    @property
    def percentage(self) -> int:
        return compute_percentage(self.state.completed_steps, self.state.total_steps)

    @property
    def is_complete(self) -> bool:
        return self.state.completed_steps >= self.state.total_steps

    def tick(self) -> None:
        """Record one completed step and emit the percentage if it changed.

        Ticking past ``total_steps`` is allowed and reports values above 100.
        """
        self.state.completed_steps += 1
        percentage = self.percentage
        if percentage != self.state.last_reported_percentage:
            self.emit(percentage)
            self.state.last_reported_percentage = percentage
