# src/omni/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The interpreter depends on Protocols instead of concrete implementations,
so storage and presentation stay swappable and tests can plug in fakes.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Persistent mirror of the TaskList: line i holds task i."""

    def load(self) -> list[Task]: ...
    def append(self, task: Task) -> None: ...
    def rewrite_at(self, task: Task, index: int) -> None: ...
    def erase_at(self, index: int) -> None: ...


class ReplySink(Protocol):
    """Presentation side: receives the plain reply text of each command."""

    def show(self, text: str) -> None: ...
