# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from omni.tasks.task_models import Task
from omni.tasks.task_store import TaskFileStore


class FlakyTaskRepo:
    """
    TaskRepo wrapper around a real TaskFileStore.

    Set `fail_next_write` to make the next append/rewrite/erase raise OSError
    without touching the file, to exercise rollback paths.
    """

    def __init__(self, inner: TaskFileStore) -> None:
        self.inner = inner
        self.fail_next_write = False
        self.writes = 0

    def _maybe_fail(self) -> None:
        if self.fail_next_write:
            self.fail_next_write = False
            raise OSError("No space left on device")
        self.writes += 1

    def load(self) -> list[Task]:
        return self.inner.load()

    def append(self, task: Task) -> None:
        self._maybe_fail()
        self.inner.append(task)

    def rewrite_at(self, task: Task, index: int) -> None:
        self._maybe_fail()
        self.inner.rewrite_at(task, index)

    def erase_at(self, index: int) -> None:
        self._maybe_fail()
        self.inner.erase_at(index)


@dataclass(slots=True)
class RecordingSink:
    """ReplySink that keeps every reply for assertions."""

    shown: list[str] = field(default_factory=list)

    def show(self, text: str) -> None:
        self.shown.append(text)
