# src/omni/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.errors import InvalidArgumentError, TaskIndexError
from .task_models import Deadline, Event, Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    In-memory, insertion-ordered task collection.

    Tasks are addressed by zero-based position. The position is also the line
    number of the task in the tasks file, so every removal shifts the indices
    of all later tasks down by one on both sides.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def get(self, index: int) -> Task:
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(f"No task at index {index} (size={len(self._tasks)}).")
        return self._tasks[index]

    def add(self, task: Task) -> Task:
        self._tasks.append(task)
        return task

    def remove_at(self, index: int) -> Task:
        self.get(index)
        return self._tasks.pop(index)

    def mark_at(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def unmark_at(self, index: int) -> Task:
        task = self.get(index)
        task.unmark_done()
        return task

    def set_at(self, index: int, task: Task) -> None:
        """Replace a task wholesale. Only used to restore an update snapshot."""
        self.get(index)
        self._tasks[index] = task

    def set_description_at(self, index: int, text: str) -> None:
        self.get(index).set_description(text)

    def set_deadline_at(self, index: int, text: str) -> None:
        task = self.get(index)
        if not isinstance(task, Deadline):
            raise InvalidArgumentError("Task is not a deadline!")
        task.set_due(text)

    def set_start_at(self, index: int, text: str) -> None:
        task = self.get(index)
        if not isinstance(task, Event):
            raise InvalidArgumentError("Task is not an event!")
        task.set_start(text)

    def set_end_at(self, index: int, text: str) -> None:
        task = self.get(index)
        if not isinstance(task, Event):
            raise InvalidArgumentError("Task is not an event!")
        task.set_end(text)

    def find_containing(self, keyword: str) -> list[Task]:
        """Case-insensitive substring search over descriptions, in list order."""
        needle = keyword.lower()
        matches = [t for t in self._tasks if needle in t.description.lower()]
        logger.debug("find keyword=%r matches=%d", keyword, len(matches))
        return matches
