# src/omni/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..core.errors import InvalidArgumentError, OmniError
from ..core.state import AppState
from .task_list import TaskList
from .task_models import Task

logger = logging.getLogger(__name__)

UPDATE_TAGS: dict[str, Callable[[TaskList, int, str], None]] = {
    "/desc": TaskList.set_description_at,
    "/by": TaskList.set_deadline_at,
    "/from": TaskList.set_start_at,
    "/to": TaskList.set_end_at,
}


def add_task(state: AppState, task: Task) -> Task:
    """Append to the file first, so a failed write never leaves a memory-only task."""
    state.storage.append(task)
    state.tasks.add(task)
    logger.debug("Task added index=%d kind=%s", len(state.tasks) - 1, task.KIND.value)
    return task


def _persist_done_flag(state: AppState, index: int, was_done: bool) -> Task:
    task = state.tasks.get(index)
    try:
        state.storage.rewrite_at(task, index)
    except (OmniError, OSError):
        task.done = was_done
        raise
    return task


def mark_task(state: AppState, index: int) -> Task:
    was_done = state.tasks.get(index).done
    state.tasks.mark_at(index)
    return _persist_done_flag(state, index, was_done)


def unmark_task(state: AppState, index: int) -> Task:
    was_done = state.tasks.get(index).done
    state.tasks.unmark_at(index)
    return _persist_done_flag(state, index, was_done)


def delete_task(state: AppState, index: int) -> Task:
    state.tasks.get(index)
    state.storage.erase_at(index)
    task = state.tasks.remove_at(index)
    logger.debug("Task deleted index=%d", index)
    return task


def update_task(state: AppState, index: int, edits: Sequence[tuple[str, str]]) -> Task:
    """
    Apply several field edits to one task as a single unit.

    snapshot -> apply every (tag, value) -> rewrite the file line.
    If any step fails the snapshot is put back and the error re-raised, so
    memory and file either both hold the full edit or neither changed.
    """
    snapshot = state.tasks.get(index).copy()
    try:
        for tag, value in edits:
            setter = UPDATE_TAGS.get(tag)
            if setter is None:
                raise InvalidArgumentError(f"Unknown update tag {tag}.")
            setter(state.tasks, index, value)
        task = state.tasks.get(index)
        state.storage.rewrite_at(task, index)
    except (OmniError, OSError):
        state.tasks.set_at(index, snapshot)
        logger.debug("Update rolled back index=%d", index)
        raise

    logger.debug("Task updated index=%d tags=%s", index, [tag for tag, _ in edits])
    return task
