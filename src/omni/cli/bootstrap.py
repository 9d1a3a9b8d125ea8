# src/omni/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures local (gitignored) directories exist,
- opens the tasks file and loads it into a TaskList,
- wires both into AppState.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings: Settings | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Load errors (CorruptedFileError / InvalidArgumentError) propagate: starting
    with an empty list over a non-empty file would break line/index alignment.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = TaskFileStore(settings.tasks_path, skip_corrupted=settings.skip_corrupted_lines)
    tasks = TaskList(storage.load())
    logger.info("Loaded %d task(s) from %s", tasks.size(), storage.path)

    return AppState(settings=settings, tasks=tasks, storage=storage)
