# src/omni/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so handlers can read them without globals.
    settings: object

    tasks: TaskList
    storage: TaskRepo
