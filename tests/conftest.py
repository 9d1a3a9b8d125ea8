# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from omni.cli.commands import CommandRegistry, build_registry
from omni.core.state import AppState
from omni.tasks.task_list import TaskList
from omni.tasks.task_store import TaskFileStore

from .fakes import FlakyTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    A SimpleNamespace rather than Settings.from_env(), so the developer's
    environment and .env never leak into tests.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Omni",
        log_level="DEBUG",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        log_dir=data_dir / "logs",
        skip_corrupted_lines=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState over a real tasks file in tmp_path."""
    storage = TaskFileStore(settings.tasks_path)
    return AppState(settings=settings, tasks=TaskList(storage.load()), storage=storage)


@pytest.fixture()
def flaky_state(settings: SimpleNamespace) -> AppState:
    """AppState whose storage can be told to fail on the next write."""
    storage = FlakyTaskRepo(TaskFileStore(settings.tasks_path))
    return AppState(settings=settings, tasks=TaskList(storage.load()), storage=storage)


@pytest.fixture()
def registry() -> CommandRegistry:
    return build_registry()
