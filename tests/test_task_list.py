# tests/test_task_list.py

from __future__ import annotations

import pytest

from omni.core.errors import InvalidArgumentError, TaskIndexError
from omni.tasks.task_list import TaskList
from omni.tasks.task_models import Deadline, Event, Todo


@pytest.fixture()
def tasks() -> TaskList:
    return TaskList(
        [
            Todo("Read Book", False),
            Deadline.from_text("return book", False, "01-01-2025"),
            Event.from_text("book fair", False, "01-01-2025", "02-01-2025"),
        ]
    )


def test_size_and_order(tasks: TaskList) -> None:
    assert tasks.size() == len(tasks) == 3
    assert not tasks.is_empty()
    assert [t.description for t in tasks] == ["Read Book", "return book", "book fair"]
    assert TaskList().is_empty()


def test_get_out_of_range() -> None:
    empty = TaskList()
    with pytest.raises(TaskIndexError):
        empty.get(0)
    with pytest.raises(IndexError):
        empty.get(-1)


def test_add_returns_same_task() -> None:
    lst = TaskList()
    t = Todo("x", False)
    assert lst.add(t) is t
    assert lst.get(0) is t


def test_remove_shifts_indices(tasks: TaskList) -> None:
    removed = tasks.remove_at(0)
    assert removed.description == "Read Book"
    assert tasks.get(0).description == "return book"
    assert tasks.size() == 2


def test_mark_unmark(tasks: TaskList) -> None:
    assert tasks.mark_at(1).done is True
    assert tasks.unmark_at(1).done is False


def test_setters_check_variant(tasks: TaskList) -> None:
    with pytest.raises(InvalidArgumentError, match="Task is not a deadline!"):
        tasks.set_deadline_at(0, "01-01-2025")
    with pytest.raises(InvalidArgumentError, match="Task is not an event!"):
        tasks.set_start_at(1, "01-01-2025")
    with pytest.raises(InvalidArgumentError, match="Task is not an event!"):
        tasks.set_end_at(0, "01-01-2025")

    tasks.set_deadline_at(1, "03-03-2025 1200")
    tasks.set_start_at(2, "04-03-2025")
    tasks.set_end_at(2, "05-03-2025")
    tasks.set_description_at(0, "Read Another Book")
    assert tasks.get(0).description == "Read Another Book"
    assert tasks.get(1).to_entry_line() == "D | return book | 0 | 03-03-2025 1200"
    assert tasks.get(2).to_entry_line() == "E | book fair | 0 | 04-03-2025 | 05-03-2025"


def test_set_at_replaces(tasks: TaskList) -> None:
    replacement = Todo("other", True)
    tasks.set_at(0, replacement)
    assert tasks.get(0) is replacement


def test_find_is_case_insensitive_and_ordered(tasks: TaskList) -> None:
    found = tasks.find_containing("BOOK")
    assert [t.description for t in found] == ["Read Book", "return book", "book fair"]
    assert tasks.find_containing("translate") == []
