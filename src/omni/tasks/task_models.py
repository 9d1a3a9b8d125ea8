# src/omni/tasks/task_models.py

from __future__ import annotations

import dataclasses
import unicodedata
from dataclasses import dataclass
from datetime import date, time
from enum import StrEnum
from typing import ClassVar

from ..core.errors import InvalidArgumentError
from .dates import format_display, format_entry, parse_date_time

FIELD_SEP = " | "

# Control characters and line/paragraph separators would split or garble the entry line.
_BREAKING_CATEGORIES = frozenset({"Cc", "Zl", "Zp"})


class TaskKind(StrEnum):
    """One-letter type tag used both in entry lines and in display strings."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def _clean_description(text: str) -> str:
    desc = (text or "").strip()
    if not desc:
        raise InvalidArgumentError("Give your task a description!")
    if "|" in desc:
        raise InvalidArgumentError("Descriptions can't contain '|'. Try again!")
    if any(unicodedata.category(ch) in _BREAKING_CATEGORIES for ch in desc):
        raise InvalidArgumentError(
            "Descriptions can't contain tabs, line breaks or control characters."
        )
    return desc


@dataclass(slots=True)
class Task:
    """
    Base task: description + done flag.

    Concrete variants are the closed set Todo / Deadline / Event. All of them
    serialize to a single entry line and render a one-line display string.
    """

    KIND: ClassVar[TaskKind]

    description: str
    done: bool

    def __post_init__(self) -> None:
        self.description = _clean_description(self.description)
        self.done = bool(self.done)

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def mark_done(self) -> None:
        self.done = True

    def unmark_done(self) -> None:
        self.done = False

    def set_description(self, text: str) -> None:
        self.description = _clean_description(text)

    def copy(self) -> Task:
        # Every field is an immutable value, a shallow replace is a full clone.
        return dataclasses.replace(self)

    def _entry_head(self) -> str:
        return FIELD_SEP.join((self.KIND.value, self.description, "1" if self.done else "0"))

    def _display_head(self) -> str:
        return f"[{self.KIND.value}][{self.status_icon}] {self.description}"

    def to_entry_line(self) -> str:
        raise NotImplementedError

    def to_display(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_display()


@dataclass(slots=True)
class Todo(Task):
    KIND: ClassVar[TaskKind] = TaskKind.TODO

    def to_entry_line(self) -> str:
        return self._entry_head()

    def to_display(self) -> str:
        return self._display_head()


@dataclass(slots=True)
class Deadline(Task):
    KIND: ClassVar[TaskKind] = TaskKind.DEADLINE

    due_date: date
    due_time: time | None = None

    @classmethod
    def from_text(cls, description: str, done: bool, by: str) -> Deadline:
        due_date, due_time = parse_date_time(by)
        return cls(description, done, due_date, due_time)

    def set_due(self, text: str) -> None:
        self.due_date, self.due_time = parse_date_time(text)

    @property
    def due_string(self) -> str:
        return format_entry(self.due_date, self.due_time)

    def to_entry_line(self) -> str:
        return FIELD_SEP.join((self._entry_head(), self.due_string))

    def to_display(self) -> str:
        return f"{self._display_head()} (by: {format_display(self.due_date, self.due_time)})"


@dataclass(slots=True)
class Event(Task):
    KIND: ClassVar[TaskKind] = TaskKind.EVENT

    start_date: date
    start_time: time | None
    end_date: date
    end_time: time | None

    @classmethod
    def from_text(cls, description: str, done: bool, start: str, end: str) -> Event:
        start_date, start_time = parse_date_time(start)
        end_date, end_time = parse_date_time(end)
        return cls(description, done, start_date, start_time, end_date, end_time)

    def set_start(self, text: str) -> None:
        self.start_date, self.start_time = parse_date_time(text)

    def set_end(self, text: str) -> None:
        self.end_date, self.end_time = parse_date_time(text)

    @property
    def start_string(self) -> str:
        return format_entry(self.start_date, self.start_time)

    @property
    def end_string(self) -> str:
        return format_entry(self.end_date, self.end_time)

    def to_entry_line(self) -> str:
        return FIELD_SEP.join((self._entry_head(), self.start_string, self.end_string))

    def to_display(self) -> str:
        start = format_display(self.start_date, self.start_time)
        end = format_display(self.end_date, self.end_time)
        return f"{self._display_head()} (from: {start} to: {end})"
