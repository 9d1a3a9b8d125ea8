# src/omni/tasks/task_store.py

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from ..core.errors import CorruptedFileError, OmniError
from .task_models import Deadline, Event, Task, TaskKind, Todo

logger = logging.getLogger(__name__)

_KIND_ARITY: dict[TaskKind, tuple[int, str]] = {
    TaskKind.TODO: (3, "todo"),
    TaskKind.DEADLINE: (4, "deadline"),
    TaskKind.EVENT: (5, "event"),
}


def parse_entry_line(line: str) -> Task:
    """
    Parse one entry line:

      T | <description> | <done>
      D | <description> | <done> | <DD-MM-YYYY[ HHMM]>
      E | <description> | <done> | <start> | <end>

    Raises CorruptedFileError for structural problems. Malformed dates surface
    as InvalidArgumentError from the date parser.
    """
    values = [v.strip() for v in line.split("|")]
    if len(values) < 3 or len(values) > 5:
        raise CorruptedFileError(f"Entry length invalid.\n{line}")

    try:
        kind = TaskKind(values[0])
    except ValueError:
        raise CorruptedFileError(f"Task type not found.\n{line}") from None

    arity, label = _KIND_ARITY[kind]
    if len(values) != arity:
        raise CorruptedFileError(f"Entry length for {label} invalid.\n{line}")

    try:
        done = int(values[2]) != 0
    except ValueError:
        raise CorruptedFileError(f"Done flag invalid.\n{line}") from None

    description = values[1]
    if kind is TaskKind.TODO:
        return Todo(description, done)
    if kind is TaskKind.DEADLINE:
        return Deadline.from_text(description, done, values[3])
    return Event.from_text(description, done, values[3], values[4])


class TaskFileStore:
    """
    Line-oriented task file.

    One entry line per task, in the same order as the in-memory TaskList.
    Appends go straight to the end of the file; rewrites and erasures read the
    whole file, edit one line and write it back through a temp file.

    Not safe for concurrent use: one interactive process owns the file.
    """

    def __init__(self, path: str | Path = "data/tasks.txt", *, skip_corrupted: bool = False) -> None:
        self._path = Path(path)
        self._skip_corrupted = skip_corrupted
        if not self._path.exists():
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.touch()
            except OSError as e:
                raise CorruptedFileError(f"Error creating tasks file: {e}") from e
            logger.info("Created empty tasks file %s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_lines(self) -> list[str]:
        # Only "\n" ends an entry; str.splitlines() would also split on U+2028, \x0c...
        try:
            with self._path.open(encoding="utf-8", newline="") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise CorruptedFileError(
                f"Tasks file is not valid UTF-8: {e.reason} at byte {e.start}."
            ) from e
        lines = [line.removesuffix("\r") for line in text.split("\n")]
        if lines[-1] == "":
            lines.pop()
        return lines

    def _write_lines(self, lines: list[str]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8", newline="\n") as f:
            f.writelines(f"{line}\n" for line in lines)
        os.replace(tmp, self._path)

    def _check_index(self, index: int, lines: list[str]) -> None:
        if not 0 <= index < len(lines):
            raise CorruptedFileError(
                f"Tasks file is out of sync: no line {index + 1} in {self._path} "
                f"({len(lines)} lines)."
            )

    # ---- public API ----

    def load(self) -> list[Task]:
        try:
            lines = self._read_lines()
        except OSError as e:
            raise CorruptedFileError(str(e)) from e

        tasks: list[Task] = []
        skipped = 0
        for lineno, line in enumerate(lines, start=1):
            try:
                tasks.append(parse_entry_line(line))
            except OmniError as e:
                if not self._skip_corrupted:
                    raise
                skipped += 1
                logger.warning(
                    "Skipping corrupted line %d in %s: %s", lineno, self._path, e.user_message
                )

        if skipped:
            backup = self._path.with_suffix(self._path.suffix + ".bak")
            shutil.copyfile(self._path, backup)
            self._write_lines([t.to_entry_line() for t in tasks])
            logger.warning(
                "Dropped %d corrupted line(s); original kept at %s", skipped, backup
            )

        logger.info("TaskFileStore ready path=%s total=%d", self._path, len(tasks))
        return tasks

    def append(self, task: Task) -> None:
        with self._path.open("a", encoding="utf-8", newline="\n") as f:
            f.write(task.to_entry_line() + "\n")
        logger.debug("Appended entry: %s", task.to_entry_line())

    def rewrite_at(self, task: Task, index: int) -> None:
        lines = self._read_lines()
        self._check_index(index, lines)
        lines[index] = task.to_entry_line()
        self._write_lines(lines)
        logger.debug("Rewrote line %d: %s", index + 1, lines[index])

    def erase_at(self, index: int) -> None:
        lines = self._read_lines()
        self._check_index(index, lines)
        removed = lines.pop(index)
        self._write_lines(lines)
        logger.debug("Erased line %d: %s", index + 1, removed)
