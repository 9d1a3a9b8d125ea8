# src/omni/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core import replies
from ..core.errors import InvalidArgumentError, OmniError, UnknownCommandError
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import Deadline, Event, Todo

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND = "I can't lie I have no idea what that means..."
NO_SUCH_TASK = "That task does not exist! Try again!"

_TASK_NUMBER_RE = re.compile(r"[+-]?\d+", re.ASCII)


@dataclass(frozen=True, slots=True)
class CommandResult:
    text: str
    ends_session: bool = False


class CommandRegistry:
    """Keyword -> handler registry; the single dispatch boundary for user input."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._ends_session: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        ends_session: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if ends_session:
            self._ends_session.update([key, *(a.lower() for a in aliases)])

    def handle(self, state: AppState, line: str) -> CommandResult:
        """
        Handle a line like "deadline submit report /by 05-01-2025 1800".

        Never raises for user or storage errors: they come back as the reply text.
        """
        parts = line.strip().split(maxsplit=1)
        name = parts[0].lower() if parts else ""
        arg = parts[1] if len(parts) > 1 else ""

        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownCommandError(UNKNOWN_COMMAND)
            text = handler(state, arg)
        except OmniError as e:
            logger.debug("Command %r rejected: %s", name, e.user_message)
            return CommandResult(e.user_message)
        except OSError as e:
            logger.warning("Storage error while handling %r: %s", name, e)
            return CommandResult(str(e))
        except UnicodeDecodeError as e:
            logger.warning("Undecodable storage data while handling %r: %s", name, e)
            return CommandResult(f"Tasks file is not valid UTF-8: {e.reason}")

        return CommandResult(text, ends_session=name in self._ends_session)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


# ---- argument helpers ----


def parse_task_number(state: AppState, raw: str, command: str) -> int:
    """1-based task number from user input -> validated zero-based index."""
    text = raw.strip()
    if not _TASK_NUMBER_RE.fullmatch(text):
        raise InvalidArgumentError(f"Invalid {command} command. Try again.")
    num = int(text)
    if num < 1 or num > state.tasks.size():
        raise InvalidArgumentError(NO_SUCH_TASK)
    return num - 1


def _require_description(text: str, kind: str) -> str:
    desc = text.strip()
    if not desc:
        raise InvalidArgumentError(f"Give your {kind} a description!")
    return desc


def parse_update_edits(tokens: list[str]) -> list[tuple[str, str]]:
    """
    Group update tokens into (tag, value) pairs.

    Each tag takes every following token up to the next tag. Tokens before the
    first tag are ignored.
    """
    edits: list[tuple[str, str]] = []
    seen: set[str] = set()
    tag: str | None = None
    buf: list[str] = []

    def flush() -> None:
        if tag is not None:
            edits.append((tag, " ".join(buf)))

    for tok in tokens:
        if tok in task_api.UPDATE_TAGS:
            flush()
            if tok in seen:
                raise InvalidArgumentError("Can't change the same entry twice!")
            seen.add(tok)
            tag, buf = tok, []
        elif tag is not None:
            buf.append(tok)
    flush()

    if not edits:
        raise InvalidArgumentError(
            "Nothing to update! Use /desc, /by, /from or /to followed by the new value."
        )
    return edits


# ---- handlers ----


def cmd_list(state: AppState, arg: str) -> str:
    return replies.task_list(list(state.tasks))


def cmd_mark(state: AppState, arg: str) -> str:
    index = parse_task_number(state, arg, "mark")
    return replies.marked(task_api.mark_task(state, index))


def cmd_unmark(state: AppState, arg: str) -> str:
    index = parse_task_number(state, arg, "unmark")
    return replies.unmarked(task_api.unmark_task(state, index))


def cmd_todo(state: AppState, arg: str) -> str:
    desc = _require_description(arg, "todo")
    task = task_api.add_task(state, Todo(desc, False))
    return replies.added(task, state.tasks.size())


def cmd_deadline(state: AppState, arg: str) -> str:
    desc, sep, by = arg.partition("/by")
    if not sep:
        raise InvalidArgumentError(
            "Unable to set deadline, remember to use /by to specify your deadline!"
        )
    desc = _require_description(desc, "deadline")
    task = task_api.add_task(state, Deadline.from_text(desc, False, by.strip()))
    return replies.added(task, state.tasks.size())


def cmd_event(state: AppState, arg: str) -> str:
    """
    event <desc> /from <date> /to <date>
    """
    usage = "Unable to set event, remember to use /from and /to in that order!"
    desc, sep, dates = arg.partition("/from")
    if not sep:
        raise InvalidArgumentError(usage)
    desc = _require_description(desc, "event")
    start, sep, end = dates.partition("/to")
    if not sep:
        raise InvalidArgumentError(usage)
    task = task_api.add_task(state, Event.from_text(desc, False, start.strip(), end.strip()))
    return replies.added(task, state.tasks.size())


def cmd_delete(state: AppState, arg: str) -> str:
    index = parse_task_number(state, arg, "delete")
    task = task_api.delete_task(state, index)
    return replies.deleted(task, state.tasks.size())


def cmd_find(state: AppState, arg: str) -> str:
    if not arg.strip():
        return "Give me a keyword to look for!"
    return replies.matching_tasks(state.tasks.find_containing(arg.strip()))


def cmd_update(state: AppState, arg: str) -> str:
    """
    update <n> /desc <text> /by <date> /from <date> /to <date>

    Any subset of tags, each at most once. All edits land or none do.
    """
    tokens = arg.split()
    if len(tokens) < 3:
        raise InvalidArgumentError(
            "Invalid update command. Try: update <n> /desc|/by|/from|/to <new value>"
        )
    index = parse_task_number(state, tokens[0], "update")
    edits = parse_update_edits(tokens[1:])
    return replies.updated(task_api.update_task(state, index, edits))


def cmd_bye(state: AppState, arg: str) -> str:
    return replies.farewell()


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()

    def cmd_help(state: AppState, arg: str) -> str:
        return registry.build_help()

    registry.register("list", cmd_list, help_text="Show all tasks.")
    registry.register("mark", cmd_mark, help_text="Mark task <n> as done.")
    registry.register("unmark", cmd_unmark, help_text="Mark task <n> as not done.")
    registry.register("todo", cmd_todo, help_text="Add a todo: todo <description>.")
    registry.register(
        "deadline",
        cmd_deadline,
        help_text="Add a deadline: deadline <description> /by DD-MM-YYYY [HHMM].",
    )
    registry.register(
        "event",
        cmd_event,
        help_text="Add an event: event <description> /from <date> /to <date>.",
    )
    registry.register("delete", cmd_delete, help_text="Delete task <n>.")
    registry.register("find", cmd_find, help_text="Find tasks whose description contains <keyword>.")
    registry.register(
        "update",
        cmd_update,
        help_text="Edit task <n>: update <n> /desc <text> /by <date> /from <date> /to <date>.",
    )
    registry.register("help", cmd_help, help_text="Show available commands.", aliases=["?"])
    registry.register("bye", cmd_bye, help_text="Save and quit.", ends_session=True)
    return registry
