# src/omni/core/replies.py

"""Plain-text replies. Connectors decide how to frame and print them."""

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import Task

INDENT = "    "


def greet(app_name: str = "Omni") -> str:
    return f"Helloo! I'm {app_name}!\nWhat can I do for you?"


def farewell() -> str:
    return "Byeee! See you in a bit!"


def _numbered(tasks: Sequence[Task]) -> list[str]:
    return [f"{INDENT}{i}.{t}" for i, t in enumerate(tasks, start=1)]


def task_list(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "You have no tasks... Add one!"
    return "\n".join(["Here are the tasks you've added:", *_numbered(tasks)])


def matching_tasks(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "No tasks containing that keyword. Try another one!"
    return "\n".join(["Here are the matching tasks in your list:", *_numbered(tasks)])


def added(task: Task, total: int) -> str:
    noun = "task" if total == 1 else "tasks"
    return f"Got it. I've added this task:\n  {task}\nNow you have {total} {noun} in the list."


def marked(task: Task) -> str:
    return f"Congrats! I've marked this task as done:\n  {task}"


def unmarked(task: Task) -> str:
    return f"Sure thing, I've marked this task as not done yet:\n  {task}"


def deleted(task: Task, total: int) -> str:
    noun = "task" if total == 1 else "tasks"
    return f"Gotchu, I've deleted this task for you:\n  {task}\nNow you have {total} {noun} in the list."


def updated(task: Task) -> str:
    return f"Done! I've updated this task:\n  {task}"
