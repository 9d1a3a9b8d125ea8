# src/omni/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..cli.commands import CommandRegistry
from ..core import replies
from ..core.ports import ReplySink
from ..core.state import AppState

logger = logging.getLogger(__name__)

HORIZONTAL_LINE = "   " + "_" * 57
INDENT = "    "


class ConsoleSink:
    """Prints each reply between two horizontal rules, indented."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out or sys.stdout

    def show(self, text: str) -> None:
        body = "\n".join(INDENT + line for line in text.splitlines())
        print(f"{HORIZONTAL_LINE}\n{body}\n{HORIZONTAL_LINE}\n", file=self._out, flush=True)


def run_console_loop(
    state: AppState,
    registry: CommandRegistry,
    sink: ReplySink | None = None,
    prompt: str = "",
) -> None:
    """Read commands until `bye`, EOF or Ctrl+C."""
    sink = sink or ConsoleSink()
    app_name = str(getattr(state.settings, "app_name", "Omni"))

    logger.info("Console connector started (tasks=%d).", state.tasks.size())
    sink.show(replies.greet(app_name))

    while True:
        try:
            user_input = input(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        try:
            result = registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            sink.show("Internal error while handling a command.")
            continue

        sink.show(result.text)
        if result.ends_session:
            logger.info("Session ended by command %r.", user_input)
            break

    logger.info("Console connector finished.")
