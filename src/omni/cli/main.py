# src/omni/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the tasks file into AppState, then runs the
console REPL in the main thread until `bye`.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import build_registry
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import OmniError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except OmniError as e:
        logger.error("Failed to load tasks from %s: %s", settings.tasks_path, e.user_message)
        print(f"Error loading {settings.tasks_path}: {e.user_message}", file=sys.stderr)
        print(
            "Fix or remove the offending line, or set OMNI_SKIP_CORRUPTED_LINES=1 "
            "to drop corrupted lines on load.",
            file=sys.stderr,
        )
        raise SystemExit(1) from None

    run_console_loop(state, build_registry())
    logger.info("Bye.")


if __name__ == "__main__":
    main()
