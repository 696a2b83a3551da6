# src/kaam/cli/main.py

"""
CLI entrypoint.

Builds settings once, configures logging, loads the task file and runs a
single command. Every error the user can cause (bad arguments, missing
backup, unreadable or malformed task file) exits with status 1.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from rich.console import Console

from ..config import Settings, get_settings
from ..logging_setup import level_from_name, setup_logging
from ..tasks.task_models import KaamError
from .bootstrap import create_store
from .commands import registry

logger = logging.getLogger(__name__)


def print_help(console: Console) -> None:
    console.print(registry.build_help(), style="bold green", markup=False, highlight=False, soft_wrap=True)


def run(
    argv: Sequence[str],
    *,
    settings: Settings,
    console: Console | None = None,
    err_console: Console | None = None,
) -> int:
    """Run one command (argv without the program name) and return the exit status."""
    console = console or Console(highlight=False)
    err_console = err_console or Console(stderr=True, highlight=False)

    if not argv:
        return 0

    name, args = argv[0], list(argv[1:])
    command = registry.get(name)
    if command is None:
        # help, --help, -h and anything unrecognized
        print_help(console)
        return 0

    try:
        store = create_store(settings=settings, console=console)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Task file load failed path=%s", settings.task_path, exc_info=True)
        err_console.print(f"Couldn't open the kaam file {settings.task_path}: {e}", markup=False, soft_wrap=True)
        return 1

    try:
        command.handler(store, args)
    except KaamError as e:
        err_console.print(str(e), markup=False, soft_wrap=True)
        return 1
    except OSError as e:
        logger.debug("kaam %s failed", name, exc_info=True)
        err_console.print(f"kaam {name} failed: {e}", markup=False, soft_wrap=True)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    setup_logging(console_level=level_from_name(settings.log_level), log_file=settings.log_file)
    logger.debug("Settings: %s", settings)
    return run(sys.argv[1:] if argv is None else argv, settings=settings)


if __name__ == "__main__":
    sys.exit(main())
