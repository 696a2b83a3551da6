# src/kaam/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..config import ENV_VARS
from ..tasks.task_store import TaskStore

CommandHandler = Callable[[TaskStore, list[str]], None]

logger = logging.getLogger(__name__)

HELP_HEADER = """Usage: kaam [COMMAND] [ARGUMENTS]
kaam keeps your tasks in one plain-text file.
Example: kaam list
Commands:"""


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    usage: str
    example: str | None = None


class CommandRegistry:
    """Maps the first CLI token (list, add, rm, ...) to a TaskStore operation."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        usage: str | None = None,
        example: str | None = None,
    ) -> None:
        self._commands[name] = Command(
            name=name,
            handler=handler,
            help_text=help_text,
            usage=usage or name,
            example=example,
        )

    def get(self, name: str) -> Command | None:
        """Exact, case-sensitive lookup. None means "show help"."""
        return self._commands.get(name)

    def build_help(self) -> str:
        lines = [HELP_HEADER]
        for cmd in self._commands.values():
            lines.append(f"    - {cmd.usage}")
            lines.append(f"        {cmd.help_text}")
            if cmd.example:
                lines.append(f"        Example: {cmd.example}")
        lines.append("Environment:")
        for var, text in ENV_VARS.items():
            lines.append(f"    {var}: {text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_list(store: TaskStore, args: list[str]) -> None:
    store.list_tasks()


def cmd_add(store: TaskStore, args: list[str]) -> None:
    added = store.add(args)
    logger.info("Added %d task(s).", added)


def cmd_rm(store: TaskStore, args: list[str]) -> None:
    store.remove(args)


def cmd_done(store: TaskStore, args: list[str]) -> None:
    store.done(args)


def cmd_edit(store: TaskStore, args: list[str]) -> None:
    store.edit(args)


def cmd_sort(store: TaskStore, args: list[str]) -> None:
    store.sort()


def cmd_raw(store: TaskStore, args: list[str]) -> None:
    store.raw(args)


def cmd_reset(store: TaskStore, args: list[str]) -> None:
    store.reset()


def cmd_restore(store: TaskStore, args: list[str]) -> None:
    store.restore()


registry.register("add", cmd_add, "adds new task/s", usage="add [TASK/s]", example='kaam add "academic comeback"')
registry.register("edit", cmd_edit, "edits an existing task", usage="edit [INDEX] [EDITED TASK]", example="kaam edit 1 banana")
registry.register("list", cmd_list, "lists all tasks", example="kaam list")
registry.register(
    "done",
    cmd_done,
    "marks task as done (or back to open if it already is)",
    usage="done [INDEX]",
    example="kaam done 2 3 (toggles the second and third tasks)",
)
registry.register("rm", cmd_rm, "removes a task", usage="rm [INDEX]", example="kaam rm 4")
registry.register("reset", cmd_reset, "deletes all tasks (backed up first unless KAAM_NO_BACKUP is set)")
registry.register("restore", cmd_restore, "restores the most recent backup after reset")
registry.register("sort", cmd_sort, "moves completed tasks below uncompleted ones", example="kaam sort")
registry.register(
    "raw",
    cmd_raw,
    "prints only done or open tasks in plain text, useful for scripting",
    usage="raw [kaam/done]",
    example="kaam raw done",
)
