# src/kaam/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class RawFilter(StrEnum):
    """Selector accepted by `kaam raw`."""

    DONE = "done"
    KAAM = "kaam"  # not done yet

    def matches(self, entry: Entry) -> bool:
        return entry.done if self is RawFilter.DONE else not entry.done


@dataclass(slots=True)
class Entry:
    text: str
    done: bool = False


class KaamError(Exception):
    """Base class for errors the CLI reports to the user."""


class UsageError(KaamError):
    """Wrong number or kind of command arguments. Raised before any write."""


class MalformedLineError(KaamError, ValueError):
    """A stored line is too short to carry a completion marker."""


class BackupError(KaamError):
    """The backup slot could not be written, or the task file not removed."""


class BackupMissingError(BackupError):
    """`restore` was asked for but there is no backup to restore from."""
