# src/kaam/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures the parent directories of the configured files exist,
- wires the backup slot and the output console into a TaskStore.
"""

from __future__ import annotations

import logging

from rich.console import Console

from ..config import Settings, get_settings
from ..tasks.backup import BackupManager
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.task_path.parent.mkdir(parents=True, exist_ok=True)


def create_store(*, settings: Settings | None = None, console: Console | None = None) -> TaskStore:
    """
    Build the TaskStore for this invocation (reads the task file once).

    Settings are injectable for tests; None falls back to get_settings().
    OSError from creating or reading the task file propagates.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    backup = BackupManager(settings.task_path, settings.backup_path, enabled=settings.backup_enabled)
    if not backup.enabled:
        logger.debug("Backups disabled; reset will not keep a copy.")

    return TaskStore(settings.task_path, backup=backup, console=console)
