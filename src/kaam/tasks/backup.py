# src/kaam/tasks/backup.py

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .task_models import BackupError, BackupMissingError

logger = logging.getLogger(__name__)


class BackupManager:
    """
    Single-slot backup of the task file.

    - save() overwrites the slot with the current task file
    - restore() copies the slot back over the task file; the slot is kept
    There is no versioning: a second save() loses the previous backup.
    """

    def __init__(self, task_path: str | Path, backup_path: str | Path, *, enabled: bool = True) -> None:
        self.task_path = Path(task_path)
        self.backup_path = Path(backup_path)
        self.enabled = enabled

    def has_backup(self) -> bool:
        return self.backup_path.is_file()

    def save(self) -> None:
        try:
            self.backup_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy(self.task_path, self.backup_path)
        except OSError as e:
            logger.error("Backup of %s to %s failed: %s", self.task_path, self.backup_path, e)
            raise BackupError("Couldn't backup the kaam file.") from e
        logger.info("Backed up %s to %s", self.task_path, self.backup_path)

    def restore(self) -> None:
        if not self.has_backup():
            raise BackupMissingError(f"Couldn't restore the kaam file: no backup at {self.backup_path}")
        try:
            self.task_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy(self.backup_path, self.task_path)
        except OSError as e:
            raise BackupError(f"Couldn't restore the kaam file from backup: {e}") from e
        logger.info("Restored %s from %s", self.task_path, self.backup_path)
