# src/kaam/config.py

"""Settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per process, built once in the CLI and passed down.
- Every variable has an upper-case KAAM_* name; the lower-case kaam_* names
  used by older installs are still honored.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "KAAM"
LEGACY_ENV_PREFIX = "kaam"

DEFAULT_BACKUP_PATH = Path("/tmp/kaam_bak")
DEFAULT_LOG_LEVEL = "WARNING"

ENV_VARS = {
    "KAAM_PATH": "Task file path (default: ~/.kaam if present, else ~/.local/share/kaam/kaam.txt).",
    "KAAM_BAK_DIR": "Backup file written by reset and read by restore (default: /tmp/kaam_bak).",
    "KAAM_NO_BACKUP": "If set (any value), reset deletes the task file without a backup.",
    "KAAM_LOG_LEVEL": "Console logging level (default: WARNING).",
    "KAAM_LOG_FILE": "Optional file that receives full DEBUG logs.",
}


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _legacy(suffix: str) -> str:
    return f"{LEGACY_ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_present(*names: str) -> bool:
    return any(os.getenv(n) is not None for n in names)


def _env_path(*names: str, default: Path | None) -> Path | None:
    raw = _first_env(*names)
    if raw is None:
        return default
    return Path(raw).expanduser()


def legacy_task_path() -> Path:
    return Path.home() / ".kaam"


def default_task_path() -> Path:
    return Path.home() / ".local" / "share" / "kaam" / "kaam.txt"


def _resolve_task_path() -> Path:
    explicit = _env_path(_k("PATH"), _legacy("PATH"), default=None)
    if explicit is not None:
        return explicit
    legacy = legacy_task_path()
    if legacy.exists():
        return legacy
    return default_task_path()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Files ----
    task_path: Path
    backup_path: Path
    backup_enabled: bool

    # ---- Logging ----
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None

    @staticmethod
    def from_env(*, use_dotenv: bool = True) -> "Settings":
        if use_dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        task_path = _resolve_task_path()
        backup_path = _env_path(_k("BAK_DIR"), _legacy("BAK_DIR"), default=None) or DEFAULT_BACKUP_PATH

        # Presence alone disables the backup, even KAAM_NO_BACKUP=0.
        backup_enabled = not _env_present(_k("NO_BACKUP"), _legacy("NO_BACKUP"))

        log_level = _env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
        log_file = _env_path(_k("LOG_FILE"), default=None)

        return Settings(
            task_path=task_path,
            backup_path=backup_path,
            backup_enabled=backup_enabled,
            log_level=log_level,
            log_file=log_file,
        )


def get_settings() -> Settings:
    return Settings.from_env()
