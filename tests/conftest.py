# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from rich.console import Console

from kaam.cli.bootstrap import create_store
from kaam.config import Settings
from kaam.tasks.task_store import TaskStore

from .helpers import make_console


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at files under tmp_path.

    Built directly instead of from_env() so tests never touch ~/.kaam.
    """
    return Settings(
        task_path=tmp_path / "kaam.txt",
        backup_path=tmp_path / "bak" / "kaam_bak",
        backup_enabled=True,
    )


@pytest.fixture()
def restore_root_logger() -> Iterator[None]:
    """setup_logging() replaces root handlers (pytest's included); put them back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture()
def console() -> Console:
    return make_console()


@pytest.fixture()
def store(settings: Settings, console: Console) -> TaskStore:
    return create_store(settings=settings, console=console)
