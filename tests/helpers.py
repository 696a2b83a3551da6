# tests/helpers.py

from __future__ import annotations

import io
from pathlib import Path

from rich.console import Console


def make_console() -> Console:
    """Plain-text console writing into a StringIO (no ANSI codes, no wrapping)."""
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=200, highlight=False)


def output_of(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


def write_tasks(path: Path, *lines: str) -> None:
    path.write_text("".join(f"{line}\n" for line in lines), "utf-8")
