# src/kaam/tasks/codec.py

"""
Line codec for task entries.

Three encodings:
- storage: "[*] text\\n" / "[ ] text\\n", one line per entry in the task file
- display: "<n>: text\\n" for `kaam list`; done entries are struck through
- raw: "text\\n" for scripts

Decoding is deliberately lenient about the marker: only "[*] " means done,
any other 4-character prefix reads back as an open task.
"""

from __future__ import annotations

from rich.text import Text

from .task_models import Entry, MalformedLineError

DONE_MARKER = "[*] "
OPEN_MARKER = "[ ] "
MARKER_WIDTH = len(DONE_MARKER)

_LINE_BREAKS = ("\n", "\r")


def encode_storage(entry: Entry) -> str:
    if any(ch in entry.text for ch in _LINE_BREAKS):
        raise ValueError(f"task text must be a single line: {entry.text!r}")
    marker = DONE_MARKER if entry.done else OPEN_MARKER
    return f"{marker}{entry.text}\n"


def decode_storage(line: str) -> Entry:
    if line.endswith("\n"):
        line = line[:-1]
    if len(line) < MARKER_WIDTH:
        raise MalformedLineError(f"malformed task line (shorter than marker): {line!r}")
    return Entry(text=line[MARKER_WIDTH:], done=line[:MARKER_WIDTH] == DONE_MARKER)


def encode_display(entry: Entry, ordinal: int) -> Text:
    """Render one `kaam list` line. Styles are dropped on non-terminals."""
    line = Text()
    if entry.done:
        line.append(str(ordinal), style="bold")
        line.append(": ")
        line.append(entry.text, style="strike")
    else:
        line.append(f"{ordinal}: {entry.text}")
    line.append("\n")
    return line


def encode_raw(entry: Entry) -> str:
    return f"{entry.text}\n"
