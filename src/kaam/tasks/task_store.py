# src/kaam/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
import shutil
from collections.abc import Iterable, Sequence
from pathlib import Path

from rich.color import ColorSystem
from rich.console import Console
from rich.text import Text

from .backup import BackupManager
from .codec import decode_storage, encode_display, encode_raw, encode_storage
from .task_models import BackupMissingError, Entry, KaamError, RawFilter, UsageError

logger = logging.getLogger(__name__)


def _split_lines(contents: str) -> list[str]:
    """Split file contents into lines without terminators (\\n or \\r\\n)."""
    if not contents:
        return []
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _storage_line(entry: Entry) -> str:
    return encode_storage(entry).removesuffix("\n")


_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


def _verbatim(text: Text, console: Console) -> str:
    """
    Flatten styled text for direct output.

    console.print() expands tabs and strips control characters; task text
    must reach stdout unchanged, so only the style codes are added here,
    and only when the console has a color system (a terminal).
    """
    color_system = _COLOR_SYSTEMS.get(console.color_system or "")
    return "".join(
        seg.style.render(seg.text, color_system=color_system) if seg.style else seg.text
        for seg in text.render(console)
    )


class TaskStore:
    """
    Plain-text task store.

    The whole file is read once, at construction, into `lines` (one raw
    storage line per entry, without the newline). Entries are addressed by
    their 1-based position in that list; positions are never stored.

    Writes:
    - add() appends to the file, existing lines are not touched
    - every other mutation rewrites the whole file (temp file + os.replace)
    """

    def __init__(
        self,
        path: str | Path,
        *,
        backup: BackupManager | None = None,
        console: Console | None = None,
    ) -> None:
        self._path = Path(path)
        self._backup = backup
        self.console = console or Console(highlight=False)
        self._missing_final_newline = False
        self.lines: list[str] = self.load()
        logger.debug("TaskStore ready path=%s entries=%d", self._path, len(self.lines))

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def load(self) -> list[str]:
        """Read the task file, creating it empty if absent. OSError is fatal to the caller."""
        with open(self._path, "a+", encoding="utf-8", newline="") as f:
            f.seek(0)
            contents = f.read()
        self._missing_final_newline = bool(contents) and not contents.endswith("\n")
        return _split_lines(contents)

    def _rewrite(self, lines: Sequence[str]) -> None:
        target = self._path.resolve()
        tmp = target.with_name(target.name + ".tmp")
        content = "".join(f"{line}\n" for line in lines)
        try:
            with open(tmp, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            with contextlib.suppress(OSError):
                shutil.copymode(target, tmp)
            os.replace(tmp, target)
        except OSError:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
        self.lines = list(lines)
        self._missing_final_newline = False
        logger.debug("Rewrote %s entries=%d", target, len(self.lines))

    def _selected(self, positions: Iterable[str]) -> set[str]:
        wanted = set(positions)
        valid = {str(n) for n in range(1, len(self.lines) + 1)}
        for token in sorted(wanted - valid):
            logger.warning("No task at position %s, ignored.", token)
        return wanted

    # ---- queries ----

    def entries(self) -> list[Entry]:
        return [decode_storage(line) for line in self.lines]

    def list_tasks(self) -> None:
        """Print every entry numbered from 1, in one write."""
        listing = Text()
        for ordinal, line in enumerate(self.lines, start=1):
            listing.append_text(encode_display(decode_storage(line), ordinal))
        if self.lines:
            self.console.file.write(_verbatim(listing, self.console))

    def raw(self, args: Sequence[str]) -> None:
        """Print the bare text of done (`done`) or open (`kaam`) entries, one line at a time."""
        if len(args) > 1:
            raise UsageError("kaam raw takes only one argument")
        if not args:
            raise UsageError("kaam raw requires an argument")
        try:
            wanted = RawFilter(args[0])
        except ValueError:
            raise UsageError(f"kaam raw takes 'kaam' or 'done', not {args[0]!r}") from None

        out = self.console.file
        for line in self.lines:
            entry = decode_storage(line)
            if wanted.matches(entry):
                out.write(encode_raw(entry))

    # ---- mutations ----

    def add(self, texts: Sequence[str]) -> int:
        """Append each non-blank text as an open task. Returns how many were added."""
        if not texts:
            raise UsageError("kaam add requires an argument")
        try:
            new_lines = [encode_storage(Entry(text=text)) for text in texts if text.strip()]
        except ValueError as e:
            raise UsageError(str(e)) from e
        if not new_lines:
            return 0

        with open(self._path, "a", encoding="utf-8", newline="") as f:
            if self._missing_final_newline:
                f.write("\n")
            f.writelines(new_lines)
        self._missing_final_newline = False
        self.lines.extend(line.removesuffix("\n") for line in new_lines)
        logger.debug("Appended %d entries to %s", len(new_lines), self._path)
        return len(new_lines)

    def remove(self, positions: Sequence[str]) -> None:
        if not positions:
            raise UsageError("kaam rm requires an argument")
        wanted = self._selected(positions)
        kept = [line for ordinal, line in enumerate(self.lines, start=1) if str(ordinal) not in wanted]
        self._rewrite(kept)

    def done(self, positions: Sequence[str]) -> None:
        """Toggle the done flag of each addressed entry (twice is a no-op)."""
        if not positions:
            raise UsageError("kaam done requires an argument")
        wanted = self._selected(positions)
        out: list[str] = []
        for ordinal, line in enumerate(self.lines, start=1):
            if str(ordinal) in wanted:
                entry = decode_storage(line)
                entry.done = not entry.done
                line = _storage_line(entry)
            out.append(line)
        self._rewrite(out)

    def edit(self, args: Sequence[str]) -> None:
        """Replace the text at one position; the done flag is kept."""
        if len(args) != 2:
            raise UsageError("kaam edit takes exactly 2 arguments.")
        position, text = args
        self._selected([position])
        out: list[str] = []
        for ordinal, line in enumerate(self.lines, start=1):
            if str(ordinal) == position:
                entry = decode_storage(line)
                entry.text = text
                try:
                    line = _storage_line(entry)
                except ValueError as e:
                    raise UsageError(str(e)) from e
            out.append(line)
        self._rewrite(out)

    def sort(self) -> None:
        """Open entries first, then done ones; order inside each group is kept."""
        open_lines: list[str] = []
        done_lines: list[str] = []
        for line in self.lines:
            (done_lines if decode_storage(line).done else open_lines).append(line)
        self._rewrite(open_lines + done_lines)

    def reset(self) -> None:
        """Delete the task file, backing it up first unless backups are disabled."""
        if self._backup is not None and self._backup.enabled:
            # BackupError propagates and the task file stays in place.
            self._backup.save()
        try:
            self._path.unlink()
        except OSError as e:
            raise KaamError(f"Error removing kaam file: {e}") from e
        self.lines = []
        logger.info("Removed task file %s", self._path)

    def restore(self) -> None:
        if self._backup is None:
            raise BackupMissingError("Couldn't restore the kaam file: no backup configured")
        self._backup.restore()
        self.lines = self.load()
