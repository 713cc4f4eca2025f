# topmark:header:start
#
#   project      : StdHeader
#   file         : document.py
#   file_relpath : src/stdheader/document.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Documents the header core reads from and writes to.

The core only needs a handful of capabilities from the host (see
`DocumentLike`): read the first lines, check writability, replace or prepend
lines. Two implementations are provided:

- `TextDocument`: an in-memory list of lines (STDIN mode, tests, embedding).
- `FileDocument`: a text file on disk. The newline style, a leading UTF-8 BOM
  and the presence of a final newline are captured on load and restored on
  `FileDocument.save`.

Lines are stored **without** line terminators.
"""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from stdheader.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stdheader.config.logging import StdheaderLogger

logger: StdheaderLogger = get_logger(__name__)

BOM: str = "\ufeff"


@runtime_checkable
class DocumentLike(Protocol):
    """Minimal document surface consumed by `stdheader.header.updater`."""

    @property
    def filename(self) -> str:
        """Base name shown on the header's filename line."""
        ...

    def first_lines(self, n: int) -> list[str]:
        """Return up to ``n`` leading lines (fewer when the document is shorter)."""
        ...

    def first_line(self) -> str | None:
        """Return the first line, or None for an empty document."""
        ...

    def is_writable(self) -> bool:
        """Return True if the document accepts edits."""
        ...

    def replace_first_lines(self, n: int, new_lines: Sequence[str]) -> None:
        """Replace the first ``n`` lines with ``new_lines``."""
        ...

    def prepend_lines(self, new_lines: Sequence[str]) -> None:
        """Insert ``new_lines`` before the first line."""
        ...


def split_lines(text: str) -> tuple[list[str], str | None, bool]:
    """Split ``text`` into lines without terminators.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line (unlike `str.splitlines`).

    Returns:
        tuple[list[str], str | None, bool]: The lines, the first newline sequence
            seen (None if there is none) and whether the text ends with a newline.
    """
    raw: list[str] = io.StringIO(text, newline="").readlines()
    newline: str | None = None
    lines: list[str] = []
    for line in raw:
        stripped: str = line.rstrip("\r\n")
        if newline is None and stripped != line:
            newline = line[len(stripped) :]
        lines.append(stripped)
    ends_with_newline: bool = bool(raw) and raw[-1] != raw[-1].rstrip("\r\n")
    return lines, newline, ends_with_newline


class TextDocument:
    """In-memory document.

    Args:
        lines (Sequence[str]): Document lines without terminators.
        filename (str): Name shown in the header.
        writable (bool): Whether edits are allowed.
        newline (str): Line terminator used by `to_text`.
        ends_with_newline (bool): Whether `to_text` terminates the last line.
    """

    def __init__(
        self,
        lines: Sequence[str] = (),
        *,
        filename: str = "",
        writable: bool = True,
        newline: str = "\n",
        ends_with_newline: bool = True,
    ) -> None:
        self.lines: list[str] = list(lines)
        self._filename = filename
        self.writable = writable
        self.newline = newline
        self.ends_with_newline = ends_with_newline
        self.bom: bool = False

    @classmethod
    def from_text(cls, text: str, *, filename: str = "", writable: bool = True) -> TextDocument:
        """Build a document from raw text, keeping its newline conventions."""
        bom: bool = text.startswith(BOM)
        if bom:
            text = text[len(BOM) :]
        lines, newline, ends_with_newline = split_lines(text)
        doc = cls(
            lines,
            filename=filename,
            writable=writable,
            newline=newline or "\n",
            ends_with_newline=ends_with_newline or not lines,
        )
        doc.bom = bom
        return doc

    @property
    def filename(self) -> str:
        """Base name shown on the header's filename line."""
        return self._filename

    def first_lines(self, n: int) -> list[str]:
        """Return up to ``n`` leading lines."""
        return self.lines[:n]

    def first_line(self) -> str | None:
        """Return the first line, or None for an empty document."""
        return self.lines[0] if self.lines else None

    def is_writable(self) -> bool:
        """Return True if the document accepts edits."""
        return self.writable

    def replace_first_lines(self, n: int, new_lines: Sequence[str]) -> None:
        """Replace the first ``n`` lines with ``new_lines``."""
        self.lines[:n] = list(new_lines)

    def prepend_lines(self, new_lines: Sequence[str]) -> None:
        """Insert ``new_lines`` before the first line."""
        self.lines[:0] = list(new_lines)

    def to_text(self) -> str:
        """Join the lines back into text with the captured conventions."""
        text: str = self.newline.join(self.lines)
        if self.lines and self.ends_with_newline:
            text += self.newline
        return (BOM + text) if self.bom else text


class FileDocument(TextDocument):
    """Text file on disk, loaded eagerly and written back on `save`.

    Args:
        path (Path): File to edit.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        # newline="" keeps \r\n and \r intact for split_lines.
        with self.path.open(encoding="utf-8", errors="strict", newline="") as f:
            text: str = f.read()
        loaded: TextDocument = TextDocument.from_text(text, filename=self.path.name)
        super().__init__(
            loaded.lines,
            filename=self.path.name,
            writable=os.access(self.path, os.W_OK),
            newline=loaded.newline,
            ends_with_newline=loaded.ends_with_newline,
        )
        self.bom = loaded.bom
        logger.debug(
            "Loaded %s: %d lines, newline=%r, writable=%s",
            self.path,
            len(self.lines),
            self.newline,
            self.writable,
        )

    def save(self) -> int:
        """Write the document back in place.

        Returns:
            int: Number of UTF-8 bytes written.
        """
        text: str = self.to_text()
        with open(self.path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        written: int = len(text.encode("utf-8"))
        logger.debug("Wrote %d bytes to %s", written, self.path)
        return written
