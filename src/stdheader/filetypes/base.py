# topmark:header:start
#
#   project      : StdHeader
#   file         : base.py
#   file_relpath : src/stdheader/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""File type definition used to pick the comment delimiters of a document.

A `FileType` couples name-based recognition rules (extensions, exact filenames,
basename patterns) with the editor-style comment string (``"/* %s */"``) that
the header is wrapped in.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from stdheader.config.logging import get_logger
from stdheader.header.delimiters import CommentDelimiters

if TYPE_CHECKING:
    from pathlib import Path

    from stdheader.config.logging import StdheaderLogger

logger: StdheaderLogger = get_logger(__name__)


@dataclass
class FileType:
    """A file type recognized by StdHeader.

    Attributes:
        name (str): Internal identifier (e.g. ``"python"``).
        extensions (list[str]): Filename extensions including the leading dot.
        filenames (list[str]): Exact basenames (e.g. ``"Makefile"``).
        patterns (list[str]): Regular expressions matched against the basename
            with `re.fullmatch`.
        comment_string (str): Comment template with a ``%s`` placeholder.
        description (str): Human-readable description.
    """

    name: str
    extensions: list[str]
    filenames: list[str]
    patterns: list[str]
    comment_string: str
    description: str

    _compiled_patterns: list[re.Pattern[str]] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def delimiters(self) -> CommentDelimiters:
        """Comment delimiters parsed from `comment_string`."""
        return CommentDelimiters.from_comment_string(self.comment_string)

    def matches(self, path: Path) -> bool:
        """Return True if ``path`` belongs to this file type (by name only)."""
        # 1) Extension match (simple suffix)
        if self.extensions and path.suffix in self.extensions:
            return True

        # 2) Exact basename
        if path.name in self.filenames:
            return True

        # 3) Regex patterns against basename (cached)
        if self.patterns:
            if self._compiled_patterns is None:
                try:
                    self._compiled_patterns = [re.compile(p) for p in self.patterns]
                except re.error as exc:
                    logger.warning("Invalid pattern in file type %s: %s", self.name, exc)
                    self._compiled_patterns = []
            return any(regex.fullmatch(path.name) for regex in self._compiled_patterns)

        return False
