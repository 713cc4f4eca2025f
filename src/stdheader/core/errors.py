# topmark:header:start
#
#   project      : StdHeader
#   file         : errors.py
#   file_relpath : src/stdheader/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Exceptions raised by the header core.

These are library-level errors. The CLI maps them onto Click exceptions with
exit codes (see `stdheader.cli.errors`); `stdheader.header.updater.apply_header`
turns them into warnings and leaves the document untouched.
"""

from __future__ import annotations


class StdheaderError(Exception):
    """Base class for all StdHeader core errors."""


class ArtTooWideError(StdheaderError):
    """An extended art entry does not fit the configured width and margin.

    Attributes:
        entry (str): The offending art entry.
        width (int): Visible width of the rendered line.
        limit (int): Configured total line width.
    """

    def __init__(self, entry: str, width: int, limit: int) -> None:
        self.entry = entry
        self.width = width
        self.limit = limit
        super().__init__(
            f"Extended ascii art too wide: rendered line is {width} columns, limit is {limit}"
        )


class DocumentNotWritableError(StdheaderError):
    """The target document cannot be modified."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"The document '{name}' cannot be modified.")
