# topmark:header:start
#
#   project      : StdHeader
#   file         : composer.py
#   file_relpath : src/stdheader/header/composer.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Header composer: the full ordered sequence of header lines.

Layout (0-based indices, ``k`` extended art lines)::

    0        top border
    1        blank
    2        blank + art[0]
    3        filename + art[1]
    4        blank + art[2]
    5        "By: <user> <<email>>" + art[3]
    6        blank + art[4]
    7        "Created: <timestamp> by <user>" + art[5]
    8        "Updated: <timestamp> by <user>" + art[6]
    9        blank
    10..     extended art (k lines)
    10 + k   bottom border

Composition is deterministic for a given config, filename, timestamp and
identity; a header is rebuilt from scratch on every invocation.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from stdheader.config.logging import get_logger
from stdheader.constants import TIMESTAMP_FORMAT
from stdheader.header.layout import render_art_block, render_border, render_text_line

if TYPE_CHECKING:
    from datetime import datetime

    from stdheader.config.logging import StdheaderLogger
    from stdheader.config.model import Config
    from stdheader.header.delimiters import CommentDelimiters
    from stdheader.header.identity import IdentityResolver

logger: StdheaderLogger = get_logger(__name__)


@dataclass(frozen=True)
class Header(Sequence[str]):
    """An immutable, ordered sequence of rendered header lines."""

    lines: tuple[str, ...]

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[str]: ...

    def __getitem__(self, index: int | slice) -> str | Sequence[str]:
        return self.lines[index]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def replace_lines(self, replacements: dict[int, str]) -> Header:
        """Return a copy with the lines at the given indices replaced."""
        lines: list[str] = list(self.lines)
        for index, line in replacements.items():
            lines[index] = line
        return Header(tuple(lines))


def format_timestamp(now: datetime) -> str:
    """Format ``now`` the way it appears in the Created/Updated lines."""
    return now.strftime(TIMESTAMP_FORMAT)


def compose_header(
    config: Config,
    filename: str,
    now: datetime,
    delimiters: CommentDelimiters,
    identity: IdentityResolver,
) -> Header:
    """Compose a fresh header.

    Args:
        config (Config): Layout and art settings.
        filename (str): Base name shown on the filename line.
        now (datetime): Timestamp used for both Created and Updated lines.
        delimiters (CommentDelimiters): Comment symbols of the target document.
        identity (IdentityResolver): Source of the user name and email.

    Returns:
        Header: The complete header.

    Raises:
        ArtTooWideError: If the extended art does not fit; no header is produced.
    """
    art: tuple[str, ...] = config.compact_art
    user: str = identity.resolve_user()
    email: str = identity.resolve_email()
    date: str = format_timestamp(now)

    def line(text: str, token: str = "") -> str:
        return render_text_line(text, token, config, delimiters)

    # Raises before anything is assembled.
    extended: list[str] = render_art_block(config.extended_art, config, delimiters)

    border: str = render_border(config, delimiters)
    empty: str = line("")

    lines: list[str] = [
        border,
        empty,
        line("", art[0]),
        line(filename, art[1]),
        line("", art[2]),
        line(f"By: {user} <{email}>", art[3]),
        line("", art[4]),
        line(f"Created: {date} by {user}", art[5]),
        line(f"Updated: {date} by {user}", art[6]),
        empty,
        *extended,
        border,
    ]
    logger.trace("Composed header for %s:\n%s", filename, "\n".join(lines))
    return Header(tuple(lines))
