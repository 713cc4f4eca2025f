# topmark:header:start
#
#   project      : StdHeader
#   file         : layout.py
#   file_relpath : src/stdheader/header/layout.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Layout engine: fixed-width header lines.

Every header line has the same shape::

    <left><left margin><content><right margin><right>

where each margin is ``margin - len(delimiter)`` spaces, so that with ordinary
delimiters a line is exactly ``length`` columns wide. Content is either header
text padded to a fixed column followed by a compact art token
(`render_text_line`), or one full-width extended art entry (`render_art_block`).

Widths are counted in code points (``len``); art may contain multi-byte glyphs.

Overflow policy:
    - Header text longer than the space left of the art column is truncated
      silently.
    - An extended art entry that does not fit fails the whole block with
      `ArtTooWideError`; a misconfigured art asset must not produce a malformed
      header.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stdheader.config.logging import get_logger
from stdheader.constants import BORDER_FILL
from stdheader.core.errors import ArtTooWideError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stdheader.config.logging import StdheaderLogger
    from stdheader.config.model import Config
    from stdheader.header.delimiters import CommentDelimiters

logger: StdheaderLogger = get_logger(__name__)


def visible_width(text: str) -> int:
    """Return the display width of ``text`` in code points."""
    return len(text)


def _margins(config: Config, delimiters: CommentDelimiters) -> tuple[str, str]:
    """Return the (left, right) margin padding for ``delimiters``.

    Delimiters longer than the margin get no padding (the line then overflows).
    """
    if len(delimiters.left) > config.margin or len(delimiters.right) > config.margin:
        logger.debug(
            "Delimiters %r/%r exceed margin %d; header lines will overflow",
            delimiters.left,
            delimiters.right,
            config.margin,
        )
    left_margin: str = " " * max(config.margin - len(delimiters.left), 0)
    right_margin: str = " " * max(config.margin - len(delimiters.right), 0)
    return left_margin, right_margin


def content_width(config: Config, art_token: str = "") -> int:
    """Return the number of text columns available next to ``art_token``."""
    return max(config.length - config.margin * 2 - visible_width(art_token), 0)


def render_text_line(
    text: str,
    art_token: str,
    config: Config,
    delimiters: CommentDelimiters,
) -> str:
    """Render one header line holding ``text`` followed by ``art_token``.

    Args:
        text (str): Header text; truncated to the available width.
        art_token (str): Compact art placed right of the text (may be empty).
        config (Config): Supplies ``length`` and ``margin``.
        delimiters (CommentDelimiters): Comment symbols framing the line.

    Returns:
        str: The rendered line, exactly ``config.length`` wide when the
            delimiters fit within the margin.
    """
    max_length: int = content_width(config, art_token)
    text = text[:max_length]
    left_margin, right_margin = _margins(config, delimiters)
    spaces: str = " " * (max_length - visible_width(text))
    return (
        f"{delimiters.left}{left_margin}{text}{spaces}{art_token}{right_margin}{delimiters.right}"
    )


def render_border(config: Config, delimiters: CommentDelimiters) -> str:
    """Render the top/bottom border: delimiters framing a run of fill characters."""
    fill_count: int = config.length - len(delimiters.left) - len(delimiters.right) - 2
    return f"{delimiters.left} {BORDER_FILL * max(fill_count, 0)} {delimiters.right}"


def render_art_block(
    art_lines: Sequence[str],
    config: Config,
    delimiters: CommentDelimiters,
) -> list[str]:
    """Render extended art entries as full-width header lines.

    Each entry is padded to the content width, on the right when
    ``config.extended_left`` is set and on the left otherwise.

    Args:
        art_lines (Sequence[str]): Extended art entries, one per output line.
        config (Config): Supplies width, margin and justification.
        delimiters (CommentDelimiters): Comment symbols framing each line.

    Returns:
        list[str]: One rendered line per entry.

    Raises:
        ArtTooWideError: If any rendered line is wider than ``config.length``.
            No partial output is returned.
    """
    left_margin, right_margin = _margins(config, delimiters)
    rendered: list[str] = []
    for entry in art_lines:
        spaces: str = " " * max(config.length - visible_width(entry) - config.margin * 2, 0)
        if config.extended_left:
            line = f"{delimiters.left}{left_margin}{entry}{spaces}{right_margin}{delimiters.right}"
        else:
            line = f"{delimiters.left}{left_margin}{spaces}{entry}{right_margin}{delimiters.right}"

        width: int = visible_width(line)
        if width > config.length:
            logger.warning("Extended ascii art too wide: %r", entry)
            raise ArtTooWideError(entry, width, config.length)
        rendered.append(line)
    return rendered
