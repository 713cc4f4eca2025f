# topmark:header:start
#
#   project      : StdHeader
#   file         : strategies_stdheader.py
#   file_relpath : tests/strategies_stdheader.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Hypothesis strategies for header layouts, comment styles and document bodies.

The alphabets stay within printable ASCII so the rendered width of a line is
its length in code points.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from stdheader.header.delimiters import CommentDelimiters

Draw = Callable[[st.SearchStrategy[Any]], Any]

LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n")

#: Delimiter pairs that fit within the default margin of 5.
DELIMITER_PAIRS: tuple[CommentDelimiters, ...] = (
    CommentDelimiters("#", "#"),
    CommentDelimiters("/*", "*/"),
    CommentDelimiters("//", "//"),
    CommentDelimiters("--", "--"),
    CommentDelimiters("<!--", "-->"),
    CommentDelimiters(";;", ";;"),
)

PRINTABLE: st.SearchStrategy[str] = st.characters(min_codepoint=0x20, max_codepoint=0x7E)


def s_header_text(max_size: int = 120) -> st.SearchStrategy[str]:
    """Single-line header text, possibly longer than any layout allows."""
    return st.text(alphabet=PRINTABLE, min_size=0, max_size=max_size)


def s_filename() -> st.SearchStrategy[str]:
    """Plausible base names, some of them long enough to be truncated."""
    return st.from_regex(r"[A-Za-z0-9_][A-Za-z0-9_.\-]{0,90}", fullmatch=True)


def s_delimiters() -> st.SearchStrategy[CommentDelimiters]:
    """One of the common delimiter pairs."""
    return st.sampled_from(DELIMITER_PAIRS)


@st.composite
def s_layout(draw: Draw) -> tuple[int, int]:
    """A ``(length, margin)`` pair wide enough for the compact art."""
    margin: int = draw(st.integers(min_value=4, max_value=8))
    length: int = draw(st.integers(min_value=60, max_value=160))
    return length, margin


@st.composite
def s_document_body(draw: Draw) -> tuple[str, str]:
    """Generate a document body and the line ending it uses.

    Returns:
        tuple[str, str]: The text (possibly empty) and its line ending.
    """
    le: str = draw(st.sampled_from(LINE_ENDINGS))
    lines: list[str] = draw(st.lists(s_header_text(60), min_size=0, max_size=8))
    if not lines:
        return "", le
    return le.join(lines) + le, le
