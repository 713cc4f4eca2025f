# topmark:header:start
#
#   project      : StdHeader
#   file         : test_layout.py
#   file_relpath : tests/header/test_layout.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Tests for the fixed-width line renderers in `stdheader.header.layout`."""

from __future__ import annotations

import pytest

from stdheader.config.types import ArtJustify
from stdheader.core.errors import ArtTooWideError
from stdheader.header.delimiters import CommentDelimiters
from stdheader.header.layout import (
    content_width,
    render_art_block,
    render_border,
    render_text_line,
)
from tests.conftest import C_DELIMITERS, make_config, parametrize


def test_text_line_is_exactly_length_wide() -> None:
    """A text line with ordinary delimiters fills the configured width."""
    config = make_config()
    line: str = render_text_line("main.c", ":+:", config, C_DELIMITERS)

    assert len(line) == 80
    assert line.startswith("/*   main.c")
    assert line.endswith(":+:   */")


def test_long_text_is_truncated_to_available_width() -> None:
    """Text longer than length - 2*margin - len(art) is cut silently."""
    config = make_config()
    text: str = "x" * 100
    line: str = render_text_line(text, "abc", config, C_DELIMITERS)

    assert len(line) == 80
    assert line == "/*   " + "x" * 67 + "abc" + "   */"


def test_text_exactly_filling_the_width_is_kept() -> None:
    config = make_config()
    text: str = "y" * 67
    line: str = render_text_line(text, "abc", config, C_DELIMITERS)

    assert text in line
    assert len(line) == 80


def test_empty_art_token_pads_to_the_right_margin() -> None:
    config = make_config()
    line: str = render_text_line("", "", config, C_DELIMITERS)

    assert line == "/*" + " " * 76 + "*/"


def test_margin_shrinks_by_delimiter_width() -> None:
    """The padding between delimiter and content is margin - len(delimiter)."""
    config = make_config()
    pound: str = render_text_line("abc", "", config, CommentDelimiters("#", "#"))
    xml: str = render_text_line("abc", "", config, CommentDelimiters("<!--", "-->"))

    assert pound.startswith("#    abc")
    assert xml.startswith("<!-- abc")
    assert len(pound) == len(xml) == 80


def test_delimiter_wider_than_margin_gets_no_padding() -> None:
    """Overlong delimiters overflow the line instead of raising."""
    config = make_config(margin=2)
    line: str = render_text_line("abc", "", config, CommentDelimiters("<!--", "-->"))

    assert line.startswith("<!--abc")
    assert len(line) > 80


def test_content_width_is_clamped_at_zero() -> None:
    """A compact token wider than the content area leaves no room for text."""
    config = make_config(length=20, margin=5)

    assert content_width(config, "z" * 30) == 0
    assert "hello" not in render_text_line("hello", "z" * 30, config, C_DELIMITERS)


def test_border_fills_between_delimiters() -> None:
    config = make_config()
    border: str = render_border(config, C_DELIMITERS)

    assert border == "/* " + "*" * 74 + " */"
    assert len(border) == 80


@parametrize(
    "left,right",
    [("#", "#"), ("//", "//"), ("--", "--"), ("<!--", "-->"), (";;", ";;")],
)
def test_border_width_for_common_delimiters(left: str, right: str) -> None:
    border: str = render_border(make_config(), CommentDelimiters(left, right))

    assert len(border) == 80
    assert border.startswith(f"{left} *")
    assert border.endswith(f"* {right}")


def test_art_block_right_justified_by_default() -> None:
    config = make_config()
    lines: list[str] = render_art_block(["ART"], config, C_DELIMITERS)

    assert lines == ["/*   " + " " * 67 + "ART" + "   */"]


def test_art_block_left_justified() -> None:
    config = make_config(extended_justify=ArtJustify.LEFT)
    lines: list[str] = render_art_block(["ART"], config, C_DELIMITERS)

    assert lines == ["/*   ART" + " " * 67 + "   */"]


def test_art_block_renders_one_line_per_entry() -> None:
    entries: list[str] = ["a", "bb", "", "cccc"]
    lines: list[str] = render_art_block(entries, make_config(), C_DELIMITERS)

    assert len(lines) == len(entries)
    assert all(len(line) == 80 for line in lines)


def test_art_entry_filling_the_content_width_fits() -> None:
    lines: list[str] = render_art_block(["=" * 70], make_config(), C_DELIMITERS)

    assert lines == ["/*   " + "=" * 70 + "   */"]


def test_art_entry_too_wide_fails_the_whole_block() -> None:
    """One over-wide entry aborts rendering; no partial block is returned."""
    with pytest.raises(ArtTooWideError) as excinfo:
        render_art_block(["ok", "=" * 71, "ok"], make_config(), C_DELIMITERS)

    assert excinfo.value.entry == "=" * 71
    assert excinfo.value.width == 81
    assert excinfo.value.limit == 80
    assert "too wide" in str(excinfo.value)
