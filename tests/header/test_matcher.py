# topmark:header:start
#
#   project      : StdHeader
#   file         : test_matcher.py
#   file_relpath : tests/header/test_matcher.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Tests for header detection in `stdheader.header.matcher`."""

from __future__ import annotations

from datetime import datetime

from stdheader.config.model import Config
from stdheader.header.composer import Header, compose_header
from stdheader.header.delimiters import CommentDelimiters
from stdheader.header.identity import IdentityOverride, IdentityResolver
from stdheader.header.matcher import has_header, signature_positions
from tests.conftest import C_DELIMITERS, FIXED_NOW, LATER_NOW, make_config, no_git


def _header(
    filename: str = "main.c",
    *,
    now: datetime = FIXED_NOW,
    user: str = "marvin",
    config: Config | None = None,
    delimiters: CommentDelimiters = C_DELIMITERS,
) -> Header:
    config = config or make_config()
    resolver = IdentityResolver(config, IdentityOverride(user=user), git_lookup=no_git)
    return compose_header(config, filename, now, delimiters, resolver)


def test_signature_positions() -> None:
    assert signature_positions(11) == [0, 1, 2, 9, 10]
    assert signature_positions(14) == [0, 1, 2, 9, 13]


def test_header_matches_itself() -> None:
    header: Header = _header()

    assert has_header(header, list(header))


def test_header_matches_other_file_user_and_time() -> None:
    """Filename, author and timestamps are not part of the signature."""
    existing: Header = _header("other.c", now=LATER_NOW, user="alice")

    assert has_header(_header(), list(existing) + ["int main(void);"])


def test_plain_document_has_no_header() -> None:
    assert not has_header(_header(), ["#include <stdio.h>", "", "int main(void);"])


def test_short_document_is_not_a_header() -> None:
    """A truncated header (document shorter than the candidate) never matches."""
    header: Header = _header()

    assert not has_header(header, list(header[:6]))
    assert not has_header(header, [])


def test_different_delimiters_do_not_match() -> None:
    pound: Header = _header(delimiters=CommentDelimiters("#", "#"))

    assert not has_header(_header(), list(pound))


def test_different_width_does_not_match() -> None:
    narrow: Header = _header(config=make_config(length=70))

    assert not has_header(_header(), list(narrow))


def test_extended_art_changes_the_bottom_border_position() -> None:
    with_art: Header = _header(config=make_config(extended_art=["x"]))

    assert not has_header(_header(), list(with_art))
    assert has_header(with_art, list(with_art))


def test_damaged_signature_line_is_not_a_header() -> None:
    lines: list[str] = list(_header())
    lines[9] = lines[9].replace(" ", "x", 5)

    assert not has_header(_header(), lines)
