# topmark:header:start
#
#   project      : StdHeader
#   file         : test_header_properties.py
#   file_relpath : tests/test_header_properties.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Property tests for header layout, detection and the insert/update cycle."""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from stdheader.document import TextDocument
from stdheader.header.composer import Header, compose_header
from stdheader.header.delimiters import CommentDelimiters
from stdheader.header.identity import IdentityOverride, IdentityResolver
from stdheader.header.layout import content_width, render_text_line
from stdheader.header.matcher import has_header
from stdheader.header.updater import ApplyResult, HeaderAction, apply_header
from tests.conftest import FIXED_NOW, LATER_NOW, make_config, mark_property, no_git
from tests.strategies_stdheader import (
    s_delimiters,
    s_document_body,
    s_filename,
    s_header_text,
    s_layout,
)

PROPERTY_SETTINGS = settings(
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
    deadline=None,
    max_examples=60,
)


@mark_property
@PROPERTY_SETTINGS
@given(
    text=s_header_text(),
    token=st.sampled_from(["", ":::", "+#+#+#+#+#+   +#+"]),
    layout=s_layout(),
    delimiters=s_delimiters(),
)
def test_text_line_is_exactly_length_wide(
    text: str,
    token: str,
    layout: tuple[int, int],
    delimiters: CommentDelimiters,
) -> None:
    length, margin = layout
    config = make_config(length=length, margin=margin)

    line: str = render_text_line(text, token, config, delimiters)

    assert len(line) == length
    assert line.startswith(delimiters.left)
    assert line.endswith(delimiters.right)
    kept: str = text[: content_width(config, token)]
    assert kept in line


@mark_property
@PROPERTY_SETTINGS
@given(filename=s_filename(), layout=s_layout(), delimiters=s_delimiters())
def test_composed_header_is_rectangular_and_detected(
    filename: str,
    layout: tuple[int, int],
    delimiters: CommentDelimiters,
) -> None:
    length, margin = layout
    config = make_config(length=length, margin=margin)
    resolver = IdentityResolver(config, IdentityOverride("u", "u@x"), git_lookup=no_git)

    header: Header = compose_header(config, filename, FIXED_NOW, delimiters, resolver)

    assert len(header) == 11
    assert all(len(line) == length for line in header)
    assert has_header(header, [*header, "", "tail"])
    assert not has_header(header, list(header)[:-1])


@mark_property
@PROPERTY_SETTINGS
@given(body=s_document_body(), delimiters=s_delimiters())
def test_insert_then_update_keeps_body_and_size(
    body: tuple[str, str],
    delimiters: CommentDelimiters,
) -> None:
    text, le = body
    config = make_config()
    document = TextDocument.from_text(text, filename="prop.c")

    first: ApplyResult = apply_header(
        document, config, delimiters, identity=IdentityOverride("a", "a@x"), clock=lambda: FIXED_NOW
    )
    after_insert: list[str] = list(document.lines)
    second: ApplyResult = apply_header(
        document, config, delimiters, identity=IdentityOverride("b", "b@x"), clock=lambda: LATER_NOW
    )

    assert first.action is HeaderAction.INSERTED
    assert second.action is HeaderAction.UPDATED
    assert len(document.lines) == len(after_insert)
    changed: list[int] = [
        i for i, (old, new) in enumerate(zip(after_insert, document.lines)) if old != new
    ]
    assert changed == [8]
    assert document.to_text().endswith(text)
    if text:
        assert document.newline == le
