# topmark:header:start
#
#   project      : StdHeader
#   file         : test_diff.py
#   file_relpath : tests/test_diff.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Tests for the diff helpers used by ``apply --diff``."""

from __future__ import annotations

from stdheader.utils.diff import compute_diff, render_patch


def test_compute_diff_identical_is_empty() -> None:
    assert compute_diff(["a", "b"], ["a", "b"], "x.c") == []


def test_compute_diff_headers_and_hunks() -> None:
    diff: list[str] = compute_diff(["a", "b"], ["a", "c"], "x.c")

    assert diff[0] == "--- x.c (current)"
    assert diff[1] == "+++ x.c (updated)"
    assert "-b" in diff
    assert "+c" in diff


def test_render_patch_keeps_content_and_numbers_lines() -> None:
    out: str = render_patch(["-old", "+new"], show_line_numbers=True)

    assert out.count("\n") == 2
    assert "0001|" in out
    assert "old" in out
    assert "new" in out
