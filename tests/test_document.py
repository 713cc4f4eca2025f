# topmark:header:start
#
#   project      : StdHeader
#   file         : test_document.py
#   file_relpath : tests/test_document.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Tests for the document implementations in `stdheader.document`."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

import pytest

from stdheader.document import BOM, DocumentLike, FileDocument, TextDocument, split_lines
from tests.conftest import parametrize


@parametrize(
    "text,lines,newline,ends",
    [
        ("", [], None, False),
        ("a", ["a"], None, False),
        ("a\n", ["a"], "\n", True),
        ("a\r\nb\r\n", ["a", "b"], "\r\n", True),
        ("a\rb", ["a", "b"], "\r", False),
        ("a\n\nb\n", ["a", "", "b"], "\n", True),
        ("a b\n", ["a b"], "\n", True),
    ],
)
def test_split_lines(text: str, lines: list[str], newline: str | None, ends: bool) -> None:
    assert split_lines(text) == (lines, newline, ends)


def test_text_document_round_trip_keeps_conventions() -> None:
    text: str = BOM + "one\r\ntwo"
    document: TextDocument = TextDocument.from_text(text, filename="x.c")

    assert document.lines == ["one", "two"]
    assert document.to_text() == text


def test_text_document_protocol_operations() -> None:
    document = TextDocument(["a", "b", "c"], filename="x.c")

    assert isinstance(document, DocumentLike)
    assert document.first_line() == "a"
    assert document.first_lines(2) == ["a", "b"]
    assert document.first_lines(10) == ["a", "b", "c"]

    document.replace_first_lines(2, ["x", "y", "z"])
    assert document.lines == ["x", "y", "z", "c"]

    document.prepend_lines(["h"])
    assert document.lines == ["h", "x", "y", "z", "c"]


def test_empty_document_has_no_first_line() -> None:
    document = TextDocument.from_text("")

    assert document.first_line() is None
    assert document.to_text() == ""


def test_file_document_save_preserves_newlines(tmp_path: Path) -> None:
    path: Path = tmp_path / "crlf.c"
    path.write_bytes(b"int a;\r\nint b;\r\n")

    document = FileDocument(path)
    document.prepend_lines(["// hi"])
    written: int = document.save()

    assert path.read_bytes() == b"// hi\r\nint a;\r\nint b;\r\n"
    assert written == len(b"// hi\r\nint a;\r\nint b;\r\n")
    assert document.filename == "crlf.c"


def test_file_document_keeps_lone_cr_and_missing_final_newline(tmp_path: Path) -> None:
    path: Path = tmp_path / "old_mac.c"
    path.write_bytes(b"int a;\rint b;")

    document = FileDocument(path)
    assert document.lines == ["int a;", "int b;"]
    assert document.newline == "\r"
    assert not document.ends_with_newline

    document.prepend_lines(["// hi"])
    document.save()

    assert path.read_bytes() == b"// hi\rint a;\rint b;"


@pytest.mark.skipif(
    sys.platform.startswith("win") or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced",
)
def test_file_document_read_only(tmp_path: Path) -> None:
    path: Path = tmp_path / "ro.c"
    path.write_text("x\n", encoding="utf-8")
    path.chmod(stat.S_IRUSR)
    try:
        assert not FileDocument(path).is_writable()
    finally:
        path.chmod(stat.S_IRUSR | stat.S_IWUSR)
