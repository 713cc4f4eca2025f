# topmark:header:start
#
#   project      : StdHeader
#   file         : test_filetypes.py
#   file_relpath : tests/test_filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Tests for file type resolution and comment delimiter lookup."""

from __future__ import annotations

from pathlib import Path

from stdheader.filetypes import (
    get_file_type_registry,
    resolve_comment_delimiters,
    resolve_filetype,
)
from stdheader.filetypes.base import FileType
from stdheader.header.delimiters import CommentDelimiters
from tests.conftest import parametrize


@parametrize(
    "name, expected",
    [
        ("main.c", ("/*", "*/")),
        ("include/libft.h", ("/*", "*/")),
        ("app.py", ("#", "#")),
        ("index.html", ("<!--", "-->")),
        ("Main.java", ("//", "//")),
        ("init.lua", ("--", "--")),
        ("Makefile", ("#", "#")),
        ("Dockerfile", ("#", "#")),
        (".vimrc", ('"', '"')),
        ("notes.unknown", ("#", "#")),
    ],
)
def test_resolve_comment_delimiters(name: str, expected: tuple[str, str]) -> None:
    delims: CommentDelimiters = resolve_comment_delimiters(Path(name))

    assert (delims.left, delims.right) == expected


def test_comment_string_takes_precedence() -> None:
    delims: CommentDelimiters = resolve_comment_delimiters("main.c", "-- %s")

    assert delims == CommentDelimiters("--", "--")


def test_missing_path_uses_default() -> None:
    assert resolve_comment_delimiters(None) == CommentDelimiters.default()


def test_resolve_filetype_unknown() -> None:
    assert resolve_filetype("README") is None


def test_registry_names_are_unique_and_cached() -> None:
    registry: dict[str, FileType] = get_file_type_registry()

    assert registry is get_file_type_registry()
    assert {"c", "python", "html"} <= set(registry)
    assert all(name == ft.name for name, ft in registry.items())


def test_filetype_matches_patterns() -> None:
    ft = FileType(
        name="env",
        extensions=[],
        filenames=[],
        patterns=[r"\.env(\..+)?"],
        comment_string="# %s",
        description="dotenv",
    )

    assert ft.matches(Path(".env.local"))
    assert not ft.matches(Path("env.local"))
    assert ft.delimiters == CommentDelimiters("#", "#")
