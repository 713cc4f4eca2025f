# topmark:header:start
#
#   project      : StdHeader
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Tests for the TOML helpers in `stdheader.config.io`."""

from __future__ import annotations

from pathlib import Path

import pytest
import tomlkit

from stdheader.config.io import (
    get_enum_value_checked,
    get_string_list_value_or_none_checked,
    get_table_value,
    is_toml_table,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
    try_load_toml_dict,
)
from stdheader.config.logging import get_logger
from stdheader.config.types import ArtJustify
from stdheader.core.diagnostics import DiagnosticLog

logger = get_logger(__name__)


def test_defaults_dict_is_a_fresh_copy() -> None:
    first = load_defaults_dict()
    first["layout"]["length"] = 1

    assert load_defaults_dict()["layout"]["length"] == 80


def test_to_toml_round_trips_through_tomlkit() -> None:
    rendered: str = to_toml(load_defaults_dict())

    assert tomlkit.parse(rendered).unwrap() == load_defaults_dict()


def test_to_toml_drops_none() -> None:
    rendered: str = to_toml({"user": {"name": None, "email": "x@y"}})

    assert "name" not in rendered
    assert 'email = "x@y"' in rendered


def test_to_toml_writes_header_and_section_comments() -> None:
    rendered: str = to_toml(
        {"layout": {"length": 80}},
        header=["generated"],
        comments={"layout": "widths"},
    )

    assert rendered.startswith("# generated\n")
    assert "# widths" in rendered
    assert tomlkit.parse(rendered).unwrap() == {"layout": {"length": 80}}


def test_load_toml_dict(tmp_path: Path) -> None:
    path: Path = tmp_path / "a.toml"
    path.write_text("[layout]\nlength = 42\n", encoding="utf-8")

    assert load_toml_dict(path) == {"layout": {"length": 42}}


def test_load_toml_dict_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_toml_dict(tmp_path / "missing.toml")


def test_try_load_toml_dict_returns_none_on_errors(tmp_path: Path) -> None:
    broken: Path = tmp_path / "broken.toml"
    broken.write_text("= nope", encoding="utf-8")

    assert try_load_toml_dict(broken) is None
    assert try_load_toml_dict(tmp_path / "missing.toml") is None


def test_table_guards() -> None:
    assert is_toml_table({"a": 1})
    assert not is_toml_table([1])
    assert get_table_value({"a": {"b": 1}}, "a") == {"b": 1}
    assert get_table_value({"a": 3}, "a") == {}
    assert get_table_value({}, "a") == {}


def test_string_list_drops_non_strings() -> None:
    diags = DiagnosticLog()
    out = get_string_list_value_or_none_checked(
        {"extended": ["a", 1, "b"]}, "extended", where="[art]", diagnostics=diags, logger=logger
    )

    assert out == ["a", "b"]
    assert len(diags) == 1


def test_enum_value_is_case_insensitive() -> None:
    diags = DiagnosticLog()
    value = get_enum_value_checked(
        {"j": " Left "}, "j", ArtJustify, where="[art]", diagnostics=diags, logger=logger
    )

    assert value is ArtJustify.LEFT
    assert len(diags) == 0
