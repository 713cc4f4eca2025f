# topmark:header:start
#
#   project      : StdHeader
#   file         : test_cli_check.py
#   file_relpath : tests/cli/test_cli_check.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""CLI tests for ``stdheader check``."""

from __future__ import annotations

from pathlib import Path

from click.testing import Result

from stdheader.cli.exit_codes import ExitCode
from tests.cli.conftest import run_cli_in
from tests.conftest import mark_cli


@mark_cli
def test_check_reports_missing_header(tmp_path: Path) -> None:
    (tmp_path / "a.c").write_text("int x;\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["check", "--no-config", "a.c"])

    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert "a.c: no header" in result.output


@mark_cli
def test_check_passes_after_apply(tmp_path: Path) -> None:
    (tmp_path / "a.c").write_text("int x;\n", encoding="utf-8")
    (tmp_path / "b.py").write_text("x = 1\n", encoding="utf-8")
    run_cli_in(tmp_path, ["apply", "--no-config", "--user", "someone", "a.c", "b.py"])

    result: Result = run_cli_in(tmp_path, ["-v", "check", "--no-config", "a.c", "b.py"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "a.c" in result.output
    assert "no header" not in result.output


@mark_cli
def test_check_mixed(tmp_path: Path) -> None:
    (tmp_path / "a.c").write_text("int x;\n", encoding="utf-8")
    (tmp_path / "b.c").write_text("int y;\n", encoding="utf-8")
    run_cli_in(tmp_path, ["apply", "--no-config", "a.c"])

    result: Result = run_cli_in(tmp_path, ["check", "--no-config", "a.c", "b.c"])

    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert "b.c: no header" in result.output
    assert "a.c: no header" not in result.output


@mark_cli
def test_check_stdin(tmp_path: Path) -> None:
    result: Result = run_cli_in(
        tmp_path,
        ["check", "--no-config", "-", "--stdin-filename", "x.c"],
        input_text="int x;\n",
    )

    assert result.exit_code == ExitCode.WOULD_CHANGE


@mark_cli
def test_check_without_paths_is_usage_error(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["check"])

    assert result.exit_code == ExitCode.USAGE_ERROR
