# topmark:header:start
#
#   project      : StdHeader
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Pytest configuration for the StdHeader test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs.

Notes:
    Tests should respect the immutable/mutable configuration split: build configs
    with `stdheader.config.model.MutableConfig`, then ``freeze()`` them (see
    `make_config`). Do **not** mutate a frozen `Config`; use ``thaw()`` instead.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from stdheader.config import logging
from stdheader.config.model import Config, MutableConfig
from stdheader.constants import ENV_EMAIL, ENV_LOG_LEVEL, ENV_USER
from stdheader.header.delimiters import CommentDelimiters

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

#: Fixed clock used wherever a test compares timestamps.
FIXED_NOW = datetime(2025, 1, 2, 3, 4, 5)
LATER_NOW = datetime(2025, 6, 7, 8, 9, 10)

C_DELIMITERS = CommentDelimiters("/*", "*/")


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_property: DecoratorType[Any] = as_typed_mark(pytest.mark.property)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the test run.

    Clears the StdHeader env overrides and points the user config lookup at an
    empty directory, so ``~/.stdheader.toml`` never leaks into a test.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture used to manipulate the environment.
    """
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_USER, raising=False)
    monkeypatch.delenv(ENV_EMAIL, raising=False)
    home: Path = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the StdHeader log level to TRACE for the whole test run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test inside an empty project directory.

    Returns:
        Path: The project directory, which is also the working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from the defaults and ``overrides``.

    ``overrides`` are `MutableConfig` field names, e.g. ``length=60`` or
    ``extended_art=["..."]``.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


def no_git(_bin: str, _key: str, _global: bool) -> str | None:
    """Git lookup stub that never finds a value."""
    return None
