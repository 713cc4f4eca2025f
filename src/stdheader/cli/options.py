# topmark:header:start
#
#   project      : StdHeader
#   file         : options.py
#   file_relpath : src/stdheader/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Common CLI option utilities for the StdHeader CLI.

This module centralizes reusable options (verbosity, color, config, identity)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from stdheader.cli.errors import StdheaderUsageError
from stdheader.constants import ENV_EMAIL, ENV_USER

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by every command.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``0`` by default, positive for more detail, negative for less.

    Raises:
        StdheaderUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise StdheaderUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet count options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --no-color flag."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable colored output.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore user and project config files (only use defaults and --config).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_identity_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--user``/``--email``, overriding git and config identity."""
    f = click.option(
        "--user",
        "user",
        envvar=ENV_USER,
        default=None,
        help=f"User name written into the header (env: {ENV_USER}).",
    )(f)
    f = click.option(
        "--email",
        "email",
        envvar=ENV_EMAIL,
        default=None,
        help=f"Email written into the header (env: {ENV_EMAIL}).",
    )(f)
    return f


def common_delimiter_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--comment-string`` and ``--stdin-filename``."""
    f = click.option(
        "--comment-string",
        "comment_string",
        default=None,
        metavar="TEMPLATE",
        help="Comment template such as '/* %s */' (overrides the file type).",
    )(f)
    f = click.option(
        "--stdin-filename",
        "stdin_filename",
        type=str,
        default=None,
        help=(
            "Assumed filename when reading a single file's content from STDIN via '-' (dash). "
            "Selects the comment style and is shown in the header."
        ),
    )(f)
    return f
