# topmark:header:start
#
#   project      : StdHeader
#   file         : main.py
#   file_relpath : src/stdheader/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""StdHeader command-line entry point.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into
  ``ctx.obj`` together with the console.
- Internal logging is configured from ``STDHEADER_LOG_LEVEL`` and stays
  separate from program output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stdheader.cli.commands.apply import apply_command
from stdheader.cli.commands.check import check_command
from stdheader.cli.commands.config import config_command
from stdheader.cli.commands.filetypes import filetypes_command
from stdheader.cli.commands.show import show_command
from stdheader.cli.commands.version import version_command
from stdheader.cli.console import ClickConsole
from stdheader.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from stdheader.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from stdheader.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.obj["color_enabled"] = not no_color
    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="StdHeader: fixed-width comment headers for source files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the StdHeader CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'stdheader apply [PATHS...]' to add or update headers.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(apply_command)
cli.add_command(check_command)
cli.add_command(show_command)
cli.add_command(filetypes_command)
cli.add_command(config_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
