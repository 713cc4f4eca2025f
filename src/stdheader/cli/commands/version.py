# topmark:header:start
#
#   project      : StdHeader
#   file         : version.py
#   file_relpath : src/stdheader/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""StdHeader `version` command.

Prints the StdHeader version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stdheader.cli.cmd_common import get_console, get_effective_verbosity
from stdheader.constants import STDHEADER_VERSION

if TYPE_CHECKING:
    from stdheader.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of StdHeader.",
)
def version_command() -> None:
    """Show the current version of StdHeader."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(f"StdHeader version {STDHEADER_VERSION}")
    else:
        console.print(STDHEADER_VERSION)
