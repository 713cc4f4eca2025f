# topmark:header:start
#
#   project      : StdHeader
#   file         : filetypes.py
#   file_relpath : src/stdheader/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""StdHeader `filetypes` command.

Lists the built-in file types and the comment delimiters their headers use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stdheader.cli.cmd_common import get_console, get_effective_verbosity
from stdheader.filetypes import get_file_type_registry

if TYPE_CHECKING:
    from stdheader.cli.console_api import ConsoleLike


@click.command(
    name="filetypes",
    help="List supported file types and their comment delimiters.",
)
def filetypes_command() -> None:
    """List file types.

    With ``-v`` the description of each type is shown as well.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    registry = get_file_type_registry()
    width: int = max((len(name) for name in registry), default=0)
    for name, ft in registry.items():
        rules: str = " ".join([*ft.extensions, *ft.filenames, *ft.patterns])
        delims = ft.delimiters
        console.print(
            f"{console.styled(name.ljust(width), bold=True)}  "
            f"{delims.left} ... {delims.right}  {rules}"
        )
        if vlevel > 0:
            console.print(f"{' ' * width}  {ft.description}")
