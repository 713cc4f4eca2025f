# topmark:header:start
#
#   project      : StdHeader
#   file         : show.py
#   file_relpath : src/stdheader/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""StdHeader `show` command.

Prints the header that `apply` would insert, without touching any file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stdheader.api import generate_header
from stdheader.cli.cmd_common import build_config, build_identity_override, get_console
from stdheader.cli.errors import StdheaderConfigError
from stdheader.cli.options import CONTEXT_SETTINGS, common_config_options, common_identity_options
from stdheader.core.errors import ArtTooWideError

if TYPE_CHECKING:
    from stdheader.cli.console_api import ConsoleLike
    from stdheader.config.model import Config
    from stdheader.header.composer import Header


@click.command(
    name="show",
    help="Print the header that would be generated.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--filename",
    "filename",
    default="",
    help="File name shown in the header; also selects the comment style.",
)
@click.option(
    "--comment-string",
    "comment_string",
    default=None,
    metavar="TEMPLATE",
    help="Comment template such as '/* %s */' (overrides the file type).",
)
@common_config_options
@common_identity_options
def show_command(
    *,
    filename: str,
    comment_string: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
    user: str | None,
    email: str | None,
) -> None:
    """Print a freshly composed header.

    Raises:
        StdheaderConfigError: If the configured extended art does not fit.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = build_config(ctx=ctx, no_config=no_config, config_paths=config_paths)

    try:
        header: Header = generate_header(
            filename,
            config=config,
            comment_string=comment_string,
            identity=build_identity_override(user, email),
        )
    except ArtTooWideError as exc:
        raise StdheaderConfigError(str(exc)) from exc

    for line in header:
        console.print(line)
