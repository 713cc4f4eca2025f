# topmark:header:start
#
#   project      : StdHeader
#   file         : config.py
#   file_relpath : src/stdheader/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""StdHeader `config` command group.

Subcommands:
  * ``dump``: print the effective (merged) configuration as TOML.
  * ``init``: write a ``stdheader.toml`` holding the defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from stdheader.cli.cmd_common import build_config, get_console, get_effective_verbosity
from stdheader.cli.errors import StdheaderCliError, StdheaderIOError
from stdheader.cli.options import CONTEXT_SETTINGS, common_config_options
from stdheader.config.io import to_toml
from stdheader.config.keys import Toml
from stdheader.config.logging import get_logger
from stdheader.config.model import MutableConfig
from stdheader.constants import STDHEADER_CONFIG_NAME

if TYPE_CHECKING:
    from stdheader.cli.console_api import ConsoleLike
    from stdheader.config.logging import StdheaderLogger
    from stdheader.config.model import Config

logger: StdheaderLogger = get_logger(__name__)

SECTION_COMMENTS: dict[str, str] = {
    Toml.SECTION_LAYOUT: "Total line width and the column where header text starts.",
    Toml.SECTION_ART: "Seven compact art tokens; extended lines go below the header.",
    Toml.SECTION_USER: "Fallback identity when neither --user nor git provide one.",
    Toml.SECTION_GIT: "Read user.name and user.email from git config.",
}


@click.group(name="config", help="Inspect or initialize configuration.")
def config_command() -> None:
    """Configuration commands."""


@config_command.command(
    name="dump",
    help="Print the effective configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
def config_dump_command(*, no_config: bool, config_paths: tuple[str, ...]) -> None:
    """Print the merged configuration.

    With ``-v`` the merged config sources are listed first (as TOML comments).
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = build_config(ctx=ctx, no_config=no_config, config_paths=config_paths)

    header: list[str] = []
    if get_effective_verbosity(ctx) > 0:
        header = [f"source: {source}" for source in config.config_files]
    console.print(to_toml(config.to_toml_dict(), header=header), nl=False)


@config_command.command(
    name="init",
    help=f"Write a {STDHEADER_CONFIG_NAME} with the default settings.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--directory",
    "directory",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to write the config file into.",
)
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
def config_init_command(*, directory: Path, force: bool) -> None:
    """Write a starter config file.

    Raises:
        StdheaderCliError: If the file exists and ``--force`` is not given.
        StdheaderIOError: If the file cannot be written.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    target: Path = directory / STDHEADER_CONFIG_NAME
    if target.exists() and not force:
        raise StdheaderCliError(f"{target} already exists (use --force to overwrite).")

    text: str = to_toml(
        MutableConfig.from_defaults().freeze().to_toml_dict(),
        header=[f"StdHeader configuration ({STDHEADER_CONFIG_NAME})"],
        comments=SECTION_COMMENTS,
    )
    try:
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise StdheaderIOError(f"Cannot write {target}: {exc}") from exc
    logger.info("Wrote default config to %s", target)
    console.print(f"Wrote {target}")
