# topmark:header:start
#
#   project      : StdHeader
#   file         : check.py
#   file_relpath : src/stdheader/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""StdHeader `check` command.

Reports which files start with a header matching the current layout. Nothing
is written. Only the structural lines are compared, so headers of other
authors or older timestamps still count as present.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from stdheader.api import has_valid_header
from stdheader.cli.cmd_common import (
    STDIN_PATH,
    build_config,
    get_console,
    get_effective_verbosity,
    is_stdin_mode,
    load_document,
)
from stdheader.cli.errors import StdheaderConfigError, StdheaderUsageError
from stdheader.cli.exit_codes import ExitCode
from stdheader.cli.options import CONTEXT_SETTINGS, common_config_options, common_delimiter_options
from stdheader.config.logging import get_logger
from stdheader.core.errors import ArtTooWideError
from stdheader.document import DocumentLike, TextDocument
from stdheader.filetypes import resolve_comment_delimiters

if TYPE_CHECKING:
    from stdheader.cli.console_api import ConsoleLike
    from stdheader.config.logging import StdheaderLogger
    from stdheader.config.model import Config

logger: StdheaderLogger = get_logger(__name__)


@click.command(
    name="check",
    help="Report files without a valid header (exit code 2 if any).",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@common_config_options
@common_delimiter_options
def check_command(
    *,
    paths: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    comment_string: str | None,
    stdin_filename: str | None,
) -> None:
    """Check for headers.

    Raises:
        StdheaderUsageError: If no PATHS are given or ``-`` is mixed with paths.
        StdheaderConfigError: If the configured extended art does not fit.

    Exit Status:
        SUCCESS (0): Every file has a header.
        WOULD_CHANGE (2): At least one file lacks a header.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if not paths:
        raise StdheaderUsageError("check: no input PATHS given (use '-' to read STDIN).")
    stdin_mode: bool = is_stdin_mode(paths)
    if not stdin_mode and STDIN_PATH in paths:
        raise StdheaderUsageError("check: '-' must be the only PATH when reading from STDIN.")

    config: Config = build_config(ctx=ctx, no_config=no_config, config_paths=config_paths)

    documents: list[tuple[str, DocumentLike]] = []
    if stdin_mode:
        name: str = Path(stdin_filename).name if stdin_filename else ""
        text: str = click.get_text_stream("stdin").read()
        documents.append((stdin_filename or "<stdin>", TextDocument.from_text(text, filename=name)))
    else:
        documents.extend((raw, load_document(Path(raw))) for raw in paths)

    missing = 0
    for label, document in documents:
        source: str | None = stdin_filename if stdin_mode else label
        try:
            present: bool = has_valid_header(
                document,
                config=config,
                delimiters=resolve_comment_delimiters(source, comment_string),
            )
        except ArtTooWideError as exc:
            raise StdheaderConfigError(str(exc)) from exc

        if present:
            if vlevel > 0:
                console.print(f"{console.styled('✓', fg='green')} {label}")
        else:
            missing += 1
            if vlevel >= 0:
                console.print(f"{console.styled('✗', fg='red')} {label}: no header")

    logger.info("check: %d of %d file(s) without header", missing, len(documents))
    if missing:
        ctx.exit(ExitCode.WOULD_CHANGE)
