# topmark:header:start
#
#   project      : StdHeader
#   file         : apply.py
#   file_relpath : src/stdheader/cli/commands/apply.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""StdHeader `apply` command.

Inserts a header into files that have none and refreshes the header of files
that already carry one (the author and creation lines are kept).

Input modes supported:
  * **Paths mode (default)**: one or more PATHS, edited in place.
  * **Content on STDIN**: a single ``-`` as the sole PATH; the result is
    written to STDOUT. ``--stdin-filename NAME`` selects the comment style and
    the name shown in the header. This is the hook point for editor
    save actions.

Examples:
  Add or refresh headers in place:

    $ stdheader apply src/main.c src/util.c

  Preview the changes without writing:

    $ stdheader apply --dry-run --diff src/main.c

  Filter a buffer through StdHeader:

    $ cat main.c | stdheader apply - --stdin-filename main.c
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

import click

from stdheader.cli.cmd_common import (
    STDIN_PATH,
    build_config,
    build_identity_override,
    get_console,
    get_effective_verbosity,
    is_stdin_mode,
    load_document,
    save_document,
)
from stdheader.cli.errors import StdheaderUsageError
from stdheader.cli.exit_codes import ExitCode
from stdheader.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_delimiter_options,
    common_identity_options,
)
from stdheader.config.logging import get_logger
from stdheader.constants import HEADER_UPDATED_INDEX
from stdheader.document import TextDocument
from stdheader.filetypes import resolve_comment_delimiters
from stdheader.header.identity import IdentityResolver
from stdheader.header.updater import HeaderAction, apply_header
from stdheader.utils.diff import compute_diff, render_patch

if TYPE_CHECKING:
    from stdheader.cli.console_api import ConsoleLike
    from stdheader.config.logging import StdheaderLogger
    from stdheader.config.model import Config
    from stdheader.document import FileDocument
    from stdheader.header.delimiters import CommentDelimiters
    from stdheader.header.updater import ApplyResult

logger: StdheaderLogger = get_logger(__name__)


def _would_change(before: list[str], after: list[str], action: HeaderAction) -> bool:
    """Whether applying the header changes the document.

    The Updated line of a refreshed header is not compared.
    """
    if action is not HeaderAction.UPDATED:
        return after != before
    return [line for i, line in enumerate(before) if i != HEADER_UPDATED_INDEX] != [
        line for i, line in enumerate(after) if i != HEADER_UPDATED_INDEX
    ]


def _apply_stdin(
    *,
    console: ConsoleLike,
    config: Config,
    resolver: IdentityResolver,
    now: datetime,
    stdin_filename: str | None,
    comment_string: str | None,
    dry_run: bool,
) -> ExitCode:
    text: str = click.get_text_stream("stdin").read()
    name: str = Path(stdin_filename).name if stdin_filename else ""
    document = TextDocument.from_text(text, filename=name)
    before: list[str] = list(document.lines)
    delimiters: CommentDelimiters = resolve_comment_delimiters(stdin_filename, comment_string)

    result: ApplyResult = apply_header(
        document,
        config,
        delimiters,
        identity=resolver,
        clock=lambda: now,
        notify=lambda msg: console.warn(f"{name or '<stdin>'}: {msg}"),
    )
    if result.action is HeaderAction.ABORTED:
        # Echo the input unchanged so a pipeline never loses content.
        console.print(text, nl=False)
        return ExitCode.FAILURE

    if dry_run:
        changed: bool = _would_change(before, document.lines, result.action)
        return ExitCode.WOULD_CHANGE if changed else ExitCode.SUCCESS
    console.print(document.to_text(), nl=False)
    return ExitCode.SUCCESS


@click.command(
    name="apply",
    help="Insert or update the header of each file.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Add or refresh headers in place
  stdheader apply src/main.c

  # Preview without writing (exit code 2 if anything would change)
  stdheader apply --dry-run --diff src/main.c

  # Filter a buffer: read STDIN, write STDOUT
  stdheader apply - --stdin-filename main.c < main.c
""",
)
@click.argument("paths", nargs=-1, type=str)
@common_config_options
@common_identity_options
@common_delimiter_options
@click.option("--dry-run", "dry_run", is_flag=True, help="Do not write; report what would change.")
@click.option("--diff", is_flag=True, help="Show unified diffs of the changes.")
def apply_command(
    *,
    paths: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    user: str | None,
    email: str | None,
    comment_string: str | None,
    stdin_filename: str | None,
    dry_run: bool,
    diff: bool,
) -> None:
    """Insert or update headers.

    Args:
        paths (tuple[str, ...]): Files to process, or a lone ``-`` for STDIN.
        no_config (bool): Skip user and project config discovery.
        config_paths (tuple[str, ...]): Extra config files merged last.
        user (str | None): Identity override for the user name.
        email (str | None): Identity override for the email.
        comment_string (str | None): Comment template overriding the file type.
        stdin_filename (str | None): Assumed filename in STDIN mode.
        dry_run (bool): Report instead of writing.
        diff (bool): Print unified diffs.

    Raises:
        StdheaderUsageError: If no PATHS are given or ``-`` is mixed with paths.

    Exit Status:
        SUCCESS (0): All headers were written (or nothing would change).
        FAILURE (1): At least one file was skipped (art too wide, not writable).
        WOULD_CHANGE (2): ``--dry-run`` found files that would change.
        FILE_NOT_FOUND (66): A PATH does not exist.
        IO_ERROR (74): A file could not be read or written.
        CONFIG_ERROR (78): A ``--config`` file could not be loaded.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if not paths:
        raise StdheaderUsageError("apply: no input PATHS given (use '-' to read STDIN).")
    stdin_mode: bool = is_stdin_mode(paths)
    if not stdin_mode and STDIN_PATH in paths:
        raise StdheaderUsageError("apply: '-' must be the only PATH when reading from STDIN.")
    if stdin_mode and diff:
        raise StdheaderUsageError("apply: --diff is not supported when reading from STDIN.")

    config: Config = build_config(ctx=ctx, no_config=no_config, config_paths=config_paths)
    resolver = IdentityResolver(config, build_identity_override(user, email))
    now: datetime = datetime.now()

    if stdin_mode:
        code: ExitCode = _apply_stdin(
            console=console,
            config=config,
            resolver=resolver,
            now=now,
            stdin_filename=stdin_filename,
            comment_string=comment_string,
            dry_run=dry_run,
        )
        ctx.exit(code)

    failures = 0
    would_change = 0
    for raw in paths:
        path = Path(raw)
        document: FileDocument = load_document(path)
        before: list[str] = list(document.lines)
        delimiters: CommentDelimiters = resolve_comment_delimiters(path, comment_string)

        result: ApplyResult = apply_header(
            document,
            config,
            delimiters,
            identity=resolver,
            clock=lambda: now,
            notify=lambda msg, raw=raw: console.warn(f"{raw}: {msg}"),
        )
        if result.action is HeaderAction.ABORTED:
            failures += 1
            continue

        changed: bool = _would_change(before, document.lines, result.action)
        if diff and changed:
            console.print(render_patch(compute_diff(before, document.lines, raw)), nl=False)

        if dry_run:
            if changed:
                would_change += 1
            if vlevel >= 0 and changed:
                console.print(f"{raw}: header would be {result.action.value}")
            elif vlevel >= 0:
                console.print(f"{raw}: header up to date")
            continue

        save_document(document)
        if vlevel >= 0:
            console.print(f"{raw}: header {result.action.value}")

    logger.info(
        "apply: %d file(s), %d failure(s), %d would change", len(paths), failures, would_change
    )
    if failures:
        ctx.exit(ExitCode.FAILURE)
    if dry_run and would_change:
        ctx.exit(ExitCode.WOULD_CHANGE)
