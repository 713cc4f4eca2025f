# topmark:header:start
#
#   project      : StdHeader
#   file         : cmd_common.py
#   file_relpath : src/stdheader/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Helpers shared by the StdHeader CLI commands.

Commands stay thin: they parse options, then call into these helpers to
build the effective config, the identity override and the documents.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from stdheader.cli.errors import StdheaderConfigError, StdheaderFileNotFoundError, StdheaderIOError
from stdheader.config.logging import get_logger
from stdheader.config.model import Config, MutableConfig
from stdheader.core.diagnostics import DiagnosticLevel
from stdheader.document import FileDocument
from stdheader.header.identity import IdentityOverride

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stdheader.cli.console_api import ConsoleLike
    from stdheader.config.logging import StdheaderLogger

logger: StdheaderLogger = get_logger(__name__)

#: Positional PATH that selects content-on-STDIN mode.
STDIN_PATH = "-"


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group callback."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def build_config(
    *,
    ctx: click.Context,
    no_config: bool,
    config_paths: Sequence[str],
    anchor: Path | None = None,
) -> Config:
    """Discover, merge and freeze the configuration for a command.

    Config warnings are echoed to stderr and infos are logged; config errors
    abort the command.

    Raises:
        StdheaderConfigError: If an explicit ``--config`` file cannot be loaded.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        anchor=anchor,
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    config: Config = draft.freeze()
    logger.debug("Config diagnostics: %s", dict(draft.diagnostics.counts()))
    logger.trace("Effective config: %s", config)

    if draft.diagnostics.has_error():
        raise StdheaderConfigError(
            "; ".join(d.message for d in draft.diagnostics if d.level is DiagnosticLevel.ERROR)
        )

    console: ConsoleLike = get_console(ctx)
    for diag in draft.diagnostics:
        if diag.level is DiagnosticLevel.WARNING:
            console.warn(f"[config] {diag.render()}")
        else:
            logger.info("[config] %s", diag.message)
    return config


def build_identity_override(user: str | None, email: str | None) -> IdentityOverride | None:
    """Return the identity override from ``--user``/``--email``, or None if unset."""
    if user is None and email is None:
        return None
    return IdentityOverride(user=user, email=email)


def load_document(path: Path) -> FileDocument:
    """Load a file for header processing.

    Raises:
        StdheaderFileNotFoundError: If ``path`` does not exist or is not a file.
        StdheaderIOError: If ``path`` cannot be read or decoded as UTF-8.
    """
    if not path.is_file():
        raise StdheaderFileNotFoundError(f"No such file: {path}")
    try:
        return FileDocument(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise StdheaderIOError(f"Cannot read {path}: {exc}") from exc


def save_document(document: FileDocument) -> None:
    """Write ``document`` back to disk.

    Raises:
        StdheaderIOError: If the file cannot be written.
    """
    try:
        document.save()
    except OSError as exc:
        raise StdheaderIOError(f"Cannot write {document.path}: {exc}") from exc


def is_stdin_mode(paths: Sequence[str]) -> bool:
    """Return True if ``paths`` select content-on-STDIN mode (a lone ``-``)."""
    return list(paths) == [STDIN_PATH]
