# topmark:header:start
#
#   project      : StdHeader
#   file         : errors.py
#   file_relpath : src/stdheader/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""CLI exceptions carrying StdHeader exit codes.

Each class maps to one `ExitCode`. Click catches them at the top level, prints
the message and exits with the class's code; the message goes through the
project console when one is set up on the context.
"""

from __future__ import annotations

from typing import IO, Any

import click

from stdheader.cli.exit_codes import ExitCode


class StdheaderCliError(click.ClickException):
    """A command failed; exits with ``FAILURE`` unless a subclass says otherwise."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        return self.message

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the message in the console's error style, or defer to Click."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class StdheaderUsageError(StdheaderCliError):
    """Invalid combination of arguments or options."""

    exit_code = ExitCode.USAGE_ERROR


class StdheaderConfigError(StdheaderCliError):
    """The configuration cannot be used (unloadable file, art that does not fit)."""

    exit_code = ExitCode.CONFIG_ERROR


class StdheaderFileNotFoundError(StdheaderCliError):
    """An input PATH does not name a file."""

    exit_code = ExitCode.FILE_NOT_FOUND


class StdheaderIOError(StdheaderCliError):
    """A file could not be read or written."""

    exit_code = ExitCode.IO_ERROR
