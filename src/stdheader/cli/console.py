# topmark:header:start
#
#   project      : StdHeader
#   file         : console.py
#   file_relpath : src/stdheader/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Click-backed console used by every StdHeader command."""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from stdheader.cli.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Console writing through `click.echo`.

    With ``enable_color=False`` Click strips ANSI sequences from everything
    written, including text styled elsewhere (diff previews).

    Args:
        enable_color (bool): Keep ANSI styling in the output.
        out (TextIO | None): Result stream; `sys.stdout` when None.
        err (TextIO | None): Warning/error stream; `sys.stderr` when None.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
