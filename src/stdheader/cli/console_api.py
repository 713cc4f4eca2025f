# topmark:header:start
#
#   project      : StdHeader
#   file         : console_api.py
#   file_relpath : src/stdheader/cli/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Protocol for the object commands write user-facing output to."""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """What a command needs from a console.

    Results go to stdout; warnings and errors go to stderr so that ``apply -``
    can stream the document on stdout.
    """

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Print ``text`` on stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Print a warning on stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Print an error on stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` with terminal styling, or unchanged when color is off."""
        ...
