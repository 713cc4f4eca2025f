# topmark:header:start
#
#   project      : StdHeader
#   file         : diagnostics.py
#   file_relpath : src/stdheader/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Diagnostics collected while loading configuration.

A diagnostic is a user-facing note ("unknown key", "cannot load file") that
the CLI prints next to its regular output. Developer-facing detail goes to the
logger instead.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from stdheader.config.logging import get_logger

if TYPE_CHECKING:
    from stdheader.config.logging import StdheaderLogger

logger: StdheaderLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity of a diagnostic, least to most severe."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """One note with its severity."""

    level: DiagnosticLevel
    message: str

    def render(self) -> str:
        """Return ``"<level>: <message>"``."""
        return f"{self.level.value}: {self.message}"


@dataclass
class DiagnosticLog:
    """Ordered, mutable list of diagnostics owned by a config draft."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a log holding ``diagnostics`` in order."""
        return cls(items=list(diagnostics))

    def _add(self, level: DiagnosticLevel, message: str) -> None:
        self.items.append(Diagnostic(level, message))
        logger.trace("Diagnostic [%s]: %s", level.value, message)

    def add_info(self, message: str) -> None:
        """Record an informational note."""
        self._add(DiagnosticLevel.INFO, message)

    def add_warning(self, message: str) -> None:
        """Record a warning (the offending value was ignored)."""
        self._add(DiagnosticLevel.WARNING, message)

    def add_warning_once(self, message: str) -> None:
        """Record a warning unless the same warning is already present."""
        if Diagnostic(DiagnosticLevel.WARNING, message) not in self.items:
            self._add(DiagnosticLevel.WARNING, message)

    def add_error(self, message: str) -> None:
        """Record an error (the command cannot continue)."""
        self._add(DiagnosticLevel.ERROR, message)

    def counts(self) -> Counter[DiagnosticLevel]:
        """Return the number of diagnostics per level."""
        return Counter(d.level for d in self.items)

    def has_error(self) -> bool:
        """Return True if any error was recorded."""
        return any(d.level is DiagnosticLevel.ERROR for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
