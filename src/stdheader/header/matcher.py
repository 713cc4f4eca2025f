# topmark:header:start
#
#   project      : StdHeader
#   file         : matcher.py
#   file_relpath : src/stdheader/header/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Header matcher: does a document already start with a valid header?

Only the structurally invariant lines are compared (see
`HEADER_SIGNATURE_INDICES`): the borders, the blank lines and the first art
line. Those are identical for any two headers rendered with the same config and
delimiters, while the filename, author and timestamp lines legitimately differ.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stdheader.config.logging import get_logger
from stdheader.constants import HEADER_SIGNATURE_INDICES

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stdheader.config.logging import StdheaderLogger

logger: StdheaderLogger = get_logger(__name__)


def signature_positions(header_length: int) -> list[int]:
    """Return the absolute signature line indices for a header of ``header_length`` lines."""
    return [i if i >= 0 else header_length + i for i in HEADER_SIGNATURE_INDICES]


def has_header(candidate: Sequence[str], document_lines: Sequence[str]) -> bool:
    """Return True if ``document_lines`` start with a header shaped like ``candidate``.

    Lines missing from a short document count as non-matching.

    Args:
        candidate (Sequence[str]): A freshly composed header.
        document_lines (Sequence[str]): The first lines of the document (at least
            ``len(candidate)`` when available).

    Returns:
        bool: True iff every signature line matches exactly.
    """
    for pos in signature_positions(len(candidate)):
        if pos >= len(document_lines) or document_lines[pos] != candidate[pos]:
            logger.debug("Header signature mismatch at line %d", pos + 1)
            return False
    return True
