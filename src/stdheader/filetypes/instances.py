# topmark:header:start
#
#   project      : StdHeader
#   file         : instances.py
#   file_relpath : src/stdheader/filetypes/instances.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""File type registry and delimiter resolution.

The registry is built lazily from `stdheader.filetypes.builtins.FILETYPES` on
first access and cached thereafter. The returned mapping is a plain ``dict``
but should be treated as immutable by callers.

Resolution is stateless per call: the same process may handle documents of
different types one after another, so delimiters are looked up for every
document.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from stdheader.config.logging import get_logger
from stdheader.filetypes.builtins import FILETYPES
from stdheader.header.delimiters import CommentDelimiters

if TYPE_CHECKING:
    from stdheader.config.logging import StdheaderLogger
    from stdheader.filetypes.base import FileType

logger: StdheaderLogger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_file_type_registry() -> dict[str, FileType]:
    """Return the name → FileType registry, deduplicated by name (first wins)."""
    registry: dict[str, FileType] = {}
    for ft in FILETYPES:
        if ft.name in registry:
            logger.warning("Duplicate FileType name detected: %s (keeping first)", ft.name)
            continue
        registry[ft.name] = ft
    logger.debug("File type registry initialized with %d types", len(registry))
    return registry


def resolve_filetype(path: Path | str) -> FileType | None:
    """Return the first registered file type matching ``path``, or None."""
    p = Path(path)
    for ft in get_file_type_registry().values():
        if ft.matches(p):
            logger.trace("Resolved %s as file type %s", p, ft.name)
            return ft
    logger.debug("No file type matches %s", p)
    return None


def resolve_comment_delimiters(
    path: Path | str | None,
    comment_string: str | None = None,
) -> CommentDelimiters:
    """Return the comment delimiters to use for the document at ``path``.

    Args:
        path (Path | str | None): Document path (only its name is inspected).
        comment_string (str | None): Explicit ``%s`` template; takes precedence
            over the file type lookup.

    Returns:
        CommentDelimiters: The delimiters; ``("#", "#")`` for unknown types.
    """
    if comment_string is not None:
        return CommentDelimiters.from_comment_string(comment_string)
    if path is None:
        return CommentDelimiters.default()
    ft: FileType | None = resolve_filetype(path)
    if ft is None:
        return CommentDelimiters.default()
    return ft.delimiters
