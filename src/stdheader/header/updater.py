# topmark:header:start
#
#   project      : StdHeader
#   file         : updater.py
#   file_relpath : src/stdheader/header/updater.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Header updater: insert a new header or refresh an existing one.

A document is in one of two states:

- **no header**: the first lines fail the signature check (`has_header`),
  including documents whose first lines only partially resemble a header.
  A full header is inserted above the existing content.
- **has header**: the header is rewritten in place from a fresh composition,
  except the author and creation lines (`HEADER_IMMUTABLE_INDICES`), which are
  copied forward from the document.

Failures (`ArtTooWideError`, `DocumentNotWritableError`) are reported through
the ``notify`` callable and leave the document untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from stdheader.config.logging import get_logger
from stdheader.constants import HEADER_IMMUTABLE_INDICES
from stdheader.core.errors import ArtTooWideError, DocumentNotWritableError
from stdheader.header.composer import Header, compose_header
from stdheader.header.identity import IdentityResolver
from stdheader.header.matcher import has_header

if TYPE_CHECKING:
    from stdheader.config.logging import StdheaderLogger
    from stdheader.config.model import Config
    from stdheader.document import DocumentLike
    from stdheader.header.delimiters import CommentDelimiters
    from stdheader.header.identity import IdentityOverride

logger: StdheaderLogger = get_logger(__name__)

Notifier = Callable[[str], None]
Clock = Callable[[], datetime]


class HeaderAction(Enum):
    """What `apply_header` did to the document."""

    INSERTED = "inserted"
    UPDATED = "updated"
    ABORTED = "aborted"


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of `apply_header`.

    Attributes:
        action (HeaderAction): Insert, update, or abort.
        header (Header | None): The lines written (None when aborted).
        message (str | None): Warning reported when aborted.
    """

    action: HeaderAction
    header: Header | None = None
    message: str | None = None

    @property
    def changed(self) -> bool:
        """Whether the document was modified."""
        return self.action is not HeaderAction.ABORTED


def _log_warning(message: str) -> None:
    logger.warning("%s", message)


def insert_header(document: DocumentLike, header: Header) -> Header:
    """Prepend ``header`` to ``document``.

    A blank separator line is appended when the document's first line has
    content; empty documents and documents starting with a blank line get none.

    Returns:
        Header: The lines actually inserted.

    Raises:
        DocumentNotWritableError: If the document cannot be modified.
    """
    if not document.is_writable():
        raise DocumentNotWritableError(document.filename)

    first: str | None = document.first_line()
    if first:
        header = Header((*header.lines, ""))
    document.prepend_lines(header.lines)
    logger.info("Inserted header (%d lines) into %s", len(header), document.filename)
    return header


def update_header(document: DocumentLike, header: Header) -> Header:
    """Overwrite the document's header with ``header``, keeping immutable lines.

    The author and creation lines are copied verbatim from the document.

    Returns:
        Header: The lines actually written.

    Raises:
        DocumentNotWritableError: If the document cannot be modified.
    """
    if not document.is_writable():
        raise DocumentNotWritableError(document.filename)

    current: list[str] = document.first_lines(len(header))
    header = header.replace_lines({i: current[i] for i in HEADER_IMMUTABLE_INDICES})
    document.replace_first_lines(len(header), header.lines)
    logger.info("Updated header of %s", document.filename)
    return header


def apply_header(
    document: DocumentLike,
    config: Config,
    delimiters: CommentDelimiters,
    *,
    identity: IdentityOverride | IdentityResolver | None = None,
    clock: Clock = datetime.now,
    notify: Notifier = _log_warning,
) -> ApplyResult:
    """Insert a header into ``document`` or refresh the existing one.

    Args:
        document (DocumentLike): The document to edit.
        config (Config): Header layout settings.
        delimiters (CommentDelimiters): Comment symbols of the document.
        identity (IdentityOverride | IdentityResolver | None): Explicit identity
            override, or a ready resolver.
        clock (Clock): Source of the current time.
        notify (Notifier): Receives user-facing warnings.

    Returns:
        ApplyResult: What happened. On ``ABORTED`` the document is unchanged.
    """
    resolver: IdentityResolver = (
        identity if isinstance(identity, IdentityResolver) else IdentityResolver(config, identity)
    )
    try:
        candidate: Header = compose_header(
            config, document.filename, clock(), delimiters, resolver
        )
        if has_header(candidate, document.first_lines(len(candidate))):
            written: Header = update_header(document, candidate)
            return ApplyResult(HeaderAction.UPDATED, written)
        written = insert_header(document, candidate)
        return ApplyResult(HeaderAction.INSERTED, written)
    except (ArtTooWideError, DocumentNotWritableError) as exc:
        notify(str(exc))
        return ApplyResult(HeaderAction.ABORTED, message=str(exc))
