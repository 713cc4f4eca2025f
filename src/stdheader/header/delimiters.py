# topmark:header:start
#
#   project      : StdHeader
#   file         : delimiters.py
#   file_relpath : src/stdheader/header/delimiters.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Comment delimiters framing every header line.

A document's comment convention is expressed as a ``%s`` template, the form
editors use for their comment strings: ``"/* %s */"``, ``"# %s"``,
``"<!-- %s -->"``. `CommentDelimiters.from_comment_string` turns such a template
into the (left, right) pair the layout engine needs.
"""

from __future__ import annotations

from dataclasses import dataclass

from stdheader.config.logging import get_logger
from stdheader.constants import DEFAULT_LEFT_DELIMITER, DEFAULT_RIGHT_DELIMITER

logger = get_logger(__name__)

COMMENT_PLACEHOLDER: str = "%s"


@dataclass(frozen=True)
class CommentDelimiters:
    """Left/right comment symbols for one document.

    Attributes:
        left (str): Symbol opening each header line (e.g. ``"/*"``).
        right (str): Symbol closing each header line (e.g. ``"*/"``).
    """

    left: str = DEFAULT_LEFT_DELIMITER
    right: str = DEFAULT_RIGHT_DELIMITER

    @classmethod
    def default(cls) -> CommentDelimiters:
        """Return the fallback pair ``("#", "#")``."""
        return cls()

    @classmethod
    def from_comment_string(cls, comment_string: str | None) -> CommentDelimiters:
        """Derive delimiters from a ``%s`` comment template.

        The text left of ``%s`` becomes the left delimiter and the text right of it
        the right delimiter, both stripped. Line-comment templates (nothing after
        ``%s``) reuse the left symbol on the right so the block stays framed.
        Templates without ``%s`` (or ``None``) yield the default pair.

        Args:
            comment_string (str | None): Template such as ``"// %s"``.

        Returns:
            CommentDelimiters: The parsed pair.
        """
        if not comment_string or COMMENT_PLACEHOLDER not in comment_string:
            logger.debug("No usable comment string %r; using default delimiters", comment_string)
            return cls.default()

        # Split on the last placeholder, as a greedy match would.
        left, _, right = comment_string.rpartition(COMMENT_PLACEHOLDER)
        if right == "":
            right = left
        return cls(left=left.strip(), right=right.strip())
