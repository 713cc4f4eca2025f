# topmark:header:start
#
#   project      : StdHeader
#   file         : __init__.py
#   file_relpath : src/stdheader/filetypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""File types StdHeader recognizes and the comment delimiters they use.

Unknown file types fall back to ``#`` on both sides.
"""

from __future__ import annotations

from stdheader.filetypes.base import FileType
from stdheader.filetypes.instances import (
    get_file_type_registry,
    resolve_comment_delimiters,
    resolve_filetype,
)

__all__ = [
    "FileType",
    "get_file_type_registry",
    "resolve_comment_delimiters",
    "resolve_filetype",
]
