# topmark:header:start
#
#   project      : StdHeader
#   file         : __init__.py
#   file_relpath : src/stdheader/header/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Header core: layout, composition, detection and update.

Data flow: `identity` feeds the user name and email into `composer`, which
renders each line through `layout`; `matcher` compares a composed header with a
document's first lines and `updater` decides between insertion and update.
"""

from __future__ import annotations

from stdheader.header.composer import Header, compose_header, format_timestamp
from stdheader.header.delimiters import CommentDelimiters
from stdheader.header.identity import IdentityOverride, IdentityResolver
from stdheader.header.layout import render_art_block, render_border, render_text_line
from stdheader.header.matcher import has_header
from stdheader.header.updater import ApplyResult, HeaderAction, apply_header

__all__ = [
    "ApplyResult",
    "CommentDelimiters",
    "Header",
    "HeaderAction",
    "IdentityOverride",
    "IdentityResolver",
    "apply_header",
    "compose_header",
    "format_timestamp",
    "has_header",
    "render_art_block",
    "render_border",
    "render_text_line",
]
