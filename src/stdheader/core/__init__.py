# topmark:header:start
#
#   project      : StdHeader
#   file         : __init__.py
#   file_relpath : src/stdheader/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Core building blocks shared across StdHeader: diagnostics and errors."""

from __future__ import annotations

from stdheader.core.diagnostics import Diagnostic, DiagnosticLevel, DiagnosticLog
from stdheader.core.errors import ArtTooWideError, DocumentNotWritableError, StdheaderError

__all__ = [
    "ArtTooWideError",
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DocumentNotWritableError",
    "StdheaderError",
]
