# topmark:header:start
#
#   project      : StdHeader
#   file         : __init__.py
#   file_relpath : src/stdheader/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""StdHeader package.

StdHeader keeps a fixed-width, school/company standard comment header at the top
of source files: it inserts the header when missing and refreshes the "Updated"
line of an existing one while preserving the creation metadata.
"""

from __future__ import annotations
