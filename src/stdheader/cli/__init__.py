# topmark:header:start
#
#   project      : StdHeader
#   file         : __init__.py
#   file_relpath : src/stdheader/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Click command-line host for StdHeader.

The CLI supplies everything the header core expects from its host: documents
(files on disk, or content on STDIN), comment delimiters (from the file type),
the identity override (``--user``/``--email``) and a warning channel (the
console).
"""
