# topmark:header:start
#
#   project      : StdHeader
#   file         : __init__.py
#   file_relpath : src/stdheader/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""StdHeader CLI commands (one module per command)."""
