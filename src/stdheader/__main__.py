# topmark:header:start
#
#   project      : StdHeader
#   file         : __main__.py
#   file_relpath : src/stdheader/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Module entry point for running StdHeader via ``python -m stdheader``.

Delegates directly to `stdheader.cli.main.cli`, the single authoritative CLI
entry point.
"""

from __future__ import annotations

from stdheader.cli.main import cli

if __name__ == "__main__":
    cli()
