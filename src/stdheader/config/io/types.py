# topmark:header:start
#
#   project      : StdHeader
#   file         : types.py
#   file_relpath : src/stdheader/config/io/types.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Shared TOML-related type aliases for the config I/O package."""

from __future__ import annotations

from typing import Any

TomlTable = dict[str, Any]
