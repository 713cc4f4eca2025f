# topmark:header:start
#
#   project      : StdHeader
#   file         : __init__.py
#   file_relpath : src/stdheader/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""StdHeader configuration layer.

Submodules:
    * `stdheader.config.model`: `Config` (immutable) and `MutableConfig` (builder).
    * `stdheader.config.io`: tomlkit-based loading, checked getters and rendering.
    * `stdheader.config.keys`: canonical TOML section and key names.
    * `stdheader.config.logging`: logger class with a TRACE level and colored output.

This package module stays import-light: the logging module is imported by
nearly everything, so the model is not re-exported here.
"""

from __future__ import annotations
