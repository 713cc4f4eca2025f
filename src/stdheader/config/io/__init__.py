# topmark:header:start
#
#   project      : StdHeader
#   file         : __init__.py
#   file_relpath : src/stdheader/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""TOML I/O helpers for StdHeader configuration.

This package centralizes helpers for reading, validating, and writing TOML used
by the configuration layer. Keeping them separate from the model avoids import
cycles and keeps `stdheader.config.model` focused on merge policy.

TOML parsing/formatting:
    StdHeader uses `tomlkit` for parsing and rendering.

Typical flow:
    1. Load runtime defaults (``load_defaults_dict``).
    2. Load user/project TOML files (``load_toml_dict``).
    3. Read values with the checked getters.
    4. Serialize back to TOML when needed (``to_toml``).
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_int_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_value_or_none_checked,
)
from .guards import get_table_value, is_any_list, is_toml_table
from .loaders import load_defaults_dict, load_toml_dict, try_load_toml_dict
from .render import to_toml
from .types import TomlTable

__all__ = [
    "TomlTable",
    "get_bool_value_or_none_checked",
    "get_enum_value_checked",
    "get_int_value_or_none_checked",
    "get_string_list_value_or_none_checked",
    "get_string_value_or_none_checked",
    "get_table_value",
    "is_any_list",
    "is_toml_table",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
    "try_load_toml_dict",
]
