# topmark:header:start
#
#   project      : StdHeader
#   file         : guards.py
#   file_relpath : src/stdheader/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Type guards and small table helpers for TOML parsing.

These predicates help type checkers narrow runtime values coming from TOML
parsing (tomlkit unwraps documents into plain ``dict``/``list`` values).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

if TYPE_CHECKING:
    from .types import TomlTable


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value (item types are not validated)."""
    return isinstance(obj, list)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}
