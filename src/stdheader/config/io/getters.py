# topmark:header:start
#
#   project      : StdHeader
#   file         : getters.py
#   file_relpath : src/stdheader/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter validates the expected shape and, on mismatch, records a
**warning** in a `DiagnosticLog` (and logs it) before falling back to ``None``.
User mistakes in config files are thus surfaced without crashing and without
changing the defaulting behavior: a ``None`` result means "not set here".
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeVar

from .guards import is_any_list

if TYPE_CHECKING:
    from stdheader.config.logging import StdheaderLogger
    from stdheader.core.diagnostics import DiagnosticLog

    from .types import TomlTable

E = TypeVar("E", bound=Enum)


def _warn(
    diagnostics: DiagnosticLog,
    logger: StdheaderLogger,
    loc: str,
    expected: str,
    value: object,
) -> None:
    logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected {expected} in {loc}, got {type(value).__name__}: {value!r}")


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: StdheaderLogger,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    _warn(diagnostics, logger, f"{where}.{key}", "string", value)
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: StdheaderLogger,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    _warn(diagnostics, logger, f"{where}.{key}", "bool", value)
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: StdheaderLogger,
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    _warn(diagnostics, logger, f"{where}.{key}", "int", value)
    return None


def get_string_list_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: StdheaderLogger,
) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    Behavior:
        - If the key is missing, returns None.
        - If the value is not a list, warns and returns None.
        - Non-string items are dropped, each with a warning.

    Args:
        table (TomlTable): TOML table to query.
        key (str): Key to extract.
        where (str): TOML location prefix (e.g. "[art]").
        diagnostics (DiagnosticLog): DiagnosticLog to record warnings.
        logger (StdheaderLogger): Logger for emitting warnings.

    Returns:
        list[str] | None: Filtered list containing only string entries, or None.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not is_any_list(value):
        _warn(diagnostics, logger, loc, "list", value)
        return None

    out: list[str] = []
    for v in value:
        if isinstance(v, str):
            out.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            diagnostics.add_warning(f"Ignoring non-string entry in {loc}: {v!r}")
    return out


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: StdheaderLogger,
) -> E | None:
    """Parse an enum value from TOML.

    Expected input is a `str` matching one of the Enum values.

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown enum value -> warning + None
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        _warn(diagnostics, logger, loc, "string enum value", raw)
        return None

    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        allowed: str = ", ".join(str(e.value) for e in enum_cls)
        logger.warning("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
        diagnostics.add_warning(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
        return None
