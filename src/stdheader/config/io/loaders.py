# topmark:header:start
#
#   project      : StdHeader
#   file         : loaders.py
#   file_relpath : src/stdheader/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides the runtime defaults (defined in code, no I/O) and a
reader for on-disk TOML files (`stdheader.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from stdheader.config.keys import Toml
from stdheader.config.logging import get_logger
from stdheader.constants import (
    DEFAULT_COMPACT_ART,
    DEFAULT_EMAIL,
    DEFAULT_GIT_BIN,
    DEFAULT_LENGTH,
    DEFAULT_MARGIN,
    DEFAULT_USER,
)

if TYPE_CHECKING:
    from pathlib import Path

    from stdheader.config.logging import StdheaderLogger

    from .types import TomlTable

logger: StdheaderLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return StdHeader's **runtime defaults** as a Python dict.

    This function performs **no I/O**; the defaults are the base layer for
    config merging. Sections/keys align with `stdheader.config.keys.Toml`.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults. The value
        is a new dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_LAYOUT: {
            Toml.KEY_LENGTH: DEFAULT_LENGTH,
            Toml.KEY_MARGIN: DEFAULT_MARGIN,
        },
        Toml.SECTION_ART: {
            Toml.KEY_COMPACT: list(DEFAULT_COMPACT_ART),
            Toml.KEY_EXTENDED: [],
            Toml.KEY_EXTENDED_JUSTIFY: "right",
        },
        Toml.SECTION_USER: {
            Toml.KEY_NAME: DEFAULT_USER,
            Toml.KEY_EMAIL: DEFAULT_EMAIL,
        },
        Toml.SECTION_GIT: {
            Toml.KEY_ENABLED: False,
            Toml.KEY_BIN: DEFAULT_GIT_BIN,
            Toml.KEY_USER_GLOBAL: True,
            Toml.KEY_EMAIL_GLOBAL: True,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``stdheader.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Raises:
        OSError: If the file cannot be read.
        tomlkit.exceptions.ParseError: If the file is not valid TOML.
    """
    text: str = path.read_text(encoding="utf-8")
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def try_load_toml_dict(path: Path) -> TomlTable | None:
    """Load a TOML file, logging and returning None on failure.

    Used for best-effort discovery where an unreadable file must not abort the run.
    """
    try:
        return load_toml_dict(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
    return None
