# topmark:header:start
#
#   project      : StdHeader
#   file         : render.py
#   file_relpath : src/stdheader/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Render config tables back to TOML with `tomlkit`.

TOML has no null, so ``None`` values (an unset user name, for instance) are
left out of the output.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

import tomlkit

from stdheader.config.logging import get_logger

if TYPE_CHECKING:
    from tomlkit.items import Table
    from tomlkit.toml_document import TOMLDocument

    from stdheader.config.logging import StdheaderLogger

    from .types import TomlTable

logger: StdheaderLogger = get_logger(__name__)


def _without_none(value: Any) -> Any:
    if isinstance(value, Mapping):
        kept: dict[str, Any] = {}
        for key, item in value.items():
            if item is None:
                logger.debug("Dropping unset key %s from TOML output", key)
                continue
            kept[str(key)] = _without_none(item)
        return kept
    if isinstance(value, (list, tuple)):
        return [_without_none(item) for item in value if item is not None]
    return value


def _section(values: Mapping[str, Any], comment: str | None) -> Table:
    table: Table = tomlkit.table()
    if comment:
        table.add(tomlkit.comment(comment))
    for key, value in values.items():
        table.add(key, value)
    return table


def to_toml(
    toml_dict: TomlTable,
    *,
    header: Sequence[str] = (),
    comments: Mapping[str, str] | None = None,
) -> str:
    """Serialize a config table to TOML text.

    Args:
        toml_dict (TomlTable): The table to render (e.g. `Config.to_toml_dict`).
        header (Sequence[str]): Comment lines written at the top of the document.
        comments (Mapping[str, str] | None): Per-section comment, keyed by
            section name, written as the first line of that section.

    Returns:
        str: The TOML document.
    """
    comments = comments or {}
    doc: TOMLDocument = tomlkit.document()
    for line in header:
        doc.add(tomlkit.comment(line))
    if header:
        doc.add(tomlkit.nl())

    for key, value in _without_none(toml_dict).items():
        if isinstance(value, dict):
            doc.add(key, _section(value, comments.get(key)))
        else:
            doc.add(key, value)
    return tomlkit.dumps(doc)
