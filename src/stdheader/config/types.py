# topmark:header:start
#
#   project      : StdHeader
#   file         : types.py
#   file_relpath : src/stdheader/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class ArtJustify(str, Enum):
    """Justification of extended art lines within the header width."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class GitOptions:
    """Version-control identity lookup settings.

    Attributes:
        enabled (bool): Whether to query git for the committer identity.
        bin (str): Git executable (name on ``PATH`` or absolute path).
        user_global (bool): Read ``user.name`` from the global git config only.
        email_global (bool): Read ``user.email`` from the global git config only.
    """

    enabled: bool = False
    bin: str = "git"
    user_global: bool = True
    email_global: bool = True
