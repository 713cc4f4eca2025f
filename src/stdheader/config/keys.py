# topmark:header:start
#
#   project      : StdHeader
#   file         : keys.py
#   file_relpath : src/stdheader/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Canonical TOML section and key names for StdHeader configuration.

These constants are the external configuration API as it appears in
``stdheader.toml`` and in ``[tool.stdheader]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by StdHeader configuration.

    The ordering of constants mirrors the rendered defaults
    (`stdheader.config.io.load_defaults_dict`).
    """

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [layout]
    SECTION_LAYOUT: Final[str] = "layout"

    KEY_LENGTH: Final[str] = "length"
    KEY_MARGIN: Final[str] = "margin"

    # [art]
    SECTION_ART: Final[str] = "art"

    KEY_COMPACT: Final[str] = "compact"
    KEY_EXTENDED: Final[str] = "extended"
    KEY_EXTENDED_JUSTIFY: Final[str] = "extended_justify"

    # [user]
    SECTION_USER: Final[str] = "user"

    KEY_NAME: Final[str] = "name"
    KEY_EMAIL: Final[str] = "email"

    # [git]
    SECTION_GIT: Final[str] = "git"

    KEY_ENABLED: Final[str] = "enabled"
    KEY_BIN: Final[str] = "bin"
    KEY_USER_GLOBAL: Final[str] = "user_global"
    KEY_EMAIL_GLOBAL: Final[str] = "email_global"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_ROOT,
            SECTION_LAYOUT,
            SECTION_ART,
            SECTION_USER,
            SECTION_GIT,
        }
    )

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_LAYOUT: frozenset({KEY_LENGTH, KEY_MARGIN}),
        SECTION_ART: frozenset({KEY_COMPACT, KEY_EXTENDED, KEY_EXTENDED_JUSTIFY}),
        SECTION_USER: frozenset({KEY_NAME, KEY_EMAIL}),
        SECTION_GIT: frozenset({KEY_ENABLED, KEY_BIN, KEY_USER_GLOBAL, KEY_EMAIL_GLOBAL}),
    }
