# topmark:header:start
#
#   project      : StdHeader
#   file         : constants.py
#   file_relpath : src/stdheader/constants.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""StdHeader Constants.

Layout positions are kept here so the composer, matcher and updater agree on a
single description of the header block.
"""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

STDHEADER_VERSION: str = get_version("stdheader")

# Name of the project-local config file and of the [tool.*] table in pyproject.toml:
STDHEADER_CONFIG_NAME: str = "stdheader.toml"
PYPROJECT_TOOL_SECTION: str = "stdheader"

# Environment variables consulted by the CLI host.
ENV_LOG_LEVEL: str = "STDHEADER_LOG_LEVEL"
ENV_USER: str = "STDHEADER_USER"
ENV_EMAIL: str = "STDHEADER_EMAIL"

# Rendered in the "Created:"/"Updated:" lines.
TIMESTAMP_FORMAT: str = "%Y/%m/%d %H:%M:%S"

DEFAULT_LEFT_DELIMITER: str = "#"
DEFAULT_RIGHT_DELIMITER: str = "#"

# Fill character of the top and bottom borders.
BORDER_FILL: str = "*"

DEFAULT_LENGTH: int = 80
DEFAULT_MARGIN: int = 5

# One token per decorated header line (lines 3 to 9).
COMPACT_ART_SIZE: Final[int] = 7

DEFAULT_COMPACT_ART: Final[tuple[str, ...]] = (
    "        :::      ::::::::",
    "      :+:      :+:    :+:",
    "    +:+ +:+         +:+  ",
    "  +#+  +:+       +#+     ",
    "+#+#+#+#+#+   +#+        ",
    "     #+#    #+#          ",
    "    ###   ########.fr    ",
)

DEFAULT_USER: str = "marvin"
DEFAULT_EMAIL: str = "marvin@codam.nl"
DEFAULT_GIT_BIN: str = "git"

# Placeholder rendered when no identity source yields a value.
IDENTITY_PLACEHOLDER: str = ""

# Header line indices (0-based). Negative indices count from the bottom border.
#
#   0  top border            5  author line            10.. extended art
#   1  blank                 6  blank + art            -1   bottom border
#   2  blank + art           7  created line
#   3  filename line         8  updated line
#   4  blank + art           9  blank
HEADER_SIGNATURE_INDICES: Final[tuple[int, ...]] = (0, 1, 2, 9, -1)
HEADER_IMMUTABLE_INDICES: Final[tuple[int, ...]] = (5, 7)
HEADER_UPDATED_INDEX: Final[int] = 8
