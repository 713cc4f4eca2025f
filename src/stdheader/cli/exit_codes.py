# topmark:header:start
#
#   project      : StdHeader
#   file         : exit_codes.py
#   file_relpath : src/stdheader/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Standardized exit codes used by the StdHeader CLI.

Values follow the BSD ``sysexits.h`` conventions where one applies.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the StdHeader CLI.

    Attributes:
        SUCCESS (int): Every requested operation succeeded.
        FAILURE (int): At least one document could not be processed (art too
            wide, document not writable, ...).
        WOULD_CHANGE (int): A dry run (or ``check``) found documents that would
            change.
        USAGE_ERROR (int): Invalid invocation.
        FILE_NOT_FOUND (int): An input path does not exist.
        IO_ERROR (int): Reading or writing a file failed.
        CONFIG_ERROR (int): A configuration file is missing or malformed.

    Usage:
        ```python
        import subprocess
        from stdheader.cli.exit_codes import ExitCode

        result = subprocess.run(["stdheader", "check", "src/main.c"])
        if result.returncode == ExitCode.WOULD_CHANGE:
            print("main.c has no header yet.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2
    USAGE_ERROR = 64
    FILE_NOT_FOUND = 66
    IO_ERROR = 74
    CONFIG_ERROR = 78
