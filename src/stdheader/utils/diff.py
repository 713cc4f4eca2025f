# topmark:header:start
#
#   project      : StdHeader
#   file         : diff.py
#   file_relpath : src/stdheader/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Unified diffs of header changes, with a colorized preview for the CLI."""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk

from stdheader.config.logging import get_logger

logger = get_logger(__name__)


def compute_diff(old_lines: Sequence[str], new_lines: Sequence[str], name: str) -> list[str]:
    """Return a unified diff (lines without terminators) between two versions.

    Args:
        old_lines: The lines before the change.
        new_lines: The lines after the change.
        name: File name shown in the ``---``/``+++`` headers.

    Returns:
        The diff lines; empty when the versions are identical.
    """
    diff: list[str] = list(
        difflib.unified_diff(
            list(old_lines),
            list(new_lines),
            fromfile=f"{name} (current)",
            tofile=f"{name} (updated)",
            lineterm="",
        )
    )
    logger.trace("Diff for %s: %d lines", name, len(diff))
    return diff


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        content: str = line.replace("\r", "\\r").replace("\n", "\\n")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
