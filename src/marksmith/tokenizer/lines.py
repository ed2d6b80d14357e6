"""Line-level helpers shared by the block recognizers."""

from __future__ import annotations

import re

# Unordered (-, *, +) or ordered (1. / 1)) marker followed by whitespace
LIST_ITEM_RE = re.compile(r"^(\s*)([-*+]|\d+[.)])\s+(.*)$")

# Task checkbox at the start of unordered item content
TASK_MARKER_RE = re.compile(r"^\[([ xX])\](?:\s+(.*))?$")

HORIZONTAL_RULE_RE = re.compile(r"^(-{3,}|\*{3,}|_{3,})$")

TAB_WIDTH = 2


def get_indent(line: str) -> int:
    """Count leading indentation, treating a tab as two spaces."""
    width = 0
    for char in line:
        if char == " ":
            width += 1
        elif char == "\t":
            width += TAB_WIDTH
        else:
            break
    return width


def is_horizontal_rule(line: str) -> bool:
    return HORIZONTAL_RULE_RE.match(line.strip()) is not None


def is_ordered_marker(marker: str) -> bool:
    return marker[0].isdigit()


def parse_pipe_row(line: str) -> list[str]:
    """Split a table row into trimmed cell texts.

    Leading and trailing pipes are optional. ``\\|`` is a literal pipe inside
    a cell.

    Examples:
        >>> parse_pipe_row("| a | b \\\\| c |")
        ['a', 'b | c']
        >>> parse_pipe_row("x | y")
        ['x', 'y']
    """
    line = line.strip()

    if line.startswith("|"):
        line = line[1:]
    if line.endswith("|") and not line.endswith("\\|"):
        line = line[:-1]

    cells: list[str] = []
    current: list[str] = []
    i = 0
    while i < len(line):
        if line[i] == "\\" and i + 1 < len(line) and line[i + 1] == "|":
            current.append("|")
            i += 2
        elif line[i] == "|":
            cells.append("".join(current).strip())
            current = []
            i += 1
        else:
            current.append(line[i])
            i += 1

    cells.append("".join(current).strip())
    return cells
