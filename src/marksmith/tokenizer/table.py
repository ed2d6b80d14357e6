"""Pipe table recognizer.

Table syntax:
    | Header 1 | Header 2 |
    |:---------|---------:|
    | Cell 1   | Cell 2   |

Alignment:
    :--- = left
    :---: = center
    ---: = right
    --- = no alignment
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from marksmith.tokenizer.lines import parse_pipe_row
from marksmith.tokens import Alignment, BlockMatch, Table

SEPARATOR_CELL_RE = re.compile(r"^:?-+:?$")


def parse_alignments(line: str) -> tuple[Alignment, ...] | None:
    """Parse the separator row; None if any cell is not ``:?-+:?``."""
    if "|" not in line:
        return None

    alignments: list[Alignment] = []
    for cell in parse_pipe_row(line):
        if not SEPARATOR_CELL_RE.match(cell):
            return None
        left = cell.startswith(":")
        right = cell.endswith(":")
        if left and right:
            alignments.append("center")
        elif right:
            alignments.append("right")
        elif left:
            alignments.append("left")
        else:
            alignments.append(None)
    return tuple(alignments)


def parse_table(lines: Sequence[str], index: int) -> BlockMatch | None:
    """Recognise a header row, a separator row, and any body rows.

    Without a valid separator the lines are left for the paragraph recognizer.
    """
    if index + 1 >= len(lines) or "|" not in lines[index]:
        return None

    alignments = parse_alignments(lines[index + 1])
    if alignments is None:
        return None

    headers = tuple(parse_pipe_row(lines[index]))

    rows: list[tuple[str, ...]] = []
    i = index + 2
    while i < len(lines) and lines[i].strip() and "|" in lines[i]:
        rows.append(tuple(parse_pipe_row(lines[i])))
        i += 1

    return BlockMatch(Table(headers=headers, alignments=alignments, rows=tuple(rows)), i)
