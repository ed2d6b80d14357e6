"""Table conversion.

The header row comes from ``thead`` when present, otherwise from the first
row. Column alignment is read from ``text-align`` in each header cell's
style and written back as the separator row.
"""

from __future__ import annotations

import re

from bs4.element import Tag

from marksmith.html_to_markdown.inline import CustomElementProcessor, process_inline_content

_TEXT_ALIGN_RE = re.compile(r"text-align\s*:\s*(left|center|right)", re.IGNORECASE)

SEPARATORS: dict[str | None, str] = {
    "left": ":---",
    "center": ":---:",
    "right": "---:",
    None: "---",
}


def alignment_of(cell: Tag) -> str | None:
    """``left``, ``center``, ``right`` or None from a cell's inline style."""
    match = _TEXT_ALIGN_RE.search(str(cell.get("style", "")))
    return match.group(1).lower() if match else None


def _row_cells(row: Tag, processor: CustomElementProcessor | None) -> list[str]:
    return [
        process_inline_content(cell, processor).strip().replace("\n", " ")
        for cell in row.find_all(["th", "td"], recursive=False)
    ]


def _pipe_row(cells: list[str]) -> str:
    return f"| {' | '.join(cells)} |"


def convert_table(table: Tag, processor: CustomElementProcessor | None = None) -> str:
    """Convert a ``table`` element to a pipe table.

    Returns:
        Header, separator and body lines followed by a blank line, or ""
        when the table has no rows
    """
    rows: list[list[str]] = []
    separators: list[str] = []

    thead = table.find("thead", recursive=False)
    header_row = thead.find("tr") if isinstance(thead, Tag) else None
    if isinstance(header_row, Tag):
        rows.append(_row_cells(header_row, processor))
        separators = [
            SEPARATORS[alignment_of(cell)]
            for cell in header_row.find_all(["th", "td"], recursive=False)
        ]

    for row in table.find_all("tr"):
        if row.find_parent("thead") is not None:
            continue
        # Rows of tables nested inside a cell belong to that table
        if row.find_parent("table") is not table:
            continue
        cells = _row_cells(row, processor)
        if cells:
            rows.append(cells)

    if not rows:
        return ""

    if not separators:
        separators = ["---"] * len(rows[0])

    lines = [_pipe_row(rows[0]), _pipe_row(separators)]
    lines.extend(_pipe_row(row) for row in rows[1:])
    return "\n".join(lines) + "\n\n"
