"""List recognizer with nesting and task items.

Nesting is indentation driven: a marker indented at least two columns past
the current list's base indent starts a child list owned by the previous
item. The child is parsed by the same function with the deeper base indent,
so recursion depth is bounded by the indentation levels in the input.

    - Parent
      1. Child (ordered list nested in the first item)
    - [x] Done (task item)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from marksmith.tokenizer.lines import (
    LIST_ITEM_RE,
    TASK_MARKER_RE,
    get_indent,
    is_ordered_marker,
)
from marksmith.tokens import BlockMatch, BlockToken, ListBlock, ListItem

NESTED_INDENT = 2


@dataclass(slots=True)
class _ItemBuilder:
    """Mutable item while its continuation lines and children are collected."""

    lines: list[str]
    checked: bool | None = None
    children: list[BlockToken] = field(default_factory=list)

    def build(self) -> ListItem:
        return ListItem(
            content="\n".join(self.lines),
            checked=self.checked,
            children=tuple(self.children),
        )


def _new_item(content: str, ordered: bool) -> _ItemBuilder:
    if not ordered:
        task = TASK_MARKER_RE.match(content)
        if task:
            return _ItemBuilder(lines=[task.group(2) or ""], checked=task.group(1) != " ")
    return _ItemBuilder(lines=[content])


def _continues_after_blank(
    lines: Sequence[str], index: int, base_indent: int, ordered: bool
) -> int | None:
    """Index of the next same-kind sibling item past blank lines, if any."""
    j = index
    while j < len(lines) and not lines[j].strip():
        j += 1
    if j >= len(lines):
        return None

    match = LIST_ITEM_RE.match(lines[j])
    if match is None:
        return None
    indent = get_indent(lines[j])
    if indent < base_indent or indent >= base_indent + NESTED_INDENT:
        return None
    if is_ordered_marker(match.group(2)) != ordered:
        return None
    return j


def parse_list(
    lines: Sequence[str], index: int, base_indent: int | None = None
) -> BlockMatch | None:
    """Recognise an ordered or unordered list starting at ``index``.

    Args:
        lines: Source lines
        index: Line to start at
        base_indent: Indentation of this list's markers; defaults to the
            indentation of the first line

    Returns:
        BlockMatch with a ListBlock, or None if ``lines[index]`` is not a list
        item at ``base_indent`` or deeper
    """
    if index >= len(lines):
        return None

    first = LIST_ITEM_RE.match(lines[index])
    if first is None:
        return None

    first_indent = get_indent(lines[index])
    if base_indent is None:
        base_indent = first_indent
    elif first_indent < base_indent:
        return None

    marker = first.group(2)
    ordered = is_ordered_marker(marker)
    start = int(marker[:-1]) if ordered else 1

    items: list[_ItemBuilder] = []
    i = index
    while i < len(lines):
        line = lines[i]

        if not line.strip():
            following = _continues_after_blank(lines, i, base_indent, ordered)
            if following is None:
                break
            i = following
            continue

        indent = get_indent(line)
        if indent < base_indent:
            break

        match = LIST_ITEM_RE.match(line)
        nested = items and indent >= base_indent + NESTED_INDENT

        if match and nested:
            child = parse_list(lines, i, indent)
            if child is None:
                break
            items[-1].children.append(child.token)
            i = child.end_index
            continue

        if match:
            if is_ordered_marker(match.group(2)) != ordered:
                break
            items.append(_new_item(match.group(3).strip(), ordered))
            i += 1
            continue

        if nested:
            items[-1].lines.append(line.strip())
            i += 1
            continue

        break

    token = ListBlock(ordered=ordered, items=tuple(item.build() for item in items), start=start)
    return BlockMatch(token, i)
