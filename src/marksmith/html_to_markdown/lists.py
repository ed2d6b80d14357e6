"""List conversion.

``ul`` items get ``- `` markers and ``ol`` items are numbered from the list's
``start`` attribute. Nested lists are indented two spaces under their item,
and a checkbox input at the start of an item becomes ``[ ] `` or ``[x] ``.
"""

from __future__ import annotations

from bs4.element import PageElement, Tag

from marksmith.html_to_markdown.inline import CustomElementProcessor, convert_inline_nodes

NESTED_INDENT = "  "

_LIST_TAGS = frozenset({"ul", "ol"})


def _start_number(list_element: Tag) -> int:
    start = str(list_element.get("start", "1")).strip()
    return int(start) if start.isdecimal() else 1


def _is_checkbox(node: Tag) -> bool:
    return node.name == "input" and node.get("type") == "checkbox"


def _item_lines(
    item: Tag,
    prefix: str,
    processor: CustomElementProcessor | None,
) -> list[str]:
    """Lines for one ``li``: its own text, then any nested lists indented."""
    checkbox = ""
    own_nodes: list[PageElement] = []
    nested: list[Tag] = []
    for child in item.children:
        if not isinstance(child, Tag):
            own_nodes.append(child)
        elif child.name in _LIST_TAGS:
            nested.append(child)
        elif _is_checkbox(child):
            checkbox = "[x] " if child.has_attr("checked") else "[ ] "
        else:
            own_nodes.append(child)

    text = convert_inline_nodes(own_nodes, processor).strip()
    lines = [f"{prefix}{checkbox}{text}"]
    for nested_list in nested:
        for line in convert_list(nested_list, processor).split("\n"):
            if line:
                lines.append(f"{NESTED_INDENT}{line}")
    return lines


def convert_list(list_element: Tag, processor: CustomElementProcessor | None = None) -> str:
    """Convert a ``ul`` or ``ol`` element.

    Args:
        list_element: The list element
        processor: Custom element hook, applied to inline content of items

    Returns:
        One line per item (plus nested lines), followed by a blank line
    """
    ordered = list_element.name == "ol"
    number = _start_number(list_element) if ordered else 0

    lines: list[str] = []
    for item in list_element.find_all("li", recursive=False):
        prefix = f"{number}. " if ordered else "- "
        lines.extend(_item_lines(item, prefix, processor))
        number += 1

    return "\n".join(lines) + "\n\n"
