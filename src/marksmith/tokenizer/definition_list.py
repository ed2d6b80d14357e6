"""Definition list recognizer.

    Term
    : First definition
    : Second definition

    Another term
    : Its definition
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from marksmith.tokens import BlockMatch, DefinitionItem, DefinitionList

# Lines that open some other block can never be a term
_NOT_A_TERM_RE = re.compile(r"^[-*+#>:\d]")

DEFINITION_PREFIX = ": "


def _is_term(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and _NOT_A_TERM_RE.match(stripped) is None


def _is_definition(line: str) -> bool:
    return line.startswith(DEFINITION_PREFIX)


def _starts_entry(lines: Sequence[str], index: int) -> bool:
    return (
        index + 1 < len(lines) and _is_term(lines[index]) and _is_definition(lines[index + 1])
    )


def parse_definition_list(lines: Sequence[str], index: int) -> BlockMatch | None:
    """Recognise term/definition groups.

    A blank line between groups keeps the list open only when another
    term/definition pair follows it.
    """
    if not _starts_entry(lines, index):
        return None

    items: list[DefinitionItem] = []
    i = index
    while i < len(lines):
        if _starts_entry(lines, i):
            term = lines[i].strip()
            i += 1
            definitions: list[str] = []
            while i < len(lines) and _is_definition(lines[i]):
                definitions.append(lines[i][len(DEFINITION_PREFIX):].strip())
                i += 1
            items.append(DefinitionItem(term=term, definitions=tuple(definitions)))
            continue

        if not lines[i].strip():
            j = i
            while j < len(lines) and not lines[j].strip():
                j += 1
            if _starts_entry(lines, j):
                i = j
                continue

        break

    return BlockMatch(DefinitionList(items=tuple(items)), i)
