"""Detection and markup of JSON embedded in JSON or YAML string values.

A value such as ``"{\\"a\\": 1}"`` is a string to the outer document but an
object to the reader. When the caller supplies an expansion predicate, the
JSON and YAML highlighters wrap such values in toggle markup that shows
either the pretty-printed object (expanded) or the original text (collapsed).

Only objects and arrays qualify; primitives gain nothing from an expanded
view. Candidates pass a cheap check (size ceiling, first character) before
the real parse is attempted.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeAlias

from marksmith.utils.logger import get_logger

logger = get_logger(__name__)

# Longer candidates are never parsed
MAX_PARSE_LENGTH = 100_000

EXPANDED_GLYPH = "▼"
COLLAPSED_GLYPH = "▶"

# Called with a nested-json id; True shows the parsed view
ExpansionPredicate: TypeAlias = Callable[[str], bool]


def _candidate(value: str) -> str | None:
    trimmed = value.strip()
    if not trimmed:
        return None
    if len(trimmed) > MAX_PARSE_LENGTH:
        logger.debug("Skipping nested JSON candidate of %d characters", len(trimmed))
        return None
    if trimmed[0] not in "{[":
        return None
    return trimmed


def parse_nested_json(value: str) -> dict[str, Any] | list[Any] | None:
    """Parse ``value`` if it holds a JSON object or array.

    Returns:
        The parsed object or array; None for primitives, malformed JSON,
        blank input, or input over MAX_PARSE_LENGTH characters
    """
    trimmed = _candidate(value)
    if trimmed is None:
        return None
    try:
        parsed = json.loads(trimmed)
    except ValueError:
        return None
    if isinstance(parsed, (dict, list)):
        return parsed
    return None


def is_nested_json(value: str) -> bool:
    """True if ``value`` holds a JSON object or array."""
    return parse_nested_json(value) is not None


def format_nested_json(parsed: dict[str, Any] | list[Any], indent_column: int = 0) -> str:
    """Pretty-print with two-space indentation.

    Lines after the first are shifted right by ``indent_column`` so the
    expanded object lines up under the position where it starts.
    """
    pretty = json.dumps(parsed, indent=2, ensure_ascii=False)
    if not indent_column:
        return pretty
    pad = " " * indent_column
    first, *rest = pretty.split("\n")
    return "\n".join([first, *(pad + line for line in rest)])


def build_nested_json_markup(
    nested_id: str,
    raw_html: str,
    expanded: bool,
    parsed_html: str = "",
) -> str:
    """Toggle markup for a nested JSON value.

    Args:
        nested_id: Identifier passed to the expansion predicate
        raw_html: Escaped original text, shown when collapsed
        expanded: Which view to emit
        parsed_html: Highlighted pretty-printed JSON, shown when expanded
    """
    glyph = EXPANDED_GLYPH if expanded else COLLAPSED_GLYPH
    toggle = (
        f'<span class="nested-json-toggle" data-nested-json-toggle="{nested_id}">{glyph}</span>'
    )
    if expanded:
        body = f'<span class="nested-json-parsed">{parsed_html}</span>'
    else:
        body = f'<span class="nested-json-raw">{raw_html}</span>'
    return f'<span class="nested-json" data-nested-json-id="{nested_id}">{toggle}{body}</span>'
