"""Detection of unfenced JSON and YAML blocks.

Pasted configuration is common in notes, so a block that parses as a JSON
object/array or a YAML mapping/sequence becomes a code block even without a
fence. Detection is structural first (bracket balance, ``key: value`` shape)
and only then confirmed with a real parser, so ordinary prose is rejected
cheaply.

Thread Safety:
    Pure functions over the line sequence.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence

import yaml

from marksmith.tokens import BlockMatch, CodeBlock
from marksmith.utils.logger import get_logger

logger = get_logger(__name__)

# key: value on the first line, optionally as a sequence entry ("- key: value")
YAML_FIRST_LINE_RE = re.compile(r"^-?\s*\w[\w\s]*:\s+.+")

_OPENERS = "{["
_CLOSERS = "}]"


def _bracket_delta(line: str, in_string: bool) -> tuple[int, bool]:
    """Net bracket depth change of ``line``, ignoring brackets inside strings.

    Returns the delta and whether the line ends inside an open string.
    """
    delta = 0
    escaped = False
    for char in line:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in _OPENERS:
            delta += 1
        elif char in _CLOSERS:
            delta -= 1
    return delta, in_string


def collect_json_lines(lines: Sequence[str], index: int) -> int | None:
    """Index one past the line that balances the opening bracket.

    Returns None when the candidate is unbalanced at end of input or a blank
    line appears before the brackets close.
    """
    depth = 0
    in_string = False
    i = index
    while i < len(lines):
        line = lines[i]
        if not line.strip() and depth > 0:
            return None
        delta, in_string = _bracket_delta(line, in_string)
        depth += delta
        i += 1
        if depth <= 0:
            return i
    return None


def parse_json_block(lines: Sequence[str], index: int) -> BlockMatch | None:
    """Recognise an unfenced JSON object or array."""
    if not lines[index].lstrip().startswith(("{", "[")):
        return None

    end = collect_json_lines(lines, index)
    if end is None:
        return None

    content = "\n".join(lines[index:end])
    try:
        json.loads(content)
    except ValueError:
        return None

    logger.debug("Detected JSON block at line %d (%d lines)", index, end - index)
    return BlockMatch(CodeBlock(language="json", content=content, auto_detected=True), end)


def parse_yaml_block(lines: Sequence[str], index: int) -> BlockMatch | None:
    """Recognise an unfenced YAML mapping or sequence of two or more lines."""
    if not YAML_FIRST_LINE_RE.match(lines[index]):
        return None

    end = index
    while end < len(lines) and lines[end].strip():
        end += 1
    if end - index < 2:
        return None

    content = "\n".join(lines[index:end])
    try:
        data = yaml.safe_load(content)
    except (yaml.YAMLError, ValueError):
        # ValueError: implicit timestamps such as 2024-13-01
        return None
    if not isinstance(data, (dict, list)):
        return None

    logger.debug("Detected YAML block at line %d (%d lines)", index, end - index)
    return BlockMatch(CodeBlock(language="yaml", content=content, auto_detected=True), end)
