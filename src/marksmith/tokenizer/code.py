"""Fenced and indented code block recognizers."""

from __future__ import annotations

from collections.abc import Sequence

from marksmith.tokens import BlockMatch, CodeBlock

FENCE = "```"


def parse_fenced_code(lines: Sequence[str], index: int) -> BlockMatch | None:
    """Recognise a triple-backtick fence with an optional language tag.

    The closing fence may be indented. An unterminated fence runs to the end
    of the input instead of failing.
    """
    opening = lines[index].lstrip()
    if not opening.startswith(FENCE):
        return None

    language = opening[len(FENCE):].strip()
    body: list[str] = []

    i = index + 1
    while i < len(lines):
        if lines[i].strip().startswith(FENCE):
            return BlockMatch(CodeBlock(language=language, content="\n".join(body)), i + 1)
        body.append(lines[i])
        i += 1

    return BlockMatch(CodeBlock(language=language, content="\n".join(body)), i)


def _strip_code_indent(line: str) -> str | None:
    """Remove a 4-space or tab prefix; None if the line has neither."""
    if line.startswith("    "):
        return line[4:]
    if line.startswith("\t"):
        return line[1:]
    return None


def parse_indented_code(lines: Sequence[str], index: int) -> BlockMatch | None:
    """Recognise lines indented by four spaces or a tab.

    Blank lines inside the block are kept; blank lines at the end are consumed
    but dropped from the content. A run with no visible text is not code.
    """
    if _strip_code_indent(lines[index]) is None:
        return None

    body: list[str] = []
    i = index
    while i < len(lines):
        line = lines[i]
        stripped = _strip_code_indent(line)
        if stripped is not None:
            body.append(stripped)
        elif not line.strip():
            body.append("")
        else:
            break
        i += 1

    while body and not body[-1].strip():
        body.pop()

    if not body:
        return None

    return BlockMatch(CodeBlock(language="", content="\n".join(body)), i)
