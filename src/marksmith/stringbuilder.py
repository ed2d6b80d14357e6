"""StringBuilder for O(n) HTML accumulation.

The renderer and the highlighters emit many small fragments. Collecting them
in a list and joining once keeps output assembly linear in the size of the
document.

Thread Safety:
StringBuilder instances are local to each render() or highlight call.
No shared mutable state.
"""

from __future__ import annotations

from collections.abc import Iterable


class StringBuilder:
    """Fragment accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<li>").append("Item").append("</li>")
            >>> sb.build()
            '<li>Item</li>'
            >>> sb.build(separator="|")
            '<li>|Item|</li>'

    Thread Safety:
        Instance is local to each call.
        No shared mutable state.

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def extend(self, strings: Iterable[str]) -> StringBuilder:
        """Append several fragments, skipping empty ones.

        Returns:
            self for method chaining
        """
        self._parts.extend(s for s in strings if s)
        return self

    def build(self, separator: str = "") -> str:
        """Join all fragments.

        Args:
            separator: Inserted between fragments; the renderer uses "\\n"
                between top-level blocks
        """
        return separator.join(self._parts)

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any fragment has been appended."""
        return bool(self._parts)
