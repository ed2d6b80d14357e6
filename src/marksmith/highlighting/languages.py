"""Language name normalisation."""

from __future__ import annotations

LANGUAGE_ALIASES: dict[str, str] = {
    "js": "javascript",
    "ts": "typescript",
    "py": "python",
    "rb": "ruby",
    "yml": "yaml",
    "md": "markdown",
    "sh": "bash",
    "shell": "bash",
    "htm": "html",
    "xhtml": "html",
}


def normalize_language(language: str | None = None) -> str:
    """Map an alias to its canonical name.

    Lookup ignores case. Unknown names come back lowercased and an empty name
    becomes "text".

    Example:
        >>> normalize_language("JS")
        'javascript'
        >>> normalize_language("Rust")
        'rust'
    """
    if not language:
        return "text"
    lowered = language.strip().lower()
    return LANGUAGE_ALIASES.get(lowered, lowered) or "text"
