"""Exception classes for Marksmith.

Malformed Markdown, HTML, or code never raises: recognizers return None and
callers fall through to plain-text output. The exceptions here signal misuse
of the API (wrong argument types, broken registrations, unknown token types).
"""

from __future__ import annotations


class MarksmithError(Exception):
    """Base exception for all Marksmith errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(MarksmithError):
    """Error raised when a caller hands the parser something it cannot use.

    Carries an optional source location so messages point at the offending
    line of the input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class RenderError(MarksmithError):
    """Error during HTML rendering.

    Raised when the renderer is given a token type it does not know.
    """

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(f"Cannot render token of type {type(token).__name__!r}")


class ConversionError(MarksmithError):
    """Error converting HTML back to Markdown.

    Raised when html_to_markdown() receives neither markup nor a parsed element.
    """

    pass


class HighlightError(MarksmithError):
    """Error in highlighter registration.

    Raised when a highlighter cannot be registered for a language.
    """

    def __init__(self, language: str, message: str) -> None:
        """Initialize highlighter error.

        Args:
            language: Language the highlighter was registered for
            message: Description of the error
        """
        self.language = language
        super().__init__(f"Highlighter '{language}': {message}")
