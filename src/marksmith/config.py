"""ContextVar-based configuration for Marksmith.

Holds the switches that change how Markdown is tokenized and rendered. A
config is set once per Markdown instance (or per render_markdown() call) and
read by the tokenizer and renderer in that context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so concurrent conversions with different configs never see each other.

Usage:
    # Through the high-level processor
    md = Markdown(ParseConfig(highlight_code=True))
    html = md("```json\\n{\\"a\\": 1}\\n```")

    # Direct tokenizer usage
    from marksmith.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(structured_data_enabled=False)):
        tokens = tokenize('{"a": 1}')

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable conversion configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Note: link references and footnotes are per-call state, not configuration.
    They live on ParserState, which is created fresh for every conversion.

    Attributes:
        sanitize: HTML-escape source text before applying inline rules
        structured_data_enabled: Detect unfenced JSON/YAML blocks and render
            them as code blocks
        highlight_code: Run code block content through the syntax highlighters
        color_swatches: Decorate hex colours inside highlighted code

    """

    sanitize: bool = True
    structured_data_enabled: bool = True
    highlight_code: bool = False
    color_swatches: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ParseConfig:
        """Create ParseConfig from dictionary.

        Useful when settings come from an external source such as a YAML
        file or a request payload. Unknown keys are ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "highlight_code": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.highlight_code
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "marksmith_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.
    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[ParseConfig]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        The config that is now active

    Example:
        >>> with parse_config_context(ParseConfig(sanitize=False)):
        ...     html = render_markdown("<b>raw</b>")

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    token = _parse_config.set(config)
    try:
        yield config
    finally:
        _parse_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
