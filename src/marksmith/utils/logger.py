"""Minimal logging utilities for Marksmith.

Wraps the standard library logging so every module logs under the
"marksmith." namespace. The library never installs handlers; applications
opt in with logging.basicConfig() or their own configuration.

Example:
    >>> from marksmith.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenized %d blocks", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("tokenizer")
        >>> logger.name
        'marksmith.tokenizer'
    """
    if not (name == "marksmith" or name.startswith("marksmith.")):
        name = f"marksmith.{name}"
    return logging.getLogger(name)
