"""Logging for taglex.

Loggers live under the "taglex." namespace and no handler is installed, so
output is off until the application configures logging. The lexer logs each
state transition and every diagnostic at DEBUG:

    >>> import logging
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> tokenize("<a/>")  # logs "lexer state INIT -> COMMON", ...
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "taglex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'taglex.mymodule'
    """
    if not (name == "taglex" or name.startswith("taglex.")):
        name = f"taglex.{name}"
    return logging.getLogger(name)
