"""Logging configuration for the ray tracer.

Library modules only create loggers with ``logging.getLogger(__name__)``.
Applications (such as the example scripts) call ``setup_logging`` once to
attach a console handler.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str = "INFO", name: str = "src.whitted") -> logging.Logger:
    """Attach a formatted console handler to the package logger.

    Calling it again replaces the previous handler instead of adding a
    second one.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        name: Logger to configure.

    Returns:
        The configured logger.

    Raises:
        ValueError: If the level name is unknown.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        if getattr(handler, "_whitted_console", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._whitted_console = True  # type: ignore[attr-defined]
    logger.addHandler(console_handler)

    return logger
