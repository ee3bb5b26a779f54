"""Console logging with coloured level prefixes."""

from __future__ import annotations

import logging
import sys

from termcolor import colored

_STYLES = {
    logging.ERROR: ("error: ", "red"),
    logging.WARNING: ("warn: ", "yellow"),
    logging.DEBUG: ("debug: ", "blue"),
}


class ColorFormatter(logging.Formatter):
    """Prefixes errors, warnings and debug output with a coloured label."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        style = _STYLES.get(record.levelno)
        if style is None:
            return message
        prefix, color = style
        return colored(prefix, color, attrs=["bold"]) + colored(message, color)


class _ConsoleHandler(logging.Handler):
    """Writes errors to standard error and everything else to standard output."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stderr if record.levelno >= logging.ERROR else sys.stdout
            stream.write(self.format(record) + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


def init() -> logging.Logger:
    """Configure the package logger to print everything from debug up."""
    logger = logging.getLogger("cargonuget")
    logger.handlers.clear()
    handler = _ConsoleHandler()
    handler.setFormatter(ColorFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger