"""Logging configuration for whichbroke."""

import logging
import sys

from .colors import Colors


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name, and the message for warnings and up."""

    LEVEL_COLORS = {
        logging.DEBUG: "DIM",
        logging.INFO: "CYAN",
        logging.WARNING: "YELLOW",
        logging.ERROR: "RED",
        logging.CRITICAL: "BG_RED",
    }

    def format(self, record):
        # Looked up at format time so Colors.disable() takes effect.
        color = getattr(Colors, self.LEVEL_COLORS.get(record.levelno, "RESET"))
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        if record.levelno >= logging.WARNING:
            record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


def setup_logging(verbose: bool = False, stream=None) -> logging.Logger:
    """Set up logging with optional verbose mode.

    Args:
        verbose: If True, show DEBUG level messages with level prefix.
                 If False, show INFO+ messages without prefix.
        stream: Where log records go (default: stderr, which keeps stdout
                for the result line).

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger("whichbroke")

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()
    logger.propagate = False

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    if verbose:
        fmt = "%(levelname)s %(message)s"
    else:
        fmt = "%(message)s"
    handler.setFormatter(ColoredFormatter(fmt))

    logger.addHandler(handler)
    return logger
