"""ANSI color codes for terminal output."""

import os
import sys


class Colors:
    """ANSI color codes for log and result output.

    Colors are enabled by default. Call ``Colors.init()`` once from the CLI
    to switch them off for non-terminals, ``NO_COLOR`` or ``--no-color``.
    """

    _COLOR_ATTRS = (
        "RESET",
        "DIM",
        "RED",
        "GREEN",
        "YELLOW",
        "CYAN",
        "BG_RED",
    )

    RESET = "\033[0m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"

    BG_RED = "\033[41m"

    @classmethod
    def disable(cls):
        """Disable colors (set all codes to empty strings)."""
        for attr in cls._COLOR_ATTRS:
            setattr(cls, attr, "")

    @classmethod
    def init(cls, enabled: bool = True, stream=None):
        """Decide once whether output gets colored.

        Args:
            enabled: False when the user asked for plain output.
            stream: Stream the colored text goes to (default: stderr, where
                the log is written).
        """
        stream = stream or sys.stderr
        if not enabled or "NO_COLOR" in os.environ or not stream.isatty():
            cls.disable()
