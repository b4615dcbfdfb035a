"""Verbosity levels for status output."""

import logging
from enum import IntEnum


class Verbosity(IntEnum):
    """Status output levels."""

    QUIET = 0
    COMMANDS = 1
    OUTPUT = 2

    @property
    def log_level(self) -> int:
        """Logging level matching this verbosity."""
        return {
            Verbosity.QUIET: logging.WARNING,
            Verbosity.COMMANDS: logging.INFO,
            Verbosity.OUTPUT: logging.DEBUG,
        }[self]


__all__ = ["Verbosity"]
