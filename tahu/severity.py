"""Severity levels of diagnostics."""

from __future__ import annotations

from enum import IntEnum

RESET = "\x1b[0m"


class Severity(IntEnum):
    """How serious a diagnostic is, ordered from least to most severe."""

    HELP = 0
    NOTE = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    def __str__(self) -> str:
        return self.name.lower()

    def color_code(self) -> str:
        """ANSI escape sequence used to colour this severity."""
        return _COLORS[self]

    def is_error(self) -> bool:
        """Whether the severity stops compilation."""
        return self in (Severity.ERROR, Severity.FATAL)


_COLORS = {
    Severity.HELP: "\x1b[36m",
    Severity.NOTE: "\x1b[34m",
    Severity.INFO: "\x1b[32m",
    Severity.WARNING: "\x1b[33m",
    Severity.ERROR: "\x1b[31m",
    Severity.FATAL: "\x1b[35m",
}