"""Collection and counting of reported diagnostics."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from tahu.diagnostic import Diagnostic
from tahu.severity import Severity

if TYPE_CHECKING:
    from tahu.context import DiagnosticContext
    from tahu.emitter import Emitter

DEFAULT_MAX_DIAGNOSTICS = 1000


class DiagnosticReporter:
    """Collects diagnostics up to a limit and counts them by severity."""

    def __init__(self, max_diagnostics: int = DEFAULT_MAX_DIAGNOSTICS) -> None:
        self.max_diagnostics = max_diagnostics
        self._diagnostics: list[Diagnostic] = []
        self._errors = 0
        self._warnings = 0
        self._infos = 0

    def report(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic; past the limit it is dropped with a warning."""
        if len(self._diagnostics) >= self.max_diagnostics:
            print(
                f"Warning: Maximum number of diagnostics reached ({self.max_diagnostics})",
                file=sys.stderr,
            )
            return
        if diagnostic.severity.is_error():
            self._errors += 1
        elif diagnostic.severity is Severity.WARNING:
            self._warnings += 1
        elif diagnostic.severity is Severity.INFO:
            self._infos += 1
        self._diagnostics.append(diagnostic)

    def emit_all(self, emitter: Emitter, context: DiagnosticContext) -> None:
        for diagnostic in self._diagnostics:
            emitter.emit(diagnostic, context)

    def has_errors(self) -> bool:
        return self._errors > 0

    def has_warnings(self) -> bool:
        return self._warnings > 0

    def error_count(self) -> int:
        return self._errors

    def warning_count(self) -> int:
        return self._warnings

    def info_count(self) -> int:
        return self._infos

    def __len__(self) -> int:
        return len(self._diagnostics)

    def clear(self) -> None:
        self._diagnostics.clear()
        self._errors = self._warnings = self._infos = 0

    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)