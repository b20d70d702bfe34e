"""Emitter interface and the one-line-per-diagnostic emitter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from tahu.context import DiagnosticContext
    from tahu.diagnostic import Diagnostic
    from tahu.reporter import DiagnosticReporter


class Emitter(ABC):
    """Renders diagnostics and a closing summary."""

    @abstractmethod
    def emit(self, diagnostic: Diagnostic, context: DiagnosticContext) -> None:
        """Render one diagnostic."""

    @abstractmethod
    def emit_summary(self, reporter: DiagnosticReporter) -> None:
        """Render the summary of everything reported."""


class CompactEmitter(Emitter):
    """Writes each diagnostic as a single ``path:line:column`` line."""

    def __init__(self, writer: TextIO) -> None:
        self.writer = writer

    def emit(self, diagnostic: Diagnostic, context: DiagnosticContext) -> None:
        span = diagnostic.span
        if span is None:
            self.writer.write(f"[{diagnostic.severity}]: {diagnostic.message}\n")
            return
        source = context.get_file(span.file_id)
        if source is not None:
            self.writer.write(
                f"{source.path}:{span.start.line}:{span.start.column}: "
                f"[{diagnostic.severity}]: {diagnostic.message}\n"
            )

    def emit_summary(self, reporter: DiagnosticReporter) -> None:
        errors = reporter.error_count()
        warnings = reporter.warning_count()
        if errors > 0:
            line = f"Compilation failed: {errors} errors, {warnings} warnings"
        elif warnings > 0:
            line = f"Compilation succeeded: {warnings} warnings"
        else:
            line = "Compilation succeeded"
        self.writer.write(line + "\n")