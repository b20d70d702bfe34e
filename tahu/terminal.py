"""Emitter that renders diagnostics for a human reading a terminal."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from tahu.emitter import Emitter
from tahu.severity import RESET, Severity

if TYPE_CHECKING:
    from tahu.context import DiagnosticContext
    from tahu.diagnostic import Diagnostic
    from tahu.reporter import DiagnosticReporter


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


class TerminalEmitter(Emitter):
    """Writes diagnostics with source snippets, underlines and optional colours."""

    def __init__(self, writer: TextIO, use_colors: bool) -> None:
        self.writer = writer
        self.use_colors = use_colors

    def _write(self, text: str) -> None:
        self.writer.write(text)

    def _write_colored(self, text: str, color: str) -> None:
        if self.use_colors:
            self._write(f"{color}{text}{RESET}")
        else:
            self._write(text)

    def _emit_source_snippet(self, diagnostic: Diagnostic, context: DiagnosticContext) -> None:
        span = diagnostic.span
        if span is None:
            return
        source = context.get_file(span.file_id)
        if source is None:
            return

        self._write(f"   --> {source.path}:{span.start.line}:{span.start.column}\n")
        self._write("    |\n")

        first, last = span.start.line, span.end.line
        for line_num in range(first, last + 1):
            content = source.line_content(line_num)
            if content is None:
                continue
            text = content.rstrip()
            self._write(f"{line_num:3} | {text}\n")
            self._write("    | ")

            if first == last:
                start_col = max(span.start.column - 1, 0)
                end_col = max(span.end.column - 1, 0)
            elif line_num == first:
                start_col = max(span.start.column - 1, 0)
                end_col = len(text)
            elif line_num == last:
                start_col = 0
                end_col = max(span.end.column - 1, 0)
            else:
                start_col = 0
                end_col = len(text)

            self._write(" " * start_col)
            underline = "^" * max(end_col - start_col, 1)
            if self.use_colors:
                self._write(f"{diagnostic.severity.color_code()}{underline}{RESET}")
            else:
                self._write(underline)

            if line_num == first:
                self._write(f" {diagnostic.message}")
            self._write("\n")

    def emit(self, diagnostic: Diagnostic, context: DiagnosticContext) -> None:
        self._write_colored(str(diagnostic.severity), diagnostic.severity.color_code())
        self._write(f": {diagnostic.message}\n")

        self._emit_source_snippet(diagnostic, context)

        for related in diagnostic.related:
            self._write("   |\n")
            self._write("note: ")
            source = context.get_file(related.span.file_id)
            if source is not None:
                start = related.span.start
                self._write(f"{related.message} at {source.path}:{start.line}:{start.column}\n")
            else:
                self._write(f"{related.message}\n")

        if diagnostic.note is not None:
            self._write("    |\n")
            self._write(f"    = note: {diagnostic.note}\n")

        for suggestion in diagnostic.suggestions:
            self._write("    |\n")
            self._write_colored("    = help: ", Severity.HELP.color_code())
            self._write(suggestion.message)
            count = len(suggestion.replacements)
            self._write(f" ({count} replacement{_plural(count)}): ")
            for i, replacement in enumerate(suggestion.replacements):
                if i > 0:
                    self._write(", ")
                span = replacement.span
                source = context.get_file(span.file_id)
                if source is not None:
                    self._write(f"{source.path}:{span.start.line}:{span.start.column}")
                else:
                    self._write("unknown location")
                self._write(f" -> {replacement.replacement}")
                if i < count - 1:
                    self._write("; ")

        self._write("\n")

    def emit_summary(self, reporter: DiagnosticReporter) -> None:
        errors = reporter.error_count()
        warnings = reporter.warning_count()
        if errors > 0:
            self._write_colored(
                f"Compilation failed: {errors} error{_plural(errors)}",
                Severity.ERROR.color_code(),
            )
            if warnings > 0:
                self._write(f", {warnings} warning{_plural(warnings)}")
            self._write("\n")
        elif warnings > 0:
            self._write_colored(
                f"Compilation succeeded with {warnings} warning{_plural(warnings)}",
                Severity.WARNING.color_code(),
            )
            self._write("\n")
        else:
            self._write_colored("Compilation succeeded", Severity.INFO.color_code())
            self._write("\n")


def stderr_emitter() -> TerminalEmitter:
    """A terminal emitter on standard error, coloured when it is a terminal."""
    stream = sys.stderr
    return TerminalEmitter(stream, stream.isatty())