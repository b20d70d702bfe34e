"""Emitter that writes all diagnostics as one JSON document."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TextIO

from tahu.emitter import Emitter

if TYPE_CHECKING:
    from tahu.context import DiagnosticContext
    from tahu.diagnostic import Diagnostic
    from tahu.reporter import DiagnosticReporter
    from tahu.span import Position, Span


def _position(pos: Position) -> dict[str, int]:
    return {"line": pos.line, "column": pos.column, "offset": pos.offset}


def _span(span: Span, context: DiagnosticContext) -> dict[str, Any] | None:
    source = context.get_file(span.file_id)
    if source is None:
        return None
    return {"file": source.path, "start": _position(span.start), "end": _position(span.end)}


class JsonEmitter(Emitter):
    """Buffers diagnostics and writes them with a summary as pretty JSON."""

    def __init__(self, writer: TextIO) -> None:
        self.writer = writer
        self._diagnostics: list[dict[str, Any]] = []

    def emit(self, diagnostic: Diagnostic, context: DiagnosticContext) -> None:
        suggestions = []
        for suggestion in diagnostic.suggestions:
            replacements = []
            for rep in suggestion.replacements:
                span = _span(rep.span, context)
                if span is not None:
                    replacements.append({"span": span, "replacement": rep.replacement})
            suggestions.append({"message": suggestion.message, "replacements": replacements})

        related = []
        for rel in diagnostic.related:
            span = _span(rel.span, context)
            if span is not None:
                related.append({"span": span, "message": rel.message})

        self._diagnostics.append(
            {
                "severity": str(diagnostic.severity),
                "message": diagnostic.message,
                "span": _span(diagnostic.span, context) if diagnostic.span is not None else None,
                "suggestions": suggestions,
                "related": related,
                "note": diagnostic.note,
            }
        )

    def emit_summary(self, reporter: DiagnosticReporter) -> None:
        output = {
            "diagnostics": self._diagnostics,
            "summary": {
                "error_count": reporter.error_count(),
                "warning_count": reporter.warning_count(),
                "info_count": reporter.info_count(),
            },
        }
        self._diagnostics = []
        self.writer.write(json.dumps(output, indent=2, ensure_ascii=False))
        self.writer.write("\n")