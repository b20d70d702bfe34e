import io
import json

from tahu.context import DiagnosticContext
from tahu.diagnostic import Diagnostic
from tahu.json_emitter import JsonEmitter
from tahu.reporter import DiagnosticReporter
from tahu.span import FileId, Position, Span
from tahu.suggestion import Replacement, Suggestion


def _run(diagnostics, context):
    out = io.StringIO()
    emitter = JsonEmitter(out)
    reporter = DiagnosticReporter()
    for d in diagnostics:
        reporter.report(d)
    reporter.emit_all(emitter, context)
    emitter.emit_summary(reporter)
    return out.getvalue()


def test_full_diagnostic_round_trip():
    ctx = DiagnosticContext()
    fid = ctx.add_file("main.tahu", "'abc\n")
    start, end = Position(1, 1, 0), Position(1, 5, 4)
    span = Span(start, end, fid)
    diag = (
        Diagnostic.error("Unterminated string")
        .with_span(span)
        .with_suggestion(Suggestion.insert_after(span, "Add closing quote", '"'))
        .with_related(span, "started here")
        .with_note("String literals must be closed with a matching quote")
    )
    doc = json.loads(_run([diag], ctx))
    (d,) = doc["diagnostics"]
    assert d["severity"] == "error"
    assert d["message"] == "Unterminated string"
    assert d["span"]["file"] == "main.tahu"
    assert d["span"]["start"] == {"line": start.line, "column": start.column, "offset": start.offset}
    assert d["span"]["end"]["offset"] == end.offset
    (sugg,) = d["suggestions"]
    assert sugg["message"] == "Add closing quote"
    assert sugg["replacements"][0]["replacement"] == '"'
    assert sugg["replacements"][0]["span"]["start"] == sugg["replacements"][0]["span"]["end"]
    assert d["related"][0]["message"] == "started here"
    assert d["note"] == "String literals must be closed with a matching quote"


def test_summary_counts():
    doc = json.loads(
        _run([Diagnostic.error("e"), Diagnostic.warning("w"), Diagnostic.info("i")], DiagnosticContext())
    )
    assert doc["summary"] == {"error_count": 1, "warning_count": 1, "info_count": 1}


def test_missing_span_and_note_are_null():
    doc = json.loads(_run([Diagnostic.warning("w")], DiagnosticContext()))
    d = doc["diagnostics"][0]
    assert d["span"] is None
    assert d["note"] is None
    assert d["suggestions"] == [] and d["related"] == []


def test_unknown_file_entries_are_dropped():
    ghost = Span.point(Position(1, 1, 0), FileId(9))
    diag = (
        Diagnostic.error("e")
        .with_span(ghost)
        .with_suggestion(Suggestion.multi_replacement("m", [Replacement(ghost, "x")]))
        .with_related(ghost, "r")
    )
    d = json.loads(_run([diag], DiagnosticContext()))["diagnostics"][0]
    assert d["span"] is None
    assert d["suggestions"] == [{"message": "m", "replacements": []}]
    assert d["related"] == []


def test_output_is_pretty_and_newline_terminated():
    text = _run([], DiagnosticContext())
    assert text.startswith('{\n  "diagnostics": []')
    assert text.endswith("}\n")


def test_buffer_cleared_after_summary():
    out = io.StringIO()
    emitter = JsonEmitter(out)
    reporter = DiagnosticReporter()
    emitter.emit(Diagnostic.error("once"), DiagnosticContext())
    emitter.emit_summary(reporter)
    first_len = len(out.getvalue())
    emitter.emit_summary(reporter)
    second = json.loads(out.getvalue()[first_len:])
    assert second["diagnostics"] == []