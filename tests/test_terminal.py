import io
import sys

import pytest

from tahu.context import DiagnosticContext
from tahu.diagnostic import Diagnostic
from tahu.reporter import DiagnosticReporter
from tahu.severity import RESET, Severity
from tahu.span import FileId, Position, Span
from tahu.suggestion import Replacement, Suggestion
from tahu.terminal import TerminalEmitter, stderr_emitter

SOURCE = "let x = 1\nfoo()\n"


@pytest.fixture
def context():
    ctx = DiagnosticContext()
    ctx.add_file("main.tahu", SOURCE)
    return ctx


@pytest.fixture
def file_id(context):
    return FileId(0)


def render(diagnostic, context, use_colors=False):
    out = io.StringIO()
    TerminalEmitter(out, use_colors).emit(diagnostic, context)
    return out.getvalue()


def test_header_without_span(context):
    assert render(Diagnostic.error("boom"), context) == "error: boom\n\n"


def test_single_line_snippet(context, file_id):
    span = Span(Position(1, 5, 4), Position(1, 6, 5), file_id)
    lines = render(Diagnostic.error("boom").with_span(span), context).splitlines()
    assert "   --> main.tahu:1:5" in lines
    assert "  1 | let x = 1" in lines
    underline = next(line for line in lines if "^" in line)
    assert underline.startswith("    | " + " " * 4 + "^")
    assert underline.endswith(" boom")
    assert underline.count("^") == len(span)


def test_multi_line_snippet_underlines_each_line(context, file_id):
    span = Span(Position(1, 5, 4), Position(2, 3, 12), file_id)
    lines = render(Diagnostic.warning("wide").with_span(span), context).splitlines()
    underlines = [line for line in lines if "^" in line]
    assert len(underlines) == 2
    assert underlines[0].count("^") == len("let x = 1") - 4
    assert underlines[1].count("^") == 2
    assert underlines[0].endswith(" wide")
    assert not underlines[1].endswith(" wide")
    assert lines[0] == "warning: wide"


def test_span_in_unknown_file_has_no_snippet(context):
    span = Span.point(Position(1, 1, 0), FileId(9))
    out = render(Diagnostic.error("boom").with_span(span), context)
    assert "-->" not in out
    assert "^" not in out


def test_colors_wrap_severity(context):
    out = render(Diagnostic.error("boom"), context, use_colors=True)
    assert out.startswith(Severity.ERROR.color_code() + "error" + RESET)
    plain = render(Diagnostic.error("boom"), context)
    assert "\x1b" not in plain


def test_colored_underline(context, file_id):
    span = Span(Position(1, 1, 0), Position(1, 4, 3), file_id)
    out = render(Diagnostic.info("i").with_span(span), context, use_colors=True)
    assert Severity.INFO.color_code() + "^^^" + RESET in out


def test_note_is_rendered(context):
    out = render(Diagnostic.error("boom").with_note("look here"), context)
    assert "    = note: look here" in out.splitlines()


def test_related_with_and_without_file(context, file_id):
    known = Span.point(Position(2, 1, 10), file_id)
    unknown = Span.point(Position(1, 1, 0), FileId(7))
    diag = Diagnostic.error("boom").with_related(known, "first").with_related(unknown, "second")
    lines = render(diag, context).splitlines()
    assert "note: first at main.tahu:2:1" in lines
    assert "note: second" in lines
    assert lines.count("   |") == 2


def test_suggestion_single_replacement(context, file_id):
    span = Span(Position(1, 1, 0), Position(1, 4, 3), file_id)
    suggestion = Suggestion.insert_after(span, "Add closing quote", '"')
    out = render(Diagnostic.error("boom").with_suggestion(suggestion), context)
    assert '    = help: Add closing quote (1 replacement): main.tahu:1:4 -> "' in out


def test_hint_has_zero_replacements(context):
    out = render(Diagnostic.error("boom").with_suggestion(Suggestion.hint("try")), context)
    assert "try (0 replacements): " in out


def test_multiple_replacements_are_separated(context, file_id):
    first = Replacement(Span.point(Position(1, 1, 0), file_id), "a")
    second = Replacement(Span.point(Position(1, 1, 0), FileId(5)), "b")
    suggestion = Suggestion.multi_replacement("fix", [first, second])
    out = render(Diagnostic.error("boom").with_suggestion(suggestion), context)
    assert "(2 replacements): main.tahu:1:1 -> a; , unknown location -> b" in out


@pytest.mark.parametrize(
    "severities, expected",
    [
        ([Severity.ERROR], "Compilation failed: 1 error\n"),
        ([Severity.ERROR, Severity.ERROR, Severity.WARNING], "Compilation failed: 2 errors, 1 warning\n"),
        ([Severity.WARNING, Severity.WARNING], "Compilation succeeded with 2 warnings\n"),
        ([], "Compilation succeeded\n"),
    ],
)
def test_summary(severities, expected):
    reporter = DiagnosticReporter()
    for severity in severities:
        reporter.report(Diagnostic(severity, "m"))
    out = io.StringIO()
    TerminalEmitter(out, False).emit_summary(reporter)
    assert out.getvalue() == expected


def test_summary_colored_success():
    out = io.StringIO()
    TerminalEmitter(out, True).emit_summary(DiagnosticReporter())
    assert out.getvalue() == Severity.INFO.color_code() + "Compilation succeeded" + RESET + "\n"


def test_stderr_emitter_writes_to_stderr(monkeypatch):
    fake = io.StringIO()
    monkeypatch.setattr(sys, "stderr", fake)
    emitter = stderr_emitter()
    assert emitter.writer is fake
    assert emitter.use_colors is False
    emitter.emit_summary(DiagnosticReporter())
    assert fake.getvalue() == "Compilation succeeded\n"