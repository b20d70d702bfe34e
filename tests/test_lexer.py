import pytest

from tahu.lexer import Lexer, LexerResult, tokenize
from tahu.reporter import DiagnosticReporter
from tahu.span import FileId, Span
from tahu.tokens import Literal, TemplateExpression, TemplateText, TokenKind

FILE = FileId(0)


def lex(text):
    reporter = DiagnosticReporter()
    result = Lexer(text, FILE, reporter).tokenize()
    return result, reporter


def kinds(result):
    return [token.kind for token in result.tokens]


def test_empty_input_gives_only_eof():
    result, reporter = lex("")
    assert kinds(result) == [TokenKind.EOF]
    assert result.tokens[0].lexeme == ""
    assert result.has_errors is False
    assert len(reporter) == 0


def test_simple_expression():
    result, _ = lex("a + b")
    assert kinds(result) == [TokenKind.IDENTIFIER, TokenKind.ADD, TokenKind.IDENTIFIER, TokenKind.EOF]
    assert [t.lexeme for t in result.tokens[:3]] == ["a", "+", "b"]


@pytest.mark.parametrize(
    "text, kind",
    [
        ("+=", TokenKind.ADD_ASSIGN),
        ("++", TokenKind.INC),
        ("+", TokenKind.ADD),
        ("-=", TokenKind.SUB_ASSIGN),
        ("--", TokenKind.DEC),
        ("-", TokenKind.SUB),
        ("*=", TokenKind.MUL_ASSIGN),
        ("*", TokenKind.MUL),
        ("/=", TokenKind.DIV_ASSIGN),
        ("%=", TokenKind.REM_ASSIGN),
        ("==", TokenKind.EQ),
        ("=>", TokenKind.ARROW),
        ("=", TokenKind.ASSIGN),
        ("<<=", TokenKind.SHL_ASSIGN),
        ("<<", TokenKind.SHL),
        ("<", TokenKind.LT),
        ("?.", TokenKind.QUESTION_DOT),
        ("?", TokenKind.QUESTION),
        ("...", TokenKind.SPREAD),
        ("..", TokenKind.RANGE),
        ("!", TokenKind.NOT),
        ("@", TokenKind.AT),
        (";", TokenKind.SEMICOLON),
    ],
)
def test_operators(text, kind):
    result, _ = lex(text)
    assert kinds(result) == [kind, TokenKind.EOF]
    assert result.tokens[0].lexeme == text
    assert len(result.tokens[0].span) == len(text)


def test_greater_than_maps_like_shift_and_less_than():
    result, _ = lex(">> >")
    assert kinds(result) == [TokenKind.SHL, TokenKind.LT, TokenKind.EOF]
    assert [t.lexeme for t in result.tokens[:2]] == [">>", ">"]


def test_less_equal_is_two_tokens():
    result, _ = lex("<=")
    assert kinds(result) == [TokenKind.LT, TokenKind.ASSIGN, TokenKind.EOF]


def test_inclusive_range_leaves_equals_sign():
    result, _ = lex("..=")
    assert kinds(result) == [TokenKind.RANGE_INCLUSIVE, TokenKind.ASSIGN, TokenKind.EOF]
    assert result.tokens[0].lexeme == "..="


def test_keywords_and_booleans():
    result, _ = lex("var x true")
    assert kinds(result) == [TokenKind.VAR, TokenKind.IDENTIFIER, TokenKind.LITERAL, TokenKind.EOF]
    assert result.tokens[2].value == Literal(True)


def test_number_before_range():
    result, _ = lex("1..5")
    assert kinds(result) == [TokenKind.LITERAL, TokenKind.RANGE, TokenKind.LITERAL, TokenKind.EOF]
    assert result.tokens[0].value == Literal(1)
    assert result.tokens[2].value == Literal(5)


def test_newline_moves_to_next_line():
    result, _ = lex("a\nb")
    assert kinds(result) == [TokenKind.IDENTIFIER, TokenKind.NEWLINE, TokenKind.IDENTIFIER, TokenKind.EOF]
    second = result.tokens[2]
    assert second.span.start.line == result.tokens[0].span.start.line + 1
    assert second.span.start.column == 1
    assert second.span.start.offset == "a\nb".index("b")


def test_whitespace_is_skipped():
    text = "foo\t  bar"
    result, _ = lex(text)
    assert [t.lexeme for t in result.tokens[:2]] == ["foo", "bar"]
    assert result.tokens[1].span.start.offset == text.index("bar")


def test_unexpected_character_is_reported_and_skipped():
    text = "a $ b"
    result, reporter = lex(text)
    assert result.has_errors is True
    assert kinds(result) == [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER, TokenKind.EOF]
    assert reporter.error_count() == 1
    diagnostic = reporter.diagnostics()[0]
    assert diagnostic.message == "Unexpected character: $"
    assert diagnostic.span.start.offset == text.index("$")
    assert diagnostic.span.start == diagnostic.span.end


def test_unterminated_string_reports_string_span():
    result, reporter = lex('"abc')
    assert result.has_errors is True
    assert kinds(result) == [TokenKind.EOF]
    diagnostic = reporter.diagnostics()[0]
    assert diagnostic.message == "Unterminated string"
    assert diagnostic.span.start.offset == 0
    assert diagnostic.has_fixes()


def test_template_string():
    result, reporter = lex('"Hi {name}!" ')
    assert reporter.has_errors() is False
    token = result.tokens[0]
    assert token.kind is TokenKind.TEMPLATE_STRING
    text_before, expression, text_after = token.value
    assert text_before == TemplateText("Hi ")
    assert text_after == TemplateText("!")
    assert isinstance(expression, TemplateExpression)
    assert expression.source == "name"
    assert [t.kind for t in expression.tokens] == [TokenKind.IDENTIFIER]
    assert expression.tokens[0].lexeme == "name"


def test_invalid_template_expression():
    result, reporter = lex('"x {$}" ')
    assert result.has_errors is True
    assert reporter.error_count() == 1
    assert reporter.diagnostics()[0].message == "Invalid expression in template string interpolation"


def test_single_quote_string_resolves_escapes():
    result, _ = lex("'a\\n' ")
    assert result.tokens[0].kind is TokenKind.LITERAL
    assert result.tokens[0].value == Literal("a\n")


def test_module_tokenize_matches_lexer():
    text = "val y = (x * 2)"
    reporter = DiagnosticReporter()
    expected, _ = lex(text)
    actual = tokenize(text, FILE, reporter)
    assert isinstance(actual, LexerResult)
    assert actual == expected
    assert tokenize(text, FILE) == expected


def test_eof_span_is_at_end():
    text = "abc"
    result, _ = lex(text)
    eof = result.tokens[-1]
    assert eof.span == Span.point(eof.span.start, FILE)
    assert eof.span.start.offset == len(text)