"""Errors raised while lexing, and their diagnostics."""

from __future__ import annotations

from typing import ClassVar

from tahu.diagnostic import Diagnostic
from tahu.span import Span
from tahu.suggestion import Suggestion


class LexerError(Exception):
    """A lexical error; ``to_diagnostic`` turns it into a reportable diagnostic."""

    summary: ClassVar[str] = "Lexical error"
    note: ClassVar[str | None] = None

    def describe(self) -> str:
        """The diagnostic message for this error."""
        return self.summary

    def to_diagnostic(self, span: Span) -> Diagnostic:
        diagnostic = Diagnostic.error(self.describe()).with_span(span)
        if self.note is not None:
            diagnostic = diagnostic.with_note(self.note)
        return diagnostic

    def __str__(self) -> str:
        return self.describe()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexerError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


def _single_char(ch: str) -> str:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


class UnexpectedCharacter(LexerError):
    def __init__(self, char: str) -> None:
        super().__init__(_single_char(char))
        self.char = char

    def describe(self) -> str:
        return f"Unexpected character: {self.char}"


class UnterminatedString(LexerError):
    """A string literal without its closing quote; carries the string's span."""

    note = "String literals must be closed with a matching quote"

    def __init__(self, span: Span) -> None:
        super().__init__(span)
        self.span = span

    def describe(self) -> str:
        return "Unterminated string"

    def to_diagnostic(self, span: Span) -> Diagnostic:
        # The error's own span is used; the span passed in is ignored.
        return (
            Diagnostic.error(self.describe())
            .with_span(self.span)
            .with_suggestion(Suggestion.insert_after(self.span, "Add closing quote", '"'))
            .with_note(self.note)
        )


class InvalidEscapeSequence(LexerError):
    note = "Valid escape sequences are: \\n, \\r, \\t, \\\\, \\\", \\', \\0"

    def __init__(self, char: str) -> None:
        super().__init__(_single_char(char))
        self.char = char

    def describe(self) -> str:
        return f"Invalid escape sequence '\\{self.char}'"


class InvalidUnicodeEscape(LexerError):
    summary = "Invalid unicode escape sequence"
    note = "Unicode escapes must be in format \\u{XXXX} where X is a hex digit"


class UnexpectedEof(LexerError):
    summary = "Unexpected end of file"
    note = "The file ended unexpectedly while parsing a token"


class InvalidTemplateExpression(LexerError):
    summary = "Invalid expression in template string interpolation"
    note = "Template expressions must be valid syntax"


class UnbalancedBraces(LexerError):
    summary = "Unbalanced braces in template string interpolation"
    note = "Each '{' must have a matching '}'"


class InvalidFloatFormat(LexerError):
    summary = "Invalid floating point number format"
    note = "Floating point numbers must have digits before and after the decimal point"


class IntegerOverflow(LexerError):
    summary = "Integer literal is too large"
    note = "Integer literals must fit within the range of i64"


class InvalidBinaryLiteral(LexerError):
    summary = "Invalid binary literal"
    note = "Binary literals must contain only 0 and 1 digits after '0b'"


class InvalidOctalLiteral(LexerError):
    summary = "Invalid octal literal"
    note = "Octal literals must contain only digits 0-7 after '0o'"


class InvalidHexLiteral(LexerError):
    summary = "Invalid hexadecimal literal"
    note = "Hexadecimal literals must contain only digits 0-9 and letters A-F after '0x'"