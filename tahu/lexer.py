"""Turns source text into tokens, reporting lexical errors as diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from tahu.lexer_errors import InvalidTemplateExpression, LexerError, UnexpectedCharacter
from tahu.number_literals import read_number
from tahu.reporter import DiagnosticReporter
from tahu.scanner import Scanner
from tahu.span import FileId, Span
from tahu.string_literals import read_single_quote_string, read_string_or_template
from tahu.tokens import Literal, Token, TokenKind, keyword_kind


class _Symbol(NamedTuple):
    """A punctuation token: the text it matches, and how many characters it takes."""

    pattern: str
    kind: TokenKind
    lexeme: str
    length: int


def _sym(pattern: str, kind: TokenKind, lexeme: str | None = None, length: int | None = None) -> _Symbol:
    return _Symbol(
        pattern,
        kind,
        pattern if lexeme is None else lexeme,
        len(pattern) if length is None else length,
    )


# Candidates for each leading character, longest match first.
_SYMBOLS: dict[str, tuple[_Symbol, ...]] = {
    "(": (_sym("(", TokenKind.LEFT_PAREN),),
    ")": (_sym(")", TokenKind.RIGHT_PAREN, "("),),
    "{": (_sym("{", TokenKind.LEFT_BRACE, "("),),
    "}": (_sym("}", TokenKind.RIGHT_BRACE),),
    "[": (_sym("[", TokenKind.LEFT_BRACKET),),
    "]": (_sym("]", TokenKind.RIGHT_BRACKET),),
    ":": (_sym(":", TokenKind.COLON),),
    ";": (_sym(";", TokenKind.SEMICOLON),),
    ",": (_sym(",", TokenKind.COMMA),),
    "@": (_sym("@", TokenKind.AT),),
    "?": (_sym("?.", TokenKind.QUESTION_DOT), _sym("?", TokenKind.QUESTION)),
    "+": (_sym("+=", TokenKind.ADD_ASSIGN), _sym("++", TokenKind.INC), _sym("+", TokenKind.ADD)),
    "-": (_sym("-=", TokenKind.SUB_ASSIGN), _sym("--", TokenKind.DEC), _sym("-", TokenKind.SUB)),
    "*": (_sym("*=", TokenKind.MUL_ASSIGN), _sym("*", TokenKind.MUL)),
    "/": (_sym("/=", TokenKind.DIV_ASSIGN), _sym("/", TokenKind.DIV)),
    "%": (_sym("%=", TokenKind.REM_ASSIGN), _sym("%", TokenKind.REM)),
    "=": (_sym("==", TokenKind.EQ), _sym("=>", TokenKind.ARROW), _sym("=", TokenKind.ASSIGN)),
    "<": (_sym("<<=", TokenKind.SHL_ASSIGN), _sym("<<", TokenKind.SHL), _sym("<", TokenKind.LT)),
    ">": (_sym(">>=", TokenKind.SHL_ASSIGN), _sym(">>", TokenKind.SHL), _sym(">", TokenKind.LT)),
    "!": (_sym("!", TokenKind.NOT),),
    ".": (
        _sym("...", TokenKind.SPREAD),
        _sym("..=", TokenKind.RANGE_INCLUSIVE, length=2),
        _sym("..", TokenKind.RANGE),
        _sym(".", TokenKind.ASSIGN),
    ),
}


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_ident_start(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalpha())


def _is_ident_char(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalnum())


@dataclass
class LexerResult:
    """The tokens of a source text, ending with EOF, and whether errors occurred."""

    tokens: list[Token]
    has_errors: bool


class Lexer:
    """Splits source text into tokens, sending errors to a reporter."""

    def __init__(self, text: str, file_id: FileId, reporter: DiagnosticReporter) -> None:
        self.file_id = file_id
        self.reporter = reporter
        self._scanner = Scanner(text, file_id)

    def tokenize(self) -> LexerResult:
        """Read every token up to and including EOF.

        An erroneous character is reported and skipped, and lexing goes on.
        """
        tokens: list[Token] = []
        has_errors = False
        while True:
            try:
                token = self._next_token()
            except LexerError as error:
                has_errors = True
                span = Span.point(self._scanner.position, self.file_id)
                self.reporter.report(error.to_diagnostic(span))
                self._scanner.advance()
                continue
            tokens.append(token)
            if token.kind is TokenKind.EOF:
                break
        return LexerResult(tokens, has_errors)

    def _make_token(self, kind: TokenKind, start, lexeme: str, value=None) -> Token:
        return Token(kind, self._scanner.span_from(start), self.file_id, lexeme, value)

    def _skip_whitespace(self) -> None:
        scanner = self._scanner
        while scanner.current is not None and scanner.current.isspace() and scanner.current not in "\n\r":
            scanner.advance()

    def _next_token(self) -> Token:
        self._skip_whitespace()
        scanner = self._scanner
        start = scanner.position
        ch = scanner.current

        if ch is None:
            return self._make_token(TokenKind.EOF, start, "")
        if ch in ("\n", "\r"):
            scanner.advance()
            return self._make_token(TokenKind.NEWLINE, start, "\n")
        if _is_ascii_digit(ch):
            return read_number(scanner)
        if _is_ident_start(ch):
            return self._read_identifier()
        if ch == '"':
            return read_string_or_template(scanner, self._tokenize_expression)
        if ch == "'":
            return read_single_quote_string(scanner)
        return self._read_symbol(ch)

    def _read_symbol(self, ch: str) -> Token:
        scanner = self._scanner
        start = scanner.position
        for symbol in _SYMBOLS.get(ch, ()):
            if scanner.text.startswith(symbol.pattern, start.offset):
                for _ in range(symbol.length):
                    scanner.advance()
                return self._make_token(symbol.kind, start, symbol.lexeme)
        raise UnexpectedCharacter(ch)

    def _read_identifier(self) -> Token:
        scanner = self._scanner
        start = scanner.position
        chars = []
        while scanner.current is not None and _is_ident_char(scanner.current):
            chars.append(scanner.current)
            scanner.advance()
        word = "".join(chars)
        kind = keyword_kind(word)
        if isinstance(kind, Literal):
            return self._make_token(TokenKind.LITERAL, start, word, kind)
        return self._make_token(kind, start, word)

    def _tokenize_expression(self, source: str) -> list[Token]:
        """Tokenize an interpolated expression with a lexer of its own."""
        reporter = DiagnosticReporter()
        result = Lexer(source.strip(), self.file_id, reporter).tokenize()
        if reporter.has_errors():
            raise InvalidTemplateExpression()
        return [token for token in result.tokens if token.kind is not TokenKind.EOF]


def tokenize(text: str, file_id: FileId, reporter: DiagnosticReporter | None = None) -> LexerResult:
    """Tokenize ``text``; errors go to ``reporter``, or to a fresh one if none is given."""
    return Lexer(text, file_id, reporter if reporter is not None else DiagnosticReporter()).tokenize()