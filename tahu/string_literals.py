"""Reading of quoted string literals and template strings."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence

from tahu.lexer_errors import (
    InvalidEscapeSequence,
    InvalidUnicodeEscape,
    UnbalancedBraces,
    UnexpectedEof,
    UnterminatedString,
)
from tahu.scanner import Scanner
from tahu.tokens import (
    EscapedBrace,
    Literal,
    TemplateExpression,
    TemplatePart,
    TemplateText,
    Token,
    TokenKind,
)

ExpressionTokenizer = Callable[[str], Sequence[Token]]

_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "0": "\0",
}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_MAX_UNICODE_DIGITS = 6


def read_string_or_template(scanner: Scanner, tokenize_expression: ExpressionTokenizer) -> Token:
    """Read a double-quoted string starting at its opening quote.

    Without ``{`` the content is kept verbatim, escapes included. With ``{``
    the content is split into template parts; ``tokenize_expression`` gets
    each interpolated expression, stripped of surrounding whitespace, and
    returns its tokens. A literal must be followed by at least one
    character: input that ends right at the closing quote is reported as
    unterminated.
    """
    start = scanner.position
    scanner.advance()

    content = []
    has_interpolation = False
    while scanner.current is not None:
        ch = scanner.current
        if ch == '"':
            scanner.advance()
            break
        content.append(ch)
        scanner.advance()
        if ch == "{":
            has_interpolation = True
        elif ch == "\\" and scanner.current is not None:
            content.append(scanner.current)
            scanner.advance()

    if scanner.current is None:
        raise UnterminatedString(scanner.span_from(start))

    text = "".join(content)
    span = scanner.span_from(start)
    lexeme = f'"{text}"'
    if has_interpolation:
        parts = parse_template_string(text, tokenize_expression)
        return Token(TokenKind.TEMPLATE_STRING, span, scanner.file_id, lexeme, tuple(parts))
    return Token(TokenKind.LITERAL, span, scanner.file_id, lexeme, Literal(text))


def parse_template_string(content: str, tokenize_expression: ExpressionTokenizer) -> list[TemplatePart]:
    """Split template string content into text, expressions and escaped braces."""
    chars = deque(content)
    parts: list[TemplatePart] = []
    text: list[str] = []

    while chars:
        ch = chars.popleft()
        if ch == "{":
            if chars and chars[0] == "{":
                chars.popleft()
                parts.append(EscapedBrace("{"))
                continue
            if text:
                parts.append(TemplateText("".join(text)))
                text.clear()
            source = _extract_interpolation(chars)
            tokens = tokenize_expression(source.strip())
            parts.append(TemplateExpression(tuple(tokens), source))
        elif ch == "}":
            if chars and chars[0] == "}":
                chars.popleft()
                parts.append(EscapedBrace("}"))
            else:
                text.append(ch)
        elif ch == "\\":
            if chars:
                escaped = chars.popleft()
                if escaped not in _ESCAPES:
                    raise InvalidEscapeSequence(escaped)
                text.append(_ESCAPES[escaped])
        else:
            text.append(ch)

    if text:
        parts.append(TemplateText("".join(text)))
    return parts


def _extract_interpolation(chars: deque[str]) -> str:
    """Take characters up to the brace closing an interpolation."""
    expression = []
    depth = 1
    while chars:
        ch = chars.popleft()
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                break
        expression.append(ch)
    if depth > 0:
        raise UnbalancedBraces()
    return "".join(expression)


def read_single_quote_string(scanner: Scanner) -> Token:
    """Read a single-quoted string, resolving its escapes.

    Strings may be of any length but may not span lines. After a
    ``\\u{...}`` escape the character following the closing brace is
    skipped. As with double quotes, the closing quote must not be the last
    character of the input.
    """
    start = scanner.position
    scanner.advance()

    content = []
    while scanner.current is not None:
        ch = scanner.current
        if ch == "'":
            scanner.advance()
            break
        if ch == "\\":
            scanner.advance()
            escaped = scanner.current
            if escaped is None:
                continue
            if escaped == "u":
                scanner.advance()
                if scanner.current != "{":
                    raise InvalidUnicodeEscape()
                scanner.advance()
                content.append(_read_unicode_escape(scanner))
            elif escaped in _ESCAPES:
                content.append(_ESCAPES[escaped])
            else:
                raise InvalidEscapeSequence(escaped)
            scanner.advance()
        elif ch in ("\n", "\r"):
            raise UnterminatedString(scanner.span_from(start))
        else:
            content.append(ch)
            scanner.advance()

    if scanner.current is None:
        raise UnterminatedString(scanner.span_from(start))

    text = "".join(content)
    return Token(
        TokenKind.LITERAL,
        scanner.span_from(start),
        scanner.file_id,
        f"'{text}'",
        Literal(text),
    )


def _read_unicode_escape(scanner: Scanner) -> str:
    """Read the hex digits and closing brace of a ``\\u{...}`` escape."""
    digits = []
    while len(digits) < _MAX_UNICODE_DIGITS:
        ch = scanner.current
        if ch is None:
            raise UnexpectedEof()
        if ch == "}":
            break
        if ch not in _HEX_DIGITS:
            raise InvalidUnicodeEscape()
        digits.append(ch)
        scanner.advance()

    if scanner.current != "}":
        raise InvalidUnicodeEscape()
    scanner.advance()

    if not digits:
        raise InvalidUnicodeEscape()
    code_point = int("".join(digits), 16)
    if code_point > 0x10FFFF or 0xD800 <= code_point <= 0xDFFF:
        raise InvalidUnicodeEscape()
    return chr(code_point)