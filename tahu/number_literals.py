"""Reading of numeric literals: decimal integers, doubles, 0b, 0o and 0x forms."""

from __future__ import annotations

from tahu.lexer_errors import (
    IntegerOverflow,
    InvalidBinaryLiteral,
    InvalidFloatFormat,
    InvalidHexLiteral,
    InvalidOctalLiteral,
    LexerError,
)
from tahu.scanner import Scanner
from tahu.span import Position
from tahu.tokens import Literal, Token, TokenKind

_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_I64_MAX = 2**63 - 1


def _integer_token(scanner: Scanner, start: Position, value: int, lexeme: str) -> Token:
    return Token(TokenKind.LITERAL, scanner.span_from(start), scanner.file_id, lexeme, Literal(value))


def _read_radix(
    scanner: Scanner,
    start: Position,
    prefix: str,
    base: int,
    allowed: frozenset[str],
    error: type[LexerError],
) -> Token:
    scanner.advance()  # the radix letter
    digits = []
    while scanner.current is not None:
        ch = scanner.current
        if ch in allowed:
            digits.append(ch)
            scanner.advance()
        elif ch in _DIGITS:
            raise error()
        else:
            break
    text = "".join(digits)
    if not text:
        raise error()
    value = int(text, base)
    if value > _I64_MAX:
        raise error()
    return _integer_token(scanner, start, value, prefix + text)


def read_number(scanner: Scanner) -> Token:
    """Read a numeric literal starting at the scanner's current digit.

    A ``.`` only belongs to the number when a digit follows it, so ``1..5``
    reads as ``1`` followed by a range.
    """
    start = scanner.position
    text = ""

    if scanner.current == "0":
        text = "0"
        scanner.advance()
        if scanner.current in ("b", "B"):
            return _read_radix(scanner, start, "0b", 2, frozenset("01"), InvalidBinaryLiteral)
        if scanner.current in ("o", "O"):
            return _read_radix(scanner, start, "0o", 8, frozenset("01234567"), InvalidOctalLiteral)
        if scanner.current in ("x", "X"):
            # Any non-hex character ends a hex literal.
            return _read_radix(scanner, start, "0x", 16, _HEX_DIGITS, InvalidHexLiteral)

    is_float = False
    while scanner.current is not None:
        ch = scanner.current
        if ch in _DIGITS:
            text += ch
            scanner.advance()
        elif ch == "." and not is_float and scanner.peek_next() in _DIGITS:
            is_float = True
            text += ch
            scanner.advance()
        else:
            break

    if is_float:
        while scanner.current is not None and scanner.current in _DIGITS:
            text += scanner.current
            scanner.advance()
        try:
            value = float(text)
        except ValueError:
            raise InvalidFloatFormat() from None
        return Token(TokenKind.LITERAL, scanner.span_from(start), scanner.file_id, text, Literal(value))

    try:
        integer = int(text)
    except ValueError:
        raise IntegerOverflow() from None
    if integer > _I64_MAX:
        raise IntegerOverflow()
    return _integer_token(scanner, start, integer, text)