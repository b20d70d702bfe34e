"""Tokens produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from tahu.span import FileId, Span

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class TokenKind(Enum):
    """The category of a token."""

    LITERAL = auto()
    TEMPLATE_STRING = auto()

    # Keywords
    IMPORT = auto()
    FROM = auto()
    INTERFACE = auto()
    ABSTRACT = auto()
    CLASS = auto()
    ENUM = auto()
    SELF = auto()
    FN = auto()
    VAR = auto()
    VAL = auto()
    OPERATOR = auto()
    CONST = auto()
    # Visibility
    PUB = auto()
    PRIV = auto()
    PROT = auto()
    # Control flow
    IF = auto()
    ELSE = auto()
    SWITCH = auto()
    CASE = auto()
    DEFAULT = auto()
    FOR = auto()
    IN = auto()
    WHILE = auto()
    DO = auto()
    BREAK = auto()
    CONTINUE = auto()
    RETURN = auto()
    MATCH = auto()
    # Data types
    STRING = auto()
    INTEGER = auto()
    DOUBLE = auto()
    BOOLEAN = auto()
    VOID = auto()
    ANY = auto()

    # Type check and cast
    IS = auto()
    NOT_IS = auto()
    AS = auto()

    # Unary
    NOT = auto()
    BIT_NOT = auto()
    INC = auto()
    DEC = auto()

    # Arithmetic
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    REM = auto()
    # Comparison
    EQ = auto()
    LT = auto()
    LE = auto()
    NE = auto()
    GE = auto()
    GT = auto()
    # Logical
    AND = auto()
    OR = auto()
    # Bitwise
    BIT_XOR = auto()
    BIT_AND = auto()
    BIT_OR = auto()
    SHL = auto()
    SHR = auto()

    # Assignment
    ASSIGN = auto()
    ADD_ASSIGN = auto()
    SUB_ASSIGN = auto()
    MUL_ASSIGN = auto()
    DIV_ASSIGN = auto()
    REM_ASSIGN = auto()
    AND_ASSIGN = auto()
    OR_ASSIGN = auto()
    XOR_ASSIGN = auto()
    SHL_ASSIGN = auto()
    SHR_ASSIGN = auto()

    # Delimiters
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    COLON = auto()
    COMMA = auto()
    DOT = auto()
    SEMICOLON = auto()

    # Null safety and friends
    NULL = auto()
    QUESTION = auto()
    QUESTION_DOT = auto()
    AT = auto()
    ARROW = auto()

    IDENTIFIER = auto()

    # Special
    SPREAD = auto()
    RANGE = auto()
    RANGE_INCLUSIVE = auto()

    NEWLINE = auto()
    EOF = auto()


@dataclass(frozen=True, eq=False)
class Literal:
    """A literal value: a string, a 64-bit integer, a double or a boolean.

    Literals of different types never compare equal, so ``Literal(True)``
    differs from ``Literal(1)``.
    """

    value: str | int | float | bool

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, bool) or isinstance(value, (str, float)):
            return
        if isinstance(value, int):
            if not _I64_MIN <= value <= _I64_MAX:
                raise OverflowError(f"integer literal {value} does not fit in 64 bits")
            return
        raise TypeError(f"unsupported literal value: {value!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))


@dataclass(frozen=True)
class TemplateText:
    """Literal text inside a template string."""

    text: str


@dataclass(frozen=True)
class TemplateExpression:
    """An interpolated expression, already tokenized, with its source text."""

    tokens: tuple[Token, ...]
    source: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))


@dataclass(frozen=True)
class EscapedBrace:
    """A doubled brace in a template string standing for a single brace."""

    char: str

    def __post_init__(self) -> None:
        if self.char not in ("{", "}"):
            raise ValueError(f"escaped brace must be '{{' or '}}', not {self.char!r}")


TemplatePart = Union[TemplateText, TemplateExpression, EscapedBrace]


@dataclass(frozen=True)
class Token:
    """A token with its location and source text.

    ``value`` holds the :class:`Literal` of a literal token and the template
    parts of a template string; it is None for every other kind.
    """

    kind: TokenKind
    span: Span
    file_id: FileId
    lexeme: str
    value: Literal | tuple[TemplatePart, ...] | None = None

    def __post_init__(self) -> None:
        if self.kind is TokenKind.LITERAL:
            if not isinstance(self.value, Literal):
                raise ValueError("a literal token needs a Literal value")
        elif self.kind is TokenKind.TEMPLATE_STRING:
            if self.value is None or isinstance(self.value, Literal):
                raise ValueError("a template string token needs its parts")
            object.__setattr__(self, "value", tuple(self.value))
        elif self.value is not None:
            raise ValueError(f"a {self.kind.name} token carries no value")


_KEYWORDS: dict[str, TokenKind | Literal] = {
    "import": TokenKind.IMPORT,
    "from": TokenKind.FROM,
    "as": TokenKind.AS,
    "interface": TokenKind.INTERFACE,
    "abstract": TokenKind.ABSTRACT,
    "class": TokenKind.CLASS,
    "enum": TokenKind.ENUM,
    "self": TokenKind.SELF,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "switch": TokenKind.SWITCH,
    "case": TokenKind.CASE,
    "default": TokenKind.DEFAULT,
    "for": TokenKind.FOR,
    "in": TokenKind.IN,
    "while": TokenKind.WHILE,
    "do": TokenKind.DO,
    "break": TokenKind.BREAK,
    "continue": TokenKind.CONTINUE,
    "return": TokenKind.RETURN,
    "match": TokenKind.MATCH,
    "string": TokenKind.STRING,
    "integer": TokenKind.INTEGER,
    "double": TokenKind.DOUBLE,
    "boolean": TokenKind.BOOLEAN,
    "void": TokenKind.VOID,
    "any": TokenKind.ANY,
    "pub": TokenKind.PUB,
    "priv": TokenKind.PRIV,
    "prot": TokenKind.PROT,
    "const": TokenKind.CONST,
    "fn": TokenKind.FN,
    "var": TokenKind.VAR,
    "val": TokenKind.VAL,
    "is": TokenKind.IS,
    "true": Literal(True),
    "false": Literal(False),
}


def keyword_kind(word: str) -> TokenKind | Literal:
    """Classify an identifier-shaped word.

    Keywords give their kind, ``true`` and ``false`` give their boolean
    :class:`Literal`, and any other word is an identifier.
    """
    return _KEYWORDS.get(word, TokenKind.IDENTIFIER)