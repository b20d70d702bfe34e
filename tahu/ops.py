"""Operators that appear in expressions."""

from __future__ import annotations

from enum import Enum, auto


class BinaryOp(Enum):
    """Infix operators, valued by their source symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    REM = "%"
    AND = "&&"
    OR = "||"
    BIT_XOR = "^"
    BIT_AND = "&"
    BIT_OR = "|"
    SHL = "<<"
    SHR = ">>"
    EQ = "=="
    LT = "<"
    LE = "<="
    NE = "!="
    GE = ">="
    GT = ">"

    @property
    def symbol(self) -> str:
        return self.value


class AssignmentOp(Enum):
    """Plain and compound assignment operators, valued by their source symbol."""

    ASSIGN = "="
    ADD_ASSIGN = "+="
    SUB_ASSIGN = "-="
    MUL_ASSIGN = "*="
    DIV_ASSIGN = "/="
    REM_ASSIGN = "%="
    BIT_AND_ASSIGN = "&="
    BIT_OR_ASSIGN = "|="
    BIT_XOR_ASSIGN = "^="
    SHL_ASSIGN = "<<="
    SHR_ASSIGN = ">>="

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def binary_op(self) -> BinaryOp | None:
        """The operator a compound assignment applies; None for plain ``=``."""
        return _COMPOUND.get(self)


_COMPOUND = {
    AssignmentOp.ADD_ASSIGN: BinaryOp.ADD,
    AssignmentOp.SUB_ASSIGN: BinaryOp.SUB,
    AssignmentOp.MUL_ASSIGN: BinaryOp.MUL,
    AssignmentOp.DIV_ASSIGN: BinaryOp.DIV,
    AssignmentOp.REM_ASSIGN: BinaryOp.REM,
    AssignmentOp.BIT_AND_ASSIGN: BinaryOp.BIT_AND,
    AssignmentOp.BIT_OR_ASSIGN: BinaryOp.BIT_OR,
    AssignmentOp.BIT_XOR_ASSIGN: BinaryOp.BIT_XOR,
    AssignmentOp.SHL_ASSIGN: BinaryOp.SHL,
    AssignmentOp.SHR_ASSIGN: BinaryOp.SHR,
}


class UnaryOp(Enum):
    """Prefix and postfix operators taking a single operand."""

    MINUS = auto()
    PLUS = auto()
    NOT = auto()
    BIT_NOT = auto()
    POST_INCREMENT = auto()
    POST_DECREMENT = auto()
    PRE_INCREMENT = auto()
    PRE_DECREMENT = auto()

    @property
    def symbol(self) -> str:
        return _UNARY_SYMBOLS[self]

    @property
    def is_postfix(self) -> bool:
        """Whether the operator is written after its operand."""
        return self in (UnaryOp.POST_INCREMENT, UnaryOp.POST_DECREMENT)


_UNARY_SYMBOLS = {
    UnaryOp.MINUS: "-",
    UnaryOp.PLUS: "+",
    UnaryOp.NOT: "!",
    UnaryOp.BIT_NOT: "~",
    UnaryOp.POST_INCREMENT: "++",
    UnaryOp.POST_DECREMENT: "--",
    UnaryOp.PRE_INCREMENT: "++",
    UnaryOp.PRE_DECREMENT: "--",
}