"""
contracts.py — Single source of truth for every data type in IntCalc.
All modules import types ONLY from here.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Lexer ───────────────────────────────────────

class TokenKind(str, Enum):
    NUMBER = "number"
    PAREN = "paren"   # both "(" and ")"; the grammar decides the role
    PLUS = "plus"
    MINUS = "minus"
    MUL = "mul"
    DIV = "div"


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    value: Optional[int] = None  # only for NUMBER

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return str(self.value)
        return _TOKEN_SYMBOLS[self.kind]


_TOKEN_SYMBOLS = {
    TokenKind.PAREN: "()",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.MUL: "*",
    TokenKind.DIV: "/",
}


# ─────────────────────────── Parser (AST) ────────────────────────────────

class BinOp(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class UnOp(str, Enum):
    MINUS = "-"


class NumberNode(BaseModel):
    node_type: Literal["number"] = "number"
    value: int


class BinaryNode(BaseModel):
    node_type: Literal["binary"] = "binary"
    left: "ExprAST"
    op: BinOp
    right: "ExprAST"


class UnaryNode(BaseModel):
    node_type: Literal["unary"] = "unary"
    op: UnOp = UnOp.MINUS
    operand: "ExprAST"


ExprAST = Annotated[
    Union[NumberNode, BinaryNode, UnaryNode],
    Field(discriminator="node_type"),
]
BinaryNode.model_rebuild()
UnaryNode.model_rebuild()


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: int
    steps: list[str] = Field(default_factory=list)  # e.g. "2 * 3 = 6"


# ─────────────────────────── Errors ──────────────────────────────────────

class CalcFailure(BaseModel):
    code: Literal[
        "UnknownToken",
        "UnexpectedToken",
        "DivisionByZero",
        "Overflow",
        "LimitExceeded",
    ]
    message: str
    position: Optional[int] = None  # char offset (lexer) or token index (parser)


class CalcError(Exception):
    """Base class for every error a calc() call can report."""

    code: ClassVar[str] = "CalcError"

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position

    def to_failure(self) -> CalcFailure:
        return CalcFailure(code=self.code, message=self.message, position=self.position)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, position={self.position!r})"


class UnknownTokenError(CalcError):
    code = "UnknownToken"

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Unknown character {char!r} at offset {position}", position)
        self.char = char


class UnexpectedTokenError(CalcError):
    code = "UnexpectedToken"

    def __init__(self, token: Token | None, position: int) -> None:
        if token is None:
            message = "Unexpected end of expression"
        else:
            message = f"Unexpected token {str(token)!r} at index {position}"
        super().__init__(message, position)
        self.token = token


class DivisionByZeroError(CalcError):
    code = "DivisionByZero"


class IntegerOverflowError(CalcError):
    code = "Overflow"


class LimitExceededError(CalcError):
    code = "LimitExceeded"


# ─────────────────────────── Calculator ──────────────────────────────────

class CalcResult(BaseModel):
    expression: str
    ok: bool
    value: Optional[int] = None
    error: Optional[CalcFailure] = None
    steps: list[str] = Field(default_factory=list)
