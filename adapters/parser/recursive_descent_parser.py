"""
Adapter: RecursiveDescentParser
Implements the ExpressionParser port.

Grammar (precedence lives in the nesting, not in a table):
  expr   = term (('+'|'-') term)*
  term   = factor (('*'|'/') factor)*
  factor = NUMBER | '(' expr ')' | '-' factor

Both loops fold to the left, so "1 - 2 - 3" becomes ((1 - 2) - 3).
The lexer emits a single PAREN kind for "(" and ")": a PAREN in factor
position opens a group, the PAREN expected after the inner expr closes it.

Only parentheses and unary minus recurse; operator chains are loops.
max_nesting bounds that recursion, however long the chains get.
"""
from __future__ import annotations

from typing import Callable

from contracts import (
    BinaryNode,
    BinOp,
    ExprAST,
    LimitExceededError,
    NumberNode,
    Token,
    TokenKind,
    UnaryNode,
    UnexpectedTokenError,
    UnOp,
)

_ADDITIVE: dict[TokenKind, BinOp] = {
    TokenKind.PLUS: BinOp.ADD,
    TokenKind.MINUS: BinOp.SUB,
}
_MULTIPLICATIVE: dict[TokenKind, BinOp] = {
    TokenKind.MUL: BinOp.MUL,
    TokenKind.DIV: BinOp.DIV,
}


class _TokenCursor:
    """Index into the token list; the unconsumed suffix stays inspectable."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self.pos = 0

    def peek(self) -> Token | None:
        return self._tokens[self.pos] if self.pos < len(self._tokens) else None

    def next(self) -> Token | None:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def next_if(self, predicate: Callable[[Token], bool]) -> Token | None:
        tok = self.peek()
        if tok is not None and predicate(tok):
            self.pos += 1
            return tok
        return None


class _Parse:
    """State of a single parse() call."""

    def __init__(self, tokens: list[Token], max_nesting: int) -> None:
        self._cursor = _TokenCursor(tokens)
        self._max_nesting = max_nesting
        self._nesting = 0

    def run(self) -> ExprAST:
        node = self.parse_expr()
        leftover = self._cursor.peek()
        if leftover is not None:
            raise UnexpectedTokenError(leftover, self._cursor.pos)
        return node

    def parse_expr(self) -> ExprAST:
        return self._fold_left(self.parse_term, _ADDITIVE)

    def parse_term(self) -> ExprAST:
        return self._fold_left(self.parse_factor, _MULTIPLICATIVE)

    def parse_factor(self) -> ExprAST:
        pos = self._cursor.pos
        tok = self._cursor.next()
        if tok is None:
            raise UnexpectedTokenError(None, pos)

        if tok.kind is TokenKind.NUMBER:
            return NumberNode(value=tok.value)

        if tok.kind is TokenKind.PAREN:
            self._enter(pos)
            inner = self.parse_expr()
            closing_pos = self._cursor.pos
            if self._cursor.next_if(lambda t: t.kind is TokenKind.PAREN) is None:
                raise UnexpectedTokenError(self._cursor.peek(), closing_pos)
            self._nesting -= 1
            return inner

        if tok.kind is TokenKind.MINUS:
            self._enter(pos)
            operand = self.parse_factor()
            self._nesting -= 1
            return UnaryNode(op=UnOp.MINUS, operand=operand)

        # PLUS, MUL, DIV cannot start a factor
        raise UnexpectedTokenError(tok, pos)

    # -- helpers -----------------------------------------------------------

    def _fold_left(
        self,
        operand: Callable[[], ExprAST],
        operators: dict[TokenKind, BinOp],
    ) -> ExprAST:
        node = operand()
        while True:
            tok = self._cursor.next_if(lambda t: t.kind in operators)
            if tok is None:
                return node
            node = BinaryNode(left=node, op=operators[tok.kind], right=operand())

    def _enter(self, pos: int) -> None:
        self._nesting += 1
        if self._nesting > self._max_nesting:
            raise LimitExceededError(
                f"Nesting deeper than {self._max_nesting} levels at index {pos}", pos
            )


class RecursiveDescentParser:
    """Three-level recursive descent parser: expr -> term -> factor."""

    def __init__(self, max_nesting: int = 64) -> None:
        self._max_nesting = max_nesting

    # -- ExpressionParser protocol ----------------------------------------

    def parse(self, tokens: list[Token]) -> ExprAST:
        return _Parse(tokens, self._max_nesting).run()
