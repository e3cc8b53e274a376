"""
Port: ExpressionParser
Responsibility: building an expression tree from a token list.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprAST, Token


@runtime_checkable
class ExpressionParser(Protocol):
    def parse(self, tokens: list[Token]) -> ExprAST:
        """
        Parses the whole token list into an ExprAST.
        Precedence and left-associativity are encoded in the tree shape.
        Raises UnexpectedTokenError when the grammar is violated, including
        tokens left over after a complete expression.
        """
        ...
