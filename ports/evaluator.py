"""
Port: Evaluator
Responsibility: deterministic reduction of an expression tree to an integer.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult, ExprAST


@runtime_checkable
class Evaluator(Protocol):
    def eval_expr(self, ast: ExprAST) -> EvalResult:
        """
        Evaluates an arithmetic AST to a fixed-width integer.
        Returns EvalResult with:
          - value: int within the configured signed range
          - steps: list of human-readable reduction steps
        Raises DivisionByZeroError on division by zero.
        Raises IntegerOverflowError when a result leaves the integer range
        and the overflow policy is "error".
        """
        ...
