"""
Adapter: ASTEvaluator
Implements the Evaluator port — reduction of ExprAST on
fixed-width signed integers (IntegerDomain).

Left child is evaluated before the right one. Operator chains are
reduced in a loop, so their length is not bounded by recursion. Every
reduction is recorded as a readable step ("2 * 3 = 6") for the caller.

Division truncates toward zero: 7 / 2 = 3, -7 / 2 = -3.
"""
from __future__ import annotations

from typing import Callable

from adapters.int_domain import IntegerDomain
from contracts import (
    BinaryNode,
    BinOp,
    EvalResult,
    ExprAST,
    NumberNode,
    UnaryNode,
    UnOp,
)


def _op_table(domain: IntegerDomain) -> dict[BinOp, Callable[[int, int], int]]:
    return {
        BinOp.ADD: domain.add,
        BinOp.SUB: domain.sub,
        BinOp.MUL: domain.mul,
        BinOp.DIV: domain.div,
    }


class ASTEvaluator:
    """Exact integer evaluator over the expression tree."""

    def __init__(self, domain: IntegerDomain | None = None) -> None:
        self._domain = domain or IntegerDomain()
        self._ops = _op_table(self._domain)

    @property
    def domain(self) -> IntegerDomain:
        return self._domain

    # -- Evaluator protocol ------------------------------------------------

    def eval_expr(self, ast: ExprAST) -> EvalResult:
        steps: list[str] = []
        value = self._eval(ast, steps)
        return EvalResult(value=value, steps=steps)

    # -- Private -----------------------------------------------------------

    def _eval(self, node: ExprAST, steps: list[str]) -> int:
        if isinstance(node, NumberNode):
            return self._domain.fit(node.value, what="literal")

        if isinstance(node, BinaryNode):
            return self._eval_chain(node, steps)

        if isinstance(node, UnaryNode):
            if node.op is not UnOp.MINUS:
                raise ValueError(f"Unknown unary operator: {node.op!r}")
            operand = self._eval(node.operand, steps)
            result = self._domain.neg(operand)
            steps.append(f"-({operand}) = {result}")
            return result

        raise TypeError(f"Unknown AST node type: {type(node)}")

    def _eval_chain(self, node: BinaryNode, steps: list[str]) -> int:
        # Left-folded chains ("1 + 2 + ... + n") grow down the left child.
        # Walk that spine in a loop; only right children recurse.
        spine: list[BinaryNode] = []
        while isinstance(node, BinaryNode):
            spine.append(node)
            node = node.left

        value = self._eval(node, steps)
        for parent in reversed(spine):
            fn = self._ops.get(parent.op)
            if fn is None:
                raise ValueError(f"Unknown binary operator: {parent.op!r}")
            right = self._eval(parent.right, steps)
            result = fn(value, right)
            steps.append(f"{value} {parent.op.value} {right} = {result}")
            value = result
        return value
