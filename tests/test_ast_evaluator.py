from __future__ import annotations

import pytest

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.int_domain import IntegerDomain
from contracts import (
    BinaryNode,
    BinOp,
    DivisionByZeroError,
    IntegerOverflowError,
    NumberNode,
    UnaryNode,
)


def _bin(left, op: BinOp, right) -> BinaryNode:
    return BinaryNode(left=left, op=op, right=right)


def _n(value: int) -> NumberNode:
    return NumberNode(value=value)


def test_eval_number_leaf():
    result = ASTEvaluator().eval_expr(_n(7))

    assert result.value == 7
    assert result.steps == []


def test_eval_left_folded_subtraction_records_steps_in_order():
    ast = _bin(_bin(_n(1), BinOp.SUB, _n(2)), BinOp.SUB, _n(3))

    result = ASTEvaluator().eval_expr(ast)

    assert result.value == -4
    assert result.steps == ["1 - 2 = -1", "-1 - 3 = -4"]


def test_eval_evaluates_left_before_right():
    ast = _bin(_bin(_n(2), BinOp.MUL, _n(3)), BinOp.ADD, _bin(_n(8), BinOp.DIV, _n(4)))

    result = ASTEvaluator().eval_expr(ast)

    assert result.value == 8
    assert result.steps == ["2 * 3 = 6", "8 / 4 = 2", "6 + 2 = 8"]


def test_eval_unary_minus():
    result = ASTEvaluator().eval_expr(UnaryNode(operand=UnaryNode(operand=_n(5))))

    assert result.value == 5
    assert result.steps == ["-(5) = -5", "-(-5) = 5"]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (7, 2, 3),
        (-7, 2, -3),
        (7, -2, -3),
        (-7, -2, 3),
        (1, 3, 0),
        (-1, 3, 0),
    ],
)
def test_eval_division_truncates_toward_zero(a, b, expected):
    ast = _bin(_n(a), BinOp.DIV, _n(b))

    assert ASTEvaluator().eval_expr(ast).value == expected


def test_eval_division_by_zero_raises_typed_error():
    with pytest.raises(DivisionByZeroError) as excinfo:
        ASTEvaluator().eval_expr(_bin(_n(1), BinOp.DIV, _bin(_n(2), BinOp.SUB, _n(2))))

    assert excinfo.value.code == "DivisionByZero"


def test_eval_overflow_raises_under_error_policy():
    evaluator = ASTEvaluator(IntegerDomain(bits=32, policy="error"))

    with pytest.raises(IntegerOverflowError):
        evaluator.eval_expr(_bin(_n(2147483647), BinOp.ADD, _n(1)))
    with pytest.raises(IntegerOverflowError):
        evaluator.eval_expr(_bin(_n(65536), BinOp.MUL, _n(65536)))


def test_eval_overflow_wraps_under_wrap_policy():
    evaluator = ASTEvaluator(IntegerDomain(bits=32, policy="wrap"))

    assert evaluator.eval_expr(_bin(_n(2147483647), BinOp.ADD, _n(1))).value == -2147483648
    assert evaluator.eval_expr(_bin(_n(65536), BinOp.MUL, _n(65536))).value == 0


def test_eval_rejects_out_of_range_literal_in_handmade_tree():
    with pytest.raises(IntegerOverflowError):
        ASTEvaluator(IntegerDomain(bits=8)).eval_expr(_n(200))


def test_eval_rejects_unknown_node_type():
    with pytest.raises(TypeError):
        ASTEvaluator().eval_expr("1 + 2")  # type: ignore[arg-type]


def test_eval_long_left_chain_keeps_step_order():
    ast = _n(0)
    for i in range(1, 3001):
        ast = _bin(ast, BinOp.ADD, _n(i))

    result = ASTEvaluator().eval_expr(ast)

    assert result.value == 3000 * 3001 // 2
    assert len(result.steps) == 3000
    assert result.steps[:2] == ["0 + 1 = 1", "1 + 2 = 3"]


def test_eval_chain_with_nested_right_operands():
    # (2 * 3) - (-(4) / 2) - 1
    ast = _bin(
        _bin(_bin(_n(2), BinOp.MUL, _n(3)), BinOp.SUB, _bin(UnaryNode(operand=_n(4)), BinOp.DIV, _n(2))),
        BinOp.SUB,
        _n(1),
    )

    result = ASTEvaluator().eval_expr(ast)

    assert result.value == 7
    assert result.steps == ["2 * 3 = 6", "-(4) = -4", "-4 / 2 = -2", "6 - -2 = 8", "8 - 1 = 7"]
