"""
Adapter: PipelineCalculator
Implements the Calculator port — tokenize -> parse -> eval, in that order.

evaluate() fails fast: the first CalcError aborts the call and propagates.
calc() never raises CalcError; the failure is encoded in CalcResult.

Module-level calc() / evaluate() use a calculator built from Settings().
"""
from __future__ import annotations

import logging

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.int_domain import IntegerDomain
from adapters.lexer.char_lexer import CharLexer
from adapters.parser.recursive_descent_parser import RecursiveDescentParser
from config import Settings
from contracts import CalcError, CalcResult, EvalResult, LimitExceededError
from ports.evaluator import Evaluator
from ports.expression_parser import ExpressionParser
from ports.lexer import Lexer

logger = logging.getLogger("intcalc.calculator")


class PipelineCalculator:
    """Lexer, parser and evaluator composed into one text -> integer call."""

    def __init__(
        self,
        lexer: Lexer,
        parser: ExpressionParser,
        evaluator: Evaluator,
        max_input_length: int = 10_000,
    ) -> None:
        self.lexer = lexer
        self.parser = parser
        self.evaluator = evaluator
        self._max_input_length = max_input_length

    # -- Calculator protocol -----------------------------------------------

    def calc(self, text: str) -> CalcResult:
        try:
            result = self._run(text)
        except CalcError as exc:
            logger.debug("calc(%r) failed: %r", text, exc)
            return CalcResult(expression=text, ok=False, error=exc.to_failure())
        return CalcResult(expression=text, ok=True, value=result.value, steps=result.steps)

    def evaluate(self, text: str) -> int:
        return self._run(text).value

    # -- Private -----------------------------------------------------------

    def _run(self, text: str) -> EvalResult:
        if len(text) > self._max_input_length:
            raise LimitExceededError(
                f"Expression longer than {self._max_input_length} characters"
            )
        tokens = self.lexer.tokenize(text)
        tree = self.parser.parse(tokens)
        return self.evaluator.eval_expr(tree)


def build_calculator(settings: Settings | None = None) -> PipelineCalculator:
    """Wires the default adapters according to settings."""
    settings = settings or Settings()
    domain = IntegerDomain(bits=settings.int_bits, policy=settings.overflow_policy)
    return PipelineCalculator(
        lexer=CharLexer(domain),
        parser=RecursiveDescentParser(max_nesting=settings.max_nesting_depth),
        evaluator=ASTEvaluator(domain),
        max_input_length=settings.max_input_length,
    )


_default: PipelineCalculator | None = None


def _default_calculator() -> PipelineCalculator:
    global _default
    if _default is None:
        _default = build_calculator()
    return _default


def calc(text: str) -> CalcResult:
    """Evaluates text with the default calculator; errors are returned, not raised."""
    return _default_calculator().calc(text)


def evaluate(text: str) -> int:
    """Evaluates text with the default calculator; raises CalcError on failure."""
    return _default_calculator().evaluate(text)
