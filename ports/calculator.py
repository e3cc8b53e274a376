"""
Port: Calculator
Responsibility: the whole text -> integer pipeline behind a single call.
"""
from typing import Protocol, runtime_checkable

from contracts import CalcResult


@runtime_checkable
class Calculator(Protocol):
    def calc(self, text: str) -> CalcResult:
        """
        Tokenizes, parses and evaluates text.
        Never raises CalcError; the first failure is encoded in
        CalcResult(ok=False, error=CalcFailure(...)).
        """
        ...

    def evaluate(self, text: str) -> int:
        """
        Same pipeline as calc(), but returns the bare integer and
        raises the first CalcError encountered.
        """
        ...
