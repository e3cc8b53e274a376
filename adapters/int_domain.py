"""
int_domain.py - fixed-width signed integer arithmetic.

Python integers are unbounded; IntegerDomain clamps every value into the
signed range of `bits` bits. Values outside the range either raise
IntegerOverflowError ("error" policy) or wrap two's-complement ("wrap").
Division truncates toward zero.
"""
from __future__ import annotations

from typing import Literal

from contracts import DivisionByZeroError, IntegerOverflowError

OverflowPolicy = Literal["error", "wrap"]


class IntegerDomain:
    """Signed integers of a fixed width with a chosen overflow policy."""

    def __init__(self, bits: int = 32, policy: OverflowPolicy = "error") -> None:
        if bits < 2:
            raise ValueError(f"bits must be >= 2, got {bits}")
        if policy not in ("error", "wrap"):
            raise ValueError(f"Unknown overflow policy: {policy!r}")
        self.bits = bits
        self.policy = policy
        self.min_value = -(1 << (bits - 1))
        self.max_value = (1 << (bits - 1)) - 1

    def __repr__(self) -> str:
        return f"IntegerDomain(bits={self.bits}, policy={self.policy!r})"

    def fit(self, value: int, what: str = "result", position: int | None = None) -> int:
        if self.min_value <= value <= self.max_value:
            return value
        if self.policy == "wrap":
            span = 1 << self.bits
            return (value - self.min_value) % span + self.min_value
        raise IntegerOverflowError(
            f"{what} {value} does not fit in a {self.bits}-bit signed integer",
            position,
        )

    # -- operations ------------------------------------------------------

    def add(self, a: int, b: int) -> int:
        return self.fit(a + b)

    def sub(self, a: int, b: int) -> int:
        return self.fit(a - b)

    def mul(self, a: int, b: int) -> int:
        return self.fit(a * b)

    def div(self, a: int, b: int) -> int:
        if b == 0:
            raise DivisionByZeroError(f"Division by zero: {a} / 0")
        # floor division rounds toward -inf; the sign is applied afterwards
        q = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            q = -q
        return self.fit(q)

    def neg(self, a: int) -> int:
        return self.fit(-a)
