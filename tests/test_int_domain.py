from __future__ import annotations

import pytest

from adapters.int_domain import IntegerDomain
from contracts import DivisionByZeroError, IntegerOverflowError


def test_int_domain_range_for_32_bits():
    domain = IntegerDomain()

    assert domain.min_value == -2147483648
    assert domain.max_value == 2147483647


def test_int_domain_min_divided_by_minus_one():
    with pytest.raises(IntegerOverflowError):
        IntegerDomain(policy="error").div(-2147483648, -1)

    assert IntegerDomain(policy="wrap").div(-2147483648, -1) == -2147483648


def test_int_domain_negating_min_value():
    with pytest.raises(IntegerOverflowError):
        IntegerDomain(bits=8).neg(-128)

    assert IntegerDomain(bits=8, policy="wrap").neg(-128) == -128


def test_int_domain_wrap_is_twos_complement():
    domain = IntegerDomain(bits=8, policy="wrap")

    assert domain.fit(127) == 127
    assert domain.fit(128) == -128
    assert domain.fit(255) == -1
    assert domain.fit(256) == 0
    assert domain.fit(-129) == 127


def test_int_domain_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        IntegerDomain(policy="wrap").div(5, 0)


def test_int_domain_rejects_bad_configuration():
    with pytest.raises(ValueError):
        IntegerDomain(bits=1)
    with pytest.raises(ValueError):
        IntegerDomain(policy="saturate")  # type: ignore[arg-type]
