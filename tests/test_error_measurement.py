import math
from fractions import Fraction

import pytest

from numcore.flonum import absolute_error, flulp_error, relative_error
from numcore.flonum.constants import EPSILON

inf = math.inf
nan = math.nan


@pytest.mark.parametrize("error", [absolute_error, relative_error])
def test_non_finite_cases(error):
    assert error(inf, inf) == 0
    assert error(-inf, -inf) == 0
    assert error(inf, -inf) == inf
    assert error(inf, 1.0) == inf
    assert error(1.0, -inf) == inf
    assert math.isnan(error(inf, nan))
    assert math.isnan(error(nan, nan))
    assert math.isnan(error(nan, 1))


def test_absolute_error_is_exact():
    error = absolute_error(0.1, Fraction(1, 10))
    assert isinstance(error, Fraction)
    assert error == Fraction(0.1) - Fraction(1, 10)
    assert error > 0
    assert absolute_error(3, 5) == 2
    assert absolute_error(2.5, 2.5) == 0


def test_relative_error():
    assert relative_error(3, 2) == Fraction(1, 2)
    assert relative_error(-1.0, 2) == Fraction(3, 2)
    assert relative_error(0.0, 0) == 0
    assert relative_error(1.0, 0) == inf


def test_flulp_error():
    assert flulp_error(1.0 + EPSILON, 1.0) == 1.0
    assert flulp_error(1.0, Fraction(1, 1)) == 0.0
    assert flulp_error(1.0 + 2 * EPSILON, Fraction(1, 1)) == 2.0
    assert flulp_error(inf, inf) == 0.0
    assert flulp_error(inf, 1.0) == inf
    assert math.isnan(flulp_error(nan, 1.0))
