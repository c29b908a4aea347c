import numpy as np
import pytest

from numcore.errors import DomainError, NumcoreError
from numcore.types import BaseExponent, Natural, as_integer, as_positive


def test_natural_accepts_integral_values():
    assert Natural(5) == 5
    assert Natural(np.int64(7)) == 7
    assert type(Natural(np.int64(7)) + 1) is int


@pytest.mark.parametrize("value", [-1, True, 1.0, "3", None])
def test_natural_rejects(value):
    with pytest.raises(DomainError) as excinfo:
        Natural(value, "n", "demo")
    assert excinfo.value.operation == "demo"
    assert str(excinfo.value).startswith("demo: ")
    assert isinstance(excinfo.value, NumcoreError)


def test_helpers():
    assert as_integer(-3, "x", "demo") == -3
    with pytest.raises(DomainError):
        as_positive(0, "x", "demo")
    assert BaseExponent(2, 3) == (2, 3)
