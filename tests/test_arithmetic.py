import itertools
import math

import pytest

from numcore.errors import DomainError
from numcore.number_theory import (
    bezout,
    bezout_binary,
    coprime,
    divides,
    gcd,
    lcm,
    pairwise_coprime,
)

PAIRS = list(itertools.product([0, 1, -1, 6, -10, 15, 240, -46, 2**64 + 13], repeat=2))


def test_gcd_and_lcm():
    assert gcd() == 0
    assert gcd(12, -18) == 6
    assert gcd(12, 18, 8) == 2
    assert lcm() == 1
    assert lcm(4, 6) == 12
    assert lcm(4, -6, 10) == 60


def test_divides():
    assert divides(3, 12)
    assert not divides(5, 12)
    assert divides(-4, 8)
    assert divides(7, 0)
    with pytest.raises(DomainError):
        divides(0, 5)


@pytest.mark.parametrize("a,b", PAIRS)
def test_bezout_binary_identity(a, b):
    u, v = bezout_binary(a, b)
    assert a * u + b * v == math.gcd(a, b)


@pytest.mark.parametrize(
    "xs",
    [
        (6,),
        (-6,),
        (0,),
        (6, 10, 15),
        (-12, 18, 27, 40),
        (2**80, 3**50, 5),
        (0, 0, 4),
    ],
)
def test_bezout_identity(xs):
    coefficients = bezout(*xs)
    assert len(coefficients) == len(xs)
    assert sum(c * x for c, x in zip(coefficients, xs)) == math.gcd(*xs)


def test_rejects_non_integers():
    with pytest.raises(DomainError):
        bezout(1.5, 2)
    with pytest.raises(DomainError):
        gcd(True, 2)


def test_coprime():
    assert coprime(6, 10, 15)
    assert not pairwise_coprime(6, 10, 15)
    assert pairwise_coprime(4, 9, 25)
    assert not coprime(4, 6)
