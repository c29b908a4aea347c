import pytest

from numcore.errors import DomainError
from numcore.number_theory import (
    SieveOracle,
    as_power,
    integer_root,
    integer_root_remainder,
    is_odd_prime_power,
    is_perfect_power,
    max_dividing_power,
    max_dividing_power_naive,
    new_rng,
    perfect_power,
    perfect_square,
    prime_power,
    simple_as_power,
)


@pytest.mark.parametrize("r", [0, 1, 2, 3, 10, 12345, 2**100 + 7])
@pytest.mark.parametrize("y", [1, 2, 3, 5, 17])
def test_integer_root_of_exact_powers(r, y):
    assert integer_root(r**y, y) == r
    assert integer_root_remainder(r**y, y) == (r, 0)
    if r > 1:
        assert integer_root(r**y - 1, y) == r - 1


@pytest.mark.parametrize("y", [2, 3, 4, 7, 64])
def test_integer_root_bounds(y):
    rng = new_rng(7)
    for _ in range(200):
        x = rng.randrange(2 ** rng.randrange(1, 300))
        r = integer_root(x, y)
        assert r**y <= x < (r + 1) ** y


def test_integer_root_remainder():
    assert integer_root_remainder(30, 3) == (3, 3)
    assert integer_root_remainder(0, 4) == (0, 0)


def test_integer_root_domain():
    with pytest.raises(DomainError):
        integer_root(-8, 3)
    with pytest.raises(DomainError):
        integer_root(8, 0)


@pytest.mark.parametrize(
    "p,n,m",
    [
        (2, 2**10 * 3, 10),
        (3, 3**7 * 5, 7),
        (5, 7, 0),
        (2, 1, 0),
        (7, 7**200, 200),
        (10, 10**33 * 3, 33),
        (1, 12, 1),
    ],
)
def test_max_dividing_power(p, n, m):
    assert max_dividing_power(p, n) == m


def test_max_dividing_power_naive():
    assert max_dividing_power_naive(3, 3**7 * 5) == 7
    with pytest.raises(DomainError):
        max_dividing_power_naive(1, 12)
    with pytest.raises(DomainError):
        max_dividing_power(2, 0)


@pytest.mark.parametrize(
    "a,expected",
    [
        (1, (1, 1)),
        (2, (2, 1)),
        (64, (2, 6)),
        (72, (72, 1)),
        (36, (6, 2)),
        (3**40, (3, 40)),
        (6**12 * 35**6, (6**2 * 35, 6)),
    ],
)
def test_simple_as_power(a, expected):
    assert simple_as_power(a) == expected


@pytest.mark.parametrize(
    "a,expected",
    [
        (0, (0, 1)),
        (1, (1, 1)),
        (64, (2, 6)),
        (72, (72, 1)),
        (36, (6, 2)),
        (2**6 * 3**9, (2**2 * 3**3, 3)),
    ],
)
def test_as_power(a, expected, default_oracle):
    assert as_power(a) == expected


def test_perfect_power(default_oracle):
    assert perfect_power(1) is None
    assert perfect_power(0) is None
    assert perfect_power(12) is None
    assert perfect_power(1024) == (2, 10)
    assert is_perfect_power(27)
    assert not is_perfect_power(28)


def test_prime_power(default_oracle):
    assert prime_power(8) == (2, 3)
    assert prime_power(13) == (13, 1)
    assert prime_power(12) is None
    assert prime_power(1) is None
    assert is_odd_prime_power(27)
    assert not is_odd_prime_power(8)
    assert not is_odd_prime_power(15)


def test_oracle_and_rng_are_passed_to_factorize(default_oracle):
    kwargs = dict(oracle=SieveOracle(100), rng=new_rng(0))
    assert as_power(2**6 * 3**9, **kwargs) == (2**2 * 3**3, 3)
    assert as_power(360, **kwargs) == (360, 1)
    assert perfect_power(3**12, **kwargs) == (3, 12)
    assert is_perfect_power(1000, **kwargs)
    assert prime_power(3**7, **kwargs) == (3, 7)
    assert prime_power(101 * 103, **kwargs) is None
    assert is_odd_prime_power(101**2, **kwargs)

    oracle = SieveOracle(100)
    prime_power(3**7 * 5, oracle=oracle)
    assert oracle.built


def test_perfect_square():
    assert perfect_square(49) == 7
    assert perfect_square(50) is None
    assert perfect_square(0) == 0
    assert perfect_square(10**40) == 10**20
