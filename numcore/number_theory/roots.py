"""Integer roots and perfect powers."""

from __future__ import annotations

import math
import random
from typing import TYPE_CHECKING

from numcore.errors import DomainError
from numcore.types import BaseExponent, as_natural, as_positive

if TYPE_CHECKING:
    from numcore.number_theory.primality import PrimalityOracle


def integer_root(x: int, y: int) -> int:
    """Largest ``r`` with ``r**y <= x``.

    Parameters
    ----------
    x:
        Non-negative radicand.
    y:
        Positive degree.

    Notes
    -----
    ``y == 2`` uses :func:`math.isqrt`. Otherwise the bit length of ``x``
    seeds the Newton iteration ``r -> ((y-1)*r + x // r**(y-1)) // y`` with
    ``2**ceil(bits / y)``, which lies above the root; the integer iteration
    then decreases monotonically and stops at the root. A final decrement
    pass guards the result.
    """

    x = as_natural(x, "x", "integer_root")
    y = as_positive(y, "y", "integer_root")

    if x < 2 or y == 1:
        return x
    if y == 2:
        return math.isqrt(x)

    length = x.bit_length()
    # x < 2**length <= 2**y
    if length <= y:
        return 1

    r = 1 << -(-length // y)
    y1 = y - 1
    while True:
        s = (y1 * r + x // r**y1) // y
        if s >= r:
            break
        r = s

    while r**y > x:
        r -= 1
    return r


def integer_root_remainder(x: int, y: int) -> tuple[int, int]:
    """Return ``(r, x - r**y)`` with ``r = integer_root(x, y)``."""

    r = integer_root(x, y)
    return r, as_natural(x, "x", "integer_root") - r**y


def max_dividing_power_naive(p: int, n: int) -> int:
    """Largest ``m`` with ``p**m`` dividing ``n``, by repeated division."""

    p = as_positive(p, "p", "max_dividing_power")
    n = as_positive(n, "n", "max_dividing_power")
    if p == 1:
        raise DomainError("max_dividing_power", f"no maximal power of 1 divides {n}")

    m = 0
    while n % p == 0:
        n //= p
        m += 1
    return m


def max_dividing_power(p: int, n: int) -> int:
    """Largest ``m`` with ``p**m`` dividing ``n``.

    The power of ``p`` is squared while it still divides ``n``; once
    ``p**e | n`` but ``p**(2e)`` does not, the remaining exponent is found by
    :func:`max_dividing_power_naive` on ``n // p**e``.

    ``p == 1`` returns 1 by convention.
    """

    p = as_positive(p, "p", "max_dividing_power")
    n = as_positive(n, "n", "max_dividing_power")
    if p == 1:
        return 1
    if n % p != 0:
        return 0

    p_to_e, e = p, 1
    while True:
        p_to_e2 = p_to_e * p_to_e
        if n % p_to_e2 != 0:
            break
        p_to_e, e = p_to_e2, 2 * e
    return e + max_dividing_power_naive(p, n // p_to_e)


def simple_as_power(a: int) -> BaseExponent:
    """Write ``a`` as ``b**r`` with ``r`` maximal, without factorizing.

    Exponents are tried from the bit length of ``a`` downwards, so the first
    exact root found has the largest exponent.
    """

    a = as_positive(a, "a", "as_power")
    for e in range(a.bit_length(), 1, -1):
        root, remainder = integer_root_remainder(a, e)
        if remainder == 0:
            return BaseExponent(root, e)
    return BaseExponent(a, 1)


def as_power(
    a: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> BaseExponent:
    """Write ``a`` as ``b**r`` with ``r`` maximal.

    ``r`` is the gcd of the exponents in the prime factorization of ``a``.
    ``0`` and ``1`` are returned as ``(a, 1)``. ``oracle`` and ``rng`` are
    passed on to :func:`numcore.number_theory.factorization.factorize`.
    """

    from numcore.number_theory.factorization import factorize

    a = as_natural(a, "a", "as_power")
    if a < 2:
        return BaseExponent(a, 1)
    r = math.gcd(*(exponent for _, exponent in factorize(a, oracle=oracle, rng=rng)))
    return BaseExponent(integer_root(a, r), r)


def perfect_power(
    a: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> BaseExponent | None:
    """``(b, r)`` with ``a == b**r`` and ``r > 1`` maximal, or ``None``."""

    power = as_power(a, oracle=oracle, rng=rng)
    if power.base > 1 and power.exponent > 1:
        return power
    return None


def is_perfect_power(
    a: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> bool:
    return perfect_power(a, oracle=oracle, rng=rng) is not None


def prime_power(
    a: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> BaseExponent | None:
    """``(p, k)`` when ``a == p**k`` for a prime ``p``, else ``None``."""

    from numcore.number_theory.factorization import factorize

    a = as_natural(a, "a", "prime_power")
    if a < 2:
        return None
    factors = factorize(a, oracle=oracle, rng=rng)
    if len(factors) == 1:
        return factors[0]
    return None


def is_odd_prime_power(
    a: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> bool:
    power = prime_power(a, oracle=oracle, rng=rng)
    return power is not None and power.base % 2 == 1


def perfect_square(a: int) -> int | None:
    """``isqrt(a)`` when ``a`` is a perfect square, else ``None``."""

    a = as_natural(a, "a", "perfect_square")
    root = math.isqrt(a)
    if root * root == a:
        return root
    return None
