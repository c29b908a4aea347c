"""Exact integer arithmetic: gcd, lcm, divisibility and Bezout coefficients."""

from __future__ import annotations

import math

from numcore.errors import DomainError
from numcore.types import as_integer


def gcd(*xs: int) -> int:
    """Non-negative greatest common divisor; ``gcd() == 0``."""

    return math.gcd(*(as_integer(x, "x", "gcd") for x in xs))


def lcm(*xs: int) -> int:
    """Non-negative least common multiple; ``lcm() == 1``."""

    return math.lcm(*(as_integer(x, "x", "lcm") for x in xs))


def divides(a: int, b: int) -> bool:
    """Return whether ``a`` divides ``b``, i.e. ``b % a == 0``.

    Raises
    ------
    DomainError
        If ``a == 0``.
    """

    a = as_integer(a, "a", "divides")
    b = as_integer(b, "b", "divides")
    if a == 0:
        raise DomainError("divides", f"divisor must be nonzero (b={b})")
    return b % a == 0


def bezout_binary(a: int, b: int) -> tuple[int, int]:
    """Return ``(u, v)`` with ``a*u + b*v == gcd(a, b)``.

    Extended Euclidean algorithm. The invariant ``r == a*u + b*v`` holds for
    both running remainders, so the last nonzero remainder yields the
    coefficients; they are negated if that remainder is negative.
    """

    a = as_integer(a, "a", "bezout")
    b = as_integer(b, "b", "bezout")

    old_r, r = a, b
    old_u, u = 1, 0
    old_v, v = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_u, u = u, old_u - q * u
        old_v, v = v, old_v - q * v

    if old_r < 0:
        return -old_u, -old_v
    return old_u, old_v


def bezout(a: int, *bs: int) -> list[int]:
    """Bezout coefficients of any number of integers.

    Returns ``cs`` with ``sum(c * x for c, x in zip(cs, (a, *bs))) == gcd(a,
    *bs)``. The pairwise identity is folded left to right: with the running
    gcd ``g = sum(c_i x_i)`` and ``g*s + b*t == gcd(g, b)``, every earlier
    coefficient is scaled by ``s`` and ``t`` is appended.
    """

    a = as_integer(a, "a", "bezout")
    coefficients = [-1 if a < 0 else 1]
    g = abs(a)
    for b in bs:
        b = as_integer(b, "b", "bezout")
        s, t = bezout_binary(g, b)
        coefficients = [c * s for c in coefficients]
        coefficients.append(t)
        g = math.gcd(g, b)
    return coefficients


def coprime(*xs: int) -> bool:
    """Return whether the gcd of all arguments is 1."""

    return gcd(*xs) == 1


def pairwise_coprime(*xs: int) -> bool:
    """Return whether every pair of arguments is coprime (O(n^2) gcds)."""

    values = [as_integer(x, "x", "pairwise_coprime") for x in xs]
    for i, x in enumerate(values):
        if any(math.gcd(x, y) != 1 for y in values[i + 1 :]):
            return False
    return True
