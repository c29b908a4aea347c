"""Modular arithmetic.

Arithmetic modulo ``n`` is expressed through an explicit
:class:`ModularContext` value bound to its modulus. It can be passed around
like any other object or scoped with a ``with`` block::

    with with_modulus(7) as m:
        m.pow(3, 100)   # 4
        m.inv(3)        # 5
"""

from __future__ import annotations

import math
from typing import Sequence

from numcore.errors import DomainError
from numcore.number_theory.arithmetic import bezout_binary
from numcore.types import as_integer, as_natural, as_positive


def modular_expt(a: int, e: int, n: int) -> int:
    """Return ``a**e mod n`` by square-and-multiply.

    Parameters
    ----------
    a:
        Base (any integer).
    e:
        Non-negative exponent.
    n:
        Positive modulus.
    """

    a = as_integer(a, "a", "modular_expt")
    e = as_natural(e, "e", "modular_expt")
    n = as_positive(n, "n", "modular_expt")

    result = 1 % n
    base = a % n
    while e:
        if e & 1:
            result = result * base % n
        base = base * base % n
        e >>= 1
    return result


def inverse(a: int, n: int) -> int | None:
    """Modular inverse of ``a`` modulo ``n``.

    Returns
    -------
    int or None
        ``b`` with ``a*b ≡ 1 (mod n)`` and ``0 <= b < n``, or ``None`` when
        ``gcd(a, n) != 1``.

    Raises
    ------
    DomainError
        If ``n <= 0``.
    """

    a = as_integer(a, "a", "modular_inverse")
    n = as_positive(n, "n", "modular_inverse")
    if math.gcd(a, n) != 1:
        return None
    u, _ = bezout_binary(a, n)
    return u % n


class ModularContext:
    """Integer arithmetic reduced modulo a fixed positive modulus.

    Every method returns a representative in ``[0, modulus)``.

    Parameters
    ----------
    modulus:
        Positive modulus.
    """

    def __init__(self, modulus: int):
        self.modulus = as_positive(modulus, "modulus", "with_modulus")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.modulus})"

    def __enter__(self) -> "ModularContext":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        return None

    def mod(self, a: int) -> int:
        return as_integer(a, "a", "mod") % self.modulus

    def add(self, *xs: int) -> int:
        total = 0
        for x in xs:
            total = (total + self.mod(x)) % self.modulus
        return total

    def sub(self, a: int, *bs: int) -> int:
        """``a - b1 - b2 ...``; with one argument, ``-a``."""

        if not bs:
            return self.neg(a)
        return (self.mod(a) - self.add(*bs)) % self.modulus

    def neg(self, a: int) -> int:
        return -self.mod(a) % self.modulus

    def mul(self, *xs: int) -> int:
        product = 1 % self.modulus
        for x in xs:
            product = product * self.mod(x) % self.modulus
        return product

    def pow(self, a: int, e: int) -> int:
        """``a**e``; negative exponents raise the inverse of ``a``.

        Raises
        ------
        DomainError
            If ``e < 0`` and ``a`` has no inverse.
        """

        e = as_integer(e, "e", "modular_expt")
        if e < 0:
            return modular_expt(self._checked_inverse(a, "modular_expt"), -e, self.modulus)
        return modular_expt(a, e, self.modulus)

    def inv(self, a: int) -> int | None:
        return inverse(a, self.modulus)

    def div(self, a: int, b: int) -> int:
        """``a * b^-1``; raises :class:`DomainError` when ``b`` is not invertible."""

        return self.mul(a, self._checked_inverse(b, "modular_div"))

    def equal(self, a: int, b: int) -> bool:
        return self.mod(a) == self.mod(b)

    def _checked_inverse(self, a: int, operation: str) -> int:
        b = inverse(a, self.modulus)
        if b is None:
            raise DomainError(operation, f"{a} is not invertible modulo {self.modulus}")
        return b


def with_modulus(n: int) -> ModularContext:
    """Return a :class:`ModularContext` for ``n`` (usable in a ``with`` block)."""

    return ModularContext(n)


def solve_chinese(residues: Sequence[int], moduli: Sequence[int]) -> int:
    """Chinese Remainder solve.

    Returns the unique ``x`` in ``[0, prod(moduli))`` with ``x ≡ a_i (mod
    n_i)``. The moduli are assumed to be pairwise coprime.

    Parameters
    ----------
    residues:
        Residues ``a_i``.
    moduli:
        Positive moduli ``n_i``.

    Raises
    ------
    DomainError
        For empty or unequal-length inputs, a non-positive modulus, or a
        cofactor without an inverse (moduli sharing a factor).
    """

    residues = [as_integer(a, "residue", "solve_chinese") for a in residues]
    moduli = [as_positive(n, "modulus", "solve_chinese") for n in moduli]
    if len(residues) != len(moduli):
        raise DomainError(
            "solve_chinese",
            f"got {len(residues)} residues but {len(moduli)} moduli",
        )
    if not moduli:
        raise DomainError("solve_chinese", "at least one modulus is required")

    n = math.prod(moduli)
    total = 0
    for a_i, n_i in zip(residues, moduli):
        c_i = n // n_i
        d_i = inverse(c_i, n_i)
        if d_i is None:
            raise DomainError(
                "solve_chinese", f"modulus {n_i} is not coprime to the other moduli {moduli}"
            )
        total += a_i * c_i * d_i
    return total % n
