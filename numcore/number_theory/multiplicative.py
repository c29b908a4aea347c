"""Arithmetic functions derived from the prime factorization."""

from __future__ import annotations

import math
import random

from numcore.errors import DomainError
from numcore.number_theory.factorization import factorize
from numcore.number_theory.modular import modular_expt
from numcore.number_theory.primality import PrimalityOracle
from numcore.number_theory.roots import prime_power
from numcore.types import as_integer, as_natural, as_positive


def prime_divisors(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> list[int]:
    """Distinct prime divisors of ``n`` in increasing order."""

    n = as_positive(n, "n", "prime_divisors")
    return [p for p, _ in factorize(n, oracle=oracle, rng=rng)]


def prime_exponents(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> list[int]:
    """Exponents of the prime divisors of ``n``, in prime order."""

    n = as_positive(n, "n", "prime_exponents")
    return [e for _, e in factorize(n, oracle=oracle, rng=rng)]


def prime_omega(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> int:
    """Number of distinct prime divisors of ``n``."""

    return len(factorize(as_positive(n, "n", "prime_omega"), oracle=oracle, rng=rng))


def totient(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> int:
    """Euler's totient ``n * prod(1 - 1/p)``.

    Evaluated as ``(n // prod(p)) * prod(p - 1)`` to stay in integers.
    """

    n = as_positive(n, "n", "totient")
    ps = prime_divisors(n, oracle=oracle, rng=rng)
    return (n // math.prod(ps)) * math.prod(p - 1 for p in ps)


def moebius_mu(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> int:
    """Möbius function: 0 unless ``n`` is squarefree, else ``(-1)**omega(n)``."""

    factors = factorize(as_positive(n, "n", "moebius_mu"), oracle=oracle, rng=rng)
    if any(e > 1 for _, e in factors):
        return 0
    return -1 if len(factors) % 2 else 1


def divisor_sum(
    n: int,
    k: int = 1,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> int:
    """Sum of ``d**k`` over the positive divisors ``d`` of ``n``.

    Multiplicative: the product over ``p**e`` of ``1 + p**k + ... + p**(k*e)``.
    ``k == 0`` counts divisors.
    """

    factors = factorize(as_positive(n, "n", "divisor_sum"), oracle=oracle, rng=rng)
    k = as_natural(k, "k", "divisor_sum")
    if k == 0:
        return math.prod(e + 1 for _, e in factors)
    if k == 1:
        return math.prod((p ** (e + 1) - 1) // (p - 1) for p, e in factors)
    return math.prod((p ** (k * (e + 1)) - 1) // (p**k - 1) for p, e in factors)


def divisors(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> list[int]:
    """All positive divisors of ``|n|`` in increasing order; ``divisors(0) == []``."""

    n = abs(as_integer(n, "n", "divisors"))
    if n == 0:
        return []
    result = [1]
    for p, e in factorize(n, oracle=oracle, rng=rng):
        powers = [p**i for i in range(e + 1)]
        result = [d * q for d in result for q in powers]
    return sorted(result)


def mangoldt_lambda(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> float:
    """Von Mangoldt function: ``log p`` when ``n`` is a power of the prime ``p``, else 0."""

    power = prime_power(as_positive(n, "n", "mangoldt_lambda"), oracle=oracle, rng=rng)
    if power is None:
        return 0.0
    return math.log(power.base)


def quadratic_character(a: int, p: int) -> int:
    """Legendre symbol ``(a/p)`` for an odd prime ``p`` by Euler's criterion.

    Returns 0 when ``p`` divides ``a``, 1 for a nonzero square modulo ``p``
    and -1 otherwise. ``p`` is not checked for primality.
    """

    a = as_natural(a, "a", "quadratic_character")
    p = as_positive(p, "p", "quadratic_character")
    if p < 3 or p % 2 == 0:
        raise DomainError("quadratic_character", f"modulus must be an odd prime, got {p}")
    symbol = modular_expt(a, (p - 1) // 2, p)
    return symbol if symbol in (0, 1) else -1


def quadratic_residue(
    a: int,
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> bool:
    """Whether ``a`` (coprime to ``n``) is a square modulo ``n``."""

    a = as_integer(a, "a", "quadratic_residue")
    n = as_positive(n, "n", "quadratic_residue")
    odd_primes = [p for p in prime_divisors(n, oracle=oracle, rng=rng) if p != 2]
    if not all(quadratic_character(a % p, p) == 1 for p in odd_primes):
        return False
    if n % 8 == 0:
        return a % 8 == 1
    if n % 4 == 0:
        return a % 4 == 1
    return True
