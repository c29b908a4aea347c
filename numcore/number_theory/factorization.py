"""Prime factorization.

Small inputs are factorized by trial division over consecutive primes.
Large inputs are split by a case analysis (primes, factors 2 and 3, perfect
powers) and, failing that, by Pollard's rho with randomized restarts.

Factorizations are lists of :class:`numcore.types.BaseExponent` with strictly
increasing prime bases, e.g. ``factorize(360) == [(2, 3), (3, 2), (5, 1)]``.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Iterable

from numcore.config import get_config
from numcore.errors import FactorizationError
from numcore.number_theory.primality import PrimalityOracle, is_prime, next_prime
from numcore.number_theory.roots import max_dividing_power, simple_as_power
from numcore.number_theory.sampling import big_random, new_rng
from numcore.types import BaseExponent, Factorization, as_natural, as_positive

log = logging.getLogger(__name__)


def factorize(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> Factorization:
    """Prime factorization of a positive integer.

    Parameters
    ----------
    n:
        Positive integer. ``factorize(1) == []``.
    oracle:
        Primality oracle override.
    rng:
        Random source for Pollard's rho and primality witnesses.

    Returns
    -------
    list of BaseExponent
        ``(prime, exponent)`` pairs in increasing prime order.
    """

    n = as_positive(n, "n", "factorize")
    if n < get_config().factorize_small_threshold:
        return factorize_small(n, oracle=oracle, rng=rng)
    return factorize_large(n, oracle=oracle, rng=rng)


def factorize_small(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> Factorization:
    """Trial division over consecutive primes.

    Correct for any positive ``n`` but only fast when ``n`` has no two large
    prime factors.
    """

    n = as_positive(n, "n", "factorize")
    factors: Factorization = []
    p = 2
    while n >= p:
        if n == p or is_prime(n, oracle=oracle, rng=rng):
            factors.append(BaseExponent(n, 1))
            break
        if n % p == 0:
            m = max_dividing_power(p, n)
            factors.append(BaseExponent(p, m))
            n //= p**m
        p = next_prime(p, oracle=oracle, rng=rng)
    return factors


def pollard(n: int, rng: random.Random | None = None) -> int | None:
    """One attempt of Pollard's rho on ``n``.

    Iterates ``x -> x**2 + 1 mod n`` from a random seed with a slow and a
    fast pointer (one and two steps per round) and watches ``gcd(x - y, n)``.

    Returns
    -------
    int or None
        A proper divisor of ``n``, or ``None`` when the pointers met or
        ``isqrt(n)`` rounds passed without splitting ``n``.
    """

    n = as_natural(n, "n", "pollard")
    rng = rng if rng is not None else new_rng()
    x = y = big_random(n, rng)
    for _ in range(math.isqrt(n) + 1):
        x = (x * x + 1) % n
        y = (y * y + 1) % n
        y = (y * y + 1) % n
        g = math.gcd(x - y, n)
        if 1 < g < n:
            return g
        if g == n:
            return None
    return None


def _split(n: int, rng: random.Random) -> int:
    max_retries = get_config().pollard_max_retries
    for attempt in range(1, max_retries + 1):
        divisor = pollard(n, rng)
        if divisor is not None:
            return divisor
        log.debug(f"Pollard's rho failed to split {n} (attempt {attempt}/{max_retries})")
    log.warning(f"Giving up on splitting {n} after {max_retries} Pollard's rho attempts")
    raise FactorizationError(
        f"factorize: Pollard's rho found no divisor of {n} in {max_retries} attempts"
    )


def factorize_large(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> Factorization:
    """Factorization by case analysis and Pollard's rho.

    Works through a stack of ``(m, scale)`` items, each standing for
    ``m**scale``:

    - ``m == 1`` contributes nothing,
    - a prime ``m`` contributes ``(m, scale)``,
    - factors 2 and 3 are peeled off one at a time,
    - a perfect power ``b**e`` is replaced by ``(b, scale * e)``,
    - otherwise Pollard's rho splits ``m`` into two cofactors.

    Equal primes found along different branches are merged at the end.

    Raises
    ------
    FactorizationError
        If Pollard's rho keeps failing on some cofactor.
    """

    n = as_positive(n, "n", "factorize")
    rng = rng if rng is not None else new_rng()
    log.debug(f"Factorizing {n} ({n.bit_length()} bits) with Pollard's rho")

    found: list[BaseExponent] = []
    stack = [(n, 1)]
    while stack:
        m, scale = stack.pop()
        if m == 1:
            continue
        if is_prime(m, oracle=oracle, rng=rng):
            found.append(BaseExponent(m, scale))
        elif m % 2 == 0:
            found.append(BaseExponent(2, scale))
            stack.append((m // 2, scale))
        elif m % 3 == 0:
            found.append(BaseExponent(3, scale))
            stack.append((m // 3, scale))
        else:
            base, e = simple_as_power(m)
            if e > 1:
                stack.append((base, scale * e))
            else:
                divisor = _split(m, rng)
                stack.append((divisor, scale))
                stack.append((m // divisor, scale))
    return combine_same_base(found)


def combine_same_base(pairs: Iterable[tuple[int, int]]) -> Factorization:
    """Sort pairs by base and sum the exponents of equal bases."""

    combined: Factorization = []
    for base, exponent in sorted(pairs):
        if combined and combined[-1].base == base:
            combined[-1] = BaseExponent(base, combined[-1].exponent + exponent)
        else:
            combined.append(BaseExponent(base, exponent))
    return combined


def defactorize(pairs: Iterable[tuple[int, int]]) -> int:
    """Inverse of :func:`factorize`: the product of ``base**exponent``."""

    return math.prod(
        as_natural(base, "base", "defactorize") ** as_natural(exponent, "exponent", "defactorize")
        for base, exponent in pairs
    )
