"""Primality testing.

Small integers are looked up in a sieve table held by a
:class:`PrimalityOracle`; larger ones go through the repeated strong
pseudoprime (Miller–Rabin) test.

The default oracle is a process-wide :class:`SieveOracle` sized by
:attr:`numcore.config.Config.small_prime_limit`. Its table is built once, on
first use, behind a lock. Every public function accepts ``oracle=`` so tests
(or callers with different memory budgets) can substitute another table.

Notes
-----
"Very probably prime" is not a proof: for a composite ``n`` each trial is
fooled with probability at most 1/4, and the number of trials is chosen from
the configured false-positive tolerance.
"""

from __future__ import annotations

import enum
import logging
import math
import random
import threading
from time import time
from typing import NamedTuple, Protocol

import numpy as np

from numcore.config import get_config
from numcore.errors import DomainError
from numcore.functions.cpu_numba import sieve_not_prime
from numcore.number_theory.modular import modular_expt
from numcore.number_theory.sampling import new_rng, random_integer
from numcore.types import as_integer, as_natural

log = logging.getLogger(__name__)


class PrimalityOracle(Protocol):
    """Answers primality for ``0 <= n < limit``."""

    limit: int

    def is_prime(self, n: int) -> bool:
        """Return whether ``n`` is prime. Only valid for ``0 <= n < limit``."""

    def __contains__(self, n: int) -> bool:
        """Return whether ``n`` is covered by the oracle."""


class SieveOracle:
    """Primality oracle backed by a sieve-of-Eratosthenes table.

    Parameters
    ----------
    limit:
        Table size; defaults to the configured small-prime limit.

    Notes
    -----
    The table is built lazily by a Numba kernel. Concurrent first use from
    several threads builds it exactly once.
    """

    def __init__(self, limit: int | None = None):
        if limit is None:
            limit = get_config().small_prime_limit
        self.limit = as_natural(limit, "limit", "SieveOracle")
        if self.limit < 2:
            raise DomainError("SieveOracle", f"limit must be at least 2, got {self.limit}")
        self._table: np.ndarray | None = None
        self._lock = threading.Lock()
        self.log = logging.getLogger(self.__class__.__module__)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(limit={self.limit})"

    @property
    def built(self) -> bool:
        return self._table is not None

    @property
    def table(self) -> np.ndarray:
        """Read-only boolean array, true where the index is not prime."""

        if self._table is None:
            with self._lock:
                if self._table is None:
                    start = time()
                    table = sieve_not_prime(self.limit)
                    table.setflags(write=False)
                    self._table = table
                    self.log.debug(
                        f"Built prime sieve below {self.limit} in {time() - start:.3f} seconds"
                    )
        return self._table

    def __contains__(self, n: int) -> bool:
        return 0 <= n < self.limit

    def is_prime(self, n: int) -> bool:
        if n not in self:
            raise DomainError("is_prime", f"{n} is outside the sieve range [0, {self.limit})")
        return not self.table[n]

    def primes(self, n: int | None = None) -> np.ndarray:
        """All primes below ``n`` (default: the whole table)."""

        n = self.limit if n is None else n
        if not 0 <= n <= self.limit:
            raise DomainError("primes_below", f"{n} is outside the sieve range [0, {self.limit}]")
        return np.flatnonzero(~self.table[:n])


_default_oracle: PrimalityOracle | None = None
_default_oracle_lock = threading.Lock()


def get_default_oracle() -> PrimalityOracle:
    """Return the process-wide oracle, creating it on first use."""

    global _default_oracle
    if _default_oracle is None:
        with _default_oracle_lock:
            if _default_oracle is None:
                _default_oracle = SieveOracle()
    return _default_oracle


def set_default_oracle(oracle: PrimalityOracle | None) -> None:
    """Replace the process-wide oracle; ``None`` recreates it lazily from the config."""

    global _default_oracle
    with _default_oracle_lock:
        _default_oracle = oracle


class Verdict(enum.Enum):
    PROBABLY_PRIME = "probably-prime"
    VERY_PROBABLY_PRIME = "very-probably-prime"
    COMPOSITE = "composite"
    DIVISOR = "divisor"


class Witness(NamedTuple):
    """Outcome of a strong pseudoprime test.

    ``divisor`` holds a proper divisor of ``n`` when ``verdict`` is
    :attr:`Verdict.DIVISOR` and is ``None`` otherwise.
    """

    verdict: Verdict
    divisor: int | None = None


def strong_pseudoprime_trials(tolerance: float | None = None) -> int:
    """Number of trials for a false-positive ``tolerance``: ``ceil(log2(1/tolerance))``."""

    if tolerance is None:
        tolerance = get_config().strong_pseudoprime_tolerance
    if not 0.0 < tolerance < 1.0:
        raise DomainError("strong_pseudoprime_trials", f"tolerance must lie in (0, 1), got {tolerance}")
    return math.ceil(math.log2(1.0 / tolerance))


def strong_pseudoprime_trial(n: int, rng: random.Random | None = None) -> Witness:
    """One randomized strong pseudoprime trial for ``n > 3``.

    A witness ``a`` is drawn uniformly from ``[2, n - 1]``. If it shares a
    factor with ``n`` that factor is returned. Otherwise, with ``n - 1 =
    2**nu * m`` and ``m`` odd, the sequence ``a**m, a**(2m), ...`` is squared
    until it reaches 1. Reaching 1 from ``n - 1`` (or starting at 1) means
    ``n`` is probably prime; reaching it from any other value ``b`` exposes
    the divisor ``gcd(b + 1, n)``; never reaching it means composite.
    """

    n = as_natural(n, "n", "strong_pseudoprime_trial")
    if n < 4:
        raise DomainError("strong_pseudoprime_trial", f"n must be greater than 3, got {n}")
    rng = rng if rng is not None else new_rng()

    a = random_integer(2, n, rng)
    g = math.gcd(a, n)
    if g > 1:
        return Witness(Verdict.DIVISOR, g)

    nu, m = 0, n - 1
    while m % 2 == 0:
        nu += 1
        m //= 2

    b = modular_expt(a, m, n)
    if b == 1:
        return Witness(Verdict.PROBABLY_PRIME)

    b_old = b
    i = 0
    while i < nu and b != 1:
        b_old = b
        b = b * b % n
        i += 1

    if b != 1:
        return Witness(Verdict.COMPOSITE)
    if b_old == n - 1:
        return Witness(Verdict.PROBABLY_PRIME)
    return Witness(Verdict.DIVISOR, math.gcd(b_old + 1, n))


def strong_pseudoprime_explanation(
    n: int,
    rng: random.Random | None = None,
    tolerance: float | None = None,
) -> Witness:
    """Repeat :func:`strong_pseudoprime_trial` until a non-prime verdict.

    Returns the first :attr:`Verdict.COMPOSITE` or :attr:`Verdict.DIVISOR`
    witness, or :attr:`Verdict.VERY_PROBABLY_PRIME` once every trial said
    "probably prime".
    """

    trials = strong_pseudoprime_trials(tolerance)
    rng = rng if rng is not None else new_rng()
    for _ in range(trials):
        witness = strong_pseudoprime_trial(n, rng)
        if witness.verdict is not Verdict.PROBABLY_PRIME:
            return witness
    return Witness(Verdict.VERY_PROBABLY_PRIME)


def is_strong_pseudoprime(n: int, rng: random.Random | None = None) -> bool:
    return strong_pseudoprime_explanation(n, rng).verdict is Verdict.VERY_PROBABLY_PRIME


def is_prime(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> bool:
    """Return whether ``|n|`` is prime.

    Table lookup below the oracle limit, repeated strong pseudoprime test
    above it.
    """

    n = abs(as_integer(n, "n", "is_prime"))
    oracle = oracle if oracle is not None else get_default_oracle()
    if n in oracle:
        return oracle.is_prime(n)
    if n < 4:
        return n >= 2
    return is_strong_pseudoprime(n, rng)


def next_prime(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> int:
    """Smallest prime greater than ``n``.

    Negative arguments mirror :func:`prev_prime`: ``next_prime(-n) ==
    -prev_prime(n)``.
    """

    n = as_integer(n, "n", "next_prime")
    if n < 0:
        return -prev_prime(-n, oracle=oracle, rng=rng)
    if n < 2:
        return 2
    if n == 2:
        return 3
    candidate = n + 1 if n % 2 == 0 else n + 2
    while not is_prime(candidate, oracle=oracle, rng=rng):
        candidate += 2
    return candidate


def prev_prime(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> int:
    """Largest prime smaller than ``n``, counting the negated primes.

    ``prev_prime(3) == 2`` and ``prev_prime(n) == -2`` for ``n <= 2``.
    """

    n = as_integer(n, "n", "prev_prime")
    if n < 0:
        return -next_prime(-n, oracle=oracle, rng=rng)
    if n == 3:
        return 2
    if n < 3:
        return -2
    candidate = n - 1 if n % 2 == 0 else n - 2
    while not is_prime(candidate, oracle=oracle, rng=rng):
        candidate -= 2
    return candidate


def next_primes(
    z: int,
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> list[int]:
    """The ``n`` primes following ``z``."""

    n = as_natural(n, "n", "next_primes")
    primes = []
    p = z
    for _ in range(n):
        p = next_prime(p, oracle=oracle, rng=rng)
        primes.append(p)
    return primes


def prev_primes(
    z: int,
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> list[int]:
    """The ``n`` primes preceding ``z``, nearest first."""

    n = as_natural(n, "n", "prev_primes")
    primes = []
    p = z
    for _ in range(n):
        p = prev_prime(p, oracle=oracle, rng=rng)
        primes.append(p)
    return primes


def nth_prime(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> int:
    """The ``n``-th prime counting from zero: ``nth_prime(0) == 2``."""

    n = as_natural(n, "n", "nth_prime")
    p = 2
    for _ in range(n):
        p = next_prime(p, oracle=oracle, rng=rng)
    return p


def random_prime(
    n: int,
    *,
    oracle: PrimalityOracle | None = None,
    rng: random.Random | None = None,
) -> int:
    """A uniformly drawn prime in ``[2, n)``; requires ``n > 2``."""

    n = as_natural(n, "n", "random_prime")
    if n <= 2:
        raise DomainError("random_prime", f"there is no prime below {n}")
    rng = rng if rng is not None else new_rng()
    while True:
        candidate = random_integer(2, n, rng)
        if is_prime(candidate, oracle=oracle, rng=rng):
            return candidate


def primes_below(n: int, *, oracle: SieveOracle | None = None) -> list[int]:
    """All primes below ``n`` read from the sieve table (``n`` within the table)."""

    n = as_natural(n, "n", "primes_below")
    oracle = oracle if oracle is not None else get_default_oracle()
    return [int(p) for p in oracle.primes(n)]
