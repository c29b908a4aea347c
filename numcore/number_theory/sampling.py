"""Random integers for the randomized number-theory algorithms.

Primality witnesses and Pollard's rho seeds are drawn from a
:class:`random.Random` passed in by the caller. Without one, every call gets
its own generator seeded from fresh OS entropy, so concurrent calls never
share generator state.
"""

from __future__ import annotations

import random

import numpy as np

from numcore.errors import DomainError
from numcore.types import as_integer, as_positive


def new_rng(seed: int | None = None) -> random.Random:
    """Return an independent random generator.

    Parameters
    ----------
    seed:
        Optional seed for reproducible streams. ``None`` draws 128 bits of
        entropy through :class:`numpy.random.SeedSequence`.
    """

    if seed is None:
        seed = np.random.SeedSequence().entropy
    return random.Random(seed)


def big_random(n: int, rng: random.Random | None = None) -> int:
    """Uniform random integer in ``[0, n)`` for arbitrarily large ``n``."""

    n = as_positive(n, "n", "big_random")
    rng = rng if rng is not None else new_rng()
    return rng.randrange(n)


def random_integer(lo: int, hi: int, rng: random.Random | None = None) -> int:
    """Uniform random integer in ``[lo, hi)``."""

    lo = as_integer(lo, "lo", "random_integer")
    hi = as_integer(hi, "hi", "random_integer")
    if hi <= lo:
        raise DomainError("random_integer", f"empty range [{lo}, {hi})")
    rng = rng if rng is not None else new_rng()
    return rng.randrange(lo, hi)
