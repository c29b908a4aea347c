"""Building flonum vectors from loops.

:func:`for_flvector` is the loop-driven constructor: when the length is
known, values are written straight into a preallocated buffer; otherwise a
growable buffer starting at four slots is doubled as needed and trimmed at
the end.
"""

from __future__ import annotations

from typing import Callable, Iterable

import numpy as np

from numcore.flonum.vector import FlVector, _check_lengths
from numcore.types import as_natural

INITIAL_CAPACITY = 4


def for_flvector(values: Iterable[float], length: int | None = None) -> FlVector:
    """Collect the values produced by a loop into a new vector.

    Parameters
    ----------
    values:
        Iterable evaluated lazily, one value per output slot, in order.
    length:
        Optional statically known length ``n``. Iteration stops as soon as
        ``n`` slots are filled (remaining values are never produced). If the
        iterable runs out first the trailing slots stay ``0.0``.

    Returns
    -------
    FlVector
        The collected values.
    """

    if length is not None:
        n = as_natural(length, "length", "for_flvector")
        buffer = np.zeros(n, dtype=np.float64)
        if n == 0:
            return FlVector._wrap(buffer)
        i = 0
        for value in values:
            buffer[i] = value
            i += 1
            if i == n:
                break
        return FlVector._wrap(buffer)

    capacity = INITIAL_CAPACITY
    buffer = np.empty(capacity, dtype=np.float64)
    count = 0
    for value in values:
        if count == capacity:
            capacity *= 2
            grown = np.empty(capacity, dtype=np.float64)
            grown[:count] = buffer
            buffer = grown
        buffer[count] = value
        count += 1
    return FlVector._wrap(buffer[:count].copy())


def build_flvector(n: int, proc: Callable[[int], float]) -> FlVector:
    """Return the vector ``[proc(0), ..., proc(n - 1)]``."""

    n = as_natural(n, "n", "build_flvector")
    return for_flvector((proc(i) for i in range(n)), length=n)


def flvector_map(proc: Callable[..., float], v: FlVector, *vs: FlVector) -> FlVector:
    """Apply ``proc`` pointwise across one or more equal-length vectors."""

    _check_lengths("flvector_map", v, *vs)
    return for_flvector((proc(*xs) for xs in zip(v, *vs)), length=len(v))
