from numba import float64, jit

import numpy as np


@jit(nopython=True, nogil=True, cache=True)
def copy_unchecked(
    dest: np.ndarray,
    dest_start: int,
    src: np.ndarray,
    src_start: int,
    src_end: int,
):
    """Copy ``src[src_start:src_end]`` into ``dest`` starting at ``dest_start``.

    Parameters
    ----------
    dest : np.ndarray
        Destination buffer, modified in place.
    dest_start : int
        First destination index.
    src : np.ndarray
        Source buffer. May be the same array as ``dest``.
    src_start, src_end : int
        Half-open source range.

    Notes
    -----
    No bounds are checked here; callers validate the ranges first.
    Copying runs backwards when ``dest_start > src_start`` so overlapping
    ranges inside one buffer behave like ``memmove``.
    """
    count = src_end - src_start
    if dest_start > src_start:
        for i in range(count - 1, -1, -1):
            dest[dest_start + i] = src[src_start + i]
    else:
        for i in range(count):
            dest[dest_start + i] = src[src_start + i]


# No fastmath: the compensation terms must not be reassociated.
@jit(nopython=True, nogil=True, cache=True)
def compensated_cumsum(values: np.ndarray):
    """Running sums of ``values`` with Neumaier compensation.

    Parameters
    ----------
    values : np.ndarray
        One-dimensional float64 array.

    Returns
    -------
    np.ndarray
        ``out[i]`` approximates ``sum(values[: i + 1])`` with the rounding
        error of every partial sum carried forward. Once a partial sum
        overflows or becomes NaN the plain IEEE sum is reported.
    """
    out = np.empty(values.size, dtype=float64)
    total = 0.0
    compensation = 0.0
    for i in range(values.size):
        x = values[i]
        t = total + x
        if np.isfinite(t):
            if abs(total) >= abs(x):
                compensation += (total - t) + x
            else:
                compensation += (x - t) + total
            out[i] = t + compensation
        else:
            out[i] = t
        total = t
    return out


@jit(nopython=True, nogil=True, cache=True)
def sieve_not_prime(limit: int):
    """Sieve of Eratosthenes over ``[0, limit)``.

    Parameters
    ----------
    limit : int
        Table size.

    Returns
    -------
    np.ndarray
        Boolean array where ``table[i]`` is true iff ``i`` is not prime
        (``0`` and ``1`` included).
    """
    table = np.zeros(limit, dtype=np.bool_)
    for i in range(min(limit, 2)):
        table[i] = True
    p = 2
    while p * p < limit:
        if not table[p]:
            for multiple in range(p * p, limit, p):
                table[multiple] = True
        p += 1
    return table
