"""Ordinal arithmetic on doubles and units in the last place."""

from __future__ import annotations

import math

import numpy as np

from numcore.errors import DomainError
from numcore.flonum.constants import INF_ORDINAL, MAX

_MAGNITUDE_MASK = 0x7FFF_FFFF_FFFF_FFFF


def flonum_to_ordinal(x: float) -> int:
    """Map a double to its position in the total order of doubles.

    ``-0.0`` and ``+0.0`` both map to 0, ``+inf`` to :data:`INF_ORDINAL` and
    ``-inf`` to its negation. Adjacent doubles have adjacent ordinals.
    """

    x = float(x)
    if math.isnan(x):
        raise DomainError("flonum_to_ordinal", "nan has no ordinal")
    bits = int(np.array([x], dtype=np.float64).view(np.int64)[0])
    if bits >= 0:
        return bits
    return -(bits & _MAGNITUDE_MASK)


def ordinal_to_flonum(i: int) -> float:
    """Inverse of :func:`flonum_to_ordinal`."""

    i = int(i)
    if abs(i) > INF_ORDINAL:
        raise DomainError(
            "ordinal_to_flonum", f"ordinal {i} outside [-{INF_ORDINAL}, {INF_ORDINAL}]"
        )
    magnitude = float(np.array([abs(i)], dtype=np.int64).view(np.float64)[0])
    return -magnitude if i < 0 else magnitude


def flstep(x: float, n: int) -> float:
    """Return the double ``n`` steps away from ``x``, saturating at infinities."""

    x = float(x)
    if math.isnan(x):
        return math.nan
    ordinal = flonum_to_ordinal(x) + int(n)
    return ordinal_to_flonum(max(-INF_ORDINAL, min(INF_ORDINAL, ordinal)))


def flnext(x: float) -> float:
    return flstep(x, 1)


def flprev(x: float) -> float:
    return flstep(x, -1)


def flonums_between(x: float, y: float) -> int:
    """Number of steps from ``x`` to ``y`` (negative when ``y < x``)."""

    return flonum_to_ordinal(y) - flonum_to_ordinal(x)


def flulp(x: float) -> float:
    """Distance from ``|x|`` to the next double of larger magnitude.

    ``flulp(MAX)`` is the gap below ``MAX`` and ``flulp(±inf)`` is ``inf``.
    """

    x = abs(float(x))
    if math.isnan(x):
        return math.nan
    if x == math.inf:
        return math.inf
    if x == MAX:
        return x - flprev(x)
    return flnext(x) - x
