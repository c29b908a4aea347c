"""Measuring the error of a floating-point result against a reference.

Finite operands are converted to :class:`fractions.Fraction` so the measured
error itself is exact. Non-finite operands are handled explicitly:

- any NaN operand gives NaN,
- equal values (including equal infinities) give an error of 0,
- any other non-finite combination gives ``inf``.
"""

from __future__ import annotations

import math
import numbers
from fractions import Fraction

from numcore.flonum.functions import flulp


def _is_nan(x) -> bool:
    return not isinstance(x, numbers.Rational) and math.isnan(x)


def _is_finite(x) -> bool:
    return isinstance(x, numbers.Rational) or math.isfinite(x)


def _exact(x) -> Fraction:
    if isinstance(x, numbers.Rational):
        return Fraction(x)
    return Fraction(float(x))


def absolute_error(x, r):
    """Return ``|x - r|``.

    Parameters
    ----------
    x:
        Approximation (float, int or Fraction).
    r:
        Reference value.

    Returns
    -------
    Fraction or float
        The exact error as a ``Fraction`` for finite operands, otherwise
        ``nan`` or ``inf``.
    """

    if _is_nan(x) or _is_nan(r):
        return math.nan
    if x == r:
        return Fraction(0)
    if _is_finite(x) and _is_finite(r):
        return abs(_exact(x) - _exact(r))
    return math.inf


def relative_error(x, r):
    """Return ``|x - r| / |r|``.

    A zero reference with a nonzero approximation gives ``inf`` rather than a
    division by zero.
    """

    if _is_nan(x) or _is_nan(r):
        return math.nan
    if x == r:
        return Fraction(0)
    if _is_finite(x) and _is_finite(r):
        exact_r = _exact(r)
        if exact_r == 0:
            return math.inf
        return abs((_exact(x) - exact_r) / exact_r)
    return math.inf


def flulp_error(x: float, r) -> float:
    """Return the error of ``x`` in units of the last place of ``r``."""

    if _is_nan(x) or _is_nan(r):
        return math.nan
    if x == r:
        return 0.0
    if _is_finite(x) and _is_finite(r):
        ulp = flulp(float(r))
        return float(abs(_exact(x) - _exact(r)) / Fraction(ulp))
    return math.inf
