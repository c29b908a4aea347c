"""Flonum constants.

All values are IEEE-754 doubles taken from :func:`numpy.finfo` and
:mod:`math`.
"""

from __future__ import annotations

import math

import numpy as np

_finfo = np.finfo(np.float64)

EPSILON: float = float(_finfo.eps)
MAX: float = float(_finfo.max)
MIN_NORMAL: float = float(_finfo.tiny)
MIN_SUBNORMAL: float = float(np.nextafter(0.0, 1.0))
MAX_SUBNORMAL: float = float(np.nextafter(MIN_NORMAL, 0.0))

INF: float = math.inf
NAN: float = math.nan

PI: float = math.pi
E: float = math.e
PHI: float = (1.0 + math.sqrt(5.0)) / 2.0
EULER_GAMMA: float = float(np.euler_gamma)
LN2: float = math.log(2.0)
LN10: float = math.log(10.0)
LOG2_E: float = 1.0 / LN2
LOG10_E: float = 1.0 / LN10
SQRT2: float = math.sqrt(2.0)

# Ordinal of +inf in the ordering of flonum_to_ordinal.
INF_ORDINAL: int = 0x7FF0_0000_0000_0000
