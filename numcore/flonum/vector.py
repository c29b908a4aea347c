"""Fixed-length double-precision buffers and their pointwise operations.

An :class:`FlVector` owns a one-dimensional, contiguous ``float64`` numpy array
whose length is fixed at creation. Pointwise operators always allocate a new
vector; only :meth:`FlVector.fill`, item assignment and
:func:`flvector_copy_range` write into an existing buffer.

Arithmetic follows IEEE-754: division by zero, ``log`` of a negative number
and similar cases produce ``inf``/``nan`` instead of raising.
"""

from __future__ import annotations

import math
import numbers
from typing import Callable, Iterable

import numpy as np

from numcore.errors import FlIndexError, LengthMismatchError
from numcore.functions.cpu_numba import compensated_cumsum, copy_unchecked
from numcore.types import as_natural


class FlVector:
    """A fixed-length mutable vector of doubles.

    Parameters
    ----------
    values:
        Any iterable of real numbers. The values are copied.

    Notes
    -----
    Equality compares lengths and elements, treating NaN as equal to NaN so
    that a vector always equals its own copy. Use :func:`flvector_eq` for the
    IEEE pointwise comparison.
    """

    __slots__ = ("_data",)
    __hash__ = None

    def __init__(self, values: Iterable[float] = ()):
        if isinstance(values, FlVector):
            data = values._data.copy()
        elif isinstance(values, np.ndarray):
            data = np.array(values, dtype=np.float64)
        else:
            data = np.array(list(values), dtype=np.float64)
        if data.ndim != 1:
            raise ValueError(f"FlVector needs a one-dimensional sequence, got shape {data.shape}")
        self._data = np.ascontiguousarray(data)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "FlVector":
        # Takes ownership of ``array`` without copying.
        vector = cls.__new__(cls)
        vector._data = np.ascontiguousarray(array, dtype=np.float64)
        return vector

    @classmethod
    def zeros(cls, n: int) -> "FlVector":
        return cls.full(n, 0.0)

    @classmethod
    def full(cls, n: int, x: float) -> "FlVector":
        n = as_natural(n, "n", "make_flvector")
        return cls._wrap(np.full(n, float(x), dtype=np.float64))

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "FlVector":
        return cls(np.asarray(array))

    def __len__(self) -> int:
        return self._data.shape[0]

    def __iter__(self):
        return (float(x) for x in self._data)

    def _check_index(self, index, operation: str) -> int:
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise TypeError(f"{operation}: index must be an integer, got {index!r}")
        if not 0 <= index < len(self):
            raise FlIndexError(
                operation, f"index {index} out of range for length {len(self)}"
            )
        return int(index)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return FlVector._wrap(self._data[index].copy())
        return float(self._data[self._check_index(index, "flvector_ref")])

    def __setitem__(self, index, value: float) -> None:
        self._data[self._check_index(index, "flvector_set")] = float(value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FlVector):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data, equal_nan=True))

    def __repr__(self) -> str:
        return f"FlVector({self.to_list()!r})"

    def to_list(self) -> list[float]:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the underlying buffer."""

        return self._data.copy()

    def copy(self, start: int = 0, end: int | None = None) -> "FlVector":
        """Return a new vector holding ``self[start:end]``."""

        n = len(self)
        end = n if end is None else end
        _check_range("flvector_copy", "vector", n, start, end)
        return FlVector._wrap(self._data[start:end].copy())

    def fill(self, x: float) -> None:
        """Overwrite every element with ``x`` in place."""

        self._data.fill(float(x))


def flvector(*xs: float) -> FlVector:
    return FlVector(xs)


def make_flvector(n: int, x: float = 0.0) -> FlVector:
    return FlVector.full(n, x)


def list_to_flvector(values: Iterable[float]) -> FlVector:
    return FlVector(values)


def flvector_to_list(v: FlVector) -> list[float]:
    return _require(v, "flvector_to_list").to_list()


def _require(v, operation: str) -> FlVector:
    if not isinstance(v, FlVector):
        raise TypeError(f"{operation}: expected FlVector, got {type(v).__name__}")
    return v


def _check_lengths(operation: str, *vectors: FlVector) -> None:
    for v in vectors:
        _require(v, operation)
    lengths = [len(v) for v in vectors]
    if any(length != lengths[0] for length in lengths):
        raise LengthMismatchError(operation, *lengths)


def _check_range(operation: str, what: str, n: int, start, end) -> None:
    for name, value in (("start", start), ("end", end)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"{operation}: {what} {name} must be an integer, got {value!r}")
        if value < 0:
            raise FlIndexError(operation, f"{what} {name} {value} is negative")
        if value > n:
            raise FlIndexError(
                operation, f"{what} {name} {value} exceeds {what} length {n}"
            )
    if end < start:
        raise FlIndexError(operation, f"{what} end {end} is smaller than start {start}")


def _pointwise(operation: str, ufunc: Callable, *vectors: FlVector) -> FlVector:
    _check_lengths(operation, *vectors)
    with np.errstate(all="ignore"):
        result = ufunc(*(v._data for v in vectors))
    return FlVector._wrap(result)


def _compare(operation: str, ufunc: Callable, a: FlVector, b: FlVector) -> np.ndarray:
    _check_lengths(operation, a, b)
    with np.errstate(invalid="ignore"):
        return ufunc(a._data, b._data)


# Unary pointwise operations.


def flvector_round(v: FlVector) -> FlVector:
    """Round to the nearest integer, ties to even."""

    return _pointwise("flvector_round", np.rint, v)


def flvector_floor(v: FlVector) -> FlVector:
    return _pointwise("flvector_floor", np.floor, v)


def flvector_ceiling(v: FlVector) -> FlVector:
    return _pointwise("flvector_ceiling", np.ceil, v)


def flvector_truncate(v: FlVector) -> FlVector:
    return _pointwise("flvector_truncate", np.trunc, v)


def flvector_abs(v: FlVector) -> FlVector:
    return _pointwise("flvector_abs", np.abs, v)


def flvector_sqr(v: FlVector) -> FlVector:
    return _pointwise("flvector_sqr", np.square, v)


def flvector_sqrt(v: FlVector) -> FlVector:
    return _pointwise("flvector_sqrt", np.sqrt, v)


def flvector_log(v: FlVector) -> FlVector:
    return _pointwise("flvector_log", np.log, v)


def flvector_exp(v: FlVector) -> FlVector:
    return _pointwise("flvector_exp", np.exp, v)


def flvector_sin(v: FlVector) -> FlVector:
    return _pointwise("flvector_sin", np.sin, v)


def flvector_cos(v: FlVector) -> FlVector:
    return _pointwise("flvector_cos", np.cos, v)


def flvector_tan(v: FlVector) -> FlVector:
    return _pointwise("flvector_tan", np.tan, v)


def flvector_asin(v: FlVector) -> FlVector:
    return _pointwise("flvector_asin", np.arcsin, v)


def flvector_acos(v: FlVector) -> FlVector:
    return _pointwise("flvector_acos", np.arccos, v)


def flvector_atan(v: FlVector) -> FlVector:
    return _pointwise("flvector_atan", np.arctan, v)


# Binary pointwise operations.


def flvector_add(a: FlVector, b: FlVector) -> FlVector:
    return _pointwise("flvector_add", np.add, a, b)


def flvector_sub(a: FlVector, b: FlVector | None = None) -> FlVector:
    """Pointwise ``a - b``; with a single operand, pointwise negation."""

    if b is None:
        return _pointwise("flvector_sub", np.negative, a)
    return _pointwise("flvector_sub", np.subtract, a, b)


def flvector_mul(a: FlVector, b: FlVector) -> FlVector:
    return _pointwise("flvector_mul", np.multiply, a, b)


def flvector_div(a: FlVector, b: FlVector | None = None) -> FlVector:
    """Pointwise ``a / b``; with a single operand, pointwise reciprocal."""

    if b is None:
        return _pointwise("flvector_div", np.reciprocal, a)
    return _pointwise("flvector_div", np.divide, a, b)


def flvector_expt(a: FlVector, b: FlVector) -> FlVector:
    return _pointwise("flvector_expt", np.power, a, b)


def flvector_min(a: FlVector, b: FlVector) -> FlVector:
    return _pointwise("flvector_min", np.minimum, a, b)


def flvector_max(a: FlVector, b: FlVector) -> FlVector:
    return _pointwise("flvector_max", np.maximum, a, b)


# Pointwise comparisons.


def flvector_eq(a: FlVector, b: FlVector) -> np.ndarray:
    return _compare("flvector_eq", np.equal, a, b)


def flvector_lt(a: FlVector, b: FlVector) -> np.ndarray:
    return _compare("flvector_lt", np.less, a, b)


def flvector_le(a: FlVector, b: FlVector) -> np.ndarray:
    return _compare("flvector_le", np.less_equal, a, b)


def flvector_gt(a: FlVector, b: FlVector) -> np.ndarray:
    return _compare("flvector_gt", np.greater, a, b)


def flvector_ge(a: FlVector, b: FlVector) -> np.ndarray:
    return _compare("flvector_ge", np.greater_equal, a, b)


# Reductions.


def flvector_sum(v: FlVector) -> float:
    """Correctly rounded sum of the elements.

    Non-finite elements, or an exact sum outside the double range, give the
    plain IEEE sum (``inf``, ``-inf`` or ``nan``).
    """

    data = _require(v, "flvector_sum")._data
    if np.all(np.isfinite(data)):
        try:
            return math.fsum(data)
        except OverflowError:
            pass
    with np.errstate(invalid="ignore", over="ignore"):
        return float(np.sum(data))


def flvector_sums(v: FlVector) -> FlVector:
    """Compensated running sums: ``out[i] ~ sum(v[: i + 1])``."""

    return FlVector._wrap(compensated_cumsum(_require(v, "flvector_sums")._data))


def flvector_copy_range(
    dest: FlVector,
    dest_start: int,
    src: FlVector,
    src_start: int = 0,
    src_end: int | None = None,
) -> None:
    """Copy ``src[src_start:src_end]`` into ``dest`` at ``dest_start``.

    Parameters
    ----------
    dest:
        Destination vector, modified in place.
    dest_start:
        First destination index.
    src:
        Source vector; may be ``dest`` itself (overlap is handled).
    src_start, src_end:
        Half-open source range, defaulting to all of ``src``.

    Raises
    ------
    FlIndexError
        If an index is negative or beyond its vector, if
        ``src_end < src_start``, or if ``dest`` has no room for the range.
    """

    operation = "flvector_copy_range"
    _require(dest, operation)
    _require(src, operation)
    src_end = len(src) if src_end is None else src_end

    _check_range(operation, "source", len(src), src_start, src_end)
    _check_range(operation, "destination", len(dest), dest_start, dest_start)
    count = src_end - src_start
    if dest_start + count > len(dest):
        raise FlIndexError(
            operation,
            f"destination of length {len(dest)} has no room for {count} elements "
            f"starting at {dest_start}",
        )

    copy_unchecked(dest._data, int(dest_start), src._data, int(src_start), int(src_end))
