"""Value types shared by the number-theory routines.

``Natural`` replaces scattered runtime "is this a natural number" assertions:
arguments are converted once at the entry of each public routine and the
contract is enforced by the constructor.
"""

from __future__ import annotations

import numbers
from typing import NamedTuple

from numcore.errors import DomainError


class Natural(int):
    """A non-negative Python integer.

    Accepts any integral value (``int``, ``numpy.int64``, ...) except ``bool``
    and rejects negatives.
    """

    def __new__(cls, value, name: str = "value", operation: str = "Natural"):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise DomainError(operation, f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise DomainError(operation, f"{name} must be non-negative, got {value}")
        return super().__new__(cls, int(value))


class BaseExponent(NamedTuple):
    """A ``base ** exponent`` pair.

    Used for perfect-power results and for factorization entries.
    """

    base: int
    exponent: int


Factorization = list[BaseExponent]


def as_integer(value, name: str, operation: str) -> int:
    """Return ``value`` as a plain ``int`` or raise :class:`DomainError`."""

    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise DomainError(operation, f"{name} must be an integer, got {value!r}")
    return int(value)


def as_natural(value, name: str, operation: str) -> int:
    """Return ``value`` as a non-negative ``int`` or raise :class:`DomainError`."""

    return int(Natural(value, name, operation))


def as_positive(value, name: str, operation: str) -> int:
    """Return ``value`` as a positive ``int`` or raise :class:`DomainError`."""

    n = as_natural(value, name, operation)
    if n == 0:
        raise DomainError(operation, f"{name} must be positive, got 0")
    return n
