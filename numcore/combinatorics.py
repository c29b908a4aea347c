"""Exact factorials, binomials, permutations and multinomials.

Factorials below :attr:`numcore.config.Config.factorial_table_size` are read
from a precomputed table; up to
:attr:`numcore.config.Config.simple_factorial_cutoff` they are accumulated
from the last table entry; beyond that a binary-splitting product keeps the
multiplied operands balanced.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Sequence

from numcore.config import get_config
from numcore.errors import DomainError
from numcore.types import as_natural


@lru_cache(maxsize=None)
def factorial_table(size: int) -> tuple[int, ...]:
    """``(0!, 1!, ..., (size - 1)!)``."""

    table = [1]
    for i in range(1, size):
        table.append(table[-1] * i)
    return tuple(table)


def _stride_product(n: int, stride: int) -> int:
    # n * (n - stride) * (n - 2*stride) * ... over the positive terms.
    # Even- and odd-position terms are both stride-doubled subproducts.
    if n - stride <= 0:
        return n
    return _stride_product(n, 2 * stride) * _stride_product(n - stride, 2 * stride)


def factorial(n: int) -> int:
    """Return ``n!`` exactly."""

    n = as_natural(n, "n", "factorial")
    config = get_config()
    table = factorial_table(config.factorial_table_size)
    if n < len(table):
        return table[n]
    if n < config.simple_factorial_cutoff:
        acc = table[-1]
        for i in range(len(table), n + 1):
            acc *= i
        return acc
    return _stride_product(n, 1)


def _exact_quotient(numerator: int, denominator: int) -> int:
    quotient, remainder = divmod(numerator, denominator)
    assert remainder == 0, f"{numerator} is not divisible by {denominator}"
    return quotient


def binomial(n: int, k: int) -> int:
    """Number of ``k``-subsets of an ``n``-set; 0 when ``k > n``."""

    n = as_natural(n, "n", "binomial")
    k = as_natural(k, "k", "binomial")
    if k > n:
        return 0
    return _exact_quotient(factorial(n), factorial(k) * factorial(n - k))


def permutations(n: int, k: int) -> int:
    """Number of ordered ``k``-selections from an ``n``-set; 0 when ``k > n``."""

    n = as_natural(n, "n", "permutations")
    k = as_natural(k, "k", "permutations")
    if k > n:
        return 0
    return _exact_quotient(factorial(n), factorial(n - k))


def multinomial(n: int, ks: Sequence[int]) -> int:
    """``n! / (k_1! k_2! ...)`` for ``ks`` summing to ``n``.

    Raises
    ------
    DomainError
        If the components do not sum to ``n``.
    """

    n = as_natural(n, "n", "multinomial")
    ks = [as_natural(k, "k", "multinomial") for k in ks]
    if sum(ks) != n:
        raise DomainError("multinomial", f"components {ks} do not sum to {n}")
    return _exact_quotient(factorial(n), math.prod(factorial(k) for k in ks))
