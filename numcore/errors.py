"""Exceptions raised by numcore.

Domain errors are raised immediately to the caller and carry the operation
name together with the offending values. Recoverable "no result" outcomes
(no modular inverse, not a perfect power, ...) are reported with ``None``
instead of an exception.
"""

from __future__ import annotations


class NumcoreError(Exception):
    """Base class of all numcore exceptions."""


class DomainError(NumcoreError, ValueError):
    """An argument lies outside the domain of an operation."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation}: {message}")


class LengthMismatchError(DomainError):
    """Pointwise operands of a vector operation differ in length."""

    def __init__(self, operation: str, *lengths: int):
        self.lengths = tuple(lengths)
        joined = ", ".join(str(length) for length in lengths)
        super().__init__(operation, f"vectors must have the same length, got lengths {joined}")


class FlIndexError(NumcoreError, IndexError):
    """An index or index range does not fit a flonum buffer."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation}: {message}")


class FactorizationError(NumcoreError, RuntimeError):
    """Pollard's rho failed to split a composite within the retry budget."""
