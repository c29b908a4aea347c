"""Environment-variable helpers for numcore tunables.

These helpers centralize parsing of the ``NUMCORE_*`` variables read by
:meth:`numcore.config.Config.from_env`.

Notes
-----
Invalid inputs fall back to defaults rather than raising, so a stray
variable never breaks an import.
"""

from __future__ import annotations

import os


def parse_int_env(name: str, *, default: int, minimum: int = 1) -> int:
    """Parse an integer environment variable with a lower bound.

    Underscores are accepted as digit separators (``1_000_000``).

    Parameters
    ----------
    name:
        Environment variable name.
    default:
        Default value used when the variable is unset or invalid.
    minimum:
        Lower bound enforced on the returned value.

    Returns
    -------
    int
        Parsed integer value (at least ``minimum``).
    """

    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, value)


def parse_float_env(
    name: str, *, default: float, minimum: float = 0.0, maximum: float = 1.0
) -> float:
    """Parse a float environment variable restricted to an open interval.

    Values outside ``(minimum, maximum)`` as well as NaN are treated as
    invalid and replaced by ``default``.

    Parameters
    ----------
    name:
        Environment variable name.
    default:
        Default value used when the variable is unset or invalid.
    minimum, maximum:
        Exclusive bounds of the accepted range.

    Returns
    -------
    float
        Parsed float value.
    """

    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not minimum < value < maximum:
        return default
    return value
