from .combinatorics import binomial, factorial, multinomial, permutations
from .config import Config, get_config, set_config
from .errors import (
    DomainError,
    FactorizationError,
    FlIndexError,
    LengthMismatchError,
    NumcoreError,
)
from .flonum import FlVector, absolute_error, for_flvector, relative_error
from .number_theory import (
    defactorize,
    divisors,
    factorize,
    inverse,
    is_prime,
    next_prime,
    solve_chinese,
    totient,
    with_modulus,
)
from .types import BaseExponent, Natural

__version__ = "0.1.0"
