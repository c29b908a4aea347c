"""Exact number theory on Python integers.

Modules, leaves first:

- :mod:`~numcore.number_theory.arithmetic`: gcd, lcm, Bezout coefficients
- :mod:`~numcore.number_theory.modular`: modular inverse, modular contexts, CRT
- :mod:`~numcore.number_theory.primality`: sieve oracle and strong pseudoprime test
- :mod:`~numcore.number_theory.roots`: integer roots and perfect powers
- :mod:`~numcore.number_theory.factorization`: trial division and Pollard's rho
- :mod:`~numcore.number_theory.multiplicative`: totient, Möbius, divisor sums
"""

from numcore.number_theory.arithmetic import (
    bezout,
    bezout_binary,
    coprime,
    divides,
    gcd,
    lcm,
    pairwise_coprime,
)
from numcore.number_theory.factorization import (
    combine_same_base,
    defactorize,
    factorize,
    factorize_large,
    factorize_small,
    pollard,
)
from numcore.number_theory.modular import (
    ModularContext,
    inverse,
    modular_expt,
    solve_chinese,
    with_modulus,
)
from numcore.number_theory.multiplicative import (
    divisor_sum,
    divisors,
    mangoldt_lambda,
    moebius_mu,
    prime_divisors,
    prime_exponents,
    prime_omega,
    quadratic_character,
    quadratic_residue,
    totient,
)
from numcore.number_theory.primality import (
    PrimalityOracle,
    SieveOracle,
    Verdict,
    Witness,
    get_default_oracle,
    is_prime,
    is_strong_pseudoprime,
    next_prime,
    next_primes,
    nth_prime,
    prev_prime,
    prev_primes,
    primes_below,
    random_prime,
    set_default_oracle,
    strong_pseudoprime_explanation,
    strong_pseudoprime_trial,
    strong_pseudoprime_trials,
)
from numcore.number_theory.roots import (
    as_power,
    integer_root,
    integer_root_remainder,
    is_odd_prime_power,
    is_perfect_power,
    max_dividing_power,
    max_dividing_power_naive,
    perfect_power,
    perfect_square,
    prime_power,
    simple_as_power,
)
from numcore.number_theory.sampling import big_random, new_rng, random_integer

__all__ = [
    "ModularContext",
    "PrimalityOracle",
    "SieveOracle",
    "Verdict",
    "Witness",
    "as_power",
    "bezout",
    "bezout_binary",
    "big_random",
    "combine_same_base",
    "coprime",
    "defactorize",
    "divides",
    "divisor_sum",
    "divisors",
    "factorize",
    "factorize_large",
    "factorize_small",
    "gcd",
    "get_default_oracle",
    "integer_root",
    "integer_root_remainder",
    "inverse",
    "is_odd_prime_power",
    "is_perfect_power",
    "is_prime",
    "is_strong_pseudoprime",
    "lcm",
    "mangoldt_lambda",
    "max_dividing_power",
    "max_dividing_power_naive",
    "modular_expt",
    "moebius_mu",
    "new_rng",
    "next_prime",
    "next_primes",
    "nth_prime",
    "pairwise_coprime",
    "perfect_power",
    "perfect_square",
    "pollard",
    "prev_prime",
    "prev_primes",
    "prime_divisors",
    "prime_exponents",
    "prime_omega",
    "prime_power",
    "primes_below",
    "quadratic_character",
    "quadratic_residue",
    "random_integer",
    "random_prime",
    "set_default_oracle",
    "simple_as_power",
    "solve_chinese",
    "strong_pseudoprime_explanation",
    "strong_pseudoprime_trial",
    "strong_pseudoprime_trials",
    "totient",
    "with_modulus",
]
