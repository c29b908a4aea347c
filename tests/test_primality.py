import threading

import numpy as np
import pytest

import numcore.number_theory.primality as primality
from numcore.errors import DomainError
from numcore.number_theory import (
    SieveOracle,
    Verdict,
    get_default_oracle,
    is_prime,
    is_strong_pseudoprime,
    new_rng,
    next_prime,
    next_primes,
    nth_prime,
    prev_prime,
    prev_primes,
    primes_below,
    random_prime,
    strong_pseudoprime_explanation,
    strong_pseudoprime_trial,
    strong_pseudoprime_trials,
)

CARMICHAEL = [561, 1105, 1729, 2465, 2821, 6601, 8911, 41041, 825265, 3215031751]
LARGE_PRIMES = [2**31 - 1, 2**61 - 1, 2**89 - 1, 1_000_000_007]


def _is_prime_by_trial_division(n: int) -> bool:
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


def test_sieve_matches_trial_division(small_oracle):
    expected = np.array([_is_prime_by_trial_division(n) for n in range(small_oracle.limit)])
    assert not small_oracle.built
    np.testing.assert_array_equal(~small_oracle.table, expected)
    assert small_oracle.built
    assert not small_oracle.table.flags.writeable


def test_oracle_domain(small_oracle):
    assert 0 in small_oracle
    assert small_oracle.limit not in small_oracle
    with pytest.raises(DomainError):
        small_oracle.is_prime(small_oracle.limit)
    with pytest.raises(DomainError):
        SieveOracle(1)


def test_sieve_built_once_under_concurrency(monkeypatch):
    calls = []
    original = primality.sieve_not_prime

    def counting_sieve(limit):
        calls.append(limit)
        return original(limit)

    monkeypatch.setattr(primality, "sieve_not_prime", counting_sieve)
    oracle = SieveOracle(5000)
    barrier = threading.Barrier(8)
    tables = []

    def worker():
        barrier.wait()
        tables.append(oracle.table)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert calls == [5000]
    assert all(table is tables[0] for table in tables)


def test_is_prime_agrees_with_trial_division_above_the_table(small_oracle, rng):
    # Everything from 100 on goes through the strong pseudoprime test.
    oracle = SieveOracle(100)
    for n in range(100, 3000):
        assert is_prime(n, oracle=oracle, rng=rng) == small_oracle.is_prime(n)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, -2, -3, -4, 97, -97, 561])
def test_is_prime_small(n, small_oracle):
    assert is_prime(n, oracle=small_oracle) == _is_prime_by_trial_division(abs(n))


@pytest.mark.parametrize("p", LARGE_PRIMES)
def test_large_primes(p, small_oracle, rng):
    assert is_prime(p, oracle=small_oracle, rng=rng)
    assert not is_prime(p * 3, oracle=small_oracle, rng=rng)
    assert not is_prime(p * p, oracle=small_oracle, rng=rng)


@pytest.mark.parametrize("n", CARMICHAEL)
def test_carmichael_numbers_are_never_very_probably_prime(n, rng):
    for _ in range(20):
        witness = strong_pseudoprime_explanation(n, rng)
        assert witness.verdict in (Verdict.COMPOSITE, Verdict.DIVISOR)
        if witness.verdict is Verdict.DIVISOR:
            assert 1 < witness.divisor < n
            assert n % witness.divisor == 0
        else:
            assert witness.divisor is None


def test_strong_pseudoprime_on_primes(rng):
    assert is_strong_pseudoprime(2**61 - 1, rng)
    assert strong_pseudoprime_explanation(7919, rng).verdict is Verdict.VERY_PROBABLY_PRIME
    assert strong_pseudoprime_trial(5, rng).verdict is Verdict.PROBABLY_PRIME


def test_strong_pseudoprime_trial_domain():
    with pytest.raises(DomainError):
        strong_pseudoprime_trial(3)


@pytest.mark.parametrize(
    "tolerance,trials",
    [(1e-7, 24), (0.5, 1), (0.25, 2), (1e-3, 10)],
)
def test_strong_pseudoprime_trials(tolerance, trials):
    assert strong_pseudoprime_trials(tolerance) == trials


def test_default_trials_follow_config(use_config):
    assert strong_pseudoprime_trials() == 24
    use_config(strong_pseudoprime_tolerance=0.25)
    assert strong_pseudoprime_trials() == 2


def test_next_and_prev_prime(default_oracle):
    assert next_prime(10) == 11
    assert next_prime(0) == 2
    assert next_prime(1) == 2
    assert next_prime(2) == 3
    assert next_prime(-10) == -7
    assert next_prime(-3) == -2
    assert next_prime(-2) == 2
    assert prev_prime(11) == 7
    assert prev_prime(3) == 2
    assert prev_prime(2) == -2
    assert prev_prime(0) == -2
    assert prev_prime(-5) == -7
    assert next_prime(2**61 - 2) == 2**61 - 1


@pytest.mark.parametrize("n", [-50, -7, -1, 0, 1, 2, 3, 50, 9973])
def test_next_and_prev_prime_mirror(n, default_oracle):
    assert next_prime(-n) == -prev_prime(n)


def test_prime_sequences(default_oracle):
    assert next_primes(10, 3) == [11, 13, 17]
    assert prev_primes(10, 3) == [7, 5, 3]
    assert next_primes(10, 0) == []
    assert nth_prime(0) == 2
    assert nth_prime(5) == 13
    assert nth_prime(999) == 7919


def test_primes_below(small_oracle):
    assert primes_below(30, oracle=small_oracle) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert primes_below(2, oracle=small_oracle) == []
    assert len(primes_below(10_000, oracle=small_oracle)) == 1229
    with pytest.raises(DomainError):
        primes_below(10_001, oracle=small_oracle)


def test_random_prime(small_oracle):
    rng = new_rng(0)
    for n in [3, 10, 100, 2**40]:
        p = random_prime(n, oracle=small_oracle, rng=rng)
        assert 2 <= p < n
        assert is_prime(p, oracle=small_oracle, rng=rng)
    with pytest.raises(DomainError):
        random_prime(2)


def test_default_oracle_is_shared(default_oracle):
    assert get_default_oracle() is default_oracle
    assert is_prime(9973)


def test_default_sized_sieve():
    oracle = SieveOracle()
    primes = oracle.primes()
    assert oracle.limit == 1_000_000
    assert len(primes) == 78498
    assert primes[-1] == 999_983
