import pytest

from numcore.config import Config, set_config
from numcore.number_theory.primality import SieveOracle, set_default_oracle
from numcore.number_theory.sampling import new_rng


@pytest.fixture
def use_config():
    """Install a process-wide config for one test and restore the default afterwards."""

    def _use(**overrides) -> Config:
        config = Config(**overrides)
        set_config(config)
        return config

    yield _use
    set_config(None)


@pytest.fixture
def small_oracle():
    # Keeps the tests from paying for the full default sieve.
    return SieveOracle(10_000)


@pytest.fixture
def rng():
    return new_rng(12345)


@pytest.fixture
def default_oracle(small_oracle):
    set_default_oracle(small_oracle)
    yield small_oracle
    set_default_oracle(None)
