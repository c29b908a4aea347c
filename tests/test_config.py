import json
import logging

import pytest
import yaml

from numcore.combinatorics import factorial
from numcore.config import Config, get_config, set_config


def test_defaults():
    config = Config()
    assert config.small_prime_limit == 1_000_000
    assert config.strong_pseudoprime_tolerance == 1e-7
    assert config.factorial_table_size == 171
    assert config.simple_factorial_cutoff == 244
    assert config.factorize_small_threshold == 1_000_000
    assert config.pollard_max_retries == 64


@pytest.mark.parametrize(
    "overrides",
    [
        {"small_prime_limit": 1},
        {"strong_pseudoprime_tolerance": 0.0},
        {"strong_pseudoprime_tolerance": 1.0},
        {"factorial_table_size": 0},
        {"pollard_max_retries": 0},
    ],
)
def test_rejects_invalid_values(overrides):
    with pytest.raises(ValueError):
        Config(**overrides)


def test_from_env(monkeypatch):
    monkeypatch.setenv("NUMCORE_SMALL_PRIME_LIMIT", "5000")
    monkeypatch.setenv("NUMCORE_PSEUDOPRIME_TOLERANCE", "1e-3")
    monkeypatch.setenv("NUMCORE_POLLARD_MAX_RETRIES", "not-a-number")

    config = Config.from_env()

    assert config.small_prime_limit == 5000
    assert config.strong_pseudoprime_tolerance == 1e-3
    assert config.pollard_max_retries == Config().pollard_max_retries
    assert config.factorial_table_size == Config().factorial_table_size


def test_from_yaml_file_with_section(tmp_path, caplog):
    path = tmp_path / "numcore.yaml"
    path.write_text(
        yaml.safe_dump(
            {"numcore": {"factorial_table_size": 20, "pollard_max_retries": 5, "color": "red"}}
        )
    )

    with caplog.at_level(logging.WARNING, logger="numcore.config"):
        config = Config.from_file(path)

    assert config.factorial_table_size == 20
    assert config.pollard_max_retries == 5
    assert config.small_prime_limit == Config().small_prime_limit
    assert "color" in caplog.text


def test_from_json_file(tmp_path):
    path = tmp_path / "numcore.json"
    path.write_text(json.dumps({"factorize_small_threshold": 100}))

    assert Config.from_file(path) == Config(factorize_small_threshold=100)


def test_from_file_rejects_other_formats(tmp_path):
    path = tmp_path / "numcore.toml"
    path.write_text("factorial_table_size = 3\n")
    with pytest.raises(ValueError):
        Config.from_file(path)


def test_from_file_rejects_non_mapping(tmp_path):
    path = tmp_path / "numcore.yml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        Config.from_file(path)


def test_set_config_is_read_at_call_time(use_config):
    use_config(factorial_table_size=5, simple_factorial_cutoff=8)
    assert get_config().factorial_table_size == 5
    assert factorial(4) == 24
    assert factorial(6) == 720
    assert factorial(12) == 479001600


def test_set_config_none_rereads_environment(monkeypatch):
    set_config(Config(pollard_max_retries=3))
    monkeypatch.setenv("NUMCORE_POLLARD_MAX_RETRIES", "9")
    set_config(None)
    try:
        assert get_config().pollard_max_retries == 9
    finally:
        set_config(None)


def test_config_is_immutable():
    config = Config()
    with pytest.raises(ValueError):
        config.pollard_max_retries = 5
