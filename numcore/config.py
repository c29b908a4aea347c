"""Tunable constants of the numerical core.

A :class:`Config` can be built from the defaults, from ``NUMCORE_*``
environment variables, or from a JSON/YAML file. Routines read the active
instance through :func:`get_config` at call time, so swapping it with
:func:`set_config` takes effect immediately (except for the default primality
oracle, whose sieve size is fixed once the table is built).
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import ClassVar

import yaml
from pydantic import BaseModel, ConfigDict, Field

from numcore.env import parse_float_env, parse_int_env

log = logging.getLogger(__name__)


class Config(BaseModel):
    """Numerical-core tunables.

    Parameters
    ----------
    small_prime_limit:
        Size of the compositeness sieve. Primality of smaller integers is a
        table lookup.
    strong_pseudoprime_tolerance:
        Accepted false-positive probability of the repeated strong
        pseudoprime test. The number of trials is ``ceil(log2(1/tolerance))``.
    factorial_table_size:
        Number of precomputed factorials ``0! .. (size-1)!``.
    simple_factorial_cutoff:
        Below this argument factorials are accumulated iteratively from the
        table; above it binary splitting is used.
    factorize_small_threshold:
        Inputs below this value are factorized by trial division.
    pollard_max_retries:
        Number of randomized Pollard's rho attempts per composite before
        giving up.

    Notes
    -----
    Instances are immutable; build a new one and pass it to
    :func:`set_config` to change the active values. Invalid values raise
    :class:`pydantic.ValidationError`, which is a ``ValueError``.
    """

    ENV_PREFIX: ClassVar[str] = "NUMCORE_"

    small_prime_limit: int = Field(default=1_000_000, ge=2)
    strong_pseudoprime_tolerance: float = Field(default=1e-7, gt=0.0, lt=1.0)
    factorial_table_size: int = Field(default=171, ge=1)
    simple_factorial_cutoff: int = Field(default=244, ge=0)
    factorize_small_threshold: int = Field(default=1_000_000, ge=0)
    pollard_max_retries: int = Field(default=64, ge=1)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a config from ``NUMCORE_*`` environment variables.

        Unset or malformed variables keep their defaults.
        """

        prefix = cls.ENV_PREFIX
        defaults = cls()
        return cls(
            small_prime_limit=parse_int_env(
                f"{prefix}SMALL_PRIME_LIMIT", default=defaults.small_prime_limit, minimum=2
            ),
            strong_pseudoprime_tolerance=parse_float_env(
                f"{prefix}PSEUDOPRIME_TOLERANCE",
                default=defaults.strong_pseudoprime_tolerance,
            ),
            factorial_table_size=parse_int_env(
                f"{prefix}FACTORIAL_TABLE_SIZE", default=defaults.factorial_table_size
            ),
            simple_factorial_cutoff=parse_int_env(
                f"{prefix}SIMPLE_FACTORIAL_CUTOFF",
                default=defaults.simple_factorial_cutoff,
                minimum=0,
            ),
            factorize_small_threshold=parse_int_env(
                f"{prefix}FACTORIZE_THRESHOLD",
                default=defaults.factorize_small_threshold,
                minimum=0,
            ),
            pollard_max_retries=parse_int_env(
                f"{prefix}POLLARD_MAX_RETRIES", default=defaults.pollard_max_retries
            ),
        )

    @classmethod
    def from_file(cls, path_config: str | Path) -> "Config":
        """Load a config from a JSON or YAML mapping.

        Parameters
        ----------
        path_config:
            Path to a ``.json``, ``.yaml`` or ``.yml`` file. A top-level
            ``numcore`` section is used when present.

        Returns
        -------
        Config
            The loaded configuration; missing keys keep their defaults.
        """

        _path_config = Path(path_config)
        match _path_config.suffix:
            case ".json":
                with open(_path_config) as data:
                    config = json.load(data)
            case ".yaml" | ".yml":
                with open(_path_config) as data:
                    config = yaml.safe_load(data)
            case _:
                raise ValueError("The provided config file needs to be a json or yaml file!")

        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ValueError(f"Config file {path_config} must contain a mapping")
        if isinstance(config.get("numcore"), dict):
            config = config["numcore"]

        unknown = sorted(set(config) - set(cls.model_fields))
        if unknown:
            log.warning(f"Ignoring unknown config keys in {path_config}: {', '.join(unknown)}")

        log.info(f"Loaded numcore config from {path_config}")
        return cls(**{key: config[key] for key in cls.model_fields if key in config})


_config: Config | None = None
_config_lock = threading.Lock()


def get_config() -> Config:
    """Return the process-wide config, creating it from the environment once."""

    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Replace the process-wide config. ``None`` re-reads the environment lazily."""

    global _config
    with _config_lock:
        _config = config
