"""Shared pytest fixtures for hc-sampler tests.

Provides configuration objects, deterministic generator factories and
candidate pools used across multiple test modules.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest

from hc_sampler.config import HCSamplerConfig
from hc_sampler.endpoint import Endpoint


@pytest.fixture
def default_config() -> HCSamplerConfig:
    """Return an HCSamplerConfig with all default values, ignoring any .env file."""
    return HCSamplerConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def silent_config() -> HCSamplerConfig:
    """Return a config with no logging for noise-free tests."""
    return HCSamplerConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> HCSamplerConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return HCSamplerConfig(  # type: ignore[call-arg]
        _env_file=None,
        log_level="full",
        diagnostic_mode=True,
    )


@pytest.fixture
def seeded_rng_factory() -> Callable[[], np.random.Generator]:
    """Return a factory yielding identically seeded generators.

    Two selectors sharing this factory make the same choices for the
    same pool.
    """
    return lambda: np.random.default_rng(seed=42)


def _endpoints(size: int) -> list[Endpoint]:
    return [Endpoint("dummy", 8000 + i) for i in range(size)]


@pytest.fixture
def make_endpoints() -> Callable[[int], list[Endpoint]]:
    """Return a factory building *size* distinct endpoints on consecutive ports."""
    return _endpoints


@pytest.fixture
def ten_endpoints() -> list[Endpoint]:
    """Ten distinct endpoints."""
    return _endpoints(10)


@pytest.fixture
def duplicate_pool() -> list[Endpoint]:
    """Pool ``[foo, foo, bar]`` with two distinct endpoints."""
    return [Endpoint.of("foo"), Endpoint.of("foo"), Endpoint.of("bar")]
