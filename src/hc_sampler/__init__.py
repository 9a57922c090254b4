"""hc-sampler: choose which endpoints of a pool to actively health-check.

Client-side load balancers with large endpoint pools probe only a bounded,
deduplicated random subset of them. This package implements that selection
policy as a pure function from a candidate pool to the subset to probe.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("hc-sampler")
except PackageNotFoundError:
    __version__ = "0.0.0"

from hc_sampler.config import HCSamplerConfig, resolve_config, validate_overrides
from hc_sampler.endpoint import Endpoint
from hc_sampler.exceptions import ConfigValidationError, HCSamplerError, InvalidArgumentError
from hc_sampler.logging import SelectionLogger, SelectionRecord
from hc_sampler.selection import CandidateSelector, SelectionResult
from hc_sampler.strategy import (
    AllStrategy,
    CountStrategy,
    RatioStrategy,
    SelectionStrategy,
    StrategyRegistry,
)

__all__ = [
    "AllStrategy",
    "CandidateSelector",
    "ConfigValidationError",
    "CountStrategy",
    "Endpoint",
    "HCSamplerConfig",
    "HCSamplerError",
    "InvalidArgumentError",
    "RatioStrategy",
    "SelectionLogger",
    "SelectionRecord",
    "SelectionResult",
    "SelectionStrategy",
    "StrategyRegistry",
    "__version__",
    "resolve_config",
    "validate_overrides",
]
