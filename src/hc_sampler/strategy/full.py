"""Strategy that probes every distinct endpoint.

The default for small pools, where sampling saves nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hc_sampler.strategy.base import SelectionStrategy
from hc_sampler.strategy.registry import StrategyRegistry

if TYPE_CHECKING:
    from hc_sampler.config import HCSamplerConfig


@StrategyRegistry.register("all")
@dataclass(frozen=True, slots=True)
class AllStrategy(SelectionStrategy):
    """Select all ``D`` distinct endpoints. Equivalent to ``RatioStrategy(1.0)``."""

    @property
    def name(self) -> str:
        """Return ``'all'``."""
        return "all"

    def compute_target_size(self, distinct_count: int) -> int:
        return distinct_count

    @classmethod
    def from_config(cls, config: HCSamplerConfig) -> AllStrategy:
        return cls()
