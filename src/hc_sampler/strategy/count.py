"""Count selection strategy.

Probes a fixed absolute number of distinct endpoints, or every endpoint when
the pool is smaller than the configured count.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import TYPE_CHECKING

from hc_sampler.exceptions import InvalidArgumentError
from hc_sampler.strategy.base import SelectionStrategy
from hc_sampler.strategy.registry import StrategyRegistry

if TYPE_CHECKING:
    from hc_sampler.config import HCSamplerConfig


@StrategyRegistry.register("count")
@dataclass(frozen=True, slots=True)
class CountStrategy(SelectionStrategy):
    """Select ``min(count, D)`` of ``D`` distinct endpoints.

    Attributes:
        count: Number of endpoints to select (>= 0). Zero disables probing.
    """

    count: int

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, Integral):
            raise InvalidArgumentError(f"count must be an integer, got {self.count!r}")
        if self.count < 0:
            raise InvalidArgumentError(f"count must be >= 0, got {self.count}")

    @property
    def name(self) -> str:
        """Return ``'count'``."""
        return "count"

    def compute_target_size(self, distinct_count: int) -> int:
        return int(self.count)

    @classmethod
    def from_config(cls, config: HCSamplerConfig) -> CountStrategy:
        return cls(config.selection_count)
