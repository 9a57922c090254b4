"""Ratio selection strategy.

Probes a fixed fraction of the distinct endpoints, rounding up so that a
non-empty pool always has at least one endpoint checked.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING

from hc_sampler.exceptions import InvalidArgumentError
from hc_sampler.strategy.base import SelectionStrategy
from hc_sampler.strategy.registry import StrategyRegistry

if TYPE_CHECKING:
    from hc_sampler.config import HCSamplerConfig


@StrategyRegistry.register("ratio")
@dataclass(frozen=True, slots=True)
class RatioStrategy(SelectionStrategy):
    """Select ``ceil(ratio * D)`` of ``D`` distinct endpoints.

    Attributes:
        ratio: Fraction of the pool to select, in ``(0.0, 1.0]``.
    """

    ratio: float

    def __post_init__(self) -> None:
        # NaN fails the chained comparison, so it is rejected here too.
        if (
            isinstance(self.ratio, bool)
            or not isinstance(self.ratio, Real)
            or not 0.0 < self.ratio <= 1.0
        ):
            raise InvalidArgumentError(f"ratio must be in (0.0, 1.0], got {self.ratio!r}")

    @property
    def name(self) -> str:
        """Return ``'ratio'``."""
        return "ratio"

    def compute_target_size(self, distinct_count: int) -> int:
        return math.ceil(self.ratio * distinct_count)

    @classmethod
    def from_config(cls, config: HCSamplerConfig) -> RatioStrategy:
        return cls(config.selection_ratio)
