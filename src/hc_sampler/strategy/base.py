"""Base class for selection strategies.

A strategy is a pure function from the number of distinct endpoints in a
pool to the number the selector should probe. Strategies never see the
endpoints themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from hc_sampler.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from hc_sampler.config import HCSamplerConfig


class SelectionStrategy(ABC):
    """Abstract base class for selection strategies.

    Implementations are immutable and hold no per-call state, so a single
    instance can be shared by any number of selectors and threads.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry identifier of the strategy (e.g. ``'ratio'``)."""

    @abstractmethod
    def compute_target_size(self, distinct_count: int) -> int:
        """Return the unclamped number of endpoints this strategy requests.

        Args:
            distinct_count: Number of distinct endpoints in the pool (>= 0).
        """

    @classmethod
    @abstractmethod
    def from_config(cls, config: HCSamplerConfig) -> SelectionStrategy:
        """Build the strategy from the matching config fields."""

    def target_size(self, distinct_count: int) -> int:
        """Return the number of endpoints to select, clamped to ``[0, distinct_count]``.

        Args:
            distinct_count: Number of distinct endpoints in the pool.

        Returns:
            Target selection size ``k`` with ``0 <= k <= distinct_count``.

        Raises:
            InvalidArgumentError: If *distinct_count* is negative.
        """
        if distinct_count < 0:
            raise InvalidArgumentError(f"distinct_count must be >= 0, got {distinct_count}")
        return max(0, min(self.compute_target_size(distinct_count), distinct_count))
