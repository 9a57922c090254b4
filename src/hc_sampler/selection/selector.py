"""Health-check candidate selector.

Deduplicates a candidate pool, asks the configured strategy how many
endpoints to probe, and draws that many uniformly at random without
replacement.

The selector holds no mutable state. Each call obtains its own random
generator from ``rng_factory``, so concurrent callers never share one.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import numpy as np

from hc_sampler.exceptions import ConfigValidationError
from hc_sampler.logging.types import SelectionRecord
from hc_sampler.selection.types import E, SelectionResult
from hc_sampler.strategy import AllStrategy, CountStrategy, RatioStrategy, StrategyRegistry

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from hc_sampler.config import HCSamplerConfig
    from hc_sampler.logging.logger import SelectionLogger
    from hc_sampler.strategy.base import SelectionStrategy


class CandidateSelector:
    """Stateless strategy-driven candidate selector.

    Build one with :meth:`of_ratio`, :meth:`of_count`, :meth:`of_all` or
    :meth:`from_config` and reuse it for every pool change.

    Args:
        strategy: Strategy computing the target size from the distinct count.
        rng_factory: Zero-argument callable returning a fresh
            ``numpy.random.Generator``. Called once per sampling call.
            Defaults to ``np.random.default_rng`` (OS-seeded).
        selection_logger: Optional logger receiving one record per call.
    """

    def __init__(
        self,
        strategy: SelectionStrategy,
        rng_factory: Callable[[], np.random.Generator] | None = None,
        selection_logger: SelectionLogger | None = None,
    ) -> None:
        self._strategy = strategy
        self._rng_factory = rng_factory if rng_factory is not None else np.random.default_rng
        self._logger = selection_logger

    @classmethod
    def of_ratio(
        cls,
        ratio: float,
        rng_factory: Callable[[], np.random.Generator] | None = None,
        selection_logger: SelectionLogger | None = None,
    ) -> CandidateSelector:
        """Selector probing ``ceil(ratio * D)`` distinct endpoints.

        Raises:
            InvalidArgumentError: If *ratio* is not in ``(0.0, 1.0]``.
        """
        return cls(RatioStrategy(ratio), rng_factory, selection_logger)

    @classmethod
    def of_count(
        cls,
        count: int,
        rng_factory: Callable[[], np.random.Generator] | None = None,
        selection_logger: SelectionLogger | None = None,
    ) -> CandidateSelector:
        """Selector probing ``min(count, D)`` distinct endpoints.

        Raises:
            InvalidArgumentError: If *count* is negative.
        """
        return cls(CountStrategy(count), rng_factory, selection_logger)

    @classmethod
    def of_all(
        cls,
        rng_factory: Callable[[], np.random.Generator] | None = None,
        selection_logger: SelectionLogger | None = None,
    ) -> CandidateSelector:
        """Selector probing every distinct endpoint."""
        return cls(AllStrategy(), rng_factory, selection_logger)

    @classmethod
    def from_config(
        cls,
        config: HCSamplerConfig,
        rng_factory: Callable[[], np.random.Generator] | None = None,
        selection_logger: SelectionLogger | None = None,
    ) -> CandidateSelector:
        """Build a selector from configuration.

        Args:
            config: Config naming the strategy and its parameter.
            rng_factory: Optional generator factory, see the class docs.
            selection_logger: Optional diagnostic logger.

        Raises:
            ConfigValidationError: If the strategy name is not registered.
            InvalidArgumentError: If the strategy parameter is out of range.
        """
        try:
            strategy = StrategyRegistry.build(config)
        except KeyError as exc:
            raise ConfigValidationError(str(exc.args[0])) from exc
        return cls(strategy, rng_factory, selection_logger)

    @property
    def strategy(self) -> SelectionStrategy:
        """The configured selection strategy."""
        return self._strategy

    def select(self, candidates: Iterable[E]) -> list[E]:
        """Select the endpoints to health-check from *candidates*.

        Args:
            candidates: Candidate pool. May be empty or contain duplicates.

        Returns:
            Unique endpoints drawn from *candidates*, in arbitrary order.
        """
        return self.select_with_result(candidates).selected

    def select_with_result(self, candidates: Iterable[E]) -> SelectionResult[E]:
        """Select endpoints and report the sizes that drove the choice.

        Pipeline:
            1. Deduplicate by equality (first occurrence wins)
            2. Compute the clamped target size from the strategy
            3. Return everything if the target covers the pool, nothing if
               the target is zero, otherwise sample the target size
               uniformly without replacement

        Args:
            candidates: Candidate pool. May be empty or contain duplicates.

        Returns:
            SelectionResult with the selected endpoints and diagnostics.
        """
        t_start_ns = time.perf_counter_ns()

        pool = list(candidates)
        universe = list(dict.fromkeys(pool))
        distinct_count = len(universe)
        target = self._strategy.target_size(distinct_count)

        if target >= distinct_count:
            selected = universe
            sampled = False
        elif target == 0:
            selected = []
            sampled = False
        else:
            rng = self._rng_factory()
            indices = rng.choice(distinct_count, size=target, replace=False)
            selected = [universe[int(i)] for i in indices]
            sampled = True

        result = SelectionResult(
            selected=selected,
            strategy=self._strategy.name,
            pool_size=len(pool),
            distinct_count=distinct_count,
            target_size=target,
            diagnostics={
                "sampled": sampled,
                "duplicates_dropped": len(pool) - distinct_count,
            },
        )

        if self._logger is not None:
            t_end_ns = time.perf_counter_ns()
            self._logger.log_selection(
                SelectionRecord(
                    timestamp_ns=time.time_ns(),
                    strategy=result.strategy,
                    pool_size=result.pool_size,
                    distinct_count=distinct_count,
                    target_size=target,
                    selected_count=len(selected),
                    selection_ms=(t_end_ns - t_start_ns) / 1_000_000.0,
                )
            )

        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._strategy!r})"
