"""Selection strategy subsystem for hc-sampler.

Maps the distinct-endpoint count of a pool to the number of endpoints to
health-check. Supports ratio, count and all strategies.
"""

from hc_sampler.strategy.base import SelectionStrategy
from hc_sampler.strategy.count import CountStrategy
from hc_sampler.strategy.full import AllStrategy
from hc_sampler.strategy.ratio import RatioStrategy
from hc_sampler.strategy.registry import StrategyRegistry

__all__ = [
    "AllStrategy",
    "CountStrategy",
    "RatioStrategy",
    "SelectionStrategy",
    "StrategyRegistry",
]
