"""Candidate selection subsystem for hc-sampler.

Deduplicates a candidate pool and samples the strategy's target number of
endpoints uniformly at random without replacement.
"""

from hc_sampler.selection.selector import CandidateSelector
from hc_sampler.selection.types import SelectionResult

__all__ = [
    "CandidateSelector",
    "SelectionResult",
]
