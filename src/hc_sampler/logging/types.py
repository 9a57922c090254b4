"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRecord:
    """Immutable record of a single ``select()`` call.

    Attributes:
        timestamp_ns: Wall-clock time of selection (nanoseconds since epoch).
        strategy: Name of the strategy that computed the target size.
        pool_size: Number of candidates passed in, duplicates included.
        distinct_count: Number of distinct candidates.
        target_size: Clamped number of endpoints the strategy requested.
        selected_count: Number of endpoints returned.
        selection_ms: Time spent in the selection (milliseconds).
    """

    timestamp_ns: int
    strategy: str
    pool_size: int
    distinct_count: int
    target_size: int
    selected_count: int
    selection_ms: float
