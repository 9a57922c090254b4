"""Data types for the candidate selection subsystem."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

E = TypeVar("E", bound=Hashable)


@dataclass(frozen=True, slots=True)
class SelectionResult(Generic[E]):
    """Result of one candidate selection.

    Attributes:
        selected: Unique endpoints to health-check, in arbitrary order.
        strategy: Name of the strategy that computed the target size.
        pool_size: Number of candidates passed in, duplicates included.
        distinct_count: Number of distinct candidates.
        target_size: Clamped number of endpoints the strategy requested.
        diagnostics: Additional info (whether sampling was needed).
    """

    selected: list[E]
    strategy: str
    pool_size: int
    distinct_count: int
    target_size: int
    diagnostics: dict[str, Any]
