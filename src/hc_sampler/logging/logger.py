"""Diagnostic logger for candidate selection events.

Uses the standard ``logging`` module with the ``"hc_sampler"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hc_sampler.config import HCSamplerConfig
    from hc_sampler.logging.types import SelectionRecord

logger = logging.getLogger("hc_sampler")


class SelectionLogger:
    """Per-selection diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per selection with the pool and target sizes.

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: HCSamplerConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``diagnostic_mode``.
        """
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[SelectionRecord] = []

    def log_selection(self, record: SelectionRecord) -> None:
        """Log a single selection event.

        Args:
            record: Immutable record of the selection.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "strategy=%s pool=%d distinct=%d target=%d selected=%d time=%.3fms",
                record.strategy,
                record.pool_size,
                record.distinct_count,
                record.target_size,
                record.selected_count,
                record.selection_ms,
            )
        elif self._log_level == "full":
            logger.info("selection_record: %s", json.dumps(asdict(record)))

    def get_diagnostic_data(self) -> list[SelectionRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        pool_sizes = [r.pool_size for r in self._records]
        selected = [r.selected_count for r in self._records]
        times = [r.selection_ms for r in self._records]
        probed = sum(selected)
        total_distinct = sum(r.distinct_count for r in self._records)
        return {
            "total_selections": n,
            "mean_pool_size": sum(pool_sizes) / n,
            "mean_selected": probed / n,
            "max_selected": max(selected),
            "probe_fraction": probed / total_distinct if total_distinct else 0.0,
            "mean_selection_ms": sum(times) / n,
            "max_selection_ms": max(times),
        }
