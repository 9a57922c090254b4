"""Diagnostic logging subsystem for hc-sampler.

Provides immutable per-selection records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from hc_sampler.logging.logger import SelectionLogger
from hc_sampler.logging.types import SelectionRecord

__all__ = [
    "SelectionLogger",
    "SelectionRecord",
]
