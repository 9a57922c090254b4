"""Configuration system for hc-sampler.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (HC_*) -> .env file -> field defaults.

Per-group overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from hc_sampler.exceptions import ConfigValidationError

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class HCSamplerConfig(BaseSettings):
    """Configuration for hc-sampler.

    Resolution order: init kwargs -> env vars (HC_*) -> .env file -> defaults.

    Range checks on ``selection_ratio`` and ``selection_count`` happen when
    the strategy is built, so a bad value surfaces as
    :class:`~hc_sampler.exceptions.InvalidArgumentError` exactly as it would
    from ``CandidateSelector.of_ratio()`` / ``of_count()``.
    """

    model_config = SettingsConfigDict(
        env_prefix="HC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Selection ---

    selection_strategy: str = Field(
        default="ratio",
        description="Selection strategy: 'ratio', 'count' or 'all'",
    )
    selection_ratio: float = Field(
        default=1.0,
        description="Fraction of distinct endpoints to probe, in (0.0, 1.0]",
    )
    selection_count: int = Field(
        default=0,
        description="Absolute number of distinct endpoints to probe (>= 0)",
    )

    # --- Logging ---

    log_level: str = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all selection records in memory for analysis",
    )


_ALL_FIELDS = frozenset(HCSamplerConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Reject override keys that do not name a config field.

    Args:
        overrides: Mapping of field name to override value.

    Raises:
        ConfigValidationError: If any key is unknown.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            available = ", ".join(sorted(_ALL_FIELDS))
            raise ConfigValidationError(f"Unknown config field: '{key}'. Available: {available}")


def resolve_config(
    defaults: HCSamplerConfig,
    overrides: dict[str, Any] | None,
) -> HCSamplerConfig:
    """Create a new config instance merging defaults with overrides.

    The load-balancing layer uses this to give individual endpoint groups
    their own selection settings on top of the process-wide defaults.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Field overrides, keyed by field name.

    Returns:
        A new HCSamplerConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation; model_validate coerces types.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return HCSamplerConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid config override: {exc}") from exc
