"""Tests for hc_sampler.config.

Covers:
- Default values
- Environment variable loading (HC_* prefix)
- resolve_config merge logic and type coercion
- Unknown override keys and bad values raise ConfigValidationError
"""

from __future__ import annotations

import pytest

from hc_sampler.config import HCSamplerConfig, resolve_config, validate_overrides
from hc_sampler.exceptions import ConfigValidationError


class TestDefaults:
    def test_selection_defaults(self, default_config: HCSamplerConfig) -> None:
        assert default_config.selection_strategy == "ratio"
        assert default_config.selection_ratio == 1.0
        assert default_config.selection_count == 0

    def test_logging_defaults(self, default_config: HCSamplerConfig) -> None:
        assert default_config.log_level == "summary"
        assert default_config.diagnostic_mode is False


class TestEnvironment:
    def test_env_vars_loaded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HC_SELECTION_STRATEGY", "count")
        monkeypatch.setenv("HC_SELECTION_COUNT", "7")
        config = HCSamplerConfig(_env_file=None)  # type: ignore[call-arg]
        assert config.selection_strategy == "count"
        assert config.selection_count == 7

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HC_SELECTION_RATIO", "0.2")
        config = HCSamplerConfig(_env_file=None, selection_ratio=0.6)  # type: ignore[call-arg]
        assert config.selection_ratio == 0.6

    def test_unprefixed_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SELECTION_COUNT", "9")
        config = HCSamplerConfig(_env_file=None)  # type: ignore[call-arg]
        assert config.selection_count == 0


class TestResolveConfig:
    def test_no_overrides_returns_defaults(self, default_config: HCSamplerConfig) -> None:
        assert resolve_config(default_config, None) is default_config
        assert resolve_config(default_config, {}) is default_config

    def test_overrides_applied(self, default_config: HCSamplerConfig) -> None:
        resolved = resolve_config(
            default_config, {"selection_strategy": "count", "selection_count": 3}
        )
        assert resolved.selection_strategy == "count"
        assert resolved.selection_count == 3
        assert default_config.selection_strategy == "ratio"

    def test_type_coercion(self, default_config: HCSamplerConfig) -> None:
        resolved = resolve_config(default_config, {"selection_count": "12"})
        assert resolved.selection_count == 12

    def test_unknown_key_rejected(self, default_config: HCSamplerConfig) -> None:
        with pytest.raises(ConfigValidationError, match="Unknown config field"):
            resolve_config(default_config, {"selection_weight": 2})

    def test_bad_value_rejected(self, default_config: HCSamplerConfig) -> None:
        with pytest.raises(ConfigValidationError, match="Invalid config override"):
            resolve_config(default_config, {"selection_count": "many"})


class TestValidateOverrides:
    def test_known_keys_pass(self) -> None:
        validate_overrides({"selection_ratio": 0.5, "log_level": "none"})

    def test_unknown_key_lists_fields(self) -> None:
        with pytest.raises(ConfigValidationError, match="selection_ratio"):
            validate_overrides({"bogus": 1})
