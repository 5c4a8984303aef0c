"""Tests for converter configuration.

Covers:
- Default values match the Alberta advisory box
- Loading from environment variables
- Type coercion (string env vars → numeric fields)
- Fail-fast range validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from lld_converter.core.config import ConfigValidationError, ConverterConfig


class TestConverterConfigDefaults:
    """Verify default configuration values."""

    def test_default_bounds(self) -> None:
        cfg = ConverterConfig()
        assert cfg.bounds_lat_min == 49.0
        assert cfg.bounds_lat_max == 60.0
        assert cfg.bounds_lon_min == -120.0
        assert cfg.bounds_lon_max == -110.0

    def test_default_log_level(self) -> None:
        cfg = ConverterConfig()
        assert cfg.log_level == "INFO"

    def test_advisory_bbox_order(self) -> None:
        cfg = ConverterConfig()
        assert cfg.advisory_bbox == (-120.0, 49.0, -110.0, 60.0)


class TestConverterConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        """All env vars are read and coerced to correct types."""
        env = {
            "LLD_BOUNDS_LAT_MIN": "48.5",
            "LLD_BOUNDS_LAT_MAX": "61",
            "LLD_BOUNDS_LON_MIN": "-125",
            "LLD_BOUNDS_LON_MAX": "-109.5",
            "LLD_LOG_LEVEL": "debug",
        }
        with patch.dict(os.environ, env, clear=False):
            cfg = ConverterConfig.from_env()

        assert cfg.bounds_lat_min == 48.5
        assert cfg.bounds_lat_max == 61.0
        assert cfg.bounds_lon_min == -125.0
        assert cfg.bounds_lon_max == -109.5
        assert cfg.log_level == "DEBUG"

    def test_defaults_when_env_missing(self) -> None:
        """Missing environment variables fall back to defaults."""
        with patch.dict(os.environ, {}, clear=True):
            cfg = ConverterConfig.from_env()

        assert cfg == ConverterConfig()

    def test_frozen_immutability(self) -> None:
        """ConverterConfig is frozen (immutable)."""
        cfg = ConverterConfig()
        with pytest.raises(AttributeError):
            cfg.log_level = "DEBUG"  # type: ignore[misc]

    def test_unparseable_number_raises_value_error(self) -> None:
        with patch.dict(os.environ, {"LLD_BOUNDS_LAT_MIN": "abc"}, clear=True):
            with pytest.raises(ValueError):
                ConverterConfig.from_env()


class TestConverterConfigValidation:
    """Fail-fast validation of out-of-range values."""

    @pytest.mark.parametrize(
        ("env", "key"),
        [
            ({"LLD_BOUNDS_LAT_MIN": "-91"}, "LLD_BOUNDS_LAT_MIN"),
            ({"LLD_BOUNDS_LAT_MAX": "95"}, "LLD_BOUNDS_LAT_MAX"),
            ({"LLD_BOUNDS_LON_MIN": "-181"}, "LLD_BOUNDS_LON_MIN"),
            ({"LLD_BOUNDS_LON_MAX": "200"}, "LLD_BOUNDS_LON_MAX"),
            ({"LLD_BOUNDS_LAT_MIN": "60", "LLD_BOUNDS_LAT_MAX": "49"}, "LLD_BOUNDS_LAT_MIN"),
            ({"LLD_BOUNDS_LON_MIN": "-100"}, "LLD_BOUNDS_LON_MIN"),
            ({"LLD_LOG_LEVEL": "LOUD"}, "LLD_LOG_LEVEL"),
        ],
    )
    def test_invalid_values(self, env: dict[str, str], key: str) -> None:
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ConfigValidationError) as exc_info:
                ConverterConfig.from_env()
        assert exc_info.value.key == key
        assert exc_info.value.code == "CONFIG_VALIDATION_FAILED"
        assert exc_info.value.category == "configuration"
