"""Converter configuration loaded from environment variables.

Azure Functions app settings (or ``local.settings.json`` for local dev)
are the source of truth.  Every value has a default, so the converter
runs without any configuration.

``from_env()`` raises ``ConfigValidationError`` if a value is out of
range, catching bad configuration at startup rather than on the first
request.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from lld_converter.core.constants import (
    ALBERTA_LAT_MAX,
    ALBERTA_LAT_MIN,
    ALBERTA_LON_MAX,
    ALBERTA_LON_MIN,
)
from lld_converter.core.exceptions import ConverterError

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigValidationError(ConverterError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")

    @property
    def category(self) -> str:
        return "configuration"


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable converter configuration.

    Attributes:
        bounds_lat_min: Southern edge of the advisory bounding box (degrees).
        bounds_lat_max: Northern edge of the advisory bounding box (degrees).
        bounds_lon_min: Western edge of the advisory bounding box (degrees).
        bounds_lon_max: Eastern edge of the advisory bounding box (degrees).
        log_level: Level applied to the ``lld_converter`` logger.
    """

    bounds_lat_min: float = ALBERTA_LAT_MIN
    bounds_lat_max: float = ALBERTA_LAT_MAX
    bounds_lon_min: float = ALBERTA_LON_MIN
    bounds_lon_max: float = ALBERTA_LON_MAX
    log_level: str = "INFO"

    @property
    def advisory_bbox(self) -> tuple[float, float, float, float]:
        """Advisory box as ``(min_lon, min_lat, max_lon, max_lat)``."""
        return (
            self.bounds_lon_min,
            self.bounds_lat_min,
            self.bounds_lon_max,
            self.bounds_lat_max,
        )

    @classmethod
    def from_env(cls) -> ConverterConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``LLD_BOUNDS_LAT_MIN=abc``).
        """
        config = cls(
            bounds_lat_min=float(os.getenv("LLD_BOUNDS_LAT_MIN", str(ALBERTA_LAT_MIN))),
            bounds_lat_max=float(os.getenv("LLD_BOUNDS_LAT_MAX", str(ALBERTA_LAT_MAX))),
            bounds_lon_min=float(os.getenv("LLD_BOUNDS_LON_MIN", str(ALBERTA_LON_MIN))),
            bounds_lon_max=float(os.getenv("LLD_BOUNDS_LON_MAX", str(ALBERTA_LON_MAX))),
            log_level=os.getenv("LLD_LOG_LEVEL", "INFO").strip().upper(),
        )
        _validate(config)
        return config


def _validate(config: ConverterConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    for key, value in (
        ("LLD_BOUNDS_LAT_MIN", config.bounds_lat_min),
        ("LLD_BOUNDS_LAT_MAX", config.bounds_lat_max),
    ):
        if not -90.0 <= value <= 90.0:
            raise ConfigValidationError(key, value, "must be between -90 and 90 (degrees)")

    for key, value in (
        ("LLD_BOUNDS_LON_MIN", config.bounds_lon_min),
        ("LLD_BOUNDS_LON_MAX", config.bounds_lon_max),
    ):
        if not -180.0 <= value <= 180.0:
            raise ConfigValidationError(key, value, "must be between -180 and 180 (degrees)")

    if config.bounds_lat_min >= config.bounds_lat_max:
        raise ConfigValidationError(
            "LLD_BOUNDS_LAT_MIN",
            config.bounds_lat_min,
            f"must be < LLD_BOUNDS_LAT_MAX ({config.bounds_lat_max})",
        )

    if config.bounds_lon_min >= config.bounds_lon_max:
        raise ConfigValidationError(
            "LLD_BOUNDS_LON_MIN",
            config.bounds_lon_min,
            f"must be < LLD_BOUNDS_LON_MAX ({config.bounds_lon_max})",
        )

    if config.log_level not in VALID_LOG_LEVELS:
        raise ConfigValidationError(
            "LLD_LOG_LEVEL",
            config.log_level,
            f"must be one of {', '.join(sorted(VALID_LOG_LEVELS))}",
        )
