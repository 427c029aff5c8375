from __future__ import annotations

from tempconv.models.config import AppSettings
from tempconv.models.temperature import (
    ConversionRequest,
    ConversionResult,
    TemperatureUnit,
    is_valid_unit_symbol,
)

__all__ = [
    # config
    "AppSettings",
    # temperature
    "ConversionRequest",
    "ConversionResult",
    "TemperatureUnit",
    "is_valid_unit_symbol",
]
