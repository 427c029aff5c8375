"""Pydantic v2 models describing a single temperature conversion."""

from __future__ import annotations

import math
from enum import StrEnum

from pydantic import BaseModel, field_validator, model_validator


class TemperatureUnit(StrEnum):
    """Supported temperature scales, keyed by their one-letter symbol."""

    CELSIUS = "C"
    FAHRENHEIT = "F"

    @property
    def complement(self) -> TemperatureUnit:
        """Return the scale a value in this unit converts to."""
        if self is TemperatureUnit.FAHRENHEIT:
            return TemperatureUnit.CELSIUS
        return TemperatureUnit.FAHRENHEIT

    @property
    def glyph(self) -> str:
        return f"°{self.value}"


_VALID_SYMBOLS = frozenset(u.value for u in TemperatureUnit)


def is_valid_unit_symbol(symbol: str | None) -> bool:
    """Return ``True`` if *symbol* names a supported unit, ignoring case.

    ``None``, the empty string and anything other than ``C``/``F``
    (``"K"``, ``"celsius"``, ``" C"``) are rejected.
    """
    if symbol is None:
        return False
    return symbol.upper() in _VALID_SYMBOLS


class ConversionRequest(BaseModel):
    """A validated source value and the unit it is expressed in."""

    value: float
    unit: TemperatureUnit

    @field_validator("unit", mode="before")
    @classmethod
    def _normalize_unit(cls, v: object) -> object:
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("value")
    @classmethod
    def _require_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("temperature value must be a finite number")
        return v


class ConversionResult(BaseModel):
    """Source and converted values with their units."""

    source_value: float
    source_unit: TemperatureUnit
    converted_value: float
    converted_unit: TemperatureUnit

    @field_validator("source_value", "converted_value")
    @classmethod
    def _require_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("temperature value must be a finite number")
        return v

    @model_validator(mode="after")
    def _check_complement(self) -> ConversionResult:
        if self.converted_unit is not self.source_unit.complement:
            raise ValueError(
                f"converted unit {self.converted_unit.value} is not the complement "
                f"of {self.source_unit.value}"
            )
        return self
