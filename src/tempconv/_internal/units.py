"""Unit conversion helpers shared across the codebase."""

from __future__ import annotations

import logging
import math

from tempconv.errors import ConversionError, TemperatureOverflowError
from tempconv.models.temperature import ConversionRequest, ConversionResult, TemperatureUnit

logger = logging.getLogger(__name__)


def fahrenheit_to_celsius(f: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (f - 32.0) / 1.8


def celsius_to_fahrenheit(c: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return c * 1.8 + 32.0


def convert(value: float, unit: TemperatureUnit | str) -> float:
    """Convert *value* expressed in *unit* to the complementary unit.

    The symbol always names the scale of the input: ``C`` converts to
    Fahrenheit and ``F`` converts to Celsius.  Any other symbol raises
    :class:`~tempconv.errors.ConversionError`.
    """
    if unit == TemperatureUnit.CELSIUS:
        return celsius_to_fahrenheit(value)
    if unit == TemperatureUnit.FAHRENHEIT:
        return fahrenheit_to_celsius(value)
    raise ConversionError(unit)


def convert_request(request: ConversionRequest) -> ConversionResult:
    """Apply :func:`convert` to a validated request.

    Raises :class:`~tempconv.errors.TemperatureOverflowError` when the
    converted value does not fit in a float (``1e308°C``).
    """
    converted = convert(request.value, request.unit)
    if not math.isfinite(converted):
        raise TemperatureOverflowError(request.value, request.unit.value)
    logger.debug(
        "Converted %r%s -> %r%s",
        request.value,
        request.unit.glyph,
        converted,
        request.unit.complement.glyph,
    )
    return ConversionResult(
        source_value=request.value,
        source_unit=request.unit,
        converted_value=converted,
        converted_unit=request.unit.complement,
    )
