"""Plain-text rendering of a conversion result."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tempconv.models.temperature import ConversionResult

# Beyond this magnitude repr() switches to exponent notation; keep it there.
_MAX_PLAIN_INTEGER = 1e16


def format_number(value: float) -> str:
    """Return the shortest round-trip text for *value*.

    Integral values drop the trailing ``.0`` (``100.0`` -> ``"100"``).
    """
    if value.is_integer() and abs(value) < _MAX_PLAIN_INTEGER:
        return str(int(value))
    return repr(value)


def format_conversion(result: ConversionResult) -> str:
    """Return ``"<source>°<S> => <converted>°<T>"``."""
    source = f"{format_number(result.source_value)}{result.source_unit.glyph}"
    converted = f"{format_number(result.converted_value)}{result.converted_unit.glyph}"
    return f"{source} => {converted}"
