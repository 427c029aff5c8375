"""Exception hierarchy for tempconv.

Malformed numbers and unknown unit symbols are never raised: the prompt
loops recover from them locally.  Only conditions that end the program
are modelled here.
"""

from __future__ import annotations


class TempconvError(Exception):
    """Base class for all tempconv errors."""


class InputExhaustedError(TempconvError):
    """Raised when a prompt loop reaches its attempt cap without valid input."""

    def __init__(self, field: str, attempts: int) -> None:
        self.field = field
        self.attempts = attempts
        super().__init__(f"No valid {field} after {attempts} attempt(s).")


class ConversionError(TempconvError):
    """Raised when the converter receives a unit it does not know.

    Upstream validation guarantees a valid unit, so this indicates an
    internal bug rather than bad user input.
    """

    def __init__(self, symbol: object) -> None:
        self.symbol = symbol
        super().__init__(f"Unsupported source unit {symbol!r}")


class TemperatureOverflowError(TempconvError):
    """Raised when a finite input converts to a value outside the float range."""

    def __init__(self, value: float, unit: str) -> None:
        self.value = value
        self.unit = unit
        super().__init__(f"{value!r}°{unit} is too large to convert.")
