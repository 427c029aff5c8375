"""Interactive validation loops for the temperature value and unit.

Each handler first tries the candidate taken from the command line and,
when it is missing or invalid, keeps asking on standard input until a
valid answer arrives.  The only suspension point is the blocking read in
:meth:`Prompter.ask`.
"""

from __future__ import annotations

import locale
import logging
import math
from typing import TYPE_CHECKING

from tempconv.errors import InputExhaustedError
from tempconv.models.temperature import (
    ConversionRequest,
    TemperatureUnit,
    is_valid_unit_symbol,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from tempconv.cli.args import ParsedArguments

logger = logging.getLogger(__name__)

TEMPERATURE_PROMPT = "Base temperature value: "
UNIT_PROMPT = "Base temperature unit (C or F): "

# Consecutive EOF reads after which a prompt loop gives up.
DEFAULT_MAX_EOF = 3


class Prompter:
    """Line reader shared by the validation loops.

    *max_attempts* caps how many invalid answers a single loop accepts
    before giving up with :class:`~tempconv.errors.InputExhaustedError`;
    ``None`` keeps asking forever.  Independently, *max_eof* consecutive
    end-of-file reads end the loop, since a closed stream never recovers.
    """

    def __init__(
        self,
        *,
        max_attempts: int | None = None,
        max_eof: int = DEFAULT_MAX_EOF,
        reader: Callable[[str], str] | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if max_eof < 1:
            raise ValueError("max_eof must be at least 1")
        self.max_attempts = max_attempts
        self.max_eof = max_eof
        self._reader = reader
        self._eof_streak = 0

    def ask(self, prompt: str) -> str | None:
        """Show *prompt* and return the line read, or ``None`` on EOF."""
        read = self._reader or input
        try:
            line = read(prompt)
        except EOFError:
            self._eof_streak += 1
            logger.debug("EOF while reading answer to %r (%d in a row)", prompt, self._eof_streak)
            return None
        self._eof_streak = 0
        return line

    def check_attempts(self, field: str, attempts: int) -> None:
        if self._eof_streak >= self.max_eof:
            raise InputExhaustedError(field, attempts)
        if self.max_attempts is not None and attempts >= self.max_attempts:
            raise InputExhaustedError(field, attempts)


def parse_temperature(text: str | None) -> float | None:
    """Parse *text* as a finite number using the active numeric locale.

    Returns ``None`` for empty, unparsable, NaN or infinite input, and for
    Python digit-group underscores (``1_000``), which are not a locale format.
    """
    if text is None:
        return None
    text = text.strip()
    if not text or "_" in text:
        return None
    try:
        value = locale.atof(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def handle_temperature(candidate: str | None, prompter: Prompter) -> float:
    """Return *candidate* as a float, prompting until a valid number is read."""
    value = parse_temperature(candidate)
    attempts = 0
    while value is None:
        if attempts:
            logger.debug("Rejected temperature input (attempt %d)", attempts)
        prompter.check_attempts("temperature value", attempts)
        value = parse_temperature(prompter.ask(TEMPERATURE_PROMPT))
        attempts += 1
    return value


def handle_unit(candidate: str | None, prompter: Prompter) -> TemperatureUnit:
    """Return *candidate* as a unit, prompting until ``C`` or ``F`` is read.

    EOF and empty lines count as invalid answers.
    """
    symbol = candidate
    attempts = 0
    while not is_valid_unit_symbol(symbol):
        if attempts:
            logger.debug("Rejected unit input %r (attempt %d)", symbol, attempts)
        prompter.check_attempts("temperature unit", attempts)
        line = prompter.ask(UNIT_PROMPT)
        symbol = line.strip().upper() if line is not None else None
        attempts += 1
    assert symbol is not None
    return TemperatureUnit(symbol.upper())


def resolve_request(parsed: ParsedArguments, prompter: Prompter) -> ConversionRequest:
    """Fill in whatever the command line left missing or invalid."""
    value = handle_temperature(parsed.raw_temperature, prompter)
    unit = handle_unit(parsed.raw_unit, prompter)
    return ConversionRequest(value=value, unit=unit)
