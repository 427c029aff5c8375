"""Pairwise ``flag value`` argument parsing for the conversion flags.

The conversion flags do not follow POSIX conventions: names are matched
case-insensitively with every dash removed (``-T``, ``--Temperature`` and
``temperature`` are equivalent) and each flag always consumes the next
token as its value, even when that token looks like a negative number.
Click cannot express that, so the raw tokens are handed over here.
"""

from __future__ import annotations

import dataclasses
import logging
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

TEMPERATURE_FLAGS = frozenset({"t", "temperature"})
UNIT_FLAGS = frozenset({"u", "unit"})
HELP_FLAGS = frozenset({"h", "help"})


class ParseOutcome(StrEnum):
    """How argument parsing ended."""

    OK = "ok"
    HELP = "help"
    UNKNOWN_FLAG = "unknown_flag"


@dataclasses.dataclass
class ParsedArguments:
    """Raw candidate values collected from the command line.

    Values are unvalidated text; ``None`` means the flag never appeared.
    """

    raw_temperature: str | None = None
    raw_unit: str | None = None
    outcome: ParseOutcome = ParseOutcome.OK
    bad_flag: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is ParseOutcome.OK


def normalize_flag(name: str) -> str:
    """Strip every ``-`` from *name* and lower-case it."""
    return name.replace("-", "").lower()


def iter_pairs(args: Sequence[str]) -> list[tuple[str, str]]:
    """Group *args* into ``(flag, value)`` pairs.

    An odd trailing flag is paired with the empty string.
    """
    pairs: list[tuple[str, str]] = []
    for i in range(0, len(args), 2):
        value = args[i + 1] if i + 1 < len(args) else ""
        pairs.append((args[i], value))
    return pairs


def parse_arguments(args: Sequence[str]) -> ParsedArguments:
    """Walk *args* pairwise and collect the conversion flags.

    Parsing stops at the first help flag (outcome ``HELP``) or the first
    unrecognised flag (outcome ``UNKNOWN_FLAG``, with the normalised name in
    ``bad_flag``).  Later occurrences of a flag override earlier ones.
    """
    parsed = ParsedArguments()
    for raw_name, value in iter_pairs(args):
        name = normalize_flag(raw_name)
        logger.debug("Argument pair %r -> %r = %r", raw_name, name, value)

        if name in TEMPERATURE_FLAGS:
            parsed.raw_temperature = value
        elif name in UNIT_FLAGS:
            parsed.raw_unit = value
        elif name in HELP_FLAGS:
            parsed.outcome = ParseOutcome.HELP
            return parsed
        else:
            logger.debug("Unrecognised flag %r, aborting argument parsing", raw_name)
            parsed.outcome = ParseOutcome.UNKNOWN_FLAG
            parsed.bad_flag = name
            return parsed
    return parsed
