"""Usage manual shown for ``-h``/``--help`` and after an unrecognised flag."""

from __future__ import annotations

PROGRAM_NAME = "tempconv"

MANUAL = f"""\
NAME
{PROGRAM_NAME} - temperature converter

SYNOPSIS
{PROGRAM_NAME} [OPTIONS...]

DESCRIPTION
Converts a temperature to °C when given in °F, and vice versa.
Missing or invalid values are asked for interactively.

OPTIONS
-h, --help           Print this manual and exit.
-t, --temperature    Temperature value to convert.
-u, --unit           Unit of the given temperature (C for Celsius or F for Fahrenheit).
--format FORMAT      Output format: text, json, rich or quiet (default: text).
--max-attempts N     Give up after N invalid interactive answers.
--pause/--no-pause   Wait for Enter before exiting.
--verbose            Enable verbose logging on stderr.
"""


def render_help(prepend: str | None = None) -> str:
    """Return the manual, optionally preceded by *prepend*."""
    if prepend:
        return f"{prepend}\n\n{MANUAL}"
    return MANUAL


def unknown_flag_message(flag: str) -> str:
    return f"Error: unrecognized option '{flag}'"
