"""CLI entry-point: Click command and phase orchestration."""

from __future__ import annotations

import dataclasses
import locale
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from tempconv._internal.units import convert_request
from tempconv.cli.args import ParseOutcome, parse_arguments
from tempconv.cli.help import render_help, unknown_flag_message
from tempconv.cli.prompts import Prompter, resolve_request
from tempconv.errors import ConversionError, InputExhaustedError, TemperatureOverflowError
from tempconv.models.config import AppSettings
from tempconv.output.formatter import OUTPUT_FORMATS, OutputFormatter

logger = logging.getLogger(__name__)

COMMAND_NAME = "convert"

EXIT_USER_ERROR = 1
EXIT_UNKNOWN_FLAG = 2
EXIT_INTERNAL_ERROR = 70
EXIT_INTERRUPTED = 130

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Resolved options for one invocation (command line over settings)."""

    output_format: str | None
    verbose: bool
    max_attempts: int | None
    pause: bool
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            self._formatter = OutputFormatter(force_format=self.output_format)
        return self._formatter

    def make_prompter(self) -> Prompter:
        return Prompter(max_attempts=self.max_attempts)


def _configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich; DEBUG when *verbose*."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def _configure_locale() -> None:
    try:
        locale.setlocale(locale.LC_NUMERIC, "")
    except locale.Error:
        logger.warning("Could not apply the environment's numeric locale; using 'C'")


# ---------------------------------------------------------------------------
# Root Click command
# ---------------------------------------------------------------------------


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": [],
    },
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: text)",
)
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    default=None,
    help="Give up after N invalid interactive answers",
)
@click.option("--pause/--no-pause", default=None, help="Wait for a key press before exiting")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    verbose: bool,
    max_attempts: int | None,
    pause: bool | None,
    args: tuple[str, ...],
) -> None:
    """Convert a temperature between Celsius and Fahrenheit."""
    settings = AppSettings()
    app_ctx = AppContext(
        output_format=output_format or settings.output_format,
        verbose=verbose or settings.verbose,
        max_attempts=max_attempts if max_attempts is not None else settings.max_attempts,
        pause=settings.pause_on_exit if pause is None else pause,
    )
    ctx.obj = app_ctx

    _configure_logging(app_ctx.verbose)
    _configure_locale()
    formatter = app_ctx.formatter

    parsed = parse_arguments(args)
    if parsed.outcome is ParseOutcome.HELP:
        formatter.output_text(render_help())
        return
    if parsed.outcome is ParseOutcome.UNKNOWN_FLAG:
        assert parsed.bad_flag is not None
        message = unknown_flag_message(parsed.bad_flag)
        if formatter.format == "json":
            formatter.output_error(code="unknown_flag", message=message, command=COMMAND_NAME)
        else:
            formatter.output_text(render_help(message), err=True)
        ctx.exit(EXIT_UNKNOWN_FLAG)

    try:
        request = resolve_request(parsed, app_ctx.make_prompter())
    except InputExhaustedError as exc:
        formatter.output_error(code="input_exhausted", message=str(exc), command=COMMAND_NAME)
        ctx.exit(EXIT_USER_ERROR)

    try:
        result = convert_request(request)
    except TemperatureOverflowError as exc:
        formatter.output_error(code="out_of_range", message=str(exc), command=COMMAND_NAME)
        ctx.exit(EXIT_USER_ERROR)

    formatter.output_conversion(result, command=COMMAND_NAME)

    if app_ctx.pause:
        click.pause(info="\nPress any key to exit...")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the conversion, and exit with its status."""
    try:
        exit_code = cli(args=argv, standalone_mode=False)
    except click.exceptions.Abort as exc:
        if isinstance(exc.__context__, KeyboardInterrupt):
            raise SystemExit(EXIT_INTERRUPTED) from None
        raise SystemExit(EXIT_USER_ERROR) from None
    except click.exceptions.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except KeyboardInterrupt:
        raise SystemExit(EXIT_INTERRUPTED) from None
    except SystemExit:
        raise
    except Exception as exc:
        app_ctx = _extract_app_ctx()
        formatter = app_ctx.formatter if app_ctx else OutputFormatter()

        if isinstance(exc, ConversionError):
            logger.debug("Internal conversion failure", exc_info=True)
            formatter.output_error(
                code="internal_error",
                message=f"Internal error: {exc}",
                command=COMMAND_NAME,
            )
            raise SystemExit(EXIT_INTERNAL_ERROR) from exc

        formatter.output_error(
            code=type(exc).__name__,
            message=str(exc),
            command=COMMAND_NAME,
        )
        raise SystemExit(EXIT_USER_ERROR) from exc

    if isinstance(exit_code, int) and exit_code:
        raise SystemExit(exit_code)


# ---------------------------------------------------------------------------
# Helpers for error handling
# ---------------------------------------------------------------------------


def _extract_app_ctx() -> AppContext | None:
    """Try to extract AppContext from the current Click context."""
    ctx = click.get_current_context(silent=True)
    while ctx is not None:
        if isinstance(ctx.obj, AppContext):
            return ctx.obj
        ctx = ctx.parent
    return None
