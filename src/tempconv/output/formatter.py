from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console

from tempconv.output.json_output import format_json_conversion, format_json_error
from tempconv.output.rich_output import RichOutput
from tempconv.output.text_output import format_conversion

if TYPE_CHECKING:
    from io import TextIOBase

    from tempconv.models.temperature import ConversionResult

OUTPUT_FORMATS = ("text", "json", "rich", "quiet")


class OutputFormatter:
    """Unified output formatter for the conversion result.

    * ``"text"`` (default) prints the single ``a°X => b°Y`` line.
    * ``"json"`` prints a JSON envelope, errors included, to *stream*.
    * ``"rich"`` prints a table through a :class:`rich.console.Console`.
    * ``"quiet"`` keeps *stream* empty; errors still reach stderr.

    Outside JSON mode errors go to *err_stream* (default ``sys.stderr``).
    """

    def __init__(
        self,
        *,
        stream: TextIOBase | Any | None = None,
        err_stream: TextIOBase | Any | None = None,
        force_format: str | None = None,
    ) -> None:
        self._stream = stream or sys.stdout
        self._err_stream = err_stream or sys.stderr
        self._format = force_format or "text"
        if self._format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {self._format!r}")

        self._console = Console(file=self._stream, highlight=False)
        self._err_console = Console(file=self._err_stream, highlight=False)
        self._rich = RichOutput(self._console)

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------

    @property
    def format(self) -> str:  # noqa: A003
        """Return the active output format."""
        return self._format

    def output_conversion(self, result: ConversionResult, *, command: str = "convert") -> None:
        """Emit a conversion *result* using the current format."""
        if self._format == "json":
            print(format_json_conversion(result, command=command), file=self._stream)  # noqa: T201
        elif self._format == "rich":
            self._rich.conversion(result)
        elif self._format == "text":
            print(format_conversion(result), file=self._stream)  # noqa: T201

    def output_text(self, text: str, *, err: bool = False) -> None:
        """Write preformatted *text* verbatim (help manual, usage)."""
        print(text, file=self._err_stream if err else self._stream)  # noqa: T201

    def output_error(self, *, code: str, message: str, command: str) -> None:
        """Emit an error using the current format.

        * **json**: prints :func:`format_json_error` to the output stream.
        * everything else: prints a red ``Error:`` line on stderr.
        """
        if self._format == "json":
            print(  # noqa: T201
                format_json_error(code=code, message=message, command=command),
                file=self._stream,
            )
        else:
            RichOutput(self._err_console).error(message)
