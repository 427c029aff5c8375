from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

from tempconv.output.text_output import format_number

if TYPE_CHECKING:
    from rich.console import Console

    from tempconv.models.temperature import ConversionResult


class RichOutput:
    """Rich-based terminal output helpers for *tempconv*."""

    def __init__(self, console: Console) -> None:
        self._con = console

    # ------------------------------------------------------------------
    # Conversion result
    # ------------------------------------------------------------------

    def conversion(self, result: ConversionResult) -> None:
        """Print a two-row table with the source and converted temperatures."""
        table = Table(title="Temperature Conversion")
        table.add_column("", style="bold")
        table.add_column("Value", justify="right")
        table.add_column("Unit")

        table.add_row(
            "Source",
            format_number(result.source_value),
            result.source_unit.glyph,
        )
        table.add_row(
            "Converted",
            f"[cyan]{format_number(result.converted_value)}[/cyan]",
            result.converted_unit.glyph,
        )

        self._con.print(table)

    # ------------------------------------------------------------------
    # Plain messages
    # ------------------------------------------------------------------

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._con.print(f"[bold red]Error:[/bold red] {message}")
