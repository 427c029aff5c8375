from __future__ import annotations

import json
from io import StringIO

import pytest

from tempconv.models.temperature import ConversionResult, TemperatureUnit
from tempconv.output.formatter import OutputFormatter


def _result() -> ConversionResult:
    return ConversionResult(
        source_value=0.0,
        source_unit=TemperatureUnit.CELSIUS,
        converted_value=32.0,
        converted_unit=TemperatureUnit.FAHRENHEIT,
    )


def _make(fmt: str | None) -> tuple[OutputFormatter, StringIO, StringIO]:
    out, err = StringIO(), StringIO()
    return OutputFormatter(stream=out, err_stream=err, force_format=fmt), out, err


class TestOutputFormatter:
    def test_defaults_to_text(self) -> None:
        formatter, out, _ = _make(None)
        assert formatter.format == "text"
        formatter.output_conversion(_result())
        assert out.getvalue() == "0°C => 32°F\n"

    def test_json(self) -> None:
        formatter, out, _ = _make("json")
        formatter.output_conversion(_result(), command="convert")
        assert json.loads(out.getvalue())["data"]["converted_value"] == 32.0

    def test_quiet_writes_nothing(self) -> None:
        formatter, out, _ = _make("quiet")
        formatter.output_conversion(_result())
        assert out.getvalue() == ""

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown output format"):
            OutputFormatter(force_format="xml")

    def test_text_error_goes_to_err_stream(self) -> None:
        formatter, out, err = _make("text")
        formatter.output_error(code="x", message="broken", command="convert")
        assert out.getvalue() == ""
        assert "Error: broken" in err.getvalue()

    def test_json_error_goes_to_stream(self) -> None:
        formatter, out, err = _make("json")
        formatter.output_error(code="x", message="broken", command="convert")
        assert json.loads(out.getvalue())["error"]["code"] == "x"
        assert err.getvalue() == ""

    def test_output_text(self) -> None:
        formatter, out, err = _make("text")
        formatter.output_text("manual")
        formatter.output_text("oops", err=True)
        assert out.getvalue() == "manual\n"
        assert err.getvalue() == "oops\n"
