from __future__ import annotations

from rich.console import Console

from storage_estimator.domain import ColumnSpec, EstimationResult
from storage_estimator.estimator import estimate
from storage_estimator.reporter import print_estimate, print_types


def _console() -> Console:
    return Console(record=True, width=100, color_system=None)


def test_print_estimate_renders_cards_and_forecast():
    columns = [ColumnSpec.parse("varchar:50"), ColumnSpec.parse("uuid")]
    result = estimate(columns, "00:01:00", None, 100)
    console = _console()

    print_estimate(result, columns, console=console)
    text = console.export_text()

    assert "Total Row Size" in text
    assert "88 bytes" in text
    assert "20 bytes system + 68 bytes data" in text
    assert "Per day (24.0 hrs active)" in text
    assert "Daily" in text and "Monthly" in text and "Yearly" in text
    assert "2 columns configured" in text
    assert "varchar(50), uuid" in text


def test_print_estimate_shows_error_with_zeroed_values():
    console = _console()

    print_estimate(EstimationResult.zeroed("Time must be greater than 0 seconds."), console=console)
    text = console.export_text()

    assert "Time must be greater than 0 seconds." in text
    assert "0 Bytes" in text


def test_print_types_lists_every_type():
    console = _console()

    print_types(console=console)
    text = console.export_text()

    for label in ("Integer", "Big Integer", "UUID", "DateTime", "String", "Text"):
        assert label in text
