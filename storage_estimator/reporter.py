from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from storage_estimator.domain.catalog import DATA_TYPES, LENGTH_PREFIX_BYTES
from storage_estimator.domain.models import BASE_OVERHEAD_BYTES, ColumnSpec, EstimationResult
from storage_estimator.utils.units import format_bytes, format_count

# Share of a year covered by one day and one month, for the accumulation bar.
_DAY_SHARE = 1 / 365
_MONTH_SHARE = 30 / 365


def _summary_cards(result: EstimationResult) -> Table:
    grid = Table.grid(expand=True, padding=(0, 2))
    grid.add_column(ratio=1)
    grid.add_column(ratio=1)

    row_size = Text.assemble(
        (f"{result.row_size_bytes}", "bold"),
        " bytes\n",
        (f"{BASE_OVERHEAD_BYTES} bytes system + {result.data_bytes} bytes data", "dim"),
    )
    rows = Text.assemble(
        (format_count(result.rows_per_day), "bold"),
        "\n",
        (f"Per day ({result.active_hours_per_day:.1f} hrs active)", "dim"),
    )
    grid.add_row(
        Panel(row_size, title="Total Row Size", border_style="green", box=box.ROUNDED),
        Panel(rows, title="Rows Generated", border_style="blue", box=box.ROUNDED),
    )
    return grid


def _forecast_table(result: EstimationResult, decimals: int) -> Table:
    table = Table(
        title="Storage Forecast",
        box=box.ROUNDED,
        caption=f"{result.column_count} columns configured",
    )
    table.add_column("Period", style="cyan", no_wrap=True)
    table.add_column("Size", justify="right", style="bold green")
    table.add_column("Bytes", justify="right", style="dim")

    for period, value in (
        ("Daily", result.daily_bytes),
        ("Monthly", result.monthly_bytes),
        ("Yearly", result.yearly_bytes),
    ):
        table.add_row(period, format_bytes(value, decimals), format_count(value))
    return table


def _accumulation_bar(result: EstimationResult, decimals: int, width: int = 40) -> Text:
    day_cells = max(1, round(width * _DAY_SHARE))
    month_cells = round(width * _MONTH_SHARE)
    year_cells = max(width - day_cells - month_cells, 0)
    bar = Text("Yearly Accumulation  ", style="bold")
    bar.append("█" * day_cells, style="bright_blue")
    bar.append("█" * month_cells, style="blue")
    bar.append("█" * year_cells, style="magenta")
    bar.append(f"  {format_bytes(result.yearly_bytes, decimals)}")
    return bar


def render_estimate(
    result: EstimationResult,
    columns: Optional[Sequence[ColumnSpec]] = None,
    decimals: int = 2,
) -> Group:
    """
    Build the renderable for an estimate: summary cards, forecast table and
    yearly accumulation bar. A failed estimate still renders its zeroed
    values, preceded by the error message.
    """
    parts = []
    if result.error:
        parts.append(Text(result.error, style="bold red"))
    parts.append(_summary_cards(result))
    parts.append(_forecast_table(result, decimals))
    parts.append(_accumulation_bar(result, decimals))
    if columns:
        parts.append(
            Text(
                "Columns: " + ", ".join(c.label() for c in columns),
                style="dim",
            )
        )
    parts.append(
        Text(
            f"Total size includes ~{BASE_OVERHEAD_BYTES} bytes base overhead (Primary Keys, IDs, "
            f"Timestamps) plus the size of your configured columns. Variable string types "
            f"include +{LENGTH_PREFIX_BYTES} bytes for length prefixes.",
            style="italic dim",
        )
    )
    return Group(*parts)


def print_estimate(
    result: EstimationResult,
    columns: Optional[Sequence[ColumnSpec]] = None,
    decimals: int = 2,
    console: Optional[Console] = None,
) -> None:
    """Render an estimate to the console."""
    console = console or Console()
    console.print(render_estimate(result, columns, decimals))


def print_types(console: Optional[Console] = None) -> None:
    """Render the column type catalog as a rich table."""
    console = console or Console()
    table = Table(title="Supported Column Types", box=box.ROUNDED)
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Label")
    table.add_column("Size (bytes)", justify="right", style="magenta")
    table.add_column("Variable", justify="center")

    for descriptor in DATA_TYPES.values():
        size = (
            f"len + {LENGTH_PREFIX_BYTES}"
            if descriptor.is_variable_length
            else str(descriptor.fixed_size)
        )
        table.add_row(
            descriptor.id.value,
            descriptor.label,
            size,
            "yes" if descriptor.is_variable_length else "no",
        )
    console.print(table)
