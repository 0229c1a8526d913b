from __future__ import annotations

import json
import sys
from typing import List, Optional

import typer
from pydantic import ValidationError

from storage_estimator.config import get_settings
from storage_estimator.domain.models import ActivityWindow, ColumnSpec
from storage_estimator.form import EstimatorForm
from storage_estimator.reporter import print_estimate, print_types
from storage_estimator.utils.logging import configure_logging
from storage_estimator.utils.units import format_bytes

app = typer.Typer(help="SQL Storage Estimator CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"agents={settings.agents} repeat={settings.repeat_time} "
        f"work_hours={settings.work_start}-{settings.work_end} | "
        f"columns={settings.column_count}x{settings.default_column_type}"
        f"({settings.default_column_length}) | log_level={settings.log_level}"
    )


@app.command()
def types() -> None:
    """
    List supported column types and their sizes.
    """
    print_types()


def _parse_columns(tokens: List[str]) -> List[ColumnSpec]:
    columns: List[ColumnSpec] = []
    for token in tokens:
        try:
            columns.append(ColumnSpec.parse(token))
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--column") from None
    return columns


def _parse_window(value: str) -> ActivityWindow:
    try:
        return ActivityWindow.parse(value)
    except (ValidationError, ValueError) as exc:
        raise typer.BadParameter(
            f"Invalid work hours '{value}': expected HH:MM-HH:MM", param_hint="--work-hours"
        ) from exc


@app.command()
def estimate(
    agents: Optional[int] = typer.Option(
        None,
        "--agents",
        "-a",
        help="Number of agents writing rows (default from settings).",
    ),
    repeat: Optional[str] = typer.Option(
        None,
        "--repeat",
        "-r",
        help="Repeat time per agent as HH:MM:SS (default from settings).",
    ),
    work_hours: Optional[str] = typer.Option(
        None,
        "--work-hours",
        "-w",
        help="Operational hours as HH:MM-HH:MM. Omit for 24h activity.",
    ),
    column: Optional[List[str]] = typer.Option(
        None,
        "--column",
        "-c",
        help="Column as TYPE[:LENGTH], repeatable (e.g. -c uuid -c varchar:50).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the result as JSON."),
) -> None:
    """
    Estimate row size and storage growth for a table written by agents.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    form = EstimatorForm.from_settings(settings)
    if agents is not None:
        form.set_agents(agents)
    if repeat is not None:
        form.set_repeat_time(repeat)
    if work_hours is not None:
        window = _parse_window(work_hours)
        form.set_work_hours(True, window.start.strftime("%H:%M"), window.end.strftime("%H:%M"))
    if column:
        form.columns = _parse_columns(column)

    result = form.calculate()

    if as_json:
        payload = result.model_dump()
        payload["formatted"] = {
            "daily": format_bytes(result.daily_bytes, settings.byte_decimals),
            "monthly": format_bytes(result.monthly_bytes, settings.byte_decimals),
            "yearly": format_bytes(result.yearly_bytes, settings.byte_decimals),
        }
        typer.echo(json.dumps(payload, indent=2))
    else:
        print_estimate(result, form.columns, decimals=settings.byte_decimals)

    if not result.ok:
        raise typer.Exit(code=1)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
