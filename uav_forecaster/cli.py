"""
UAV flight-window forecaster — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load the hourly forecast file.
  4. Run the analysis engine.
  5. Report result to stdout (or write files).

Install and run::

    pip install -e .
    uav-forecaster --help
    uav-forecaster validate-config
    uav-forecaster analyze data/forecast.json --date 2026-05-14 --lat 55.7558 --lon 37.6173
    uav-forecaster export-csv data/forecast.json --date 2026-05-14
    uav-forecaster chart-data data/forecast.json --date 2026-05-14 --out charts.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="uav-forecaster",
    help="UAV flight-window forecaster — single-day safety analysis CLI.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from uav_forecaster.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from uav_forecaster.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_engine_or_exit(config, forecast_file: str, date: str, lat: float, lon: float):
    """Read the forecast file into a freshly loaded engine."""
    from pydantic import ValidationError

    from uav_forecaster.engine import HourlyForecastEngine
    from uav_forecaster.ingestion.forecast_file import ForecastInputError, load_forecast_file

    try:
        records = load_forecast_file(Path(forecast_file), config.safety)
    except ForecastInputError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    engine = HourlyForecastEngine(config)
    try:
        engine.load_forecast(records, lat=lat, lon=lon, date=date, source=Path(forecast_file).name)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Invalid forecast metadata: {exc}", err=True)
        raise typer.Exit(code=1)
    return engine


_FILE_ARG = typer.Argument(..., help="Hourly forecast JSON file.")
_DATE_OPT = typer.Option(..., "--date", "-d", help="Forecast date (YYYY-MM-DD).")
_LAT_OPT = typer.Option(0.0, "--lat", help="Latitude of the analysed point.")
_LON_OPT = typer.Option(0.0, "--lon", help="Longitude of the analysed point.")
_CONFIG_OPT = typer.Option(None, "--config", help="Path to TOML config file.")


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = _CONFIG_OPT,
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)
    t = config.thresholds

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Gust threshold:       {t.max_wind_gusts} m/s")
    typer.echo(f"  Visibility threshold: {t.min_visibility_km} km")
    typer.echo(f"  CAPE threshold:       {t.max_cape} J/kg")
    typer.echo(f"  Precip threshold:     {t.max_precipitation} mm/h")
    typer.echo(f"  Short window:         < {config.recommendation.short_window_hours} h")
    typer.echo(f"  Export dir:           {config.export.output_dir}")
    typer.echo(f"  Log level:            {config.logging.level}")
    typer.echo(f"  Debug mode:           {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("analyze")
def analyze(
    forecast_file: str = _FILE_ARG,
    date: str = _DATE_OPT,
    lat: float = _LAT_OPT,
    lon: float = _LON_OPT,
    json_out: Optional[str] = typer.Option(
        None,
        "--json-out",
        help="Also write the full structured report to this JSON file.",
    ),
    config_path: Optional[str] = _CONFIG_OPT,
) -> None:
    """Analyse one day: windows, day parts, alerts and a flight recommendation."""
    from uav_forecaster.reporting.export import export_to_json
    from uav_forecaster.reporting.formatters import (
        format_alerts,
        format_day_parts,
        format_header,
        format_periods,
        format_recommendation,
        format_summary,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    engine = _load_engine_or_exit(config, forecast_file, date, lat, lon)
    forecast = engine.forecast

    typer.echo(format_header(forecast.metadata, len(forecast.hourly)))
    typer.echo(format_summary(engine.get_summary()))
    typer.echo(format_periods(engine.get_safe_periods(), engine.get_dangerous_periods()))
    typer.echo(format_day_parts(engine.get_daily_periods_stats()))
    typer.echo(format_alerts(engine.get_alerts()))
    typer.echo(format_recommendation(engine.get_flight_time_recommendations()))

    if json_out:
        path = export_to_json(engine.build_report(), Path(json_out))
        typer.echo("")
        typer.echo(f"[OK] Report written: {path}")


@app.command("export-csv")
def export_csv(
    forecast_file: str = _FILE_ARG,
    date: str = _DATE_OPT,
    lat: float = _LAT_OPT,
    lon: float = _LON_OPT,
    out_dir: Optional[str] = typer.Option(
        None,
        "--out-dir",
        help="Output directory (default: config.export.output_dir).",
    ),
    filename: Optional[str] = typer.Option(
        None,
        "--filename",
        help="Filename stem; the date and .csv are appended.",
    ),
    config_path: Optional[str] = _CONFIG_OPT,
) -> None:
    """Write the hourly table as a delimited CSV file."""
    from uav_forecaster.reporting.export import write_csv_export

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    engine = _load_engine_or_exit(config, forecast_file, date, lat, lon)

    export = engine.export_to_csv(filename)
    if export is None:
        typer.echo("[ERROR] No forecast loaded; nothing exported.", err=True)
        raise typer.Exit(code=1)

    target = Path(out_dir) if out_dir else Path(config.export.output_dir)
    path = write_csv_export(export, target)
    typer.echo(f"[OK] {export.row_count} row(s) written to {path}")


@app.command("chart-data")
def chart_data(
    forecast_file: str = _FILE_ARG,
    date: str = _DATE_OPT,
    lat: float = _LAT_OPT,
    lon: float = _LON_OPT,
    out: Optional[str] = typer.Option(
        None,
        "--out",
        help="Write the series to this JSON file instead of stdout.",
    ),
    config_path: Optional[str] = _CONFIG_OPT,
) -> None:
    """Emit the chart series (labels plus parallel datasets) as JSON."""
    from uav_forecaster.reporting.export import export_to_json

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    engine = _load_engine_or_exit(config, forecast_file, date, lat, lon)

    series = engine.get_chart_data().model_dump(mode="json", by_alias=True)
    if out:
        path = export_to_json(series, Path(out))
        typer.echo(f"[OK] Chart series written: {path}")
    else:
        typer.echo(json.dumps(series, indent=2))


if __name__ == "__main__":
    app()
