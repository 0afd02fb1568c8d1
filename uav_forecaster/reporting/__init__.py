"""
uav_forecaster.reporting — Projections of a loaded forecast.

Modules:
  export     — Hourly table rows, CSV rendering and JSON report export.
  charts     — Chart series (labels plus parallel datasets).
  formatters — ASCII terminal formatters for Typer CLI commands.
"""
