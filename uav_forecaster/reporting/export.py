"""
Tabular export of the hourly sequence.

The table has one row per record, in sequence order, with a fixed column
set.  Values are written exactly as they arrive from upstream (no
re-rounding); whole floats are written without a trailing ``.0``.

``render_csv()`` produces the encoded bytes in memory so the engine stays
free of I/O; ``write_csv_export()`` and ``export_to_json()`` are the only
functions here that touch the filesystem.  Both create parent directories
and return the written ``Path``.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from collections.abc import Sequence
from datetime import date
from pathlib import Path
from typing import Any

from uav_forecaster.models.hourly import HourlyRecord
from uav_forecaster.models.report import CsvExport

logger = logging.getLogger(__name__)

# Column slug -> header text, in output order.
TABLE_COLUMNS: dict[str, str] = {
    "time":            "Time",
    "temperature":     "Temp. (°C)",
    "dewpoint":        "Dew point (°C)",
    "humidity":        "Humidity (%)",
    "wind_speed_10m":  "Wind 10m (m/s)",
    "wind_speed_120m": "Wind 120m (m/s)",
    "wind_gusts":      "Gusts (m/s)",
    "wind_direction":  "Wind dir.",
    "visibility":      "Visibility (km)",
    "cloudcover":      "Cloud cover (%)",
    "precipitation":   "Precipitation (mm)",
    "cape":            "CAPE (J/kg)",
    "icing_risk":      "Icing risk",
    "safety_status":   "Status",
}


def format_value(value: Any) -> str:
    """Render a cell without altering numeric precision."""
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def build_table_rows(records: Sequence[HourlyRecord]) -> list[dict[str, Any]]:
    """Flatten records into one dict per row, keyed by ``TABLE_COLUMNS`` slugs."""
    return [
        {
            "time":            r.time,
            "temperature":     r.temperature,
            "dewpoint":        r.dewpoint,
            "humidity":        r.humidity,
            "wind_speed_10m":  r.wind_speed_10m,
            "wind_speed_120m": r.wind_speed_120m,
            "wind_gusts":      r.wind_gusts,
            "wind_direction":  r.wind_dir_10m_text,
            "visibility":      r.visibility,
            "cloudcover":      r.cloudcover,
            "precipitation":   r.precipitation,
            "cape":            r.cape,
            "icing_risk":      r.icing_risk.text,
            "safety_status":   r.safety_status.text,
        }
        for r in records
    ]


def csv_filename(prefix: str, forecast_date: date) -> str:
    """Return ``{prefix}_{YYYY-MM-DD}.csv``."""
    return f"{prefix}_{forecast_date.isoformat()}.csv"


def render_csv(
    rows: Sequence[dict[str, Any]],
    delimiter: str = ";",
) -> bytes:
    """Encode ``rows`` as UTF-8 CSV with the fixed header row.

    Args:
        rows:      Output of ``build_table_rows()``.
        delimiter: Field separator (``;`` by default).

    Returns:
        Encoded CSV content, ``\\n`` line endings.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, delimiter=delimiter, lineterminator="\n")
    writer.writerow(TABLE_COLUMNS.values())
    for row in rows:
        writer.writerow(format_value(row[col]) for col in TABLE_COLUMNS)
    return buf.getvalue().encode("utf-8")


def build_csv_export(
    records: Sequence[HourlyRecord],
    forecast_date: date,
    filename: str = "hourly_forecast",
    delimiter: str = ";",
) -> CsvExport:
    """Build the in-memory CSV export for one forecast."""
    rows = build_table_rows(records)
    return CsvExport(
        filename=csv_filename(filename, forecast_date),
        content=render_csv(rows, delimiter=delimiter),
        row_count=len(rows),
    )


def write_csv_export(export: CsvExport, output_dir: Path) -> Path:
    """Write ``export`` into ``output_dir`` under its own filename."""
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / export.filename
    path.write_bytes(export.content)
    logger.info("Hourly CSV written: %s (%d rows)", path, export.row_count)
    return path


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(data, indent=2, default=str, ensure_ascii=False), encoding="utf-8"
    )
    return path
