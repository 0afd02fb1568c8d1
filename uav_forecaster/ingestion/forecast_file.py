"""
JSON forecast file loader.

Accepted shapes:

    [ {...}, {...} ]                  list of hourly entries
    { "hourly": [ {...}, ... ], ... } object with an ``hourly`` list

Each entry is either a complete ``HourlyRecord`` (it carries
``safetyStatus``) or a raw ``HourlyObservation`` that is passed through
``build_hourly_record()``.  Entries are returned sorted by hour.

All entries are validated before any are returned.  If any entry fails, a
single ``ForecastInputError`` lists the first 10 failures.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from uav_forecaster.config import SafetyConfig
from uav_forecaster.ingestion.record_builder import build_hourly_record
from uav_forecaster.models.hourly import HourlyRecord

logger = logging.getLogger(__name__)

_MAX_ERRORS_SHOWN = 10


class ForecastInputError(ValueError):
    """Raised when a forecast input file cannot be turned into records.

    Attributes:
        path: The offending file.
    """

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"{path}: {detail}")


def parse_hourly_entries(
    entries: list[Any],
    source: Path,
    safety: Optional[SafetyConfig] = None,
) -> list[HourlyRecord]:
    """Validate (and derive where needed) a list of hourly entries."""
    records: list[HourlyRecord] = []
    errors: list[tuple[int, str]] = []

    for i, entry in enumerate(entries):
        try:
            if not isinstance(entry, dict):
                raise ValueError(f"expected an object, got {type(entry).__name__}")
            if "safetyStatus" in entry or "safety_status" in entry:
                records.append(HourlyRecord.model_validate(entry))
            else:
                records.append(build_hourly_record(entry, safety))
        except (ValueError, ValidationError) as exc:
            errors.append((i, str(exc)))

    if errors:
        detail = "\n".join(f"  Entry {idx}: {msg}" for idx, msg in errors[:_MAX_ERRORS_SHOWN])
        suffix = (
            f"\n  … and {len(errors) - _MAX_ERRORS_SHOWN} more"
            if len(errors) > _MAX_ERRORS_SHOWN else ""
        )
        raise ForecastInputError(
            source, f"{len(errors)} entry(ies) failed validation:\n{detail}{suffix}"
        )

    hours = [r.hour for r in records]
    if len(set(hours)) != len(hours):
        raise ForecastInputError(source, "duplicate hour values in hourly entries")

    return sorted(records, key=lambda r: r.hour)


def load_forecast_file(
    path: Path,
    safety: Optional[SafetyConfig] = None,
) -> list[HourlyRecord]:
    """Load hourly records from a JSON file.

    Args:
        path:   Path to the JSON file.
        safety: Derivation thresholds for raw observations.

    Returns:
        Records sorted by hour.

    Raises:
        ForecastInputError: If the file is missing or unreadable (directory,
            permissions, not UTF-8), is not valid JSON, has an unexpected
            top-level shape, or any entry fails validation.
    """
    if not path.exists():
        raise ForecastInputError(path, "file not found")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ForecastInputError(path, f"not valid UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise ForecastInputError(path, f"cannot read file: {exc}") from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ForecastInputError(path, f"invalid JSON: {exc}") from exc

    if isinstance(payload, dict):
        payload = payload.get("hourly")
    if not isinstance(payload, list):
        raise ForecastInputError(
            path, "expected a JSON array or an object with an 'hourly' array"
        )

    if not payload:
        logger.warning("Forecast file has no hourly entries: %s", path)
        return []

    records = parse_hourly_entries(payload, path, safety)
    logger.info("Parsed %d hourly record(s) from %s", len(records), path.name)
    return records
