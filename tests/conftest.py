"""
Shared pytest fixtures for the UAV flight-window forecaster test suite.

Provides:
  - ``make_record()``: factory for a fully populated ``HourlyRecord`` with
    calm-weather defaults; pass keyword overrides for the fields under test.
  - ``calm_day`` / ``mixed_day``: ready-made 24-hour sequences.
  - ``forecast_file``: a JSON forecast file on disk for CLI / loader tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from uav_forecaster.models.hourly import HourlyRecord, IcingRisk, SafetyStatus, WindShear

_SAFETY_TEXT = {0: "safe", 1: "caution", 2: "restricted", 3: "prohibited"}


# ── Record factory ────────────────────────────────────────────────────────────

def make_record(hour: int, level: int = 0, **overrides: Any) -> HourlyRecord:
    """Build a calm-weather ``HourlyRecord`` for ``hour`` at safety ``level``.

    ``icing`` and ``shear`` keyword shortcuts set the derived levels; any
    other keyword overrides the matching ``HourlyRecord`` field.
    """
    icing = overrides.pop("icing", 0)
    shear = overrides.pop("shear", 0)
    fields: dict[str, Any] = {
        "hour": hour,
        "time": f"{hour:02d}:00",
        "temperature": 15.0,
        "dewpoint": 8.0,
        "humidity": 60.0,
        "wind_speed_10m": 3.0,
        "wind_speed_120m": 5.0,
        "wind_gusts": 5.0,
        "wind_dir_10m_text": "NW",
        "visibility": 10.0,
        "cloudcover": 20.0,
        "precipitation": 0.0,
        "cape": 100.0,
        "icing_risk": IcingRisk(level=icing, text="none" if icing == 0 else "moderate"),
        "wind_shear": WindShear(level=shear, text="low" if shear == 0 else "moderate"),
        "safety_status": SafetyStatus(level=level, text=_SAFETY_TEXT.get(level, "prohibited")),
    }
    fields.update(overrides)
    return HourlyRecord(**fields)


def raw_observation(hour: int, **overrides: Any) -> dict[str, Any]:
    """Upstream-shaped raw observation dict (camelCase keys, no derived fields)."""
    obs: dict[str, Any] = {
        "hour": hour,
        "temperature": 15.0,
        "dewpoint": 8.0,
        "humidity": 60.0,
        "windSpeed10m": 3.0,
        "windSpeed120m": 4.0,
        "windDir10m": 300.0,
        "windDir120m": 310.0,
        "windGusts": 5.0,
        "visibility": 10.0,
        "cloudcover": 20.0,
        "precipitation": 0.0,
        "cape": 100.0,
    }
    obs.update(overrides)
    return obs


# ── Sequences ─────────────────────────────────────────────────────────────────

@pytest.fixture
def calm_day() -> list[HourlyRecord]:
    """24 safe hours."""
    return [make_record(h) for h in range(24)]


@pytest.fixture
def mixed_day() -> list[HourlyRecord]:
    """A day with a foggy icing morning, a safe afternoon and an evening storm.

    00–04  safe
    05–07  restricted: low visibility (05), low visibility + icing (06–07)
    08–09  caution
    10–17  safe
    18     prohibited: thunderstorm activity
    19     restricted: icing only (does not merge with 18)
    20–23  safe
    """
    records: list[HourlyRecord] = []
    for h in range(24):
        if h == 5:
            records.append(make_record(h, level=2, visibility=1.5))
        elif h in (6, 7):
            records.append(make_record(h, level=2, visibility=2.0, icing=2, temperature=1.0))
        elif h in (8, 9):
            records.append(make_record(h, level=1, wind_gusts=9.0))
        elif h == 18:
            records.append(make_record(h, level=3, cape=2200.0))
        elif h == 19:
            records.append(make_record(h, level=2, icing=2, temperature=2.0))
        else:
            records.append(make_record(h))
    return records


@pytest.fixture
def forecast_file(tmp_path: Path, mixed_day: list[HourlyRecord]) -> Path:
    """The ``mixed_day`` sequence written as an upstream JSON file."""
    path = tmp_path / "forecast.json"
    payload = {"hourly": [r.model_dump(by_alias=True) for r in mixed_day]}
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture(name="make_record")
def make_record_fixture():
    """The ``make_record`` factory, for tests that build their own sequences."""
    return make_record


@pytest.fixture(name="raw_observation")
def raw_observation_fixture():
    """The ``raw_observation`` factory."""
    return raw_observation
