"""Tests for uav_forecaster.reporting.formatters."""

from __future__ import annotations

import datetime as dt

from uav_forecaster.analysis.alerts import build_alerts
from uav_forecaster.analysis.day_parts import compute_daily_period_stats
from uav_forecaster.analysis.summary import compute_daily_summary
from uav_forecaster.analysis.windows import find_dangerous_periods, find_safe_periods
from uav_forecaster.models.forecast import ForecastMetadata
from uav_forecaster.recommendations.composer import compose_flight_recommendation
from uav_forecaster.reporting.formatters import (
    format_alerts,
    format_day_parts,
    format_header,
    format_periods,
    format_recommendation,
    format_summary,
)


def test_header() -> None:
    meta = ForecastMetadata(lat=55.7558, lon=37.6173, date=dt.date(2026, 5, 14), source="f.json")
    text = format_header(meta, 24)
    assert "2026-05-14" in text
    assert "55.7558, 37.6173" in text
    assert "f.json" in text


def test_summary(mixed_day) -> None:
    text = format_summary(compute_daily_summary(mixed_day))
    assert "[SUMMARY]" in text
    assert "conditionally safe" in text


def test_summary_without_data() -> None:
    assert "(no hourly data)" in format_summary(None)


def test_periods(mixed_day) -> None:
    text = format_periods(find_safe_periods(mixed_day), find_dangerous_periods(mixed_day))
    assert "[SAFE WINDOWS]" in text
    assert "[DANGEROUS WINDOWS]" in text
    assert "icing risk, low visibility" in text
    assert "thunderstorm activity" in text


def test_periods_empty() -> None:
    text = format_periods([], [])
    assert text.count("(none)") == 2


def test_day_parts_marks_empty_buckets(make_record) -> None:
    text = format_day_parts(compute_daily_period_stats([make_record(13)]))
    assert text.count("(no data)") == 3
    assert "12-17" in text


def test_day_parts_without_forecast() -> None:
    assert "(no forecast loaded)" in format_day_parts(None)


def test_alerts(make_record) -> None:
    text = format_alerts(build_alerts([make_record(2, wind_gusts=17.0)]))
    assert "[DANGER] Strong wind" in text
    assert "(none)" in format_alerts([])


def test_recommendation_go(calm_day) -> None:
    text = format_recommendation(compose_flight_recommendation(find_safe_periods(calm_day)))
    assert "[GO]" in text
    assert "Total safe hours: 24" in text


def test_recommendation_no_go() -> None:
    text = format_recommendation(compose_flight_recommendation([]))
    assert "[NO-GO]" in text
    assert "consider another day" in text
