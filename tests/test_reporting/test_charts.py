"""Tests for uav_forecaster.reporting.charts."""

from __future__ import annotations

from uav_forecaster.reporting.charts import build_chart_series


def test_chart_series_is_parallel(mixed_day) -> None:
    series = build_chart_series(mixed_day)
    assert len(series.labels) == 24
    for _, values in series.datasets:
        assert len(values) == 24


def test_chart_series_values(mixed_day) -> None:
    series = build_chart_series(mixed_day)
    assert series.labels[18] == "18:00"
    assert series.datasets.cape[18] == 2200.0
    assert series.datasets.visibility[5] == 1.5
    assert series.datasets.icing_risk[6] == 2
    assert series.datasets.wind_gusts[8] == 9.0


def test_chart_series_preserves_input_order(make_record) -> None:
    records = [make_record(3, temperature=1.0), make_record(7, temperature=2.0)]
    series = build_chart_series(records)
    assert series.labels == ("03:00", "07:00")
    assert series.datasets.temperature == (1.0, 2.0)


def test_chart_series_camel_case_dump(make_record) -> None:
    dumped = build_chart_series([make_record(0)]).model_dump(mode="json", by_alias=True)
    assert set(dumped["datasets"]) == {
        "temperature", "windGusts", "visibility", "precipitation", "cape", "icingRisk",
    }


def test_empty_sequence() -> None:
    series = build_chart_series([])
    assert series.labels == ()
    assert series.datasets.cape == ()
