"""Tests for uav_forecaster.analysis.summary."""

from __future__ import annotations

import pytest

from uav_forecaster.analysis.summary import compute_daily_summary, compute_overall_safety


# ── compute_overall_safety ────────────────────────────────────────────────────


def test_calm_day_is_favourable(calm_day) -> None:
    overall = compute_overall_safety(calm_day)
    assert overall.level == 0
    assert overall.text == "favourable conditions"
    assert overall.rating == 100
    assert overall.safe_hours == 24
    assert overall.safety_percentage == 100


def test_mixed_day_counts(mixed_day) -> None:
    overall = compute_overall_safety(mixed_day)
    assert overall.danger_hours == 5
    assert overall.caution_hours == 2
    assert overall.safe_hours == 17
    assert overall.rating == 100 - 5 * 5 - 2 * 2
    assert overall.level == 2
    assert overall.text == "conditionally safe"
    assert overall.safety_percentage == round(19 / 24 * 100)


@pytest.mark.parametrize(
    "danger,caution,level",
    [
        (9, 0, 3),
        (8, 0, 2),
        (5, 0, 2),
        (4, 7, 1),
        (4, 6, 0),
    ],
)
def test_overall_level_thresholds(make_record, danger, caution, level) -> None:
    records = (
        [make_record(h, level=2) for h in range(danger)]
        + [make_record(danger + h, level=1) for h in range(caution)]
    )
    assert compute_overall_safety(records).level == level


def test_rating_is_clamped_at_zero(make_record) -> None:
    records = [make_record(h, level=3) for h in range(24)]
    overall = compute_overall_safety(records)
    assert overall.rating == 0
    assert overall.safety_percentage == 0


# ── compute_daily_summary ─────────────────────────────────────────────────────


def test_empty_sequence_has_no_summary() -> None:
    assert compute_daily_summary([]) is None


def test_summary_aggregates(make_record) -> None:
    records = [
        make_record(10, temperature=10.0, wind_gusts=4.0, visibility=10.0,
                    precipitation=0.2, cape=100.0),
        make_record(11, level=2, temperature=14.0, wind_gusts=13.0, visibility=2.0,
                    precipitation=1.0, cape=300.0),
        make_record(12, temperature=12.0, wind_gusts=6.0, visibility=7.0,
                    precipitation=0.0, cape=200.0),
    ]
    summary = compute_daily_summary(records)
    assert summary is not None
    assert summary.avg_temperature == 12.0
    assert (summary.min_temperature, summary.max_temperature) == (10.0, 14.0)
    assert summary.avg_wind_gusts == 7.7
    assert summary.max_wind_gusts == 13.0
    assert summary.avg_visibility == 6.3
    assert summary.min_visibility == 2.0
    assert summary.total_precipitation == pytest.approx(1.2)
    assert summary.max_precipitation == 1.0
    assert summary.avg_cape == 200.0
    assert summary.max_cape == 300.0
    assert summary.dangerous_hours_count == 1
    assert summary.dangerous_hours == ("11:00",)


def test_safety_window_spans_first_to_last_safe_hour(mixed_day) -> None:
    summary = compute_daily_summary(mixed_day)
    assert summary.safety_window == "00:00-23:00"


def test_no_safe_hour_has_no_safety_window(make_record) -> None:
    summary = compute_daily_summary([make_record(h, level=1) for h in range(4)])
    assert summary.safety_window is None
    assert summary.dangerous_hours == ()


def test_summary_means_round_halves_up(make_record) -> None:
    records = [
        make_record(10, temperature=12.2, wind_gusts=4.0, cape=100.0),
        make_record(11, temperature=12.3, wind_gusts=5.0, cape=101.0),
    ]
    summary = compute_daily_summary(records)
    assert summary.avg_temperature == 12.3
    assert summary.avg_wind_gusts == 4.5
    assert summary.avg_cape == 101.0


def test_safety_percentage_rounds_halves_up(make_record) -> None:
    records = [make_record(h, level=2 if h < 3 else 0) for h in range(8)]
    assert compute_overall_safety(records).safety_percentage == 63
