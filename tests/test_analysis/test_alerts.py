"""Tests for uav_forecaster.analysis.alerts."""

from __future__ import annotations

from uav_forecaster.analysis.alerts import build_alerts


def test_calm_day_has_no_alerts(calm_day) -> None:
    assert build_alerts(calm_day) == []


def test_strong_wind_is_a_danger_alert(make_record) -> None:
    records = [
        make_record(13, wind_gusts=16.0),
        make_record(14, wind_gusts=18.5),
        make_record(15, wind_gusts=15.0),
    ]
    alerts = build_alerts(records)
    assert len(alerts) == 1
    alert = alerts[0]
    assert alert.type == "wind"
    assert alert.level == "danger"
    assert alert.hours == (13, 14)
    assert "18.5 m/s" in alert.message
    assert "13:00-14:00" in alert.message


def test_icing_needs_three_hours(make_record) -> None:
    two = [make_record(h, icing=2) for h in (3, 4)]
    assert build_alerts(two) == []

    three = two + [make_record(9, icing=3)]
    alerts = build_alerts(three)
    assert [a.type for a in alerts] == ["icing"]
    assert alerts[0].level == "warning"
    assert "03:00-09:00" in alerts[0].message


def test_alerts_in_rule_order(make_record) -> None:
    records = [
        make_record(0, precipitation=6.0),
        make_record(1, cape=1600.0),
        make_record(2, visibility=1.0),
        make_record(3, wind_gusts=20.0),
    ]
    alerts = build_alerts(records)
    assert [a.type for a in alerts] == ["wind", "visibility", "thunderstorm", "precipitation"]
    assert alerts[2].title == "Thunderstorm activity"
    assert "1600 J/kg" in alerts[2].message
    assert "6 mm/h" in alerts[3].message
