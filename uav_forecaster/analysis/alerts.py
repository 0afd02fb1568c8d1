"""
Weather hazard alerts for the loaded day.

Each rule selects the hours it applies to and, when the selection is large
enough, emits one ``WeatherAlert`` naming the first-to-last time span:

    wind           gusts > 15 m/s                danger
    icing          icing level >= 2, > 2 hours   warning
    visibility     visibility < 2 km             warning
    thunderstorm   CAPE > 1500 J/kg              warning
    precipitation  precipitation > 5 mm/h        warning
"""

from __future__ import annotations

from collections.abc import Sequence

from uav_forecaster.models.hourly import HourlyRecord
from uav_forecaster.models.report import WeatherAlert

ALERT_GUSTS = 15.0
ALERT_ICING_LEVEL = 2
ALERT_ICING_MIN_HOURS = 3
ALERT_VISIBILITY_KM = 2.0
ALERT_CAPE = 1500.0
ALERT_PRECIPITATION = 5.0


def _span(hours: list[HourlyRecord]) -> str:
    return f"{hours[0].time}-{hours[-1].time}"


def _fmt(value: float) -> str:
    return f"{value:g}"


def build_alerts(records: Sequence[HourlyRecord]) -> list[WeatherAlert]:
    """Return the alerts triggered by ``records``, in rule order."""
    alerts: list[WeatherAlert] = []

    windy = [r for r in records if r.wind_gusts > ALERT_GUSTS]
    if windy:
        alerts.append(
            WeatherAlert(
                type="wind",
                level="danger",
                title="Strong wind",
                message=(
                    f"Wind gusts up to {_fmt(max(r.wind_gusts for r in windy))} m/s "
                    f"during {_span(windy)}"
                ),
                hours=tuple(r.hour for r in windy),
            )
        )

    icing = [r for r in records if r.icing_risk.level >= ALERT_ICING_LEVEL]
    if len(icing) >= ALERT_ICING_MIN_HOURS:
        alerts.append(
            WeatherAlert(
                type="icing",
                level="warning",
                title="Icing risk",
                message=f"Elevated icing risk during {_span(icing)}",
                hours=tuple(r.hour for r in icing),
            )
        )

    low_vis = [r for r in records if r.visibility < ALERT_VISIBILITY_KM]
    if low_vis:
        alerts.append(
            WeatherAlert(
                type="visibility",
                level="warning",
                title="Low visibility",
                message=f"Visibility below {_fmt(ALERT_VISIBILITY_KM)} km during {_span(low_vis)}",
                hours=tuple(r.hour for r in low_vis),
            )
        )

    storms = [r for r in records if r.cape > ALERT_CAPE]
    if storms:
        alerts.append(
            WeatherAlert(
                type="thunderstorm",
                level="warning",
                title="Thunderstorm activity",
                message=(
                    f"Elevated thunderstorm activity "
                    f"(CAPE up to {_fmt(max(r.cape for r in storms))} J/kg)"
                ),
                hours=tuple(r.hour for r in storms),
            )
        )

    heavy = [r for r in records if r.precipitation > ALERT_PRECIPITATION]
    if heavy:
        alerts.append(
            WeatherAlert(
                type="precipitation",
                level="warning",
                title="Intense precipitation",
                message=(
                    f"Intense precipitation up to "
                    f"{_fmt(max(r.precipitation for r in heavy))} mm/h"
                ),
                hours=tuple(r.hour for r in heavy),
            )
        )

    return alerts
