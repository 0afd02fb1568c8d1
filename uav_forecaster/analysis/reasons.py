"""
Danger reason classifier.

Maps one ``HourlyRecord`` to the set of phenomena that justify calling it
dangerous, using fixed thresholds from ``ThresholdsConfig``:

    icing_risk.level  >= icing_level_min       -> icing risk
    wind_shear.level  >= wind_shear_level_min  -> wind shear
    wind_gusts        >  max_wind_gusts        -> strong wind gusts
    visibility        <  min_visibility_km     -> low visibility
    cape              >  max_cape              -> thunderstorm activity
    precipitation     >  max_precipitation     -> intense precipitation

The upstream safety level can be dangerous for causes not modelled here, so a
dangerous hour may legitimately yield an empty tuple.
"""

from __future__ import annotations

from typing import Optional

from uav_forecaster.config import ThresholdsConfig
from uav_forecaster.models.hourly import HourlyRecord
from uav_forecaster.taxonomy.danger_taxonomy import DangerReason

_DEFAULT_THRESHOLDS = ThresholdsConfig()


def reasons_for(
    record: HourlyRecord,
    thresholds: Optional[ThresholdsConfig] = None,
) -> tuple[DangerReason, ...]:
    """Return the danger reasons tripped by ``record`` in canonical order."""
    t = thresholds or _DEFAULT_THRESHOLDS
    reasons: list[DangerReason] = []

    if record.icing_risk.level >= t.icing_level_min:
        reasons.append(DangerReason.ICING_RISK)
    if record.wind_shear.level >= t.wind_shear_level_min:
        reasons.append(DangerReason.WIND_SHEAR)
    if record.wind_gusts > t.max_wind_gusts:
        reasons.append(DangerReason.STRONG_WIND_GUSTS)
    if record.visibility < t.min_visibility_km:
        reasons.append(DangerReason.LOW_VISIBILITY)
    if record.cape > t.max_cape:
        reasons.append(DangerReason.THUNDERSTORM_ACTIVITY)
    if record.precipitation > t.max_precipitation:
        reasons.append(DangerReason.INTENSE_PRECIPITATION)

    return tuple(reasons)
