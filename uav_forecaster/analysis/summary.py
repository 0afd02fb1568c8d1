"""
Whole-day summary and overall safety rating.

Overall safety
--------------
    rating = clamp(100 - 5 * danger_hours - 2 * caution_hours, 0, 100)

    level 3 "dangerous conditions"            danger_hours  > 8
    level 2 "conditionally safe"              danger_hours  > 4
    level 1 "favourable with restrictions"    caution_hours > 6
    level 0 "favourable conditions"           otherwise

The safety window label spans the first to the last safe hour of the day and
ignores any unsafe hours in between; use ``analysis.windows`` for the actual
contiguous windows. Means and the safety percentage round halves up
(``utils.numeric.round_half_up``).
"""

from __future__ import annotations

import statistics
from collections.abc import Sequence
from typing import Optional

from uav_forecaster.models.hourly import HourlyRecord
from uav_forecaster.models.report import DailySummary, OverallSafety
from uav_forecaster.taxonomy.danger_taxonomy import SafetyLevel
from uav_forecaster.utils.numeric import round_half_up

_OVERALL_TEXT: dict[int, str] = {
    0: "favourable conditions",
    1: "favourable with restrictions",
    2: "conditionally safe",
    3: "dangerous conditions",
}


def compute_overall_safety(records: Sequence[HourlyRecord]) -> OverallSafety:
    """Rate the whole day from its danger and caution hour counts."""
    total = len(records)
    danger = sum(1 for r in records if r.safety_status.is_dangerous)
    caution = sum(1 for r in records if r.safety_status.level == SafetyLevel.CAUTION)

    rating = max(0, min(100, 100 - danger * 5 - caution * 2))

    if danger > 8:
        level = 3
    elif danger > 4:
        level = 2
    elif caution > 6:
        level = 1
    else:
        level = 0

    pct = int(round_half_up((total - danger) / total * 100)) if total else 0
    return OverallSafety(
        level=level,
        text=_OVERALL_TEXT[level],
        rating=rating,
        danger_hours=danger,
        caution_hours=caution,
        safe_hours=total - danger - caution,
        safety_percentage=pct,
    )


def compute_daily_summary(records: Sequence[HourlyRecord]) -> Optional[DailySummary]:
    """Aggregate the whole day; ``None`` for an empty sequence."""
    if not records:
        return None

    temps = [r.temperature for r in records]
    gusts = [r.wind_gusts for r in records]
    vis = [r.visibility for r in records]
    precip = [r.precipitation for r in records]
    cape = [r.cape for r in records]

    safe = [r for r in records if r.safety_status.is_safe]
    dangerous = [r for r in records if r.safety_status.is_dangerous]

    return DailySummary(
        avg_temperature=round_half_up(statistics.fmean(temps), 1),
        min_temperature=min(temps),
        max_temperature=max(temps),
        avg_wind_gusts=round_half_up(statistics.fmean(gusts), 1),
        max_wind_gusts=max(gusts),
        avg_visibility=round_half_up(statistics.fmean(vis), 1),
        min_visibility=min(vis),
        total_precipitation=round_half_up(sum(precip), 1),
        max_precipitation=max(precip),
        avg_cape=round_half_up(statistics.fmean(cape)),
        max_cape=max(cape),
        safety_window=f"{safe[0].time}-{safe[-1].time}" if safe else None,
        dangerous_hours_count=len(dangerous),
        dangerous_hours=tuple(r.time for r in dangerous),
        overall_safety=compute_overall_safety(records),
    )
