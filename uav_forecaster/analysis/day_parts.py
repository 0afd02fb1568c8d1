"""
Four-bucket daily statistics.

Each record is assigned to the first day part whose inclusive hour range
contains it (night 0–5, morning 6–11, day 12–17, evening 18–23 by default);
an hour outside every configured range falls into ``evening``.

For each non-empty bucket:

    avg_temperature      mean temperature, 1 decimal
    max_wind_gusts       max gusts
    min_visibility       min visibility
    total_precipitation  sum of precipitation
    avg_cape             mean CAPE, 0 decimals
    danger_hours_count   hours with safety level >= 2
    safety_level         danger  if danger_hours_count > members / 2
                         warning if danger_hours_count > 0
                         safe    otherwise

Means are rounded with ``round_half_up`` (halves go up). Empty buckets are
still returned but keep every statistic at ``None``.
"""

from __future__ import annotations

import logging
import statistics
from collections.abc import Sequence
from typing import Optional

from uav_forecaster.config import DayPartsConfig
from uav_forecaster.models.hourly import HourlyRecord
from uav_forecaster.models.periods import DailyPeriodStats, DayPartStats
from uav_forecaster.taxonomy.danger_taxonomy import BucketSafety, DayPart
from uav_forecaster.utils.numeric import round_half_up

logger = logging.getLogger(__name__)

_DEFAULT_DAY_PARTS = DayPartsConfig()


def day_part_for_hour(hour: int, day_parts: Optional[DayPartsConfig] = None) -> DayPart:
    """Return the bucket that ``hour`` belongs to."""
    parts = day_parts or _DEFAULT_DAY_PARTS
    for part in (DayPart.NIGHT, DayPart.MORNING, DayPart.DAY):
        bounds = getattr(parts, part.value)
        if bounds.start <= hour <= bounds.end:
            return part
    return DayPart.EVENING


def compute_daily_period_stats(
    records: Sequence[HourlyRecord],
    day_parts: Optional[DayPartsConfig] = None,
) -> DailyPeriodStats:
    """Partition ``records`` into day parts and summarise each bucket.

    Args:
        records:   Hourly sequence (any order; member order follows input).
        day_parts: Bucket ranges; defaults to ``DayPartsConfig()``.

    Returns:
        ``DailyPeriodStats`` with all four buckets present.
    """
    parts = day_parts or _DEFAULT_DAY_PARTS
    members: dict[DayPart, list[HourlyRecord]] = {p: [] for p in DayPart}
    for rec in records:
        members[day_part_for_hour(rec.hour, parts)].append(rec)

    buckets = {
        part.value: _bucket_stats(part, getattr(parts, part.value), hours)
        for part, hours in members.items()
    }
    logger.debug(
        "Day parts: %s",
        ", ".join(f"{p.value}={len(h)}" for p, h in members.items()),
        extra={
            "bucket_hours": {p.value: [h.hour for h in hs] for p, hs in members.items()},
        },
    )
    return DailyPeriodStats(**buckets)


def classify_bucket_safety(danger_hours: int, member_count: int) -> BucketSafety:
    """Summary safety of a bucket from its dangerous-hour count."""
    if danger_hours > member_count / 2:
        return BucketSafety.DANGER
    if danger_hours > 0:
        return BucketSafety.WARNING
    return BucketSafety.SAFE


def _bucket_stats(part: DayPart, bounds, hours: list[HourlyRecord]) -> DayPartStats:
    if not hours:
        return DayPartStats(part=part, start=bounds.start, end=bounds.end)

    danger_hours = sum(1 for h in hours if h.safety_status.is_dangerous)
    return DayPartStats(
        part=part,
        start=bounds.start,
        end=bounds.end,
        hours=tuple(h.hour for h in hours),
        avg_temperature=round_half_up(statistics.fmean(h.temperature for h in hours), 1),
        max_wind_gusts=max(h.wind_gusts for h in hours),
        min_visibility=min(h.visibility for h in hours),
        total_precipitation=sum(h.precipitation for h in hours),
        avg_cape=round_half_up(statistics.fmean(h.cape for h in hours)),
        safety_level=classify_bucket_safety(danger_hours, len(hours)),
        danger_hours_count=danger_hours,
    )
