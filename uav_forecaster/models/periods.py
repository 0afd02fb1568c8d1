"""
Derived window and day-part models.

``SafePeriod`` and ``DangerousPeriod`` are the merged contiguous windows
produced by ``analysis.windows``; ``DayPartStats`` / ``DailyPeriodStats`` are
the four-bucket summary produced by ``analysis.day_parts``.

A day-part bucket with no member hours keeps every statistic at ``None`` —
"no data" is distinct from "data showing zero".
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from uav_forecaster.taxonomy.danger_taxonomy import BucketSafety, DangerReason, DayPart

_OUTPUT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class SafePeriod(BaseModel):
    """Maximal run of numerically adjacent safe hours.

    Attributes:
        start:    ``HH:00`` label of the first hour.
        end:      ``HH:00`` label of the last hour.
        duration: ``end - start + 1`` in hours.
        hours:    Hour numbers contained in the window.
    """

    model_config = _OUTPUT_CONFIG

    start: str
    end: str
    duration: int
    hours: tuple[int, ...]


class DangerousPeriod(BaseModel):
    """Run of adjacent dangerous hours whose reasons overlap.

    Attributes:
        start:    ``HH:00`` label of the first hour.
        end:      ``HH:00`` label of the last hour.
        duration: ``end - start + 1`` in hours.
        reasons:  Union of the merged hours' reasons, in canonical order.
        severity: Maximum ``safetyStatus.level`` over the window.
    """

    model_config = _OUTPUT_CONFIG

    start: str
    end: str
    duration: int
    reasons: tuple[DangerReason, ...]
    severity: int


class DayPartStats(BaseModel):
    """Summary statistics for one day-part bucket."""

    model_config = _OUTPUT_CONFIG

    part: DayPart
    start: int
    end: int
    hours: tuple[int, ...] = ()
    avg_temperature: Optional[float] = None
    max_wind_gusts: Optional[float] = None
    min_visibility: Optional[float] = None
    total_precipitation: Optional[float] = None
    avg_cape: Optional[float] = None
    safety_level: Optional[BucketSafety] = None
    danger_hours_count: Optional[int] = None

    @property
    def has_data(self) -> bool:
        return bool(self.hours)


class DailyPeriodStats(BaseModel):
    """The four fixed buckets of one day."""

    model_config = _OUTPUT_CONFIG

    night: DayPartStats
    morning: DayPartStats
    day: DayPartStats
    evening: DayPartStats

    def __getitem__(self, part: DayPart | str) -> DayPartStats:
        return getattr(self, DayPart(part).value)

    def buckets(self) -> list[DayPartStats]:
        """Return the buckets in chronological order."""
        return [self.night, self.morning, self.day, self.evening]
