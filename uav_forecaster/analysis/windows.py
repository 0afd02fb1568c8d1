"""
Safe and dangerous window aggregation.

Both passes walk the hourly sequence in the order given (ascending hour,
gaps allowed) and close the open window whenever the next selected hour is
not exactly ``end + 1``.

Safe pass
---------
Selects hours with ``safety_status.level == 0``.  Adjacency alone decides
the merge.

Dangerous pass
--------------
Selects hours with ``safety_status.level >= 2``.  An adjacent hour joins the
open window only if its reasons intersect the window's accumulated reasons;
the window then carries the union.  Otherwise the window closes and a new one
is seeded with the new hour's reasons.  Two adjacent hours caused by
unrelated phenomena (icing followed by a thunderstorm) are therefore
reported as separate advisories.  Hours with no modelled reason never merge
with anything.

Severity is the maximum level over every record whose hour lies in
``[start, end]``, scanned from the full sequence rather than the merged
subset.  With the current selection rule the two are the same set.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from uav_forecaster.analysis.reasons import reasons_for
from uav_forecaster.config import ThresholdsConfig
from uav_forecaster.models.hourly import HourlyRecord
from uav_forecaster.models.periods import DangerousPeriod, SafePeriod
from uav_forecaster.taxonomy.danger_taxonomy import DangerReason, ordered_reasons

logger = logging.getLogger(__name__)


def hour_label(hour: int) -> str:
    """Format an hour number as ``HH:00``."""
    return f"{hour:02d}:00"


@dataclass
class _OpenWindow:
    """Window being grown during a merge pass."""

    start: int
    end: int
    reasons: set[DangerReason] = field(default_factory=set)


def find_safe_periods(records: Sequence[HourlyRecord]) -> list[SafePeriod]:
    """Merge safe hours into maximal runs of numerically adjacent hours.

    Args:
        records: Hourly sequence in ascending hour order.

    Returns:
        One ``SafePeriod`` per run, chronological; ``[]`` if no hour is safe.
    """
    windows: list[_OpenWindow] = []
    current: Optional[_OpenWindow] = None

    for rec in records:
        if not rec.safety_status.is_safe:
            continue
        if current is not None and rec.hour == current.end + 1:
            current.end = rec.hour
            continue
        if current is not None:
            windows.append(current)
        current = _OpenWindow(start=rec.hour, end=rec.hour)

    if current is not None:
        windows.append(current)

    periods = [
        SafePeriod(
            start=hour_label(w.start),
            end=hour_label(w.end),
            duration=w.end - w.start + 1,
            hours=tuple(range(w.start, w.end + 1)),
        )
        for w in windows
    ]
    logger.debug(
        "Safe pass: %d window(s)",
        len(periods),
        extra={
            "window_pass": "safe",
            "windows": [f"{p.start}-{p.end}" for p in periods],
        },
    )
    return periods


def find_dangerous_periods(
    records: Sequence[HourlyRecord],
    thresholds: Optional[ThresholdsConfig] = None,
) -> list[DangerousPeriod]:
    """Merge dangerous hours into windows that share at least one reason.

    Args:
        records:    Hourly sequence in ascending hour order.
        thresholds: Reason thresholds; defaults to ``ThresholdsConfig()``.

    Returns:
        One ``DangerousPeriod`` per window, chronological; ``[]`` if no hour
        is dangerous.
    """
    windows: list[_OpenWindow] = []
    current: Optional[_OpenWindow] = None

    for rec in records:
        if not rec.safety_status.is_dangerous:
            continue
        reasons = set(reasons_for(rec, thresholds))
        if (
            current is not None
            and rec.hour == current.end + 1
            and current.reasons & reasons
        ):
            current.end = rec.hour
            current.reasons |= reasons
            continue
        if current is not None:
            windows.append(current)
        current = _OpenWindow(start=rec.hour, end=rec.hour, reasons=reasons)

    if current is not None:
        windows.append(current)

    periods = [
        DangerousPeriod(
            start=hour_label(w.start),
            end=hour_label(w.end),
            duration=w.end - w.start + 1,
            reasons=ordered_reasons(w.reasons),
            severity=_max_level_in_range(records, w.start, w.end),
        )
        for w in windows
    ]
    logger.debug(
        "Dangerous pass: %d window(s)",
        len(periods),
        extra={
            "window_pass": "dangerous",
            "windows": [f"{p.start}-{p.end}" for p in periods],
            "severities": [p.severity for p in periods],
        },
    )
    return periods


def _max_level_in_range(records: Sequence[HourlyRecord], start: int, end: int) -> int:
    """Maximum safety level over all records with ``start <= hour <= end``."""
    return max(
        rec.safety_status.level for rec in records if start <= rec.hour <= end
    )
