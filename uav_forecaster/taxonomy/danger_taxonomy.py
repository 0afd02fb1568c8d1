"""
Danger taxonomy for hourly flight-safety analysis.

Three closed vocabularies describe the analysis output:
  - ``DangerReason``  — the *why*: which phenomenon makes an hour dangerous?
  - ``DayPart``       — the *when*: which of the four daily buckets?
  - ``BucketSafety``  — the *how bad*: summary safety of a bucket.

``SafetyLevel`` names the ordinal values of ``safetyStatus.level``.  Levels
above ``PROHIBITED`` are still valid input and count as dangerous.

Declaration order of ``DangerReason`` is the canonical order of reasons in
every output, so reason collections compare and serialise deterministically.

This module has NO imports from any other ``uav_forecaster`` package.
"""

from collections.abc import Iterable
from enum import IntEnum, StrEnum


class SafetyLevel(IntEnum):
    """Ordinal hour safety produced by the upstream record builder."""

    SAFE = 0
    CAUTION = 1
    RESTRICTED = 2
    PROHIBITED = 3


DANGER_LEVEL_MIN: int = SafetyLevel.RESTRICTED
"""Hours with ``safetyStatus.level`` at or above this value are dangerous."""


class DangerReason(StrEnum):
    """Named explanation for an hour's danger classification."""

    ICING_RISK = "icing risk"
    WIND_SHEAR = "wind shear"
    STRONG_WIND_GUSTS = "strong wind gusts"
    LOW_VISIBILITY = "low visibility"
    THUNDERSTORM_ACTIVITY = "thunderstorm activity"
    INTENSE_PRECIPITATION = "intense precipitation"


_REASON_ORDER: dict[DangerReason, int] = {r: i for i, r in enumerate(DangerReason)}


def ordered_reasons(reasons: Iterable[DangerReason]) -> tuple[DangerReason, ...]:
    """Deduplicate ``reasons`` and return them in canonical declaration order."""
    return tuple(sorted(set(reasons), key=_REASON_ORDER.__getitem__))


class DayPart(StrEnum):
    """The four fixed daily buckets, in chronological order."""

    NIGHT = "night"
    MORNING = "morning"
    DAY = "day"
    EVENING = "evening"


class BucketSafety(StrEnum):
    """Summary safety of one day-part bucket."""

    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"
