"""
Flight recommendation output model.

``FlightRecommendation`` is the single operator-facing verdict for a day.
When no safe window exists it carries ``alternative`` and leaves the
window-list fields unset; otherwise it carries ``best_period``,
``all_safe_periods`` and ``total_safe_hours``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from uav_forecaster.models.periods import SafePeriod


class FlightRecommendation(BaseModel):
    """Best-window recommendation for one day.

    Attributes:
        recommended:      True when at least one safe window exists.
        message:          Human-readable recommendation text.
        best_period:      Longest safe window (first one on ties), or ``None``.
        all_safe_periods: Every safe window in chronological order.
        total_safe_hours: Sum of all safe-window durations.
        alternative:      Suggested fallback when nothing is recommended.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    recommended: bool
    message: str
    best_period: Optional[SafePeriod] = None
    all_safe_periods: Optional[tuple[SafePeriod, ...]] = None
    total_safe_hours: Optional[int] = None
    alternative: Optional[str] = None

    @field_validator("message")
    @classmethod
    def validate_message_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("message must not be empty.")
        return v.strip()

    @model_validator(mode="after")
    def validate_best_period_consistency(self) -> "FlightRecommendation":
        if self.recommended and self.best_period is None:
            raise ValueError("A positive recommendation requires best_period.")
        if not self.recommended and self.best_period is not None:
            raise ValueError("best_period must be None when nothing is recommended.")
        return self
