"""
Flight recommendation composer.

Selection rule
--------------
The best window is the safe window with the longest ``duration``.  On ties the
earliest window wins (a stable max-reduce over the chronological list), so
the recommendation never depends on anything but the window order.

A window shorter than ``short_window_hours`` (3 by default) is still
recommended, but the message gains a caution to plan a time margin.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from uav_forecaster.config import RecommendationConfig
from uav_forecaster.models.periods import SafePeriod
from uav_forecaster.models.recommendation import FlightRecommendation

logger = logging.getLogger(__name__)

NO_WINDOW_MESSAGE = "no safe window exists for the day"
NO_WINDOW_ALTERNATIVE = "consider another day"
SHORT_WINDOW_CAUTION = "The window is short, plan the flight with a time margin."

_DEFAULT_RECOMMENDATION = RecommendationConfig()


def select_best_period(safe_periods: Sequence[SafePeriod]) -> Optional[SafePeriod]:
    """Return the longest safe window, first occurrence on ties."""
    best: Optional[SafePeriod] = None
    for period in safe_periods:
        if best is None or period.duration > best.duration:
            best = period
    return best


def build_message(best: SafePeriod, short_window_hours: int) -> str:
    """Compose the recommendation text for ``best``."""
    message = f"Recommended flight time: {best.start}-{best.end}"
    if best.duration < short_window_hours:
        message += f". {SHORT_WINDOW_CAUTION}"
    return message


def compose_flight_recommendation(
    safe_periods: Sequence[SafePeriod],
    config: Optional[RecommendationConfig] = None,
) -> FlightRecommendation:
    """Turn the day's safe windows into a single recommendation.

    Args:
        safe_periods: Output of ``find_safe_periods()``, chronological.
        config:       Recommendation settings; defaults to ``RecommendationConfig()``.

    Returns:
        ``FlightRecommendation`` — negative with an alternative when
        ``safe_periods`` is empty, positive with the best window otherwise.
    """
    cfg = config or _DEFAULT_RECOMMENDATION
    best = select_best_period(safe_periods)

    if best is None:
        logger.debug("No safe window; recommending against flight")
        return FlightRecommendation(
            recommended=False,
            message=NO_WINDOW_MESSAGE,
            best_period=None,
            alternative=NO_WINDOW_ALTERNATIVE,
        )

    total = sum(p.duration for p in safe_periods)
    logger.debug(
        "Best window %s-%s (%dh) of %d window(s), %dh safe in total",
        best.start, best.end, best.duration, len(safe_periods), total,
    )
    return FlightRecommendation(
        recommended=True,
        message=build_message(best, cfg.short_window_hours),
        best_period=best,
        all_safe_periods=tuple(safe_periods),
        total_safe_hours=total,
    )
