"""Tests for uav_forecaster.utils.numeric."""

from __future__ import annotations

import pytest

from uav_forecaster.utils.numeric import round_half_up


@pytest.mark.parametrize(
    "value,decimals,expected",
    [
        (12.25, 1, 12.3),
        (100.5, 0, 101.0),
        (2.5, 0, 3.0),
        (62.5, 0, 63.0),
        (11.1666, 1, 11.2),
        (-0.5, 0, 0.0),
        (-1.5, 0, -1.0),
    ],
)
def test_round_half_up(value: float, decimals: int, expected: float) -> None:
    assert round_half_up(value, decimals) == expected


def test_differs_from_builtin_round_on_even_halves() -> None:
    assert round(2.5) == 2
    assert round_half_up(2.5) == 3.0
