"""
Numeric helpers shared by the analysis modules.

``round_half_up`` is the rounding used for every published mean and
percentage: exact halves go towards +infinity (``12.25 -> 12.3``,
``-0.5 -> 0``), unlike the built-in ``round()`` which rounds halves to even.
"""

from __future__ import annotations

import math


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round ``value`` to ``decimals`` places, halves towards +infinity.

    Computed as ``floor(value * 10**decimals + 0.5) / 10**decimals`` in
    float arithmetic, so results match a ``Math.round``-style rounding of
    the same inputs.

    Args:
        value:    Number to round.
        decimals: Decimal places to keep (>= 0).

    Returns:
        The rounded value as a float.
    """
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor
