"""
Chart series projection.

One pass over the hourly sequence builds the label array and the parallel
dataset arrays consumed by the charting front end.
"""

from __future__ import annotations

from collections.abc import Sequence

from uav_forecaster.models.hourly import HourlyRecord
from uav_forecaster.models.report import ChartDatasets, ChartSeries


def build_chart_series(records: Sequence[HourlyRecord]) -> ChartSeries:
    """Return labels plus per-hour datasets, order-preserving."""
    labels: list[str] = []
    temperature: list[float] = []
    wind_gusts: list[float] = []
    visibility: list[float] = []
    precipitation: list[float] = []
    cape: list[float] = []
    icing_risk: list[int] = []

    for r in records:
        labels.append(r.time)
        temperature.append(r.temperature)
        wind_gusts.append(r.wind_gusts)
        visibility.append(r.visibility)
        precipitation.append(r.precipitation)
        cape.append(r.cape)
        icing_risk.append(r.icing_risk.level)

    return ChartSeries(
        labels=tuple(labels),
        datasets=ChartDatasets(
            temperature=tuple(temperature),
            wind_gusts=tuple(wind_gusts),
            visibility=tuple(visibility),
            precipitation=tuple(precipitation),
            cape=tuple(cape),
            icing_risk=tuple(icing_risk),
        ),
    )
