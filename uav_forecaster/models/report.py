"""
Read-only report models: chart series, daily summary, weather alerts and the
in-memory CSV export.

Chart series arrays are parallel: index ``i`` of every dataset describes the
same hour as ``labels[i]``.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

_OUTPUT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

AlertType = Literal["wind", "icing", "visibility", "thunderstorm", "precipitation"]
AlertLevel = Literal["warning", "danger"]


class ChartDatasets(BaseModel):
    """Per-hour value arrays, one entry per record."""

    model_config = _OUTPUT_CONFIG

    temperature: tuple[float, ...] = ()
    wind_gusts: tuple[float, ...] = ()
    visibility: tuple[float, ...] = ()
    precipitation: tuple[float, ...] = ()
    cape: tuple[float, ...] = ()
    icing_risk: tuple[int, ...] = ()


class ChartSeries(BaseModel):
    """Hour labels plus parallel datasets."""

    model_config = _OUTPUT_CONFIG

    labels: tuple[str, ...] = ()
    datasets: ChartDatasets = ChartDatasets()

    @model_validator(mode="after")
    def validate_parallel_lengths(self) -> "ChartSeries":
        n = len(self.labels)
        for name, values in self.datasets:
            if len(values) != n:
                raise ValueError(
                    f"Dataset '{name}' has {len(values)} entries, expected {n}."
                )
        return self


class OverallSafety(BaseModel):
    """Whole-day safety rating.

    Attributes:
        level:             0 favourable … 3 dangerous.
        text:              Display label for ``level``.
        rating:            0–100 score, 100 = no caution/danger hours.
        danger_hours:      Hours with level >= 2.
        caution_hours:     Hours with level == 1.
        safe_hours:        Remaining hours.
        safety_percentage: Share of non-dangerous hours, rounded percent.
    """

    model_config = _OUTPUT_CONFIG

    level: int
    text: str
    rating: int
    danger_hours: int
    caution_hours: int
    safe_hours: int
    safety_percentage: int


class DailySummary(BaseModel):
    """Whole-day aggregate of the hourly sequence."""

    model_config = _OUTPUT_CONFIG

    avg_temperature: float
    min_temperature: float
    max_temperature: float
    avg_wind_gusts: float
    max_wind_gusts: float
    avg_visibility: float
    min_visibility: float
    total_precipitation: float
    max_precipitation: float
    avg_cape: float
    max_cape: float
    safety_window: Optional[str] = None
    dangerous_hours_count: int
    dangerous_hours: tuple[str, ...] = ()
    overall_safety: OverallSafety


class WeatherAlert(BaseModel):
    """A single weather hazard notice spanning one or more hours."""

    model_config = _OUTPUT_CONFIG

    type: AlertType
    level: AlertLevel
    title: str
    message: str
    hours: tuple[int, ...]


class CsvExport(BaseModel):
    """In-memory CSV export: suggested filename plus encoded content."""

    model_config = ConfigDict(frozen=True)

    filename: str
    content: bytes
    row_count: int
