"""
Loaded forecast model.

``Forecast`` is the single snapshot held by the analysis engine: the
originating location/date metadata plus the ordered hourly record sequence.
It is frozen and its hourly sequence is a tuple, so a reload replaces the
whole object rather than mutating it.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from uav_forecaster.models.hourly import HourlyRecord


class ForecastMetadata(BaseModel):
    """Labelling metadata for a loaded forecast.

    Attributes:
        lat:          Latitude of the analysed point, rounded to 4 decimals.
        lon:          Longitude of the analysed point, rounded to 4 decimals.
        date:         Calendar date the hourly records belong to.
        source:       Free-form provenance tag of the records.
        processed_at: UTC time the forecast was loaded into the engine.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    lat: float
    lon: float
    date: dt.date
    source: str = "upstream"
    processed_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(tz=dt.timezone.utc)
    )

    @field_validator("lat", "lon")
    @classmethod
    def round_coordinate(cls, v: float) -> float:
        return round(v, 4)


class Forecast(BaseModel):
    """Metadata plus the ordered hourly sequence for one calendar day."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    metadata: ForecastMetadata
    hourly: tuple[HourlyRecord, ...] = ()

    def find_hour(self, hour: int) -> Optional[HourlyRecord]:
        """Return the record for ``hour``, or ``None`` when it is absent."""
        for record in self.hourly:
            if record.hour == hour:
                return record
        return None
