"""
Per-hour input record model.

``HourlyRecord`` is the contract between the upstream record builder and the
analysis engine: one weather/safety snapshot per hour of a single day.  Every
field is required.  Field values are trusted as given — the engine is not a
validation layer, so no range checks are applied beyond the types.

Input dicts may use either the snake_case field names or the camelCase keys
produced by the upstream JSON (``windSpeed10m``, ``safetyStatus`` ...).
``model_dump(by_alias=True)`` round-trips to the camelCase shape.

All models are frozen: a loaded forecast and every view derived from it stay
valid after the engine loads a newer forecast.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from uav_forecaster.taxonomy.danger_taxonomy import DANGER_LEVEL_MIN, SafetyLevel


class IcingRisk(BaseModel):
    """Ordinal icing risk with its display label."""

    model_config = ConfigDict(frozen=True)

    level: int
    text: str


class WindShear(BaseModel):
    """Ordinal low-level wind shear between 10 m and 120 m."""

    model_config = ConfigDict(frozen=True)

    level: int
    text: str = ""


class SafetyStatus(BaseModel):
    """Authoritative ordinal hour safety: 0 safe, 1 caution, >= 2 dangerous."""

    model_config = ConfigDict(frozen=True)

    level: int
    text: str

    @property
    def is_safe(self) -> bool:
        return self.level == SafetyLevel.SAFE

    @property
    def is_dangerous(self) -> bool:
        return self.level >= DANGER_LEVEL_MIN


class HourlyRecord(BaseModel):
    """One hour of the analysed forecast.

    Attributes:
        hour:              Hour of day, 0–23.  Unique within a forecast.
        time:              Display label for the hour (opaque, passed through).
        temperature:       Air temperature at 2 m, °C.
        dewpoint:          Dew point at 2 m, °C.
        humidity:          Relative humidity, %.
        wind_speed_10m:    Wind speed at 10 m, m/s.
        wind_speed_120m:   Wind speed at 120 m, m/s.
        wind_gusts:        Wind gusts at 10 m, m/s.
        wind_dir_10m_text: Compass label of the 10 m wind direction.
        visibility:        Visibility, km.
        cloudcover:        Total cloud cover, %.
        precipitation:     Precipitation, mm/h.
        cape:              Convective available potential energy, J/kg.
        icing_risk:        Derived icing risk.
        wind_shear:        Derived wind shear.
        safety_status:     Derived hour safety.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hour: int
    time: str
    temperature: float
    dewpoint: float
    humidity: float
    wind_speed_10m: float = Field(alias="windSpeed10m")
    wind_speed_120m: float = Field(alias="windSpeed120m")
    wind_gusts: float = Field(alias="windGusts")
    wind_dir_10m_text: str = Field(alias="windDir10mText")
    visibility: float
    cloudcover: float
    precipitation: float
    cape: float
    icing_risk: IcingRisk = Field(alias="icingRisk")
    wind_shear: WindShear = Field(alias="windShear")
    safety_status: SafetyStatus = Field(alias="safetyStatus")

    @field_validator("hour")
    @classmethod
    def validate_hour(cls, v: int) -> int:
        if not 0 <= v <= 23:
            raise ValueError(f"hour must be in [0, 23], got {v}.")
        return v
