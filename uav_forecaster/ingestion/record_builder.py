"""
Derivation of ``HourlyRecord`` from a raw hourly observation.

The analysis engine trusts the derived fields it is given; this module is the
reference producer of those fields.  Input values must already be in the
engine's units (°C, %, m/s, degrees, km, mm/h, J/kg) — no unit conversion
happens here.

Icing risk (temperature T °C, humidity RH %, precipitation P mm/h)
-------------------------------------------------------------------
    3 high      0 <= T <= 5   and RH > 85 and P > 0.5
    2 moderate -2 <= T <= 7   and RH > 80 and P > 0.2
    1 low      -5 <= T <= 10  and RH > 75 and P > 0.1
    0 none      otherwise

Wind shear (|Δspeed| m/s and |Δdirection| ° between 10 m and 120 m)
--------------------------------------------------------------------
    3 critical  Δdir > 40 or Δspeed > 6
    2 moderate  Δdir > 25 or Δspeed > 4
    1 weak      Δdir > 15 or Δspeed > 2
    0 low       otherwise

Hour safety (thresholds from ``SafetyConfig``)
----------------------------------------------
    3 prohibited  icing >= 3 or shear >= 3 or CAPE > 2000
    2 restricted  icing >= 2 or shear >= 2 or gusts > 12 or vis < 3 or CAPE > 1500
    1 caution     gusts > 8 or vis < 5 or CAPE > 1000
    0 safe        otherwise
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from uav_forecaster.analysis.windows import hour_label
from uav_forecaster.config import SafetyConfig
from uav_forecaster.models.hourly import HourlyRecord, IcingRisk, SafetyStatus, WindShear
from uav_forecaster.taxonomy.danger_taxonomy import SafetyLevel

COMPASS_POINTS: tuple[str, ...] = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")
UNKNOWN_DIRECTION = "n/a"

_SAFETY_TEXT: dict[SafetyLevel, str] = {
    SafetyLevel.SAFE: "safe",
    SafetyLevel.CAUTION: "caution",
    SafetyLevel.RESTRICTED: "restricted",
    SafetyLevel.PROHIBITED: "prohibited",
}

_DEFAULT_SAFETY = SafetyConfig()


class HourlyObservation(BaseModel):
    """Raw per-hour weather values before derivation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hour: int
    time: Optional[str] = None
    temperature: float
    dewpoint: float
    humidity: float
    wind_speed_10m: float = Field(alias="windSpeed10m")
    wind_speed_120m: float = Field(alias="windSpeed120m")
    wind_dir_10m: Optional[float] = Field(default=None, alias="windDir10m")
    wind_dir_120m: Optional[float] = Field(default=None, alias="windDir120m")
    wind_gusts: float = Field(alias="windGusts")
    visibility: float
    cloudcover: float
    precipitation: float
    cape: float


def compass_label(degrees: Optional[float]) -> str:
    """8-point compass label for a wind direction in degrees."""
    if degrees is None:
        return UNKNOWN_DIRECTION
    return COMPASS_POINTS[int(degrees / 45 + 0.5) % 8]


def calculate_icing_risk(
    temperature: float,
    humidity: float,
    precipitation: float,
) -> IcingRisk:
    if 0 <= temperature <= 5 and humidity > 85 and precipitation > 0.5:
        return IcingRisk(level=3, text="high")
    if -2 <= temperature <= 7 and humidity > 80 and precipitation > 0.2:
        return IcingRisk(level=2, text="moderate")
    if -5 <= temperature <= 10 and humidity > 75 and precipitation > 0.1:
        return IcingRisk(level=1, text="low")
    return IcingRisk(level=0, text="none")


def calculate_wind_shear(
    speed_10m: float,
    speed_120m: float,
    dir_10m: Optional[float],
    dir_120m: Optional[float],
) -> WindShear:
    speed_diff = abs(speed_120m - speed_10m)
    dir_diff = abs(dir_120m - dir_10m) if dir_10m is not None and dir_120m is not None else 0.0

    if dir_diff > 40 or speed_diff > 6:
        return WindShear(level=3, text="critical")
    if dir_diff > 25 or speed_diff > 4:
        return WindShear(level=2, text="moderate")
    if dir_diff > 15 or speed_diff > 2:
        return WindShear(level=1, text="weak")
    return WindShear(level=0, text="low")


def calculate_safety_status(
    obs: HourlyObservation,
    icing: IcingRisk,
    shear: WindShear,
    config: Optional[SafetyConfig] = None,
) -> SafetyStatus:
    c = config or _DEFAULT_SAFETY

    if icing.level >= 3 or shear.level >= 3 or obs.cape > c.prohibited_cape:
        level = SafetyLevel.PROHIBITED
    elif (
        icing.level >= 2
        or shear.level >= 2
        or obs.wind_gusts > c.restricted_gusts
        or obs.visibility < c.restricted_visibility_km
        or obs.cape > c.restricted_cape
    ):
        level = SafetyLevel.RESTRICTED
    elif (
        obs.wind_gusts > c.caution_gusts
        or obs.visibility < c.caution_visibility_km
        or obs.cape > c.caution_cape
    ):
        level = SafetyLevel.CAUTION
    else:
        level = SafetyLevel.SAFE

    return SafetyStatus(level=int(level), text=_SAFETY_TEXT[level])


def build_hourly_record(
    raw: HourlyObservation | dict[str, Any],
    config: Optional[SafetyConfig] = None,
) -> HourlyRecord:
    """Derive icing, shear, safety and compass label for one observation.

    Raises:
        pydantic.ValidationError: If ``raw`` is a dict missing required values.
    """
    obs = raw if isinstance(raw, HourlyObservation) else HourlyObservation.model_validate(raw)

    icing = calculate_icing_risk(obs.temperature, obs.humidity, obs.precipitation)
    shear = calculate_wind_shear(
        obs.wind_speed_10m, obs.wind_speed_120m, obs.wind_dir_10m, obs.wind_dir_120m
    )

    return HourlyRecord(
        hour=obs.hour,
        time=obs.time or hour_label(obs.hour),
        temperature=obs.temperature,
        dewpoint=obs.dewpoint,
        humidity=obs.humidity,
        wind_speed_10m=obs.wind_speed_10m,
        wind_speed_120m=obs.wind_speed_120m,
        wind_gusts=obs.wind_gusts,
        wind_dir_10m_text=compass_label(obs.wind_dir_10m),
        visibility=obs.visibility,
        cloudcover=obs.cloudcover,
        precipitation=obs.precipitation,
        cape=obs.cape,
        icing_risk=icing,
        wind_shear=shear,
        safety_status=calculate_safety_status(obs, icing, shear, config),
    )
