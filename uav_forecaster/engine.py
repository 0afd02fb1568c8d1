"""
Hourly forecast analysis engine.

``HourlyForecastEngine`` holds exactly one piece of state: the most recently
loaded ``Forecast``.  Loading replaces that reference wholesale; every query
is a pure function of the snapshot it reads, and every returned model is
frozen, so views taken before a reload remain valid afterwards.

Query behaviour before any forecast is loaded:

    get_hour_data()                    -> None
    get_safe_periods()                 -> []
    get_dangerous_periods()            -> []
    get_daily_periods_stats()          -> None
    get_flight_time_recommendations()  -> negative recommendation
    export_to_csv()                    -> None
    get_chart_data()                   -> None
    get_summary()                      -> None
    get_alerts()                       -> []

Nothing here raises for a missing forecast, a missing hour, or an empty
selection.  Record contents are trusted as given.

The engine is synchronous and not thread-safe across a reload; a caller that
needs a consistent multi-view snapshot across threads should hold on to
``engine.forecast`` and call the ``analysis`` functions on it directly.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterable
from typing import Any, Optional

from uav_forecaster.analysis.alerts import build_alerts
from uav_forecaster.analysis.day_parts import compute_daily_period_stats
from uav_forecaster.analysis.summary import compute_daily_summary
from uav_forecaster.analysis.windows import find_dangerous_periods, find_safe_periods
from uav_forecaster.config import AppConfig
from uav_forecaster.models.forecast import Forecast, ForecastMetadata
from uav_forecaster.models.hourly import HourlyRecord
from uav_forecaster.models.periods import DailyPeriodStats, DangerousPeriod, SafePeriod
from uav_forecaster.models.recommendation import FlightRecommendation
from uav_forecaster.models.report import ChartSeries, CsvExport, DailySummary, WeatherAlert
from uav_forecaster.recommendations.composer import compose_flight_recommendation
from uav_forecaster.reporting.charts import build_chart_series
from uav_forecaster.reporting.export import build_csv_export

logger = logging.getLogger(__name__)


class HourlyForecastEngine:
    """Single-day flight-window analysis over one loaded forecast."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()
        self._forecast: Optional[Forecast] = None

    @property
    def forecast(self) -> Optional[Forecast]:
        """The currently loaded snapshot, or ``None``."""
        return self._forecast

    # ── Loading ───────────────────────────────────────────────────────────────

    def load_forecast(
        self,
        records: Iterable[HourlyRecord | dict[str, Any]],
        lat: float,
        lon: float,
        date: dt.date | str,
        source: str = "upstream",
    ) -> Forecast:
        """Store a new hourly sequence and return the processed forecast.

        Args:
            records: Hourly records in ascending hour order.  Dicts are
                     validated into ``HourlyRecord`` (camelCase keys accepted).
            lat:     Latitude of the analysed point.
            lon:     Longitude of the analysed point.
            date:    Calendar date of the records (``date`` or ISO string).
            source:  Provenance tag stored in the metadata.

        Returns:
            The new ``Forecast`` snapshot.

        Raises:
            pydantic.ValidationError: If a dict record lacks a required field.
        """
        hourly = tuple(
            r if isinstance(r, HourlyRecord) else HourlyRecord.model_validate(r)
            for r in records
        )
        forecast = Forecast(
            metadata=ForecastMetadata(lat=lat, lon=lon, date=date, source=source),
            hourly=hourly,
        )
        self._forecast = forecast
        logger.debug(
            "Forecast loaded: %s @ %.4f,%.4f (%d hours, source=%s)",
            forecast.metadata.date, forecast.metadata.lat, forecast.metadata.lon,
            len(hourly), source,
            extra={
                "forecast_date": str(forecast.metadata.date),
                "hours": [r.hour for r in hourly],
            },
        )
        return forecast

    def _records(self) -> tuple[HourlyRecord, ...]:
        return self._forecast.hourly if self._forecast is not None else ()

    # ── Queries ───────────────────────────────────────────────────────────────

    def get_hour_data(self, hour: int) -> Optional[HourlyRecord]:
        """Return the record for ``hour``, or ``None`` if absent."""
        if self._forecast is None:
            return None
        return self._forecast.find_hour(hour)

    def get_safe_periods(self) -> list[SafePeriod]:
        return find_safe_periods(self._records())

    def get_dangerous_periods(self) -> list[DangerousPeriod]:
        return find_dangerous_periods(self._records(), self.config.thresholds)

    def get_daily_periods_stats(self) -> Optional[DailyPeriodStats]:
        if self._forecast is None:
            return None
        return compute_daily_period_stats(self._forecast.hourly, self.config.day_parts)

    def get_flight_time_recommendations(self) -> FlightRecommendation:
        return compose_flight_recommendation(
            self.get_safe_periods(), self.config.recommendation
        )

    def get_summary(self) -> Optional[DailySummary]:
        return compute_daily_summary(self._records())

    def get_alerts(self) -> list[WeatherAlert]:
        return build_alerts(self._records())

    # ── Projections ───────────────────────────────────────────────────────────

    def export_to_csv(self, filename: Optional[str] = None) -> Optional[CsvExport]:
        """Build the ``;``-delimited hourly table for the loaded forecast.

        Args:
            filename: Filename stem; the forecast date and ``.csv`` are
                      appended.  Defaults to ``config.export.filename_prefix``.

        Returns:
            ``CsvExport`` with filename and encoded bytes, or ``None`` when no
            forecast is loaded.
        """
        if self._forecast is None:
            logger.debug("export_to_csv called with no forecast loaded")
            return None
        return build_csv_export(
            self._forecast.hourly,
            self._forecast.metadata.date,
            filename=filename or self.config.export.filename_prefix,
            delimiter=self.config.export.delimiter,
        )

    def get_chart_data(self) -> Optional[ChartSeries]:
        if self._forecast is None:
            return None
        return build_chart_series(self._forecast.hourly)

    def build_report(self) -> Optional[dict[str, Any]]:
        """Full analysis as a JSON-ready dict (camelCase keys), or ``None``."""
        if self._forecast is None:
            return None

        def dump(model, exclude_none: bool = False) -> Any:
            if model is None:
                return None
            return model.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)

        return {
            "metadata": dump(self._forecast.metadata),
            "summary": dump(self.get_summary()),
            "safePeriods": [dump(p) for p in self.get_safe_periods()],
            "dangerousPeriods": [dump(p) for p in self.get_dangerous_periods()],
            # Empty buckets omit their statistic keys rather than carrying nulls.
            "dailyPeriodsStats": dump(self.get_daily_periods_stats(), exclude_none=True),
            "alerts": [dump(a) for a in self.get_alerts()],
            "recommendation": dump(self.get_flight_time_recommendations()),
        }
