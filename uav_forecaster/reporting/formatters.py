"""
ASCII terminal formatters for the ``analyze`` CLI command.

All formatters accept already-computed analysis models and return plain
multi-line strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from uav_forecaster.models.forecast import ForecastMetadata
from uav_forecaster.models.periods import DailyPeriodStats, DangerousPeriod, SafePeriod
from uav_forecaster.models.recommendation import FlightRecommendation
from uav_forecaster.models.report import DailySummary, WeatherAlert


def _num(value: Optional[float], unit: str = "", prec: int = 1) -> str:
    if value is None:
        return "—"
    return f"{value:.{prec}f}{unit}"


# ── Header / summary ──────────────────────────────────────────────────────────


def format_header(metadata: ForecastMetadata, hour_count: int) -> str:
    """One block naming the analysed point, date and record count."""
    lines = [
        "",
        "=== UAV Flight-Window Analysis ===",
        f"  Date:     {metadata.date.isoformat()}",
        f"  Location: {metadata.lat:.4f}, {metadata.lon:.4f}",
        f"  Source:   {metadata.source}",
        f"  Hours:    {hour_count}",
    ]
    return "\n".join(lines)


def format_summary(summary: Optional[DailySummary]) -> str:
    """Whole-day aggregates plus the overall safety rating."""
    lines = ["", "  [SUMMARY]"]
    if summary is None:
        lines.append("    (no hourly data)")
        return "\n".join(lines)

    overall = summary.overall_safety
    lines.append(
        f"    Overall:       {overall.text} (level {overall.level}, "
        f"rating {overall.rating}/100, {overall.safety_percentage}% non-dangerous)"
    )
    lines.append(
        f"    Temperature:   avg {_num(summary.avg_temperature, ' °C')}  "
        f"min {_num(summary.min_temperature, ' °C')}  "
        f"max {_num(summary.max_temperature, ' °C')}"
    )
    lines.append(
        f"    Gusts:         avg {_num(summary.avg_wind_gusts, ' m/s')}  "
        f"max {_num(summary.max_wind_gusts, ' m/s')}"
    )
    lines.append(
        f"    Visibility:    avg {_num(summary.avg_visibility, ' km')}  "
        f"min {_num(summary.min_visibility, ' km')}"
    )
    lines.append(
        f"    Precipitation: total {_num(summary.total_precipitation, ' mm')}  "
        f"max {_num(summary.max_precipitation, ' mm/h')}"
    )
    lines.append(
        f"    CAPE:          avg {_num(summary.avg_cape, ' J/kg', 0)}  "
        f"max {_num(summary.max_cape, ' J/kg', 0)}"
    )
    lines.append(f"    Safe span:     {summary.safety_window or '—'}")
    return "\n".join(lines)


# ── Windows ───────────────────────────────────────────────────────────────────


def format_periods(
    safe: Sequence[SafePeriod],
    dangerous: Sequence[DangerousPeriod],
) -> str:
    """Safe and dangerous windows as two small tables."""
    lines = ["", "  [SAFE WINDOWS]"]
    if not safe:
        lines.append("    (none)")
    else:
        header = f"    {'Start':>5}  {'End':>5}  {'Hours':>5}"
        lines.append(header)
        lines.append("    " + "-" * (len(header) - 4))
        for p in safe:
            lines.append(f"    {p.start:>5}  {p.end:>5}  {p.duration:>5}")

    lines.append("")
    lines.append("  [DANGEROUS WINDOWS]")
    if not dangerous:
        lines.append("    (none)")
        return "\n".join(lines)

    header = f"    {'Start':>5}  {'End':>5}  {'Hours':>5}  {'Sev':>3}  Reasons"
    lines.append(header)
    lines.append("    " + "-" * (len(header) - 4))
    for p in dangerous:
        reasons = ", ".join(r.value for r in p.reasons) or "unspecified"
        lines.append(
            f"    {p.start:>5}  {p.end:>5}  {p.duration:>5}  {p.severity:>3}  {reasons}"
        )
    return "\n".join(lines)


# ── Day parts ─────────────────────────────────────────────────────────────────


def format_day_parts(stats: Optional[DailyPeriodStats]) -> str:
    """One row per day-part bucket; empty buckets show ``no data``."""
    lines = ["", "  [DAY PARTS]"]
    if stats is None:
        lines.append("    (no forecast loaded)")
        return "\n".join(lines)

    header = (
        f"    {'Part':<8}  {'Range':>5}  {'Temp':>6}  {'Gusts':>6}  "
        f"{'Vis':>6}  {'Precip':>6}  {'CAPE':>6}  {'Danger':>6}  {'Safety':<7}"
    )
    lines.append(header)
    lines.append("    " + "-" * (len(header) - 4))
    for b in stats.buckets():
        rng = f"{b.start:02d}-{b.end:02d}"
        if not b.has_data:
            lines.append(f"    {b.part.value:<8}  {rng:>5}  (no data)")
            continue
        lines.append(
            f"    {b.part.value:<8}  {rng:>5}  {_num(b.avg_temperature):>6}  "
            f"{_num(b.max_wind_gusts):>6}  {_num(b.min_visibility):>6}  "
            f"{_num(b.total_precipitation):>6}  {_num(b.avg_cape, prec=0):>6}  "
            f"{b.danger_hours_count:>6}  {b.safety_level.value:<7}"
        )
    return "\n".join(lines)


# ── Alerts / recommendation ───────────────────────────────────────────────────


def format_alerts(alerts: Sequence[WeatherAlert]) -> str:
    lines = ["", "  [ALERTS]"]
    if not alerts:
        lines.append("    (none)")
    for a in alerts:
        lines.append(f"    [{a.level.upper()}] {a.title}: {a.message}")
    return "\n".join(lines)


def format_recommendation(rec: FlightRecommendation) -> str:
    """Final verdict block."""
    tag = "[GO]" if rec.recommended else "[NO-GO]"
    lines = ["", "  [RECOMMENDATION]", f"    {tag} {rec.message}"]
    if rec.recommended:
        lines.append(f"    Total safe hours: {rec.total_safe_hours}")
    elif rec.alternative:
        lines.append(f"    Alternative: {rec.alternative}")
    return "\n".join(lines)
