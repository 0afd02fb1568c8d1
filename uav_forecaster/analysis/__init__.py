"""
Analysis layer: pure functions over an ordered hourly record sequence.

Modules
-------
reasons   : reasons_for() — danger reason classification for one hour.
windows   : find_safe_periods() + find_dangerous_periods() — contiguous runs.
day_parts : compute_daily_period_stats() — night/morning/day/evening buckets.
summary   : compute_daily_summary() + compute_overall_safety() — whole-day stats.
alerts    : build_alerts() — threshold-based weather alerts.
"""
