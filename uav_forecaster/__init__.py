"""UAV flight-window forecaster: single-day hourly safety analysis."""

__version__ = "0.1.0"
