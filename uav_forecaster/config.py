"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``UAV_FORECASTER_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The analysis engine and CLI commands receive an ``AppConfig`` (or one of its
sections) — never raw dicts or individual env var lookups scattered through
the codebase.  Every section has defaults equal to the committed TOML, so
``AppConfig()`` is a valid configuration on its own.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class ThresholdsConfig(BaseModel):
    """Danger-reason thresholds applied to a single hourly record.

    Levels are inclusive lower bounds (``>=``); the other values are strict
    bounds in the direction named by the field.
    """

    model_config = ConfigDict(frozen=True)

    icing_level_min: int = 2
    wind_shear_level_min: int = 2
    max_wind_gusts: float = 12.0          # m/s, reason when exceeded
    min_visibility_km: float = 3.0        # reason when below
    max_cape: float = 1500.0              # J/kg, reason when exceeded
    max_precipitation: float = 2.0        # mm/h, reason when exceeded


class SafetyConfig(BaseModel):
    """Thresholds used when deriving a record from a raw hourly observation."""

    model_config = ConfigDict(frozen=True)

    prohibited_cape: float = 2000.0
    restricted_gusts: float = 12.0
    restricted_visibility_km: float = 3.0
    restricted_cape: float = 1500.0
    caution_gusts: float = 8.0
    caution_visibility_km: float = 5.0
    caution_cape: float = 1000.0


class DayPartRange(BaseModel):
    """Inclusive hour range for one day-part bucket."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    @model_validator(mode="after")
    def validate_range(self) -> "DayPartRange":
        if not 0 <= self.start <= self.end <= 23:
            raise ValueError(
                f"Day-part range must satisfy 0 <= start <= end <= 23, "
                f"got {self.start}..{self.end}."
            )
        return self


class DayPartsConfig(BaseModel):
    """Hour ranges of the four daily buckets."""

    model_config = ConfigDict(frozen=True)

    night: DayPartRange = DayPartRange(start=0, end=5)
    morning: DayPartRange = DayPartRange(start=6, end=11)
    day: DayPartRange = DayPartRange(start=12, end=17)
    evening: DayPartRange = DayPartRange(start=18, end=23)

    @model_validator(mode="after")
    def validate_no_overlap(self) -> "DayPartsConfig":
        ordered = [self.night, self.morning, self.day, self.evening]
        for prev, nxt in zip(ordered, ordered[1:]):
            if nxt.start <= prev.end:
                raise ValueError(
                    f"Day parts must be ordered and non-overlapping: "
                    f"{prev.start}..{prev.end} overlaps {nxt.start}..{nxt.end}."
                )
        return self


class RecommendationConfig(BaseModel):
    """Flight recommendation settings."""

    model_config = ConfigDict(frozen=True)

    short_window_hours: int = 3

    @field_validator("short_window_hours")
    @classmethod
    def validate_short_window(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"short_window_hours must be >= 1, got {v}.")
        return v


class ExportConfig(BaseModel):
    """Flat-file export settings."""

    model_config = ConfigDict(frozen=True)

    output_dir: str = "data/outputs"
    delimiter: str = ";"
    filename_prefix: str = "hourly_forecast"

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"delimiter must be a single character, got {v!r}.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth."""

    model_config = ConfigDict(frozen=True)

    thresholds: ThresholdsConfig = ThresholdsConfig()
    safety: SafetyConfig = SafetyConfig()
    day_parts: DayPartsConfig = DayPartsConfig()
    recommendation: RecommendationConfig = RecommendationConfig()
    export: ExportConfig = ExportConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    load_dotenv(dotenv_path=root / ".env", override=False)

    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config explicitly."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply UAV_FORECASTER_* env vars to the raw config dict.

    Supported overrides:
      UAV_FORECASTER_LOG_LEVEL   → raw["logging"]["level"]
      UAV_FORECASTER_OUTPUT_DIR  → raw["export"]["output_dir"]
      UAV_FORECASTER_DEBUG       → raw["debug"]
    """
    if log_level := os.environ.get("UAV_FORECASTER_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if output_dir := os.environ.get("UAV_FORECASTER_OUTPUT_DIR"):
        raw.setdefault("export", {})["output_dir"] = output_dir

    if debug := os.environ.get("UAV_FORECASTER_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        thresholds=ThresholdsConfig(**raw.get("thresholds", {})),
        safety=SafetyConfig(**raw.get("safety", {})),
        day_parts=DayPartsConfig(
            **{
                name: DayPartRange(**bounds)
                for name, bounds in raw.get("day_parts", {}).items()
            }
        ),
        recommendation=RecommendationConfig(**raw.get("recommendation", {})),
        export=ExportConfig(**raw.get("export", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
