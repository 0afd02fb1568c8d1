"""
Tests for uav_forecaster/cli.py.

What we test
------------
  - validate-config prints thresholds and [OK]; --full dumps JSON.
  - analyze prints every report section and can write the JSON report.
  - export-csv writes {prefix}_{date}.csv into --out-dir.
  - chart-data prints or writes the chart series.
  - Bad input (missing file, bad config, bad date) exits with code 1.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from uav_forecaster.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def quiet_config(tmp_path: Path) -> Path:
    path = tmp_path / "quiet.toml"
    path.write_text('[logging]\nlevel = "WARNING"\n', encoding="utf-8")
    return path


# ── validate-config ───────────────────────────────────────────────────────────


def test_validate_config_default() -> None:
    result = runner.invoke(app, ["validate-config"])
    assert result.exit_code == 0, result.output
    assert "Gust threshold:       12.0 m/s" in result.output
    assert "[OK] Config valid." in result.output


def test_validate_config_full(quiet_config: Path) -> None:
    result = runner.invoke(app, ["validate-config", "--config", str(quiet_config), "--full"])
    assert result.exit_code == 0, result.output
    assert '"short_window_hours": 3' in result.output


def test_validate_config_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["validate-config", "--config", str(tmp_path / "none.toml")])
    assert result.exit_code == 1


def test_validate_config_invalid(tmp_path: Path) -> None:
    path = tmp_path / "bad.toml"
    path.write_text("[recommendation]\nshort_window_hours = 0\n", encoding="utf-8")
    result = runner.invoke(app, ["validate-config", "--config", str(path)])
    assert result.exit_code == 1


# ── analyze ───────────────────────────────────────────────────────────────────


def test_analyze(forecast_file: Path, quiet_config: Path) -> None:
    result = runner.invoke(
        app,
        [
            "analyze", str(forecast_file), "--date", "2026-05-14",
            "--lat", "55.7558", "--lon", "37.6173", "--config", str(quiet_config),
        ],
    )
    assert result.exit_code == 0, result.output
    for section in ("[SUMMARY]", "[SAFE WINDOWS]", "[DANGEROUS WINDOWS]",
                    "[DAY PARTS]", "[ALERTS]", "[RECOMMENDATION]"):
        assert section in result.output
    assert "[GO] Recommended flight time: 10:00-17:00" in result.output


def test_analyze_json_report(forecast_file: Path, quiet_config: Path, tmp_path: Path) -> None:
    out = tmp_path / "report.json"
    result = runner.invoke(
        app,
        [
            "analyze", str(forecast_file), "--date", "2026-05-14",
            "--json-out", str(out), "--config", str(quiet_config),
        ],
    )
    assert result.exit_code == 0, result.output
    report = json.loads(out.read_text(encoding="utf-8"))
    assert report["recommendation"]["recommended"] is True
    assert report["metadata"]["source"] == "forecast.json"
    assert len(report["dangerousPeriods"]) == 3


def test_analyze_missing_file(tmp_path: Path, quiet_config: Path) -> None:
    result = runner.invoke(
        app,
        ["analyze", str(tmp_path / "absent.json"), "--date", "2026-05-14",
         "--config", str(quiet_config)],
    )
    assert result.exit_code == 1


def test_analyze_bad_date(forecast_file: Path, quiet_config: Path) -> None:
    result = runner.invoke(
        app,
        ["analyze", str(forecast_file), "--date", "14/05/2026", "--config", str(quiet_config)],
    )
    assert result.exit_code == 1


# ── export-csv / chart-data ───────────────────────────────────────────────────


def test_export_csv(forecast_file: Path, quiet_config: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "exports"
    result = runner.invoke(
        app,
        [
            "export-csv", str(forecast_file), "--date", "2026-05-14",
            "--out-dir", str(out_dir), "--filename", "site", "--config", str(quiet_config),
        ],
    )
    assert result.exit_code == 0, result.output
    written = out_dir / "site_2026-05-14.csv"
    assert written.exists()
    lines = written.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 25
    assert lines[0].startswith("Time;")


def test_chart_data_stdout(forecast_file: Path, quiet_config: Path) -> None:
    result = runner.invoke(
        app,
        ["chart-data", str(forecast_file), "--date", "2026-05-14", "--config", str(quiet_config)],
    )
    assert result.exit_code == 0, result.output
    series = json.loads(result.output)
    assert len(series["labels"]) == 24
    assert series["datasets"]["cape"][18] == 2200.0


def test_chart_data_file(forecast_file: Path, quiet_config: Path, tmp_path: Path) -> None:
    out = tmp_path / "charts.json"
    result = runner.invoke(
        app,
        ["chart-data", str(forecast_file), "--date", "2026-05-14",
         "--out", str(out), "--config", str(quiet_config)],
    )
    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text(encoding="utf-8"))["datasets"]["icingRisk"][6] == 2
