"""Unit tests for DriverConfig environment parsing."""
from __future__ import annotations

import logging
from pathlib import Path

from survey_charts.reporting import config
from survey_charts.reporting.config import DriverConfig


def test_defaults_when_env_empty() -> None:
    cfg = DriverConfig.from_env({})
    assert cfg.data_path == Path(".")
    assert cfg.figure_path == Path(".")
    assert cfg.dpi == config.DEFAULT_FIGURE_DPI
    assert cfg.figure_format == "tiff"
    assert cfg.width == config.DEFAULT_FIGURE_WIDTH


def test_reads_values() -> None:
    cfg = DriverConfig.from_env(
        {
            "DATA_PATH": "/data",
            "FIGURE_PATH": "/figs",
            "FIGURE_DPI": "150",
            "FIGURE_FORMAT": "PNG",
            "FIGURE_WIDTH": "8.5",
            "FIGURE_HEIGHT": "3",
        }
    )
    assert cfg.data_path == Path("/data")
    assert cfg.figure_path == Path("/figs")
    assert cfg.dpi == 150
    assert cfg.figure_format == "png"
    assert cfg.width == 8.5
    assert cfg.height == 3.0


def test_invalid_numbers_fall_back(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="survey_charts.reporting.config"):
        cfg = DriverConfig.from_env({"FIGURE_DPI": "lots", "FIGURE_WIDTH": "-2"})
    assert cfg.dpi == config.DEFAULT_FIGURE_DPI
    assert cfg.width == config.DEFAULT_FIGURE_WIDTH
    assert "FIGURE_DPI" in caplog.text
    assert "FIGURE_WIDTH" in caplog.text


def test_reads_os_environ_by_default(monkeypatch) -> None:
    monkeypatch.setenv("DATA_PATH", "/from/env")
    monkeypatch.delenv("FIGURE_DPI", raising=False)
    cfg = DriverConfig.from_env()
    assert cfg.data_path == Path("/from/env")


def test_default_palette_has_ten_colors() -> None:
    assert len(config.DEFAULT_PALETTE) == 10
    assert all(c.startswith("#") and len(c) == 7 for c in config.DEFAULT_PALETTE)


def test_non_finite_numbers_fall_back(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="survey_charts.reporting.config"):
        cfg = DriverConfig.from_env({"FIGURE_WIDTH": "nan", "FIGURE_HEIGHT": "inf"})
    assert cfg.width == config.DEFAULT_FIGURE_WIDTH
    assert cfg.height == config.DEFAULT_FIGURE_HEIGHT
    assert "finite" in caplog.text
