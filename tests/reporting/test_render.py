"""Unit tests for figure rendering and Markdown summaries."""
from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
from matplotlib.patches import Wedge

from survey_charts.reporting.bars import build_bar_spec
from survey_charts.reporting.config import DriverConfig
from survey_charts.reporting.models import DrawingSpec
from survey_charts.reporting.render import (
    render_bar_chart,
    render_chart_summary,
    render_ring_chart,
    save_figure,
)
from survey_charts.reporting.rings import build_segments, style_chart


@pytest.fixture()
def spec() -> DrawingSpec:
    segments = build_segments({"Job": 3, "R&D | tooling": 1})
    return style_chart(segments, ["#332288", "#88CCEE"], legend_position="bottom", title="Motivations")


@pytest.fixture()
def cfg(tmp_path: Path) -> DriverConfig:
    return DriverConfig(data_path=tmp_path, figure_path=tmp_path / "figures", dpi=50, figure_format="png")


def test_render_ring_chart_draws_one_wedge_per_segment(spec: DrawingSpec) -> None:
    fig = render_ring_chart(spec, width=3, height=3)
    ax = fig.axes[0]
    wedges = [p for p in ax.patches if isinstance(p, Wedge)]
    assert len(wedges) == 2
    # first segment spans 3/4 of the ring clockwise from the top
    assert wedges[0].theta2 == pytest.approx(90.0)
    assert wedges[0].theta1 == pytest.approx(90.0 - 270.0)
    texts = [t.get_text() for t in ax.texts]
    assert texts == ["3", "1"]
    assert ax.get_title() == "Motivations"
    legend_labels = [t.get_text() for t in ax.get_legend().get_texts()]
    assert legend_labels == ["Job", "R&D | tooling"]


def test_save_figure_writes_file(spec: DrawingSpec, cfg: DriverConfig) -> None:
    path = save_figure(render_ring_chart(spec), "motivations", cfg)
    assert path == cfg.figure_path / "motivations.png"
    assert path.is_file()
    assert path.stat().st_size > 0


def test_render_bar_chart(cfg: DriverConfig) -> None:
    bar_spec = build_bar_spec({"Job": 2, "Fun": 5}, title="Why")
    fig = render_bar_chart(bar_spec)
    ax = fig.axes[0]
    assert [t.get_text() for t in ax.get_yticklabels()] == ["Fun", "Job"]
    assert ax.get_xlabel() == "Respondents"
    path = save_figure(fig, "why", cfg)
    assert path.is_file()


def test_render_chart_summary(spec: DrawingSpec) -> None:
    out = render_chart_summary(spec)
    assert "## Motivations" in out
    assert "_n = 4_" in out
    assert "| Job | 3 | 75.0% |" in out
    # pipes in labels are escaped, ampersands are not
    assert "| R&D \\| tooling | 1 | 25.0% |" in out
    assert "Notes" not in out


def test_render_chart_summary_with_diagnostics_and_stats() -> None:
    segments = build_segments({"A": 1, "B": 1})
    with pytest.warns(UserWarning):
        spec = style_chart(segments, ["red"], title="Short palette")
    summary = pd.DataFrame({"Docs": [1.5, 2.0]}, index=["Mean", "Median"])

    out = render_chart_summary(spec, summary)
    assert "**Notes**" in out
    assert "colors are reused" in out
    assert "| | Docs |" in out
    assert "| Mean | 1.5 |" in out
    assert "| Median | 2 |" in out
