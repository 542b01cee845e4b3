"""Render chart specifications with matplotlib and summaries with Jinja2."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import matplotlib

matplotlib.use("Agg")  # headless: figures only ever go to files

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
from jinja2 import Environment, FileSystemLoader  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402
from matplotlib.patches import Patch, Wedge  # noqa: E402

from survey_charts.recode.labels import wrap_long_labels  # noqa: E402
from survey_charts.reporting import config  # noqa: E402
from survey_charts.reporting.config import DriverConfig  # noqa: E402
from survey_charts.reporting.models import (  # noqa: E402
    BarSpec,
    DrawingSpec,
    LabelPlacement,
    LegendPosition,
)

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Markdown output; HTML escaping would mangle labels like "R&D".
_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)

# legend position -> (loc, bbox_to_anchor)
_LEGEND_PLACEMENT = {
    LegendPosition.RIGHT: ("center left", (1.0, 0.5)),
    LegendPosition.LEFT: ("center right", (0.0, 0.5)),
    LegendPosition.BOTTOM: ("upper center", (0.5, 0.0)),
    LegendPosition.TOP: ("lower center", (0.5, 1.0)),
}

# ---------------------------------------------------------------------------
# Figures
# ---------------------------------------------------------------------------


def _degrees(arc_position: float) -> float:
    """Matplotlib angle for a clockwise-from-top arc position."""
    return 90.0 - 360.0 * arc_position


def render_ring_chart(
    spec: DrawingSpec,
    *,
    width: float = config.DEFAULT_FIGURE_WIDTH,
    height: float = config.DEFAULT_FIGURE_HEIGHT,
    wrap_width: int = config.LABEL_WRAP_WIDTH,
) -> Figure:
    """Draw *spec* as a ring of wedges and return the figure."""

    fig, ax = plt.subplots(figsize=(width, height))
    label_color = "white" if spec.label_placement is LabelPlacement.INSIDE else "black"

    for segment in spec.segments:
        ax.add_patch(
            Wedge(
                (0.0, 0.0),
                config.RING_OUTER_RADIUS,
                _degrees(segment.arc_end),
                _degrees(segment.arc_start),
                width=config.RING_WIDTH,
                facecolor=segment.color,
                edgecolor="white",
            )
        )
        x, y = segment.label_anchor
        ax.text(x, y, segment.label, ha="center", va="center", fontsize=8, color=label_color)

    limit = config.OUTSIDE_LABEL_RADIUS + 0.15
    ax.set_xlim(-limit, limit)
    ax.set_ylim(-limit, limit)
    ax.set_aspect("equal")
    ax.axis("off")

    labels = wrap_long_labels([s.category for s in spec.segments], wrap_width)
    handles = [Patch(facecolor=s.color, label=label) for s, label in zip(spec.segments, labels)]
    loc, anchor = _LEGEND_PLACEMENT[spec.legend_position]
    horizontal = spec.legend_position in (LegendPosition.TOP, LegendPosition.BOTTOM)
    ax.legend(
        handles=handles,
        loc=loc,
        bbox_to_anchor=anchor,
        ncol=min(len(handles), 3) if horizontal else 1,
        frameon=False,
        fontsize=8,
    )
    if spec.title:
        ax.set_title(spec.title, pad=24 if spec.legend_position is LegendPosition.TOP else 6)

    logger.debug("Rendered ring chart '%s' with %d segments", spec.title, len(spec.segments))
    return fig


def render_bar_chart(
    spec: BarSpec,
    *,
    width: float = config.DEFAULT_FIGURE_WIDTH,
    height: float = config.DEFAULT_FIGURE_HEIGHT,
) -> Figure:
    """Draw *spec* as horizontal bars, largest at the top."""

    fig, ax = plt.subplots(figsize=(width, height))
    positions = list(range(len(spec.bars)))
    ax.barh(
        positions,
        [bar.value for bar in spec.bars],
        color=[bar.color for bar in spec.bars],
    )
    ax.set_yticks(positions)
    ax.set_yticklabels([bar.label for bar in spec.bars], fontsize=8)
    ax.invert_yaxis()
    ax.set_xlabel(spec.x_label)
    ax.spines[["top", "right"]].set_visible(False)
    if spec.title:
        ax.set_title(spec.title)
    return fig


def save_figure(fig: Figure, name: str, cfg: DriverConfig) -> Path:
    """Write *fig* to ``<figure_path>/<name>.<format>`` and close it."""

    out_path = cfg.figure_path / f"{name}.{cfg.figure_format}"
    out_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        fig.savefig(out_path, dpi=cfg.dpi, bbox_inches="tight", format=cfg.figure_format)
    finally:
        plt.close(fig)
    logger.info("Saved figure %s", out_path)
    return out_path


# ---------------------------------------------------------------------------
# Markdown summary
# ---------------------------------------------------------------------------


def _summary_rows(summary: pd.DataFrame) -> List[Dict[str, Any]]:
    rows = []
    for stat, values in summary.iterrows():
        cells = ["" if pd.isna(v) else f"{v:g}" for v in values.tolist()]
        rows.append({"stat": stat, "cells": cells})
    return rows


def render_chart_summary(spec: DrawingSpec, summary: Optional[pd.DataFrame] = None) -> str:
    """Render a Markdown table of the categories shown in *spec*."""

    total = spec.total
    rows = [
        {
            "category": s.category,
            "count": s.count,
            "percent": 100.0 * s.count / total if total else 0.0,
        }
        for s in spec.segments
    ]
    context = {
        "title": spec.title,
        "total": total,
        "rows": rows,
        "diagnostics": list(spec.diagnostics),
        "summary_columns": [str(c) for c in summary.columns] if summary is not None else [],
        "summary_rows": _summary_rows(summary) if summary is not None else [],
    }
    template = _env.get_template("chart_summary.md.j2")
    return template.render(**context)
