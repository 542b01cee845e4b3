"""Bar chart specifications for multi-select totals."""
from __future__ import annotations

import logging
import warnings
from typing import Mapping, Sequence

import pandas as pd

from survey_charts.exceptions import EmptyDistributionError, PaletteTooSmallWarning
from survey_charts.recode.columns import require_columns
from survey_charts.recode.labels import wrap_long_labels
from survey_charts.reporting import config
from survey_charts.reporting.models import Bar, BarSpec

logger = logging.getLogger(__name__)


def indicator_totals(table: pd.DataFrame, columns: Sequence[str]) -> dict[str, int]:
    """Sum binarized indicator *columns* into an option→respondents mapping."""

    require_columns(table, columns)
    return {column: int(table[column].sum()) for column in columns}


def build_bar_spec(
    totals: Mapping[str, int],
    palette: Sequence[str] = config.DEFAULT_PALETTE,
    title: str = "",
    wrap_width: int = config.LABEL_WRAP_WIDTH,
    x_label: str = "Respondents",
) -> BarSpec:
    """Order *totals* largest first and bind colors and wrapped labels."""

    if not totals:
        raise EmptyDistributionError("No options to plot")
    if not palette:
        raise ValueError("palette must contain at least one color")

    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    labels = wrap_long_labels([label for label, _ in ordered], wrap_width)

    diagnostics = []
    if len(palette) < len(ordered):
        note = f"Palette has {len(palette)} colors for {len(ordered)} bars; colors are reused"
        logger.warning("%s (chart '%s')", note, title)
        warnings.warn(note, PaletteTooSmallWarning, stacklevel=2)
        diagnostics.append(note)

    bars = tuple(
        Bar(label=label, value=int(value), color=palette[i % len(palette)])
        for i, (label, (_, value)) in enumerate(zip(labels, ordered))
    )
    return BarSpec(bars=bars, title=title, x_label=x_label, diagnostics=tuple(diagnostics))
