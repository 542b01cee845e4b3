"""Lay out categorical counts as the segments of a ring (donut) chart.

Two pure steps:

1. :func:`build_segments` turns a category→count mapping into ordered arcs
   that partition the circle.
2. :func:`style_chart` binds colors, label anchors and legend placement,
   producing a :class:`DrawingSpec` for a rendering backend.

Neither step touches files or figures.
"""
from __future__ import annotations

import logging
import math
import warnings
from itertools import accumulate
from typing import List, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

from survey_charts.exceptions import EmptyDistributionError, PaletteTooSmallWarning
from survey_charts.recode.categories import bucket_rare_categories, count_categories
from survey_charts.reporting import config
from survey_charts.reporting.models import (
    DrawingSpec,
    LabelPlacement,
    LegendPosition,
    RingSegment,
    SegmentStyle,
)

logger = logging.getLogger(__name__)

__all__ = [
    "build_segments",
    "label_anchor",
    "ring_chart_from_column",
    "style_chart",
]


def build_segments(counts: Mapping[str, int]) -> List[RingSegment]:
    """Convert *counts* into ring segments ordered largest first.

    Equal fractions keep the order in which categories appear in *counts*.
    Categories with a zero count are left off the ring. The final segment
    always ends exactly at ``1.0``.

    Raises
    ------
    EmptyDistributionError
        If *counts* is empty or sums to zero.
    ValueError
        If any count is negative.
    """

    for category, count in counts.items():
        if count < 0:
            raise ValueError(f"Negative count {count} for category '{category}'")

    total = sum(counts.values())
    if not counts or total == 0:
        raise EmptyDistributionError()

    # sorted() stays stable with reverse=True, so ties keep first-seen order
    ordered = sorted(
        ((category, count) for category, count in counts.items() if count > 0),
        key=lambda item: item[1],
        reverse=True,
    )
    fractions = [count / total for _, count in ordered]
    ends = list(accumulate(fractions))
    ends[-1] = 1.0

    segments: List[RingSegment] = []
    arc_start = 0.0
    for (category, count), fraction, arc_end in zip(ordered, fractions, ends):
        segments.append(
            RingSegment(
                category=category,
                label=str(count),
                count=int(count),
                fraction=fraction,
                arc_start=arc_start,
                arc_end=arc_end,
                midpoint=(arc_start + arc_end) / 2,
            )
        )
        arc_start = arc_end

    logger.debug("Built %d ring segments from %d responses", len(segments), total)
    return segments


def label_anchor(midpoint: float, placement: LabelPlacement) -> Tuple[float, float]:
    """Return the ``(x, y)`` anchor for a label at arc position *midpoint*.

    Positions run clockwise from 12 o'clock on a ring centred at the origin.
    """

    radius = (
        config.INSIDE_LABEL_RADIUS
        if placement is LabelPlacement.INSIDE
        else config.OUTSIDE_LABEL_RADIUS
    )
    angle = math.pi / 2 - 2 * math.pi * midpoint
    return (radius * math.cos(angle), radius * math.sin(angle))


def style_chart(
    segments: Sequence[RingSegment],
    palette: Sequence[str] = config.DEFAULT_PALETTE,
    legend_position: Union[LegendPosition, str] = LegendPosition.RIGHT,
    label_placement: Union[LabelPlacement, str] = LabelPlacement.INSIDE,
    title: str = "",
) -> DrawingSpec:
    """Bind colors and label positions to *segments*.

    Colors are assigned by position. When *palette* is shorter than
    *segments* it is cycled; a :class:`PaletteTooSmallWarning` is issued and
    the condition is recorded in :attr:`DrawingSpec.diagnostics`.
    """

    if not palette:
        raise ValueError("palette must contain at least one color")
    if not segments:
        raise EmptyDistributionError("No segments to style")

    legend_position = LegendPosition(legend_position)
    label_placement = LabelPlacement(label_placement)

    diagnostics: List[str] = []
    if len(palette) < len(segments):
        note = (
            f"Palette has {len(palette)} colors for {len(segments)} segments; "
            "colors are reused"
        )
        logger.warning("%s (chart '%s')", note, title)
        warnings.warn(note, PaletteTooSmallWarning, stacklevel=2)
        diagnostics.append(note)

    styled = tuple(
        SegmentStyle(
            category=segment.category,
            count=segment.count,
            arc_start=segment.arc_start,
            arc_end=segment.arc_end,
            color=palette[i % len(palette)],
            label=segment.label,
            label_anchor=label_anchor(segment.midpoint, label_placement),
        )
        for i, segment in enumerate(segments)
    )

    return DrawingSpec(
        segments=styled,
        title=title,
        legend_position=legend_position,
        label_placement=label_placement,
        diagnostics=tuple(diagnostics),
    )


def ring_chart_from_column(
    table: pd.DataFrame,
    column: str,
    *,
    title: Optional[str] = None,
    threshold: int = config.DEFAULT_RARE_THRESHOLD,
    palette: Sequence[str] = config.DEFAULT_PALETTE,
    legend_position: Union[LegendPosition, str] = LegendPosition.RIGHT,
    label_placement: Union[LabelPlacement, str] = LabelPlacement.INSIDE,
) -> DrawingSpec:
    """Count *column*, fold rare answers into "Other" and style a ring chart."""

    counts = bucket_rare_categories(count_categories(table, column), threshold)
    segments = build_segments(counts)
    return style_chart(
        segments,
        palette=palette,
        legend_position=legend_position,
        label_placement=label_placement,
        title=column if title is None else title,
    )
