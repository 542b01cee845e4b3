"""Data structures for the chart pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class LegendPosition(str, Enum):
    """Side of the chart the legend is drawn on."""

    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"
    TOP = "top"


class LabelPlacement(str, Enum):
    """Whether segment labels sit on the ring or just outside it."""

    INSIDE = "inside"
    OUTSIDE = "outside"


@dataclass(frozen=True, slots=True)
class RingSegment:
    """One category's arc of a ring chart.

    Arc positions are fractions of the full circle, measured from the top.
    """

    category: str
    label: str
    count: int
    fraction: float
    arc_start: float
    arc_end: float
    midpoint: float


@dataclass(frozen=True, slots=True)
class SegmentStyle:
    """A ring segment bound to a color and label anchor."""

    category: str
    count: int
    arc_start: float
    arc_end: float
    color: str
    label: str
    label_anchor: Tuple[float, float]


@dataclass(frozen=True, slots=True)
class DrawingSpec:
    """Backend-agnostic description of a ring chart."""

    segments: Tuple[SegmentStyle, ...]
    title: str
    legend_position: LegendPosition
    label_placement: LabelPlacement
    diagnostics: Tuple[str, ...] = ()

    @property
    def total(self) -> int:
        """Sum of the counts shown on the ring."""
        return sum(s.count for s in self.segments)

    def to_dict(self) -> Dict[str, Any]:
        """Return a *plain* ``dict`` with enum members replaced by their values."""
        data = asdict(self)
        data["legend_position"] = self.legend_position.value
        data["label_placement"] = self.label_placement.value
        return data


@dataclass(frozen=True, slots=True)
class Bar:
    label: str
    value: int
    color: str


@dataclass(frozen=True, slots=True)
class BarSpec:
    """Backend-agnostic description of a horizontal bar chart."""

    bars: Tuple[Bar, ...]
    title: str
    x_label: str = "Respondents"
    diagnostics: Tuple[str, ...] = ()
