"""Configuration for the chart pipeline.

Module constants hold chart defaults. Locations and output settings that
vary per machine live in :class:`DriverConfig`, which the driver builds once
from the environment (after ``load_dotenv``) and passes down explicitly.
"""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

# Modified from https://sronpersonalpages.nl/~pault/
DEFAULT_PALETTE: Tuple[str, ...] = (
    "#332288",
    "#88CCEE",
    "#44AA99",
    "#117733",
    "#999933",
    "#DDCC77",
    "#CC6677",
    "#882255",
    "#AA4499",
    "#353535",
)

# Ring geometry in units of the outer radius
RING_OUTER_RADIUS: float = 1.0
RING_WIDTH: float = 0.3
# Radius of label anchors for each placement
INSIDE_LABEL_RADIUS: float = RING_OUTER_RADIUS - RING_WIDTH / 2
OUTSIDE_LABEL_RADIUS: float = RING_OUTER_RADIUS + 0.15

# Characters per line for legend and bar labels
LABEL_WRAP_WIDTH: int = 30

# Responses below this count are folded into "Other" by the driver
DEFAULT_RARE_THRESHOLD: int = 0

DEFAULT_FIGURE_DPI: int = 700
DEFAULT_FIGURE_FORMAT: str = "tiff"
DEFAULT_FIGURE_WIDTH: float = 6.0
DEFAULT_FIGURE_HEIGHT: float = 4.0

T = TypeVar("T")


def _parse_env(
    env: Mapping[str, str], name: str, cast: Callable[[str], T], default: T
) -> T:
    raw_val = env.get(name)
    if not raw_val:
        return default
    try:
        parsed = cast(raw_val)
    except ValueError:
        logger.warning("Invalid %s value '%s'; using default %s", name, raw_val, default)
        return default
    if isinstance(parsed, float) and not math.isfinite(parsed):
        logger.warning("Ignoring %s=%s (must be a finite number)", name, raw_val)
        return default
    if isinstance(parsed, (int, float)) and parsed <= 0:
        logger.warning("Ignoring %s=%s (must be positive)", name, raw_val)
        return default
    return parsed


@dataclass(frozen=True, slots=True)
class DriverConfig:
    """Where survey exports are read from and how figures are written."""

    data_path: Path
    figure_path: Path
    dpi: int = DEFAULT_FIGURE_DPI
    figure_format: str = DEFAULT_FIGURE_FORMAT
    width: float = DEFAULT_FIGURE_WIDTH
    height: float = DEFAULT_FIGURE_HEIGHT

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "DriverConfig":
        """Build a config from ``DATA_PATH``, ``FIGURE_PATH`` and ``FIGURE_*``.

        *env* defaults to :data:`os.environ`. Missing paths fall back to the
        current directory.
        """

        env = os.environ if env is None else env
        return cls(
            data_path=Path(env.get("DATA_PATH") or "."),
            figure_path=Path(env.get("FIGURE_PATH") or "."),
            dpi=_parse_env(env, "FIGURE_DPI", int, DEFAULT_FIGURE_DPI),
            figure_format=(env.get("FIGURE_FORMAT") or DEFAULT_FIGURE_FORMAT).lower(),
            width=_parse_env(env, "FIGURE_WIDTH", float, DEFAULT_FIGURE_WIDTH),
            height=_parse_env(env, "FIGURE_HEIGHT", float, DEFAULT_FIGURE_HEIGHT),
        )
