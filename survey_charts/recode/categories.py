"""Frequency tables for categorical survey columns."""
from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Mapping

import pandas as pd

from survey_charts.recode.columns import require_columns

logger = logging.getLogger(__name__)

OTHER_LABEL = "Other"


def count_categories(table: pd.DataFrame, column: str) -> Dict[str, int]:
    """Tally the non-empty cells of *column* by exact string match.

    The returned mapping keeps the order in which categories first appear.
    Missing cells are skipped along with empty strings. A multi-select cell
    (a set, list or tuple of labels) counts once for each selected label.
    """

    require_columns(table, [column])
    counts: Counter[str] = Counter()
    for value in table[column]:
        if isinstance(value, (list, tuple, set, frozenset)):
            labels = [str(v) for v in value]
        elif isinstance(value, str):
            labels = [value]
        elif pd.isna(value):
            continue
        else:
            labels = [str(value)]
        for label in labels:
            if label != "":
                counts[label] += 1
    logger.debug("Counted %d categories in column %s", len(counts), column)
    return dict(counts)


def bucket_rare_categories(counts: Mapping[str, int], threshold: int) -> Dict[str, int]:
    """Fold categories with fewer than *threshold* responses into ``"Other"``.

    Categories at or above the threshold pass through in their original
    order. An existing ``"Other"`` keeps its position and absorbs the rare
    counts; otherwise ``"Other"`` is appended last. Total count is
    preserved, and a threshold of 0 returns the counts unchanged.
    """

    if threshold < 0:
        raise ValueError(f"threshold must be >= 0, got {threshold}")

    kept: Dict[str, int] = {}
    folded = 0
    n_folded = 0
    for label, count in counts.items():
        if count < threshold and label != OTHER_LABEL:
            folded += count
            n_folded += 1
        else:
            kept[label] = count

    if n_folded:
        kept[OTHER_LABEL] = kept.get(OTHER_LABEL, 0) + folded
        logger.debug(
            "Bucketed %d categories (%d responses) into '%s'",
            n_folded,
            folded,
            OTHER_LABEL,
        )
    return kept
