"""Turn multi-select answers into 0/1 indicator columns."""
from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from survey_charts.recode.columns import require_columns

logger = logging.getLogger(__name__)

DEFAULT_SENTINEL = "Non-applicable"


def _is_answered(value, sentinel_skip: str) -> bool:
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) > 0
    if isinstance(value, str):
        return value != "" and value != sentinel_skip
    return not pd.isna(value)


def mark_multi_select(
    table: pd.DataFrame,
    columns: Iterable[str],
    sentinel_skip: str = DEFAULT_SENTINEL,
) -> pd.DataFrame:
    """First pass of :func:`binarize_multi_select`.

    Each target column becomes nullable ``Int64``: ``1`` where the cell holds
    an answer, ``<NA>`` where it is empty or equal to *sentinel_skip*. Callers
    that need to tell "no answer" apart from "not selected" stop here.
    """

    targets = require_columns(table, columns)
    out = table.copy()
    for column in targets:
        answered = table[column].map(lambda v: _is_answered(v, sentinel_skip)).astype(bool)
        out[column] = pd.Series(1, index=table.index, dtype="Int64").where(answered, pd.NA)
    return out


def binarize_multi_select(
    table: pd.DataFrame,
    columns: Iterable[str],
    sentinel_skip: str = DEFAULT_SENTINEL,
) -> pd.DataFrame:
    """Convert multi-select *columns* into integer 0/1 indicators.

    A cell is ``1`` when it is non-empty and not *sentinel_skip*; everything
    else ends up ``0``. Other columns are copied through untouched.

    Raises
    ------
    ColumnNotFoundError
        If any of *columns* is absent.
    """

    targets = list(columns)
    marked = mark_multi_select(table, targets, sentinel_skip)
    for column in targets:
        marked[column] = marked[column].fillna(0).astype(int)
    logger.debug("Binarized %d multi-select columns", len(targets))
    return marked


def exclude_empty_rows(table: pd.DataFrame) -> pd.DataFrame:
    """Drop rows whose cells are all ``0``, ``""`` or missing.

    The text ``"0"`` counts as ``0``, matching how exports store unticked
    indicators.
    """

    def _is_filled(value) -> bool:
        if isinstance(value, (list, tuple, set, frozenset)):
            return len(value) > 0
        if isinstance(value, str):
            return value not in ("", "0")
        if pd.isna(value):
            return False
        return value != 0

    if table.empty:
        return table.copy()
    keep = table.apply(lambda row: any(_is_filled(v) for v in row), axis=1)
    return table.loc[keep.astype(bool)].copy()
