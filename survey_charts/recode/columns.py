"""Column lookup and renaming helpers for response tables.

Survey exports carry no static schema, so every operation that selects a
column by name goes through :func:`require_columns` first and surfaces a
:class:`ColumnNotFoundError` instead of pandas' bare ``KeyError``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

import pandas as pd

from survey_charts.exceptions import AmbiguousColumnError, ColumnNotFoundError

logger = logging.getLogger(__name__)

__all__ = [
    "ColumnNameResult",
    "propose_column_name",
    "rename_columns_by_codes",
    "rename_columns_by_entries",
    "require_columns",
]


def require_columns(table: pd.DataFrame, columns: Iterable[str]) -> List[str]:
    """Return *columns* as a list, raising if any is absent from *table*."""

    wanted = list(columns)
    for column in wanted:
        if column not in table.columns:
            raise ColumnNotFoundError(column, table.columns)
    return wanted


def _is_blank(value) -> bool:
    if isinstance(value, str):
        return value == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):  # collections are never blank here
        return False


@dataclass(frozen=True, slots=True)
class ColumnNameResult:
    """Outcome of :func:`propose_column_name`: exactly one of value/error."""

    column: str
    value: Optional[str] = None
    error: Optional[AmbiguousColumnError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the proposed name or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def propose_column_name(series: pd.Series) -> ColumnNameResult:
    """Propose a column name from the entries of *series*.

    Some exports put the option label in every selected cell of a
    multi-select column, leaving the header as an opaque code. The label is
    usable as a name only when every non-empty cell holds the same value.
    """

    column = str(series.name)
    unique_vals: List[str] = []
    for value in series:
        if _is_blank(value):
            continue
        text = str(value)
        if text not in unique_vals:
            unique_vals.append(text)

    if len(unique_vals) != 1:
        return ColumnNameResult(column=column, error=AmbiguousColumnError(column, unique_vals))
    return ColumnNameResult(column=column, value=unique_vals[0])


def rename_columns_by_entries(table: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of *table* with each column renamed after its entries.

    Raises the first :class:`AmbiguousColumnError` found.
    """

    names = [propose_column_name(table[column]).unwrap() for column in table.columns]
    renamed = table.copy()
    renamed.columns = names
    logger.debug("Renamed %d columns from their entries", len(names))
    return renamed


def rename_columns_by_codes(table: pd.DataFrame, codes: Mapping[str, str]) -> pd.DataFrame:
    """Rename columns through an old→new *codes* mapping.

    Codes naming absent columns are skipped.
    """

    present = {old: new for old, new in codes.items() if old in table.columns}
    skipped = len(codes) - len(present)
    if skipped:
        logger.debug("Skipping %d rename codes with no matching column", skipped)
    return table.rename(columns=present)
