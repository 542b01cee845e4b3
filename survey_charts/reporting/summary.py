"""Summary statistics for numeric survey columns."""
from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, Optional

import pandas as pd


def calculate_mode(values: Iterable) -> Optional[Any]:
    """Return the most frequent non-missing value.

    Ties go to the value seen first. Returns ``None`` when nothing is left
    after dropping missing values.
    """

    counts = Counter(v for v in values if not pd.isna(v))
    if not counts:
        return None
    # most_common() lists equal counts in first-seen order
    return counts.most_common(1)[0][0]


def custom_summary(table: pd.DataFrame) -> pd.DataFrame:
    """Return Mean, Median, Mode and Sum rows for each column of *table*.

    Missing values are ignored; results are rounded to two decimals.
    """

    numeric = table.apply(pd.to_numeric, errors="coerce").astype("Float64")
    modes = {}
    for column in numeric.columns:
        mode = calculate_mode(numeric[column].tolist())
        modes[column] = round(float(mode), 2) if mode is not None else pd.NA

    return pd.DataFrame(
        [
            numeric.mean(skipna=True).round(2),
            numeric.median(skipna=True).round(2),
            pd.Series(modes, dtype="Float64"),
            numeric.sum(skipna=True).round(2),
        ],
        index=["Mean", "Median", "Mode", "Sum"],
    )
