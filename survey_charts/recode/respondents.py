"""Row filters used by the report driver."""
from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from survey_charts.recode.columns import require_columns

logger = logging.getLogger(__name__)


def filter_respondents(table: pd.DataFrame, column: str, accepted: Iterable[str]) -> pd.DataFrame:
    """Keep rows whose *column* value is one of *accepted*.

    Used to narrow a report to a sub-population, e.g. only respondents who
    said they contribute to the project.
    """

    require_columns(table, [column])
    accepted_set = set(accepted)
    kept = table.loc[table[column].isin(accepted_set)].reset_index(drop=True)
    logger.info("Kept %d of %d respondents where %s in %s", len(kept), len(table), column, sorted(accepted_set))
    return kept
