"""Collapse long free-text answers into short canonical labels."""
from __future__ import annotations

import logging
from typing import Mapping, Sequence, Tuple

import pandas as pd

from survey_charts.recode.columns import require_columns

logger = logging.getLogger(__name__)

RecodeRule = Tuple[str, str]


def _validate_rules(rules: Sequence[RecodeRule]) -> list[RecodeRule]:
    checked: list[RecodeRule] = []
    for match_prefix, replacement in rules:
        if not match_prefix:
            raise ValueError("Recode rules need a non-empty match prefix")
        checked.append((match_prefix, replacement))
    return checked


def _is_textual(series: pd.Series) -> bool:
    if isinstance(series.dtype, pd.CategoricalDtype):
        return all(isinstance(c, str) for c in series.cat.categories)
    if series.dtype != object and not pd.api.types.is_string_dtype(series.dtype):
        return False
    return bool(series.map(lambda v: isinstance(v, str) or _is_missing(v)).all())


def _is_missing(value) -> bool:
    if isinstance(value, (list, tuple, set, frozenset)):
        return False
    return bool(pd.isna(value))


def _recode_series(series: pd.Series, rules: Sequence[RecodeRule]) -> pd.Series:
    # Rules run one after another so a replacement can feed a later rule.
    out = series.astype(object) if isinstance(series.dtype, pd.CategoricalDtype) else series
    for match_prefix, replacement in rules:
        hits = out.map(lambda v, p=match_prefix: isinstance(v, str) and v != "" and v.startswith(p))
        if hits.any():
            logger.debug(
                "Rule '%s' -> '%s' matched %d cells in %s",
                match_prefix,
                replacement,
                int(hits.sum()),
                series.name,
            )
            out = out.mask(hits, replacement)
    return out


def apply_prefix_recode(
    table: pd.DataFrame, column: str, rules: Sequence[RecodeRule]
) -> pd.DataFrame:
    """Replace cells of *column* that start with a rule's prefix.

    *rules* is an ordered sequence of ``(match_prefix, replacement)`` pairs.
    Empty cells and cells matching no rule are left unchanged. The input
    table is not modified.

    Raises
    ------
    ColumnNotFoundError
        If *column* is absent.
    TypeError
        If *column* holds non-text values. Categorical columns count as
        text when every category is a string; they come back as plain
        object columns.
    ValueError
        If a rule has an empty prefix.
    """

    require_columns(table, [column])
    checked = _validate_rules(rules)
    if not _is_textual(table[column]):
        raise TypeError(f"Column '{column}' is not textual; prefix recoding needs strings")

    out = table.copy()
    out[column] = _recode_series(table[column], checked)
    return out


def shorten_long_responses(table: pd.DataFrame, rules: Sequence[RecodeRule]) -> pd.DataFrame:
    """Apply *rules* to every textual column of *table*."""

    checked = _validate_rules(rules)
    out = table.copy()
    for column in table.columns:
        if _is_textual(table[column]):
            out[column] = _recode_series(table[column], checked)
    return out


def strip_descriptions(table: pd.DataFrame) -> pd.DataFrame:
    """Keep only the text before the first ``:`` in every textual cell.

    Exports often render options as ``"Label: longer description"``.
    """

    def _strip(value):
        if isinstance(value, str):
            return value.split(":", 1)[0]
        return value

    return table.apply(lambda col: col.map(_strip))


def recode_likert(table: pd.DataFrame, codes: Mapping[str, int]) -> pd.DataFrame:
    """Map every cell through *codes*; unmapped cells become ``<NA>``."""

    def _code(value):
        if isinstance(value, str) and value in codes:
            return codes[value]
        return pd.NA

    return pd.DataFrame(
        {column: table[column].map(_code).astype("Int64") for column in table.columns},
        index=table.index,
    )
