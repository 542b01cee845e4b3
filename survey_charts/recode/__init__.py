"""Cleaning and recoding of raw survey responses."""
from __future__ import annotations

from survey_charts.recode.categories import OTHER_LABEL, bucket_rare_categories, count_categories
from survey_charts.recode.columns import (
    ColumnNameResult,
    propose_column_name,
    rename_columns_by_codes,
    rename_columns_by_entries,
    require_columns,
)
from survey_charts.recode.labels import wrap_long_labels
from survey_charts.recode.multiselect import (
    DEFAULT_SENTINEL,
    binarize_multi_select,
    exclude_empty_rows,
    mark_multi_select,
)
from survey_charts.recode.prefix import (
    apply_prefix_recode,
    recode_likert,
    shorten_long_responses,
    strip_descriptions,
)
from survey_charts.recode.respondents import filter_respondents

__all__ = [
    "DEFAULT_SENTINEL",
    "OTHER_LABEL",
    "ColumnNameResult",
    "apply_prefix_recode",
    "binarize_multi_select",
    "bucket_rare_categories",
    "count_categories",
    "exclude_empty_rows",
    "filter_respondents",
    "mark_multi_select",
    "propose_column_name",
    "recode_likert",
    "rename_columns_by_codes",
    "rename_columns_by_entries",
    "require_columns",
    "shorten_long_responses",
    "strip_descriptions",
    "wrap_long_labels",
]
