"""Unit tests for label wrapping and respondent filtering."""
from __future__ import annotations

import pandas as pd
import pytest

from survey_charts.exceptions import ColumnNotFoundError
from survey_charts.recode.labels import wrap_long_labels
from survey_charts.recode.respondents import filter_respondents


def test_wrap_breaks_at_word_boundary() -> None:
    assert wrap_long_labels(["Improve the tools I use"], 10) == ["Improve\nthe tools\nI use"]


def test_wrap_leaves_short_labels_alone() -> None:
    assert wrap_long_labels(["Job", "Fun"], 10) == ["Job", "Fun"]


def test_wrap_never_splits_long_words() -> None:
    assert wrap_long_labels(["Internationalization matters"], 8) == ["Internationalization\nmatters"]


def test_wrap_lines_fit_width() -> None:
    label = "Give back to the community that built the software I rely on"
    wrapped = wrap_long_labels([label], 15)[0]
    assert all(len(line) <= 15 for line in wrapped.split("\n"))
    assert wrapped.replace("\n", " ") == label


def test_wrap_rejects_bad_width() -> None:
    with pytest.raises(ValueError):
        wrap_long_labels(["x"], 0)


def test_filter_respondents() -> None:
    df = pd.DataFrame({"Contributor": ["Yes", "No", "Yes", ""], "q": ["a", "b", "c", "d"]})
    out = filter_respondents(df, "Contributor", ["Yes"])
    assert out["q"].tolist() == ["a", "c"]
    assert out.index.tolist() == [0, 1]


def test_filter_respondents_missing_column() -> None:
    with pytest.raises(ColumnNotFoundError):
        filter_respondents(pd.DataFrame({"q": ["a"]}), "Contributor", ["Yes"])


def test_wrap_keeps_tabs_newlines_and_trailing_space() -> None:
    labels = ["Job\tand fun", "Line1\nLine2", "Trail  "]
    assert wrap_long_labels(labels, 40) == labels


def test_wrap_each_existing_line_separately() -> None:
    assert wrap_long_labels(["Alpha beta\ngamma delta"], 6) == ["Alpha\nbeta\ngamma\ndelta"]
    assert wrap_long_labels(["Job\tand fun"], 8) == ["Job\tand\nfun"]
