"""Unit tests for reading survey exports."""
from __future__ import annotations

from pathlib import Path

import pytest

from survey_charts.loader import load_survey_export


def _write_export(root: Path, text: str, encoding: str = "utf-8") -> None:
    folder = root / "survey_data"
    folder.mkdir(parents=True, exist_ok=True)
    (folder / "responses.tsv").write_text(text, encoding=encoding)


def test_reads_cells_as_strings(tmp_path: Path) -> None:
    _write_export(tmp_path, "Q1 (why?)\tAge\tNA\nJob\t25\t\n\t031\tNA\n")
    df = load_survey_export(tmp_path, "survey_data", "responses.tsv")

    assert list(df.columns) == ["Q1 (why?)", "Age", "NA"]
    assert df["Q1 (why?)"].tolist() == ["Job", ""]
    # leading zeros kept, nothing parsed as a number
    assert df["Age"].tolist() == ["25", "031"]
    # neither blanks nor "NA" become missing values
    assert df["NA"].tolist() == ["", "NA"]


def test_respects_encoding(tmp_path: Path) -> None:
    _write_export(tmp_path, "Pays\nFrançais\n", encoding="utf-16")
    df = load_survey_export(tmp_path, "survey_data", "responses.tsv", encoding="utf-16")
    assert df["Pays"].tolist() == ["Français"]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_survey_export(tmp_path, "survey_data", "missing.tsv")
