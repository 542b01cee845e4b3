"""Read tab-separated survey exports into response tables."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)


def load_survey_export(
    data_dir: Union[str, Path],
    subfolder: str,
    filename: str,
    encoding: Optional[str] = None,
) -> pd.DataFrame:
    """Load ``<data_dir>/<subfolder>/<filename>`` as a table of strings.

    The export is tab-separated with a header row. Every cell is read as
    text; empty cells stay ``""`` rather than becoming missing values, and
    header names are not normalised (pandas still suffixes duplicates with
    ``.1``, ``.2``...).

    Call like so::

        df = load_survey_export(cfg.data_path, "survey_data", "responses.tsv")
        df = load_survey_export(cfg.data_path, "survey_data", "responses.tsv", encoding="utf-16")
    """

    path = Path(data_dir) / subfolder / filename
    if not path.is_file():
        raise FileNotFoundError(f"Survey export not found: {path}")

    kwargs = {}
    if encoding is not None:
        kwargs["encoding"] = encoding

    table = pd.read_csv(
        path,
        sep="\t",
        header=0,
        dtype=str,
        keep_default_na=False,
        **kwargs,
    )
    logger.info("Loaded %d responses with %d columns from %s", len(table), len(table.columns), path)
    return table
