"""Command-line driver for survey charts.

Loads one survey export, recodes a single-choice question, and writes a ring
chart image plus a Markdown summary of the counts. Machine-specific
locations come from the environment (or a ``.env`` file):

    DATA_PATH=/path/to/data/folder
    FIGURE_PATH=/path/to/figures

Keeping the bootstrap here lets the library modules be imported by tests
and notebooks without side-effects.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from survey_charts.exceptions import ColumnNotFoundError, EmptyDistributionError
from survey_charts.loader import load_survey_export
from survey_charts.recode.prefix import RecodeRule, apply_prefix_recode
from survey_charts.recode.respondents import filter_respondents
from survey_charts.reporting import config
from survey_charts.reporting.config import DriverConfig
from survey_charts.reporting.models import LabelPlacement, LegendPosition
from survey_charts.reporting.render import (
    render_chart_summary,
    render_ring_chart,
    save_figure,
)
from survey_charts.reporting.rings import ring_chart_from_column

logger = logging.getLogger("survey_charts")


def _load_rules(path: Optional[str]) -> List[RecodeRule]:
    """Read ``[[prefix, replacement], ...]`` from a JSON file."""
    if not path:
        return []
    with open(path, encoding="utf-8") as fh:
        raw = json.load(fh)
    if not isinstance(raw, list) or not all(
        isinstance(pair, list) and len(pair) == 2 and all(isinstance(x, str) for x in pair)
        for pair in raw
    ):
        raise ValueError(f"{path} must hold a JSON list of [prefix, replacement] pairs")
    return [(prefix, replacement) for prefix, replacement in raw]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="survey-charts",
        description="Render a ring chart for one survey question.",
    )
    ap.add_argument("--subfolder", required=True, help="Folder under DATA_PATH holding the export.")
    ap.add_argument("--filename", required=True, help="Tab-separated export file name.")
    ap.add_argument("--encoding", default=None, help="File encoding (default: pandas' choice).")
    ap.add_argument("--column", required=True, help="Question column to chart.")
    ap.add_argument("--title", default=None, help="Chart title (default: the column name).")
    ap.add_argument("--rules", default=None, help="JSON file of [prefix, replacement] recode rules.")
    ap.add_argument(
        "--threshold",
        type=int,
        default=config.DEFAULT_RARE_THRESHOLD,
        help='Fold answers with fewer responses than this into "Other".',
    )
    ap.add_argument(
        "--legend",
        choices=[p.value for p in LegendPosition],
        default=LegendPosition.RIGHT.value,
    )
    ap.add_argument(
        "--labels",
        choices=[p.value for p in LabelPlacement],
        default=LabelPlacement.INSIDE.value,
    )
    ap.add_argument("--output-name", default=None, help="Figure file stem (default: the column name).")
    ap.add_argument(
        "--contributors-only",
        action="store_true",
        help="Only include respondents who answered --contributor-value to --contributor-column.",
    )
    ap.add_argument("--contributor-column", default="Contributor")
    ap.add_argument("--contributor-value", action="append", default=None)
    return ap


def run(args: argparse.Namespace, cfg: DriverConfig) -> Path:
    """Execute one chart run and return the written figure path."""

    table = load_survey_export(cfg.data_path, args.subfolder, args.filename, args.encoding)

    if args.contributors_only:
        accepted = args.contributor_value or ["Yes"]
        table = filter_respondents(table, args.contributor_column, accepted)

    rules = _load_rules(args.rules)
    if rules:
        table = apply_prefix_recode(table, args.column, rules)

    spec = ring_chart_from_column(
        table,
        args.column,
        title=args.title,
        threshold=args.threshold,
        legend_position=args.legend,
        label_placement=args.labels,
    )

    name = args.output_name or args.column
    fig = render_ring_chart(spec, width=cfg.width, height=cfg.height)
    figure_file = save_figure(fig, name, cfg)

    summary_file = cfg.figure_path / f"{name}.md"
    summary_file.write_text(render_chart_summary(spec), encoding="utf-8")
    logger.info("Wrote summary %s", summary_file)
    return figure_file


def main(argv: Optional[Sequence[str]] = None) -> None:  # pragma: no cover — manual run path
    """Parse arguments, configure logging and run the driver."""

    load_dotenv()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=os.environ.get("SURVEY_LOG_LEVEL", "INFO"),
    )

    args = build_parser().parse_args(argv)
    cfg = DriverConfig.from_env()

    try:
        run(args, cfg)
    except (FileNotFoundError, ColumnNotFoundError, EmptyDistributionError, ValueError) as exc:
        logger.error("Chart generation failed: %s", exc)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
