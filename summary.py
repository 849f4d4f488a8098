"""CLI helper to print PnL per period for one or every frequency."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from pnlchart.aggregation import Frequency
from pnlchart.ingest import load_observations_csv
from pnlchart.report import ViewMode, render_table
from pnlchart.sample_data import sample_observations
from pnlchart.series import build_series


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Summarise PnL by day/week/month/quarter/year")
    parser.add_argument("--csv", help="CSV with dt,daily_pnl_usd columns (default: sample data)")
    parser.add_argument(
        "--frequency",
        choices=[f.value for f in Frequency] + ["all"],
        default="all",
        help="Bucketing frequency",
    )
    parser.add_argument("--view-mode", choices=[v.value for v in ViewMode], default=ViewMode.COMBINED.value)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(message)s")

    observations = load_observations_csv(Path(args.csv)) if args.csv else sample_observations()
    frequencies = list(Frequency) if args.frequency == "all" else [Frequency.coerce(args.frequency)]
    sections = []
    for frequency in frequencies:
        points = build_series(observations, frequency)
        sections.extend([f"By {frequency.value}", render_table(points, args.view_mode), ""])
    print("\n".join(sections).rstrip())


if __name__ == "__main__":
    main()
