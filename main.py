"""Render the PnL history chart for one frequency and view mode."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from pnlchart.aggregation import Frequency, Observation
from pnlchart.config import AppConfig, load_config
from pnlchart.ingest import load_observations_csv
from pnlchart.report import ViewMode, render_table, save_outputs
from pnlchart.sample_data import sample_observations
from pnlchart.series import build_series


def load_observations(cfg: AppConfig) -> List[Observation]:
    if cfg.data.source == "csv":
        return load_observations_csv(Path(cfg.data.path))
    return sample_observations()


def run(cfg: AppConfig) -> int:
    observations = load_observations(cfg)
    logging.info("Loaded %d observation(s) from %s", len(observations), cfg.data.source)
    points = build_series(observations, cfg.chart.frequency)
    written = save_outputs(
        points,
        Path(cfg.out_dir),
        cfg.chart.frequency,
        cfg.chart.view_mode,
        plot=cfg.chart.plot,
        title=cfg.chart.title,
        y_ticks=cfg.chart.y_ticks,
    )
    for kind, path in written.items():
        logging.info("Wrote %s: %s", kind, path)
    print(render_table(points, cfg.chart.view_mode))
    return len(points)


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Render a PnL history chart")
    ap.add_argument("--config", default="config.yaml")
    ap.add_argument("--csv", help="CSV with dt,daily_pnl_usd columns (overrides config data)")
    ap.add_argument("--frequency", choices=[f.value for f in Frequency])
    ap.add_argument("--view-mode", choices=[v.value for v in ViewMode])
    ap.add_argument("--out-dir")
    ap.add_argument("--no-plot", action="store_true")
    ap.add_argument("--log-level")
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    cfg = load_config(Path(args.config))
    if not args.log_level:
        logging.getLogger().setLevel(cfg.log_level)
    if args.csv:
        cfg.data.source, cfg.data.path = "csv", args.csv
    if args.frequency:
        cfg.chart.frequency = Frequency.coerce(args.frequency)
    if args.view_mode:
        cfg.chart.view_mode = ViewMode.coerce(args.view_mode)
    if args.out_dir:
        cfg.out_dir = args.out_dir
    if args.no_plot:
        cfg.chart.plot = False
    run(cfg)


if __name__ == "__main__":
    main()
