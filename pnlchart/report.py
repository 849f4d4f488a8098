"""Render chart points as a matplotlib figure, a text table and CSV/JSON files."""

from __future__ import annotations

import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np

from .aggregation import Frequency
from .series import ChartPoint, format_amount, points_to_frame

NO_DATA = "No data available"

POSITIVE_COLOR = "#2eb85c"
NEGATIVE_COLOR = "#ef4444"
CUMULATIVE_COLOR = "tab:blue"


class ViewMode(str, Enum):
    CUMULATIVE = "cumulative"
    PERIODIC = "periodic"
    COMBINED = "combined"

    @classmethod
    def coerce(cls, value: Union["ViewMode", str]) -> "ViewMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise ValueError(f"Unsupported view mode: {value!r}")


def render_chart(
    points: Sequence[ChartPoint],
    view_mode: Union[ViewMode, str],
    path: Path,
    *,
    title: str = "PnL Performance",
    y_ticks: Optional[Sequence[float]] = None,
) -> Optional[Path]:
    """Draw ``points`` to ``path`` (PNG); returns ``None`` when there is nothing to draw."""
    view_mode = ViewMode.coerce(view_mode)
    if not points:
        logging.info("%s; skipping chart %s", NO_DATA, path)
        return None

    frame = points_to_frame(points)
    x = np.arange(len(frame))
    fig = plt.figure(figsize=(max(8, len(frame) * 0.35), 5))
    ax = plt.gca()
    ax.grid(axis="y", linestyle="--", alpha=0.4)
    ax.axhline(0, color="#9ca3af", linewidth=1)

    if view_mode is not ViewMode.CUMULATIVE:
        ax.bar(x, frame["positive_part"], width=0.6, color=POSITIVE_COLOR, label="Positive P&L")
        ax.bar(x, frame["negative_part"], width=0.6, color=NEGATIVE_COLOR, label="Negative P&L")
    if view_mode is not ViewMode.PERIODIC:
        ax.plot(x, frame["cumulative_value"], color=CUMULATIVE_COLOR, linewidth=2, label="Cumulative P&L")

    if y_ticks:
        ax.set_yticks(list(y_ticks))
        ax.set_ylim(min(y_ticks), max(y_ticks))
    ax.set_xticks(x)
    ax.set_xticklabels(frame["label"], rotation=45, ha="right", fontsize=8)
    ax.set_title(title)
    ax.legend()

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=120, bbox_inches="tight")
    plt.close(fig)
    return path


def render_table(points: Sequence[ChartPoint], view_mode: Union[ViewMode, str] = ViewMode.COMBINED) -> str:
    """Tooltip contents for every point, one line per point."""
    view_mode = ViewMode.coerce(view_mode)
    if not points:
        return NO_DATA

    headers = ["Period", "P&L"]
    if view_mode is not ViewMode.PERIODIC:
        headers.append("Cumulative P&L")

    def row_cells(point: ChartPoint) -> List[str]:
        cells = [point.label, point.formatted_period]
        if view_mode is not ViewMode.PERIODIC:
            cells.append(point.formatted_cumulative)
        return cells

    table_rows = [headers] + [row_cells(p) for p in points]
    widths = [max(len(str(col)) for col in column) for column in zip(*table_rows)]

    def fmt_line(values: Sequence[str]) -> str:
        return " | ".join(val.ljust(width) for val, width in zip(values, widths))

    lines = [fmt_line(headers), fmt_line(["-" * w for w in widths])]
    lines.extend(fmt_line(r) for r in table_rows[1:])
    return "\n".join(lines)


def summarize(points: Sequence[ChartPoint], frequency: Union[Frequency, str], view_mode: Union[ViewMode, str]) -> Dict[str, object]:
    frequency = Frequency.coerce(frequency)
    view_mode = ViewMode.coerce(view_mode)
    summary: Dict[str, object] = {
        "frequency": frequency.value,
        "view_mode": view_mode.value,
        "buckets": len(points),
        "total": format_amount(points[-1].cumulative_value) if points else format_amount(0),
    }
    if points:
        best = max(points, key=lambda p: p.period_value)
        worst = min(points, key=lambda p: p.period_value)
        summary["best_period"] = {"label": best.label, "pnl": float(best.period_value)}
        summary["worst_period"] = {"label": worst.label, "pnl": float(worst.period_value)}
    return summary


def save_outputs(
    points: Sequence[ChartPoint],
    out_dir: Path,
    frequency: Union[Frequency, str],
    view_mode: Union[ViewMode, str],
    *,
    plot: bool = True,
    title: str = "PnL Performance",
    y_ticks: Optional[Sequence[float]] = None,
) -> Dict[str, Path]:
    frequency = Frequency.coerce(frequency)
    view_mode = ViewMode.coerce(view_mode)
    os.makedirs(out_dir, exist_ok=True)
    stem = f"pnl_{frequency.value}"
    written: Dict[str, Path] = {}

    csv_path = Path(out_dir) / f"{stem}.csv"
    points_to_frame(points).to_csv(csv_path, index=False)
    written["csv"] = csv_path

    summary_path = Path(out_dir) / f"{stem}_summary.json"
    with summary_path.open("w", encoding="utf-8") as fh:
        json.dump(summarize(points, frequency, view_mode), fh, ensure_ascii=False, indent=2)
    written["summary"] = summary_path

    if plot:
        chart_path = render_chart(
            points,
            view_mode,
            Path(out_dir) / f"{stem}_{view_mode.value}.png",
            title=title,
            y_ticks=y_ticks,
        )
        if chart_path is not None:
            written["chart"] = chart_path
    return written


__all__ = [
    "NO_DATA",
    "ViewMode",
    "render_chart",
    "render_table",
    "save_outputs",
    "summarize",
]
