"""YAML configuration for the chart CLIs."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from .aggregation import Frequency
from .report import ViewMode

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


def _section(raw: Dict[str, object], name: str) -> Dict[str, object]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section {name!r} must be a mapping")
    return section


@dataclass
class DataConfig:
    source: str = "sample"
    path: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, object]) -> "DataConfig":
        source = str(raw.get("source", "sample") or "sample").lower()
        if source not in ("sample", "csv"):
            raise ValueError(f"Unsupported data source: {source!r}")
        path = str(raw.get("path", "") or "")
        if source == "csv" and not path:
            raise ValueError("data.path is required when data.source is 'csv'")
        return cls(source=source, path=path)


@dataclass
class ChartConfig:
    frequency: Frequency = Frequency.DAY
    view_mode: ViewMode = ViewMode.COMBINED
    title: str = "PnL Performance"
    y_ticks: Optional[List[float]] = None
    plot: bool = True

    @classmethod
    def from_dict(cls, raw: Dict[str, object]) -> "ChartConfig":
        ticks = raw.get("y_ticks")
        return cls(
            frequency=Frequency.coerce(raw.get("frequency", "day") or "day"),
            view_mode=ViewMode.coerce(raw.get("view_mode", "combined") or "combined"),
            title=str(raw.get("title", "PnL Performance")),
            y_ticks=[float(t) for t in ticks] if ticks else None,
            plot=bool(raw.get("plot", True)),
        )


@dataclass
class AppConfig:
    log_level: str = "INFO"
    out_dir: str = "out"
    data: DataConfig = field(default_factory=DataConfig)
    chart: ChartConfig = field(default_factory=ChartConfig)

    @classmethod
    def from_dict(cls, raw: Dict[str, object]) -> "AppConfig":
        general = _section(raw, "general")
        return cls(
            log_level=str(general.get("log_level", "INFO")).upper(),
            out_dir=str(general.get("out_dir", "out") or "out"),
            data=DataConfig.from_dict(_section(raw, "data")),
            chart=ChartConfig.from_dict(_section(raw, "chart")),
        )


def expand_env(text: str) -> str:
    """Replace ``${NAME}`` with the environment value (empty when unset)."""
    return _ENV_PATTERN.sub(lambda m: os.getenv(m.group(1), ""), text)


def load_config(path: Optional[Path]) -> AppConfig:
    if path is None or not Path(path).exists():
        logging.info("Config %s not found; using defaults", path)
        return AppConfig()
    with open(path, "r", encoding="utf-8") as f:
        txt = f.read()
    raw = yaml.safe_load(expand_env(txt)) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must be a mapping at the top level")
    return AppConfig.from_dict(raw)


__all__ = [
    "AppConfig",
    "ChartConfig",
    "DataConfig",
    "expand_env",
    "load_config",
]
