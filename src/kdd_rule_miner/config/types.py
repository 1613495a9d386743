"""Configuration dataclasses and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


@dataclass
class PathsConfig:
    """Filesystem paths used by a mining run."""

    dataset_csv: Path
    encodings_json: Path
    reports_dir: Path
    chart_path: Path


@dataclass
class DatasetConfig:
    """Dataset column mapping and class sizes used as fitness denominators."""

    class_totals: Optional[List[int]] = None
    columns: Dict[str, str] = field(default_factory=dict)


@dataclass
class LoggingConfig:
    level: str = "INFO"
    json: bool = False


@dataclass
class Config:
    """Top-level configuration."""

    paths: PathsConfig
    dataset: DatasetConfig
    logging: LoggingConfig
    seed: Optional[int] = None
    show_progress: bool = True


def resolve_paths(config: Config, base: Path) -> Config:
    """Anchor relative paths at ``base``."""

    for name in ("dataset_csv", "encodings_json", "reports_dir", "chart_path"):
        value: Path = getattr(config.paths, name)
        if not value.is_absolute():
            setattr(config.paths, name, base / value)
    return config
