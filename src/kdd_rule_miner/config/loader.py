"""Configuration loader utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .types import Config, DatasetConfig, LoggingConfig, PathsConfig, resolve_paths

REQUIRED_SECTIONS = ("paths", "dataset")


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def load_config(path: Path, base: Optional[Path] = None) -> Config:
    """Load a configuration file and return a :class:`Config`.

    Relative paths are resolved against ``base``, defaulting to the parent of
    the directory holding the file (the project root for ``configs/*.yaml``).
    """

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    raw = _load_yaml(path)
    if not isinstance(raw, dict):
        raise ValueError(f"Configuration file is empty or invalid: {path}")
    missing = [section for section in REQUIRED_SECTIONS if section not in raw]
    if missing:
        raise ValueError(f"Configuration is missing sections: {missing}")

    path_payload = {key: Path(value) for key, value in raw["paths"].items()}
    paths = PathsConfig(**path_payload)
    dataset_payload = dict(raw["dataset"] or {})
    totals = dataset_payload.get("class_totals")
    if totals is not None:
        if len(totals) != 3:
            raise ValueError(f"dataset.class_totals needs 3 entries, got {len(totals)}")
        dataset_payload["class_totals"] = [int(value) for value in totals]
    dataset_payload["columns"] = dict(dataset_payload.get("columns") or {})
    dataset = DatasetConfig(**dataset_payload)
    logging_config = LoggingConfig(**(raw.get("logging") or {}))

    config = Config(
        paths=paths,
        dataset=dataset,
        logging=logging_config,
        seed=raw.get("seed"),
        show_progress=bool(raw.get("show_progress", True)),
    )
    return resolve_paths(config, base if base is not None else path.resolve().parent.parent)


__all__ = ["load_config"]
