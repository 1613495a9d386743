"""I/O helpers for saving and loading artifacts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pandas as pd


def ensure_dir(path: Path) -> None:
    """Ensure that a directory exists."""

    path.mkdir(parents=True, exist_ok=True)


def save_json(path: Path, payload: Dict[str, Any]) -> None:
    """Write a JSON payload with UTF-8 encoding."""

    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)


def load_json(path: Path) -> Dict[str, Any]:
    """Load a JSON dictionary."""

    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def save_csv(path: Path, frame: pd.DataFrame) -> None:
    """Persist a dataframe to CSV without the index."""

    ensure_dir(path.parent)
    frame.to_csv(path, index=False)
