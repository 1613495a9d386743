"""Connection-record dataset and the class totals used for scoring."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence, Tuple

import pandas as pd

from ..utils.logging import get_logger

RULE_COLUMNS: Tuple[str, ...] = ("protocol_type", "service", "flag")
OUTCOME_COLUMN = "outcome"
REQUIRED_COLUMNS: Tuple[str, ...] = RULE_COLUMNS + (OUTCOME_COLUMN,)
COLUMN_DOMAINS: Dict[str, int] = {
    "protocol_type": 2,
    "service": 64,
    "flag": 8,
    "outcome": 2,
}
OUTCOME_CLASSES = 3

logger = get_logger(__name__)


def validate_class_totals(totals: Sequence[int]) -> Tuple[int, ...]:
    """Check that every rule outcome has usable fitness denominators."""

    totals = tuple(int(value) for value in totals)
    if len(totals) != OUTCOME_CLASSES:
        raise ValueError(f"Expected {OUTCOME_CLASSES} class totals, got {len(totals)}")
    if any(value < 0 for value in totals):
        raise ValueError(f"Class totals must be non-negative: {totals}")
    grand_total = sum(totals)
    # Rules only ever predict outcome 0 or 1.
    for outcome in (0, 1):
        if totals[outcome] == 0:
            raise ValueError(f"Class total for outcome {outcome} is zero")
        if grand_total - totals[outcome] == 0:
            raise ValueError(f"No records outside outcome {outcome}; complement total is zero")
    return totals


class DatasetStatistics:
    """Read-only view over labelled connection records."""

    def __init__(self, frame: pd.DataFrame, class_totals: Optional[Sequence[int]] = None) -> None:
        missing = set(REQUIRED_COLUMNS) - set(frame.columns)
        if missing:
            raise ValueError(f"Missing required columns: {sorted(missing)}")
        self.frame = _validate_frame(frame.loc[:, list(REQUIRED_COLUMNS)])
        counts = self.frame[OUTCOME_COLUMN].value_counts()
        observed = [int(counts.get(outcome, 0)) for outcome in range(OUTCOME_CLASSES)]
        if class_totals is None:
            class_totals = observed
        self.class_totals = validate_class_totals(class_totals)
        short = [outcome for outcome in range(OUTCOME_CLASSES) if self.class_totals[outcome] < observed[outcome]]
        if short:
            raise ValueError(
                f"Class totals {self.class_totals} are below the observed counts {tuple(observed)} for outcomes {short}"
            )
        self.grand_total = sum(self.class_totals)
        grouped = self.frame.groupby(list(REQUIRED_COLUMNS)).size()
        self._index: Dict[Tuple[int, int, int], Dict[int, int]] = {}
        for (protocol, service, flag, outcome), count in grouped.items():
            key = (int(protocol), int(service), int(flag))
            self._index.setdefault(key, {})[int(outcome)] = int(count)

    def __len__(self) -> int:
        return len(self.frame)

    def outcome_counts(self, protocol: int, service: int, flag: int) -> Dict[int, int]:
        """Outcome histogram of the records matching all three rule fields."""

        return dict(self._index.get((protocol, service, flag), {}))

    def count_matching(self, **predicates: int) -> int:
        """Count rows where every named column equals its value."""

        unknown = set(predicates) - set(REQUIRED_COLUMNS)
        if unknown:
            raise KeyError(f"Unknown columns: {sorted(unknown)}")
        mask = pd.Series(True, index=self.frame.index)
        for column, value in predicates.items():
            mask &= self.frame[column] == value
        return int(mask.sum())


def _validate_frame(frame: pd.DataFrame) -> pd.DataFrame:
    for column in REQUIRED_COLUMNS:
        if not pd.api.types.is_integer_dtype(frame[column]):
            raise ValueError(f"Column {column} must hold integer codes, got {frame[column].dtype}")
        maximum = COLUMN_DOMAINS[column]
        out_of_range = frame[(frame[column] < 0) | (frame[column] > maximum)]
        if not out_of_range.empty:
            raise ValueError(
                f"Column {column} has {len(out_of_range)} values outside 0..{maximum}"
            )
    return frame.reset_index(drop=True)


def load_dataset(
    path: Path,
    columns: Optional[Mapping[str, str]] = None,
    class_totals: Optional[Sequence[int]] = None,
) -> DatasetStatistics:
    """Load the four rule columns of a connection-record CSV."""

    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")
    rename = dict(columns or {})
    wanted = set(REQUIRED_COLUMNS) | set(rename)
    frame = pd.read_csv(path, usecols=lambda name: name in wanted)
    frame = frame.rename(columns=rename)
    statistics = DatasetStatistics(frame, class_totals)
    logger.info(
        "dataset_loaded",
        path=str(path),
        rows=len(statistics),
        class_totals=list(statistics.class_totals),
    )
    return statistics


__all__ = [
    "DatasetStatistics",
    "REQUIRED_COLUMNS",
    "RULE_COLUMNS",
    "load_dataset",
    "validate_class_totals",
]
