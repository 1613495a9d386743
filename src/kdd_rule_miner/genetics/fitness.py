"""Fitness of a rule against dataset-wide class sizes."""

from __future__ import annotations

from typing import Dict

from ..data.dataset import DatasetStatistics
from .chromosome import Chromosome, decode_all


class FitnessEvaluator:
    """Score how well a rule's condition singles out its predicted outcome.

    ``fitness = a / total[o] - b / (grand_total - total[o])`` where ``a`` counts
    matching records labelled ``o`` and ``b`` matching records with any other
    label. Denominators are dataset-wide, so empty matches score ``0.0``.
    """

    def __init__(self, statistics: DatasetStatistics) -> None:
        self.statistics = statistics
        self._cache: Dict[int, float] = {}

    def matches(self, chromosome: Chromosome) -> Dict[int, int]:
        values = decode_all(chromosome)
        return self.statistics.outcome_counts(values["protocol_type"], values["service"], values["flag"])

    def evaluate(self, chromosome: Chromosome) -> float:
        key = chromosome.value
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        outcome = decode_all(chromosome)["outcome"]
        counts = self.matches(chromosome)
        hits = counts.get(outcome, 0)
        misses = sum(count for label, count in counts.items() if label != outcome)
        outcome_total = self.statistics.class_totals[outcome]
        other_total = self.statistics.grand_total - outcome_total
        score = hits / outcome_total - misses / other_total
        self._cache[key] = score
        return score

    __call__ = evaluate


__all__ = ["FitnessEvaluator"]
