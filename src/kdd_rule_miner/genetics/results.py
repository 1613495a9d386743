"""Ranking and truncation of the final population."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .chromosome import Chromosome
from .operators import Evaluator, rank


@dataclass(frozen=True)
class RankedRule:
    chromosome: Chromosome
    fitness: float


def rank_population(population: Sequence[Chromosome], evaluator: Evaluator) -> List[RankedRule]:
    """Full descending-fitness order of ``population``; nothing is dropped."""

    records, _ = rank(population, evaluator)
    return [RankedRule(population[record.index], record.fitness) for record in records]


def select_top(ranked_population: Sequence[RankedRule], k: int) -> List[RankedRule]:
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    return list(ranked_population[:k])


__all__ = ["RankedRule", "rank_population", "select_top"]
