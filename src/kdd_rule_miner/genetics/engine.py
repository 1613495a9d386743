"""Generational loop of the rule-mining genetic algorithm."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from ..utils.logging import get_logger
from ..utils.progress import progress
from .chromosome import Chromosome
from .fitness import FitnessEvaluator
from .operators import (
    correct_population,
    crossover,
    deduplicate,
    elitism,
    mutate,
    random_fill,
)
from .results import RankedRule, rank_population, select_top

logger = get_logger(__name__)


@dataclass(frozen=True)
class GAParameters:
    """Fixed sizes and rates of one run."""

    population_size: int = 20
    generations: int = 100
    mutation_rate: float = 0.05
    top_k: int = 10

    def __post_init__(self) -> None:
        if self.population_size <= 0 or self.population_size % 4:
            raise ValueError(f"population_size must be a positive multiple of 4, got {self.population_size}")
        if self.generations < 0:
            raise ValueError(f"generations must be non-negative, got {self.generations}")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ValueError(f"mutation_rate must lie in [0, 1], got {self.mutation_rate}")
        if self.top_k <= 0:
            raise ValueError(f"top_k must be positive, got {self.top_k}")

    @property
    def crossover_pairs(self) -> int:
        return self.population_size // 4


@dataclass
class MiningResult:
    rules: List[RankedRule]
    summary: List[float] = field(default_factory=list)
    population: List[Chromosome] = field(default_factory=list)


class GeneticRuleMiner:
    """Evolve a population of rules and report the best ones."""

    def __init__(
        self,
        evaluator: FitnessEvaluator,
        parameters: Optional[GAParameters] = None,
        rng: Optional[random.Random] = None,
        show_progress: bool = False,
    ) -> None:
        self.evaluator = evaluator
        self.parameters = parameters or GAParameters()
        self.rng = rng or random.Random()
        self.show_progress = show_progress

    def initial_population(self) -> List[Chromosome]:
        population = random_fill([], self.parameters.population_size, self.rng)
        return correct_population(population)

    def step(self, population: List[Chromosome], summary: List[float]) -> List[Chromosome]:
        """Run one generation and return its replacement population."""

        survivors = elitism(population, self.evaluator, summary)
        children = crossover(population, self.parameters.crossover_pairs, self.rng)
        children = mutate(children, self.parameters.mutation_rate, self.rng)
        merged = deduplicate(survivors + children)
        merged = deduplicate(correct_population(merged))
        next_population = random_fill(merged, self.parameters.population_size, self.rng)
        self._check_population(next_population)
        return next_population

    def finalize(self, population: List[Chromosome]) -> List[RankedRule]:
        unique = deduplicate(population)
        if not unique:
            raise RuntimeError("Final population is empty")
        return select_top(rank_population(unique, self.evaluator), self.parameters.top_k)

    def run(self) -> MiningResult:
        population = self.initial_population()
        self._check_population(population)
        summary: List[float] = []
        generations = progress(
            range(self.parameters.generations),
            desc="generations",
            unit="gen",
            disable=not self.show_progress,
        )
        for generation in generations:
            population = self.step(population, summary)
            logger.debug(
                "generation",
                index=generation,
                mean_fitness=summary[-1],
            )
        rules = self.finalize(population)
        logger.info(
            "mining_finished",
            generations=len(summary),
            best_fitness=rules[0].fitness,
            rules=len(rules),
        )
        return MiningResult(rules=rules, summary=summary, population=population)

    def _check_population(self, population: List[Chromosome]) -> None:
        size = self.parameters.population_size
        if len(population) != size or len(deduplicate(population)) != size:
            raise RuntimeError(
                f"Population collapsed to {len(deduplicate(population))} unique members; expected {size}"
            )


__all__ = ["GAParameters", "GeneticRuleMiner", "MiningResult"]
