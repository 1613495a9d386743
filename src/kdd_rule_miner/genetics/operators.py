"""Selection, recombination and repair operators over rule populations."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Iterable, List, Sequence, Tuple

import numpy as np

from .chromosome import CHROMOSOME_LENGTH, FIELDS, Chromosome, decode, encode

Evaluator = Callable[[Chromosome], float]


@dataclass(frozen=True)
class FitnessRecord:
    index: int
    fitness: float


def rank(population: Sequence[Chromosome], evaluator: Evaluator) -> Tuple[List[FitnessRecord], float]:
    """Score every member and sort by descending fitness.

    Ties keep population order. Also returns the mean over the whole population.
    """

    records = [FitnessRecord(index, evaluator(member)) for index, member in enumerate(population)]
    records.sort(key=lambda record: record.fitness, reverse=True)
    mean = float(np.mean([record.fitness for record in records])) if records else 0.0
    return records, mean


def elitism(population: Sequence[Chromosome], evaluator: Evaluator, summary: List[float]) -> List[Chromosome]:
    """Keep the fitter half and append the population mean to ``summary``."""

    records, mean = rank(population, evaluator)
    summary.append(mean)
    return [population[record.index] for record in records[: len(population) // 2]]


def crossover_pair(first: Chromosome, second: Chromosome, offset: int) -> Tuple[Chromosome, Chromosome]:
    """Swap the tails ``[offset, CHROMOSOME_LENGTH)`` of two parents."""

    if not 0 < offset < CHROMOSOME_LENGTH:
        raise ValueError(f"Crossover offset must lie in 1..{CHROMOSOME_LENGTH - 1}, got {offset}")
    return (
        Chromosome(first.bits[:offset] + second.bits[offset:]),
        Chromosome(second.bits[:offset] + first.bits[offset:]),
    )


def crossover(population: Sequence[Chromosome], pairs: int, rng: random.Random) -> List[Chromosome]:
    children: List[Chromosome] = []
    for _ in range(pairs):
        first = population[rng.randrange(len(population))]
        second = population[rng.randrange(len(population))]
        offset = rng.randrange(1, CHROMOSOME_LENGTH)
        children.extend(crossover_pair(first, second, offset))
    return children


def mutate(population: Iterable[Chromosome], rate: float, rng: random.Random) -> List[Chromosome]:
    """Flip one random bit in each member with probability ``rate``."""

    mutated: List[Chromosome] = []
    for member in population:
        if rng.random() < rate:
            member = member.flip(rng.randrange(CHROMOSOME_LENGTH))
        mutated.append(member)
    return mutated


def correct(chromosome: Chromosome) -> Chromosome:
    """Wrap every out-of-domain field back with ``value % (maximum + 1)``."""

    for spec in FIELDS:
        value = decode(chromosome, spec)
        if value > spec.maximum:
            chromosome = encode(chromosome, spec, value % (spec.maximum + 1))
    return chromosome


def correct_population(population: Iterable[Chromosome]) -> List[Chromosome]:
    return [correct(member) for member in population]


def deduplicate(population: Iterable[Chromosome]) -> List[Chromosome]:
    seen = set()
    unique: List[Chromosome] = []
    for member in population:
        if member.value in seen:
            continue
        seen.add(member.value)
        unique.append(member)
    return unique


def random_chromosome(rng: random.Random) -> Chromosome:
    return Chromosome(tuple(rng.getrandbits(1) for _ in range(CHROMOSOME_LENGTH)))


def random_fill(population: Sequence[Chromosome], size: int, rng: random.Random) -> List[Chromosome]:
    """Top ``population`` up to ``size`` with new, range-corrected members.

    Draws that collide with an existing member are discarded and re-rolled.
    """

    filled = deduplicate(population)
    seen = {member.value for member in filled}
    while len(filled) < size:
        candidate = correct(random_chromosome(rng))
        if candidate.value in seen:
            continue
        seen.add(candidate.value)
        filled.append(candidate)
    return filled


__all__ = [
    "FitnessRecord",
    "correct",
    "correct_population",
    "crossover",
    "crossover_pair",
    "deduplicate",
    "elitism",
    "mutate",
    "random_chromosome",
    "random_fill",
    "rank",
]
