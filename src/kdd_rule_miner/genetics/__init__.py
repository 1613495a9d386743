"""Genetic algorithm core: codec, fitness, operators and driver."""

from .chromosome import CHROMOSOME_LENGTH, FIELDS, Chromosome, FieldSpec, decode, decode_all, encode
from .engine import GAParameters, GeneticRuleMiner, MiningResult
from .fitness import FitnessEvaluator
from .results import RankedRule, rank_population, select_top

__all__ = [
    "CHROMOSOME_LENGTH",
    "Chromosome",
    "FIELDS",
    "FieldSpec",
    "FitnessEvaluator",
    "GAParameters",
    "GeneticRuleMiner",
    "MiningResult",
    "RankedRule",
    "decode",
    "decode_all",
    "encode",
    "rank_population",
    "select_top",
]
