"""Typer CLI for the rule miner."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Optional

import typer

from .config import Config, load_config
from .data.dataset import DatasetStatistics, load_dataset
from .data.encodings import load_encodings
from .evaluation.plotting import plot_fitness_summary
from .evaluation.reporting import format_rules, write_rules_report
from .genetics.chromosome import Chromosome, FIELDS, decode_all
from .genetics.engine import GAParameters, GeneticRuleMiner
from .genetics.fitness import FitnessEvaluator
from .utils.logging import configure_logging, get_logger, log_config

app = typer.Typer(add_completion=False)

DEFAULT_CONFIG = Path("configs/config.yaml")


def _setup(config_path: Path) -> Config:
    try:
        config = load_config(config_path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(str(exc)) from exc
    configure_logging(config.logging.level, json_output=config.logging.json)
    return config


def _load_statistics(config: Config) -> DatasetStatistics:
    return load_dataset(
        config.paths.dataset_csv,
        columns=config.dataset.columns,
        class_totals=config.dataset.class_totals,
    )


@app.command()
def mine(
    config_path: Path = typer.Option(DEFAULT_CONFIG, help="Path to configuration file"),
    out_dir: Optional[Path] = typer.Option(None, help="Directory for rule reports"),
    chart: bool = typer.Option(True, "--chart/--no-chart", help="Render the fitness chart"),
) -> None:
    """Evolve rules over the dataset and print the best ones."""

    config = _setup(config_path)
    logger = get_logger(__name__)
    log_config(logger, {"config_path": str(config_path), "seed": config.seed})
    encodings = load_encodings(config.paths.encodings_json)
    statistics = _load_statistics(config)
    parameters = GAParameters()
    miner = GeneticRuleMiner(
        FitnessEvaluator(statistics),
        parameters=parameters,
        rng=random.Random(config.seed),
        show_progress=config.show_progress,
    )
    result = miner.run()

    typer.echo(format_rules(result.rules, encodings))
    target_dir = out_dir or config.paths.reports_dir
    write_rules_report(
        target_dir,
        result,
        encodings,
        parameters=parameters,
        notes={"dataset": config.paths.dataset_csv, "seed": config.seed},
    )
    typer.echo(f"Wrote rule report → {target_dir}")
    if chart:
        path = plot_fitness_summary(result.summary, config.paths.chart_path)
        typer.echo(f"Wrote fitness chart → {path}")


@app.command()
def score(
    protocol: int = typer.Argument(..., help="protocol_type code"),
    service: int = typer.Argument(..., help="service code"),
    flag: int = typer.Argument(..., help="flag code"),
    outcome: int = typer.Argument(..., help="predicted outcome (0 or 1)"),
    config_path: Path = typer.Option(DEFAULT_CONFIG, help="Path to configuration file"),
) -> None:
    """Print the fitness and support of a single rule."""

    values = {"protocol_type": protocol, "service": service, "flag": flag, "outcome": outcome}
    for spec in FIELDS:
        if not 0 <= values[spec.name] <= spec.maximum:
            raise typer.BadParameter(f"{spec.name} must lie in 0..{spec.maximum}, got {values[spec.name]}")
    config = _setup(config_path)
    statistics = _load_statistics(config)
    evaluator = FitnessEvaluator(statistics)
    chromosome = Chromosome.from_fields(values)
    support = statistics.count_matching(protocol_type=protocol, service=service, flag=flag)
    typer.echo(f"rule={chromosome} fitness={evaluator.evaluate(chromosome):.6f} support={support}")


@app.command()
def decode(
    bits: str = typer.Argument(..., help="14-character bit string"),
    config_path: Path = typer.Option(DEFAULT_CONFIG, help="Path to configuration file"),
) -> None:
    """Decode a chromosome bit string into field codes and labels."""

    try:
        chromosome = Chromosome.from_bitstring(bits)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    config = _setup(config_path)
    encodings = load_encodings(config.paths.encodings_json)
    for name, value in decode_all(chromosome).items():
        try:
            label = encodings.label(name, value)
        except KeyError:
            label = "n/a"
        typer.echo(f"{name:15} {value:3d} {label}")


if __name__ == "__main__":
    app()
