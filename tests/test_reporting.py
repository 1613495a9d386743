import json
from pathlib import Path

import pandas as pd
import pytest

from kdd_rule_miner.data.encodings import load_encodings
from kdd_rule_miner.evaluation.plotting import plot_fitness_summary
from kdd_rule_miner.evaluation.reporting import format_rules, rules_frame, write_rules_report
from kdd_rule_miner.genetics.chromosome import Chromosome
from kdd_rule_miner.genetics.engine import GAParameters, MiningResult
from kdd_rule_miner.genetics.results import RankedRule

ENCODINGS = Path(__file__).resolve().parents[1] / "data" / "encodings.json"


def _make_result() -> MiningResult:
    rules = [
        RankedRule(Chromosome.from_fields({"protocol_type": 1, "service": 22, "flag": 7, "outcome": 0}), 0.75),
        RankedRule(Chromosome.from_fields({"protocol_type": 0, "service": 14, "flag": 7, "outcome": 1}), 0.5),
    ]
    return MiningResult(rules=rules, summary=[0.1, 0.2, 0.3], population=[rule.chromosome for rule in rules])


def test_rules_frame_columns_and_labels():
    frame = rules_frame(_make_result().rules, load_encodings(ENCODINGS))
    assert list(frame["rank"]) == [1, 2]
    assert list(frame["service_label"]) == ["http", "ecr_i"]
    assert list(frame["fitness"]) == [0.75, 0.5]
    assert "protocol_type" in frame.columns


def test_rules_frame_without_encodings_has_codes_only():
    frame = rules_frame(_make_result().rules)
    assert "service_label" not in frame.columns
    assert list(frame["service"]) == [22, 14]


def test_format_rules_prints_labels():
    text = format_rules(_make_result().rules, load_encodings(ENCODINGS))
    assert "http" in text
    assert "attack" in text
    assert "0.7500" in text


def test_write_rules_report(tmp_path):
    write_rules_report(
        tmp_path,
        _make_result(),
        load_encodings(ENCODINGS),
        parameters=GAParameters(),
        notes={"seed": 7},
    )
    rules = pd.read_csv(tmp_path / "rules.csv")
    assert len(rules) == 2
    summary = pd.read_csv(tmp_path / "summary.csv")
    assert list(summary["generation"]) == [0, 1, 2]
    payload = json.loads((tmp_path / "run.json").read_text(encoding="utf-8"))
    assert payload["parameters"]["population_size"] == 20
    assert payload["summary"] == [0.1, 0.2, 0.3]
    markdown = (tmp_path / "summary.md").read_text(encoding="utf-8")
    assert "**seed**: 7" in markdown


def test_plot_fitness_summary(tmp_path):
    path = plot_fitness_summary([0.0, 0.25, 0.5], tmp_path / "charts" / "fitness.png")
    assert path.exists()
    assert path.stat().st_size > 0
    with pytest.raises(ValueError):
        plot_fitness_summary([], tmp_path / "empty.png")
