"""Reporting utilities for mined rules."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Dict, Optional, Sequence

import pandas as pd

from ..data.encodings import EncodingTable
from ..genetics.chromosome import FIELDS, decode_all
from ..genetics.engine import GAParameters, MiningResult
from ..genetics.results import RankedRule
from ..utils.io import ensure_dir, save_csv, save_json


def rules_frame(rules: Sequence[RankedRule], encodings: Optional[EncodingTable] = None) -> pd.DataFrame:
    """Tabulate ranked rules with their codes and, if available, labels."""

    rows = []
    for position, rule in enumerate(rules, start=1):
        row: Dict[str, object] = {"rank": position, "bits": str(rule.chromosome)}
        row.update(decode_all(rule.chromosome))
        if encodings is not None:
            for name, label in encodings.describe(rule.chromosome).items():
                row[f"{name}_label"] = label
        row["fitness"] = rule.fitness
        rows.append(row)
    columns = ["rank", "bits"] + [spec.name for spec in FIELDS]
    if encodings is not None:
        columns += [f"{spec.name}_label" for spec in FIELDS]
    columns.append("fitness")
    return pd.DataFrame(rows, columns=columns)


def format_rules(rules: Sequence[RankedRule], encodings: EncodingTable) -> str:
    frame = rules_frame(rules, encodings)
    labels = frame[["rank"] + [f"{spec.name}_label" for spec in FIELDS] + ["fitness"]]
    labels.columns = ["rank"] + [spec.name for spec in FIELDS] + ["fitness"]
    return labels.to_string(index=False, float_format=lambda value: f"{value:.4f}")


def summary_frame(summary: Sequence[float]) -> pd.DataFrame:
    return pd.DataFrame({"generation": range(len(summary)), "mean_fitness": list(summary)})


def write_rules_report(
    out_dir: Path,
    result: MiningResult,
    encodings: Optional[EncodingTable] = None,
    parameters: Optional[GAParameters] = None,
    notes: Optional[Dict[str, object]] = None,
) -> None:
    """Persist the mined rules and fitness history to CSV, Markdown and JSON."""

    ensure_dir(out_dir)
    rules = rules_frame(result.rules, encodings)
    save_csv(out_dir / "rules.csv", rules)
    save_csv(out_dir / "summary.csv", summary_frame(result.summary))

    summary_lines = ["# Rule Mining Summary", "", "## Top rules", ""]
    summary_lines += ["```", rules.to_string(index=False), "```"]
    if result.summary:
        summary_lines.append("\n## Fitness")
        summary_lines.append(f"- **generations**: {len(result.summary)}")
        summary_lines.append(f"- **first_mean_fitness**: {result.summary[0]:.4f}")
        summary_lines.append(f"- **last_mean_fitness**: {result.summary[-1]:.4f}")
    if notes:
        summary_lines.append("\n## Notes")
        for key, value in notes.items():
            summary_lines.append(f"- **{key}**: {value}")
    (out_dir / "summary.md").write_text("\n".join(summary_lines), encoding="utf-8")

    payload: Dict[str, object] = {
        "rules": [{"bits": str(rule.chromosome), "fitness": rule.fitness} for rule in result.rules],
        "summary": list(result.summary),
    }
    if parameters is not None:
        payload["parameters"] = asdict(parameters)
    save_json(out_dir / "run.json", payload)


__all__ = ["format_rules", "rules_frame", "summary_frame", "write_rules_report"]
