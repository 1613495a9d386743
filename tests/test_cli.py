from pathlib import Path

import numpy as np
import pandas as pd
from typer.testing import CliRunner

from kdd_rule_miner.cli import app

ROOT = Path(__file__).resolve().parents[1]

runner = CliRunner()


def _write_config(tmp_path: Path) -> Path:
    rng = np.random.default_rng(8)
    rows = 300
    frame = pd.DataFrame(
        {
            "protocol_type": np.concatenate([[0], rng.integers(0, 3, rows)]),
            "service": np.concatenate([[0], rng.integers(1, 10, rows)]),
            "flag": np.concatenate([[0], rng.integers(0, 9, rows)]),
            "outcome": np.concatenate([[0], rng.integers(0, 3, rows)]),
        }
    )
    frame.to_csv(tmp_path / "records.csv", index=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "\n".join(
            [
                "seed: 13",
                "show_progress: false",
                "paths:",
                f"  dataset_csv: {tmp_path / 'records.csv'}",
                f"  encodings_json: {ROOT / 'data' / 'encodings.json'}",
                f"  reports_dir: {tmp_path / 'reports'}",
                f"  chart_path: {tmp_path / 'reports' / 'chart.png'}",
                "dataset:",
                "  class_totals: null",
                "logging:",
                "  level: WARNING",
            ]
        ),
        encoding="utf-8",
    )
    return config_path


def test_score_command(tmp_path):
    config_path = _write_config(tmp_path)
    result = runner.invoke(app, ["score", "0", "0", "0", "0", "--config-path", str(config_path)])
    assert result.exit_code == 0, result.output
    assert "support=1" in result.output
    assert "rule=00000000000000" in result.output


def test_score_rejects_out_of_domain_codes(tmp_path):
    config_path = _write_config(tmp_path)
    result = runner.invoke(app, ["score", "3", "0", "0", "0", "--config-path", str(config_path)])
    assert result.exit_code != 0


def test_decode_command(tmp_path):
    config_path = _write_config(tmp_path)
    result = runner.invoke(app, ["decode", "01001011001111", "--config-path", str(config_path)])
    assert result.exit_code == 0, result.output
    assert "tcp" in result.output
    assert "SF" in result.output
    assert "attack" in result.output


def test_mine_command_writes_reports(tmp_path):
    config_path = _write_config(tmp_path)
    out_dir = tmp_path / "out"
    result = runner.invoke(app, ["mine", "--config-path", str(config_path), "--out-dir", str(out_dir)])
    assert result.exit_code == 0, result.output
    assert (out_dir / "rules.csv").exists()
    assert (out_dir / "summary.md").exists()
    assert (tmp_path / "reports" / "chart.png").exists()
    summary = pd.read_csv(out_dir / "summary.csv")
    assert len(summary) == 100
    rules = pd.read_csv(out_dir / "rules.csv")
    assert len(rules) == 10
