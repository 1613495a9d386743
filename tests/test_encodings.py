import json
from pathlib import Path

import pytest

from kdd_rule_miner.data.encodings import load_encodings
from kdd_rule_miner.genetics.chromosome import Chromosome

ENCODINGS = Path(__file__).resolve().parents[1] / "data" / "encodings.json"


def test_bundled_table_covers_every_field_domain():
    table = load_encodings(ENCODINGS)
    assert len(table.sections["protocol_types"]) == 3
    assert len(table.sections["service_ports"]) == 65
    assert len(table.sections["tcp_flags"]) == 9
    assert table.label("outcome", 1) == "attack"


def test_describe_labels_every_field():
    table = load_encodings(ENCODINGS)
    chromosome = Chromosome.from_fields({"protocol_type": 1, "service": 22, "flag": 7, "outcome": 0})
    assert table.describe(chromosome) == {
        "protocol_type": "tcp",
        "service": "http",
        "flag": "SF",
        "outcome": "normal",
    }


def test_unknown_code_raises_key_error():
    table = load_encodings(ENCODINGS)
    with pytest.raises(KeyError):
        table.label("flag", 12)


def test_malformed_tables_are_rejected(tmp_path):
    path = tmp_path / "encodings.json"
    path.write_text(json.dumps({"protocol_types": {}, "service_ports": {}, "tcp_flags": {}}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_encodings(path)
    path.write_text(
        json.dumps({"protocol_types": [], "service_ports": {}, "tcp_flags": {}, "attack": {}}),
        encoding="utf-8",
    )
    with pytest.raises(ValueError):
        load_encodings(path)
    with pytest.raises(FileNotFoundError):
        load_encodings(tmp_path / "missing.json")
