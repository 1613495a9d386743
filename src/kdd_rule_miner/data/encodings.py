"""Human-readable labels for decoded rule fields."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping

from ..genetics.chromosome import FIELDS, Chromosome, decode
from ..utils.io import load_json

# Chromosome field name -> section of the encoding table.
SECTION_BY_FIELD: Dict[str, str] = {
    "protocol_type": "protocol_types",
    "service": "service_ports",
    "flag": "tcp_flags",
    "outcome": "attack",
}


@dataclass(frozen=True)
class EncodingTable:
    """Maps each field's integer code (stored as a string key) to a label."""

    sections: Mapping[str, Mapping[str, str]]

    def label(self, field: str, code: int) -> str:
        section = self.sections[SECTION_BY_FIELD[field]]
        try:
            return section[str(code)]
        except KeyError:
            raise KeyError(f"No label for {field}={code}") from None

    def describe(self, chromosome: Chromosome) -> Dict[str, str]:
        return {spec.name: self.label(spec.name, decode(chromosome, spec)) for spec in FIELDS}


def load_encodings(path: Path) -> EncodingTable:
    """Load and validate an encoding table from JSON."""

    if not path.exists():
        raise FileNotFoundError(f"Encoding table not found: {path}")
    raw = load_json(path)
    if not isinstance(raw, dict):
        raise ValueError(f"Encoding table must be a JSON object: {path}")
    sections: Dict[str, Dict[str, str]] = {}
    for section in SECTION_BY_FIELD.values():
        if section not in raw:
            raise ValueError(f"Encoding table is missing section: {section}")
        entries = raw[section]
        if not isinstance(entries, dict):
            raise ValueError(f"Encoding section {section} must map codes to labels")
        sections[section] = {str(code): str(label) for code, label in entries.items()}
    return EncodingTable(sections=sections)


__all__ = ["EncodingTable", "SECTION_BY_FIELD", "load_encodings"]
