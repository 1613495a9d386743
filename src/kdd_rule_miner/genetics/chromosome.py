"""Fixed-width chromosome encoding for protocol/service/flag rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple, Union

CHROMOSOME_LENGTH = 14


@dataclass(frozen=True)
class FieldSpec:
    """Half-open bit range ``[start, stop)`` holding one rule field."""

    name: str
    start: int
    stop: int
    maximum: int

    @property
    def width(self) -> int:
        return self.stop - self.start


FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("protocol_type", 0, 2, 2),
    FieldSpec("service", 2, 9, 64),
    FieldSpec("flag", 9, 13, 8),
    FieldSpec("outcome", 13, 14, 1),
)
FIELD_BY_NAME: Dict[str, FieldSpec] = {spec.name: spec for spec in FIELDS}

FieldRef = Union[str, FieldSpec]


def _resolve(field: FieldRef) -> FieldSpec:
    if isinstance(field, FieldSpec):
        return field
    try:
        return FIELD_BY_NAME[field]
    except KeyError:
        raise KeyError(f"Unknown chromosome field: {field}") from None


@dataclass(frozen=True)
class Chromosome:
    """Immutable 14-bit rule, most significant bit first."""

    bits: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.bits) != CHROMOSOME_LENGTH:
            raise ValueError(f"Chromosome needs {CHROMOSOME_LENGTH} bits, got {len(self.bits)}")
        if any(bit not in (0, 1) for bit in self.bits):
            raise ValueError(f"Chromosome bits must be 0 or 1: {self.bits}")

    @classmethod
    def from_value(cls, value: int) -> "Chromosome":
        value %= 1 << CHROMOSOME_LENGTH
        return cls(tuple((value >> (CHROMOSOME_LENGTH - 1 - i)) & 1 for i in range(CHROMOSOME_LENGTH)))

    @classmethod
    def from_bitstring(cls, text: str) -> "Chromosome":
        text = text.strip()
        if len(text) != CHROMOSOME_LENGTH or set(text) - {"0", "1"}:
            raise ValueError(f"Expected {CHROMOSOME_LENGTH} characters of 0/1, got {text!r}")
        return cls(tuple(int(char) for char in text))

    @classmethod
    def from_fields(cls, values: Mapping[str, int]) -> "Chromosome":
        chromosome = cls.from_value(0)
        for name, value in values.items():
            chromosome = encode(chromosome, name, value)
        return chromosome

    @property
    def value(self) -> int:
        result = 0
        for bit in self.bits:
            result = (result << 1) | bit
        return result

    def flip(self, position: int) -> "Chromosome":
        bits = list(self.bits)
        bits[position] ^= 1
        return Chromosome(tuple(bits))

    def __str__(self) -> str:
        return "".join(str(bit) for bit in self.bits)


def decode(chromosome: Chromosome, field: FieldRef) -> int:
    """Read a field's bit range as an unsigned integer."""

    spec = _resolve(field)
    result = 0
    for bit in chromosome.bits[spec.start : spec.stop]:
        result = (result << 1) | bit
    return result


def encode(chromosome: Chromosome, field: FieldRef, value: int) -> Chromosome:
    """Return a copy of ``chromosome`` with ``value`` truncated into the field."""

    spec = _resolve(field)
    value %= 1 << spec.width
    field_bits = tuple((value >> (spec.width - 1 - i)) & 1 for i in range(spec.width))
    bits = chromosome.bits[: spec.start] + field_bits + chromosome.bits[spec.stop :]
    return Chromosome(bits)


def decode_all(chromosome: Chromosome, fields: Iterable[FieldSpec] = FIELDS) -> Dict[str, int]:
    return {spec.name: decode(chromosome, spec) for spec in fields}


__all__ = [
    "CHROMOSOME_LENGTH",
    "Chromosome",
    "FIELDS",
    "FIELD_BY_NAME",
    "FieldSpec",
    "decode",
    "decode_all",
    "encode",
]
