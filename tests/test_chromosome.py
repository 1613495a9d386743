import pytest

from kdd_rule_miner.genetics.chromosome import (
    CHROMOSOME_LENGTH,
    FIELDS,
    Chromosome,
    decode,
    decode_all,
    encode,
)


def test_fields_tile_the_chromosome():
    cursor = 0
    for spec in FIELDS:
        assert spec.start == cursor
        assert spec.width > 0
        assert spec.maximum < 2**spec.width
        cursor = spec.stop
    assert cursor == CHROMOSOME_LENGTH
    assert [(spec.start, spec.stop) for spec in FIELDS] == [(0, 2), (2, 9), (9, 13), (13, 14)]


def test_decode_reads_most_significant_bit_first():
    chromosome = Chromosome.from_bitstring("10" + "0000011" + "0101" + "1")
    assert decode_all(chromosome) == {"protocol_type": 2, "service": 3, "flag": 5, "outcome": 1}


def test_encode_round_trip_truncates_to_width():
    base = Chromosome.from_value(0b10110011100101)
    for spec in FIELDS:
        for value in range(2 ** spec.width + 5):
            updated = encode(base, spec.name, value)
            assert decode(updated, spec) == value % 2**spec.width
            for other in FIELDS:
                if other is not spec:
                    assert decode(updated, other) == decode(base, other)


def test_value_round_trip_and_string_form():
    chromosome = Chromosome.from_value(0b01000000100011)
    assert chromosome.value == 0b01000000100011
    assert str(chromosome) == "01000000100011"
    assert Chromosome.from_bitstring(str(chromosome)) == chromosome


def test_from_fields_matches_encode():
    chromosome = Chromosome.from_fields({"protocol_type": 1, "service": 64, "flag": 8, "outcome": 1})
    assert decode_all(chromosome) == {"protocol_type": 1, "service": 64, "flag": 8, "outcome": 1}


def test_flip_returns_new_value():
    chromosome = Chromosome.from_value(0)
    flipped = chromosome.flip(13)
    assert chromosome.value == 0
    assert flipped.value == 1


def test_invalid_chromosomes_are_rejected():
    with pytest.raises(ValueError):
        Chromosome((0, 1, 0))
    with pytest.raises(ValueError):
        Chromosome.from_bitstring("0102")
    with pytest.raises(KeyError):
        decode(Chromosome.from_value(0), "duration")
