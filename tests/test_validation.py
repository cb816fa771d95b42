"""Tests for nucleotide alphabet validation."""

import pytest

from codon_translator.core.validation import (
    InvalidSequenceError,
    invalid_characters,
    is_valid,
    normalize_sequence,
)


class TestIsValid:
    @pytest.mark.parametrize("sequence", ["ATGC", "atgc", "AtGc", "GGGCCCAAATTT", "a", "TTAGGC"])
    def test_accepts_dna_in_any_case(self, sequence):
        assert is_valid(sequence)

    def test_empty_is_valid(self):
        assert is_valid("")

    @pytest.mark.parametrize("sequence", ["ATBX", "AUG", "ATGN", "ATG C", "ATG\n", "12", "ATG-"])
    def test_rejects_foreign_characters(self, sequence):
        assert not is_valid(sequence)

    def test_does_not_mutate_argument(self):
        sequence = "atgc"
        assert is_valid(sequence)
        assert sequence == "atgc"


def test_invalid_characters_first_appearance_order():
    assert invalid_characters("AXTBXu") == ["X", "B", "u"]
    assert invalid_characters("acgt") == []


def test_normalize_strips_and_uppercases():
    assert normalize_sequence("  atgTTt\r\n") == "ATGTTT"
    assert normalize_sequence("") == ""


def test_invalid_sequence_error_is_value_error():
    err = InvalidSequenceError("ATBX", ["B", "X"])
    assert isinstance(err, ValueError)
    assert err.characters == ["B", "X"]
    assert "'B'" in str(err)
