"""Nucleotide alphabet validation."""
from __future__ import annotations

from typing import List

VALID_BASES = frozenset("ATCG")


class InvalidSequenceError(ValueError):
    """Raised by callers that refuse to translate a sequence with foreign characters."""

    def __init__(self, sequence: str, characters: List[str]):
        self.sequence = sequence
        self.characters = characters
        shown = ", ".join(repr(c) for c in characters)
        super().__init__(f"Input contains invalid DNA bases ({shown}); must be A, T, C, or G")


def is_valid(sequence: str) -> bool:
    """Return True if every character is A, T, C or G, ignoring case. Empty input is valid."""
    return all(base.upper() in VALID_BASES for base in sequence)


def invalid_characters(sequence: str) -> List[str]:
    """Distinct offending characters in order of first appearance."""
    seen: List[str] = []
    for base in sequence:
        if base.upper() not in VALID_BASES and base not in seen:
            seen.append(base)
    return seen


def normalize_sequence(raw: str) -> str:
    # Strip line terminators and surrounding blanks; the translator expects uppercase.
    return raw.strip().upper()
