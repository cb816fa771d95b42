"""
Fixed-frame codon translation.

The reading frame always starts at offset 0. Every complete triplet yields
one record, STOP codons included; scanning continues to the end of the
sequence. One or two trailing bases are dropped without a record.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from codon_translator.core.codon_table import UNKNOWN, CodonTable, standard_codon_table
from codon_translator.schemas.translation import TranslationRecord

CODON_LENGTH = 3


def split_codons(sequence: str) -> Tuple[List[str], str]:
    """Return (complete codons, leftover bases)."""
    usable = len(sequence) - len(sequence) % CODON_LENGTH
    codons = [sequence[i:i + CODON_LENGTH] for i in range(0, usable, CODON_LENGTH)]
    return codons, sequence[usable:]


def translate(sequence: str, table: Optional[CodonTable] = None) -> Tuple[TranslationRecord, ...]:
    """
    Translate an uppercase, validated DNA sequence.

    Input is not re-validated here. Codons absent from `table` (only possible
    with a custom, incomplete table) map to UNKNOWN.
    """
    if table is None:
        table = standard_codon_table()
    codons, _ = split_codons(sequence)
    return tuple(
        TranslationRecord(codon=codon, amino_acid=table.get(codon, UNKNOWN))
        for codon in codons
    )


class CodonTranslator:
    """Translator bound to a single codon table."""

    def __init__(self, table: Optional[CodonTable] = None):
        self.table = table if table is not None else standard_codon_table()

    def translate(self, sequence: str) -> Tuple[TranslationRecord, ...]:
        return translate(sequence, self.table)
