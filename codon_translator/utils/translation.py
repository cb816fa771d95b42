#!/usr/bin/env python3
"""Amino-acid symbol helpers backed by Biopython's IUPAC data and NCBI tables."""
from __future__ import annotations

from typing import Dict

from Bio.Data import CodonTable as NCBICodonTable
from Bio.Data.IUPACData import protein_letters_1to3, protein_letters_3to1

from codon_translator.core.codon_table import STOP

# NCBI translation table 1 = Standard genetic code.
STANDARD_TABLE_ID = 1
STOP_LETTER = "*"
UNKNOWN_LETTER = "X"


def to_one_letter(symbol: str) -> str:
    """Map a three-letter symbol (or STOP/UNKNOWN) to its one-letter code."""
    if symbol == STOP:
        return STOP_LETTER
    return protein_letters_3to1.get(symbol, UNKNOWN_LETTER)


def ncbi_forward_table(table_id: int = STANDARD_TABLE_ID) -> Dict[str, str]:
    """Biopython's unambiguous DNA table rendered with three-letter symbols."""
    table = NCBICodonTable.unambiguous_dna_by_id[table_id]
    forward = {codon.upper(): protein_letters_1to3[aa] for codon, aa in table.forward_table.items()}
    for codon in table.stop_codons:
        forward[codon.upper()] = STOP
    return forward
