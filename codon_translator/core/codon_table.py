"""
Standard genetic code as an immutable codon table.

The table is a literal enumeration of all 64 DNA codons. It is built once
per process by `standard_codon_table()` and shared read-only afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from itertools import product
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

STOP = "STOP"
UNKNOWN = "UNKNOWN"
BASES = "TCAG"

STANDARD_CODONS: Dict[str, str] = {
    # Phenylalanine
    "TTT": "Phe", "TTC": "Phe",
    # Leucine
    "TTA": "Leu", "TTG": "Leu", "CTT": "Leu", "CTC": "Leu", "CTA": "Leu", "CTG": "Leu",
    # Isoleucine
    "ATT": "Ile", "ATC": "Ile", "ATA": "Ile",
    # Methionine (start)
    "ATG": "Met",
    # Valine
    "GTT": "Val", "GTC": "Val", "GTA": "Val", "GTG": "Val",
    # Serine
    "TCT": "Ser", "TCC": "Ser", "TCA": "Ser", "TCG": "Ser", "AGT": "Ser", "AGC": "Ser",
    # Proline
    "CCT": "Pro", "CCC": "Pro", "CCA": "Pro", "CCG": "Pro",
    # Threonine
    "ACT": "Thr", "ACC": "Thr", "ACA": "Thr", "ACG": "Thr",
    # Alanine
    "GCT": "Ala", "GCC": "Ala", "GCA": "Ala", "GCG": "Ala",
    # Tyrosine
    "TAT": "Tyr", "TAC": "Tyr",
    # Stop
    "TAA": STOP, "TAG": STOP, "TGA": STOP,
    # Histidine
    "CAT": "His", "CAC": "His",
    # Glutamine
    "CAA": "Gln", "CAG": "Gln",
    # Asparagine
    "AAT": "Asn", "AAC": "Asn",
    # Lysine
    "AAA": "Lys", "AAG": "Lys",
    # Aspartic acid
    "GAT": "Asp", "GAC": "Asp",
    # Glutamic acid
    "GAA": "Glu", "GAG": "Glu",
    # Cysteine
    "TGT": "Cys", "TGC": "Cys",
    # Tryptophan
    "TGG": "Trp",
    # Arginine
    "CGT": "Arg", "CGC": "Arg", "CGA": "Arg", "CGG": "Arg", "AGA": "Arg", "AGG": "Arg",
    # Glycine
    "GGT": "Gly", "GGC": "Gly", "GGA": "Gly", "GGG": "Gly",
}


def all_codons() -> List[str]:
    """All 64 codons over the DNA alphabet."""
    return ["".join(bases) for bases in product(BASES, repeat=3)]


@dataclass(frozen=True)
class CodonTable:
    """Read-only codon -> amino acid mapping."""
    forward: Mapping[str, str]
    name: str = "Standard"
    _codons_by_aa: Mapping[str, Tuple[str, ...]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        frozen = MappingProxyType({codon.upper(): aa for codon, aa in self.forward.items()})
        grouped: Dict[str, List[str]] = {}
        for codon, aa in frozen.items():
            grouped.setdefault(aa, []).append(codon)
        object.__setattr__(self, "forward", frozen)
        object.__setattr__(
            self,
            "_codons_by_aa",
            MappingProxyType({aa: tuple(codons) for aa, codons in grouped.items()}),
        )

    def lookup(self, codon: str) -> str:
        """Amino acid symbol for an uppercase codon; KeyError if the table lacks it."""
        return self.forward[codon]

    def get(self, codon: str, default: Optional[str] = None) -> Optional[str]:
        return self.forward.get(codon, default)

    def __contains__(self, codon: object) -> bool:
        return codon in self.forward

    def __len__(self) -> int:
        return len(self.forward)

    def __iter__(self) -> Iterator[str]:
        return iter(self.forward)

    def items(self):
        return self.forward.items()

    @property
    def stop_codons(self) -> Tuple[str, ...]:
        return self._codons_by_aa.get(STOP, ())

    @property
    def amino_acids(self) -> Tuple[str, ...]:
        return tuple(aa for aa in self._codons_by_aa if aa != STOP)

    def codons_for(self, amino_acid: str) -> Tuple[str, ...]:
        """Synonymous codons encoding `amino_acid` (empty if none)."""
        return self._codons_by_aa.get(amino_acid, ())

    def is_complete(self) -> bool:
        """True when every codon over the DNA alphabet has an entry."""
        return all(codon in self.forward for codon in all_codons())


@lru_cache(maxsize=1)
def standard_codon_table() -> CodonTable:
    return CodonTable(STANDARD_CODONS)
