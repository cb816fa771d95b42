from typing import List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

AminoAcidSymbol = Literal[
    "Phe", "Leu", "Ile", "Met", "Val", "Ser", "Pro", "Thr", "Ala", "Tyr",
    "His", "Gln", "Asn", "Lys", "Asp", "Glu", "Cys", "Trp", "Arg", "Gly",
    "STOP",
    "UNKNOWN",
]


class TranslationRecord(BaseModel):
    """One consumed triplet and the symbol it translates to."""
    codon: str = Field(min_length=3, max_length=3)
    amino_acid: AminoAcidSymbol

    model_config = ConfigDict(frozen=True)


class TranslationResult(BaseModel):
    """Full translation of a single normalized sequence."""
    sequence: str
    records: Tuple[TranslationRecord, ...] = ()
    trailing: str = Field(default="", max_length=2)  # bases after the last full codon, dropped

    model_config = ConfigDict(frozen=True)

    @field_validator("sequence")
    @classmethod
    def _uppercase(cls, value: str) -> str:
        if value != value.upper():
            raise ValueError("sequence must be normalized to uppercase")
        return value

    @property
    def amino_acids(self) -> List[str]:
        return [record.amino_acid for record in self.records]

    @property
    def codons(self) -> List[str]:
        return [record.codon for record in self.records]

    def __len__(self) -> int:
        return len(self.records)
