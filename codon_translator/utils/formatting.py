"""
Rendering of translation records.

Two presentation modes: a flat amino-acid list and a two-column
codon -> amino acid report. A TSV export is available through pandas.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from codon_translator.schemas.config import OutputSettings, SymbolStyle
from codon_translator.schemas.translation import TranslationRecord
from codon_translator.utils.translation import to_one_letter

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["position", "codon", "amino_acid", "one_letter"]


def _symbol(record: TranslationRecord, symbols: SymbolStyle) -> str:
    if symbols == "one":
        return to_one_letter(record.amino_acid)
    return record.amino_acid


def format_flat(
    records: Iterable[TranslationRecord],
    separator: Optional[str] = None,
    symbols: SymbolStyle = "three",
) -> str:
    """Amino acids joined by `separator`, e.g. 'Met Phe Lys STOP'."""
    if separator is None:
        # One-letter protein strings are conventionally unseparated.
        separator = "" if symbols == "one" else " "
    return separator.join(_symbol(record, symbols) for record in records)


def format_report(records: Iterable[TranslationRecord], symbols: SymbolStyle = "three") -> str:
    """One 'CODON -> AminoAcid' line per record."""
    return "\n".join(f"{record.codon} -> {_symbol(record, symbols)}" for record in records)


def render(records: Sequence[TranslationRecord], settings: OutputSettings) -> str:
    if settings.mode == "report":
        return format_report(records, settings.symbols)
    return format_flat(records, settings.separator, settings.symbols)


def records_to_dataframe(records: Sequence[TranslationRecord]) -> pd.DataFrame:
    rows: List[dict] = [
        {
            "position": idx * 3,
            "codon": record.codon,
            "amino_acid": record.amino_acid,
            "one_letter": to_one_letter(record.amino_acid),
        }
        for idx, record in enumerate(records)
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def write_report_tsv(records: Sequence[TranslationRecord], path: Path) -> Path:
    """Write the codon report as TSV; returns the path written."""
    path.parent.mkdir(parents=True, exist_ok=True)
    records_to_dataframe(records).to_csv(path, sep="\t", index=False)
    logger.info("Wrote %d codons to %s", len(records), path)
    return path
