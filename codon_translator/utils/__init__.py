"""
Utility modules for codon translation.

Modules:
- translation: One-letter symbols and NCBI tables via Biopython
- formatting: Flat, report and TSV rendering of translation records
"""

from codon_translator.utils.translation import (
    to_one_letter,
    ncbi_forward_table,
    STANDARD_TABLE_ID,
)
from codon_translator.utils.formatting import (
    format_flat,
    format_report,
    render,
    records_to_dataframe,
    write_report_tsv,
)

__all__ = [
    "to_one_letter",
    "ncbi_forward_table",
    "STANDARD_TABLE_ID",
    "format_flat",
    "format_report",
    "render",
    "records_to_dataframe",
    "write_report_tsv",
]
