"""
Core translation engine.

Modules:
- codon_table: Immutable standard genetic code
- validation: Nucleotide alphabet checks
- translator: Fixed-frame codon translation
"""

from codon_translator.core.codon_table import CodonTable, standard_codon_table
from codon_translator.core.translator import CodonTranslator, translate
from codon_translator.core.validation import InvalidSequenceError, is_valid

__all__ = [
    "CodonTable",
    "standard_codon_table",
    "CodonTranslator",
    "translate",
    "InvalidSequenceError",
    "is_valid",
]
