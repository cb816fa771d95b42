import logging
from typing import Optional

from codon_translator.core.codon_table import CodonTable
from codon_translator.core.translator import CodonTranslator, split_codons
from codon_translator.core.validation import (
    InvalidSequenceError,
    invalid_characters,
    is_valid,
    normalize_sequence,
)
from codon_translator.schemas.translation import TranslationResult

logger = logging.getLogger(__name__)


class TranslationService:
    """
    Boundary between raw user input and the translation engine.
    Normalizes and validates input, then translates it.
    """

    def __init__(self, table: Optional[CodonTable] = None):
        self.translator = CodonTranslator(table)

    def translate(self, raw: str) -> TranslationResult:
        """Translate one raw line; raises InvalidSequenceError on foreign characters."""
        sequence = normalize_sequence(raw)
        if not is_valid(sequence):
            bad = invalid_characters(raw.strip())
            logger.warning("Rejecting sequence with invalid bases: %s", ", ".join(bad))
            raise InvalidSequenceError(sequence, bad)

        records = self.translator.translate(sequence)
        _, trailing = split_codons(sequence)
        logger.debug("Translated %d bases into %d codons", len(sequence), len(records))
        return TranslationResult(sequence=sequence, records=records, trailing=trailing)
