"""
Main entry point for Codon Translator.

Usage:
    python -m codon_translator                      # Prompt for a sequence
    python -m codon_translator --sequence ATGTTTAAA # Translate directly
"""

import argparse
import logging
import sys
from pathlib import Path

from codon_translator.core.validation import InvalidSequenceError
from codon_translator.services.translation_service import TranslationService
from codon_translator.schemas.config import OutputSettings
from codon_translator.utils.formatting import render, write_report_tsv

INVALID_MESSAGE = "Error: Input contains invalid DNA bases (must be A, T, C, or G)."


def main(argv=None) -> int:
    """Translate one DNA sequence and print the amino acids."""
    parser = argparse.ArgumentParser(description="Codon Translator - DNA to amino-acid translation")
    parser.add_argument("--sequence", default=None, help="DNA sequence (prompted on stdin if omitted)")
    parser.add_argument("--mode", choices=["flat", "report"], default="flat", help="Output layout")
    parser.add_argument(
        "--separator",
        choices=["space", "hyphen", "none"],
        default=None,
        help="Flat-mode separator (default: space, or none with one-letter symbols)",
    )
    parser.add_argument("--symbols", choices=["three", "one"], default="three", help="Amino-acid code style")
    parser.add_argument("--output", type=Path, default=None, help="Also write a TSV codon report here")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    settings = OutputSettings(
        mode=args.mode,
        separator={"space": " ", "hyphen": "-", "none": ""}.get(args.separator),
        symbols=args.symbols,
    )
    service = TranslationService()

    if args.sequence is None:
        print("Enter a DNA sequence:")
        raw = sys.stdin.readline()
    else:
        raw = args.sequence

    try:
        result = service.translate(raw)
    except InvalidSequenceError:
        print(INVALID_MESSAGE)
        return 2

    print("Amino Acid sequence:")
    print(render(result.records, settings))

    if args.output is not None:
        write_report_tsv(result.records, args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
