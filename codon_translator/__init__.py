"""
Codon Translator - DNA to amino-acid translation using the standard genetic code.

This package provides tools for:
- Validating nucleotide sequences over the A/T/C/G alphabet
- Translating sequences codon by codon in a fixed reading frame
- Rendering translations as flat amino-acid lists or codon reports
"""

__version__ = "0.1.0"
