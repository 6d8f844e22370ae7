"""
Sequence derivation for nucleotide records.

This module provides functions for:
- Cleaning raw record text to the DNA alphabet
- Transcribing DNA to RNA on the strand picked by the reading frame
- Translating RNA to protein through the codon table
"""

from biolum.sequence.codons import (
    CODON_TABLE,
    PARTIAL_CODON_TABLE,
    STOP_CODONS,
    START_CODONS,
    STOP_SYMBOL,
    AMINO_ACIDS,
    lookup_codon,
)

from biolum.sequence.nucleotides import (
    clean_sequence,
    transcribe,
    translate,
    derive_protein,
    rna_to_dna,
    frame_offset,
    is_reverse_frame,
    DNA_ALPHABET,
    RNA_ALPHABET,
)

__all__ = [
    "CODON_TABLE",
    "PARTIAL_CODON_TABLE",
    "STOP_CODONS",
    "START_CODONS",
    "STOP_SYMBOL",
    "AMINO_ACIDS",
    "lookup_codon",
    "clean_sequence",
    "transcribe",
    "translate",
    "derive_protein",
    "rna_to_dna",
    "frame_offset",
    "is_reverse_frame",
    "DNA_ALPHABET",
    "RNA_ALPHABET",
]
