"""
Codon table for RNA translation.

Maps RNA codons to one-letter amino acid symbols. Stop codons map
to the stop marker instead of '*' so translated output can be written
straight to the protein artifacts.
"""

from typing import Dict

STOP_SYMBOL = "-"

# Standard genetic code (RNA codons)
CODON_TABLE: Dict[str, str] = {
    "UUU": "F", "UUC": "F", "UUA": "L", "UUG": "L",
    "UCU": "S", "UCC": "S", "UCA": "S", "UCG": "S",
    "UAU": "Y", "UAC": "Y", "UAA": STOP_SYMBOL, "UAG": STOP_SYMBOL,
    "UGU": "C", "UGC": "C", "UGA": STOP_SYMBOL, "UGG": "W",
    "CUU": "L", "CUC": "L", "CUA": "L", "CUG": "L",
    "CCU": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAU": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "CGU": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "AUU": "I", "AUC": "I", "AUA": "I", "AUG": "M",
    "ACU": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "AAU": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "AGU": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GUU": "V", "GUC": "V", "GUA": "V", "GUG": "V",
    "GCU": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "GAU": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGU": "G", "GGC": "G", "GGA": "G", "GGG": "G",
}

# Trailing two-base codons whose third position is fully degenerate
PARTIAL_CODON_TABLE: Dict[str, str] = {
    "CC": "P",
    "AC": "T",
    "GU": "V",
    "GC": "A",
    "GG": "G",
}

STOP_CODONS = {codon for codon, aa in CODON_TABLE.items() if aa == STOP_SYMBOL}
START_CODONS = {"AUG"}

AMINO_ACIDS = frozenset(aa for aa in CODON_TABLE.values() if aa != STOP_SYMBOL)


def lookup_codon(codon: str) -> str:
    """
    Look up a full or partial RNA codon.

    Args:
        codon: RNA codon of 1 to 3 bases

    Returns:
        One-letter amino acid, STOP_SYMBOL for stop codons, or an
        empty string when the codon has no entry

    Example:
        >>> lookup_codon("AUG")
        'M'
        >>> lookup_codon("GG")
        'G'
        >>> lookup_codon("A")
        ''
    """
    if len(codon) == 3:
        return CODON_TABLE.get(codon, "")
    return PARTIAL_CODON_TABLE.get(codon, "")
