"""
Core nucleotide derivations.

Functions for turning raw record text into DNA, RNA and protein
sequences:
- Cleaning raw text down to the DNA alphabet
- Strand-aware transcription by reading frame
- Frame-relative translation through the codon table
"""

import re
from typing import Dict

from biolum.config import REVERSE_FRAMES, validate_reading_frame
from biolum.sequence.codons import lookup_codon

DNA_ALPHABET = "ATGC"
RNA_ALPHABET = "AUGC"

_NON_DNA = re.compile(r"[^ATGC]")

# Sense transcription: coding strand with T read as U
SENSE_TRANSCRIPTION = str.maketrans({"T": "U"})

# Antisense transcription: complement of each base in the RNA alphabet
DNA_TO_RNA_COMPLEMENT: Dict[str, str] = {
    "A": "U", "T": "A", "C": "G", "G": "C",
}
ANTISENSE_TRANSCRIPTION = str.maketrans(DNA_TO_RNA_COMPLEMENT)


def clean_sequence(text: str) -> str:
    """
    Strip everything that is not an uppercase A, T, G or C.

    Args:
        text: Raw record text (may contain whitespace, line breaks,
            numbering or other stray characters)

    Returns:
        DNA sequence over ATGC, in the original order

    Example:
        >>> clean_sequence("atg ATG\\n1 GGC-N")
        'ATGGGC'
    """
    return _NON_DNA.sub("", text)


def is_reverse_frame(reading_frame: int) -> bool:
    """True if the frame reads the reverse-complement strand (4-6)."""
    return validate_reading_frame(reading_frame) in REVERSE_FRAMES


def frame_offset(reading_frame: int) -> int:
    """
    Intra-codon start offset for a reading frame.

    Frames 1/4, 2/5 and 3/6 share offsets 0, 1 and 2; the strand is
    handled by transcription.

    Example:
        >>> frame_offset(2), frame_offset(5)
        (1, 1)
    """
    reading_frame = validate_reading_frame(reading_frame)
    if reading_frame in REVERSE_FRAMES:
        return (reading_frame - 4) % 3
    return (reading_frame - 1) % 3


def transcribe(dna: str, reading_frame: int = 1) -> str:
    """
    Transcribe cleaned DNA into RNA for a reading frame.

    Frames 1-3 replace T with U on the given strand. Frames 4-6 first
    reverse the DNA, then map each base to its RNA complement
    (A->U, T->A, C->G, G->C), giving the reverse complement.

    Args:
        dna: Cleaned DNA sequence
        reading_frame: Reading frame, 1-6

    Returns:
        RNA sequence of the same length as the input

    Raises:
        InvalidParameterError: If the frame is outside 1-6

    Example:
        >>> transcribe("ATGC", 1)
        'AUGC'
        >>> transcribe("AATG", 4)
        'CAUU'
    """
    if is_reverse_frame(reading_frame):
        return dna[::-1].translate(ANTISENSE_TRANSCRIPTION)
    return dna.translate(SENSE_TRANSCRIPTION)


def translate(rna: str, reading_frame: int = 1) -> str:
    """
    Translate RNA to protein starting at the frame's codon offset.

    Codons are read without overlap from the offset to the end of the
    sequence. Stop codons do not end translation; each one emits the
    stop marker. A trailing one- or two-base remainder is looked up once
    as a partial codon and usually contributes nothing.

    Args:
        rna: RNA sequence (already strand-adjusted by transcribe())
        reading_frame: Reading frame, 1-6

    Returns:
        Protein sequence over the amino acid letters and '-'

    Example:
        >>> translate("AUGUUUUAA")
        'MF-'
        >>> translate("AUGGC", 1)
        'MA'
    """
    offset = frame_offset(reading_frame)

    protein = []
    for i in range(offset, len(rna), 3):
        protein.append(lookup_codon(rna[i:i + 3]))

    return "".join(protein)


def derive_protein(dna: str, reading_frame: int = 1) -> str:
    """Transcribe and translate cleaned DNA in one step."""
    return translate(transcribe(dna, reading_frame), reading_frame)


def rna_to_dna(rna: str) -> str:
    """Map U back to T (inverse of forward-strand transcription)."""
    return rna.replace("U", "T")
