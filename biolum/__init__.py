"""
biolum: sequence derivation and pairwise alignment for species records

This package provides tools for:
- Cleaning raw nucleotide records to DNA
- Strand-aware RNA transcription and frame-relative protein translation
- Global and local pairwise alignment with traceback
- Species record lookup and write-once artifact storage

Built on top of NumPy for the alignment scoring matrices.
"""

__version__ = "0.1.0"
__author__ = "BioLum Contributors"

from biolum.config import (
    ScoringConfig,
    DEFAULT_SCORING_CONFIG,
    LINE_WIDTH,
)

from biolum.exceptions import (
    BiolumError,
    RecordNotFoundError,
    InvalidParameterError,
    ArtifactWriteError,
)

from biolum.sequence import (
    clean_sequence,
    transcribe,
    translate,
    derive_protein,
    CODON_TABLE,
)

from biolum.utils import (
    AlignmentResult,
    PairwiseAlignment,
    global_alignment,
    local_alignment,
    pairwise_alignment,
)

from biolum.io import (
    RecordStore,
    SpeciesInfo,
    DirectoryArtifactStore,
    MemoryArtifactStore,
    WriteStatus,
    artifact_name,
    wrap_sequence,
    wrap_alignment,
)

from biolum.explorer import (
    Explorer,
    Mode,
)

__all__ = [
    # Configuration
    "ScoringConfig",
    "DEFAULT_SCORING_CONFIG",
    "LINE_WIDTH",
    # Errors
    "BiolumError",
    "RecordNotFoundError",
    "InvalidParameterError",
    "ArtifactWriteError",
    # Sequence derivation
    "clean_sequence",
    "transcribe",
    "translate",
    "derive_protein",
    "CODON_TABLE",
    # Alignment
    "AlignmentResult",
    "PairwiseAlignment",
    "global_alignment",
    "local_alignment",
    "pairwise_alignment",
    # I/O
    "RecordStore",
    "SpeciesInfo",
    "DirectoryArtifactStore",
    "MemoryArtifactStore",
    "WriteStatus",
    "artifact_name",
    "wrap_sequence",
    "wrap_alignment",
    # Dispatch
    "Explorer",
    "Mode",
]
