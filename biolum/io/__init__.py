"""
Record and artifact I/O.

This module provides:
- Species record files: sequence lookup and species info
- Derived artifacts: deterministic names, line wrapping and
  write-if-absent stores (directory or in-memory)
"""

from biolum.io.records import (
    SequenceRecord,
    SpeciesInfo,
    RecordStore,
    parse_records,
    read_records,
    parse_species_info,
)

from biolum.io.artifacts import (
    ArtifactStore,
    DirectoryArtifactStore,
    MemoryArtifactStore,
    WriteStatus,
    artifact_name,
    wrap_sequence,
    wrap_alignment,
)

__all__ = [
    "SequenceRecord",
    "SpeciesInfo",
    "RecordStore",
    "parse_records",
    "read_records",
    "parse_species_info",
    "ArtifactStore",
    "DirectoryArtifactStore",
    "MemoryArtifactStore",
    "WriteStatus",
    "artifact_name",
    "wrap_sequence",
    "wrap_alignment",
]
