"""
Mode dispatch for species lookups.

An Explorer ties a record lookup to an artifact store. Each call takes
the mode and scoring config explicitly; nothing about the previous call
is remembered.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from biolum.config import ScoringConfig, DEFAULT_SCORING_CONFIG
from biolum.exceptions import InvalidParameterError
from biolum.io.artifacts import (
    ArtifactStore,
    WriteStatus,
    artifact_name,
    wrap_alignment,
    wrap_sequence,
    DNA_KEYWORD,
    RNA_KEYWORD,
    PROTEIN_KEYWORD,
    GLOBAL_ALIGNMENT_KEYWORD,
    LOCAL_ALIGNMENT_KEYWORD,
)
from biolum.io.records import RecordStore, SpeciesInfo
from biolum.sequence.nucleotides import clean_sequence, derive_protein, transcribe
from biolum.utils.alignment import PairwiseAlignment, pairwise_alignment

logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    DNA = "dna"
    RNA = "rna"
    PROTEIN = "protein"
    ALIGN = "align"
    INFO = "info"


_KEYWORDS = {
    Mode.DNA: DNA_KEYWORD,
    Mode.RNA: RNA_KEYWORD,
    Mode.PROTEIN: PROTEIN_KEYWORD,
}


@dataclass(frozen=True)
class DerivationOutcome:
    """A derived DNA, RNA or protein sequence and what happened to its artifact."""
    mode: Mode
    identifier: str
    name: str
    sequence: str
    status: WriteStatus

    @property
    def written(self) -> bool:
        return self.status is WriteStatus.WRITTEN


@dataclass(frozen=True)
class AlignmentOutcome:
    """Both alignments of a species pair and the status of both artifacts."""
    identifiers: Tuple[str, str]
    alignment: PairwiseAlignment
    global_name: str
    local_name: str
    global_status: WriteStatus
    local_status: WriteStatus

    @property
    def global_score(self) -> int:
        return self.alignment.global_score

    @property
    def local_score(self) -> int:
        return self.alignment.local_score


class Explorer:
    """
    Derive and align species sequences, persisting results once.

    Args:
        records: Lookup with fetch(identifier) and fetch_info(identifier)
        artifacts: Store receiving the wrapped artifact text
    """

    def __init__(self, records: RecordStore, artifacts: ArtifactStore):
        self.records = records
        self.artifacts = artifacts

    def dna(self, identifier: str) -> str:
        """Cleaned DNA for a species."""
        return clean_sequence(self.records.fetch(identifier))

    def derive(
        self,
        mode: Mode,
        identifier: str,
        scoring: ScoringConfig = DEFAULT_SCORING_CONFIG
    ) -> DerivationOutcome:
        """
        Derive a single-species sequence and write it if not present yet.

        Raises:
            InvalidParameterError: If mode is not DNA, RNA or PROTEIN
            RecordNotFoundError: If the species has no record
            ArtifactWriteError: If the artifact cannot be written
        """
        if mode not in _KEYWORDS:
            raise InvalidParameterError(f"{mode} is not a derivation mode")

        dna = self.dna(identifier)
        if mode is Mode.DNA:
            sequence = dna
        elif mode is Mode.RNA:
            sequence = transcribe(dna, scoring.reading_frame)
        else:
            sequence = derive_protein(dna, scoring.reading_frame)

        name = artifact_name(_KEYWORDS[mode], identifier, scoring)
        status = self.artifacts.write_if_absent(name, wrap_sequence(sequence))
        return DerivationOutcome(mode, identifier, name, sequence, status)

    def align(
        self,
        identifier1: str,
        identifier2: str,
        scoring: ScoringConfig = DEFAULT_SCORING_CONFIG
    ) -> AlignmentOutcome:
        """
        Globally and locally align two species and write both alignments.

        Scores are always computed; each artifact is only written if its
        name is not taken yet.
        """
        seq1 = self.dna(identifier1)
        seq2 = self.dna(identifier2)
        logger.debug("Aligning %s (%d bp) with %s (%d bp)",
                     identifier1, len(seq1), identifier2, len(seq2))

        alignment = pairwise_alignment(seq1, seq2, scoring)
        logger.info(
            "%s vs %s: global score %d, local score %d",
            identifier1, identifier2, alignment.global_score, alignment.local_score
        )

        pair = (identifier1, identifier2)
        global_name = artifact_name(GLOBAL_ALIGNMENT_KEYWORD, pair, scoring)
        local_name = artifact_name(LOCAL_ALIGNMENT_KEYWORD, pair, scoring)

        global_result = alignment.global_result
        local_result = alignment.local_result
        global_status = self.artifacts.write_if_absent(
            global_name, wrap_alignment(global_result.aligned_seq1, global_result.aligned_seq2)
        )
        local_status = self.artifacts.write_if_absent(
            local_name, wrap_alignment(local_result.aligned_seq1, local_result.aligned_seq2)
        )

        return AlignmentOutcome(
            pair, alignment, global_name, local_name, global_status, local_status
        )

    def info(self, identifier: str) -> SpeciesInfo:
        return self.records.fetch_info(identifier)

    def run(
        self,
        mode: Mode,
        identifiers: Union[str, Sequence[str]],
        scoring: ScoringConfig = DEFAULT_SCORING_CONFIG
    ):
        """
        Dispatch on mode.

        ALIGN takes exactly two identifiers, every other mode exactly one.
        """
        if isinstance(identifiers, str):
            identifiers = [identifiers]
        identifiers = list(identifiers)

        expected = 2 if mode is Mode.ALIGN else 1
        if len(identifiers) != expected:
            raise InvalidParameterError(
                f"{mode.value} mode takes {expected} species, got {len(identifiers)}"
            )

        if mode is Mode.ALIGN:
            return self.align(identifiers[0], identifiers[1], scoring)
        if mode is Mode.INFO:
            return self.info(identifiers[0])
        return self.derive(mode, identifiers[0], scoring)
