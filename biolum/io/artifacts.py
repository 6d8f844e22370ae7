"""
Derived artifact naming, formatting and storage.

Artifacts are plain text: single sequences wrapped at a fixed width, and
alignments written as blocks of two wrapped lines separated by a blank
line. Stores never overwrite; writing a name that already exists is
reported instead.
"""

import enum
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from biolum.config import LINE_WIDTH, ScoringConfig
from biolum.exceptions import ArtifactWriteError, InvalidParameterError

logger = logging.getLogger(__name__)

DNA_KEYWORD = "DNA"
RNA_KEYWORD = "RNA"
PROTEIN_KEYWORD = "Protein"
GLOBAL_ALIGNMENT_KEYWORD = "Global Alignment"
LOCAL_ALIGNMENT_KEYWORD = "Local Alignment"

SEQUENCE_KEYWORDS = (DNA_KEYWORD, RNA_KEYWORD, PROTEIN_KEYWORD)
ALIGNMENT_KEYWORDS = (GLOBAL_ALIGNMENT_KEYWORD, LOCAL_ALIGNMENT_KEYWORD)


class WriteStatus(enum.Enum):
    WRITTEN = "written"
    ALREADY_EXISTS = "already exists"


def _chunks(sequence: str, width: int) -> List[str]:
    """
    Split into width-sized pieces; the last piece may be a full width.

    An empty sequence gives one empty piece so the output is never
    missing its final line.
    """
    if width < 1:
        raise ValueError(f"Line width must be positive, got {width}")
    if not sequence:
        return [""]
    return [sequence[i:i + width] for i in range(0, len(sequence), width)]


def wrap_sequence(sequence: str, width: int = LINE_WIDTH) -> str:
    """
    Wrap a sequence into lines of ``width`` characters.

    Lines are joined by newlines; there is no trailing newline.

    Example:
        >>> wrap_sequence("ATGCATGC", width=3)
        'ATG\\nCAT\\nGC'
    """
    return "\n".join(_chunks(sequence, width))


def wrap_alignment(aligned_seq1: str, aligned_seq2: str, width: int = LINE_WIDTH) -> str:
    """
    Wrap an aligned pair into blocks of two lines.

    Each block holds the same ``width``-column window of both strings;
    blocks are separated by a blank line and the last one is not
    followed by a newline.

    Example:
        >>> wrap_alignment("AC-GT", "ACTGT", width=3)
        'AC-\\nACT\\n\\nGT\\nGT'
    """
    if len(aligned_seq1) != len(aligned_seq2):
        raise ValueError(
            f"Aligned sequences differ in length: {len(aligned_seq1)} != {len(aligned_seq2)}"
        )
    blocks = [
        f"{top}\n{bottom}"
        for top, bottom in zip(_chunks(aligned_seq1, width), _chunks(aligned_seq2, width))
    ]
    return "\n\n".join(blocks)


def artifact_name(
    keyword: str,
    identifiers: Union[str, Sequence[str]],
    scoring: Optional[ScoringConfig] = None
) -> str:
    """
    Deterministic artifact name for a derivation.

    Args:
        keyword: One of the DNA/RNA/Protein/alignment keywords
        identifiers: Species identifier, or a pair for alignments
        scoring: Required for Protein (reading frame), reverse-strand RNA
            and alignments (match, mismatch, indel)

    Returns:
        Name such as "Protein 2 Photinus pyralis" or
        "Global Alignment 1 -1 -2 Photinus pyralis and Lampyris noctiluca"

    Note:
        Reverse-strand RNA (frames 4-6) is named "RNA Reverse <species>"
        rather than the plain "RNA <species>" used for frames 1-3. The
        two strands give different sequences, so they get separate
        artifacts instead of whichever frame ran first claiming the name.
    """
    if isinstance(identifiers, str):
        identifiers = [identifiers]
    identifiers = list(identifiers)

    if keyword in ALIGNMENT_KEYWORDS:
        if len(identifiers) != 2 or scoring is None:
            raise InvalidParameterError(
                f"{keyword} names need two identifiers and a scoring config"
            )
        return (
            f"{keyword} {scoring.match} {scoring.mismatch} {scoring.indel} "
            f"{identifiers[0]} and {identifiers[1]}"
        )

    if keyword not in SEQUENCE_KEYWORDS:
        raise InvalidParameterError(f"Unknown artifact keyword: {keyword!r}")
    if len(identifiers) != 1:
        raise InvalidParameterError(f"{keyword} names need exactly one identifier")
    species = identifiers[0]

    if keyword == PROTEIN_KEYWORD:
        if scoring is None:
            raise InvalidParameterError("Protein names need a reading frame")
        return f"{keyword} {scoring.reading_frame} {species}"
    if keyword == RNA_KEYWORD and scoring is not None and scoring.is_reverse:
        return f"{keyword} Reverse {species}"
    return f"{keyword} {species}"


class ArtifactStore(ABC):
    """
    Key-based sink for derived text artifacts.

    Subclasses provide existence checks and raw writes; callers use
    write_if_absent(), which never replaces an existing artifact.
    """

    @abstractmethod
    def exists(self, name: str) -> bool:
        pass

    @abstractmethod
    def read(self, name: str) -> str:
        pass

    @abstractmethod
    def _write(self, name: str, content: str) -> bool:
        """Store content; return False if the name was taken meanwhile."""
        pass

    def write_if_absent(self, name: str, content: str) -> WriteStatus:
        """
        Store content under name unless the name is already taken.

        A name taken by another writer between the existence check and
        the write is reported the same way as one that existed before.

        Returns:
            WriteStatus.WRITTEN or WriteStatus.ALREADY_EXISTS

        Raises:
            ArtifactWriteError: If the write fails; nothing is left behind
        """
        if self.exists(name) or not self._write(name, content):
            logger.info("Artifact '%s' already exists, not overwriting", name)
            return WriteStatus.ALREADY_EXISTS
        logger.info("Wrote artifact '%s' (%d characters)", name, len(content))
        return WriteStatus.WRITTEN


class MemoryArtifactStore(ArtifactStore):
    """Artifact store backed by a dict."""

    def __init__(self):
        self.artifacts: Dict[str, str] = {}

    def exists(self, name: str) -> bool:
        return name in self.artifacts

    def read(self, name: str) -> str:
        return self.artifacts[name]

    def _write(self, name: str, content: str) -> bool:
        if name in self.artifacts:
            return False
        self.artifacts[name] = content
        return True


class DirectoryArtifactStore(ArtifactStore):
    """
    Artifact store writing one UTF-8 text file per artifact.

    Content is written to a temporary file in the same folder and then
    hard-linked to its final name. Linking fails if the name exists, so
    an existing file is never replaced, and the final name only ever
    appears with its full content. The temporary file is always removed.
    """

    TEMP_PREFIX = ".biolum-"
    TEMP_SUFFIX = ".tmp"

    def __init__(self, root: Union[str, Path], suffix: str = ".txt"):
        self.root = Path(root)
        self.suffix = suffix

    def path_for(self, name: str) -> Path:
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise InvalidParameterError(f"Invalid artifact name: {name!r}")
        return self.root / f"{name}{self.suffix}"

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def read(self, name: str) -> str:
        return self.path_for(name).read_text(encoding="utf-8")

    def _write(self, name: str, content: str) -> bool:
        target = self.path_for(name)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ArtifactWriteError(name, str(exc)) from exc

        temp_path = None
        try:
            fd, temp_name = tempfile.mkstemp(
                dir=self.root, prefix=self.TEMP_PREFIX, suffix=self.TEMP_SUFFIX
            )
            temp_path = Path(temp_name)
            with open(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            # mkstemp creates owner-only files
            os.chmod(temp_path, 0o644)
            os.link(temp_path, target)
        except FileExistsError:
            logger.debug("Artifact '%s' was created by another writer", name)
            return False
        except (OSError, ValueError) as exc:
            raise ArtifactWriteError(name, str(exc)) from exc
        finally:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
        return True
