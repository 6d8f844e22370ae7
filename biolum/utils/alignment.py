"""
Pairwise sequence alignment.

Dynamic programming alignment of two nucleotide sequences with a
linear indel score. Both modes fill the same recurrence:

    cell[i, j] = max(cell[i, j-1] + indel,
                     cell[i-1, j] + indel,
                     cell[i-1, j-1] + (match or mismatch))

Global mode seeds row 0 and column 0 with cumulative indel scores and
reads the score from the bottom-right cell. Local mode seeds the
boundary with zeros and takes the largest interior cell as the score.
Note that local mode does not clamp cells at zero during the fill, so it
is not textbook Smith-Waterman: negative sub-scores are carried forward.

Traceback checks three moves per step (left, up, diagonal) independently
and applies every one that holds, re-reading the cell after each move.
A canonical traceback would take one predecessor per step; the results
of the two differ whenever several moves tie.
"""

import numpy as np
from typing import Optional, Tuple
from dataclasses import dataclass

from biolum.config import ScoringConfig, DEFAULT_SCORING_CONFIG

GAP = "-"


@dataclass(frozen=True)
class AlignmentResult:
    """
    Result of a pairwise alignment.

    Coordinates are 0-based and half-open: with gaps removed,
    aligned_seq1 equals seq1[start1:end1].
    """
    aligned_seq1: str
    aligned_seq2: str
    score: int
    start1: int
    end1: int
    start2: int
    end2: int
    mode: str = "global"

    def __len__(self) -> int:
        return len(self.aligned_seq1)


@dataclass(frozen=True)
class PairwiseAlignment:
    """Global and local alignment of the same pair of sequences."""
    global_result: AlignmentResult
    local_result: AlignmentResult

    @property
    def global_score(self) -> int:
        return self.global_result.score

    @property
    def local_score(self) -> int:
        return self.local_result.score


def _fill(score_matrix: np.ndarray, seq1: str, seq2: str, scoring: ScoringConfig) -> None:
    """Fill interior cells in row-major order."""
    m, n = len(seq1), len(seq2)
    indel = scoring.indel

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if seq1[i - 1] == seq2[j - 1]:
                diag_score = score_matrix[i - 1, j - 1] + scoring.match
            else:
                diag_score = score_matrix[i - 1, j - 1] + scoring.mismatch

            left_score = score_matrix[i, j - 1] + indel
            up_score = score_matrix[i - 1, j] + indel

            score_matrix[i, j] = max(left_score, up_score, diag_score)


def global_matrix(
    seq1: str,
    seq2: str,
    scoring: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> np.ndarray:
    """
    Build the global scoring matrix.

    Args:
        seq1: First cleaned sequence (rows)
        seq2: Second cleaned sequence (columns)
        scoring: Match, mismatch and indel scores

    Returns:
        Integer array of shape (len(seq1) + 1, len(seq2) + 1)
    """
    m, n = len(seq1), len(seq2)
    score_matrix = np.zeros((m + 1, n + 1), dtype=np.int64)

    # Initialize first row and column
    for i in range(m + 1):
        score_matrix[i, 0] = i * scoring.indel
    for j in range(n + 1):
        score_matrix[0, j] = j * scoring.indel

    _fill(score_matrix, seq1, seq2, scoring)
    return score_matrix


def local_matrix(
    seq1: str,
    seq2: str,
    scoring: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> np.ndarray:
    """
    Build the local scoring matrix.

    Same recurrence as global_matrix() but with a zero boundary. Interior
    cells are not clamped at zero.
    """
    m, n = len(seq1), len(seq2)
    score_matrix = np.zeros((m + 1, n + 1), dtype=np.int64)
    _fill(score_matrix, seq1, seq2, scoring)
    return score_matrix


def local_start(score_matrix: np.ndarray) -> Tuple[int, int]:
    """
    Find the cell holding the local alignment score.

    Scans the interior row by row; on ties the last maximal cell wins.

    Returns:
        (row, column) of the cell, or (0, 0) if the matrix has no interior
    """
    interior = score_matrix[1:, 1:]
    if interior.size == 0:
        return 0, 0

    flat = interior.ravel()
    # argmax returns the first hit, so search the reversed array
    last = flat.size - 1 - int(np.argmax(flat[::-1]))
    rows, cols = divmod(last, interior.shape[1])
    return rows + 1, cols + 1


def global_score(
    seq1: str,
    seq2: str,
    scoring: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> int:
    """Global alignment score without traceback."""
    return int(global_matrix(seq1, seq2, scoring)[len(seq1), len(seq2)])


def local_score(
    seq1: str,
    seq2: str,
    scoring: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> int:
    """Local alignment score without traceback (0 if either sequence is empty)."""
    score_matrix = local_matrix(seq1, seq2, scoring)
    i, j = local_start(score_matrix)
    return int(score_matrix[i, j])


def _traceback_step(
    score_matrix: np.ndarray,
    seq1: str,
    seq2: str,
    scoring: ScoringConfig,
    i: int,
    j: int,
    aligned1: list,
    aligned2: list
) -> Tuple[int, int]:
    """
    Apply every traceback move that holds for the current cell.

    Each check reads the cell at the indices left by the previous move.
    A move is skipped when the index it would decrement is already 0.
    """
    if j > 0 and score_matrix[i, j] == score_matrix[i, j - 1] + scoring.indel:
        aligned1.append(GAP)
        aligned2.append(seq2[j - 1])
        j -= 1

    if i > 0 and score_matrix[i, j] == score_matrix[i - 1, j] + scoring.indel:
        aligned1.append(seq1[i - 1])
        aligned2.append(GAP)
        i -= 1

    if i > 0 and j > 0:
        current_score = scoring.substitution(seq1[i - 1], seq2[j - 1])
        if score_matrix[i, j] == score_matrix[i - 1, j - 1] + current_score:
            aligned1.append(seq1[i - 1])
            aligned2.append(seq2[j - 1])
            i -= 1
            j -= 1

    return i, j


def global_traceback(
    score_matrix: np.ndarray,
    seq1: str,
    seq2: str,
    scoring: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> Tuple[str, str]:
    """
    Reconstruct the global alignment from a filled global matrix.

    Walks from the bottom-right cell until both indices reach 0. Once one
    sequence is exhausted, the rest of the other is aligned to gaps.

    Returns:
        (aligned_seq1, aligned_seq2) of equal length
    """
    aligned1, aligned2 = [], []
    i, j = len(seq1), len(seq2)

    while i > 0 or j > 0:
        i, j = _traceback_step(score_matrix, seq1, seq2, scoring, i, j, aligned1, aligned2)

    return "".join(reversed(aligned1)), "".join(reversed(aligned2))


def local_traceback(
    score_matrix: np.ndarray,
    seq1: str,
    seq2: str,
    scoring: ScoringConfig = DEFAULT_SCORING_CONFIG,
    start: Optional[Tuple[int, int]] = None
) -> Tuple[str, str, int, int]:
    """
    Reconstruct the local alignment from a filled local matrix.

    Starts at ``start`` (default: local_start()) and stops after the
    step in which either index reaches 0 or the current cell turns
    negative. The first step always runs.

    Returns:
        (aligned_seq1, aligned_seq2, stop_row, stop_column)
    """
    if start is None:
        start = local_start(score_matrix)

    i, j = start
    if i == 0 or j == 0:
        return "", "", i, j

    aligned1, aligned2 = [], []
    while True:
        i, j = _traceback_step(score_matrix, seq1, seq2, scoring, i, j, aligned1, aligned2)
        if i == 0 or j == 0 or score_matrix[i, j] < 0:
            break

    return "".join(reversed(aligned1)), "".join(reversed(aligned2)), i, j


def global_alignment(
    seq1: str,
    seq2: str,
    scoring: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> AlignmentResult:
    """
    Global alignment with cumulative-indel boundaries.

    Args:
        seq1: First cleaned sequence
        seq2: Second cleaned sequence
        scoring: Match, mismatch and indel scores

    Returns:
        AlignmentResult with aligned sequences and score

    Example:
        >>> result = global_alignment("ACGT", "ACGT")
        >>> result.score, result.aligned_seq1
        (4, 'ACGT')
    """
    m, n = len(seq1), len(seq2)
    score_matrix = global_matrix(seq1, seq2, scoring)
    aligned1, aligned2 = global_traceback(score_matrix, seq1, seq2, scoring)

    return AlignmentResult(
        aligned_seq1=aligned1,
        aligned_seq2=aligned2,
        score=int(score_matrix[m, n]),
        start1=0,
        end1=m,
        start2=0,
        end2=n,
        mode="global"
    )


def local_alignment(
    seq1: str,
    seq2: str,
    scoring: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> AlignmentResult:
    """
    Local alignment with zero boundaries and no zero floor.

    Finds the best-scoring cell (last one on ties) and walks back from
    it.

    Example:
        >>> result = local_alignment("AAACGT", "CGT")
        >>> result.score, result.aligned_seq2
        (3, 'CGT')
    """
    score_matrix = local_matrix(seq1, seq2, scoring)
    end1, end2 = local_start(score_matrix)
    aligned1, aligned2, start1, start2 = local_traceback(
        score_matrix, seq1, seq2, scoring, start=(end1, end2)
    )

    return AlignmentResult(
        aligned_seq1=aligned1,
        aligned_seq2=aligned2,
        score=int(score_matrix[end1, end2]),
        start1=start1,
        end1=end1,
        start2=start2,
        end2=end2,
        mode="local"
    )


def pairwise_alignment(
    seq1: str,
    seq2: str,
    scoring: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> PairwiseAlignment:
    """Run both alignment modes on the same pair."""
    return PairwiseAlignment(
        global_result=global_alignment(seq1, seq2, scoring),
        local_result=local_alignment(seq1, seq2, scoring),
    )
