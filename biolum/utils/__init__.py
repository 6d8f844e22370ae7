"""
Pairwise alignment utilities.

This module provides dynamic programming alignment of two nucleotide
sequences:
- Global and local scoring matrices
- Traceback into gapped alignment strings
- Combined global + local runs for a pair
"""

from biolum.utils.alignment import (
    AlignmentResult,
    PairwiseAlignment,
    global_matrix,
    local_matrix,
    local_start,
    global_score,
    local_score,
    global_traceback,
    local_traceback,
    global_alignment,
    local_alignment,
    pairwise_alignment,
    GAP,
)

__all__ = [
    "AlignmentResult",
    "PairwiseAlignment",
    "global_matrix",
    "local_matrix",
    "local_start",
    "global_score",
    "local_score",
    "global_traceback",
    "local_traceback",
    "global_alignment",
    "local_alignment",
    "pairwise_alignment",
    "GAP",
]
