"""
Scoring and reading-frame configuration.

A ScoringConfig bundles the three alignment scores with the reading frame
used for translation. It is immutable and validated on construction, so a
config that exists is always safe to hand to the derivation and alignment
functions.
"""

from dataclasses import dataclass
from typing import Any

from biolum.exceptions import InvalidParameterError

# Defaults match the values the parameter prompt starts from
DEFAULT_MATCH = 1
DEFAULT_MISMATCH = -1
DEFAULT_INDEL = -2
DEFAULT_READING_FRAME = 1

READING_FRAMES = (1, 2, 3, 4, 5, 6)
FORWARD_FRAMES = (1, 2, 3)
REVERSE_FRAMES = (4, 5, 6)

# Characters per line in written artifacts
LINE_WIDTH = 70


def validate_reading_frame(reading_frame: Any) -> int:
    """
    Check that a reading frame is one of 1..6.

    Args:
        reading_frame: Candidate frame

    Returns:
        The frame as an int

    Raises:
        InvalidParameterError: If the frame is not an integer in 1..6
    """
    if isinstance(reading_frame, bool) or not isinstance(reading_frame, int):
        raise InvalidParameterError(
            f"Reading frame must be an integer in 1-6, got {reading_frame!r}"
        )
    if reading_frame not in READING_FRAMES:
        raise InvalidParameterError(
            f"Reading frame must be in 1-6, got {reading_frame}"
        )
    return reading_frame


def _coerce_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidParameterError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class ScoringConfig:
    """
    Pairwise alignment scores and translation reading frame.

    Attributes:
        match: Reward added for identical bases
        mismatch: Score added for differing bases
        indel: Score added per gap position (linear, no gap-open term)
        reading_frame: 1-3 for the forward strand, 4-6 for the reverse
            complement
    """
    match: int = DEFAULT_MATCH
    mismatch: int = DEFAULT_MISMATCH
    indel: int = DEFAULT_INDEL
    reading_frame: int = DEFAULT_READING_FRAME

    def __post_init__(self):
        """Validate field types and the reading frame."""
        for field_name in ("match", "mismatch", "indel"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameterError(
                    f"{field_name} must be an integer, got {value!r}"
                )
        validate_reading_frame(self.reading_frame)

    @classmethod
    def from_values(
        cls,
        match: Any = DEFAULT_MATCH,
        mismatch: Any = DEFAULT_MISMATCH,
        indel: Any = DEFAULT_INDEL,
        reading_frame: Any = DEFAULT_READING_FRAME
    ) -> "ScoringConfig":
        """
        Build a config from loosely typed values, e.g. form or CLI text.

        Example:
            >>> ScoringConfig.from_values("2", "-1", " -3 ", "4")
            ScoringConfig(match=2, mismatch=-1, indel=-3, reading_frame=4)
        """
        return cls(
            match=_coerce_int("match", match),
            mismatch=_coerce_int("mismatch", mismatch),
            indel=_coerce_int("indel", indel),
            reading_frame=_coerce_int("reading_frame", reading_frame),
        )

    @property
    def is_reverse(self) -> bool:
        """True for frames 4-6."""
        return self.reading_frame in REVERSE_FRAMES

    def substitution(self, base1: str, base2: str) -> int:
        """Score for aligning two bases against each other."""
        return self.match if base1 == base2 else self.mismatch


DEFAULT_SCORING_CONFIG = ScoringConfig()
