"""
Exception hierarchy for biolum.

All errors raised deliberately by the library derive from BiolumError,
so callers can catch one type at the boundary (the CLI does exactly that).
"""


class BiolumError(Exception):
    """Base class for all biolum errors."""


class RecordNotFoundError(BiolumError, KeyError):
    """No record in the source text has a header matching the identifier."""

    def __init__(self, identifier: str, source: str = ""):
        self.identifier = identifier
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"No record found for '{identifier}'{where}")

    def __str__(self) -> str:
        # KeyError.__str__ would quote the message
        return self.args[0]


class InvalidParameterError(BiolumError, ValueError):
    """A reading frame or scoring value was rejected before any work ran."""


class ArtifactWriteError(BiolumError, OSError):
    """A derived artifact could not be persisted."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Could not write artifact '{name}': {reason}")
