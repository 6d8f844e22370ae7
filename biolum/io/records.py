"""
Species record files.

Sequence files hold one record per species:
1. Header line: '>' followed by the species identifier
2. One or more non-empty sequence lines
3. A blank line (or end of file) ending the record

Info files use the same header, followed by exactly five lines:
location, discovery, size, color and common name.
"""

import gzip
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from biolum.exceptions import RecordNotFoundError

logger = logging.getLogger(__name__)

HEADER_PREFIX = ">"

INFO_FIELDS = ("location", "discovery", "size", "color", "common_name")


@dataclass(frozen=True)
class SequenceRecord:
    """
    A single species sequence record.

    Attributes:
        id: Species identifier (everything after '>')
        sequence: Fragment lines concatenated, uncleaned
        terminated: False if the record ran into end of file or the next
            header instead of a blank line
    """
    id: str
    sequence: str
    terminated: bool = True

    def __len__(self) -> int:
        return len(self.sequence)


@dataclass(frozen=True)
class SpeciesInfo:
    """Descriptive fields for one species."""
    id: str
    location: str = ""
    discovery: str = ""
    size: str = ""
    color: str = ""
    common_name: str = ""

    def lines(self) -> List[str]:
        return [getattr(self, name) for name in INFO_FIELDS]


def _open_file(filepath: Union[str, Path], mode: str = "rt"):
    """Open a file, handling gzip compression if needed."""
    filepath = Path(filepath)
    if filepath.suffix == ".gz":
        return gzip.open(filepath, mode, encoding="utf-8")
    return open(filepath, mode, encoding="utf-8")


def _read_text(filepath: Union[str, Path]) -> str:
    with _open_file(filepath, "rt") as f:
        return f.read()


def parse_records(content: str) -> Iterator[SequenceRecord]:
    """
    Parse sequence records from a string.

    A header starts a record; non-empty lines are collected until a
    blank line. A record cut short by end of file (or by another header)
    is still returned, with ``terminated=False``.

    Args:
        content: Record file contents

    Yields:
        SequenceRecord objects in file order
    """
    current_id = None
    fragments: List[str] = []

    for line in content.splitlines():
        if current_id is None:
            if line.startswith(HEADER_PREFIX):
                current_id = line[len(HEADER_PREFIX):]
                fragments = []
            continue

        if line.startswith(HEADER_PREFIX):
            logger.warning(
                "Record '%s' is not followed by a blank line; ending it at the next header",
                current_id
            )
            yield SequenceRecord(current_id, "".join(fragments), terminated=False)
            current_id = line[len(HEADER_PREFIX):]
            fragments = []
        elif line == "":
            yield SequenceRecord(current_id, "".join(fragments))
            current_id = None
        else:
            fragments.append(line)

    # Last record ran into end of file
    if current_id is not None:
        logger.warning(
            "Record '%s' is not followed by a blank line; ending it at end of file",
            current_id
        )
        yield SequenceRecord(current_id, "".join(fragments), terminated=False)


def read_records(filepath: Union[str, Path]) -> Iterator[SequenceRecord]:
    """
    Read sequence records from a file.

    Supports both plain text and gzip-compressed files.

    Example:
        >>> for record in read_records("Sequences.txt"):
        ...     print(f"{record.id}: {len(record)} characters")
    """
    yield from parse_records(_read_text(filepath))


def parse_species_info(content: str) -> Iterator[SpeciesInfo]:
    """
    Parse species info records from a string.

    The five lines after each header are taken as-is; lines missing at
    end of file are left empty.
    """
    lines = content.splitlines()
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith(HEADER_PREFIX):
            values = lines[i + 1:i + 1 + len(INFO_FIELDS)]
            if len(values) < len(INFO_FIELDS):
                logger.warning(
                    "Info record '%s' has %d of %d lines",
                    line[len(HEADER_PREFIX):], len(values), len(INFO_FIELDS)
                )
            values += [""] * (len(INFO_FIELDS) - len(values))
            yield SpeciesInfo(line[len(HEADER_PREFIX):], *values)
            i += len(INFO_FIELDS)
        i += 1


class RecordStore:
    """
    Lookup of raw sequence text (and optional info) by species identifier.

    The first record with a matching header wins, as when scanning the
    file top to bottom.

    Example:
        >>> store = RecordStore(">Photinus pyralis\\nATGG\\nCCA\\n")
        >>> store.fetch("Photinus pyralis")
        'ATGGCCA'
    """

    def __init__(
        self,
        content: str,
        info_content: Optional[str] = None,
        source: str = ""
    ):
        self.source = source
        self._records: Dict[str, SequenceRecord] = {}
        for record in parse_records(content):
            self._records.setdefault(record.id, record)

        self._info: Dict[str, SpeciesInfo] = {}
        if info_content is not None:
            for info in parse_species_info(info_content):
                self._info.setdefault(info.id, info)

    @classmethod
    def from_files(
        cls,
        sequences_path: Optional[Union[str, Path]],
        info_path: Optional[Union[str, Path]] = None
    ) -> "RecordStore":
        """
        Load a store from a sequence file and an optional info file.

        Either file may be omitted; lookups against the missing one raise
        RecordNotFoundError.
        """
        content = _read_text(sequences_path) if sequences_path is not None else ""
        info_content = _read_text(info_path) if info_path is not None else None
        source = str(sequences_path) if sequences_path is not None else ""
        store = cls(content, info_content, source=source)
        logger.debug("Loaded %d records from %s", len(store), sequences_path)
        return store

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._records

    @property
    def identifiers(self) -> List[str]:
        return list(self._records)

    def record(self, identifier: str) -> SequenceRecord:
        """
        Get the full record for an identifier.

        Raises:
            RecordNotFoundError: If no header matches
        """
        try:
            return self._records[identifier]
        except KeyError:
            raise RecordNotFoundError(identifier, self.source) from None

    def fetch(self, identifier: str) -> str:
        """Raw (uncleaned) sequence text for an identifier."""
        return self.record(identifier).sequence

    def fetch_info(self, identifier: str) -> SpeciesInfo:
        """
        Species info for an identifier.

        Raises:
            RecordNotFoundError: If no info file was loaded or no header
                matches
        """
        try:
            return self._info[identifier]
        except KeyError:
            raise RecordNotFoundError(identifier, "species info") from None
