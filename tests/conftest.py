import pytest

from biolum.config import ScoringConfig
from biolum.io.artifacts import MemoryArtifactStore
from biolum.io.records import RecordStore

SEQUENCES_TEXT = (
    ">Photinus pyralis\n"
    "ATGTTT\n"
    "TAA\n"
    "\n"
    ">Lampyris noctiluca\n"
    "ATG TTA\n"
    "TAA\n"
    "\n"
)

INFO_TEXT = (
    ">Photinus pyralis\n"
    "Location: North America\n"
    "Discovery: 1767\n"
    "Size: 1-2 cm\n"
    "Color: Yellow-green\n"
    "Common name: Common eastern firefly\n"
    ">Lampyris noctiluca\n"
    "Location: Europe\n"
)


@pytest.fixture
def default_scoring():
    return ScoringConfig(match=1, mismatch=-1, indel=-2)


@pytest.fixture
def record_store():
    return RecordStore(SEQUENCES_TEXT, INFO_TEXT)


@pytest.fixture
def memory_store():
    return MemoryArtifactStore()


@pytest.fixture
def record_files(tmp_path):
    sequences = tmp_path / "Sequences.txt"
    sequences.write_text(SEQUENCES_TEXT, encoding="utf-8")
    info = tmp_path / "Info.txt"
    info.write_text(INFO_TEXT, encoding="utf-8")
    return sequences, info
