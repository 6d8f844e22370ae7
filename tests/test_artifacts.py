"""
Tests for artifact names, line wrapping and the write-once stores.
"""

import pytest

from biolum.config import ScoringConfig
from biolum.exceptions import ArtifactWriteError, InvalidParameterError
from biolum.io.artifacts import (
    DirectoryArtifactStore,
    MemoryArtifactStore,
    WriteStatus,
    artifact_name,
    wrap_alignment,
    wrap_sequence,
)


class TestWrapSequence:

    def test_short_sequence_unchanged(self):
        assert wrap_sequence("ACGT") == "ACGT"

    def test_exact_width_has_no_trailing_newline(self):
        assert wrap_sequence("A" * 70) == "A" * 70

    def test_one_past_width(self):
        assert wrap_sequence("A" * 71) == "A" * 70 + "\nA"

    def test_empty(self):
        assert wrap_sequence("") == ""

    def test_lines_reassemble(self):
        sequence = "ACGT" * 53
        wrapped = wrap_sequence(sequence)
        lines = wrapped.split("\n")
        assert "".join(lines) == sequence
        assert all(len(line) == 70 for line in lines[:-1])
        assert 0 < len(lines[-1]) <= 70

    def test_custom_width(self):
        assert wrap_sequence("ATGCATGC", width=3) == "ATG\nCAT\nGC"

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            wrap_sequence("ACGT", width=0)


class TestWrapAlignment:

    def test_single_block(self):
        assert wrap_alignment("AC-GT", "ACTGT") == "AC-GT\nACTGT"

    def test_blocks_separated_by_blank_line(self):
        wrapped = wrap_alignment("A" * 75, "C" * 75)
        assert wrapped == "A" * 70 + "\n" + "C" * 70 + "\n\nAAAAA\nCCCCC"

    def test_exact_width(self):
        assert wrap_alignment("A" * 70, "C" * 70) == "A" * 70 + "\n" + "C" * 70

    def test_empty(self):
        assert wrap_alignment("", "") == "\n"

    def test_unequal_lengths(self):
        with pytest.raises(ValueError):
            wrap_alignment("AC", "A")


class TestArtifactName:

    def test_dna(self):
        assert artifact_name("DNA", "Photinus pyralis") == "DNA Photinus pyralis"

    def test_rna_forward_and_reverse(self):
        assert artifact_name("RNA", "X", ScoringConfig(reading_frame=2)) == "RNA X"
        assert artifact_name("RNA", "X", ScoringConfig(reading_frame=5)) == "RNA Reverse X"

    def test_protein_includes_frame(self):
        assert artifact_name("Protein", "X", ScoringConfig(reading_frame=3)) == "Protein 3 X"

    def test_alignments_include_scores(self):
        scoring = ScoringConfig(match=2, mismatch=-1, indel=-3, reading_frame=4)
        assert (artifact_name("Global Alignment", ["A", "B"], scoring)
                == "Global Alignment 2 -1 -3 A and B")
        assert (artifact_name("Local Alignment", ("B", "A"), scoring)
                == "Local Alignment 2 -1 -3 B and A")

    def test_distinct_configs_give_distinct_names(self):
        names = {
            artifact_name("Global Alignment", ["A", "B"], ScoringConfig(match=m, indel=i))
            for m in (1, 2) for i in (-1, -2)
        }
        assert len(names) == 4

    @pytest.mark.parametrize("keyword,identifiers,scoring", [
        ("Global Alignment", ["A"], ScoringConfig()),
        ("Local Alignment", ["A", "B"], None),
        ("Protein", "A", None),
        ("DNA", ["A", "B"], None),
        ("Codon", "A", None),
    ])
    def test_invalid(self, keyword, identifiers, scoring):
        with pytest.raises(InvalidParameterError):
            artifact_name(keyword, identifiers, scoring)


class TestMemoryArtifactStore:

    def test_write_once(self, memory_store):
        assert memory_store.write_if_absent("DNA A", "ACGT") is WriteStatus.WRITTEN
        assert memory_store.write_if_absent("DNA A", "TTTT") is WriteStatus.ALREADY_EXISTS
        assert memory_store.read("DNA A") == "ACGT"

    def test_exists(self, memory_store):
        assert not memory_store.exists("DNA A")
        memory_store.write_if_absent("DNA A", "")
        assert memory_store.exists("DNA A")

    def test_name_taken_after_existence_check(self):
        class LateCheckStore(MemoryArtifactStore):
            def exists(self, name):
                self.artifacts.setdefault(name, "other writer")
                return False

        store = LateCheckStore()
        assert store.write_if_absent("DNA A", "ACGT") is WriteStatus.ALREADY_EXISTS
        assert store.read("DNA A") == "other writer"


class TestDirectoryArtifactStore:

    def test_writes_text_file(self, tmp_path):
        store = DirectoryArtifactStore(tmp_path)
        assert store.write_if_absent("DNA Photinus pyralis", "ACGT") is WriteStatus.WRITTEN
        path = tmp_path / "DNA Photinus pyralis.txt"
        assert path.read_text(encoding="utf-8") == "ACGT"
        assert store.read("DNA Photinus pyralis") == "ACGT"

    def test_never_overwrites(self, tmp_path):
        store = DirectoryArtifactStore(tmp_path)
        store.write_if_absent("DNA A", "ACGT")
        assert store.write_if_absent("DNA A", "TTTT") is WriteStatus.ALREADY_EXISTS
        assert (tmp_path / "DNA A.txt").read_text(encoding="utf-8") == "ACGT"

    def test_existing_file_is_respected(self, tmp_path):
        (tmp_path / "DNA A.txt").write_text("by hand", encoding="utf-8")
        store = DirectoryArtifactStore(tmp_path)
        assert store.write_if_absent("DNA A", "ACGT") is WriteStatus.ALREADY_EXISTS
        assert store.read("DNA A") == "by hand"

    def test_creates_missing_folder(self, tmp_path):
        store = DirectoryArtifactStore(tmp_path / "Files" / "nested")
        store.write_if_absent("DNA A", "AC\nGT")
        assert (tmp_path / "Files" / "nested" / "DNA A.txt").read_bytes() == b"AC\nGT"

    def test_custom_suffix(self, tmp_path):
        store = DirectoryArtifactStore(tmp_path, suffix=".seq")
        store.write_if_absent("DNA A", "AC")
        assert (tmp_path / "DNA A.seq").exists()

    @pytest.mark.parametrize("name", ["", ".", "..", "a/b", "a\\b"])
    def test_rejects_unsafe_names(self, tmp_path, name):
        store = DirectoryArtifactStore(tmp_path)
        with pytest.raises(InvalidParameterError):
            store.write_if_absent(name, "ACGT")

    def test_root_below_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = DirectoryArtifactStore(blocker / "out")
        with pytest.raises(ArtifactWriteError) as exc_info:
            store.write_if_absent("DNA A", "ACGT")
        assert exc_info.value.name == "DNA A"

    def test_failed_write_leaves_nothing(self, tmp_path):
        store = DirectoryArtifactStore(tmp_path)
        # a lone surrogate cannot be encoded as UTF-8
        with pytest.raises(ArtifactWriteError):
            store.write_if_absent("DNA A", "\ud800")
        assert not (tmp_path / "DNA A.txt").exists()
        assert store.write_if_absent("DNA A", "ACGT") is WriteStatus.WRITTEN

    def test_failed_write_leaves_no_temporary_file(self, tmp_path):
        store = DirectoryArtifactStore(tmp_path)
        with pytest.raises(ArtifactWriteError):
            store.write_if_absent("DNA A", "\ud800")
        assert list(tmp_path.iterdir()) == []

    def test_interrupted_write_publishes_nothing(self, tmp_path, monkeypatch):
        def interrupt(*args):
            raise KeyboardInterrupt

        store = DirectoryArtifactStore(tmp_path)
        monkeypatch.setattr("biolum.io.artifacts.os.link", interrupt)
        with pytest.raises(KeyboardInterrupt):
            store.write_if_absent("DNA A", "ACGT")
        assert list(tmp_path.iterdir()) == []

        monkeypatch.undo()
        assert store.write_if_absent("DNA A", "ACGT") is WriteStatus.WRITTEN
        assert store.read("DNA A") == "ACGT"

    def test_name_taken_after_existence_check(self, tmp_path):
        """Another writer creating the file first counts as already existing."""

        class LateCheckStore(DirectoryArtifactStore):
            def exists(self, name):
                self.path_for(name).write_text("other writer", encoding="utf-8")
                return False

        store = LateCheckStore(tmp_path)
        assert store.write_if_absent("DNA A", "ACGT") is WriteStatus.ALREADY_EXISTS
        assert (tmp_path / "DNA A.txt").read_text(encoding="utf-8") == "other writer"
        assert [path.name for path in tmp_path.iterdir()] == ["DNA A.txt"]

    def test_published_file_is_readable_by_others(self, tmp_path):
        store = DirectoryArtifactStore(tmp_path)
        store.write_if_absent("DNA A", "ACGT")
        assert (tmp_path / "DNA A.txt").stat().st_mode & 0o044 == 0o044
