import argparse
import logging
import sys
from typing import List, Optional

from biolum.config import (
    DEFAULT_INDEL,
    DEFAULT_MATCH,
    DEFAULT_MISMATCH,
    DEFAULT_READING_FRAME,
    ScoringConfig,
)
from biolum.exceptions import BiolumError
from biolum.explorer import AlignmentOutcome, DerivationOutcome, Explorer, Mode
from biolum.io.artifacts import DirectoryArtifactStore
from biolum.io.records import RecordStore, SpeciesInfo

logger = logging.getLogger(__name__)

sequences_parser = argparse.ArgumentParser(add_help=False)
sequences_parser.add_argument(
    "--sequences", "-s",
    dest="sequences",
    required=True,
    type=str,
    help="The species sequence file (header line '>name', sequence lines, blank line)."
)

common_parser = argparse.ArgumentParser(add_help=False)
common_parser.add_argument(
    "--out", "-o",
    dest="out",
    required=False,
    default=".",
    type=str,
    help="The folder derived files are written to. Existing files are never overwritten."
)
common_parser.add_argument(
    "--match",
    dest="match",
    required=False,
    default=str(DEFAULT_MATCH),
    type=str,
    help="Match reward for pairwise alignment."
)
common_parser.add_argument(
    "--mismatch",
    dest="mismatch",
    required=False,
    default=str(DEFAULT_MISMATCH),
    type=str,
    help="Mismatch penalty for pairwise alignment."
)
common_parser.add_argument(
    "--indel",
    dest="indel",
    required=False,
    default=str(DEFAULT_INDEL),
    type=str,
    help="Indel penalty for pairwise alignment."
)
common_parser.add_argument(
    "--frame", "-f",
    dest="frame",
    required=False,
    default=str(DEFAULT_READING_FRAME),
    type=str,
    help="Reading frame: 1-3 forward strand, 4-6 reverse complement."
)
verbosity = common_parser.add_mutually_exclusive_group()
verbosity.add_argument(
    "--verbose", "-v",
    dest="verbose",
    action="store_true",
    help="Log debug output."
)
verbosity.add_argument(
    "--quiet", "-q",
    dest="quiet",
    action="store_true",
    help="Only log errors."
)

root_parser = argparse.ArgumentParser(
    prog="biolum",
    description="Derive DNA, RNA and protein sequences and pairwise alignments for species records."
)
subparsers = root_parser.add_subparsers(dest="command", required=True)

for mode, help_text in (
    (Mode.DNA, "Write the cleaned DNA sequence of a species."),
    (Mode.RNA, "Write the RNA transcription of a species."),
    (Mode.PROTEIN, "Write the protein translation of a species."),
):
    sub = subparsers.add_parser(
        mode.value, parents=[sequences_parser, common_parser], help=help_text
    )
    sub.add_argument("species", help="The species identifier, as written after '>'.")
    sub.set_defaults(mode=mode, info=None)

info_parser = subparsers.add_parser(
    Mode.INFO.value,
    parents=[common_parser],
    help="Print the info fields of a species."
)
info_parser.add_argument(
    "--info", "-i",
    dest="info",
    required=True,
    type=str,
    help="The species info file (header line '>name' followed by five lines)."
)
info_parser.add_argument(
    "--sequences", "-s",
    dest="sequences",
    required=False,
    default=None,
    type=str,
    help="The species sequence file. Not needed to print info."
)
info_parser.add_argument("species", help="The species identifier, as written after '>'.")
info_parser.set_defaults(mode=Mode.INFO)

align_parser = subparsers.add_parser(
    Mode.ALIGN.value,
    parents=[sequences_parser, common_parser],
    help="Globally and locally align two species and write both alignments."
)
align_parser.add_argument("species", nargs=2, help="The two species identifiers.")
align_parser.set_defaults(mode=Mode.ALIGN, info=None)


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _report(result) -> None:
    if isinstance(result, DerivationOutcome):
        print(f"{result.name}: {result.status.value}")
    elif isinstance(result, AlignmentOutcome):
        first, second = result.identifiers
        print(f"Pairwise alignment between {first} (left) and {second} (right)")
        print(f"Global alignment score: {result.global_score}")
        print(f"Local alignment score: {result.local_score}")
        print(f"{result.global_name}: {result.global_status.value}")
        print(f"{result.local_name}: {result.local_status.value}")
    elif isinstance(result, SpeciesInfo):
        print(result.id)
        for line in result.lines():
            print(line)


def run(argv: Optional[List[str]] = None) -> int:
    args = root_parser.parse_args(argv)
    _configure_logging(args)

    species = args.species if isinstance(args.species, list) else [args.species]
    try:
        scoring = ScoringConfig.from_values(args.match, args.mismatch, args.indel, args.frame)
        records = RecordStore.from_files(args.sequences, args.info)
        explorer = Explorer(records, DirectoryArtifactStore(args.out))
        result = explorer.run(args.mode, species, scoring)
    except BiolumError as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"biolum: error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"biolum: error: {exc}", file=sys.stderr)
        return 1

    _report(result)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
