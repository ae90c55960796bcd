from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from geneforge.schemas.sequence import Region, SequenceAnalysis
from geneforge.services.sequence_service import SequenceService
from geneforge.utils.sequence_io import read_upload_text

logger = logging.getLogger(__name__)


def _parse_range(value: str) -> Region:
    """Parse a 1-based inclusive ``START:END`` range into a raw Region."""
    try:
        start_s, end_s = value.split(":", 1)
        start, end = int(start_s), int(end_s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected START:END, got {value!r}") from exc
    if start < 1 or end < start:
        raise argparse.ArgumentTypeError(f"Invalid range {value!r}")
    return Region(start=start - 1, end=end)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return read_upload_text(Path(source))


def format_report(analysis: SequenceAnalysis) -> List[str]:
    unit = "aa" if analysis.kind == "protein" else "bp"
    lines = [
        f"Type: {analysis.kind.upper()}",
        f"Length: {analysis.length} {unit}",
    ]
    if analysis.gc_content is not None:
        lines.append(f"GC content: {analysis.gc_content:.1f}%")

    if analysis.composition:
        lines.append("Composition:")
        for symbol, count in analysis.composition.items():
            lines.append(f"  {symbol}: {count} ({analysis.percentages.get(symbol, 0.0):.1f}%)")

    if analysis.kind == "dna":
        lines.append(f"ORFs: {len(analysis.orfs)}")
        for orf in analysis.orfs:
            lines.append(f"  {orf.start + 1}-{orf.end} ({orf.length} bp, frame {orf.frame + 1})")
        lines.append("Motifs:")
        for category, count in analysis.motifs.counts().items():
            lines.append(f"  {category}: {count}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Analyze a DNA, RNA or protein sequence.")
    parser.add_argument("input", help="Sequence file (.txt, .fasta, .fa, .gb) or '-' for stdin")
    parser.add_argument("--json", action="store_true", help="Print the full analysis as JSON")
    parser.add_argument(
        "--translate",
        type=_parse_range,
        default=None,
        metavar="START:END",
        help="Translate a 1-based inclusive range of a nucleotide sequence",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        text = _read_input(args.input)
    except (OSError, ValueError) as exc:
        logger.error("Cannot read %s: %s", args.input, exc)
        return 2

    service = SequenceService()
    analysis = service.analyze(text)

    if args.json:
        print(analysis.model_dump_json(indent=2))
    else:
        print("\n".join(format_report(analysis)))

    if args.translate is not None:
        if analysis.kind not in ("dna", "rna"):
            logger.error("Translation needs a DNA or RNA sequence, got %s", analysis.kind)
            return 1
        if not args.translate.fits(analysis.length):
            logger.error("Range %d:%d exceeds sequence length %d",
                         args.translate.start + 1, args.translate.end, analysis.length)
            return 1
        print(f"Translation {args.translate.start + 1}-{args.translate.end}: "
              f"{service.translate_region(analysis.canonical, args.translate)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
