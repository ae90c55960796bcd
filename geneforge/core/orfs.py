"""
Forward-strand ORF finder.

Every ATG is followed codon by codon to the nearest in-frame stop. Nested
starts sharing one stop are reported separately, so ORFs may overlap. A start
without an in-frame stop before the end of the sequence yields nothing: ORFs
running off the 3' end are not reported.
"""
from __future__ import annotations

from typing import List

from geneforge.core.motifs import HIGHLIGHT_COLORS, find_all_occurrences
from geneforge.schemas.sequence import ORF, Annotation, Region
from geneforge.utils.translation import START_CODON, STOP_CODONS

# 10 codons including the stop.
MIN_ORF_LENGTH = 30


def _next_in_frame_stop(sequence: str, start: int) -> int:
    """Position of the first in-frame stop codon after ``start``, or -1."""
    for i in range(start + 3, len(sequence) - 2, 3):
        if sequence[i:i + 3] in STOP_CODONS:
            return i
    return -1


def find_orfs(sequence: str, min_length: int = MIN_ORF_LENGTH) -> List[ORF]:
    """Return ORFs sorted longest first (stable, so ties stay in start order)."""
    if not sequence:
        return []
    seq = sequence.upper()
    orfs: List[ORF] = []
    for start in find_all_occurrences(seq, START_CODON):
        stop = _next_in_frame_stop(seq, start)
        if stop == -1:
            continue
        end = stop + 3
        length = end - start
        if length >= min_length:
            orfs.append(ORF(start=start, end=end, length=length))
    return sorted(orfs, key=lambda orf: orf.length, reverse=True)


def orf_highlights(orfs: List[ORF]) -> List[Annotation]:
    return [
        Annotation(
            region=Region(start=orf.start, end=orf.end),
            label=f"ORF {orf.start + 1}-{orf.end} ({orf.length} bp, frame {orf.frame + 1})",
            color=HIGHLIGHT_COLORS["orf"],
            category="orf",
        )
        for orf in orfs
    ]
