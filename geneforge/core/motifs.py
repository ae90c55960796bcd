"""
Literal motif scanning (codons, restriction sites, promoter elements).

Matches are exact substrings on the forward strand; overlapping hits are kept.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from geneforge.schemas.sequence import Annotation, MotifCategory, MotifHit, MotifRegions, Region

START_CODON_MOTIFS: Tuple[Tuple[str, str], ...] = (("Start codon", "ATG"),)
STOP_CODON_MOTIFS: Tuple[Tuple[str, str], ...] = (
    ("Stop codon (ochre)", "TAA"),
    ("Stop codon (amber)", "TAG"),
    ("Stop codon (opal)", "TGA"),
)
RESTRICTION_SITES: Tuple[Tuple[str, str], ...] = (
    ("EcoRI", "GAATTC"),
    ("BamHI", "GGATCC"),
    ("HindIII", "AAGCTT"),
    ("PstI", "CTGCAG"),
    ("SalI", "GTCGAC"),
    ("XbaI", "TCTAGA"),
)
PROMOTER_ELEMENTS: Tuple[Tuple[str, str], ...] = (
    ("-10 box (Pribnow)", "TATAAT"),
    ("-35 box", "TTGACA"),
    ("TATA box", "TATAAA"),
)

MOTIF_TABLE: Dict[MotifCategory, Tuple[Tuple[str, str], ...]] = {
    "start_codon": START_CODON_MOTIFS,
    "stop_codon": STOP_CODON_MOTIFS,
    "restriction_site": RESTRICTION_SITES,
    "promoter": PROMOTER_ELEMENTS,
}

HIGHLIGHT_COLORS: Dict[str, str] = {
    "start_codon": "#22C55E",
    "stop_codon": "#EF4444",
    "restriction_site": "#F59E0B",
    "promoter": "#8B5CF6",
    "orf": "#3B82F6",
    "misc": "#64748B",
}


def find_all_occurrences(text: str, pattern: str) -> List[int]:
    """Start positions of every (possibly overlapping) occurrence of ``pattern``."""
    if not text or not pattern:
        return []
    positions: List[int] = []
    pos = text.find(pattern)
    while pos != -1:
        positions.append(pos)
        pos = text.find(pattern, pos + 1)
    return positions


def _scan(sequence: str, category: MotifCategory) -> List[MotifHit]:
    hits: List[MotifHit] = []
    for name, pattern in MOTIF_TABLE[category]:
        for start in find_all_occurrences(sequence, pattern):
            hits.append(
                MotifHit(
                    start=start,
                    end=start + len(pattern),
                    category=category,
                    pattern=pattern,
                    name=name,
                )
            )
    return hits


def find_regions(sequence: str) -> MotifRegions:
    """Scan for all motif categories. Hits are grouped per pattern, in table order."""
    if not sequence:
        return MotifRegions()
    seq = sequence.upper()
    return MotifRegions(
        start_codons=_scan(seq, "start_codon"),
        stop_codons=_scan(seq, "stop_codon"),
        restriction_sites=_scan(seq, "restriction_site"),
        promoters=_scan(seq, "promoter"),
    )


def motif_highlights(regions: MotifRegions, enzymes: Optional[Iterable[str]] = None) -> List[Annotation]:
    """Convert motif hits into viewer annotations.

    When ``enzymes`` is given, only restriction sites cut by those enzymes are kept.
    """
    enzyme_filter = None if enzymes is None else set(enzymes)
    highlights: List[Annotation] = []
    for hit in regions.all_hits():
        if hit.category == "restriction_site" and enzyme_filter is not None and hit.name not in enzyme_filter:
            continue
        highlights.append(
            Annotation(
                region=Region(start=hit.start, end=hit.end),
                label=hit.name,
                color=HIGHLIGHT_COLORS[hit.category],
                category=hit.category,
            )
        )
    return highlights
