from typing import Iterable, Optional

import pandas as pd

from geneforge.core.alphabet import parse_sequence
from geneforge.core.composition import composition_percentages, count_symbols, gc_content
from geneforge.core.motifs import find_regions, motif_highlights
from geneforge.core.orfs import find_orfs, orf_highlights
from geneforge.schemas.sequence import MotifRegions, Region, SequenceAnalysis
from geneforge.utils.translation import translate


class SequenceService:
    """
    Service that turns raw editor text into a full analysis report.
    Stateless: every call recomputes from the text it is given.
    """

    def analyze(self, text: str, enzymes: Optional[Iterable[str]] = None) -> SequenceAnalysis:
        """Sanitize, classify and run every analyzer that applies to the sequence kind.

        Args:
            text: Raw input (pasted, typed or uploaded)
            enzymes: Optional restriction enzyme names to keep in the highlight list
        """
        parsed = parse_sequence(text)
        canonical, kind = parsed.canonical, parsed.kind
        length = len(canonical)

        composition = count_symbols(canonical, kind)
        gc = gc_content(canonical) if kind in ("dna", "rna") else None

        orfs = []
        motifs = MotifRegions()
        highlights = []
        if kind == "dna":
            orfs = find_orfs(canonical)
            motifs = find_regions(canonical)
            highlights = motif_highlights(motifs, enzymes) + orf_highlights(orfs)

        return SequenceAnalysis(
            kind=kind,
            canonical=canonical,
            length=length,
            gc_content=gc,
            composition=composition,
            percentages=composition_percentages(composition, length),
            orfs=orfs,
            motifs=motifs,
            highlights=highlights,
        )

    def translate_region(self, canonical: str, region: Optional[Region] = None) -> str:
        if region is None:
            return translate(canonical)
        return translate(canonical[region.start:region.end])

    @staticmethod
    def describe_selection(region: Optional[Region], unit: str = "bp") -> str:
        if region is None:
            return "No selection"
        return f"Selected: {region.start + 1}-{region.end} ({region.span} {unit})"

    def composition_frame(self, analysis: SequenceAnalysis) -> pd.DataFrame:
        rows = [
            {
                "Symbol": symbol,
                "Count": count,
                "Percent": round(analysis.percentages.get(symbol, 0.0), 1),
            }
            for symbol, count in analysis.composition.items()
        ]
        return pd.DataFrame(rows, columns=["Symbol", "Count", "Percent"])

    def orf_frame(self, analysis: SequenceAnalysis) -> pd.DataFrame:
        rows = []
        for orf in analysis.orfs:
            rows.append({
                # Display 1-based inclusive coordinates for UI readability.
                "Start": orf.start + 1,
                "End": orf.end,
                "Length (bp)": orf.length,
                "Frame": orf.frame + 1,
                "Protein": translate(analysis.canonical[orf.start:orf.end]),
            })
        return pd.DataFrame(rows, columns=["Start", "End", "Length (bp)", "Frame", "Protein"])

    def motif_frame(self, analysis: SequenceAnalysis) -> pd.DataFrame:
        rows = [
            {
                "Category": hit.category,
                "Name": hit.name,
                "Pattern": hit.pattern,
                "Start": hit.start + 1,
                "End": hit.end,
            }
            for hit in analysis.motifs.all_hits()
        ]
        return pd.DataFrame(rows, columns=["Category", "Name", "Pattern", "Start", "End"])
