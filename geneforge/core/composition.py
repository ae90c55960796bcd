"""GC content and per-symbol composition."""
from __future__ import annotations

from collections import Counter
from typing import Dict, Tuple

from geneforge.schemas.sequence import Composition, SequenceKind

OTHER_BUCKET = "Other"

# Bucket order is the display order.
COMPOSITION_ALPHABETS: Dict[str, Tuple[str, ...]] = {
    "dna": ("A", "T", "G", "C", "N"),
    "rna": ("A", "U", "G", "C", "N"),
    "protein": tuple("ACDEFGHIKLMNPQRSTVWY") + ("X",),
}


def gc_content(sequence: str) -> float:
    """Percentage of G and C symbols; 0.0 for an empty sequence."""
    if not sequence:
        return 0.0
    seq = sequence.upper()
    gc = seq.count("G") + seq.count("C")
    return gc / len(seq) * 100


def count_symbols(sequence: str, kind: SequenceKind) -> Composition:
    seq = "".join(sequence.split()).upper() if sequence else ""
    if not seq:
        return {}

    alphabet = COMPOSITION_ALPHABETS.get(kind)
    if alphabet is None:
        # Unknown type: count whatever is there, first-seen order.
        return dict(Counter(seq))

    observed = Counter(seq)
    counts: Composition = {symbol: observed.get(symbol, 0) for symbol in alphabet}
    counts[OTHER_BUCKET] = sum(n for symbol, n in observed.items() if symbol not in counts)
    return {symbol: n for symbol, n in counts.items() if n > 0}


def composition_percentages(composition: Composition, length: int) -> Dict[str, float]:
    if length <= 0:
        return {symbol: 0.0 for symbol in composition}
    return {symbol: n / length * 100 for symbol, n in composition.items()}
