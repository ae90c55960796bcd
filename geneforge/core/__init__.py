"""
Core sequence analysis modules.

Modules:
- alphabet: Sanitization and DNA/RNA/protein classification
- motifs: Literal motif scanning (codons, restriction sites, promoters)
- orfs: Forward-strand ORF finder
- composition: GC content and symbol counts
- coordinates: Raw <-> triplet display index mapping
- elements: Common insertable sequence elements
"""

from geneforge.core.alphabet import classify, parse_sequence, sanitize
from geneforge.core.composition import count_symbols, gc_content
from geneforge.core.coordinates import display_of, raw_of
from geneforge.core.motifs import find_all_occurrences, find_regions
from geneforge.core.orfs import MIN_ORF_LENGTH, find_orfs

__all__ = [
    "sanitize",
    "classify",
    "parse_sequence",
    "find_all_occurrences",
    "find_regions",
    "find_orfs",
    "MIN_ORF_LENGTH",
    "gc_content",
    "count_symbols",
    "display_of",
    "raw_of",
]
