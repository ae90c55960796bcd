"""
Sequence alphabets, input sanitization and type classification.

Classification tests DNA first, then RNA, then protein. The DNA alphabet is
a subset of the protein one, so a short ACGT-only string would otherwise be
ambiguous.
"""
from __future__ import annotations

import re

from geneforge.schemas.sequence import ParsedSequence, SequenceKind

# Nucleotide ambiguity codes plus amino acid letters.
UNION_ALPHABET = "ATGCUNRYWSMKHBVDXPLFQZEJI"
DNA_ALPHABET = "ATGCN"
RNA_ALPHABET = "AUGCN"
PROTEIN_ALPHABET = "ACDEFGHIKLMNPQRSTVWY"

_STRIP_RE = re.compile(r"[\s\d>]")
_UNION_SET = frozenset(UNION_ALPHABET)
_WHITESPACE_RE = re.compile(r"\s+")

_KIND_PATTERNS = (
    ("dna", re.compile(f"[{DNA_ALPHABET}]+")),
    ("rna", re.compile(f"[{RNA_ALPHABET}]+")),
    ("protein", re.compile(f"[{PROTEIN_ALPHABET}]+")),
)


def sanitize(text: str) -> str:
    """Return the canonical (uppercase, union-alphabet only) form of ``text``."""
    if not text:
        return ""
    cleaned = _STRIP_RE.sub("", text)
    # Per-character uppercasing: str.upper() can expand one character into two ("ß" -> "SS").
    return "".join(ch.upper() for ch in cleaned if ch.upper() in _UNION_SET)


def classify(sequence: str) -> SequenceKind:
    cleaned = _WHITESPACE_RE.sub("", sequence or "").upper()
    if not cleaned:
        return "unknown"
    for kind, pattern in _KIND_PATTERNS:
        if pattern.fullmatch(cleaned):
            return kind
    return "unknown"


def parse_sequence(text: str) -> ParsedSequence:
    """Sanitize and classify in one step."""
    canonical = sanitize(text)
    return ParsedSequence(raw=text or "", canonical=canonical, kind=classify(canonical))
