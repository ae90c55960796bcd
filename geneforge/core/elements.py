"""Common sequence elements offered for quick insertion in the editor."""
from __future__ import annotations

from typing import Dict, List, NamedTuple, Optional

from geneforge.schemas.sequence import SequenceKind


class SequenceElement(NamedTuple):
    name: str
    sequence: str


COMMON_ELEMENTS: Dict[SequenceKind, List[SequenceElement]] = {
    "dna": [
        SequenceElement("Start (ATG)", "ATG"),
        SequenceElement("Stop (TAA)", "TAA"),
        SequenceElement("EcoRI", "GAATTC"),
        SequenceElement("BamHI", "GGATCC"),
        SequenceElement("HindIII", "AAGCTT"),
    ],
    "rna": [
        SequenceElement("Start (AUG)", "AUG"),
        SequenceElement("Stop (UAA)", "UAA"),
        SequenceElement("poly-A", "A" * 12),
    ],
    "protein": [
        SequenceElement("His-Tag", "HHHHHH"),
        SequenceElement("FLAG", "DYKDDDDK"),
        SequenceElement("HA", "YPYDVPDYA"),
    ],
    "unknown": [],
}


def elements_for(kind: SequenceKind) -> List[SequenceElement]:
    return list(COMMON_ELEMENTS.get(kind, []))


def find_element(kind: SequenceKind, name: str) -> Optional[SequenceElement]:
    for element in COMMON_ELEMENTS.get(kind, []):
        if element.name == name:
            return element
    return None


def insert_element(
    sequence: str,
    element: str,
    start: Optional[int] = None,
    end: Optional[int] = None,
) -> str:
    """Replace ``sequence[start:end]`` with ``element``; append when no position is given."""
    if start is None:
        return sequence + element
    if end is None:
        end = start
    start = min(max(start, 0), len(sequence))
    end = min(max(end, start), len(sequence))
    return sequence[:start] + element + sequence[end:]
