"""
Index mapping between the raw sequence and its grouped ("triplet") rendering.

In triplet mode a single space follows every full group of three symbols,
except after the last group: ``ATGCCCA`` renders as ``ATG CCC A``. Separators
therefore sit at display positions 3, 7, 11, ...

    display(i) = i + i // 3
    raw(d)     = d - (number of separators before d)

A display position that falls on a separator resolves to the raw boundary
right after the preceding group. That is correct both for an inclusive
selection start and for an exclusive selection end, so mapped raw ranges
never include a separator.

Every function takes the display mode explicitly; in ``raw`` mode all
mappings are the identity.
"""
from __future__ import annotations

import re
from typing import Optional

from geneforge.schemas.config import DisplayMode
from geneforge.schemas.sequence import Region, SequenceKind

GROUP_SIZE = 3
SEPARATOR = " "
_WHITESPACE_RE = re.compile(r"\s+")


def effective_mode(mode: DisplayMode, kind: SequenceKind) -> DisplayMode:
    """Triplet grouping only applies to nucleotide sequences."""
    if mode == "triplet" and kind in ("dna", "rna"):
        return "triplet"
    return "raw"


def separator_count(length: int) -> int:
    if length <= 0:
        return 0
    return (length - 1) // GROUP_SIZE


def format_display(sequence: str, mode: DisplayMode) -> str:
    if mode != "triplet" or not sequence:
        return sequence
    groups = [sequence[i:i + GROUP_SIZE] for i in range(0, len(sequence), GROUP_SIZE)]
    return SEPARATOR.join(groups)


def strip_display(text: str, mode: DisplayMode) -> str:
    """Undo display formatting on edited text before storing it."""
    if mode != "triplet":
        return text
    return _WHITESPACE_RE.sub("", text)


def display_of(index: int, mode: DisplayMode, length: Optional[int] = None) -> int:
    if mode != "triplet":
        return index
    index = max(0, index)
    separators = index // GROUP_SIZE
    if length is not None:
        separators = min(separators, separator_count(length))
    return index + separators


def raw_of(display_index: int, mode: DisplayMode, length: Optional[int] = None) -> int:
    if mode != "triplet":
        raw = display_index
    else:
        display_index = max(0, display_index)
        separators = display_index // (GROUP_SIZE + 1)
        if length is not None:
            separators = min(separators, separator_count(length))
        raw = display_index - separators
    if length is not None:
        raw = min(max(raw, 0), length)
    return raw


def display_region_of(region: Region, mode: DisplayMode, length: Optional[int] = None) -> Region:
    """Display span of a raw region, without a trailing separator."""
    start = display_of(region.start, mode, length)
    end = display_of(region.end - 1, mode, length) + 1
    return Region(start=start, end=end)


def raw_region_of(
    start: int,
    end: int,
    mode: DisplayMode,
    length: Optional[int] = None,
) -> Optional[Region]:
    """Map a display selection to a raw region; None when nothing is selected."""
    lo, hi = sorted((start, end))
    raw_start = raw_of(lo, mode, length)
    raw_end = raw_of(hi, mode, length)
    if raw_end <= raw_start:
        return None
    return Region(start=raw_start, end=raw_end)
