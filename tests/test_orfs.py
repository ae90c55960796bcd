"""ORF finder: ATG to first in-frame stop, >= 30 bp, longest first."""

from geneforge.core.orfs import MIN_ORF_LENGTH, find_orfs, orf_highlights


def test_short_orfs_are_filtered() -> None:
    # Two ORFs of 9 bp each, both below the minimum length.
    assert find_orfs("ATGAAATAAATGCCCTAG") == []


def test_minimum_length_is_inclusive() -> None:
    seq = "ATG" + "AAA" * 8 + "TAA"
    assert len(seq) == MIN_ORF_LENGTH
    orfs = find_orfs(seq)
    assert len(orfs) == 1
    assert (orfs[0].start, orfs[0].end, orfs[0].length) == (0, 30, 30)


def test_orfs_sorted_longest_first() -> None:
    first = "ATG" + "GCC" * 9 + "TGA"    # 33 bp at 0
    second = "ATG" + "AAA" * 10 + "TAG"  # 36 bp at 34
    seq = first + "C" + second
    orfs = find_orfs(seq)
    assert [(o.start, o.end) for o in orfs] == [(34, 70), (0, 33)]
    assert [o.length for o in orfs] == [36, 33]


def test_nested_starts_share_a_stop() -> None:
    seq = "ATGATG" + "AAA" * 9 + "TAA"
    orfs = find_orfs(seq)
    assert [(o.start, o.end) for o in orfs] == [(0, 36), (3, 36)]


def test_open_ended_orf_is_not_reported() -> None:
    assert find_orfs("ATG" + "AAA" * 20) == []


def test_stop_must_be_in_frame() -> None:
    # TAA at offset 4 is out of frame; the in-frame stop is the final TAG.
    seq = "ATGGTAA" + "A" * 26 + "TAG"
    orfs = find_orfs(seq)
    assert len(orfs) == 1
    assert orfs[0].end == len(seq)


def test_custom_min_length_and_lowercase() -> None:
    orfs = find_orfs("atgaaataa", min_length=9)
    assert [(o.start, o.end, o.length) for o in orfs] == [(0, 9, 9)]


def test_frame_and_empty_sequence() -> None:
    orfs = find_orfs("C" + "ATG" + "AAA" * 8 + "TAA")
    assert orfs[0].frame == 1
    assert find_orfs("") == []


def test_orf_highlights_labels() -> None:
    orfs = find_orfs("ATG" + "AAA" * 8 + "TAA")
    highlights = orf_highlights(orfs)
    assert highlights[0].category == "orf"
    assert highlights[0].label == "ORF 1-30 (30 bp, frame 1)"
