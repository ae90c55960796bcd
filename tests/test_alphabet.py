import random

import pytest

from geneforge.core.alphabet import UNION_ALPHABET, classify, parse_sequence, sanitize


def test_sanitize_strips_whitespace_digits_and_fasta_marker() -> None:
    assert sanitize("> atg c\n12 gu") == "ATGCGU"


def test_sanitize_drops_characters_outside_alphabet() -> None:
    assert sanitize("ATG-CC*") == "ATGCC"
    assert sanitize("") == ""


def test_sanitize_never_grows_the_input() -> None:
    # "ß".upper() is "SS"; it must be dropped, not expanded.
    raw = "straße"
    canonical = sanitize(raw)
    assert canonical == "STRAE"
    assert len(canonical) <= len(raw)


def test_classify_order_dna_then_rna_then_protein() -> None:
    assert classify("ATGC") == "dna"
    assert classify("ACGTN") == "dna"
    assert classify("AUGC") == "rna"
    assert classify("MKVLA") == "protein"
    # Only A/C/G: fits every alphabet, DNA wins.
    assert classify("ACG") == "dna"
    assert classify("AUGCUA") == "rna"
    assert classify("ACDEFG") == "protein"


def test_classify_unknown() -> None:
    assert classify("") == "unknown"
    # Mixed T and U fits neither nucleotide alphabet, and U is not an amino acid.
    assert classify("ATGU") == "unknown"
    assert classify("XXX") == "unknown"


def test_classify_ignores_case_and_whitespace() -> None:
    assert classify("atg c") == "dna"


def test_parse_sequence_keeps_header_letters() -> None:
    # Header text is not special-cased; its letters survive sanitization.
    parsed = parse_sequence(">seq1\natgaaa")
    assert parsed.raw == ">seq1\natgaaa"
    assert parsed.canonical == "SEQATGAAA"
    assert parsed.kind == "protein"
    assert parsed.length == 9


def test_parse_sequence_plain_dna() -> None:
    parsed = parse_sequence("atg ccc")
    assert parsed.canonical == "ATGCCC"
    assert parsed.kind == "dna"


def _clean_samples(seed: int, count: int = 50):
    rng = random.Random(seed)
    symbols = UNION_ALPHABET + UNION_ALPHABET.lower() + " \n"
    return ["".join(rng.choice(symbols) for _ in range(rng.randint(0, 30))) for _ in range(count)]


@pytest.mark.parametrize(
    "text",
    ["ATGC", "atg c", "AUGCUA", "acdefg", "MKV LA\n", "ATGU", "", "XXX"] + _clean_samples(7),
)
def test_classify_unchanged_by_sanitize(text: str) -> None:
    assert classify(sanitize(text)) == classify(text)
