from geneforge.utils.translation import (
    START_CODON,
    STANDARD_CODON_TABLE,
    STOP_CODONS,
    complement,
    translate,
)


def test_standard_table_shape() -> None:
    assert len(STANDARD_CODON_TABLE) == 64
    assert sum(1 for aa in STANDARD_CODON_TABLE.values() if aa == "*") == 3
    assert STANDARD_CODON_TABLE[START_CODON] == "M"
    assert all(STANDARD_CODON_TABLE[codon] == "*" for codon in STOP_CODONS)


def test_translate_with_stop() -> None:
    assert translate("ATGGATTAG") == "MD*"


def test_translate_reads_u_as_t() -> None:
    assert translate("AUGGAU") == "MD"


def test_translate_unknown_codon_and_partial_codon() -> None:
    assert translate("ATGNNN") == "MX"
    assert translate("ATGGA") == "M"
    assert translate("") == ""


def test_complement() -> None:
    assert complement("ATGC") == "TACG"
