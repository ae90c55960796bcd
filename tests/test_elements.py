from geneforge.core.elements import elements_for, find_element, insert_element


def test_insert_appends_without_position() -> None:
    assert insert_element("AAAA", "GG") == "AAAAGG"


def test_insert_at_cursor() -> None:
    assert insert_element("AAAA", "GG", 2) == "AAGGAA"


def test_insert_replaces_selection() -> None:
    assert insert_element("AAAA", "GG", 1, 3) == "AGGA"


def test_insert_clamps_out_of_range() -> None:
    assert insert_element("AA", "G", 10) == "AAG"
    assert insert_element("AA", "G", -3) == "GAA"


def test_elements_per_kind() -> None:
    assert find_element("dna", "EcoRI").sequence == "GAATTC"
    assert find_element("protein", "His-Tag").sequence == "HHHHHH"
    assert find_element("dna", "His-Tag") is None
    assert elements_for("unknown") == []
    assert "T" not in "".join(e.sequence for e in elements_for("rna"))
