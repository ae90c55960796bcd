#!/usr/bin/env python3
"""Standard genetic code translation backed by Biopython's codon tables."""
from __future__ import annotations

from typing import Dict

from Bio.Data import CodonTable
from Bio.Seq import Seq

# NCBI table 1 = standard genetic code.
STANDARD_TABLE_ID = 1
START_CODON = "ATG"
STOP_CODONS = {"TAA", "TAG", "TGA"}
UNKNOWN_RESIDUE = "X"
STOP_RESIDUE = "*"


def _build_codon_table(table_id: int = STANDARD_TABLE_ID) -> Dict[str, str]:
    table = CodonTable.unambiguous_dna_by_id[table_id]
    codons = dict(table.forward_table)
    for stop in table.stop_codons:
        codons[stop] = STOP_RESIDUE
    return codons


# 61 sense codons + 3 stops.
STANDARD_CODON_TABLE: Dict[str, str] = _build_codon_table()


def translate(segment: str | Seq) -> str:
    """Translate codon by codon; a trailing partial codon is dropped.

    Unlike ``Seq.translate`` this never raises: anything that is not a
    plain nucleotide triplet becomes ``X``.
    """
    dna = str(segment).upper().replace("U", "T")
    usable = len(dna) - (len(dna) % 3)
    return "".join(
        STANDARD_CODON_TABLE.get(dna[i:i + 3], UNKNOWN_RESIDUE)
        for i in range(0, usable, 3)
    )


def complement(sequence: str) -> str:
    return str(Seq(sequence.upper()).complement())
