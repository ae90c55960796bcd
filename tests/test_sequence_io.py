import tempfile
from pathlib import Path

import pytest
from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from geneforge.utils.sequence_io import read_upload_text, write_fasta


def test_fasta_upload_returns_first_record() -> None:
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "seqs.fasta"
        path.write_text(">one description\nATGC\nGGCC\n>two\nTTTT\n")
        assert read_upload_text(path) == "ATGCGGCC"


def test_write_fasta_round_trip() -> None:
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "out.fa"
        write_fasta("seq1", "ATGAAATAA", path, description="test")
        assert path.read_text().startswith(">seq1 test")
        assert read_upload_text(path) == "ATGAAATAA"


def test_genbank_upload() -> None:
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "record.gb"
        record = SeqRecord(
            Seq("ATGGATTAG"),
            id="REC1",
            name="REC1",
            description="test record",
            annotations={"molecule_type": "DNA"},
        )
        with path.open("w") as handle:
            SeqIO.write([record], handle, "genbank")
        assert read_upload_text(path) == "ATGGATTAG"


def test_plain_text_upload_is_returned_as_is() -> None:
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "seq.txt"
        path.write_text("atg ccc\n123 taa")
        assert read_upload_text(path) == "atg ccc\n123 taa"


def test_fasta_without_records_falls_back_to_text() -> None:
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "bare.fa"
        path.write_text("ATGCATGC")
        assert read_upload_text(path) == "ATGCATGC"


def test_unsupported_extension() -> None:
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "seq.pdf"
        path.write_text("ATGC")
        with pytest.raises(ValueError, match="Unsupported file type"):
            read_upload_text(path)
