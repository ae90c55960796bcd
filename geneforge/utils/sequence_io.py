"""
Sequence upload and export helpers backed by Biopython.
"""
from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Optional

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

logger = logging.getLogger(__name__)

SUPPORTED_UPLOAD_EXTENSIONS = {".txt", ".fasta", ".fa", ".gb"}
_SEQIO_FORMATS = {".fasta": "fasta", ".fa": "fasta", ".gb": "genbank"}


def _first_record_sequence(text: str, fmt: str) -> Optional[str]:
    try:
        record = next(SeqIO.parse(StringIO(text), fmt), None)
    except ValueError as exc:
        logger.warning("Could not parse upload as %s: %s", fmt, exc)
        return None
    if record is None:
        return None
    seq = str(record.seq)
    return seq or None


def read_upload_text(path: Path) -> str:
    """Return the sequence text of an uploaded file.

    FASTA and GenBank files yield the first record's sequence; plain text, or
    a file whose records cannot be parsed, is returned as-is for sanitization.
    """
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_UPLOAD_EXTENSIONS:
        raise ValueError(
            f"Unsupported file type: {path.suffix or '(none)'}. "
            f"Please upload {', '.join(sorted(SUPPORTED_UPLOAD_EXTENSIONS))} files."
        )
    text = path.read_text(errors="replace")
    fmt = _SEQIO_FORMATS.get(suffix)
    if fmt is None:
        return text
    return _first_record_sequence(text, fmt) or text


def write_fasta(name: str, sequence: str, path: Path, description: str = "") -> None:
    """Write a single-record FASTA file."""
    record = SeqRecord(Seq(sequence), id=str(name), description=description)
    with path.open("w") as handle:
        SeqIO.write([record], handle, "fasta")
