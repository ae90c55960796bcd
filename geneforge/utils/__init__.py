"""
Utility modules for sequence handling.

Modules:
- translation: Standard genetic code translation
- sequence_io: Upload parsing and FASTA export
"""

from geneforge.utils.translation import (
    translate,
    complement,
    START_CODON,
    STOP_CODONS,
    STANDARD_CODON_TABLE,
)
from geneforge.utils.sequence_io import (
    read_upload_text,
    write_fasta,
    SUPPORTED_UPLOAD_EXTENSIONS,
)

__all__ = [
    "translate",
    "complement",
    "START_CODON",
    "STOP_CODONS",
    "STANDARD_CODON_TABLE",
    "read_upload_text",
    "write_fasta",
    "SUPPORTED_UPLOAD_EXTENSIONS",
]
