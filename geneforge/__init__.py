"""
GeneForge Workbench - browser-based DNA/RNA/protein sequence editor.

This package provides tools for:
- Sanitizing and classifying raw sequence text
- Scanning for codons, restriction sites and promoter elements
- Finding open reading frames and translating them
- Composition statistics (GC content, symbol counts)
- Mapping selections between raw and triplet-grouped display
"""

__version__ = "0.1.0"

from pathlib import Path

# Package paths
PACKAGE_DIR = Path(__file__).parent
CONFIG_DIR = PACKAGE_DIR / "config"
USER_DIR = Path.home() / ".geneforge"
