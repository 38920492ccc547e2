"""
ASMplot v0.1.0

I/O helpers for ASMplot.

1. paths.py - canonical base names for reads tables and assemblies
2. ktab.py - FastK table header access and k-mer size checks
"""

from .paths import (
    SEQUENCE_SUFFIXES,
    TABLE_SUFFIX,
    strip_sequence_suffix,
    strip_table_suffix,
    table_path,
)
from .ktab import check_table, read_kmer_size

__all__ = [
    "SEQUENCE_SUFFIXES",
    "TABLE_SUFFIX",
    "strip_sequence_suffix",
    "strip_table_suffix",
    "table_path",
    "check_table",
    "read_kmer_size",
]
