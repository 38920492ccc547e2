#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Path normalization for reads tables and assembly sequence files.

FastK names its output after the root of the input file, so every generated
artifact is addressed by a canonical base name with the file suffix removed.

Author: ASMplot Development Team
License: See README.md
"""

from typing import Tuple

TABLE_SUFFIX = ".ktab"

# Checked in this order; the first hit is the only suffix removed.
SEQUENCE_SUFFIXES: Tuple[str, ...] = (
    ".gz", ".fa", ".fq", ".fasta", ".fastq", ".db", ".sam", ".bam", ".cram",
)


def _strip_suffix(path: str, suffix: str) -> str:
    if len(path) > len(suffix) and path.endswith(suffix):
        return path[:-len(suffix)]
    return path


def strip_table_suffix(path: str) -> str:
    """
    Remove a trailing ``.ktab`` from a reads table argument.

    Example:
        >>> strip_table_suffix("data/reads.ktab")
        'data/reads'
        >>> strip_table_suffix("reads")
        'reads'
    """
    return _strip_suffix(path, TABLE_SUFFIX)


def strip_sequence_suffix(path: str) -> str:
    """
    Remove at most one known sequence-file suffix from an assembly path.

    Suffixes are tried in SEQUENCE_SUFFIXES order and only the first match
    is removed, so chained suffixes keep everything but the outermost one.

    Args:
        path: Assembly path as given on the command line

    Returns:
        Canonical base name (unchanged if no suffix matches)

    Example:
        >>> strip_sequence_suffix("asm/genome.fasta")
        'asm/genome'
        >>> strip_sequence_suffix("sample.fq.gz")
        'sample.fq'
    """
    for suffix in SEQUENCE_SUFFIXES:
        stripped = _strip_suffix(path, suffix)
        if stripped != path:
            return stripped
    return path


def table_path(base: str) -> str:
    """Path of the k-mer table FastK writes for ``base``."""
    return base + TABLE_SUFFIX

# ASMplot v0.1.0
# Any usage is subject to this software's license.
