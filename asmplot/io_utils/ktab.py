#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

K-mer table header access.

A FastK ``.ktab`` stub file starts with the k-mer length the table was
built with, stored as a 4-byte little-endian integer. Nothing else in the
table is read here.

Author: ASMplot Development Team
License: See README.md
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np

from ..errors import KmerMismatchError, TableFormatError, TableNotFoundError

logger = logging.getLogger(__name__)

KMER_FIELD = np.dtype("<i4")


def read_kmer_size(path: Union[str, Path]) -> int:
    """
    Read the k-mer size recorded in a table's header.

    Args:
        path: Path to the ``.ktab`` file

    Returns:
        The stored k-mer size

    Raises:
        TableNotFoundError: If the table cannot be opened
        TableFormatError: If the header is truncated or not positive
    """
    try:
        with open(path, "rb") as f:
            header = f.read(KMER_FIELD.itemsize)
    except OSError:
        raise TableNotFoundError(str(path))

    if len(header) < KMER_FIELD.itemsize:
        raise TableFormatError(f"FastK table {path} is truncated")

    kmer = int(np.frombuffer(header, dtype=KMER_FIELD)[0])
    if kmer <= 0:
        raise TableFormatError(f"FastK table {path} reports invalid k-mer size {kmer}")
    return kmer


def check_table(path: Union[str, Path], expected: int = 0) -> int:
    """
    Verify that a table exists and was built with the expected k-mer size.

    Args:
        path: Path to the ``.ktab`` file
        expected: Required k-mer size, or 0 to accept any size

    Returns:
        The k-mer size recorded in the table

    Raises:
        TableNotFoundError: If the table cannot be opened
        KmerMismatchError: If ``expected`` is set and differs
    """
    kmer = read_kmer_size(path)
    if expected != 0 and kmer != expected:
        raise KmerMismatchError(str(path), kmer, expected)
    logger.debug(f"Table {path} has k-mer size {kmer}")
    return kmer

# ASMplot v0.1.0
# Any usage is subject to this software's license.
