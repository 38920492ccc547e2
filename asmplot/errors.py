#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Exception types raised by the spectra pipeline.

Every error a run can end with derives from AsmPlotError, so the command
line layer only needs a single handler to turn them into exit status 1.

Author: ASMplot Development Team
License: See README.md
"""

from typing import Optional, Sequence


class AsmPlotError(Exception):
    """Base class for all fatal pipeline errors."""
    pass


class ConfigValidationError(AsmPlotError):
    """Raised when command line or configuration file values are invalid."""
    pass


class TableNotFoundError(AsmPlotError):
    """Raised when a k-mer table cannot be opened."""

    def __init__(self, path: str):
        super().__init__(f"Cannot find FastK table {path}")
        self.path = path


class TableFormatError(AsmPlotError):
    """Raised when a k-mer table header cannot be interpreted."""
    pass


class KmerMismatchError(AsmPlotError):
    """Raised when a table's k-mer size differs from the run's k-mer size."""

    def __init__(self, path: str, found: int, expected: int):
        super().__init__(f"Kmer ({found}) of table {path} != {expected}")
        self.path = path
        self.found = found
        self.expected = expected


class ExternalToolError(AsmPlotError):
    """
    Raised when an external tool cannot be started, times out, or exits
    with a non-zero status.
    """

    def __init__(self, message: str, cmd: Optional[Sequence[str]] = None,
                 returncode: Optional[int] = None, stderr_tail: str = ""):
        super().__init__(message)
        self.cmd = list(cmd) if cmd else []
        self.returncode = returncode
        self.stderr_tail = stderr_tail

# ASMplot v0.1.0
# Any usage is subject to this software's license.
