#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Assembly k-mer table construction and removal.

Tables that already exist when a run starts belong to the user and are only
checked. Tables this run builds are owned by the run and are removed again
with Fastrm once plotting is over, whether or not it succeeded.

Author: ASMplot Development Team
License: See README.md
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..errors import ExternalToolError
from ..io_utils.ktab import check_table
from ..io_utils.paths import strip_sequence_suffix, table_path
from ..utils.external import ToolRunner, run_tool

logger = logging.getLogger(__name__)


@dataclass
class AssemblySpec:
    """
    One input assembly.

    Attributes:
        source: Path as given on the command line
        base: Canonical base name (known sequence suffix removed)
        owned: True once this run has started building the table
    """
    source: str
    base: str
    owned: bool = False

    @classmethod
    def from_path(cls, path: str) -> "AssemblySpec":
        return cls(source=path, base=strip_sequence_suffix(path))

    @property
    def table_path(self) -> str:
        return table_path(self.base)

    def table_exists(self) -> bool:
        return os.path.exists(self.table_path)


class CountTableBuilder:
    """
    Build missing assembly tables with FastK.

    FastK is run in table-only mode (``-t1``) on the assembly's base name and
    finds the sequence file itself.
    """

    def __init__(self, kmer: int, threads: int, scratch_dir: str,
                 exe: str = "FastK", timeout: Optional[float] = None,
                 runner: Optional[ToolRunner] = None):
        self.kmer = kmer
        self.threads = threads
        self.scratch_dir = scratch_dir
        self.exe = exe
        self.timeout = timeout
        self.runner = runner or run_tool

    def build_cmd(self, assembly: AssemblySpec) -> List[str]:
        return [
            self.exe,
            f"-k{self.kmer}",
            f"-T{self.threads}",
            f"-P{self.scratch_dir}",
            "-t1",
            assembly.base,
        ]

    def ensure_table(self, assembly: AssemblySpec) -> bool:
        """
        Make sure ``assembly`` has a table with the run's k-mer size.

        Args:
            assembly: Assembly to prepare; marked owned if a build starts

        Returns:
            True if the table was built by this call

        Raises:
            ExternalToolError: If FastK fails
            KmerMismatchError: If the table's k-mer size differs
        """
        if assembly.table_exists():
            logger.info(f"Using existing k-mer table {assembly.table_path}")
            check_table(assembly.table_path, self.kmer)
            return False

        logger.info(f"Making k-mer table for assembly {assembly.source}")
        # Owned from here on: anything FastK leaves behind is ours to remove.
        assembly.owned = True
        self.runner(self.build_cmd(assembly), timeout=self.timeout)
        check_table(assembly.table_path, self.kmer)
        return True


class TableRemover:
    """Remove owned assembly tables with Fastrm."""

    def __init__(self, exe: str = "Fastrm", timeout: Optional[float] = None,
                 runner: Optional[ToolRunner] = None):
        self.exe = exe
        self.timeout = timeout
        self.runner = runner or run_tool

    def build_cmd(self, assembly: AssemblySpec) -> List[str]:
        return [self.exe, assembly.base]

    def cleanup(self, assemblies: Iterable[AssemblySpec]) -> List[str]:
        """
        Remove the tables of every owned assembly.

        Failures are logged and skipped so one bad removal never stops the
        others or hides an earlier error.

        Returns:
            Base names whose tables were removed
        """
        removed = []
        for assembly in assemblies:
            if not assembly.owned:
                continue
            try:
                self.runner(self.build_cmd(assembly), timeout=self.timeout)
            except ExternalToolError as e:
                logger.warning(f"Could not remove k-mer table for {assembly.base}: {e}")
                continue
            removed.append(assembly.base)
            logger.debug(f"Removed k-mer table {assembly.table_path}")
        return removed

# ASMplot v0.1.0
# Any usage is subject to this software's license.
