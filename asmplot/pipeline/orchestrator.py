#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Spectra Orchestrator for ASMplot.

This module wires together one assembly-spectra run:

    reads table check → assembly tables (FastK) → plot → cleanup (Fastrm)

Key principle: the reads table fixes the k-mer size for the whole run. Every
assembly table is built or checked against it before the plotting engine is
called, and every table the run built is removed afterwards even when a
later step fails.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..config.parser import ConfigParser
from ..config.run_config import RunConfig
from ..errors import ConfigValidationError
from ..io_utils.ktab import check_table
from ..io_utils.paths import strip_table_suffix, table_path
from ..utils.external import ToolRunner, run_tool
from ..utils.scratch import DEFAULT_PREFIX, ScratchSession
from .plotting import ExternalPlotEngine, PlotEngine, PlotRequest
from .tables import AssemblySpec, CountTableBuilder, TableRemover

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSettings:
    """
    External tool locations and limits.

    Attributes:
        fastk: K-mer counter executable
        fastrm: Table removal executable
        plotter: Plotting engine executable
        timeout: Seconds allowed per tool invocation (None = no limit)
        scratch_prefix: Leading part of the per-run scratch name
    """
    fastk: str = "FastK"
    fastrm: str = "Fastrm"
    plotter: str = "asm_plotter"
    timeout: Optional[float] = None
    scratch_prefix: str = DEFAULT_PREFIX

    @classmethod
    def from_config(cls, parser: ConfigParser) -> "ToolSettings":
        tools = parser.get_tools_config()
        execution = parser.get_execution_config()
        return cls(
            fastk=tools['fastk'],
            fastrm=tools['fastrm'],
            plotter=tools['plotter'],
            timeout=execution.get('timeout'),
            scratch_prefix=execution.get('scratch_prefix', DEFAULT_PREFIX),
        )


@dataclass
class RunResult:
    """
    Outcome of a completed run.

    Attributes:
        kmer: K-mer size shared by all tables
        reads: Reads table base name
        assemblies: Assemblies compared, with their ownership flags
        built: Base names whose tables this run built
        removed: Base names whose tables were removed again
        scratch_root: Scratch name handed to the plotting engine
    """
    kmer: int
    reads: str
    assemblies: List[AssemblySpec]
    built: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    scratch_root: Optional[Path] = None


class SpectraOrchestrator:
    """
    Run the assembly-spectra pipeline for one RunConfig.

    External tools are started through ``runner`` and the plot is drawn by
    ``plot_engine``; both default to the real external programs.
    """

    def __init__(self, config: RunConfig, tools: Optional[ToolSettings] = None,
                 runner: Optional[ToolRunner] = None,
                 plot_engine: Optional[PlotEngine] = None):
        """
        Initialize orchestrator.

        Args:
            config: Validated run settings
            tools: External tool settings (defaults if None)
            runner: Callable used to run FastK, Fastrm and the plotter
            plot_engine: Engine to draw the plots (external plotter if None)
        """
        self.config = config
        self.tools = tools or ToolSettings()
        self.runner = runner or run_tool
        self.plot_engine = plot_engine or ExternalPlotEngine(
            exe=self.tools.plotter, timeout=self.tools.timeout, runner=self.runner
        )
        self.logger = logging.getLogger(f"{__name__}.SpectraOrchestrator")

    def _allocate_scratch(self) -> ScratchSession:
        try:
            return ScratchSession.allocate(self.config.scratch_dir, prefix=self.tools.scratch_prefix)
        except (FileNotFoundError, FileExistsError) as e:
            raise ConfigValidationError(str(e))

    def run(self) -> RunResult:
        """
        Execute the pipeline.

        Returns:
            RunResult describing what was built and removed

        Raises:
            ConfigValidationError: If the scratch directory is unusable
            TableNotFoundError: If the reads table is missing
            KmerMismatchError: If any table disagrees on the k-mer size
            ExternalToolError: If FastK or the plotting engine fails
        """
        config = self.config
        session = self._allocate_scratch()

        reads = strip_table_suffix(config.reads)
        kmer = check_table(table_path(reads))
        self.logger.debug(f"Reads table {reads} has k-mer size {kmer}")

        assemblies = [AssemblySpec.from_path(path) for path in config.assemblies]
        result = RunResult(kmer=kmer, reads=reads, assemblies=assemblies,
                           scratch_root=session.root)

        builder = CountTableBuilder(
            kmer=kmer,
            threads=config.threads,
            scratch_dir=config.scratch_dir,
            exe=self.tools.fastk,
            timeout=self.tools.timeout,
            runner=self.runner,
        )
        remover = TableRemover(exe=self.tools.fastrm, timeout=self.tools.timeout,
                               runner=self.runner)

        try:
            for assembly in assemblies:
                if builder.ensure_table(assembly):
                    result.built.append(assembly.base)

            self.logger.info("Making Venn histograms and plotting")
            request = PlotRequest.from_run(config, reads, [a.base for a in assemblies], session)
            self.plot_engine.plot(request)
        finally:
            result.removed = remover.cleanup(assemblies)

        return result
