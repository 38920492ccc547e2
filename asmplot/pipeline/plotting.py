#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Hand-off to the plotting engine.

The plotting engine computes the Venn histograms between the reads table and
the assembly tables and renders the spectra plots. It is an external
collaborator: the pipeline only assembles a PlotRequest and calls the
engine once.

Author: ASMplot Development Team
License: See README.md
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Protocol

from ..config.run_config import AxisScale, OutputFormat, PlotStyle, RunConfig
from ..utils.external import ToolRunner, run_tool
from ..utils.scratch import ScratchSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotRequest:
    """Fully resolved parameters for one plotting call."""
    output: str
    assembly1: str
    assembly2: Optional[str]
    reads: str
    width: float
    height: float
    x_scale: AxisScale
    y_scale: AxisScale
    output_format: OutputFormat
    unique_kmers: bool
    styles: FrozenSet[PlotStyle]
    scratch_root: str
    threads: int

    @classmethod
    def from_run(cls, config: RunConfig, reads: str, assemblies: List[str],
                 session: ScratchSession) -> "PlotRequest":
        """
        Combine the run settings with the resolved base names.

        Args:
            config: Validated run settings
            reads: Reads table base name
            assemblies: One or two assembly base names
            session: Scratch session of this run
        """
        return cls(
            output=config.output,
            assembly1=assemblies[0],
            assembly2=assemblies[1] if len(assemblies) > 1 else None,
            reads=reads,
            width=config.width,
            height=config.height,
            x_scale=config.x_scale,
            y_scale=config.y_scale,
            output_format=config.output_format,
            unique_kmers=config.unique_kmers,
            styles=config.styles,
            scratch_root=str(session.root),
            threads=config.threads,
        )


class PlotEngine(Protocol):
    def plot(self, request: PlotRequest) -> None:
        ...


def _scale_flag(axis: str, scale: AxisScale) -> str:
    if scale.is_absolute:
        return f"-{axis.upper()}{scale.value}"
    return f"-{axis}{scale.value}"


class ExternalPlotEngine:
    """
    Plotting engine run as a separate process.

    The plotter takes the same flag letters as this program, followed by
    ``<out> <asm1> [<asm2>] <reads>``.
    """

    def __init__(self, exe: str = "asm_plotter", timeout: Optional[float] = None,
                 runner: Optional[ToolRunner] = None):
        self.exe = exe
        self.timeout = timeout
        self.runner = runner or run_tool

    def build_cmd(self, request: PlotRequest) -> List[str]:
        cmd: List[str] = [
            self.exe,
            f"-w{request.width}",
            f"-h{request.height}",
            _scale_flag("x", request.x_scale),
            _scale_flag("y", request.y_scale),
        ]

        if PlotStyle.LINE in request.styles:
            cmd.append("-l")
        if PlotStyle.FILL in request.styles:
            cmd.append("-f")
        if PlotStyle.STACK in request.styles:
            cmd.append("-s")
        if request.unique_kmers:
            cmd.append("-z")
        if request.output_format is OutputFormat.PDF:
            cmd.append("-pdf")

        cmd.extend([f"-T{request.threads}", f"-P{request.scratch_root}"])
        cmd.extend([request.output, request.assembly1])
        if request.assembly2 is not None:
            cmd.append(request.assembly2)
        cmd.append(request.reads)
        return cmd

    def plot(self, request: PlotRequest) -> None:
        self.runner(self.build_cmd(request), timeout=self.timeout)

# ASMplot v0.1.0
# Any usage is subject to this software's license.
