#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Resolved, immutable settings for one spectra run.

RunConfig is built once from the command line (and the optional YAML
configuration) and is never modified afterwards. Its constructor enforces
the value constraints, so a RunConfig that exists is a valid one.

Author: ASMplot Development Team
License: See README.md
"""

import logging
import tempfile
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Sequence, Tuple, Union

from ..errors import ConfigValidationError

logger = logging.getLogger(__name__)


class ScaleMode(Enum):
    """How an axis maximum is chosen."""
    RELATIVE = "relative"  # multiple of the peak away from the origin
    ABSOLUTE = "absolute"  # fixed integer maximum


class PlotStyle(Enum):
    LINE = "line"
    FILL = "fill"
    STACK = "stack"


class OutputFormat(Enum):
    PNG = "png"
    PDF = "pdf"


ALL_STYLES: FrozenSet[PlotStyle] = frozenset(PlotStyle)


@dataclass(frozen=True)
class AxisScale:
    """Maximum of one plot axis, either relative to the peak or absolute."""
    mode: ScaleMode
    value: Union[float, int]

    @classmethod
    def relative(cls, factor: float) -> "AxisScale":
        return cls(ScaleMode.RELATIVE, float(factor))

    @classmethod
    def absolute(cls, maximum: int) -> "AxisScale":
        return cls(ScaleMode.ABSOLUTE, int(maximum))

    @property
    def is_absolute(self) -> bool:
        return self.mode is ScaleMode.ABSOLUTE

    def validate(self, axis: str):
        if self.value <= 0:
            if self.is_absolute:
                raise ConfigValidationError(f"{axis} max must be a positive integer")
            raise ConfigValidationError(f"max {axis} scaling factor must be > 0")


@dataclass(frozen=True)
class RunConfig:
    """
    Validated options for a spectra run.

    Attributes:
        reads: Reads table argument (with or without .ktab)
        assemblies: One or two assembly paths
        output: Output path root for the plots
        width, height: Plot size in inches
        x_scale, y_scale: Axis maxima
        styles: Plot styles to draw (never empty)
        unique_kmers: Also plot counts of k-mers unique to one or both assemblies
        verbose: Emit progress notices on stderr
        output_format: PNG or PDF
        threads: Thread count handed to the external tools
        scratch_dir: Directory for temporary files
    """
    reads: str
    assemblies: Tuple[str, ...]
    output: str
    width: float = 6.0
    height: float = 4.5
    x_scale: AxisScale = AxisScale(ScaleMode.RELATIVE, 2.1)
    y_scale: AxisScale = AxisScale(ScaleMode.RELATIVE, 1.1)
    styles: FrozenSet[PlotStyle] = ALL_STYLES
    unique_kmers: bool = False
    verbose: bool = False
    output_format: OutputFormat = OutputFormat.PNG
    threads: int = 4
    scratch_dir: str = field(default_factory=tempfile.gettempdir)

    def __post_init__(self):
        object.__setattr__(self, 'assemblies', tuple(self.assemblies))
        object.__setattr__(self, 'styles', frozenset(self.styles) or ALL_STYLES)

        if not 1 <= len(self.assemblies) <= 2:
            raise ConfigValidationError(
                f"Expected one or two assemblies, got {len(self.assemblies)}"
            )
        if self.width <= 0 or self.height <= 0:
            raise ConfigValidationError("Plot width and height must be > 0")
        if isinstance(self.threads, bool) or not isinstance(self.threads, int) or self.threads <= 0:
            raise ConfigValidationError("Number of threads must be a positive integer")
        self.x_scale.validate("x")
        self.y_scale.validate("y")


def resolve_styles(line: bool, fill: bool, stack: bool) -> FrozenSet[PlotStyle]:
    """Selected plot styles; naming none means all three."""
    chosen = {style for style, on in ((PlotStyle.LINE, line),
                                      (PlotStyle.FILL, fill),
                                      (PlotStyle.STACK, stack)) if on}
    return frozenset(chosen) or ALL_STYLES


def resolve_axis(axis: str, relative: Optional[float], absolute: Optional[int],
                 default_relative: float) -> AxisScale:
    """
    Pick the scale for one axis from its relative and absolute flags.

    An absolute maximum takes precedence over a relative factor; giving both
    is allowed but logged.
    """
    if absolute is not None:
        if relative is not None:
            logger.warning(
                f"Both -{axis} and -{axis.upper()} given; using absolute {axis} max {absolute}"
            )
        return AxisScale.absolute(absolute)
    if relative is not None:
        return AxisScale.relative(relative)
    return AxisScale.relative(default_relative)


def split_positionals(paths: Sequence[str]) -> Tuple[str, Tuple[str, ...], str]:
    """
    Split ``reads asm1 [asm2] out`` into its parts.

    Raises:
        ConfigValidationError: Unless exactly 3 or 4 paths are given
    """
    if len(paths) not in (3, 4):
        raise ConfigValidationError(
            f"Expected 3 or 4 arguments (<reads> <asm1> [<asm2>] <out>), got {len(paths)}"
        )
    return paths[0], tuple(paths[1:-1]), paths[-1]

# ASMplot v0.1.0
# Any usage is subject to this software's license.
