"""
ASMplot v0.1.0

Configuration management for ASMplot.

Author: ASMplot Development Team
License: See README.md
"""

from ..errors import ConfigValidationError
from .parser import ConfigParser
from .run_config import (
    ALL_STYLES,
    AxisScale,
    OutputFormat,
    PlotStyle,
    RunConfig,
    ScaleMode,
    resolve_axis,
    resolve_styles,
    split_positionals,
)
from .schema import DEFAULT_CONFIG, save_config_template, validate_config

__all__ = [
    "ConfigParser",
    "ConfigValidationError",
    "DEFAULT_CONFIG",
    "save_config_template",
    "validate_config",
    "ALL_STYLES",
    "AxisScale",
    "OutputFormat",
    "PlotStyle",
    "RunConfig",
    "ScaleMode",
    "resolve_axis",
    "resolve_styles",
    "split_positionals",
]
