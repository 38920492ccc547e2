"""
ASMplot v0.1.0

Utility modules for ASMplot.
"""

from .external import ToolRunner, run_tool
from .scratch import ScratchSession

__all__ = ["ToolRunner", "run_tool", "ScratchSession"]
