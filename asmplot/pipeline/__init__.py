"""
ASMplot v0.1.0

Spectra pipeline: table preparation, plotting and cleanup.
"""

from .orchestrator import RunResult, SpectraOrchestrator, ToolSettings
from .plotting import ExternalPlotEngine, PlotEngine, PlotRequest
from .tables import AssemblySpec, CountTableBuilder, TableRemover

__all__ = [
    "RunResult",
    "SpectraOrchestrator",
    "ToolSettings",
    "ExternalPlotEngine",
    "PlotEngine",
    "PlotRequest",
    "AssemblySpec",
    "CountTableBuilder",
    "TableRemover",
]
