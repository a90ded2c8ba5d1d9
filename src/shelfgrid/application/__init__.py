"""Application layer - use cases and orchestration."""

from .commands import AnalyzeDesignCommand, analyze_design
from .dtos import DesignAnalysis
from .state import DesignState, initial_state, reduce

__all__ = [
    "AnalyzeDesignCommand",
    "DesignAnalysis",
    "DesignState",
    "analyze_design",
    "initial_state",
    "reduce",
]
