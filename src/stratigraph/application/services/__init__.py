"""Application services for stratification analysis.

StratificationAnalyzer is the main facade for running an analysis.
"""

from stratigraph.application.services.analyzer import (
    AnalysisOutcome,
    StratificationAnalyzer,
    render,
)

__all__ = [
    "AnalysisOutcome",
    "StratificationAnalyzer",
    "render",
]
