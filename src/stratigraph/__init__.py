"""stratigraph - package layering analysis for Java source trees."""

__version__ = "0.1.0"

from stratigraph.application.services.analyzer import AnalysisOutcome, StratificationAnalyzer
from stratigraph.application.stratifier import stratify

__all__ = ["AnalysisOutcome", "StratificationAnalyzer", "stratify", "__version__"]
