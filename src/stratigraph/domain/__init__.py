"""stratigraph domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, graphlib, types, collections.abc
"""

from stratigraph.domain.exceptions import SourceRootError, StratigraphError
from stratigraph.domain.model import (
    AggregationMode,
    AnalysisConfig,
    DependencyGraph,
    ImportIndex,
    OffendingNode,
    PackageEdge,
    StratificationResult,
)

__all__ = [
    # Exceptions
    "StratigraphError",
    "SourceRootError",
    # Configuration
    "AggregationMode",
    "AnalysisConfig",
    # Entities
    "ImportIndex",
    "PackageEdge",
    "DependencyGraph",
    "OffendingNode",
    "StratificationResult",
]
