"""Domain model entities."""

from stratigraph.domain.model.configuration import DEFAULT_IGNORES, AnalysisConfig
from stratigraph.domain.model.dependency_graph import DependencyGraph, find_cycle
from stratigraph.domain.model.enums import AggregationMode, RendererKind, ReportFormat
from stratigraph.domain.model.import_index import ImportIndex, ImportIndexBuilder
from stratigraph.domain.model.package_edge import PackageEdge
from stratigraph.domain.model.stratification import OffendingNode, StratificationResult

__all__ = [
    # Configuration
    "DEFAULT_IGNORES",
    "AnalysisConfig",
    # Enums
    "AggregationMode",
    "RendererKind",
    "ReportFormat",
    # Scan
    "ImportIndex",
    "ImportIndexBuilder",
    # Graph
    "DependencyGraph",
    "PackageEdge",
    "find_cycle",
    # Result
    "OffendingNode",
    "StratificationResult",
]
