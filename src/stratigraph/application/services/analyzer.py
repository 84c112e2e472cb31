"""Main facade for stratification analysis.

StratificationAnalyzer runs one batch: scan, build, stratify. Every run
starts from scratch; nothing is shared between runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from stratigraph.application.graph_builder import DependencyGraphBuilder
from stratigraph.application.resolver import PackageResolver
from stratigraph.application.stratifier import stratify
from stratigraph.infrastructure.source_collector import JavaSourceCollector

if TYPE_CHECKING:
    from pathlib import Path

    from stratigraph.domain.model.configuration import AnalysisConfig
    from stratigraph.domain.model.dependency_graph import DependencyGraph
    from stratigraph.domain.model.import_index import ImportIndex
    from stratigraph.domain.model.stratification import StratificationResult
    from stratigraph.domain.ports.renderer import RendererProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnalysisOutcome:
    """Artifacts of one analysis run.

    Attributes:
        index: Class-level import index
        graph: Weighted package graph built from index
        result: Stratification of graph
    """

    index: ImportIndex
    graph: DependencyGraph
    result: StratificationResult


class StratificationAnalyzer:
    """Runs the scan → graph → stratification pipeline.

    Example:
        analyzer = StratificationAnalyzer(AnalysisConfig(only_internal=True))
        outcome = analyzer.analyze(Path("."))
        if not outcome.result.complete:
            print(outcome.result.offending)
    """

    def __init__(self, config: AnalysisConfig) -> None:
        """Initialize analyzer.

        Args:
            config: Analysis configuration
        """
        self._config = config

    @property
    def config(self) -> AnalysisConfig:
        """Configuration used for every run."""
        return self._config

    def analyze(self, base_dir: Path) -> AnalysisOutcome:
        """Scan base_dir and stratify its package graph.

        Raises:
            SourceRootError: If base_dir cannot be scanned
        """
        index = JavaSourceCollector(self._config.ignores).scan(base_dir)
        graph = self.build_graph(index)
        result = stratify(graph)
        logger.info(
            "%d of %d packages layered (%d%%)",
            result.layered_count,
            result.total_count,
            result.percentage,
        )
        return AnalysisOutcome(index=index, graph=graph, result=result)

    def build_graph(self, index: ImportIndex) -> DependencyGraph:
        """Build package graph from an existing index."""
        resolver = PackageResolver(self._config.aggregations, self._config.aggregation_mode)
        builder = DependencyGraphBuilder(
            index,
            resolver,
            ignores=self._config.ignores,
            only_internal=self._config.only_internal,
            boundary_aware_self_exclusion=self._config.boundary_aware_self_exclusion,
        )
        return builder.build()


def render(graph: DependencyGraph, renderer: RendererProtocol, title: str) -> bool:
    """Feed graph to renderer node by node, in sorted order.

    Args:
        graph: Graph to show
        renderer: Any renderer
        title: Human-readable title

    Returns:
        Renderer's completion flag (informational; the reporter decides)
    """
    renderer.init(title)
    for package in sorted(graph.nodes):
        renderer.add_to_graph(package, graph.targets_of(package))
    return renderer.display()
