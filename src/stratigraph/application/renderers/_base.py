"""Base renderer: collects the node/edge-weight contract.

Concrete renderers only decide how to show the collected graph. The
completion flag returned by display() comes from the shared stratifier.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from stratigraph.application.stratifier import stratify
from stratigraph.domain.model.dependency_graph import DependencyGraph
from stratigraph.domain.model.package_edge import PackageEdge

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from stratigraph.domain.model.stratification import StratificationResult

logger = logging.getLogger(__name__)

MAX_WEIGHT_CLASS = 9


def weight_class(weight: int) -> int:
    """Clamp edge weight to 1..MAX_WEIGHT_CLASS for styling."""
    return max(1, min(weight, MAX_WEIGHT_CLASS))


class BaseRenderer(ABC):
    """Base class for renderers implementing RendererProtocol."""

    def __init__(self) -> None:
        self._title = ""
        self._targets: dict[str, dict[str, int]] = {}

    @property
    def title(self) -> str:
        """Title given at init()."""
        return self._title

    def init(self, title: str) -> None:
        """Start a new, empty graph."""
        self._title = title
        self._targets = {}

    def add_to_graph(self, package: str, targets: Mapping[str, int]) -> None:
        """Register package and its weighted targets."""
        known = self._targets.setdefault(package, {})
        for target, weight in targets.items():
            if target in known:
                logger.error("unexpected edge found: %s → %s", package, target)
                continue
            known[target] = weight

    def edges(self) -> Iterator[PackageEdge]:
        """Iterate received edges in (source, target) order."""
        for source in sorted(self._targets):
            for target, weight in sorted(self._targets[source].items()):
                yield PackageEdge(source=source, target=target, weight=weight)

    def graph(self) -> DependencyGraph:
        """Graph made of everything received since init()."""
        return DependencyGraph.from_edges(self.edges(), extra_nodes=self._targets)

    def display(self) -> bool:
        """Show graph; return True if it is fully layered."""
        graph = self.graph()
        result = stratify(graph)
        self._show(graph, result)
        return result.complete

    @abstractmethod
    def _show(self, graph: DependencyGraph, result: StratificationResult) -> None:
        """Present graph. Must not alter result."""
