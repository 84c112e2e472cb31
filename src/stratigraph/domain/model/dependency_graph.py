"""Immutable weighted package dependency graph.

Includes cycle extraction using stdlib graphlib.TopologicalSorter.
"""

from __future__ import annotations

from dataclasses import dataclass
from graphlib import CycleError, TopologicalSorter
from types import MappingProxyType
from typing import TYPE_CHECKING

from stratigraph.domain.model.package_edge import PackageEdge

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

_NO_TARGETS: Mapping[str, int] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class DependencyGraph:
    """Package nodes plus weighted edges, at most one per ordered pair.

    Invariants (FAIL-FIRST):
    - Every edge source and target is in nodes
    - No self-loops
    - No negative weights

    Attributes:
        nodes: All package names (including packages without edges)
        edges: Source package → (target package → weight)
    """

    nodes: frozenset[str]
    edges: Mapping[str, Mapping[str, int]]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for source, targets in self.edges.items():
            if source not in self.nodes:
                raise ValueError(f"edge source '{source}' not in nodes")
            for target, weight in targets.items():
                if target not in self.nodes:
                    raise ValueError(f"target '{target}' of '{source}' not in nodes")
                if target == source:
                    raise ValueError(f"self-loop on '{source}'")
                if weight < 0:
                    raise ValueError(f"negative weight {weight} on {source}→{target}")

    def targets_of(self, node: str) -> Mapping[str, int]:
        """Get target package → weight for node. O(1).

        This mapping is the whole contract a renderer may consume.
        """
        return self.edges.get(node, _NO_TARGETS)

    def successors(self, node: str) -> frozenset[str]:
        """Get direct targets of node."""
        return frozenset(self.targets_of(node))

    def out_edges(self, node: str) -> tuple[PackageEdge, ...]:
        """Get outgoing edges of node sorted by target name."""
        return tuple(
            PackageEdge(source=node, target=target, weight=weight)
            for target, weight in sorted(self.targets_of(node).items())
        )

    def package_edges(self) -> tuple[PackageEdge, ...]:
        """All edges sorted by (source, target)."""
        return tuple(edge for node in sorted(self.edges) for edge in self.out_edges(node))

    def has_edge(self, source: str, target: str) -> bool:
        """Check if edge exists. O(1)."""
        return target in self.targets_of(source)

    def has_node(self, node: str) -> bool:
        """Check if node exists. O(1)."""
        return node in self.nodes

    def weight(self, source: str, target: str) -> int:
        """Get edge weight.

        Raises:
            KeyError: If edge does not exist
        """
        return self.edges[source][target]

    def out_degree(self, node: str) -> int:
        """Get number of outgoing edges."""
        return len(self.targets_of(node))

    @property
    def edge_count(self) -> int:
        """Get total number of edges."""
        return sum(len(targets) for targets in self.edges.values())

    @property
    def node_count(self) -> int:
        """Get total number of nodes."""
        return len(self.nodes)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[PackageEdge],
        extra_nodes: Iterable[str] = (),
    ) -> DependencyGraph:
        """Build graph from edge iterable.

        Args:
            edges: PackageEdge values, at most one per (source, target)
            extra_nodes: Additional isolated nodes to include

        Returns:
            DependencyGraph with all edges and nodes

        Raises:
            ValueError: If two edges share the same (source, target)
        """
        forward: dict[str, dict[str, int]] = {}
        nodes: set[str] = set(extra_nodes)

        for edge in edges:
            targets = forward.setdefault(edge.source, {})
            if edge.target in targets:
                raise ValueError(f"duplicate edge {edge.source}→{edge.target}")
            targets[edge.target] = edge.weight
            nodes.add(edge.source)
            nodes.add(edge.target)

        return cls(
            nodes=frozenset(nodes),
            edges=MappingProxyType({k: MappingProxyType(v) for k, v in forward.items()}),
        )

    @classmethod
    def empty(cls) -> DependencyGraph:
        """Create empty graph with no nodes or edges."""
        return cls(nodes=frozenset(), edges=MappingProxyType({}))


def find_cycle(graph: DependencyGraph, within: frozenset[str] | None = None) -> tuple[str, ...]:
    """Find one concrete cycle using graphlib.TopologicalSorter.

    graphlib reports only ONE cycle when several exist. That is enough to
    cite as evidence; the full residual is reported separately.

    Args:
        graph: Graph to inspect
        within: Restrict the search to this subset of nodes. None = all nodes.

    Returns:
        Cycle path with the first node repeated at the end (a, b, a),
        or empty tuple if the (sub)graph is acyclic.
    """
    scope = graph.nodes if within is None else within
    if not scope:
        return ()

    # successors act as "dependencies": targets must come before sources
    adjacency: dict[str, set[str]] = {
        node: {t for t in graph.targets_of(node) if t in scope} for node in sorted(scope)
    }

    ts: TopologicalSorter[str] = TopologicalSorter(adjacency)
    try:
        ts.prepare()
    except CycleError as e:
        # e.args[1] lists the path [a, b, ..., a] in dependency order
        cycle_path: list[str] = e.args[1]
        return tuple(reversed(cycle_path))
    return ()
