"""Stratification: partition a dependency graph into layers.

Layer-oriented variant of Kahn's topological sort. Each iteration settles,
simultaneously, every node whose targets were all settled before the
iteration started. Nodes left over when no progress is possible form or
depend on cycles.

Layer membership depends only on graph structure. Ordering inside a layer
is a display concern (lexicographic) and not part of the result.

Time: O(V * E) worst case (every iteration rescans unsettled nodes).
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from stratigraph.domain.model.dependency_graph import find_cycle
from stratigraph.domain.model.stratification import OffendingNode, StratificationResult

if TYPE_CHECKING:
    from stratigraph.domain.model.dependency_graph import DependencyGraph

logger = logging.getLogger(__name__)


def stratify(graph: DependencyGraph) -> StratificationResult:
    """Assign every node of graph to a layer or mark it unresolved.

    Args:
        graph: Package dependency graph, possibly cyclic

    Returns:
        StratificationResult; layers[0] always exists (possibly empty)
    """
    layer_zero = frozenset(n for n in graph.nodes if graph.out_degree(n) == 0)
    layers: list[frozenset[str]] = [layer_zero]
    settled: set[str] = set(layer_zero)
    logger.debug("layer 0 (no outgoing edges): %s", sorted(layer_zero))

    remaining = graph.nodes - settled
    while remaining:
        # settled is only extended after the scan: membership is simultaneous
        layer = frozenset(n for n in remaining if graph.successors(n) <= settled)
        if not layer:
            break
        logger.debug("layer %d: %s", len(layers), sorted(layer))
        layers.append(layer)
        settled |= layer
        remaining -= layer

    unresolved = frozenset(remaining)
    offending = tuple(
        OffendingNode(
            package=node,
            targets=tuple(sorted(graph.successors(node) - settled)),
            cyclic=_on_cycle(graph, node, unresolved),
        )
        for node in sorted(unresolved)
    )

    total = len(settled) + len(unresolved)
    # no nodes: vacuously layered
    percentage = len(settled) * 100 // total if total else 100

    return StratificationResult(
        layers=tuple(layers),
        unresolved=unresolved,
        percentage=percentage,
        offending=offending,
        example_cycle=find_cycle(graph, within=unresolved) if unresolved else (),
    )


def _on_cycle(graph: DependencyGraph, node: str, scope: frozenset[str]) -> bool:
    """Check whether node can reach itself through nodes in scope (BFS)."""
    queue = deque(t for t in graph.successors(node) if t in scope)
    visited: set[str] = set()
    while queue:
        current = queue.popleft()
        if current == node:
            return True
        if current in visited:
            continue
        visited.add(current)
        queue.extend(t for t in graph.successors(current) if t in scope)
    return False
