"""Stratification result: layers, unresolved residual and evidence."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OffendingNode:
    """Unresolved package with the edges that block it.

    Attributes:
        package: Unresolved package name
        targets: Unsettled targets of package, sorted lexicographically
        cyclic: True if package lies on a cycle itself,
            False if it only depends on one
    """

    package: str
    targets: tuple[str, ...]
    cyclic: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.package:
            raise ValueError("package must not be empty")
        if not self.targets:
            raise ValueError(f"unresolved package '{self.package}' needs at least one target")
        if list(self.targets) != sorted(self.targets):
            raise ValueError("targets must be sorted")

    def __str__(self) -> str:
        """Format as package → target, target."""
        marker = " [cycle]" if self.cyclic else ""
        return f"{self.package}{marker} → {', '.join(self.targets)}"


@dataclass(frozen=True, slots=True)
class StratificationResult:
    """Outcome of stratifying a DependencyGraph.

    Pure function of the graph: stratifying the same graph twice
    yields equal results.

    Attributes:
        layers: Ordered layers; layers[0] holds nodes without outgoing edges
        unresolved: Nodes that could not be assigned to any layer
        percentage: floor(settled * 100 / total), 100 when there are no nodes
        offending: One entry per unresolved node, sorted by package
        example_cycle: One cycle path through the residual (a, b, a), or ()
    """

    layers: tuple[frozenset[str], ...]
    unresolved: frozenset[str]
    percentage: int
    offending: tuple[OffendingNode, ...] = ()
    example_cycle: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not 0 <= self.percentage <= 100:
            raise ValueError(f"percentage must be 0-100, got {self.percentage}")

        seen: set[str] = set()
        for index, layer in enumerate(self.layers):
            overlap = seen & layer
            if overlap:
                raise ValueError(f"layer {index} repeats nodes: {sorted(overlap)}")
            seen |= layer

        overlap = seen & self.unresolved
        if overlap:
            raise ValueError(f"nodes both layered and unresolved: {sorted(overlap)}")

        reported = frozenset(o.package for o in self.offending)
        if reported != self.unresolved:
            raise ValueError("offending reports must cover exactly the unresolved nodes")

    @property
    def settled(self) -> frozenset[str]:
        """All nodes assigned to some layer."""
        return frozenset().union(*self.layers)

    @property
    def layered_count(self) -> int:
        """Number of settled nodes."""
        return sum(len(layer) for layer in self.layers)

    @property
    def total_count(self) -> int:
        """Number of nodes in the stratified graph."""
        return self.layered_count + len(self.unresolved)

    @property
    def complete(self) -> bool:
        """True if every node is layered (percentage == 100)."""
        return self.percentage >= 100

    def layer_of(self, node: str) -> int | None:
        """Get layer index of node, None if unresolved or unknown."""
        for index, layer in enumerate(self.layers):
            if node in layer:
                return index
        return None

    def sorted_layers(self) -> tuple[tuple[str, ...], ...]:
        """Layers with members in display order."""
        return tuple(tuple(sorted(layer)) for layer in self.layers)

    @classmethod
    def empty(cls) -> StratificationResult:
        """Result for a graph without nodes (vacuously layered)."""
        return cls(layers=(frozenset(),), unresolved=frozenset(), percentage=100)
