"""Analysis configuration.

Explicit value threaded through every component. No process-wide state.
"""

from __future__ import annotations

from dataclasses import dataclass

from stratigraph.domain.model.enums import AggregationMode

DEFAULT_IGNORES: frozenset[str] = frozenset({"java.", "org.slf4j.", "lombok."})


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Configuration of one analysis run.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        ignores: Prefixes excluded from analysis. Applied to raw import
            identifiers while scanning, and to resolved target packages
            (as ``prefix + "."``) while building the graph.
        aggregations: Package prefixes that absorb their subpackages.
            Ordered: with AggregationMode.LAST_MATCH the last matching
            entry wins.
        only_internal: Only count relations to packages declared in the
            scanned tree.
        aggregation_mode: Resolution of overlapping aggregation prefixes.
        boundary_aware_self_exclusion: Exclude self references only at
            package boundaries instead of by raw text prefix.
        fail_on_incomplete: Signal failure when not fully layered.
    """

    ignores: frozenset[str] = DEFAULT_IGNORES
    aggregations: tuple[str, ...] = ()
    only_internal: bool = False
    aggregation_mode: AggregationMode = AggregationMode.LAST_MATCH
    boundary_aware_self_exclusion: bool = False
    fail_on_incomplete: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        # an empty prefix would match every identifier
        if "" in self.ignores:
            raise ValueError("ignores must not contain an empty prefix")
        if "" in self.aggregations:
            raise ValueError("aggregations must not contain an empty prefix")
        if len(set(self.aggregations)) != len(self.aggregations):
            raise ValueError(f"aggregations contain duplicates: {self.aggregations}")
