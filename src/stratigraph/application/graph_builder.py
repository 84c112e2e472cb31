"""Reduce a class-level ImportIndex into a weighted package graph."""

from __future__ import annotations

import logging
from collections import Counter
from types import MappingProxyType
from typing import TYPE_CHECKING

from stratigraph.domain.model.dependency_graph import DependencyGraph
from stratigraph.domain.model.package_edge import PackageEdge

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stratigraph.application.resolver import PackageResolver
    from stratigraph.domain.model.import_index import ImportIndex

logger = logging.getLogger(__name__)


class DependencyGraphBuilder:
    """Builds a DependencyGraph from an ImportIndex.

    Filters applied per referenced identifier, in order:
    1. self exclusion (raw text prefix of the source package)
    2. identifiers without a package part
    3. only_internal: target package must be declared in the index
    4. ignores: target package must not start with ``prefix + "."``

    Example:
        builder = DependencyGraphBuilder(index, resolver)
        graph = builder.build()
    """

    def __init__(
        self,
        index: ImportIndex,
        resolver: PackageResolver,
        *,
        ignores: Iterable[str] = (),
        only_internal: bool = False,
        boundary_aware_self_exclusion: bool = False,
    ) -> None:
        """Initialize builder.

        Args:
            index: Class-level import index
            resolver: Package resolver (aggregation applied)
            ignores: Package prefixes to drop at package granularity
            only_internal: Only keep targets declared in index
            boundary_aware_self_exclusion: Treat only the source package and
                its subpackages as self references (default: raw text prefix)
        """
        self._index = index
        self._resolver = resolver
        self._ignores = frozenset(ignores)
        self._only_internal = only_internal
        self._boundary_aware = boundary_aware_self_exclusion
        self._packages = resolver.package_names(index)

    @property
    def packages(self) -> frozenset[str]:
        """Packages of all declaring classes in the index."""
        return self._packages

    def edges_from(self, source_package: str) -> dict[str, int]:
        """Compute weighted targets of one package.

        Args:
            source_package: Package to compute outgoing edges for

        Returns:
            Target package → number of class-level imports collapsing into it
        """
        counts: Counter[str] = Counter()

        for class_name, references in self._index.items():
            if self._resolver.resolve(class_name) != source_package:
                continue
            for reference in references:
                target = self._accept(source_package, reference)
                if target is not None:
                    counts[target] += 1

        return dict(counts)

    def _accept(self, source_package: str, reference: str) -> str | None:
        """Filter one reference, returning its target package or None."""
        if self._is_self_reference(source_package, reference):
            return None

        if "." not in reference:
            logger.debug("skipping %s: no package part", reference)
            return None

        target = self._resolver.resolve(reference)
        if self._only_internal and target not in self._packages:
            return None

        if any(target.startswith(f"{prefix}.") for prefix in self._ignores):
            return None

        return target

    def _is_self_reference(self, source_package: str, reference: str) -> bool:
        if self._boundary_aware:
            return reference == source_package or reference.startswith(f"{source_package}.")

        if not reference.startswith(source_package):
            return False

        # textual prefix also swallows siblings like foo vs foobar
        target = self._resolver.resolve(reference)
        if target != source_package and not target.startswith(f"{source_package}."):
            logger.warning(
                "%s excluded as self reference of %s by text prefix (resolves to %s)",
                reference,
                source_package,
                target,
            )
        return True

    def build(self) -> DependencyGraph:
        """Build graph with one node per declared package plus edge targets.

        Returns:
            Immutable DependencyGraph
        """
        forward: dict[str, dict[str, int]] = {}
        nodes: set[str] = set(self._packages)

        for source in sorted(self._packages):
            targets = forward.setdefault(source, {})
            for target, weight in sorted(self.edges_from(source).items()):
                self._add_edge(targets, PackageEdge(source=source, target=target, weight=weight))
                nodes.add(target)

        logger.debug(
            "built graph: %d packages, %d edges",
            len(nodes),
            sum(len(t) for t in forward.values()),
        )
        return DependencyGraph(
            nodes=frozenset(nodes),
            edges=MappingProxyType(
                {k: MappingProxyType(v) for k, v in forward.items() if v}
            ),
        )

    @staticmethod
    def _add_edge(targets: dict[str, int], edge: PackageEdge) -> None:
        """Insert edge unless the (source, target) pair is already present."""
        if edge.target in targets:
            logger.error("unexpected edge found: %s", edge)
            return
        targets[edge.target] = edge.weight
