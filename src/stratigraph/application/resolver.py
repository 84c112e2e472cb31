"""Package name resolution with aggregation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stratigraph.domain.model.enums import AggregationMode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stratigraph.domain.model.import_index import ImportIndex

logger = logging.getLogger(__name__)


def overlapping_prefixes(aggregations: Iterable[str]) -> tuple[tuple[str, str], ...]:
    """Find aggregation entries nested inside one another.

    Args:
        aggregations: Aggregation prefixes

    Returns:
        Sorted (outer, inner) pairs where inner starts with outer + "."
    """
    entries = sorted(set(aggregations))
    return tuple(
        (outer, inner) for outer in entries for inner in entries if inner.startswith(f"{outer}.")
    )


class PackageResolver:
    """Derives (possibly aggregated) package names from class names.

    Results are pure functions of (class name, aggregation settings) and
    are memoized per instance.

    Example:
        >>> PackageResolver(("com.acme",)).resolve("com.acme.sub.x.Widget")
        'com.acme'
    """

    def __init__(
        self,
        aggregations: Iterable[str] = (),
        mode: AggregationMode = AggregationMode.LAST_MATCH,
    ) -> None:
        """Initialize resolver.

        Args:
            aggregations: Ordered aggregation prefixes
            mode: How overlapping matches are resolved
        """
        self._aggregations = tuple(aggregations)
        self._mode = mode
        self._cache: dict[str, str] = {}

        overlaps = overlapping_prefixes(self._aggregations)
        if overlaps:
            pairs = ", ".join(f"{outer} ⊃ {inner}" for outer, inner in overlaps)
            logger.warning(
                "aggregation prefixes overlap (%s); resolved with %s",
                pairs,
                mode.value,
            )

    @property
    def aggregations(self) -> tuple[str, ...]:
        """Configured aggregation prefixes in evaluation order."""
        return self._aggregations

    @property
    def mode(self) -> AggregationMode:
        """Configured aggregation mode."""
        return self._mode

    def resolve(self, class_name: str) -> str:
        """Get package of class, applying aggregation.

        Args:
            class_name: Fully qualified dotted name

        Returns:
            Text before the last "." (possibly replaced by an aggregation
            prefix), or "" if class_name has no package part
        """
        if class_name in self._cache:
            return self._cache[class_name]

        package, _, _ = class_name.rpartition(".")
        resolved = self._aggregate(package)
        if resolved != package:
            logger.debug("replacing %s with %s", package, resolved)

        self._cache[class_name] = resolved
        return resolved

    def _aggregate(self, package: str) -> str:
        match self._mode:
            case AggregationMode.LAST_MATCH:
                # each test sees the result of the previous replacement
                for entry in self._aggregations:
                    if package.startswith(f"{entry}."):
                        package = entry
                return package
            case AggregationMode.LONGEST_PREFIX:
                matches = [e for e in self._aggregations if package.startswith(f"{e}.")]
                return max(matches, key=len) if matches else package

    def package_names(self, index: ImportIndex) -> frozenset[str]:
        """Get packages of all declaring classes in index."""
        return frozenset(self.resolve(class_name) for class_name in index.classes)
