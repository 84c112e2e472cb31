"""Class-level import index produced by a source scan."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


@dataclass(frozen=True, slots=True)
class ImportIndex:
    """Declaring class → referenced identifiers.

    Built once per scan via ImportIndexBuilder, read-only afterwards.
    A class whose imports were all filtered out still has an (empty) entry:
    it still contributes its package as a graph node.

    Attributes:
        imports: Fully qualified class name → frozenset of imported identifiers
    """

    imports: Mapping[str, frozenset[str]]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for class_name in self.imports:
            if not class_name:
                raise ValueError("declaring class name must not be empty")

    def imports_of(self, class_name: str) -> frozenset[str]:
        """Get identifiers imported by class. O(1)."""
        return self.imports.get(class_name, frozenset())

    def items(self) -> Iterable[tuple[str, frozenset[str]]]:
        """Iterate (declaring class, imports) pairs."""
        return self.imports.items()

    @property
    def classes(self) -> frozenset[str]:
        """All declaring class names."""
        return frozenset(self.imports)

    @property
    def class_count(self) -> int:
        """Number of declaring classes."""
        return len(self.imports)

    @property
    def import_count(self) -> int:
        """Total number of (class, identifier) pairs."""
        return sum(len(refs) for refs in self.imports.values())

    @classmethod
    def empty(cls) -> ImportIndex:
        """Create empty index."""
        return cls(imports=MappingProxyType({}))


class ImportIndexBuilder:
    """Mutable accumulator used while scanning.

    Not thread-safe. One builder per scan.
    """

    def __init__(self) -> None:
        self._imports: dict[str, set[str]] = {}

    def declare(self, class_name: str) -> None:
        """Register a declaring class (no-op if already known)."""
        if not class_name:
            raise ValueError("class_name must not be empty")
        self._imports.setdefault(class_name, set())

    def add(self, class_name: str, identifier: str) -> None:
        """Add one imported identifier to class entry (set union)."""
        if not identifier:
            raise ValueError("identifier must not be empty")
        self.declare(class_name)
        self._imports[class_name].add(identifier)

    def build(self) -> ImportIndex:
        """Freeze accumulated imports into an ImportIndex."""
        return ImportIndex(
            imports=MappingProxyType({k: frozenset(v) for k, v in self._imports.items()})
        )
