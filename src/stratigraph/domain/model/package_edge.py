"""Weighted package dependency edge."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PackageEdge:
    """Package-level dependency.

    Immutable value object with FAIL-FIRST validation.

    Attributes:
        source: Depending package
        target: Package depended upon
        weight: Number of class-level imports collapsed into this edge
    """

    source: str
    target: str
    weight: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source:
            raise ValueError("source must not be empty")
        if not self.target:
            raise ValueError("target must not be empty")
        if self.source == self.target:
            raise ValueError(f"self-loop not allowed: {self.source}")
        if self.weight < 0:
            raise ValueError(f"weight must be >= 0, got {self.weight}")

    def __str__(self) -> str:
        """Format as source → target (weight)."""
        return f"{self.source} → {self.target} ({self.weight})"
