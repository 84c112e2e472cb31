"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stratigraph.domain.model.stratification import StratificationResult


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Concrete reporters implement _write_report(); report() adds the verdict.

    Example:
        class MyReporter(BaseReporter):
            def _write_report(self, result: StratificationResult) -> None:
                print(f"{result.percentage}% layered")
    """

    def report(self, result: StratificationResult) -> bool:
        """Write result and return verdict.

        Args:
            result: Complete stratification result

        Returns:
            True if every package is layered (percentage >= 100)
        """
        self._write_report(result)
        return result.percentage >= 100

    @abstractmethod
    def _write_report(self, result: StratificationResult) -> None:
        """Write result in reporter-specific format."""


def layer_title(index: int) -> str:
    """Human-readable layer heading."""
    if index == 0:
        return "Layer 0 (no outgoing edges)"
    return f"Layer {index}"


def summary_line(result: StratificationResult) -> str:
    """Format 'X of Y layered (P%)'."""
    return f"{result.layered_count} of {result.total_count} layered ({result.percentage}%)"
