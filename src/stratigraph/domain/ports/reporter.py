"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from stratigraph.domain.model.stratification import StratificationResult


class ReporterProtocol(Protocol):
    """Protocol for stratification reporters.

    Reporter output is the official verdict of a run.
    """

    def report(self, result: StratificationResult) -> bool:
        """Write result and return verdict.

        Args:
            result: Stratification result to format.

        Returns:
            True if the graph is fully layered.
        """
        ...
