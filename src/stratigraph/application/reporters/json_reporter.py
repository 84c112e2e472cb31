"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from stratigraph.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from stratigraph.domain.model.stratification import OffendingNode, StratificationResult


class JSONReporter(BaseReporter):
    """JSON reporter for CI integration and parsing by other tools.

    Lists are emitted in display order so that output is reproducible.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def _write_report(self, result: StratificationResult) -> None:
        json.dump(self._result_to_dict(result), self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: StratificationResult) -> dict[str, object]:
        """Convert StratificationResult to JSON-serializable dict."""
        return {
            "complete": result.complete,
            "percentage": result.percentage,
            "layered": result.layered_count,
            "total": result.total_count,
            "layers": [list(members) for members in result.sorted_layers()],
            "unresolved": [self._offending_to_dict(o) for o in result.offending],
            "example_cycle": list(result.example_cycle),
        }

    @staticmethod
    def _offending_to_dict(node: OffendingNode) -> dict[str, object]:
        return {
            "package": node.package,
            "cyclic": node.cyclic,
            "targets": list(node.targets),
        }
