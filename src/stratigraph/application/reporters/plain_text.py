"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from stratigraph.application.reporters._base import BaseReporter, layer_title, summary_line

if TYPE_CHECKING:
    from stratigraph.domain.model.stratification import OffendingNode, StratificationResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def _write_report(self, result: StratificationResult) -> None:
        self._report_header()
        self._report_layers(result)

        if result.offending:
            self._report_offending(result.offending, result.example_cycle)

        self._report_footer(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_header(self) -> None:
        self._write("=" * 70)
        self._write("Package Stratification")
        self._write("=" * 70)

    def _report_layers(self, result: StratificationResult) -> None:
        for index, members in enumerate(result.sorted_layers()):
            self._write()
            self._write(f"{layer_title(index)}:")
            for package in members:
                self._write(f"  {package}")

    def _report_offending(
        self,
        offending: tuple[OffendingNode, ...],
        example_cycle: tuple[str, ...],
    ) -> None:
        """Print offending nodes and the edges blocking them."""
        self._write()
        self._write("-" * 70)
        self._write(f"Offending packages ({len(offending)}):")
        self._write("-" * 70)

        for node in offending:
            marker = " [cycle]" if node.cyclic else ""
            self._write(f"{node.package}{marker}")
            for target in node.targets:
                self._write(f"  {node.package} -> {target}")

        if example_cycle:
            self._write()
            self._write(f"Example cycle: {' -> '.join(example_cycle)}")

    def _report_footer(self, result: StratificationResult) -> None:
        self._write()
        self._write("=" * 70)
        self._write(summary_line(result))
        status = "LAYERED" if result.complete else "NOT LAYERED"
        self._write(f"Result: {status}")
        self._write("=" * 70)
