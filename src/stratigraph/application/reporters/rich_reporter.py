"""Rich reporter: StratificationResult → rich tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from stratigraph.application.reporters._base import BaseReporter, layer_title, summary_line

if TYPE_CHECKING:
    from stratigraph.domain.model.stratification import StratificationResult


class RichReporter(BaseReporter):
    """Colored console output.

    Caller decides destination by passing a Console; default is stdout.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize reporter.

        Args:
            console: Rich console for output. Uses a stdout console if None.
        """
        self._console = console or Console()

    def _write_report(self, result: StratificationResult) -> None:
        console = self._console
        console.print()
        console.rule("[bold]PACKAGE STRATIFICATION[/bold]")
        console.print()

        console.print(self._layers_table(result))

        if result.offending:
            console.print()
            console.print(self._offending_table(result))
            if result.example_cycle:
                console.print(f"[dim]Example cycle:[/dim] {' → '.join(result.example_cycle)}")

        console.print()
        style = "green" if result.complete else "bold red"
        status = "LAYERED" if result.complete else "NOT LAYERED"
        console.print(f"[{style}]{status}[/{style}] {summary_line(result)}")

    @staticmethod
    def _layers_table(result: StratificationResult) -> Table:
        table = Table(title="Layers", show_lines=False)
        table.add_column("Layer", style="cyan", no_wrap=True)
        table.add_column("Packages")

        for index, members in enumerate(result.sorted_layers()):
            table.add_row(layer_title(index), "\n".join(members) or "[dim]-[/dim]")

        return table

    @staticmethod
    def _offending_table(result: StratificationResult) -> Table:
        table = Table(title="Offending packages")
        table.add_column("Package", style="red", no_wrap=True)
        table.add_column("Cycle", justify="center")
        table.add_column("Unsettled targets")

        for node in result.offending:
            table.add_row(node.package, "yes" if node.cyclic else "", "\n".join(node.targets))

        return table
