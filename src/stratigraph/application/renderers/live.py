"""Live renderer: timed build-up of the edge table.

Nodes and edges appear one at a time, pausing ``delay_ms * 5`` per new
node and ``delay_ms * 2`` per edge.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.table import Table

from stratigraph.application.renderers._base import BaseRenderer
from stratigraph.application.renderers.tree import weight_style

if TYPE_CHECKING:
    from collections.abc import Callable

    from stratigraph.domain.model.dependency_graph import DependencyGraph
    from stratigraph.domain.model.stratification import StratificationResult

NODE_DELAY_FACTOR = 5
EDGE_DELAY_FACTOR = 2


class LiveRenderer(BaseRenderer):
    """Animated table of packages and edges using rich.live.Live."""

    def __init__(
        self,
        delay_ms: int = 50,
        console: Console | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize renderer.

        Args:
            delay_ms: Base delay step in milliseconds (>= 0)
            console: Rich console for output. Uses a stdout console if None.
            sleep: Pause function, seconds

        Raises:
            ValueError: If delay_ms is negative
        """
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        super().__init__()
        self._delay = delay_ms / 1000
        self._console = console or Console()
        self._sleep = sleep

    def _show(self, graph: DependencyGraph, result: StratificationResult) -> None:
        table = Table(title=escape(self.title))
        table.add_column("Package", style="cyan", no_wrap=True)
        table.add_column("Target")
        table.add_column("Weight", justify="right")

        shown: set[str] = set()
        with Live(table, console=self._console, auto_refresh=False) as live:
            for package in sorted(graph.nodes):
                self._add_node(table, package, shown)
                live.refresh()
                for edge in graph.out_edges(package):
                    self._add_node(table, edge.target, shown)
                    style = weight_style(edge.weight)
                    table.add_row("", f"→ {edge.target}", f"[{style}]{edge.weight}[/{style}]")
                    self._sleep(self._delay * EDGE_DELAY_FACTOR)
                    live.refresh()

        self._console.print(f"{result.layered_count} of {result.total_count} layered")

    def _add_node(self, table: Table, package: str, shown: set[str]) -> None:
        if package in shown:
            return
        shown.add(package)
        table.add_row(package, "", "")
        self._sleep(self._delay * NODE_DELAY_FACTOR)
