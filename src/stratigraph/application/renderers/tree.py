"""Tree renderer: packages and weighted targets as a rich Tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from stratigraph.application.renderers._base import BaseRenderer, weight_class

if TYPE_CHECKING:
    from stratigraph.domain.model.dependency_graph import DependencyGraph
    from stratigraph.domain.model.stratification import StratificationResult


def weight_style(weight: int) -> str:
    """Rich style for an edge: heavier edges are brighter."""
    level = weight_class(weight)
    if level >= 7:
        return "bold magenta"
    if level >= 4:
        return "magenta"
    return "dim"


class TreeRenderer(BaseRenderer):
    """Prints one branch per package, one leaf per outgoing edge.

    Packages are annotated with their layer, or flagged as unresolved.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize renderer.

        Args:
            console: Rich console for output. Uses a stdout console if None.
        """
        super().__init__()
        self._console = console or Console()

    def _show(self, graph: DependencyGraph, result: StratificationResult) -> None:
        tree = Tree(f"[bold]{escape(self.title)}[/bold]")

        for package in sorted(graph.nodes):
            layer = result.layer_of(package)
            label = (
                f"[cyan]{package}[/cyan] [dim](layer {layer})[/dim]"
                if layer is not None
                else f"[red]{package}[/red] [bold red](unresolved)[/bold red]"
            )
            branch = tree.add(label)
            for edge in graph.out_edges(package):
                style = weight_style(edge.weight)
                branch.add(f"[{style}]→ {edge.target} ({edge.weight})[/{style}]")

        self._console.print(tree)
