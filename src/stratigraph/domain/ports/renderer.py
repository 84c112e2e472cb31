"""Renderer protocol: downstream graph display.

A renderer sees nothing of the core but, per package, its mapping of
target package → edge weight. It never influences the verdict.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class RendererProtocol(Protocol):
    """Protocol for graph renderers."""

    def init(self, title: str) -> None:
        """Start a new graph with a human-readable title."""
        ...

    def add_to_graph(self, package: str, targets: Mapping[str, int]) -> None:
        """Register package node and its outgoing weighted edges."""
        ...

    def display(self) -> bool:
        """Finalize/show graph.

        Returns:
            True if the received graph is fully layered.
        """
        ...
