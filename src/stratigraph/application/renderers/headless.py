"""Headless renderer: records, draws nothing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stratigraph.application.renderers._base import BaseRenderer

if TYPE_CHECKING:
    from stratigraph.domain.model.dependency_graph import DependencyGraph
    from stratigraph.domain.model.stratification import StratificationResult

logger = logging.getLogger(__name__)


class HeadlessRenderer(BaseRenderer):
    """No-op renderer for batch runs and CI."""

    def _show(self, graph: DependencyGraph, result: StratificationResult) -> None:
        logger.debug(
            "%s: %d packages, %d edges (not drawn)",
            self.title,
            graph.node_count,
            graph.edge_count,
        )
