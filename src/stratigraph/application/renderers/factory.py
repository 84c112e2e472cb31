"""Renderer selection from explicit configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from stratigraph.application.renderers.headless import HeadlessRenderer
from stratigraph.application.renderers.live import LiveRenderer
from stratigraph.application.renderers.tree import TreeRenderer
from stratigraph.domain.model.enums import RendererKind

if TYPE_CHECKING:
    from rich.console import Console

    from stratigraph.application.renderers._base import BaseRenderer


@dataclass(frozen=True, slots=True)
class RendererConfig:
    """Renderer configuration.

    Attributes:
        kind: Renderer variant
        delay_ms: Base delay step for the live renderer
    """

    kind: RendererKind = RendererKind.HEADLESS
    delay_ms: int = 50

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {self.delay_ms}")


def create_renderer(config: RendererConfig, console: Console | None = None) -> BaseRenderer:
    """Create renderer for config.

    Args:
        config: Renderer configuration
        console: Rich console used by drawing renderers

    Returns:
        Fresh renderer; call init() before use
    """
    match config.kind:
        case RendererKind.HEADLESS:
            return HeadlessRenderer()
        case RendererKind.TREE:
            return TreeRenderer(console)
        case RendererKind.LIVE:
            return LiveRenderer(config.delay_ms, console)
