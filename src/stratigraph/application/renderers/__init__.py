"""Graph renderers: downstream consumers of the node/edge-weight contract."""

from stratigraph.application.renderers._base import BaseRenderer
from stratigraph.application.renderers.factory import RendererConfig, create_renderer
from stratigraph.application.renderers.headless import HeadlessRenderer
from stratigraph.application.renderers.live import LiveRenderer
from stratigraph.application.renderers.tree import TreeRenderer

__all__ = [
    "BaseRenderer",
    "HeadlessRenderer",
    "LiveRenderer",
    "RendererConfig",
    "TreeRenderer",
    "create_renderer",
]
