"""Ports: contracts between the core and its consumers."""

from stratigraph.domain.ports.renderer import RendererProtocol
from stratigraph.domain.ports.reporter import ReporterProtocol

__all__ = ["RendererProtocol", "ReporterProtocol"]
