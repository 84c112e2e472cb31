"""Domain enumerations."""

from enum import Enum


class AggregationMode(Enum):
    """How overlapping aggregation prefixes are resolved."""

    LAST_MATCH = "last-match"  # every matching entry replaces the result in order
    LONGEST_PREFIX = "longest-prefix"


class RendererKind(Enum):
    """Downstream graph renderer variant."""

    HEADLESS = "none"
    TREE = "tree"
    LIVE = "live"


class ReportFormat(Enum):
    """Report output format."""

    TEXT = "text"
    JSON = "json"
    RICH = "rich"
