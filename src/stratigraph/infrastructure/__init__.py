"""Infrastructure: file system access."""

from stratigraph.infrastructure.side_files import (
    AGGREGATION_LIST_NAME,
    IGNORE_LIST_NAME,
    load_aggregations,
    load_config,
    load_ignores,
)
from stratigraph.infrastructure.source_collector import JavaSourceCollector

__all__ = [
    "AGGREGATION_LIST_NAME",
    "IGNORE_LIST_NAME",
    "JavaSourceCollector",
    "load_aggregations",
    "load_config",
    "load_ignores",
]
