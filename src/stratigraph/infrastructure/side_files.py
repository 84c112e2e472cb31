"""Ignore and aggregation side files.

Plain text, one prefix per line, no quoting or escaping. Surrounding
whitespace is stripped and blank lines are skipped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stratigraph.domain.model.configuration import DEFAULT_IGNORES, AnalysisConfig
from stratigraph.domain.model.enums import AggregationMode

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

IGNORE_LIST_NAME = ".stratigraph.ignore.list"
AGGREGATION_LIST_NAME = ".stratigraph.aggregation.list"


def read_prefix_list(path: Path) -> tuple[str, ...] | None:
    """Read prefixes from side file, keeping file order.

    Args:
        path: Side file path

    Returns:
        Unique prefixes in file order, None if the file does not exist.
        A file that exists but cannot be read is logged and yields no prefixes.
    """
    if not path.exists():
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read %s: %s", path, e)
        return ()

    prefixes = (line.strip() for line in text.splitlines())
    return tuple(dict.fromkeys(p for p in prefixes if p))


def load_ignores(base_dir: Path) -> frozenset[str]:
    """Load ignore prefixes from base_dir, falling back to defaults."""
    path = base_dir / IGNORE_LIST_NAME
    prefixes = read_prefix_list(path)
    if prefixes is None:
        logger.info("no %s, using default ignores", IGNORE_LIST_NAME)
        return DEFAULT_IGNORES
    return frozenset(prefixes)


def load_aggregations(base_dir: Path) -> tuple[str, ...]:
    """Load aggregation prefixes from base_dir, none if absent."""
    path = base_dir / AGGREGATION_LIST_NAME
    prefixes = read_prefix_list(path)
    if prefixes is None:
        logger.info("no %s, no aggregation", AGGREGATION_LIST_NAME)
        return ()
    return prefixes


def load_config(
    base_dir: Path,
    *,
    only_internal: bool = False,
    aggregation_mode: AggregationMode = AggregationMode.LAST_MATCH,
    boundary_aware_self_exclusion: bool = False,
    fail_on_incomplete: bool = True,
) -> AnalysisConfig:
    """Build AnalysisConfig from side files in base_dir plus explicit options."""
    ignores = load_ignores(base_dir)
    aggregations = load_aggregations(base_dir)
    logger.info("ignores %s", sorted(ignores))
    logger.info("aggregations %s", list(aggregations))

    return AnalysisConfig(
        ignores=ignores,
        aggregations=aggregations,
        only_internal=only_internal,
        aggregation_mode=aggregation_mode,
        boundary_aware_self_exclusion=boundary_aware_self_exclusion,
        fail_on_incomplete=fail_on_incomplete,
    )
