"""Shared fixtures."""

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def drop_cli_logging() -> Iterator[None]:
    """The CLI installs a RichHandler on the root logger; remove it after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(level)
