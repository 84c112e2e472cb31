"""Tests for domain/exceptions.py."""

from pathlib import Path

import pytest

from stratigraph.domain.exceptions import SourceRootError, StratigraphError


class TestSourceRootError:
    """Tests for SourceRootError."""

    def test_hierarchy(self) -> None:
        error = SourceRootError(Path("/missing"))
        assert isinstance(error, StratigraphError)
        assert isinstance(error, NotADirectoryError)

    def test_message_and_path(self) -> None:
        error = SourceRootError(Path("/missing"))
        assert error.path == Path("/missing")
        assert "/missing" in str(error)

    def test_caught_as_library_error(self) -> None:
        with pytest.raises(StratigraphError):
            raise SourceRootError(Path("/missing"))
