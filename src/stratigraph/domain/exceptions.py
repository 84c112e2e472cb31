"""Domain exceptions: all public errors of stratigraph.

Recoverable conditions (unreadable source or side file, import before
package declaration, duplicate edge) are logged where they occur and never
raised.
Only failures that make a run meaningless surface as exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class StratigraphError(Exception):
    """Base for all stratigraph errors.

    Allows: except StratigraphError to catch all library errors.
    """


class SourceRootError(StratigraphError, NotADirectoryError):
    """Base directory cannot be scanned at all.

    Inherits NotADirectoryError for semantic correctness.

    Attributes:
        path: Directory that was requested.
    """

    def __init__(self, path: Path) -> None:
        """Initialize with the offending path."""
        self.path = path
        super().__init__(f"base directory does not exist or is not a directory: {path}")

