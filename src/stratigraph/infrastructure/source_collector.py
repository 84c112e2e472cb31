"""Java source scanning by line heuristics.

Not a parser: a line starting with ``package`` sets the context, a line
starting with ``import`` adds a reference. Classes without any import line
are not indexed. Multi-line statements, keywords in comments and the like
are out of reach by construction.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stratigraph.domain.exceptions import SourceRootError
from stratigraph.domain.model.import_index import ImportIndex, ImportIndexBuilder

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

logger = logging.getLogger(__name__)

SOURCE_DIR_NAME = "src"
NESTED_SOURCE_PATH = ("main", "java")
SOURCE_SUFFIX = ".java"
PACKAGE_KEYWORD = "package"
IMPORT_KEYWORD = "import"


def _statement_argument(line: str, keyword: str) -> str:
    """Strip keyword and trailing ';' from a single-line statement."""
    return line[len(keyword) :].strip().removesuffix(";").strip()


class JavaSourceCollector:
    """Collects a class-level ImportIndex from a directory tree.

    Example:
        collector = JavaSourceCollector(ignores=frozenset({"java."}))
        index = collector.scan(Path("."))
    """

    def __init__(self, ignores: Iterable[str] = (), encoding: str = "utf-8") -> None:
        """Initialize collector.

        Args:
            ignores: Identifier prefixes dropped while scanning
            encoding: Source file encoding
        """
        self._ignores = frozenset(ignores)
        self._encoding = encoding

    def scan(self, base_dir: Path) -> ImportIndex:
        """Scan base_dir for source roots and index their imports.

        Args:
            base_dir: Directory to search for ``src`` directories

        Returns:
            Frozen ImportIndex

        Raises:
            SourceRootError: If base_dir is not an existing directory
        """
        if not base_dir.is_dir():
            raise SourceRootError(base_dir)
        try:
            next(base_dir.iterdir(), None)
        except OSError as e:
            raise SourceRootError(base_dir) from e

        builder = ImportIndexBuilder()
        for source_root in self.find_source_roots(base_dir):
            logger.info("scanning source root %s", source_root)
            for source_file in self._iter_source_files(source_root):
                self._scan_file(source_file, builder)

        index = builder.build()
        logger.info(
            "indexed %d classes with %d imports", index.class_count, index.import_count
        )
        return index

    def find_source_roots(self, directory: Path) -> Iterator[Path]:
        """Yield effective source roots below directory.

        A child named ``src`` is a source root; ``src/main/java`` is preferred
        when present. Every other child directory is searched recursively.
        """
        for child in self._children(directory):
            if not child.is_dir():
                continue
            if child.name == SOURCE_DIR_NAME:
                nested = child.joinpath(*NESTED_SOURCE_PATH)
                yield nested if nested.is_dir() else child
            else:
                yield from self.find_source_roots(child)

    def _iter_source_files(self, directory: Path) -> Iterator[Path]:
        for child in self._children(directory):
            if child.is_dir():
                yield from self._iter_source_files(child)
            elif child.name.endswith(SOURCE_SUFFIX):
                yield child

    @staticmethod
    def _children(directory: Path) -> list[Path]:
        """List directory sorted by name. Unreadable directories are skipped."""
        try:
            return sorted(directory.iterdir())
        except OSError as e:
            logger.error("cannot list %s: %s", directory, e)
            return []

    def _scan_file(self, path: Path, builder: ImportIndexBuilder) -> None:
        """Scan one file into builder. Read errors skip the file."""
        logger.debug("reading %s", path)
        class_name = path.name.removesuffix(SOURCE_SUFFIX)
        declaring: str | None = None
        try:
            with path.open(encoding=self._encoding) as source:
                for line in source:
                    if line.startswith(PACKAGE_KEYWORD):
                        package = _statement_argument(line, PACKAGE_KEYWORD)
                        declaring = f"{package}.{class_name}"
                        logger.debug("%s declares %s", path.name, declaring)
                    elif line.startswith(IMPORT_KEYWORD):
                        if declaring is None:
                            logger.error("import for unidentified context in %s", path)
                            continue
                        self._add_import(builder, declaring, line)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("cannot read %s: %s", path, e)

    def _add_import(self, builder: ImportIndexBuilder, declaring: str, line: str) -> None:
        # a class enters the index with its first import line, even an ignored one
        builder.declare(declaring)
        identifier = _statement_argument(line, IMPORT_KEYWORD)
        if not identifier:
            return
        if any(identifier.startswith(prefix) for prefix in self._ignores):
            return
        logger.debug("adding import %s", identifier)
        builder.add(declaring, identifier)
