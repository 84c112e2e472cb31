"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
"""

from collections.abc import Mapping
from pathlib import Path

from stratigraph.domain.model.dependency_graph import DependencyGraph
from stratigraph.domain.model.import_index import ImportIndex, ImportIndexBuilder
from stratigraph.domain.model.package_edge import PackageEdge


def make_graph(
    edges: Mapping[str, Mapping[str, int] | set[str]],
    extra_nodes: set[str] | None = None,
) -> DependencyGraph:
    """Create a DependencyGraph for tests.

    Args:
        edges: Source → targets. A set of targets means weight 1 each.
        extra_nodes: Isolated nodes to include

    Returns:
        DependencyGraph instance
    """

    def expand() -> list[PackageEdge]:
        result = []
        for source, targets in edges.items():
            weighted = targets if isinstance(targets, Mapping) else dict.fromkeys(targets, 1)
            for target, weight in weighted.items():
                result.append(PackageEdge(source=source, target=target, weight=weight))
        return result

    nodes = set(edges) | (extra_nodes or set())
    return DependencyGraph.from_edges(expand(), extra_nodes=nodes)


def make_index(imports: Mapping[str, set[str]]) -> ImportIndex:
    """Create an ImportIndex for tests.

    Args:
        imports: Declaring class → imported identifiers

    Returns:
        ImportIndex instance
    """
    builder = ImportIndexBuilder()
    for class_name, identifiers in imports.items():
        builder.declare(class_name)
        for identifier in identifiers:
            builder.add(class_name, identifier)
    return builder.build()


def write_java(
    root: Path,
    package: str,
    class_name: str,
    imports: list[str],
    *,
    header: str = "",
) -> Path:
    """Write a minimal Java source file under root following package dirs.

    Args:
        root: Source root directory
        package: Declared package
        class_name: Class (and file stem) name
        imports: Imported identifiers, without keyword and ';'
        header: Text placed before the package line

    Returns:
        Path of written file
    """
    directory = root.joinpath(*package.split("."))
    directory.mkdir(parents=True, exist_ok=True)
    lines = [header] if header else []
    lines.append(f"package {package};")
    lines.append("")
    lines.extend(f"import {imp};" for imp in imports)
    lines.append("")
    lines.append(f"public class {class_name} {{")
    lines.append("}")
    path = directory / f"{class_name}.java"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
