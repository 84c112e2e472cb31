#!/usr/bin/env python3
"""Benchmark script for stratigraph performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of stratigraph package."""
    start = time.perf_counter()
    import stratigraph  # noqa: F401

    return time.perf_counter() - start


def benchmark_graph_build(packages: int, classes: int) -> float:
    """Measure reduction of a synthetic class index into a package graph."""
    from stratigraph.application.graph_builder import DependencyGraphBuilder
    from stratigraph.application.resolver import PackageResolver
    from stratigraph.domain.model.import_index import ImportIndexBuilder

    builder = ImportIndexBuilder()
    for p in range(packages):
        for c in range(classes):
            name = f"bench.p{p}.C{c}"
            builder.declare(name)
            # each package imports from the next three below it
            for q in range(max(0, p - 3), p):
                builder.add(name, f"bench.p{q}.C{c}")
    index = builder.build()

    start = time.perf_counter()
    DependencyGraphBuilder(index, PackageResolver()).build()
    return time.perf_counter() - start


def benchmark_stratify(packages: int) -> float:
    """Measure stratification of a layered graph with a trailing cycle."""
    from stratigraph.application.stratifier import stratify
    from stratigraph.domain.model.dependency_graph import DependencyGraph
    from stratigraph.domain.model.package_edge import PackageEdge

    edges = [
        PackageEdge(source=f"p{i}", target=f"p{j}", weight=1)
        for i in range(packages)
        for j in range(max(0, i - 3), i)
    ]
    edges.append(PackageEdge(source="p0", target=f"p{packages - 1}", weight=1))
    graph = DependencyGraph.from_edges(edges)

    start = time.perf_counter()
    stratify(graph)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run stratigraph benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--packages",
        type=int,
        default=200,
        help="Number of synthetic packages",
    )
    args = parser.parse_args()

    results = []

    # Import time
    import_time = benchmark_import_time()
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": import_time,
        }
    )

    build_time = benchmark_graph_build(args.packages, classes=20)
    results.append(
        {
            "name": f"Graph Build ({args.packages} packages x 20 classes)",
            "unit": "seconds",
            "value": build_time,
        }
    )

    stratify_time = benchmark_stratify(args.packages)
    results.append(
        {
            "name": f"Stratify ({args.packages} packages)",
            "unit": "seconds",
            "value": stratify_time,
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
