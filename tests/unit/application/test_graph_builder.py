"""Tests for application/graph_builder.py."""

import logging

import pytest

from stratigraph.application.graph_builder import DependencyGraphBuilder
from stratigraph.application.resolver import PackageResolver
from stratigraph.domain.model.package_edge import PackageEdge
from tests.factories import make_index


def _builder(imports: dict[str, set[str]], **kwargs: object) -> DependencyGraphBuilder:
    aggregations = kwargs.pop("aggregations", ())
    return DependencyGraphBuilder(
        make_index(imports),
        PackageResolver(aggregations),  # type: ignore[arg-type]
        **kwargs,  # type: ignore[arg-type]
    )


class TestEdgesFrom:
    """Tests for DependencyGraphBuilder.edges_from."""

    def test_counts_class_level_imports(self) -> None:
        builder = _builder(
            {
                "com.acme.web.A": {"com.acme.core.X", "com.acme.core.Y"},
                "com.acme.web.B": {"com.acme.core.X", "com.acme.db.Z"},
            }
        )
        assert builder.edges_from("com.acme.web") == {"com.acme.core": 3, "com.acme.db": 1}

    def test_only_selected_package(self) -> None:
        builder = _builder(
            {
                "com.acme.web.A": {"com.acme.core.X"},
                "com.acme.db.B": {"com.acme.util.U"},
            }
        )
        assert builder.edges_from("com.acme.db") == {"com.acme.util": 1}

    def test_same_package_excluded(self) -> None:
        builder = _builder({"com.acme.A": {"com.acme.B"}, "com.acme.B": {"com.acme.A"}})
        assert builder.edges_from("com.acme") == {}

    def test_subpackage_excluded_by_text_prefix(self) -> None:
        builder = _builder({"com.acme.A": {"com.acme.sub.S"}})
        assert builder.edges_from("com.acme") == {}

    def test_identifier_without_package_skipped(self) -> None:
        builder = _builder({"com.acme.A": {"Orphan", "org.lib.L"}})
        assert builder.edges_from("com.acme") == {"org.lib": 1}

    def test_external_targets_kept_by_default(self) -> None:
        builder = _builder({"com.acme.A": {"org.lib.L"}})
        assert builder.edges_from("com.acme") == {"org.lib": 1}

    def test_only_internal_drops_external_targets(self) -> None:
        builder = _builder(
            {"com.acme.web.A": {"org.lib.L", "com.acme.core.X"}, "com.acme.core.X": set()},
            only_internal=True,
        )
        assert builder.edges_from("com.acme.web") == {"com.acme.core": 1}

    def test_ignore_applies_at_package_boundary(self) -> None:
        builder = _builder(
            {"com.acme.A": {"org.lib.sub.L", "org.lib.M", "org.libx.N"}},
            ignores={"org.lib"},
        )
        # "org.lib" itself and "org.libx" are not below "org.lib."
        assert builder.edges_from("com.acme") == {"org.lib": 1, "org.libx": 1}

    def test_aggregated_targets_merge(self) -> None:
        builder = _builder(
            {"com.acme.A": {"org.lib.a.X", "org.lib.b.Y"}},
            aggregations=("org.lib",),
        )
        assert builder.edges_from("com.acme") == {"org.lib": 2}

    def test_aggregated_sources_merge(self) -> None:
        builder = _builder(
            {"org.app.a.A": {"com.x.X"}, "org.app.b.B": {"com.x.Y"}},
            aggregations=("org.app",),
        )
        assert builder.edges_from("org.app") == {"com.x": 2}


class TestSelfExclusion:
    """Tests for self reference handling."""

    def test_sibling_with_textual_prefix_excluded(self) -> None:
        builder = _builder({"com.acme.foo.A": {"com.acme.foobar.B"}})
        assert builder.edges_from("com.acme.foo") == {}

    def test_sibling_exclusion_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        builder = _builder({"com.acme.foo.A": {"com.acme.foobar.B"}})
        with caplog.at_level(logging.WARNING, logger="stratigraph.application.graph_builder"):
            builder.edges_from("com.acme.foo")
        assert "com.acme.foobar.B" in caplog.text
        assert "com.acme.foobar" in caplog.text

    def test_subpackage_exclusion_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        builder = _builder({"com.acme.A": {"com.acme.sub.S"}})
        with caplog.at_level(logging.WARNING, logger="stratigraph.application.graph_builder"):
            builder.edges_from("com.acme")
        assert caplog.records == []

    def test_boundary_aware_keeps_sibling(self) -> None:
        builder = _builder(
            {"com.acme.foo.A": {"com.acme.foobar.B", "com.acme.foo.C"}},
            boundary_aware_self_exclusion=True,
        )
        assert builder.edges_from("com.acme.foo") == {"com.acme.foobar": 1}

    def test_boundary_aware_still_drops_subpackages(self) -> None:
        builder = _builder(
            {"com.acme.A": {"com.acme.sub.S"}},
            boundary_aware_self_exclusion=True,
        )
        assert builder.edges_from("com.acme") == {}


class TestBuild:
    """Tests for DependencyGraphBuilder.build."""

    def test_nodes_include_declared_packages_and_targets(self) -> None:
        graph = _builder(
            {"com.acme.web.A": {"org.lib.L"}, "com.acme.core.B": set()}
        ).build()
        assert graph.nodes == frozenset({"com.acme.web", "com.acme.core", "org.lib"})

    def test_edges_are_weighted(self) -> None:
        graph = _builder(
            {"a.A": {"b.X", "b.Y"}, "a.B": {"b.X"}, "b.X": set(), "b.Y": set()}
        ).build()
        assert graph.out_edges("a") == (PackageEdge(source="a", target="b", weight=3),)

    def test_no_self_edges(self) -> None:
        graph = _builder(
            {"com.acme.A": {"com.acme.B"}, "com.acme.B": {"com.acme.A"}}
        ).build()
        assert graph.edge_count == 0
        assert not graph.has_edge("com.acme", "com.acme")

    @pytest.mark.parametrize("only_internal", [False, True])
    def test_ignored_packages_never_reach_graph(self, only_internal: bool) -> None:
        graph = _builder(
            {"com.acme.A": {"java.util.List", "com.other.B"}, "com.other.B": set()},
            ignores={"java"},
            only_internal=only_internal,
        ).build()
        assert not any(n.startswith("java.") for n in graph.nodes)
        assert graph.has_edge("com.acme", "com.other")

    def test_empty_index(self) -> None:
        graph = _builder({}).build()
        assert graph.node_count == 0

    def test_duplicate_edge_logged_and_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        targets: dict[str, int] = {"b": 1}
        with caplog.at_level(logging.ERROR, logger="stratigraph.application.graph_builder"):
            DependencyGraphBuilder._add_edge(targets, PackageEdge(source="a", target="b", weight=5))
        assert targets == {"b": 1}
        assert "unexpected edge" in caplog.text
