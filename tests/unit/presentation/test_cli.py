"""Tests for presentation/cli.py."""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from stratigraph.presentation.cli import (
    EXIT_NOT_LAYERED,
    EXIT_OK,
    EXIT_UNUSABLE_INPUT,
    build_parser,
    main,
)
from tests.factories import write_java


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, no_color=True)


def _output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


@pytest.fixture
def layered(tmp_path: Path) -> Path:
    root = tmp_path / "src"
    write_java(root, "com.acme.app", "App", ["com.acme.core.Core"])
    write_java(root, "com.acme.core", "Core", [])
    return tmp_path


@pytest.fixture
def cyclic(tmp_path: Path) -> Path:
    root = tmp_path / "src"
    write_java(root, "com.acme.a", "A", ["com.acme.b.B"])
    write_java(root, "com.acme.b", "B", ["com.acme.a.A"])
    return tmp_path


class TestParser:
    """Tests for build_parser."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.basedir == Path(".")
        assert args.internal is False
        assert args.noerror is False
        assert args.renderer == "none"
        assert args.delay == 50
        assert args.format == "text"
        assert args.aggregation_mode == "last-match"

    def test_short_options(self) -> None:
        args = build_parser().parse_args(["-d", "proj", "-i", "-e", "-r", "live", "-t", "10"])
        assert args.basedir == Path("proj")
        assert args.internal is True
        assert args.noerror is True
        assert args.renderer == "live"
        assert args.delay == 10

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["-t", "-1"])

    def test_verbose_and_quiet_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["-v", "-q"])


class TestMain:
    """Tests for main exit status and output."""

    def test_layered_exits_zero(self, layered: Path, console: Console) -> None:
        assert main(["-d", str(layered)], console) == EXIT_OK
        assert "Result: LAYERED" in _output(console)

    def test_cycle_exits_one(self, cyclic: Path, console: Console) -> None:
        assert main(["-d", str(cyclic)], console) == EXIT_NOT_LAYERED
        assert "Result: NOT LAYERED" in _output(console)

    def test_noerror_exits_zero(self, cyclic: Path, console: Console) -> None:
        assert main(["-d", str(cyclic), "--noerror"], console) == EXIT_OK

    def test_missing_base_dir_exits_two(self, tmp_path: Path, console: Console) -> None:
        assert main(["-d", str(tmp_path / "missing")], console) == EXIT_UNUSABLE_INPUT

    def test_unreadable_side_file_does_not_stop_run(
        self, layered: Path, console: Console
    ) -> None:
        (layered / ".stratigraph.ignore.list").mkdir()
        assert main(["-d", str(layered)], console) == EXIT_OK
        assert "Result: LAYERED" in _output(console)

    def test_tree_without_sources_exits_zero(self, tmp_path: Path, console: Console) -> None:
        assert main(["-d", str(tmp_path)], console) == EXIT_OK
        text = _output(console)
        assert "0 of 0 layered (100%)" in text
        assert "Result: LAYERED" in text

    def test_json_format(self, cyclic: Path, console: Console) -> None:
        main(["-d", str(cyclic), "-f", "json", "-q"], console)
        data = json.loads(_output(console))
        assert data["complete"] is False
        assert [u["package"] for u in data["unresolved"]] == ["com.acme.a", "com.acme.b"]

    def test_rich_format(self, layered: Path, console: Console) -> None:
        assert main(["-d", str(layered), "-f", "rich"], console) == EXIT_OK
        assert "PACKAGE STRATIFICATION" in _output(console)

    def test_tree_renderer(self, layered: Path, console: Console) -> None:
        main(["-d", str(layered), "-r", "tree"], console)
        assert "com.acme.app (layer 1)" in _output(console)

    def test_renderer_does_not_change_verdict(self, cyclic: Path, console: Console) -> None:
        status = main(["-d", str(cyclic), "-r", "live", "-t", "0"], console)
        assert status == EXIT_NOT_LAYERED

    def test_internal_option(self, tmp_path: Path, console: Console) -> None:
        root = tmp_path / "src"
        write_java(root, "com.acme.app", "App", ["org.lib.Tool"])
        main(["-d", str(tmp_path), "-i", "-f", "json", "-q"], console)
        data = json.loads(_output(console))
        assert data["total"] == 1

    def test_aggregation_side_file(self, cyclic: Path, console: Console) -> None:
        (cyclic / ".stratigraph.aggregation.list").write_text("com.acme\n")
        # both packages collapse into com.acme: the cycle becomes a self reference
        assert main(["-d", str(cyclic)], console) == EXIT_OK
