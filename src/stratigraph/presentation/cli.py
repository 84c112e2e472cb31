"""Command line entry point.

Exit status:
    0: fully layered, or --noerror given
    1: not fully layered
    2: base directory unusable
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from stratigraph import __version__
from stratigraph.application.renderers import RendererConfig, create_renderer
from stratigraph.application.reporters import JSONReporter, PlainTextReporter, RichReporter
from stratigraph.application.services import StratificationAnalyzer, render
from stratigraph.domain.exceptions import StratigraphError
from stratigraph.domain.model.enums import AggregationMode, RendererKind, ReportFormat
from stratigraph.infrastructure.side_files import load_config

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stratigraph.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_LAYERED = 1
EXIT_UNUSABLE_INPUT = 2


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="stratigraph",
        description="Check whether the packages of a Java source tree can be layered.",
    )
    parser.add_argument(
        "-d",
        "--basedir",
        type=Path,
        default=Path("."),
        help="base directory to scan for java source files",
    )
    parser.add_argument(
        "-i",
        "--internal",
        action="store_true",
        help="only take references internal to the project into account",
    )
    parser.add_argument(
        "-e",
        "--noerror",
        action="store_true",
        help="exit with 0 even when not 100%% layered",
    )
    parser.add_argument(
        "-r",
        "--renderer",
        choices=[k.value for k in RendererKind],
        default=RendererKind.HEADLESS.value,
        help="graph renderer (default: %(default)s)",
    )
    parser.add_argument(
        "-t",
        "--delay",
        type=_non_negative_int,
        default=50,
        help="delay step in ms for the live renderer (default: %(default)s)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[f.value for f in ReportFormat],
        default=ReportFormat.TEXT.value,
        help="report format (default: %(default)s)",
    )
    parser.add_argument(
        "--aggregation-mode",
        choices=[m.value for m in AggregationMode],
        default=AggregationMode.LAST_MATCH.value,
        help="resolution of nested aggregation prefixes (default: %(default)s)",
    )
    parser.add_argument(
        "--boundary-aware",
        action="store_true",
        help="exclude self references at package boundaries instead of by text prefix",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="warnings and errors only")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: int, console: Console | None = None) -> None:
    """Route library logging through a single rich handler on stderr."""
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


def create_reporter(report_format: ReportFormat, console: Console) -> ReporterProtocol:
    """Create reporter for format, writing to console's file."""
    match report_format:
        case ReportFormat.TEXT:
            return PlainTextReporter(console.file)
        case ReportFormat.JSON:
            return JSONReporter(console.file)
        case ReportFormat.RICH:
            return RichReporter(console)


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run one analysis.

    Args:
        argv: Arguments (default: sys.argv[1:])
        console: Output console for reports and renderers (default: stdout)

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    configure_logging(level)

    console = console or Console()
    base_dir: Path = args.basedir
    logger.info("starting at directory %s", base_dir.resolve())

    try:
        config = load_config(
            base_dir,
            only_internal=args.internal,
            aggregation_mode=AggregationMode(args.aggregation_mode),
            boundary_aware_self_exclusion=args.boundary_aware,
            fail_on_incomplete=not args.noerror,
        )
        outcome = StratificationAnalyzer(config).analyze(base_dir)
    except StratigraphError as e:
        logger.error("%s", e)
        return EXIT_UNUSABLE_INPUT

    renderer = create_renderer(RendererConfig(RendererKind(args.renderer), args.delay), console)
    render(outcome.graph, renderer, str(base_dir))

    reporter = create_reporter(ReportFormat(args.format), console)
    success = reporter.report(outcome.result)

    if success or not config.fail_on_incomplete:
        return EXIT_OK
    return EXIT_NOT_LAYERED
