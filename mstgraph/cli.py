"""Command line entry point: read a graph, run Kruskal then BFS, print the result."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

import structlog

from .config import MSTConfig, load_config
from .exceptions import MSTGraphError, log_and_format_exception
from .graph.advanced.mst import HEAP_SIZING_MODES, KruskalMST
from .graph.basic.bfs import ForestBFS
from .logging_config import LOG_FORMATS, configure_logging
from .text_format import parse_graph, render_report

EXIT_OK = 0
EXIT_FAILURE = 1


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mstgraph",
        description="Compute a minimum spanning forest with Kruskal's algorithm.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Graph file (first line: capacity, then 'v1 v2 weight' lines). Reads stdin if omitted.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Trace the algorithms at DEBUG level",
    )
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    parser.add_argument("--log-format", choices=LOG_FORMATS, help="Structured log renderer")
    parser.add_argument(
        "--heap-sizing",
        choices=HEAP_SIZING_MODES,
        help="Allocate the edge heap by exact edge count or capacity squared",
    )
    return parser.parse_args(argv)


def run(config: MSTConfig, source: TextIO, out: TextIO) -> int:
    """Run the whole pipeline on ``source`` and write the report to ``out``."""
    log = structlog.get_logger(__name__)
    try:
        graph = parse_graph(source)
        result = KruskalMST(
            heap_sizing=config.heap_sizing,
            logger=logging.getLogger("mstgraph.kruskal"),
        ).execute(graph)
        parent = ForestBFS(logger=logging.getLogger("mstgraph.bfs")).execute(graph)
    except MSTGraphError as exc:
        error = log_and_format_exception(exc, logging.getLogger(__name__))
        log.debug("mstgraph_failed", **error)
        return EXIT_FAILURE

    log.debug(
        "mstgraph_done",
        selected=len(result.selected),
        rejected=len(result.rejected),
        total_weight=result.total_weight,
    )
    out.write(render_report(graph, parent))
    graph.clear()
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        config = load_config(
            args.config,
            verbose=args.verbose,
            log_level=args.log_level,
            log_format=args.log_format,
            heap_sizing=args.heap_sizing,
        )
    except MSTGraphError as exc:
        print(f"mstgraph: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(level=config.effective_log_level, fmt=config.log_format)

    if args.input is None:
        return run(config, sys.stdin, sys.stdout)
    try:
        with open(args.input, "r", encoding="utf-8") as source:
            return run(config, source, sys.stdout)
    except OSError as exc:
        print(f"mstgraph: cannot read {args.input}: {exc}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
