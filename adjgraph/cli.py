"""Command-line entry point: generate, display, save and reload a graph."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import structlog

from adjgraph import __version__
from adjgraph.config import settings
from adjgraph.core.generator import RandomGraphGenerator
from adjgraph.core.persistence import load, save
from adjgraph.exceptions import GraphError
from adjgraph.logging import setup_logging

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser, with defaults taken from ``settings``."""
    parser = argparse.ArgumentParser(
        prog="adjgraph",
        description="Generate a random undirected graph, print its adjacency matrix, "
        "save it as JSON and load it back.",
    )
    parser.add_argument("-n", "--nodes", type=int, default=settings.node_count, help="number of nodes")
    parser.add_argument("-o", "--output", default=settings.graph_path, help="JSON file to write and reload")
    parser.add_argument("--seed", type=int, default=settings.seed, help="random seed for reproducible graphs")
    parser.add_argument("--indent", type=int, default=settings.json_indent, help="JSON indentation")
    parser.add_argument("--log-level", default=settings.log_level, help="minimum log level")
    parser.add_argument("-q", "--quiet", action="store_true", help="do not print the adjacency matrix")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run generate -> print -> save -> reload.

    Returns:
        ``0`` on success, ``1`` if saving or reloading failed.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.nodes < 0:
        parser.error("--nodes must be non-negative")

    setup_logging(args.log_level)

    graph = RandomGraphGenerator(seed=args.seed).generate(args.nodes)
    if not args.quiet:
        graph.print()

    try:
        save(graph, args.output, indent=args.indent)
        reloaded = load(args.output)
    except GraphError as exc:
        logger.error("round_trip_failed", path=args.output, error=str(exc))
        return 1

    if not reloaded.same_as(graph):
        logger.error("round_trip_mismatch", path=args.output)
        return 1

    logger.info("round_trip_succeeded", path=args.output, nodes=args.nodes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
