#!/usr/bin/env python3
"""Entry point for running the degree-sequence graph toolkit.

Chains all stages into a single command:
degree sequence -> Havel–Hakimi realization -> Eulerian trail ->
random weights -> Dijkstra -> Prim -> report (and optional figures).

Usage:
    python run_toolkit.py --n 8 --src 0
    python run_toolkit.py --degrees 3,3,2,2 --src 1 --seed 7
    python run_toolkit.py --config config.json --json
    python run_toolkit.py                      # prompts for n and src
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dacite import DaciteError

from degreegraph.config import (
    DEFAULT_CONFIG,
    REALIZATION_MODES,
    REPRESENTATIONS,
    ToolkitConfig,
    config_from_json,
    full_config_hash,
    graph_config_hash,
)
from degreegraph.pipeline import run_pipeline
from degreegraph.reporting import format_report, report_to_dict

log = logging.getLogger(__name__)


def _int_list(text: str) -> list[int]:
    try:
        return [int(part) for part in text.replace(" ", "").split(",") if part]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected comma-separated integers, got {text!r}"
        ) from None


def _weight_range(text: str) -> tuple[int, int]:
    values = _int_list(text)
    if len(values) != 2:
        raise argparse.ArgumentTypeError(f"expected LOW,HIGH, got {text!r}")
    return values[0], values[1]


def _prompt_int(prompt: str) -> int:
    """Read one integer from stdin, the way the interactive tool asks for n/src."""
    raw = input(prompt)
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"expected an integer, got {raw.strip()!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Realize a degree sequence and run Eulerian, Dijkstra "
        "and Prim analyses on the resulting graph"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to toolkit config JSON file",
    )
    parser.add_argument("--n", type=int, default=None, help="Number of vertices")
    parser.add_argument(
        "--src", type=int, default=None, help="Source vertex for shortest paths"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed (default: wall clock)"
    )
    parser.add_argument(
        "--degrees",
        type=_int_list,
        default=None,
        help="Explicit degree sequence, e.g. 3,3,2,2 (sets n)",
    )
    parser.add_argument(
        "--realization",
        choices=REALIZATION_MODES,
        default=None,
        help="Havel-Hakimi bookkeeping (default: tracked)",
    )
    parser.add_argument(
        "--representation",
        choices=REPRESENTATIONS,
        default=None,
        help="Adjacency backend (default: dense)",
    )
    parser.add_argument(
        "--weights",
        type=_weight_range,
        default=None,
        metavar="LOW,HIGH",
        help="Inclusive edge weight range (default: 1,10)",
    )
    parser.add_argument(
        "--euler-start",
        type=int,
        default=None,
        help="Start vertex for the Eulerian trail (default: chosen from degrees)",
    )
    parser.add_argument(
        "--mst-root",
        type=int,
        default=None,
        help="Root vertex for the minimum spanning tree (default: 0)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the report as JSON"
    )
    parser.add_argument(
        "--figures-dir",
        type=str,
        default=None,
        help="Write PNG/SVG figures to this directory",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> ToolkitConfig:
    """Merge config file, flags and interactive prompts into one config.

    Precedence: flags > config file > prompt. n and src are only prompted
    for when neither a flag nor a config file supplies them.
    """
    if args.config is not None:
        config = config_from_json(Path(args.config).read_text())
    else:
        config = DEFAULT_CONFIG

    if args.degrees is not None:
        n = len(args.degrees)
        if args.n is not None and args.n != n:
            raise ValueError(f"--n {args.n} disagrees with {n} --degrees entries")
    elif args.n is not None:
        n = args.n
    elif args.config is not None:
        n = config.graph.n
    else:
        n = _prompt_int("Enter the number of vertices: ")

    if args.src is not None:
        src = args.src
    elif args.config is not None or n == 0:
        src = config.query.src
    else:
        src = _prompt_int("Enter the source vertex for shortest path: ")

    graph_cfg = replace(
        config.graph,
        n=n,
        realization=args.realization or config.graph.realization,
        representation=args.representation or config.graph.representation,
    )
    query_cfg = replace(
        config.query,
        src=src,
        euler_start=(
            args.euler_start if args.euler_start is not None
            else config.query.euler_start
        ),
        mst_root=(
            args.mst_root if args.mst_root is not None
            else config.query.mst_root
        ),
    )
    weights_cfg = config.weights
    if args.weights is not None:
        weights_cfg = replace(weights_cfg, low=args.weights[0], high=args.weights[1])

    return replace(
        config,
        graph=graph_cfg,
        query=query_cfg,
        weights=weights_cfg,
        seed=args.seed if args.seed is not None else config.seed,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = resolve_config(args)
    except (ValueError, EOFError, DaciteError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    log.info("Config hash: %s", full_config_hash(config))
    log.info("Graph hash:  %s", graph_config_hash(config))

    try:
        report = run_pipeline(config, degrees=args.degrees)
    except Exception:
        log.exception("Toolkit run failed")
        return 1

    if args.json:
        print(json.dumps(report_to_dict(report), indent=2))
    else:
        print(format_report(report), end="")

    if args.figures_dir is not None:
        from degreegraph.visualization import render_all

        render_all(report, args.figures_dir)

    return 0


if __name__ == "__main__":
    sys.exit(main())
