from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import cast

from .clustering.engine import SimhashClusterer
from .clustering.types import ClusterParams
from .config.cluster import OUTPUT_FORMATS, ClusterConfig
from .config.resolution import load_resolved_cluster_config
from .console import Console
from .errors import ClusterConfigError, InputFormatError
from .parsing.input_reader import read_cluster_file, read_cluster_input
from .results.formats import write_clusters
from .view import print_report

SUPPORTED_ALGOS = ("simhash",)


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        "Examples:\n"
        "  sigcluster cluster signatures.jsonl --threshold 6 --format text\n"
        "  cat app.log | sigcluster cluster --min-cluster 1 --format json > clusters.json\n"
        "  sigcluster view clusters.json --top 10"
    )
    parser = argparse.ArgumentParser(
        prog="sigcluster",
        description="Group near-duplicate log signatures with SimHash + LSH banding.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    cluster = subparsers.add_parser(
        "cluster", help="Cluster signatures read from FILE or stdin."
    )
    _ = cluster.add_argument(
        "input_file",
        nargs="?",
        default=None,
        metavar="FILE",
        help="JSONL or plain-text input (default: stdin).",
    )
    _ = cluster.add_argument(
        "--algo", default="simhash", help="Cluster algorithm (only 'simhash')."
    )
    _ = cluster.add_argument("--field", default=None, help="JSONL field holding the signature.")
    _ = cluster.add_argument("--time-field", default=None, help="JSONL field holding the timestamp.")
    _ = cluster.add_argument("--threshold", type=int, default=None, help="Max Hamming distance to merge.")
    _ = cluster.add_argument("--bands", type=int, default=None, help="LSH band count.")
    _ = cluster.add_argument("--band-bits", type=int, default=None, help="Bits per LSH band.")
    _ = cluster.add_argument("--min-cluster", type=int, default=None, help="Minimum cluster count.")
    _ = cluster.add_argument("--samples", type=int, default=None, help="Samples kept per cluster.")
    _ = cluster.add_argument(
        "--format", choices=OUTPUT_FORMATS, default=None, help="Output format."
    )
    _ = cluster.add_argument("--config", default=None, help="Cluster config JSON path.")
    _ = cluster.add_argument("--no-color", action="store_true", help="Disable ANSI color output.")
    _ = cluster.add_argument("-q", "--quiet", action="store_true", help="Suppress the run summary.")
    _ = cluster.add_argument("-v", "--verbose", action="store_true", help="Enable verbose (INFO-level) logging.")

    view = subparsers.add_parser("view", help="Render a saved json/jsonl cluster file.")
    _ = view.add_argument("results", metavar="RESULTS", help="Path to cluster output.")
    _ = view.add_argument("--top", type=int, default=20, help="Maximum number of clusters to show.")
    _ = view.add_argument("--no-color", action="store_true", help="Disable ANSI color output.")
    return parser


def _pick(value: object, fallback: object) -> object:
    return fallback if value is None else value


def _resolve_params(args: argparse.Namespace, config: ClusterConfig) -> ClusterParams:
    return ClusterParams(
        threshold=cast(int, _pick(args.threshold, config.threshold)),
        bands=cast(int, _pick(args.bands, config.bands)),
        band_bits=cast(int, _pick(args.band_bits, config.band_bits)),
        min_cluster=cast(int, _pick(args.min_cluster, config.min_cluster)),
        samples=cast(int, _pick(args.samples, config.samples)),
    )


def _run_cluster(args: argparse.Namespace) -> int:
    console = Console(
        use_color=False if cast(bool, args.no_color) else None,
        quiet=cast(bool, args.quiet),
    )
    logging.basicConfig(
        level=logging.INFO if cast(bool, args.verbose) else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    algo = cast(str, args.algo)
    if algo not in SUPPORTED_ALGOS:
        console.error(f"unsupported algo: {algo}")
        return 1

    loaded = load_resolved_cluster_config(config_arg=cast(str | None, args.config))
    for warning in loaded.warnings:
        console.warn(warning)
    config = loaded.config

    params = _resolve_params(args, config)
    field = cast(str, _pick(args.field, config.field))
    time_field = cast(str, _pick(args.time_field, config.time_field))
    fmt = cast(str, _pick(args.format, config.format))

    input_file = cast(str | None, args.input_file)
    t0 = time.perf_counter()
    try:
        if input_file is None:
            records = read_cluster_input(sys.stdin, field=field, time_field=time_field)
        else:
            records = read_cluster_file(input_file, field=field, time_field=time_field)
    except InputFormatError as exc:
        console.error(f"{input_file}: {exc}" if input_file else str(exc))
        return 1
    except OSError as exc:
        console.error(f"Cannot read '{input_file}': {exc}")
        return 1

    clusterer = SimhashClusterer(params)
    try:
        clusters = clusterer.run(records)
    except ClusterConfigError as exc:
        console.error(str(exc))
        return 1

    write_clusters(clusters, fmt, sys.stdout)

    stats = clusterer.last_stats
    console.section("Cluster summary")
    console.kv("Config file", loaded.config_path or "N/A")
    console.kv("Input signatures", f"{stats.records:,}")
    console.kv("Input count", f"{sum(r.count for r in records):,}")
    console.kv("Candidate pairs", f"{stats.candidate_pairs:,}")
    console.kv("Partitions", f"{stats.partitions:,}")
    console.kv("Clusters", f"{stats.clusters:,}")
    console.kv("Elapsed", f"{time.perf_counter() - t0:.3f}s")
    return 0


def _run_view(args: argparse.Namespace) -> int:
    return print_report(
        cast(str, args.results),
        top=cast(int, args.top),
        no_color=cast(bool, args.no_color),
    )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    command = cast(str, args.command)
    if command == "cluster":
        return _run_cluster(args)
    return _run_view(args)
