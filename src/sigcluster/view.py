from __future__ import annotations

import sys
from pathlib import Path

from ._util import as_int, as_str
from .console import Console
from .results.formats import read_clusters

_SAMPLE_PREVIEW = 3


def print_report(
    results_path: str | Path,
    *,
    top: int = 20,
    no_color: bool = False,
) -> int:
    console = Console(use_color=False if no_color else None, stream=sys.stdout)
    path = Path(results_path)
    if not path.is_file():
        console.error(f"Results file not found: {path}")
        return 1

    try:
        clusters = read_clusters(path)
    except (OSError, ValueError) as exc:
        console.error(f"Failed to load clusters: {exc}")
        return 1

    total_clusters = len(clusters)
    total_count = sum(as_int(c.get("count"), 0) for c in clusters)
    shown = min(total_clusters, max(0, top))

    console.section("Signature Cluster Report")
    console.kv("File", str(path))
    console.kv("Total count", f"{total_count:,}")
    console.kv("Clusters", f"{total_clusters:,}")
    console.kv("Top shown", f"{shown:,}")

    for rank, cluster in enumerate(clusters[:shown], start=1):
        _print_cluster(console, rank, cluster, total_count)

    if total_clusters > shown:
        console.info(f"... omitted {total_clusters - shown:,} clusters (use --top to increase)")
    return 0


def _print_cluster(
    console: Console, rank: int, cluster: dict[str, object], total_count: int
) -> None:
    count = as_int(cluster.get("count"), 0)
    share = f"{count / total_count:.1%}" if total_count else "N/A"

    console.section(f"[{rank:02d}] {as_str(cluster.get('repr'), 'N/A')}")
    console.kv("Count", f"{count:,} ({share})")
    first_ts = as_str(cluster.get("first_ts"), "")
    last_ts = as_str(cluster.get("last_ts"), "")
    if first_ts or last_ts:
        console.kv("Seen", f"{first_ts or '?'} .. {last_ts or '?'}")

    raw_samples = cluster.get("samples")
    samples = raw_samples if isinstance(raw_samples, list) else []
    for sample in samples[:_SAMPLE_PREVIEW]:
        if not isinstance(sample, dict):
            continue
        raw = as_str(sample.get("raw"), "")
        ts = as_str(sample.get("ts"), "")
        console.info(f"- {ts} {raw}" if ts else f"- {raw}")
    if len(samples) > _SAMPLE_PREVIEW:
        console.info(f"... (+{len(samples) - _SAMPLE_PREVIEW:,} more)")
