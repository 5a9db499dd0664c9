from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO, TypedDict, cast

from ..clustering.types import Cluster, ClusterDict
from ..config.cluster import OUTPUT_FORMATS


class ClustersEnvelope(TypedDict):
    clusters: list[ClusterDict]


def write_clusters(clusters: Sequence[Cluster], fmt: str, stream: TextIO) -> None:
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"unknown format: {fmt}")

    if fmt == "jsonl":
        for cluster in clusters:
            stream.write(_dumps(cluster.to_dict()) + "\n")
    elif fmt == "json":
        payload: ClustersEnvelope = {"clusters": [c.to_dict() for c in clusters]}
        stream.write(_dumps(payload) + "\n")
    elif fmt == "text":
        for cluster in clusters:
            stream.write(f"{cluster.count}\t{cluster.representative}\n")
    else:
        for cluster in clusters:
            sample = cluster.samples[0].raw if cluster.samples else ""
            stream.write((sample or cluster.representative) + "\n")


def read_clusters(path: str | Path) -> list[dict[str, object]]:
    """Load clusters written in the ``json`` or ``jsonl`` format."""
    text = Path(path).read_text(encoding="utf-8")
    stripped = text.strip()
    if not stripped:
        return []

    try:
        loaded = cast(object, json.loads(stripped))
    except json.JSONDecodeError:
        return _read_jsonl(stripped)

    if isinstance(loaded, dict):
        clusters = cast(dict[str, object], loaded).get("clusters")
        if isinstance(clusters, list):
            return _as_cluster_list(clusters)
        if "count" in loaded:
            return [cast(dict[str, object], loaded)]
    raise ValueError(
        "Results must be a {\"clusters\": [...]} object or one cluster object per line."
    )


def _read_jsonl(text: str) -> list[dict[str, object]]:
    out: list[dict[str, object]] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            loaded = cast(object, json.loads(line))
        except json.JSONDecodeError as exc:
            raise ValueError(f"line {line_no}: invalid json: {exc}") from exc
        if not isinstance(loaded, dict):
            raise ValueError(f"line {line_no}: expected a cluster object")
        out.append(cast(dict[str, object], loaded))
    return out


def _as_cluster_list(values: list[object]) -> list[dict[str, object]]:
    if not all(isinstance(value, dict) for value in values):
        raise ValueError("Every entry in 'clusters' must be an object.")
    return cast(list[dict[str, object]], values)


def _dumps(payload: object) -> str:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
