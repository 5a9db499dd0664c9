from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .banding import build_buckets, candidate_pairs
from .simhash import hamming_distance, simhash
from .types import (
    Cluster,
    ClusterParams,
    FingerprintedRecord,
    Sample,
    SignatureRecord,
)
from .unionfind import UnionFind

logger = logging.getLogger(__name__)


@dataclass
class ClusterStats:
    records: int = 0
    buckets: int = 0
    candidate_pairs: int = 0
    merges: int = 0
    partitions: int = 0
    clusters: int = 0


@dataclass
class _ClusterAgg:
    count: int = 0
    representative: str = ""
    repr_count: int = 0
    first_ts: str = ""
    last_ts: str = ""
    samples: list[Sample] = field(default_factory=list)

    def add(self, record: SignatureRecord, max_samples: int, *, seed: bool) -> None:
        self.count += record.count
        if (
            seed
            or record.count > self.repr_count
            or (record.count == self.repr_count and record.sig < self.representative)
        ):
            self.representative = record.sig
            self.repr_count = record.count
        if record.first_ts and (not self.first_ts or record.first_ts < self.first_ts):
            self.first_ts = record.first_ts
        if record.last_ts and (not self.last_ts or record.last_ts > self.last_ts):
            self.last_ts = record.last_ts
        if record.sample and len(self.samples) < max_samples:
            self.samples.append(Sample(ts=record.sample_ts, raw=record.sample))

    def freeze(self) -> Cluster:
        return Cluster(
            count=self.count,
            representative=self.representative,
            first_ts=self.first_ts,
            last_ts=self.last_ts,
            samples=tuple(self.samples),
        )


def fingerprint_records(records: Iterable[SignatureRecord]) -> list[FingerprintedRecord]:
    return [
        FingerprintedRecord(record=record, fingerprint=simhash(record.sig, record.count))
        for record in records
    ]


def cluster_signatures(
    records: Sequence[SignatureRecord],
    params: ClusterParams | None = None,
    stats: ClusterStats | None = None,
) -> list[Cluster]:
    """Group near-duplicate signatures and rank the resulting clusters.

    Raises ClusterConfigError before any hashing when the band layout does
    not cover the fingerprint. Clusters are sorted by descending count, then
    by representative text.
    """
    params = params or ClusterParams()
    params.validate()
    params = params.normalized()
    stats = stats if stats is not None else ClusterStats()
    stats.records = len(records)

    t0 = time.perf_counter()
    items = fingerprint_records(records)
    logger.info(
        "[timing] fingerprint %d signatures: %.3fs", len(items), time.perf_counter() - t0
    )

    t0 = time.perf_counter()
    buckets = build_buckets(
        [item.fingerprint for item in items], params.bands, params.band_bits
    )
    stats.buckets = len(buckets)

    uf = UnionFind(len(items))
    for a, b in candidate_pairs(buckets):
        stats.candidate_pairs += 1
        distance = hamming_distance(items[a].fingerprint, items[b].fingerprint)
        if distance <= params.threshold and uf.union(a, b):
            stats.merges += 1
    logger.info(
        "[timing] banding + merge (%d buckets, %d pairs): %.3fs",
        stats.buckets,
        stats.candidate_pairs,
        time.perf_counter() - t0,
    )

    partitions = _aggregate(items, uf, params.samples)
    stats.partitions = len(partitions)

    clusters = [
        agg.freeze() for agg in partitions if agg.count >= params.min_cluster
    ]
    clusters.sort(key=lambda c: (-c.count, c.representative))
    stats.clusters = len(clusters)

    logger.info(
        "SimhashClusterer: %d signatures, %d merges, %d partitions, %d clusters kept",
        stats.records,
        stats.merges,
        stats.partitions,
        stats.clusters,
    )
    return clusters


def _aggregate(
    items: list[FingerprintedRecord], uf: UnionFind, max_samples: int
) -> list[_ClusterAgg]:
    by_root: dict[int, _ClusterAgg] = {}
    for index, item in enumerate(items):
        root = uf.find(index)
        agg = by_root.get(root)
        seed = agg is None
        if agg is None:
            agg = by_root[root] = _ClusterAgg()
        agg.add(item.record, max_samples, seed=seed)
    return list(by_root.values())


class SimhashClusterer:
    def __init__(self, params: ClusterParams | None = None) -> None:
        self.params = params or ClusterParams()
        self.last_stats = ClusterStats()

    def run(self, records: Sequence[SignatureRecord]) -> list[Cluster]:
        stats = ClusterStats()
        clusters = cluster_signatures(records, self.params, stats)
        self.last_stats = stats
        return clusters
