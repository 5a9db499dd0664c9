"""LSH banding over SimHash fingerprints.

Each fingerprint is cut into ``bands`` slices of ``band_bits`` bits. Items
sharing any slice land in a common bucket and only those pairs are compared,
which keeps candidate generation sub-quadratic at the cost of some recall.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator, Sequence


def band_value(fingerprint: int, band: int, band_bits: int) -> int:
    return (fingerprint >> (band * band_bits)) & ((1 << band_bits) - 1)


def bucket_key(band: int, value: int, band_bits: int) -> int:
    # value < 2**band_bits, so keys from different bands never collide.
    return (band << band_bits) | value


def build_buckets(
    fingerprints: Sequence[int], bands: int, band_bits: int
) -> dict[int, list[int]]:
    buckets: dict[int, list[int]] = defaultdict(list)
    for index, fingerprint in enumerate(fingerprints):
        for band in range(bands):
            value = band_value(fingerprint, band, band_bits)
            buckets[bucket_key(band, value, band_bits)].append(index)
    return dict(buckets)


def candidate_pairs(buckets: dict[int, list[int]]) -> Iterator[tuple[int, int]]:
    """Yield every index pair that shares a bucket.

    A pair that shares several bands is yielded once per shared band.
    """
    for indices in buckets.values():
        if len(indices) < 2:
            continue
        for i, a in enumerate(indices):
            for b in indices[i + 1 :]:
                yield a, b
