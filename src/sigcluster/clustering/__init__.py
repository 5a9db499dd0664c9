from __future__ import annotations

from .engine import ClusterStats, SimhashClusterer, cluster_signatures, fingerprint_records
from .simhash import FINGERPRINT_BITS, hamming_distance, simhash
from .types import Cluster, ClusterParams, FingerprintedRecord, Sample, SignatureRecord

__all__ = [
    "FINGERPRINT_BITS",
    "Cluster",
    "ClusterParams",
    "ClusterStats",
    "FingerprintedRecord",
    "Sample",
    "SignatureRecord",
    "SimhashClusterer",
    "cluster_signatures",
    "fingerprint_records",
    "hamming_distance",
    "simhash",
]
