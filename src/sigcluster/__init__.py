"""Approximate clustering of repetitive log signatures."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .clustering import (
    Cluster,
    ClusterParams,
    SignatureRecord,
    SimhashClusterer,
    cluster_signatures,
)
from .errors import ClusterConfigError, InputFormatError

try:
    __version__ = version("sigcluster")
except PackageNotFoundError:
    __version__ = "0+unknown"

__all__ = [
    "Cluster",
    "ClusterConfigError",
    "ClusterParams",
    "InputFormatError",
    "SignatureRecord",
    "SimhashClusterer",
    "cluster_signatures",
]
