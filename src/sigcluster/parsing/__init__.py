from __future__ import annotations

from .input_reader import read_cluster_input, read_cluster_file

__all__ = [
    "read_cluster_file",
    "read_cluster_input",
]
