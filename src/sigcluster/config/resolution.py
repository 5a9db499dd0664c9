from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path

from .cluster import ClusterConfig, load_cluster_config
from .._util import trim_to_none


CLUSTER_CONFIG_ENV_VAR = "SIGCLUSTER_CONFIG"
CLUSTER_CONFIG_FILENAME = "sigcluster.json"


@dataclass(frozen=True)
class LoadedClusterConfig:
    config: ClusterConfig
    config_path: str | None
    warnings: list[str]


def resolve_cluster_config_path(
    config_arg: str | None,
    environ: Mapping[str, str] | None = None,
    cwd: str | Path | None = None,
) -> str | None:
    explicit_arg = trim_to_none(config_arg)
    if explicit_arg is not None:
        return explicit_arg

    env = os.environ if environ is None else environ
    env_path = trim_to_none(env.get(CLUSTER_CONFIG_ENV_VAR))
    if env_path is not None:
        return env_path

    base_dir = Path.cwd() if cwd is None else Path(cwd)
    candidate = base_dir / CLUSTER_CONFIG_FILENAME
    if candidate.is_file():
        return str(candidate)

    return None


def load_resolved_cluster_config(
    config_arg: str | None,
    environ: Mapping[str, str] | None = None,
    cwd: str | Path | None = None,
) -> LoadedClusterConfig:
    config_path = resolve_cluster_config_path(
        config_arg=config_arg,
        environ=environ,
        cwd=cwd,
    )

    warnings: list[str] = []
    config = load_cluster_config(config_path=config_path or "", warn=warnings.append)
    return LoadedClusterConfig(config=config, config_path=config_path, warnings=warnings)
