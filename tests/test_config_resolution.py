# pyright: reportMissingImports=false, reportUnknownVariableType=false, reportUnknownMemberType=false

import json
from pathlib import Path

from sigcluster.config.resolution import (
    CLUSTER_CONFIG_ENV_VAR,
    load_resolved_cluster_config,
    resolve_cluster_config_path,
)


def _write_config(path: Path, payload: dict[str, object]) -> None:
    _ = path.write_text(json.dumps(payload), encoding="utf-8")


def test_resolve_cluster_config_path_prefers_explicit_arg() -> None:
    resolved = resolve_cluster_config_path(
        config_arg="/tmp/explicit.json",
        environ={CLUSTER_CONFIG_ENV_VAR: "/tmp/from-env.json"},
        cwd="/tmp",
    )

    assert resolved == "/tmp/explicit.json"


def test_resolve_cluster_config_path_ignores_blank_arg() -> None:
    resolved = resolve_cluster_config_path(
        config_arg="   ",
        environ={CLUSTER_CONFIG_ENV_VAR: "/tmp/from-env.json"},
        cwd="/tmp",
    )

    assert resolved == "/tmp/from-env.json"


def test_resolve_cluster_config_path_uses_env_before_cwd_config(
    tmp_path: Path,
) -> None:
    _write_config(tmp_path / "sigcluster.json", {"threshold": 3})

    resolved = resolve_cluster_config_path(
        config_arg=None,
        environ={CLUSTER_CONFIG_ENV_VAR: "/tmp/from-env.json"},
        cwd=tmp_path,
    )

    assert resolved == "/tmp/from-env.json"


def test_resolve_cluster_config_path_uses_cwd_config_when_present(
    tmp_path: Path,
) -> None:
    config_path = tmp_path / "sigcluster.json"
    _write_config(config_path, {"threshold": 3})

    resolved = resolve_cluster_config_path(
        config_arg=None,
        environ={},
        cwd=tmp_path,
    )

    assert resolved == str(config_path)


def test_resolve_cluster_config_path_returns_none_when_no_source(
    tmp_path: Path,
) -> None:
    resolved = resolve_cluster_config_path(
        config_arg=None,
        environ={},
        cwd=tmp_path,
    )

    assert resolved is None


def test_load_resolved_cluster_config_collects_warnings(tmp_path: Path) -> None:
    _write_config(tmp_path / "sigcluster.json", {"format": "yaml", "threshold": 12})

    loaded = load_resolved_cluster_config(
        config_arg=None,
        environ={},
        cwd=tmp_path,
    )

    assert loaded.config_path == str(tmp_path / "sigcluster.json")
    assert loaded.config.format == "jsonl"
    assert loaded.config.threshold == 12
    assert loaded.warnings == ["Invalid format 'yaml'. Falling back to 'jsonl'."]


def test_load_resolved_cluster_config_without_file(tmp_path: Path) -> None:
    loaded = load_resolved_cluster_config(config_arg=None, environ={}, cwd=tmp_path)

    assert loaded.config_path is None
    assert loaded.warnings == []
