"""Tests for sigcluster.config.cluster."""

from __future__ import annotations

import json
from pathlib import Path

from sigcluster.config.cluster import ClusterConfig, load_cluster_config


def _write_config(path: Path, payload: object) -> str:
    p = path / "sigcluster.json"
    _ = p.write_text(json.dumps(payload), encoding="utf-8")
    return str(p)


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    warnings: list[str] = []
    cfg = load_cluster_config(str(tmp_path / "missing.json"), warn=warnings.append)
    assert cfg == ClusterConfig()
    assert warnings == []


def test_empty_path_returns_defaults() -> None:
    assert load_cluster_config("") == ClusterConfig()


def test_top_level_keys_are_read(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        {"threshold": 10, "bands": 4, "band_bits": 16, "format": "text", "field": " pattern "},
    )
    cfg = load_cluster_config(path)
    assert cfg.threshold == 10
    assert cfg.bands == 4
    assert cfg.band_bits == 16
    assert cfg.format == "text"
    assert cfg.field == "pattern"
    assert cfg.min_cluster == 2


def test_cluster_section_takes_priority(tmp_path: Path) -> None:
    path = _write_config(tmp_path, {"threshold": 1, "cluster": {"threshold": 9, "samples": 0}})
    cfg = load_cluster_config(path)
    assert cfg.threshold == 9
    assert cfg.samples == 0


def test_out_of_range_ints_are_left_for_the_engine(tmp_path: Path) -> None:
    path = _write_config(tmp_path, {"bands": 3, "min_cluster": -1})
    cfg = load_cluster_config(path)
    assert cfg.bands == 3
    assert cfg.min_cluster == -1


def test_bad_values_warn_and_fall_back(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        {"threshold": "high", "samples": True, "time_field": "", "format": "xml"},
    )
    warnings: list[str] = []
    cfg = load_cluster_config(path, warn=warnings.append)

    assert cfg == ClusterConfig()
    assert len(warnings) == 4
    assert warnings[-1] == "Invalid format 'xml'. Falling back to 'jsonl'."


def test_malformed_json_warns(tmp_path: Path) -> None:
    p = tmp_path / "bad.json"
    _ = p.write_text("{not valid json", encoding="utf-8")
    warnings: list[str] = []
    cfg = load_cluster_config(str(p), warn=warnings.append)
    assert cfg == ClusterConfig()
    assert len(warnings) == 1
    assert "Falling back to defaults" in warnings[0]


def test_non_object_json_warns(tmp_path: Path) -> None:
    path = _write_config(tmp_path, [1, 2, 3])
    warnings: list[str] = []
    cfg = load_cluster_config(path, warn=warnings.append)
    assert cfg == ClusterConfig()
    assert warnings == [f"'{path}' must contain a JSON object. Falling back to defaults."]
