from __future__ import annotations

from dataclasses import dataclass
import json
import os
from typing import Any, Callable

OUTPUT_FORMATS = ("jsonl", "json", "text", "sample")

_INT_KEYS = ("threshold", "bands", "band_bits", "min_cluster", "samples")
_STR_KEYS = ("field", "time_field")


@dataclass(frozen=True)
class ClusterConfig:
    threshold: int = 4
    bands: int = 8
    band_bits: int = 8
    min_cluster: int = 2
    samples: int = 2
    field: str = "sig"
    time_field: str = "ts"
    format: str = "jsonl"


def load_cluster_config(
    config_path: str = "sigcluster.json",
    warn: Callable[[str], None] | None = None,
) -> ClusterConfig:
    """Read cluster defaults from a JSON object.

    Keys may sit at the top level or under a ``"cluster"`` section. Bad
    values are reported through *warn* and replaced by the built-in default;
    ranges are left to the clustering engine.
    """
    raw_config = _load_json_config(config_path, warn)
    section = raw_config.get("cluster")
    data = section if isinstance(section, dict) else raw_config
    defaults = ClusterConfig()

    values: dict[str, Any] = {}
    for key in _INT_KEYS:
        if key not in data:
            continue
        value = data[key]
        if isinstance(value, int) and not isinstance(value, bool):
            values[key] = value
        else:
            _warn(
                warn,
                f"Invalid {key} {value!r} in '{config_path}'. Using default {getattr(defaults, key)}.",
            )

    for key in _STR_KEYS:
        if key not in data:
            continue
        value = data[key]
        if isinstance(value, str) and value.strip():
            values[key] = value.strip()
        else:
            _warn(
                warn,
                f"Invalid {key} {value!r} in '{config_path}'. Using default '{getattr(defaults, key)}'.",
            )

    if "format" in data:
        fmt = data["format"]
        if fmt in OUTPUT_FORMATS:
            values["format"] = fmt
        else:
            _warn(warn, f"Invalid format {fmt!r}. Falling back to '{defaults.format}'.")

    return ClusterConfig(**values)


def _load_json_config(
    config_path: str,
    warn: Callable[[str], None] | None,
) -> dict[str, Any]:
    if not config_path or not os.path.exists(config_path):
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as file:
            loaded = json.load(file)
    except (OSError, json.JSONDecodeError) as exc:
        _warn(warn, f"Failed to read '{config_path}': {exc}. Falling back to defaults.")
        return {}

    if not isinstance(loaded, dict):
        _warn(
            warn,
            f"'{config_path}' must contain a JSON object. Falling back to defaults.",
        )
        return {}
    return loaded


def _warn(warn: Callable[[str], None] | None, message: str) -> None:
    if warn is not None:
        warn(message)
