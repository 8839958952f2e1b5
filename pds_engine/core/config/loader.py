# ========================
# file: pds_engine/core/config/loader.py
# ========================
from __future__ import annotations
import os
import json
import copy
import logging
from typing import Any, Dict, Union, Mapping

from .defaults import DEFAULT_CONFIG
from .errors import InvalidConfiguration
from .model import SamplerConfig
from .registry import resolve_preset_path
from .validators import validate_dict
from ..constants import CURRENT_CONFIG_VERSION

logger = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidConfiguration(f"{path}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"{path}: top-level JSON value must be an object")
    return data


def load_config(
    source: Union[str, Dict[str, Any], None] = None,
    overrides: Mapping[str, Any] | None = None,
) -> SamplerConfig:
    """Load a config from id/path/dict, merge with defaults and apply overrides.

    Args:
        source: preset id (e.g., 'scatter/trees'), or file path to JSON, or raw dict.
            None means the built-in defaults.
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        SamplerConfig (immutable dataclass) ready for use
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, str):
        if os.path.isfile(source):
            data = _load_json_file(source)
        else:
            # treat as id
            path = resolve_preset_path(source)
            data = _load_json_file(path)
            data.setdefault("id", source)
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be str path/id, dict or None")

    merged = deep_merge(DEFAULT_CONFIG, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    version = merged.get("version", CURRENT_CONFIG_VERSION)
    if version != CURRENT_CONFIG_VERSION:
        raise InvalidConfiguration(
            f"config.version {version!r} is not supported (expected {CURRENT_CONFIG_VERSION})"
        )

    validate_dict(merged)

    cfg = SamplerConfig(
        id=merged["id"],
        version=CURRENT_CONFIG_VERSION,
        min_radius=float(merged["min_radius"]),
        max_radius=None if merged.get("max_radius") is None else float(merged["max_radius"]),
        region_width=float(merged["region_width"]),
        region_height=float(merged["region_height"]),
        max_attempts=int(merged["max_attempts"]),
        seed=int(merged["seed"]),
        time_budget_s=None if merged.get("time_budget_s") is None else float(merged["time_budget_s"]),
        export=dict(merged.get("export", {})),
    )
    logger.debug("Loaded sampler config '%s': %s", cfg.id, cfg.to_dict())
    return cfg
