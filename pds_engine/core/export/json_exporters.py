# ==============================================================================
# File: pds_engine/core/export/json_exporters.py
# Purpose: write / read sampled point sets as JSON.
# ==============================================================================
from __future__ import annotations
import dataclasses
import json
import logging
import math
import os
from pathlib import Path
from typing import Any, Dict, List, Tuple

import numpy as np

from ..constants import POINTS_FORMAT_VERSION
from ..types import Point, SampleResult

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def _finite_or_none(v: Any) -> Any:
    if isinstance(v, float) and not math.isfinite(v):
        return None
    return v


def _atomic_write_json(path: str, data: Any) -> None:
    """Writes to a temp file first so readers never see a half-written file."""
    _ensure_path_exists(path)
    tmp_path = path + ".tmp"

    def default_serializer(o):
        if dataclasses.is_dataclass(o):
            return dataclasses.asdict(o)
        if isinstance(o, np.integer): return int(o)
        if isinstance(o, np.floating): return _finite_or_none(float(o))
        raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")

    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2, default=default_serializer, allow_nan=False)
    os.replace(tmp_path, path)
    logger.info("JSON file saved: %s", path)


def write_points_json(path: str, result: SampleResult) -> None:
    """Writes the header, metrics and points of a run."""
    data = {
        "version": POINTS_FORMAT_VERSION,
        "header": result.header(),
        "metrics": {k: _finite_or_none(v) for k, v in result.metrics.items()},
        "timed_out": result.timed_out,
        "points": [[p.x, p.y] for p in result.points],
    }
    _atomic_write_json(path, data)


def read_points_json(path: str) -> Tuple[Dict[str, Any], List[Point]]:
    """Returns (header, points) from a file written by write_points_json."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    version = data.get("version")
    if version != POINTS_FORMAT_VERSION:
        raise ValueError(f"{path}: unsupported points format {version!r}")
    points = [Point(float(x), float(y)) for x, y in data.get("points", [])]
    return dict(data.get("header", {})), points
