# ==============================================================================
# File: pds_engine/core/export/numpy_exporters.py
# Purpose: raw point arrays in NPZ form.
# ==============================================================================
from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Tuple

import numpy as np

from ..types import SampleResult
from ..utils.metrics import points_to_array

logger = logging.getLogger(__name__)


def write_points_npz(path: str, result: SampleResult) -> None:
    """Saves points as an (N, 2) float64 array plus the run header as JSON text."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    # np.savez appends .npz to names without it, so the temp name keeps the suffix
    tmp_path = path + ".tmp.npz"
    np.savez_compressed(
        tmp_path,
        points=points_to_array(result.points),
        meta=np.array(json.dumps(result.header())),
    )
    os.replace(tmp_path, path)
    logger.info("NPZ file saved: %s", path)


def read_points_npz(path: str) -> Tuple[Dict[str, Any], np.ndarray]:
    with np.load(path) as data:
        meta = json.loads(data["meta"].item())
        points = data["points"].copy()
    return meta, points
