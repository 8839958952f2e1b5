# ==============================================================================
# File: pds_engine/runner.py
# Purpose: config -> SampleResult, plus writing the enabled export files.
# ==============================================================================
from __future__ import annotations
import logging
import random
import time
from pathlib import Path
from typing import Dict, Optional

from .algorithms.sampling import sample
from .core.config import SamplerConfig, SamplingTimeout
from .core.export import write_points_json, write_points_npz, write_points_preview
from .core.types import RandomSource, SampleResult
from .core.utils.metrics import compute_metrics

logger = logging.getLogger(__name__)


def run_sampling(config: SamplerConfig, rng: Optional[RandomSource] = None) -> SampleResult:
    """
    Runs the sampler for one config.

    Without an explicit ``rng`` a ``random.Random(config.seed)`` is used, so
    the same config always gives the same points. A run that hits its time
    budget keeps the points accepted so far and is flagged ``timed_out``.
    """
    source = rng if rng is not None else random.Random(config.seed)

    result = SampleResult(
        config_id=config.id,
        seed=config.seed,
        min_radius=config.min_radius,
        max_radius=config.effective_max_radius,
        region_width=config.region_width,
        region_height=config.region_height,
        max_attempts=config.max_attempts,
    )

    t0 = time.perf_counter()
    try:
        result.points = sample(
            config.min_radius,
            config.max_radius,
            config.region_width,
            config.region_height,
            config.max_attempts,
            source,
            time_budget_s=config.time_budget_s,
        )
    except SamplingTimeout as e:
        logger.warning("Config '%s': %s, keeping partial result", config.id, e)
        result.points = e.points
        result.timed_out = True
    result.elapsed_s = time.perf_counter() - t0

    result.metrics = compute_metrics(
        result.points, config.region_width, config.region_height, config.min_radius
    )
    logger.info(
        "Config '%s' (seed %d): %d points in %.3fs, min spacing %.4f",
        config.id, config.seed, len(result.points), result.elapsed_s,
        result.metrics["min_distance"],
    )
    return result


def export_result(result: SampleResult, config: SamplerConfig, out_dir: str) -> Dict[str, str]:
    """Writes the files enabled in ``config.export`` into ``out_dir``."""
    exp = config.export
    out = Path(out_dir)
    paths: Dict[str, str] = {}

    if exp.get("json", True):
        paths["json"] = str(out / "points.json")
        write_points_json(paths["json"], result)
    if exp.get("npz", False):
        paths["npz"] = str(out / "points.npz")
        write_points_npz(paths["npz"], result)
    if exp.get("preview", False):
        paths["preview"] = str(out / "preview.png")
        write_points_preview(
            paths["preview"],
            result,
            palette=exp.get("palette"),
            scale=float(exp.get("preview_scale", 32.0)),
        )

    result.export_paths.update(paths)
    return paths
