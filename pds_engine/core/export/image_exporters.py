# ==============================================================================
# File: pds_engine/core/export/image_exporters.py
# Purpose: PNG preview of a sampled point set.
# ==============================================================================
from __future__ import annotations
import logging
import math
import os
from pathlib import Path
from typing import Dict, Tuple

from PIL import Image, ImageDraw

from ..config.defaults import DEFAULT_CONFIG
from ..types import SampleResult

logger = logging.getLogger(__name__)


def _hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    hex_color = hex_color.lstrip("#")
    if len(hex_color) == 8: hex_color = hex_color[2:]  # drop alpha
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def write_points_preview(
        path: str,
        result: SampleResult,
        palette: Dict[str, str] | None = None,
        scale: float = 32.0,
):
    """Draws each point as a disc of radius min_radius / 2 and saves a PNG.

    Discs of neighbouring points never overlap; the first point (the seed)
    gets its own colour. Y grows upwards like the region coordinates.
    """
    colors = dict(DEFAULT_CONFIG["export"]["palette"])
    colors.update(palette or {})

    w = max(1, int(math.ceil(result.region_width * scale)))
    h = max(1, int(math.ceil(result.region_height * scale)))
    img = Image.new("RGB", (w, h), _hex_to_rgb(colors["background"]))
    draw = ImageDraw.Draw(img)

    disc = max(0.5, result.min_radius * 0.5 * scale)
    point_rgb = _hex_to_rgb(colors["point"])
    seed_rgb = _hex_to_rgb(colors["seed"])
    for i, p in enumerate(result.points):
        px = p.x * scale
        py = p.y * scale
        draw.ellipse(
            (px - disc, py - disc, px + disc, py + disc),
            fill=seed_rgb if i == 0 else point_rgb,
        )

    img = img.transpose(Image.Transpose.FLIP_TOP_BOTTOM)

    Path(path).parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path + ".tmp"
    img.save(tmp_path, format="PNG")
    os.replace(tmp_path, path)
    logger.info("Preview image saved: %s (%dx%d)", path, w, h)
