# pds_engine/core/utils/metrics.py
from __future__ import annotations
import math
from typing import Dict, Sequence

import numpy as np
from numba import njit

from ..types import Point


@njit(cache=True)
def _nearest_neighbour_distances(xy: np.ndarray) -> np.ndarray:
    """Distance from each point to its closest other point (brute force, O(N^2))."""
    n = xy.shape[0]
    out = np.full(n, np.inf)
    for i in range(n):
        best = np.inf
        xi = xy[i, 0]
        yi = xy[i, 1]
        for j in range(n):
            if i == j:
                continue
            dx = xi - xy[j, 0]
            dy = yi - xy[j, 1]
            d2 = dx * dx + dy * dy
            if d2 < best:
                best = d2
        out[i] = math.sqrt(best)
    return out


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """(N, 2) float64 array, row order = acceptance order."""
    if len(points) == 0:
        return np.zeros((0, 2), dtype=np.float64)
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


def compute_metrics(
    points: Sequence[Point],
    region_width: float,
    region_height: float,
    min_radius: float,
) -> Dict[str, float]:
    """
    Statistics of a point set over its region.
    min_distance / mean_nn_distance: nearest-neighbour spacing (inf for < 2 points)
    density: points per unit area
    packing_ratio: count relative to the area * pi / (4 r^2) estimate
    """
    area = float(region_width) * float(region_height)
    count = len(points)
    expected = area * math.pi / (4.0 * min_radius * min_radius)

    if count >= 2:
        nn = _nearest_neighbour_distances(points_to_array(points))
        min_distance = float(nn.min())
        mean_nn = float(nn.mean())
    else:
        min_distance = math.inf
        mean_nn = math.inf

    return {
        "count": count,
        "area": area,
        "density": count / area if area > 0 else 0.0,
        "min_distance": min_distance,
        "mean_nn_distance": mean_nn,
        "packing_ratio": count / expected if expected > 0 else 0.0,
    }
