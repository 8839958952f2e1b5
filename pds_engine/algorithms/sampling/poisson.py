# ==============================================================================
# File: pds_engine/algorithms/sampling/poisson.py
# Purpose: 2D Poisson-disc sampling (Bridson) over a rectangular region.
# ==============================================================================
from __future__ import annotations
import logging
import math
import numbers
import random
import time
from typing import List, Optional, Union

from ...core.config.errors import InvalidConfiguration, SamplingTimeout
from ...core.config.validators import validate_sampling_args, validate_time_budget
from ...core.constants import DEFAULT_MAX_ATTEMPTS, TWO_PI
from ...core.types import Point, RandomSource
from .grid import BackgroundGrid

logger = logging.getLogger(__name__)

RngLike = Union[RandomSource, int]


def as_random_source(rng: RngLike) -> RandomSource:
    """Returns ``rng`` itself, or a ``random.Random`` seeded with it when it is an int."""
    if isinstance(rng, numbers.Integral) and not isinstance(rng, bool):
        return random.Random(int(rng))
    if callable(getattr(rng, "random", None)):
        return rng
    raise InvalidConfiguration(
        f"rng must be an int seed or provide random() -> float in [0, 1), got {type(rng).__name__}"
    )


def _is_valid(
    candidate: Point,
    grid: BackgroundGrid,
    radius: float,
    points: List[Point],
) -> bool:
    if not grid.contains(candidate.x, candidate.y):
        return False
    r2 = radius * radius
    for idx in grid.neighbours(candidate.x, candidate.y):
        other = points[idx]
        dx = candidate.x - other.x
        dy = candidate.y - other.y
        if dx * dx + dy * dy < r2:
            return False
    return True


def sample(
    min_radius: float,
    max_radius: Optional[float],
    region_width: float,
    region_height: float,
    max_attempts: int,
    rng: RngLike,
    *,
    time_budget_s: Optional[float] = None,
) -> List[Point]:
    """
    Fills [0, region_width) x [0, region_height) with Poisson-disc points.

    The first point is always the region centre. Each active point gets up to
    ``max_attempts`` candidates at a distance of [r, 2r] along a random
    direction; a candidate is kept when no accepted point in the surrounding
    5x5 cell window is closer than r. An active point that produces nothing
    is retired.

    Fixed mode (``max_radius`` is None or equal to ``min_radius``): r is
    always ``min_radius``. Range mode: r is drawn uniformly from
    [min_radius, max_radius] per attempt and is only checked against the
    candidate, not against the radius its neighbours were placed with. The
    grid is sized from ``min_radius``, so the only spacing guaranteed between
    any two points is ``min_radius``.

    Per attempt the random source is read in a fixed order: angle, radius
    (range mode only), distance.

    Raises:
        InvalidConfiguration: before any work, if an input is out of range.
        SamplingTimeout: if ``time_budget_s`` expires; carries the points
            accepted so far.
    """
    validate_sampling_args(min_radius, max_radius, region_width, region_height, max_attempts)
    validate_time_budget(time_budget_s)
    rand = as_random_source(rng).random

    # numpy scalars in, plain Python numbers out
    min_radius = float(min_radius)
    region_width = float(region_width)
    region_height = float(region_height)
    max_attempts = int(max_attempts)
    max_radius = min_radius if max_radius is None else float(max_radius)
    fixed = max_radius == min_radius
    spread = max_radius - min_radius

    grid = BackgroundGrid(region_width, region_height, min_radius)

    seed_point = Point(region_width / 2.0, region_height / 2.0)
    points: List[Point] = [seed_point]
    active: List[Point] = [seed_point]
    grid.put(seed_point.x, seed_point.y, 0)

    started = time.perf_counter()
    deadline = None if time_budget_s is None else started + time_budget_s

    while active:
        if deadline is not None and time.perf_counter() >= deadline:
            raise SamplingTimeout(
                f"sampling exceeded {time_budget_s:.3f}s with {len(points)} points", points
            )

        spawn_index = min(int(rand() * len(active)), len(active) - 1)
        center = active[spawn_index]

        accepted = False
        for _ in range(max_attempts):
            angle = rand() * TWO_PI
            radius = min_radius if fixed else min_radius + rand() * spread
            distance = radius + rand() * radius
            candidate = Point(
                center.x + math.sin(angle) * distance,
                center.y + math.cos(angle) * distance,
            )
            if _is_valid(candidate, grid, radius, points):
                points.append(candidate)
                active.append(candidate)
                grid.put(candidate.x, candidate.y, len(points) - 1)
                accepted = True
                break

        if not accepted:
            active.pop(spawn_index)

    logger.debug(
        "Poisson-disc: %d points in %.1fx%.1f (r=%.3f..%.3f, k=%d) in %.4fs",
        len(points), region_width, region_height, min_radius, max_radius,
        max_attempts, time.perf_counter() - started,
    )
    return points


def sample_fixed(
    radius: float,
    region_width: float,
    region_height: float,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: RngLike = 0,
    **kwargs,
) -> List[Point]:
    """Fixed-radius sampling: every pair of points is at least ``radius`` apart."""
    return sample(radius, radius, region_width, region_height, max_attempts, rng, **kwargs)


def sample_range(
    min_radius: float,
    max_radius: float,
    region_width: float,
    region_height: float,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: RngLike = 0,
    **kwargs,
) -> List[Point]:
    """Variable-radius sampling, see ``sample`` for the spacing guarantee."""
    return sample(min_radius, max_radius, region_width, region_height, max_attempts, rng, **kwargs)
