# pds_engine/core/types.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Protocol


class Point(NamedTuple):
    x: float
    y: float


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1) from ``random()``.

    ``random.Random`` and ``numpy.random.Generator`` both qualify.
    """

    def random(self) -> float: ...


@dataclass
class SampleResult:
    """Output of one sampling run together with the inputs that produced it."""

    config_id: str
    seed: int
    min_radius: float
    max_radius: float
    region_width: float
    region_height: float
    max_attempts: int

    points: List[Point] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)
    elapsed_s: float = 0.0
    timed_out: bool = False
    export_paths: Dict[str, str] = field(default_factory=dict)

    def header(self) -> Dict[str, Any]:
        return {
            "config_id": self.config_id,
            "seed": self.seed,
            "min_radius": self.min_radius,
            "max_radius": self.max_radius,
            "region_width": self.region_width,
            "region_height": self.region_height,
            "max_attempts": self.max_attempts,
        }
