from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SamplerConfig:
    id: str
    version: int
    min_radius: float
    max_radius: Optional[float]
    region_width: float
    region_height: float
    max_attempts: int
    seed: int
    time_budget_s: Optional[float]
    export: Dict[str, Any]

    @property
    def is_range_mode(self) -> bool:
        return self.max_radius is not None and self.max_radius > self.min_radius

    @property
    def effective_max_radius(self) -> float:
        return self.min_radius if self.max_radius is None else self.max_radius

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "version": self.version,
            "min_radius": self.min_radius,
            "max_radius": self.max_radius,
            "region_width": self.region_width,
            "region_height": self.region_height,
            "max_attempts": self.max_attempts,
            "seed": self.seed,
            "time_budget_s": self.time_budget_s,
            "export": dict(self.export),
        }
