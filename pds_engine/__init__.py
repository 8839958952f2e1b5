from .algorithms.sampling import sample, sample_fixed, sample_range
from .core.config import (
    InvalidConfiguration,
    NotFoundError,
    SamplerConfig,
    SamplerError,
    SamplingTimeout,
    load_config,
)
from .core.types import Point, RandomSource, SampleResult
from .runner import export_result, run_sampling

__all__ = [
    "sample",
    "sample_fixed",
    "sample_range",
    "InvalidConfiguration",
    "NotFoundError",
    "SamplerConfig",
    "SamplerError",
    "SamplingTimeout",
    "load_config",
    "Point",
    "RandomSource",
    "SampleResult",
    "export_result",
    "run_sampling",
]
