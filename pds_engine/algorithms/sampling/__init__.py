# ==============================================================================
# File: pds_engine/algorithms/sampling/__init__.py
# ==============================================================================
from .grid import BackgroundGrid
from .poisson import as_random_source, sample, sample_fixed, sample_range

__all__ = [
    "BackgroundGrid",
    "as_random_source",
    "sample",
    "sample_fixed",
    "sample_range",
]
