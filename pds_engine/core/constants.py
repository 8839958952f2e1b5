# ==============================================================================
# File: pds_engine/core/constants.py
# Purpose: shared constants of the sampler.
# ==============================================================================
import math

SQRT2 = math.sqrt(2.0)
TWO_PI = 2.0 * math.pi

# Retry budget per active point
DEFAULT_MAX_ATTEMPTS = 20

# cell = r / sqrt(2), so anything closer than 2r lies within 2 cells
NEIGHBOUR_WINDOW = 2

CURRENT_CONFIG_VERSION = 1

POINTS_FORMAT_VERSION = "pds_points_v1"
