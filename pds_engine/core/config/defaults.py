# ========================
# file: pds_engine/core/config/defaults.py
# ========================
from ..constants import CURRENT_CONFIG_VERSION, DEFAULT_MAX_ATTEMPTS

# Same values as the editor gizmo inspector defaults
DEFAULT_CONFIG = {
    "id": "default",
    "version": CURRENT_CONFIG_VERSION,
    "min_radius": 1.0,
    "max_radius": None,
    "region_width": 1.0,
    "region_height": 1.0,
    "max_attempts": DEFAULT_MAX_ATTEMPTS,
    "seed": 0,
    "time_budget_s": None,
    "export": {
        "json": True,
        "npz": False,
        "preview": True,
        # pixels per region unit
        "preview_scale": 32.0,
        "palette": {
            "background": "#1E1E1E",
            "point": "#5FAF3A",
            "seed": "#D8C27A",
        },
    },
}
