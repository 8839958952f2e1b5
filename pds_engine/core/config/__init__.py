# ========================
# file: pds_engine/core/config/__init__.py
# ========================
from .defaults import DEFAULT_CONFIG
from .errors import InvalidConfiguration, NotFoundError, SamplerError, SamplingTimeout
from .loader import deep_merge, load_config
from .model import SamplerConfig
from .registry import add_search_folder, list_presets, resolve_preset_path

__all__ = [
    "DEFAULT_CONFIG",
    "InvalidConfiguration",
    "NotFoundError",
    "SamplerError",
    "SamplingTimeout",
    "deep_merge",
    "load_config",
    "SamplerConfig",
    "add_search_folder",
    "list_presets",
    "resolve_preset_path",
]
