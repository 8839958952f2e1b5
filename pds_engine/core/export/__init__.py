# ==============================================================================
# File: pds_engine/core/export/__init__.py
# Purpose: entry point of the export package.
# ==============================================================================
from __future__ import annotations

from .image_exporters import write_points_preview
from .json_exporters import read_points_json, write_points_json
from .numpy_exporters import read_points_npz, write_points_npz

__all__ = [
    "write_points_preview",
    "write_points_json",
    "read_points_json",
    "write_points_npz",
    "read_points_npz",
]
