# ========================
# file: pds_engine/core/config/registry.py
# ========================
from __future__ import annotations
from typing import List
import os
from .errors import NotFoundError


# __file__ -> .../core/config/registry.py, presets live in pds_engine/data/presets/
_DEFAULT_PRESET_FOLDERS: List[str] = [
    os.path.join(
        os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
        "data", "presets"
    ),
]


def resolve_preset_path(preset_id: str) -> str:
    """Map an id like 'scatter/trees' to a JSON file path in presets/ tree."""
    rel = preset_id.replace("\\", "/").strip("/") + ".json"
    for root in _DEFAULT_PRESET_FOLDERS:
        candidate = os.path.join(root, rel)
        if os.path.isfile(candidate):
            return candidate
    raise NotFoundError(f"Preset id '{preset_id}' not found in presets/ folders: {', '.join(_DEFAULT_PRESET_FOLDERS)}")


def add_search_folder(path: str) -> None:
    path = os.path.abspath(path)
    if path not in _DEFAULT_PRESET_FOLDERS:
        _DEFAULT_PRESET_FOLDERS.append(path)


def list_presets() -> List[str]:
    """All preset ids reachable from the search folders, sorted."""
    found = set()
    for root in _DEFAULT_PRESET_FOLDERS:
        if not os.path.isdir(root):
            continue
        for dirpath, _dirs, files in os.walk(root):
            for name in files:
                if name.endswith(".json"):
                    rel = os.path.relpath(os.path.join(dirpath, name), root)
                    found.add(rel[: -len(".json")].replace(os.sep, "/"))
    return sorted(found)
