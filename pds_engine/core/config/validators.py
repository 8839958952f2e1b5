# ========================
# file: pds_engine/core/config/validators.py
# ========================
from __future__ import annotations
import math
import numbers
from typing import Any, Dict, Optional

from .errors import InvalidConfiguration


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise InvalidConfiguration(msg)


def _is_number(v: Any) -> bool:
    # numbers.Real covers numpy scalars as well
    return isinstance(v, numbers.Real) and not isinstance(v, bool) and math.isfinite(v)


def _is_integer(v: Any) -> bool:
    return isinstance(v, numbers.Integral) and not isinstance(v, bool)


def validate_time_budget(time_budget_s: Optional[float]) -> None:
    if time_budget_s is not None:
        _require(
            _is_number(time_budget_s) and time_budget_s >= 0.0,
            f"time_budget_s must be a number >= 0 or None, got {time_budget_s!r}",
        )


def validate_sampling_args(
    min_radius: float,
    max_radius: Optional[float],
    region_width: float,
    region_height: float,
    max_attempts: int,
) -> None:
    """Checks the raw inputs of one sampling call.

    Raises InvalidConfiguration on the first failing check.
    """
    _require(_is_number(min_radius), f"min_radius must be a finite number, got {min_radius!r}")
    _require(min_radius > 0.0, f"min_radius must be > 0, got {min_radius}")
    if max_radius is not None:
        _require(_is_number(max_radius), f"max_radius must be a finite number, got {max_radius!r}")
        _require(
            max_radius >= min_radius,
            f"max_radius must be >= min_radius ({max_radius} < {min_radius})",
        )
    for name, value in (("region_width", region_width), ("region_height", region_height)):
        _require(_is_number(value), f"{name} must be a finite number, got {value!r}")
        _require(value > 0.0, f"{name} must be > 0, got {value}")
    _require(
        _is_integer(max_attempts),
        f"max_attempts must be an integer, got {max_attempts!r}",
    )
    _require(max_attempts >= 1, f"max_attempts must be >= 1, got {max_attempts}")


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Validation for merged sampler config dicts.

    Raises InvalidConfiguration on the first failing check.
    """
    _require(
        isinstance(cfg.get("id"), str) and cfg["id"],
        "config.id must be non-empty string",
    )

    validate_sampling_args(
        cfg.get("min_radius"),
        cfg.get("max_radius"),
        cfg.get("region_width"),
        cfg.get("region_height"),
        cfg.get("max_attempts"),
    )

    seed = cfg.get("seed")
    _require(
        _is_integer(seed),
        f"config.seed must be an integer, got {seed!r}",
    )

    validate_time_budget(cfg.get("time_budget_s"))

    # Export
    exp = cfg.get("export", {})
    _require(isinstance(exp, dict), "config.export must be an object")
    for key in ("json", "npz", "preview"):
        _require(isinstance(exp.get(key, False), bool), f"export.{key} must be a boolean")
    scale = exp.get("preview_scale", 1.0)
    _require(_is_number(scale) and scale > 0.0, "export.preview_scale must be > 0")

    pal = dict(exp.get("palette", {}))
    for k in ("background", "point", "seed"):
        _require(k in pal, f"export.palette must contain color for '{k}'")
        col = str(pal[k])
        _require(
            col.startswith("#") and len(col) in (7, 9),
            f"export.palette['{k}'] must be hex like '#RRGGBB' or '#AARRGGBB'",
        )
