"""
settings.py
===========

Does: Load `data/settings.json` through load_config into a frozen Settings snapshot,
      clamping numeric minimums and falling back on invalid enum values.
Returns: Settings dataclass; `get_settings()` memoizes the default snapshot.
Used By: Orchestrator (max colors, timeout), safety checks, CLI demo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from color_literal_extractor.extraction.general.utils.load_config import load_config
from color_literal_extractor.extraction.postprocess.sort import SORT_MODES

__all__ = ["Settings", "SORT_MODES", "validate_settings", "load_settings", "get_settings"]

log = logging.getLogger(__name__)

# name -> minimum accepted value
_MINIMUMS: Dict[str, int] = {
    "safety_file_size_warn_bytes": 1000,
    "safety_large_output_lines_threshold": 100,
    "timeout_ms": 1,
    "max_clusters": 1,
}


@dataclass(frozen=True)
class Settings:
    dedupe_enabled: bool = True
    sort_enabled: bool = True
    sort_mode: str = "off"
    safety_enabled: bool = True
    safety_file_size_warn_bytes: int = 1_000_000
    safety_large_output_lines_threshold: int = 50_000
    max_colors: Optional[int] = None
    timeout_ms: int = 5000
    analysis_enabled: bool = True
    analysis_include_stats: bool = True
    max_clusters: int = 5


def validate_settings(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Does: Keep known keys, coerce types, clamp minimums, and reset bad sort modes."""
    defaults = Settings()
    out: Dict[str, Any] = {}
    for f in fields(Settings):
        default = getattr(defaults, f.name)
        if f.name not in raw:
            continue
        value = raw[f.name]
        if isinstance(default, bool):
            if not isinstance(value, bool):
                raise TypeError(f"{f.name} must be a boolean, got {value!r}")
        elif f.name == "max_colors":
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise TypeError(f"max_colors must be an integer or null, got {value!r}")
            if value is not None and value < 1:
                value = None
        elif isinstance(default, int):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{f.name} must be a number, got {value!r}")
            value = max(int(value), _MINIMUMS.get(f.name, 0))
        elif f.name == "sort_mode" and value not in SORT_MODES:
            log.warning("Unknown sort_mode %r; using 'off'", value)
            value = "off"
        out[f.name] = value

    unknown = sorted(set(raw) - {f.name for f in fields(Settings)})
    if unknown:
        log.debug("Ignoring unknown settings keys: %s", ", ".join(unknown))
    return out


def load_settings(base_dir: Optional[Path] = None) -> Settings:
    """Does: Read settings.json (validated) into a fresh Settings snapshot."""
    data = load_config(
        "settings", mode="validated_dict", base_dir=base_dir, validator=validate_settings
    )
    return Settings(**data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Does: Return the memoized default Settings (call `get_settings.cache_clear()` to reload)."""
    return load_settings()
