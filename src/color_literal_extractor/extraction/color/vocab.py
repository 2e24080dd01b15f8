"""
vocab
=====

Does: Define the named-color vocabularies used for parsing and context checks:
      the basic CSS keyword table (parsing) and the full CSS3 set (Stylus, hints).
Used By: Converter (parse_color), Stylus/SVG extractors, validation suggestions.
Returns: Pure frozen mappings and getter functions (no side effects beyond lazy caching).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Tuple

import webcolors

log = logging.getLogger(__name__)

__all__ = [
    "BASIC_NAMED_COLORS",
    "get_css3_color_names",
    "get_stylus_color_names",
    "lookup_named_color",
    "css3_name_to_rgb",
]

# ── Basic parse table ────────────────────────────────────────────────────────
# (r, g, b, alpha); alpha None means fully opaque and unspecified
BASIC_NAMED_COLORS: Mapping[str, Tuple[int, int, int, Optional[float]]] = MappingProxyType({
    "black": (0, 0, 0, None),
    "white": (255, 255, 255, None),
    "red": (255, 0, 0, None),
    "green": (0, 128, 0, None),
    "blue": (0, 0, 255, None),
    "yellow": (255, 255, 0, None),
    "cyan": (0, 255, 255, None),
    "magenta": (255, 0, 255, None),
    "silver": (192, 192, 192, None),
    "gray": (128, 128, 128, None),
    "maroon": (128, 0, 0, None),
    "olive": (128, 128, 0, None),
    "lime": (0, 255, 0, None),
    "aqua": (0, 255, 255, None),
    "teal": (0, 128, 128, None),
    "navy": (0, 0, 128, None),
    "fuchsia": (255, 0, 255, None),
    "purple": (128, 0, 128, None),
    "transparent": (0, 0, 0, 0.0),
})


def lookup_named_color(name: str) -> Optional[Tuple[int, int, int, Optional[float]]]:
    """Does: Return (r, g, b, a) for a basic CSS keyword, else None."""
    return BASIC_NAMED_COLORS.get(name.strip().lower())


# ── Full CSS3 vocabulary (lazy) ──────────────────────────────────────────────
@lru_cache(maxsize=1)
def get_css3_color_names() -> FrozenSet[str]:
    """Does: Return all 147 CSS3 color keywords (lowercase) from webcolors."""
    names = frozenset(n.lower() for n in webcolors.names(webcolors.CSS3))
    log.debug("Loaded %d CSS3 color names", len(names))
    return names


def get_stylus_color_names() -> FrozenSet[str]:
    """Does: CSS3 keywords plus 'transparent', the set Stylus accepts as color values."""
    return get_css3_color_names() | {"transparent"}


def css3_name_to_rgb(name: str) -> Optional[Tuple[int, int, int]]:
    """Does: Resolve any CSS3 keyword to an (r, g, b) tuple, or None when unknown."""
    try:
        rgb = webcolors.name_to_rgb(name.strip().lower(), spec=webcolors.CSS3)
    except ValueError:
        return None
    return (rgb.red, rgb.green, rgb.blue)
