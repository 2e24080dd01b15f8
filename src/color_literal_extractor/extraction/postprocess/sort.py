"""
sort.py
=======

Does: Order color values by hue, saturation, lightness or text, ascending or descending.
Returns: New list of strings (input untouched); unparseable values sort as 0.
Used By: CLI demo and editor commands that rewrite a selection of colors.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from color_literal_extractor.extraction.color.conversion import HSLColor, parse_color, rgb_to_hsl

__all__ = ["SORT_MODES", "sort_colors"]

SORT_MODES = (
    "off",
    "hue-asc", "hue-desc",
    "saturation-asc", "saturation-desc",
    "lightness-asc", "lightness-desc",
    "hex-asc", "hex-desc",
)

_COMPONENTS: Dict[str, Callable[[HSLColor], int]] = {
    "hue": lambda hsl: hsl.h,
    "saturation": lambda hsl: hsl.s,
    "lightness": lambda hsl: hsl.l,
}


def _component(value: str, name: str) -> int:
    rgb = parse_color(value)
    return _COMPONENTS[name](rgb_to_hsl(rgb)) if rgb is not None else 0


def sort_colors(values: Sequence[str], mode: str) -> List[str]:
    """Does: Sort color strings by `mode`; 'off' returns an unchanged copy.

    Blank entries are dropped for every other mode. Unknown modes keep input
    order (minus blanks). Ties keep their input order.
    """
    if mode == "off":
        return list(values)
    lines = [v for v in values if v.strip()]
    if mode not in SORT_MODES:
        return lines

    key_name, direction = mode.rsplit("-", 1)
    reverse = direction == "desc"
    if key_name == "hex":
        return sorted(lines, key=str.casefold, reverse=reverse)
    return sorted(lines, key=lambda v: _component(v, key_name), reverse=reverse)
