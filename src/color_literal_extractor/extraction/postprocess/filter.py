"""
filter.py
=========

Does: Keep or exclude Colors by format, lightness/saturation bounds, hue range,
      duplication, well-formedness, transparency and a custom regex, counting
      every exclusion reason.
Returns: FilterResult(original, filtered, excluded, options, timestamp, summary).
Used By: CLI demo and editor commands.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from color_literal_extractor.extraction.color.conversion import is_well_formed, parse_color_to_hsl
from color_literal_extractor.extraction.types import Color

__all__ = ["FilterOptions", "FilterSummary", "FilterResult", "is_transparent", "filter_colors"]

logger = logging.getLogger(__name__)

_RGBA_ALPHA = re.compile(r"rgba\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*,\s*([\d.]+)\s*\)")
_HSLA_ALPHA = re.compile(r"hsla\(\s*\d+\s*,\s*\d+%\s*,\s*\d+%\s*,\s*([\d.]+)\s*\)")
_HEX8_ALPHA = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})$")


@dataclass(frozen=True)
class FilterOptions:
    formats: Optional[Tuple[str, ...]] = None
    exclude_formats: Optional[Tuple[str, ...]] = None
    min_lightness: Optional[float] = None
    max_lightness: Optional[float] = None
    min_saturation: Optional[float] = None
    max_saturation: Optional[float] = None
    hue_range: Optional[Tuple[float, float]] = None  # inclusive (min, max)
    exclude_duplicates: bool = False
    exclude_invalid: bool = False
    exclude_transparent: bool = False
    custom_pattern: Optional[str] = None  # case-insensitive; ignored when invalid


@dataclass(frozen=True)
class FilterSummary:
    total: int
    kept: int
    excluded: int
    exclusion_reasons: Tuple[Tuple[str, int], ...]


@dataclass(frozen=True)
class FilterResult:
    original: Tuple[Color, ...]
    filtered: Tuple[Color, ...]
    excluded: Tuple[Color, ...]
    options: FilterOptions
    timestamp: str
    summary: FilterSummary


def _alpha_is_zero(raw: str) -> bool:
    try:
        return float(raw) == 0
    except ValueError:
        return False


def is_transparent(value: str) -> bool:
    """Does: True for 'transparent', zero-alpha rgba()/hsla(), or an '00' hex8 alpha."""
    if value.strip().lower() == "transparent":
        return True
    for pattern in (_RGBA_ALPHA, _HSLA_ALPHA):
        m = pattern.search(value)
        if m and _alpha_is_zero(m.group(1)):
            return True
    m = _HEX8_ALPHA.match(value.strip())
    return bool(m and int(m.group(1), 16) == 0)


def _compile_pattern(source: Optional[str]) -> Optional[re.Pattern[str]]:
    if not source:
        return None
    try:
        return re.compile(source, re.IGNORECASE)
    except re.error:
        logger.debug("Ignoring invalid custom pattern %r", source)
        return None


def _reasons(color: Color, options: FilterOptions, seen: set[str],
             pattern: Optional[re.Pattern[str]]) -> List[str]:
    reasons: List[str] = []
    if options.formats is not None and color.format not in options.formats:
        reasons.append("format not included")
    if options.exclude_formats and color.format in options.exclude_formats:
        reasons.append("format excluded")

    hsl = parse_color_to_hsl(color.value)
    if hsl is not None:
        if options.min_lightness is not None and hsl.l < options.min_lightness:
            reasons.append("too dark")
        if options.max_lightness is not None and hsl.l > options.max_lightness:
            reasons.append("too light")
        if options.min_saturation is not None and hsl.s < options.min_saturation:
            reasons.append("too muted")
        if options.max_saturation is not None and hsl.s > options.max_saturation:
            reasons.append("too vibrant")
        if options.hue_range is not None:
            lo, hi = options.hue_range
            if hsl.h < lo or hsl.h > hi:
                reasons.append("hue out of range")

    if options.exclude_duplicates:
        key = color.value.lower()
        if key in seen:
            reasons.append("duplicate")
        else:
            seen.add(key)
    if options.exclude_invalid and not is_well_formed(color.value.lower()):
        reasons.append("invalid format")
    if options.exclude_transparent and is_transparent(color.value):
        reasons.append("transparent")
    if pattern is not None and not pattern.search(color.value):
        reasons.append("pattern mismatch")
    return reasons


def filter_colors(colors: Sequence[Color], options: Optional[FilterOptions] = None) -> FilterResult:
    """Does: Partition `colors` into kept/excluded; a Color is excluded on any failed check."""
    options = options or FilterOptions()
    pattern = _compile_pattern(options.custom_pattern)
    seen: set[str] = set()
    kept: List[Color] = []
    dropped: List[Color] = []
    counts: Dict[str, int] = {}

    for color in colors:
        reasons = _reasons(color, options, seen, pattern)
        if reasons:
            dropped.append(color)
            for r in reasons:
                counts[r] = counts.get(r, 0) + 1
        else:
            kept.append(color)

    return FilterResult(
        original=tuple(colors),
        filtered=tuple(kept),
        excluded=tuple(dropped),
        options=options,
        timestamp=datetime.now(timezone.utc).isoformat(),
        summary=FilterSummary(
            total=len(colors),
            kept=len(kept),
            excluded=len(dropped),
            exclusion_reasons=tuple(counts.items()),
        ),
    )
