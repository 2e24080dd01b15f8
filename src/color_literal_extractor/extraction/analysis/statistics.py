"""
statistics.py
=============

Does: Summarize a Color list (totals, format shares, most-common values, mean
      HSL components) and flag anomalies (heavy duplication, malformed values,
      very dark or very light colors).
Returns: ColorStatistics and a tuple of ColorAnomaly records.
Used By: analyze_palette callers, CLI demo, editor reports.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from color_literal_extractor.extraction.color.constants import (
    DARK_LIGHTNESS,
    DUPLICATE_HIGH_COUNT,
    DUPLICATE_MIN_COUNT,
    LIGHT_LIGHTNESS,
    MOST_COMMON_LIMIT,
)
from color_literal_extractor.extraction.color.conversion import (
    is_well_formed,
    parse_color_to_hsl,
)
from color_literal_extractor.extraction.types import Color

__all__ = [
    "FormatShare",
    "ColorCount",
    "ColorStatistics",
    "ColorAnomaly",
    "normalized_values",
    "unique_values",
    "calculate_color_statistics",
    "detect_color_anomalies",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# ── Records ──────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class FormatShare:
    format: str
    count: int
    percentage: float


@dataclass(frozen=True)
class ColorCount:
    color: str
    count: int
    percentage: float


@dataclass(frozen=True)
class ColorStatistics:
    total: int
    unique: int
    by_format: Tuple[FormatShare, ...] = ()
    most_common: Tuple[ColorCount, ...] = ()
    dominant_hue: Optional[float] = None   # mean hue of the parseable colors
    average_saturation: Optional[float] = None
    average_lightness: Optional[float] = None
    contrast_ratio: Optional[float] = None  # needs a background; always None here


@dataclass(frozen=True)
class ColorAnomaly:
    type: str  # outlier | duplicate | invalid | accessibility | harmony
    color: str
    severity: str  # low | medium | high
    message: str
    suggestion: Optional[str] = None
    context: Optional[str] = None


# ── Helpers ──────────────────────────────────────────────────────────────────
def normalized_values(colors: Sequence[Color]) -> List[str]:
    """Does: Lowercased values in input order (duplicates kept)."""
    return [c.value.lower() for c in colors]


def unique_values(colors: Sequence[Color]) -> List[str]:
    """Does: Distinct lowercased values in first-seen order."""
    return list(dict.fromkeys(normalized_values(colors)))


def _mean(values: List[int]) -> Optional[float]:
    return sum(values) / len(values) if values else None


# =============================================================================
# 1) STATISTICS
# =============================================================================
def calculate_color_statistics(colors: Sequence[Color]) -> ColorStatistics:
    """Does: Totals, per-format shares, top-10 values and mean H/S/L.

    Averages use only HSL-parseable colors; empty input gives zeros and Nones.
    """
    if not colors:
        return ColorStatistics(total=0, unique=0)

    total = len(colors)
    values = normalized_values(colors)

    format_counts: Dict[str, int] = Counter(c.format for c in colors)
    by_format = sorted(
        (FormatShare(fmt, n, n / total * 100) for fmt, n in format_counts.items()),
        key=lambda s: s.count,
        reverse=True,
    )
    most_common = sorted(
        (ColorCount(v, n, n / total * 100) for v, n in Counter(values).items()),
        key=lambda s: s.count,
        reverse=True,
    )[:MOST_COMMON_LIMIT]

    hsls = [h for h in (parse_color_to_hsl(c.value) for c in colors) if h is not None]
    return ColorStatistics(
        total=total,
        unique=len(set(values)),
        by_format=tuple(by_format),
        most_common=tuple(most_common),
        dominant_hue=_mean([h.h for h in hsls]),
        average_saturation=_mean([h.s for h in hsls]),
        average_lightness=_mean([h.l for h in hsls]),
        contrast_ratio=None,
    )


# =============================================================================
# 2) ANOMALIES
# =============================================================================
def detect_color_anomalies(colors: Sequence[Color]) -> Tuple[ColorAnomaly, ...]:
    """Does: Flag duplicates (>5 uses), malformed values, and very dark/light colors."""
    anomalies: List[ColorAnomaly] = []
    counts = Counter(normalized_values(colors))

    for color, count in counts.items():
        if count > DUPLICATE_MIN_COUNT:
            anomalies.append(ColorAnomaly(
                type="duplicate",
                color=color,
                severity="high" if count > DUPLICATE_HIGH_COUNT else "medium",
                message=f'Color "{color}" appears {count} times',
                suggestion="Consider using CSS variables for repeated colors",
            ))

    uniques = list(counts)
    for color in uniques:
        if not is_well_formed(color):
            anomalies.append(ColorAnomaly(
                type="invalid",
                color=color,
                severity="high",
                message=f'Invalid color format: "{color}"',
                suggestion="Use valid hex, rgb, hsl, or named color formats",
            ))

    for color in uniques:
        hsl = parse_color_to_hsl(color)
        if hsl is None:
            continue
        if hsl.l < DARK_LIGHTNESS:
            anomalies.append(ColorAnomaly(
                type="accessibility",
                color=color,
                severity="medium",
                message=f'Very dark color may have contrast issues: "{color}"',
                suggestion="Ensure sufficient contrast with background colors",
            ))
        if hsl.l > LIGHT_LIGHTNESS:
            anomalies.append(ColorAnomaly(
                type="accessibility",
                color=color,
                severity="medium",
                message=f'Very light color may have contrast issues: "{color}"',
                suggestion="Ensure sufficient contrast with background colors",
            ))

    if anomalies:
        logger.debug("Detected %d color anomalies", len(anomalies))
    return tuple(anomalies)
