"""
patterns.py
===========

Does: Heuristic palette structure: low-precision pattern hints (gradient, theme,
      brand stub), hue-band clustering, and hue/lightness coverage gaps.
Returns: Tuples of ColorPattern, ColorCluster and ColorGap records.
Used By: Palette reports and the CLI demo.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from color_literal_extractor.extraction.analysis.statistics import unique_values
from color_literal_extractor.extraction.color.constants import (
    DEFAULT_MAX_CLUSTERS,
    HUE_BANDS,
    HUE_GAP_DEGREES,
)
from color_literal_extractor.extraction.color.conversion import (
    HSLColor,
    parse_color_to_hsl,
    round_half_up,
)
from color_literal_extractor.extraction.types import Color

__all__ = [
    "ColorPattern",
    "ColorCluster",
    "ColorGap",
    "detect_color_patterns",
    "cluster_colors",
    "detect_color_gaps",
    "hue_variance",
]


@dataclass(frozen=True)
class ColorPattern:
    type: str  # gradient | theme | brand | semantic | systematic
    colors: Tuple[str, ...]
    confidence: float
    description: str
    examples: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ColorCluster:
    centroid: str
    colors: Tuple[str, ...]
    size: int
    variance: float
    label: Optional[str] = None


@dataclass(frozen=True)
class ColorGap:
    type: str  # hue | saturation | lightness | semantic
    description: str
    missing_colors: Tuple[str, ...]
    severity: str
    suggestions: Tuple[str, ...] = ()


def _parsed(values: Sequence[str]) -> List[Tuple[str, HSLColor]]:
    out = []
    for v in values:
        hsl = parse_color_to_hsl(v)
        if hsl is not None:
            out.append((v, hsl))
    return out


# ── 1) Patterns ──────────────────────────────────────────────────────────────
def _gradient_pattern(values: Sequence[str]) -> Optional[ColorPattern]:
    if len(values) < 3:
        return None
    first = tuple(values[:3])
    return ColorPattern("gradient", first, 0.7, "Potential gradient sequence detected", first)


def _is_blueish(v: str) -> bool:
    return "blue" in v or "#0" in v


def _is_whiteish(v: str) -> bool:
    return "white" in v or "#fff" in v


def _theme_pattern(values: Sequence[str]) -> Optional[ColorPattern]:
    if not (any(map(_is_blueish, values)) and any(map(_is_whiteish, values))):
        return None
    members = tuple(v for v in values if _is_blueish(v) or _is_whiteish(v))
    return ColorPattern(
        "theme", members, 0.6, "Blue and white theme pattern detected", ("#0066cc", "#ffffff")
    )


def _brand_pattern(_values: Sequence[str]) -> Optional[ColorPattern]:
    """Does: Placeholder; brand detection needs a brand-color database and never matches."""
    return None


def detect_color_patterns(colors: Sequence[Color]) -> Tuple[ColorPattern, ...]:
    """Does: Gradient/theme/brand hints over distinct values (needs at least 2)."""
    values = unique_values(colors)
    if len(values) < 2:
        return ()
    found = (p(values) for p in (_gradient_pattern, _theme_pattern, _brand_pattern))
    return tuple(p for p in found if p is not None)


# ── 2) Clustering ────────────────────────────────────────────────────────────
def hue_variance(hues: Sequence[float]) -> float:
    """Does: Population variance of hue values (0 for fewer than two)."""
    if len(hues) <= 1:
        return 0.0
    mean = sum(hues) / len(hues)
    return sum((h - mean) ** 2 for h in hues) / len(hues)


def cluster_colors(
    colors: Sequence[Color], max_clusters: int = DEFAULT_MAX_CLUSTERS
) -> Tuple[ColorCluster, ...]:
    """Does: Group distinct colors by fixed hue band, at most `max_clusters` groups.

    Small palettes (no more distinct values than the cap) become singleton clusters.
    The centroid is the first color seen in the band.
    """
    values = unique_values(colors)
    if len(values) <= max_clusters:
        return tuple(ColorCluster(v, (v,), 1, 0.0) for v in values)

    parsed = _parsed(values)
    clusters: List[ColorCluster] = []
    for label, lo, hi in HUE_BANDS:
        members = [(v, hsl) for v, hsl in parsed if lo <= hsl.h < hi]
        if not members:
            continue
        names = tuple(v for v, _ in members)
        clusters.append(ColorCluster(
            centroid=names[0],
            colors=names,
            size=len(names),
            variance=hue_variance([hsl.h for _, hsl in members]),
            label=label,
        ))
    return tuple(clusters[:max(max_clusters, 0)])


# ── 3) Gaps ──────────────────────────────────────────────────────────────────
def detect_color_gaps(colors: Sequence[Color]) -> Tuple[ColorGap, ...]:
    """Does: Report hue jumps over 60° and a missing dark/light extreme."""
    parsed = _parsed(unique_values(colors))
    if not parsed:
        return ()
    gaps: List[ColorGap] = []

    hues = sorted(hsl.h for _, hsl in parsed)
    mids = [
        (prev + cur) / 2
        for prev, cur in zip(hues, hues[1:])
        if cur - prev > HUE_GAP_DEGREES
    ]
    if mids:
        rounded = [round_half_up(m) for m in mids]
        gaps.append(ColorGap(
            type="hue",
            description="Missing colors in hue ranges: " + ", ".join(map(str, rounded)) + "°",
            missing_colors=tuple(f"hsl({h}, 50%, 50%)" for h in rounded),
            severity="high" if len(mids) > 2 else "medium",
            suggestions=(
                "Consider adding colors in the missing hue ranges for better color balance",
            ),
        ))

    lightness = [hsl.l for _, hsl in parsed]
    if not any(v < 20 for v in lightness) and not any(v > 80 for v in lightness):
        gaps.append(ColorGap(
            type="lightness",
            description="Missing very dark and very light colors",
            missing_colors=("#000000", "#ffffff"),
            severity="medium",
            suggestions=("Add darker and lighter variants for better contrast options",),
        ))
    return tuple(gaps)
