"""
palette.py
==========

Does: Whole-palette judgements: harmony class, warm/cool temperature, mood,
      best achievable WCAG contrast, and per-value usage with contexts.
Returns: ColorHarmony, ColorAccessibility, ColorUsage and PaletteAnalysis records;
         temperature/mood as plain strings.
Used By: CLI demo and editor reports (analyze_palette is the single entry point).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, List, Optional, Sequence, Tuple, Union

from color_literal_extractor.extraction.analysis.statistics import unique_values
from color_literal_extractor.extraction.color.constants import (
    COMPLEMENTARY_TOLERANCE,
    MONOCHROMATIC_RANGE,
    WCAG_AA,
    WCAG_AAA,
)
from color_literal_extractor.extraction.color.conversion import (
    HSLColor,
    get_contrast_ratio,
    parse_color,
    parse_color_to_hsl,
)
from color_literal_extractor.extraction.types import Color

__all__ = [
    "ColorHarmony",
    "AccessibilityIssue",
    "ColorAccessibility",
    "ColorUsage",
    "PaletteAnalysis",
    "detect_color_harmony",
    "determine_temperature",
    "determine_mood",
    "assess_accessibility",
    "summarize_usage",
    "analyze_palette",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

ColorsLike = Sequence[Union[Color, str]]


# ── Records ──────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ColorHarmony:
    # monochromatic | analogous | complementary | triadic | tetradic
    # | split-complementary | none
    type: str
    colors: Tuple[str, ...]
    confidence: float
    description: str


@dataclass(frozen=True)
class AccessibilityIssue:
    type: str  # contrast | color-blindness | readability
    severity: str
    message: str
    suggestion: Optional[str] = None


@dataclass(frozen=True)
class ColorAccessibility:
    wcag_aa: bool
    wcag_aaa: bool
    contrast_ratio: float
    recommendations: Tuple[str, ...] = ()
    issues: Tuple[AccessibilityIssue, ...] = ()


@dataclass(frozen=True)
class ColorUsage:
    color: str
    frequency: int
    contexts: Tuple[str, ...]


@dataclass(frozen=True)
class PaletteAnalysis:
    colors: Tuple[str, ...]
    harmony: ColorHarmony
    accessibility: ColorAccessibility
    temperature: str  # warm | cool | neutral
    mood: str  # vibrant | muted | pastel | dark | light
    usage: Tuple[ColorUsage, ...]


# ── Helpers ──────────────────────────────────────────────────────────────────
def _values(colors: ColorsLike) -> List[str]:
    """Does: Distinct lowercase values from Colors or plain strings, first-seen order."""
    raw = [c.value if isinstance(c, Color) else str(c) for c in colors]
    return list(dict.fromkeys(v.lower() for v in raw))


def _hsls(values: Sequence[str]) -> List[HSLColor]:
    return [h for h in map(parse_color_to_hsl, values) if h is not None]


# =============================================================================
# 1) HARMONY / TEMPERATURE / MOOD
# =============================================================================
def detect_color_harmony(colors: ColorsLike) -> ColorHarmony:
    """Does: Classify as monochromatic, complementary (exactly two colors) or none.

    Triadic, tetradic and split-complementary are valid types but never emitted.
    """
    values = tuple(_values(colors))
    if len(values) < 2:
        return ColorHarmony("none", values, 0.0, "Insufficient colors for harmony analysis")

    hsls = _hsls(values)
    if len(hsls) < 2:
        return ColorHarmony("none", values, 0.0, "Unable to analyze color harmony")

    hues = [h.h for h in hsls]
    if max(hues) - min(hues) < MONOCHROMATIC_RANGE:
        return ColorHarmony(
            "monochromatic", values, 0.8,
            "Monochromatic color scheme with variations in saturation and lightness",
        )
    if len(hsls) == 2 and abs(abs(hues[0] - hues[1]) - 180) < COMPLEMENTARY_TOLERANCE:
        return ColorHarmony(
            "complementary", values, 0.9, "Complementary color scheme with opposite hues"
        )
    return ColorHarmony("none", values, 0.3, "No clear color harmony pattern detected")


def determine_temperature(colors: ColorsLike) -> str:
    """Does: 'warm' or 'cool' when one side outnumbers the other 1.5x, else 'neutral'."""
    hsls = _hsls(_values(colors))
    if not hsls:
        return "neutral"
    warm = sum(1 for h in hsls if 0 <= h.h < 60 or 300 <= h.h <= 360)
    cool = sum(1 for h in hsls if 180 <= h.h < 300)
    if warm > cool * 1.5:
        return "warm"
    if cool > warm * 1.5:
        return "cool"
    return "neutral"


def determine_mood(colors: ColorsLike) -> str:
    hsls = _hsls(_values(colors))
    if not hsls:
        return "muted"
    avg_s = sum(h.s for h in hsls) / len(hsls)
    avg_l = sum(h.l for h in hsls) / len(hsls)
    if avg_l < 30:
        return "dark"
    if avg_l > 80:
        return "light"
    if avg_s > 70 and avg_l > 50:
        return "vibrant"
    if avg_s > 40 and avg_l > 70:
        return "pastel"
    return "muted"


# =============================================================================
# 2) ACCESSIBILITY
# =============================================================================
def assess_accessibility(colors: ColorsLike) -> ColorAccessibility:
    """Does: Best WCAG contrast between any two distinct parseable colors.

    Returns: ColorAccessibility with AA/AAA flags; a 'contrast' issue when even
             the best pair stays below AA.
    """
    parseable = [v for v in _values(colors) if parse_color(v) is not None]
    if len(parseable) < 2:
        return ColorAccessibility(
            wcag_aa=False,
            wcag_aaa=False,
            contrast_ratio=1.0,
            recommendations=("Add a foreground/background pair to evaluate contrast",),
        )

    best = max(get_contrast_ratio(a, b) for a, b in combinations(parseable, 2))
    aa, aaa = best >= WCAG_AA, best >= WCAG_AAA
    recommendations: List[str] = ["Test color combinations for sufficient contrast"]
    issues: List[AccessibilityIssue] = []
    if not aa:
        issues.append(AccessibilityIssue(
            type="contrast",
            severity="high",
            message=f"Best contrast between palette colors is {best:.2f}:1 (AA needs {WCAG_AA}:1)",
            suggestion="Add a darker or lighter color to the palette",
        ))
    elif not aaa:
        recommendations.append(f"Reach {WCAG_AAA}:1 for AAA compliance")
    return ColorAccessibility(aa, aaa, best, tuple(recommendations), tuple(issues))


# =============================================================================
# 3) USAGE & PALETTE
# =============================================================================
def summarize_usage(colors: Sequence[Color]) -> Tuple[ColorUsage, ...]:
    """Does: Frequency and first-seen contexts ('unknown' when missing) per value."""
    freq: Dict[str, int] = {}
    contexts: Dict[str, Dict[str, None]] = {}
    for c in colors:
        key = c.value.lower()
        freq[key] = freq.get(key, 0) + 1
        contexts.setdefault(key, {})[c.context or "unknown"] = None
    return tuple(ColorUsage(k, n, tuple(contexts[k])) for k, n in freq.items())


def analyze_palette(colors: Sequence[Color]) -> PaletteAnalysis:
    """Does: Bundle harmony, accessibility, temperature, mood and usage for a Color list."""
    values = unique_values(colors)
    analysis = PaletteAnalysis(
        colors=tuple(values),
        harmony=detect_color_harmony(values),
        accessibility=assess_accessibility(values),
        temperature=determine_temperature(values),
        mood=determine_mood(values),
        usage=summarize_usage(colors),
    )
    logger.debug(
        "Palette: %d colors, harmony=%s, mood=%s",
        len(values), analysis.harmony.type, analysis.mood,
    )
    return analysis
