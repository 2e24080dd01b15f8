"""
conversion.py
=============

Does: Parse color literals into RGB(A), convert between RGB, HSL, hex, and an
      approximate OKLCH, detect literal formats, and compute WCAG contrast ratios.
Returns: RGBColor/HSLColor values, formatted strings, ConversionResult records.
Used By: Extractors (string-literal validation), analysis, filtering, validation, CLI.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Iterable

from color_literal_extractor.extraction.color.constants import (
    OKLCH_CHROMA_SCALE,
    STRICT_FORMAT_SOURCES,
    TARGET_FORMATS,
)
from color_literal_extractor.extraction.color.vocab import lookup_named_color
from color_literal_extractor.extraction.types import Color

__all__ = [
    "RGBColor",
    "HSLColor",
    "ConversionOptions",
    "ConversionResult",
    "parse_color",
    "parse_color_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "rgb_to_hex",
    "rgb_to_rgb_string",
    "rgb_to_hsl_string",
    "rgb_to_oklch_string",
    "detect_color_format",
    "get_contrast_ratio",
    "convert_color",
    "convert_colors",
    "get_available_formats",
    "validate_color_format",
    "is_well_formed",
    "round_half_up",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# =============================================================================
# 1) VALUE TYPES
# =============================================================================
@dataclass(frozen=True)
class RGBColor:
    r: int
    g: int
    b: int
    a: float | None = None


@dataclass(frozen=True)
class HSLColor:
    h: int
    s: int
    l: int  # noqa: E741
    a: float | None = None


@dataclass(frozen=True)
class ConversionOptions:
    target_format: str = "hex"
    preserve_alpha: bool = True
    round_values: bool = True
    uppercase: bool = False
    short_hex: bool = False


@dataclass(frozen=True)
class ConversionResult:
    original: Color
    converted: str
    format: str
    success: bool
    error: str | None = None
    timestamp: str = ""


# =============================================================================
# 2) PARSING
# =============================================================================
_HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$")
_RGB_RE = re.compile(
    r"^rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([\d.]+)\s*)?\)$"
)
_HSL_RE = re.compile(
    r"^hsla?\s*\(\s*(\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%\s*(?:,\s*([\d.]+)\s*)?\)$"
)

_FORMAT_PREFIXES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("rgba", re.compile(r"^rgba\s*\(", re.IGNORECASE)),
    ("rgb", re.compile(r"^rgb\s*\(", re.IGNORECASE)),
    ("hsla", re.compile(r"^hsla\s*\(", re.IGNORECASE)),
    ("hsl", re.compile(r"^hsl\s*\(", re.IGNORECASE)),
)

_STRICT_FORMATS = {k: re.compile(v) for k, v in STRICT_FORMAT_SOURCES.items()}


def round_half_up(x: float) -> int:
    """Does: Round .5 away from zero for positives (matches Math.round)."""
    return int(math.floor(x + 0.5))


def _parse_alpha(raw: str | None) -> tuple[bool, float | None]:
    if raw is None:
        return True, None
    try:
        a = float(raw)
    except ValueError:
        return False, None
    if not 0.0 <= a <= 1.0:
        return False, None
    return True, a


def parse_color(value: str) -> RGBColor | None:
    """Does: Parse hex (3/6/8), rgb()/rgba(), hsl()/hsla() or a basic keyword.

    Returns: RGBColor, or None when the text is not a well-formed in-range literal.
    """
    if not isinstance(value, str):
        return None
    text = value.strip().lower()
    if not text:
        return None

    m = _HEX_RE.match(text)
    if m:
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        a = int(digits[6:8], 16) / 255 if len(digits) == 8 else None
        return RGBColor(r, g, b, a)

    m = _RGB_RE.match(text)
    if m:
        r, g, b = (int(m.group(i)) for i in (1, 2, 3))
        ok, a = _parse_alpha(m.group(4))
        if not ok or max(r, g, b) > 255:
            return None
        return RGBColor(r, g, b, a)

    m = _HSL_RE.match(text)
    if m:
        h, s, l = (int(m.group(i)) for i in (1, 2, 3))  # noqa: E741
        ok, a = _parse_alpha(m.group(4))
        if not ok or s > 100 or l > 100:
            return None
        return hsl_to_rgb(HSLColor(h % 360, s, l, a))

    named = lookup_named_color(text)
    if named is not None:
        r, g, b, a = named
        return RGBColor(r, g, b, a)
    return None


def parse_color_to_hsl(value: str) -> HSLColor | None:
    """Does: HSL view of a literal; hsl()/hsla() components are read as written."""
    if not isinstance(value, str):
        return None
    m = _HSL_RE.match(value.strip().lower())
    if m:
        h, s, l = (int(m.group(i)) for i in (1, 2, 3))  # noqa: E741
        ok, a = _parse_alpha(m.group(4))
        if ok and s <= 100 and l <= 100:
            return HSLColor(h % 360, s, l, a)
        return None
    rgb = parse_color(value)
    return rgb_to_hsl(rgb) if rgb is not None else None


# =============================================================================
# 3) COLOR-SPACE MATH
# =============================================================================
def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Does: HSL (deg, %, %) -> RGB via chroma/x/m over six hue sextants."""
    h = (hsl.h % 360) / 360
    s = hsl.s / 100
    l = hsl.l / 100  # noqa: E741

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h * 6) % 2 - 1))
    m = l - c / 2

    sextant = h * 6
    if sextant < 1:
        r, g, b = c, x, 0.0
    elif sextant < 2:
        r, g, b = x, c, 0.0
    elif sextant < 3:
        r, g, b = 0.0, c, x
    elif sextant < 4:
        r, g, b = 0.0, x, c
    elif sextant < 5:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return RGBColor(
        round_half_up((r + m) * 255),
        round_half_up((g + m) * 255),
        round_half_up((b + m) * 255),
        hsl.a,
    )


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """Does: RGB -> HSL with integer degrees/percents (hue kept in [0, 360))."""
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    mx, mn = max(r, g, b), min(r, g, b)
    l = (mx + mn) / 2  # noqa: E741
    h = s = 0.0

    if mx != mn:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif mx == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSLColor(
        round_half_up(h * 360) % 360,
        round_half_up(s * 100),
        round_half_up(l * 100),
        rgb.a,
    )


# =============================================================================
# 4) SERIALIZATION
# =============================================================================
def _fmt_num(x: float) -> str:
    """Does: Print numbers the way CSS authors write them (1, 0.5, never 1.0)."""
    x = float(x)
    return str(int(x)) if x.is_integer() else repr(x)


def rgb_to_hex(rgb: RGBColor, *, short: bool = False, uppercase: bool = False) -> str:
    """Does: '#rrggbb', plus an alpha byte only when alpha is present and below 1."""
    parts = [f"{rgb.r:02x}", f"{rgb.g:02x}", f"{rgb.b:02x}"]
    if rgb.a is not None and rgb.a < 1:
        parts.append(f"{round_half_up(rgb.a * 255):02x}")
    elif short and all(p[0] == p[1] for p in parts):
        parts = [p[0] for p in parts]
    out = "#" + "".join(parts)
    return out.upper() if uppercase else out


def rgb_to_rgb_string(rgb: RGBColor) -> str:
    if rgb.a is not None:
        return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {_fmt_num(rgb.a)})"
    return f"rgb({rgb.r}, {rgb.g}, {rgb.b})"


def rgb_to_hsl_string(rgb: RGBColor) -> str:
    hsl = rgb_to_hsl(rgb)
    if hsl.a is not None:
        return f"hsla({hsl.h}, {hsl.s}%, {hsl.l}%, {_fmt_num(hsl.a)})"
    return f"hsl({hsl.h}, {hsl.s}%, {hsl.l}%)"


def rgb_to_oklch_string(rgb: RGBColor, *, round_values: bool = True) -> str:
    """Does: Approximate OKLCH from HSL (L=l/100, C=s/100*0.4, H=h). Not perceptual."""
    hsl = rgb_to_hsl(rgb)
    lightness = hsl.l / 100
    chroma = hsl.s / 100 * OKLCH_CHROMA_SCALE
    hue: float = hsl.h
    if round_values:
        lightness = round(lightness, 2)
        chroma = round(chroma, 2)
        hue = round_half_up(hue)
    return f"oklch({_fmt_num(lightness)} {_fmt_num(chroma)} {_fmt_num(hue)})"


# =============================================================================
# 5) FORMAT DETECTION & VALIDATION
# =============================================================================
def detect_color_format(value: str) -> str:
    """Does: Map a literal to hex|rgb|rgba|hsl|hsla by prefix, else 'unknown'."""
    text = value.strip() if isinstance(value, str) else ""
    if text.startswith("#"):
        return "hex"
    for name, pattern in _FORMAT_PREFIXES:
        if pattern.match(text):
            return name
    return "unknown"


def validate_color_format(value: str, fmt: str) -> bool:
    """Does: True when `value` is a well-formed literal of the given format."""
    pattern = _STRICT_FORMATS.get(fmt)
    return bool(pattern and pattern.match(value.strip()))


def is_well_formed(value: str) -> bool:
    """Does: True when `value` matches any strict hex/rgb(a)/hsl(a) pattern."""
    text = value.strip()
    return any(p.match(text) for p in _STRICT_FORMATS.values())


def get_available_formats() -> list[str]:
    return list(TARGET_FORMATS)


# =============================================================================
# 6) CONTRAST
# =============================================================================
def _relative_luminance(rgb: RGBColor) -> float:
    def _lin(c: int) -> float:
        v = c / 255
        return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

    return 0.2126 * _lin(rgb.r) + 0.7152 * _lin(rgb.g) + 0.0722 * _lin(rgb.b)


def get_contrast_ratio(color1: str, color2: str) -> float:
    """Does: WCAG contrast ratio in [1, 21]; exactly 1.0 when either side is unparseable."""
    c1, c2 = parse_color(color1), parse_color(color2)
    if c1 is None or c2 is None:
        return 1.0
    l1, l2 = _relative_luminance(c1), _relative_luminance(c2)
    hi, lo = max(l1, l2), min(l1, l2)
    return (hi + 0.05) / (lo + 0.05)


# =============================================================================
# 7) CONVERSION API
# =============================================================================
def _serialize(rgb: RGBColor, options: ConversionOptions) -> str:
    fmt = options.target_format
    keep_alpha = options.preserve_alpha and rgb.a is not None
    opaque = rgb if keep_alpha else replace(rgb, a=None)

    if fmt == "hex":
        return rgb_to_hex(opaque, short=options.short_hex, uppercase=options.uppercase)
    if fmt == "rgb":
        return rgb_to_rgb_string(opaque)
    if fmt == "rgba":
        return rgb_to_rgb_string(replace(rgb, a=rgb.a if keep_alpha else 1.0))
    if fmt == "hsl":
        return rgb_to_hsl_string(opaque)
    if fmt == "hsla":
        return rgb_to_hsl_string(replace(rgb, a=rgb.a if keep_alpha else 1.0))
    if fmt == "oklch":
        return rgb_to_oklch_string(opaque, round_values=options.round_values)
    raise ValueError(f"Unsupported target format: {fmt}")


def convert_color(color: Color, options: ConversionOptions | None = None) -> ConversionResult:
    """Does: Convert one Color to the requested target format.

    Returns: ConversionResult; on failure `converted` is the original value and
             `error` explains why. Never raises.
    """
    options = options or ConversionOptions()
    stamp = datetime.now(timezone.utc).isoformat()

    rgb = parse_color(color.value)
    if rgb is None:
        return ConversionResult(
            original=color,
            converted=color.value,
            format=options.target_format,
            success=False,
            error=f"Unable to parse color: {color.value}",
            timestamp=stamp,
        )
    try:
        converted = _serialize(rgb, options)
    except Exception as e:
        logger.debug("Conversion failed for %r", color.value, exc_info=True)
        return ConversionResult(color, color.value, options.target_format, False, str(e), stamp)
    return ConversionResult(color, converted, options.target_format, True, None, stamp)


def convert_colors(
    colors: Iterable[Color], options: ConversionOptions | None = None
) -> list[ConversionResult]:
    """Does: Batch form of convert_color (order preserved)."""
    return [convert_color(c, options) for c in colors]
