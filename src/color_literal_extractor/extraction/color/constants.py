# constants.py
# ============

"""
constants.
=========

Does: Define global, immutable color-domain constants for extraction, conversion
      and analysis (token regex sources, context keywords, hue bands, thresholds).
Used By: Format extractors, converter, analysis and post-processing layers.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

# ── 1) Token regex sources ───────────────────────────────────────────────────
# Compiled where used; sources only here.
HEX_TOKEN = r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})\b"
RGB_TOKEN = r"rgb\s*\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*\)"
RGBA_TOKEN = r"rgba\s*\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*,\s*[\d.]+\s*\)"
HSL_TOKEN = r"hsl\s*\(\s*\d+\s*,\s*\d+%\s*,\s*\d+%\s*\)"
HSLA_TOKEN = r"hsla\s*\(\s*\d+\s*,\s*\d+%\s*,\s*\d+%\s*,\s*[\d.]+\s*\)"

TOKEN_SOURCES: tuple[tuple[str, str], ...] = (
    ("hex", HEX_TOKEN),
    ("rgb", RGB_TOKEN),
    ("rgba", RGBA_TOKEN),
    ("hsl", HSL_TOKEN),
    ("hsla", HSLA_TOKEN),
)

# Anchored forms used to decide whether a whole value is a well-formed literal
STRICT_FORMAT_SOURCES: dict[str, str] = {
    "hex": r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$",
    "rgb": r"^rgb\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*\)$",
    "rgba": r"^rgba\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*,\s*[\d.]+\s*\)$",
    "hsl": r"^hsl\(\s*\d+\s*,\s*\d+%\s*,\s*\d+%\s*\)$",
    "hsla": r"^hsla\(\s*\d+\s*,\s*\d+%\s*,\s*\d+%\s*,\s*[\d.]+\s*\)$",
}

# ── 2) Context keywords ──────────────────────────────────────────────────────
# HTML: property keyword followed by ':' and no ';' before the match
HTML_PROPERTY_KEYWORDS = (
    "color", "background", "border", "fill", "stroke", "box-shadow", "text-shadow",
)

# JS/TS: case-insensitive substrings that mark a styling line
JS_STYLE_KEYWORDS = (
    "color:", "background:", "border:", "box-shadow:", "text-shadow:",
    "fill:", "stroke:", "theme:", "palette:", "style:", "styles:", "colors:",
    "backgroundColor:", "borderColor:", "textColor:", "fillColor:",
    "strokeColor:", "colorScheme:", "css:", "styled", "theme",
)

JS_CSS_IN_JS_SOURCES = (
    r"css`", r"styled\.", r"createStyles", r"makeStyles", r"useStyles",
    r"emotion", r"styled-components", r"theme\.", r"colors\.",
)

JS_OBJECT_STYLE_PROPERTIES = (
    "color", "background", "border", "fill", "stroke", "theme", "palette", "style", "colors",
)

JS_STYLE_VARIABLE_NAMES = ("color", "style", "theme", "palette", "css")

# SVG presentation attributes carrying paint values
SVG_COLOR_ATTRIBUTES = (
    "fill", "stroke", "stop-color", "flood-color", "lighting-color", "color",
)

SVG_NAMED_VALUES = frozenset({
    "none", "transparent", "currentcolor", "black", "white", "red", "green",
    "blue", "yellow", "cyan", "magenta", "gray", "grey", "orange", "purple",
    "pink", "brown",
})

# Stylus built-ins whose first argument is a color
STYLUS_COLOR_FUNCTIONS = (
    "lighten", "darken", "saturate", "desaturate", "adjust-hue", "mix", "rgba",
    "fade-in", "fade-out", "spin", "tint", "shade", "invert", "complement", "grayscale",
)

STYLUS_COLOR_PROPERTIES = (
    "color", "background", "border", "outline", "box-shadow", "text-shadow",
    "fill", "stroke",
)

# ── 3) Conversion ────────────────────────────────────────────────────────────
TARGET_FORMATS = ("hex", "rgb", "rgba", "hsl", "hsla", "oklch")

# Chroma scale for the approximate HSL -> OKLCH mapping
OKLCH_CHROMA_SCALE = 0.4

WCAG_AA = 4.5
WCAG_AAA = 7.0

# ── 4) Analysis ──────────────────────────────────────────────────────────────
# (label, min inclusive, max exclusive) in degrees
HUE_BANDS: tuple[tuple[str, int, int], ...] = (
    ("Red", 0, 30),
    ("Orange", 30, 60),
    ("Yellow", 60, 120),
    ("Green", 120, 180),
    ("Cyan", 180, 240),
    ("Blue", 240, 300),
    ("Magenta", 300, 360),
)

DEFAULT_MAX_CLUSTERS = 5
MOST_COMMON_LIMIT = 10

DUPLICATE_MIN_COUNT = 5          # flagged when count > this
DUPLICATE_HIGH_COUNT = 10        # high severity when count > this
DARK_LIGHTNESS = 10
LIGHT_LIGHTNESS = 90

HUE_GAP_DEGREES = 60
MONOCHROMATIC_RANGE = 30
COMPLEMENTARY_TOLERANCE = 30

# ── 5) Safety ────────────────────────────────────────────────────────────────
SAFETY_COLOR_ESTIMATE_LIMIT = 1000
SAFETY_COMPLEX_PATTERN_LIMIT = 100
