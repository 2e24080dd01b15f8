"""
color.
=====

Does: Aggregate core color-domain definitions (constants, vocabularies) and the
      converter shared across extraction, analysis and post-processing.
Used By: Format extractors, analyzers, filter/validate, CLI demo.
Returns: Pure data structures and functions; no side effects beyond lazy caching.
"""

# ── Vocabulary ───────────────────────────────────────────────────────────────
from .vocab import (
    BASIC_NAMED_COLORS,
    get_css3_color_names,
    get_stylus_color_names,
)

# ── Converter ────────────────────────────────────────────────────────────────
from .conversion import (
    ConversionOptions,
    ConversionResult,
    HSLColor,
    RGBColor,
    convert_color,
    convert_colors,
    detect_color_format,
    get_available_formats,
    get_contrast_ratio,
    hsl_to_rgb,
    parse_color,
    parse_color_to_hsl,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsl_string,
    rgb_to_oklch_string,
    rgb_to_rgb_string,
    validate_color_format,
)

__all__ = [
    # vocab
    "BASIC_NAMED_COLORS",
    "get_css3_color_names",
    "get_stylus_color_names",
    # converter
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
]
