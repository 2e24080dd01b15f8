# tests/test_color_conversion.py


from __future__ import annotations

import importlib
import random

import pytest

"""
conversion tests
================

Does: Validate literal parsing, HSL/RGB math (round-half-up), serializers,
      format detection, WCAG contrast, and the convert_color result contract.
"""

cv = importlib.import_module("color_literal_extractor.extraction.color.conversion")
types_mod = importlib.import_module("color_literal_extractor.extraction.types")

RGB = cv.RGBColor
HSL = cv.HSLColor
Color = types_mod.Color


# ──────────────────────────────────────────────────────────────────────────────
# Parsing
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text, expected",
    [
        ("#abc", RGB(170, 187, 204)),
        ("#AABBCC", RGB(170, 187, 204)),
        ("rgb(255, 0, 0)", RGB(255, 0, 0)),
        ("rgba(0, 0, 255, 0.5)", RGB(0, 0, 255, 0.5)),
        ("hsl(120, 100%, 50%)", RGB(0, 255, 0)),
        ("hsl(0, 100%, 50%)", RGB(255, 0, 0)),
        ("  Green ", RGB(0, 128, 0)),
        ("transparent", RGB(0, 0, 0, 0.0)),
    ],
)
def test_parse_color_accepts_supported_literals(text, expected):
    assert cv.parse_color(text) == expected


def test_parse_color_hex8_alpha_is_byte_over_255():
    rgb = cv.parse_color("#aabbcc80")
    assert (rgb.r, rgb.g, rgb.b) == (170, 187, 204)
    assert rgb.a == pytest.approx(128 / 255)


@pytest.mark.parametrize(
    "text",
    ["", "   ", "#gggggg", "#abcd", "rgb(300, 0, 0)", "rgba(0, 0, 0, 1.5)",
     "hsl(10, 150%, 50%)", "notacolor", "rgb(1, 2)"],
)
def test_parse_color_rejects_malformed_or_out_of_range(text):
    assert cv.parse_color(text) is None


def test_parse_color_non_string_is_none():
    assert cv.parse_color(None) is None  # type: ignore[arg-type]


def test_parse_color_to_hsl_reads_hsl_literal_verbatim():
    assert cv.parse_color_to_hsl("hsl(200, 40%, 30%)") == HSL(200, 40, 30)
    assert cv.parse_color_to_hsl("#ff0000") == HSL(0, 100, 50)
    assert cv.parse_color_to_hsl("bogus") is None


# ──────────────────────────────────────────────────────────────────────────────
# HSL <-> RGB
# ──────────────────────────────────────────────────────────────────────────────
def test_rgb_to_hsl_primary_colors():
    assert cv.rgb_to_hsl(RGB(255, 0, 0)) == HSL(0, 100, 50)
    assert cv.rgb_to_hsl(RGB(0, 0, 255)) == HSL(240, 100, 50)
    assert cv.rgb_to_hsl(RGB(128, 128, 128)) == HSL(0, 0, 50)


def test_rgb_to_hsl_hue_stays_below_360():
    hsl = cv.rgb_to_hsl(RGB(255, 0, 1))
    assert 0 <= hsl.h < 360


def test_hsl_rgb_round_trip_on_pure_hues():
    for rgb in (RGB(255, 0, 0), RGB(0, 255, 0), RGB(0, 0, 255), RGB(255, 255, 0)):
        assert cv.hsl_to_rgb(cv.rgb_to_hsl(rgb)) == rgb


def _hex_samples():
    rng = random.Random(20240611)
    edges = ["#000000", "#ffffff", "#000001", "#fffffe", "#010101", "#fefefe",
             "#ff0000", "#00ff00", "#0000ff", "#7f7f7f", "#808080", "#0a0b0c"]
    return edges + [f"#{rng.randrange(0x1000000):06x}" for _ in range(200)]


@pytest.mark.parametrize("value", _hex_samples())
def test_six_digit_hex_survives_parse_and_serialize(value):
    assert cv.rgb_to_hex(cv.parse_color(value)) == value


def test_alpha_travels_through_hsl():
    assert cv.rgb_to_hsl(RGB(0, 0, 0, 0.25)).a == 0.25
    assert cv.hsl_to_rgb(HSL(0, 0, 100, 0.5)) == RGB(255, 255, 255, 0.5)


def test_round_half_up_matches_math_round():
    assert cv.round_half_up(0.5) == 1
    assert cv.round_half_up(2.5) == 3
    assert cv.round_half_up(2.4999) == 2


# ──────────────────────────────────────────────────────────────────────────────
# Serializers
# ──────────────────────────────────────────────────────────────────────────────
def test_rgb_to_hex_variants():
    red = RGB(255, 0, 0)
    assert cv.rgb_to_hex(red) == "#ff0000"
    assert cv.rgb_to_hex(red, short=True) == "#f00"
    assert cv.rgb_to_hex(red, uppercase=True) == "#FF0000"
    assert cv.rgb_to_hex(RGB(18, 52, 86), short=True) == "#123456"


def test_rgb_to_hex_alpha_only_when_translucent():
    assert cv.rgb_to_hex(RGB(255, 0, 0, 0.5)) == "#ff000080"
    assert cv.rgb_to_hex(RGB(255, 0, 0, 1.0)) == "#ff0000"
    assert cv.rgb_to_hex(RGB(255, 0, 0, 0.5), short=True) == "#ff000080"


def test_rgb_and_hsl_strings():
    assert cv.rgb_to_rgb_string(RGB(1, 2, 3)) == "rgb(1, 2, 3)"
    assert cv.rgb_to_rgb_string(RGB(1, 2, 3, 0.5)) == "rgba(1, 2, 3, 0.5)"
    assert cv.rgb_to_rgb_string(RGB(1, 2, 3, 1.0)) == "rgba(1, 2, 3, 1)"
    assert cv.rgb_to_hsl_string(RGB(255, 0, 0)) == "hsl(0, 100%, 50%)"
    assert cv.rgb_to_hsl_string(RGB(255, 0, 0, 0.5)) == "hsla(0, 100%, 50%, 0.5)"


def test_oklch_is_hsl_based_approximation():
    assert cv.rgb_to_oklch_string(RGB(255, 0, 0)) == "oklch(0.5 0.4 0)"
    assert cv.rgb_to_oklch_string(RGB(0, 0, 255)) == "oklch(0.5 0.4 240)"
    assert cv.rgb_to_oklch_string(RGB(255, 255, 255)) == "oklch(1 0 0)"


# ──────────────────────────────────────────────────────────────────────────────
# Detection, validation, contrast
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "value, fmt",
    [
        ("#fff", "hex"),
        ("rgb(1, 2, 3)", "rgb"),
        ("rgba(1, 2, 3, 0.5)", "rgba"),
        ("hsl(1, 2%, 3%)", "hsl"),
        ("hsla(1, 2%, 3%, 0.5)", "hsla"),
        ("RGB(1, 2, 3)", "rgb"),
        ("red", "unknown"),
        ("", "unknown"),
    ],
)
def test_detect_color_format_is_total(value, fmt):
    assert cv.detect_color_format(value) == fmt


def test_validate_color_format():
    assert cv.validate_color_format("#fff", "hex")
    assert not cv.validate_color_format("#ff", "hex")
    assert cv.validate_color_format("rgb(1, 2, 3)", "rgb")
    assert not cv.validate_color_format("rgb(1, 2, 3)", "hsl")
    assert not cv.validate_color_format("#fff", "oklch")


def test_contrast_ratio_bounds_and_fallback():
    assert cv.get_contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)
    assert cv.get_contrast_ratio("#ffffff", "#000000") == pytest.approx(21.0)
    assert cv.get_contrast_ratio("#777777", "#777777") == pytest.approx(1.0)
    assert cv.get_contrast_ratio("nope", "#ffffff") == 1.0


def test_available_formats():
    assert cv.get_available_formats() == ["hex", "rgb", "rgba", "hsl", "hsla", "oklch"]


# ──────────────────────────────────────────────────────────────────────────────
# convert_color
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "target, expected",
    [
        ("hex", "#ff0000"),
        ("rgb", "rgb(255, 0, 0)"),
        ("rgba", "rgba(255, 0, 0, 1)"),
        ("hsl", "hsl(0, 100%, 50%)"),
        ("hsla", "hsla(0, 100%, 50%, 1)"),
        ("oklch", "oklch(0.5 0.4 0)"),
    ],
)
def test_convert_color_targets(target, expected):
    res = cv.convert_color(Color("#ff0000", "hex"), cv.ConversionOptions(target_format=target))
    assert res.success is True
    assert res.error is None
    assert res.converted == expected
    assert res.format == target


def test_convert_color_hex_options():
    opts = cv.ConversionOptions(target_format="hex", uppercase=True, short_hex=True)
    assert cv.convert_color(Color("rgb(255, 255, 255)", "rgb"), opts).converted == "#FFF"


def test_convert_color_alpha_preservation():
    translucent = Color("rgba(255, 0, 0, 0.5)", "rgba")
    keep = cv.ConversionOptions(target_format="hex")
    drop = cv.ConversionOptions(target_format="hex", preserve_alpha=False)
    assert cv.convert_color(translucent, keep).converted == "#ff000080"
    assert cv.convert_color(translucent, drop).converted == "#ff0000"
    rgb_keep = cv.ConversionOptions(target_format="rgb")
    assert cv.convert_color(translucent, rgb_keep).converted == "rgba(255, 0, 0, 0.5)"


def test_convert_color_failure_keeps_original_value():
    bad = Color("nope", "unknown")
    res = cv.convert_color(bad)
    assert res.success is False
    assert res.converted == "nope"
    assert res.error == "Unable to parse color: nope"
    assert res.original is bad


def test_convert_color_unknown_target_fails_without_raising():
    res = cv.convert_color(Color("#fff", "hex"), cv.ConversionOptions(target_format="cmyk"))
    assert res.success is False
    assert res.converted == "#fff"
    assert "cmyk" in res.error


def test_convert_colors_preserves_order():
    colors = [Color("#000", "hex"), Color("bad", "unknown"), Color("#fff", "hex")]
    out = cv.convert_colors(colors, cv.ConversionOptions(target_format="rgb"))
    assert [r.converted for r in out] == ["rgb(0, 0, 0)", "bad", "rgb(255, 255, 255)"]
    assert [r.success for r in out] == [True, False, True]
