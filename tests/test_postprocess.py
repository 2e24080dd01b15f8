# tests/test_postprocess.py


from __future__ import annotations

import importlib

import pytest

"""
post-processing tests
=====================

Does: sort modes (stable, blank handling), dedupe on trimmed text, filter
      exclusion reasons, and validation (format hints via fuzzy matching,
      contrast levels, accessibility hints, custom rules).
"""

sort_mod = importlib.import_module("color_literal_extractor.extraction.postprocess.sort")
dedupe_mod = importlib.import_module("color_literal_extractor.extraction.postprocess.dedupe")
filter_mod = importlib.import_module("color_literal_extractor.extraction.postprocess.filter")
validate_mod = importlib.import_module("color_literal_extractor.extraction.postprocess.validate")
types_mod = importlib.import_module("color_literal_extractor.extraction.types")


def C(value, fmt="hex"):
    return types_mod.Color(value, fmt)


# ──────────────────────────────────────────────────────────────────────────────
# Sort
# ──────────────────────────────────────────────────────────────────────────────
def test_sort_off_returns_copy():
    values = ["#00f", "", "#f00"]
    out = sort_mod.sort_colors(values, "off")
    assert out == values
    assert out is not values


@pytest.mark.parametrize(
    "mode, expected",
    [
        ("hue-asc", ["#ff0000", "junk", "#00ff00", "#0000ff"]),
        ("hue-desc", ["#0000ff", "#00ff00", "#ff0000", "junk"]),
        ("hex-asc", ["#0000ff", "#00ff00", "#ff0000", "junk"]),
        ("hex-desc", ["junk", "#ff0000", "#00ff00", "#0000ff"]),
    ],
)
def test_sort_modes(mode, expected):
    values = ["#0000ff", "#ff0000", "", "#00ff00", "junk"]
    assert sort_mod.sort_colors(values, mode) == expected


def test_sort_by_lightness_and_saturation():
    values = ["#ffffff", "#000000", "#808080"]
    assert sort_mod.sort_colors(values, "lightness-asc") == ["#000000", "#808080", "#ffffff"]
    vivid = ["#808080", "#ff0000", "hsl(0, 50%, 50%)"]
    assert sort_mod.sort_colors(vivid, "saturation-desc") == [
        "#ff0000", "hsl(0, 50%, 50%)", "#808080",
    ]


def test_sort_hex_is_case_insensitive_and_stable():
    assert sort_mod.sort_colors(["#B00", "#a00", "#A00"], "hex-asc") == ["#a00", "#A00", "#B00"]


def test_sort_unknown_mode_keeps_order_without_blanks():
    assert sort_mod.sort_colors(["#f00", " ", "#00f"], "rainbow") == ["#f00", "#00f"]


# ──────────────────────────────────────────────────────────────────────────────
# Dedupe
# ──────────────────────────────────────────────────────────────────────────────
def test_dedupe_keeps_first_trimmed_value():
    assert dedupe_mod.dedupe_colors(["#fff", " #fff ", "", "#000", "#fff"]) == ["#fff", "#000"]


def test_dedupe_is_case_sensitive():
    assert dedupe_mod.dedupe_colors(["#FFF", "#fff"]) == ["#FFF", "#fff"]


# ──────────────────────────────────────────────────────────────────────────────
# Filter
# ──────────────────────────────────────────────────────────────────────────────
def _filter(colors, **opts):
    return filter_mod.filter_colors(colors, filter_mod.FilterOptions(**opts))


def test_filter_no_options_keeps_everything():
    colors = [C("#fff"), C("bogus", "unknown")]
    result = filter_mod.filter_colors(colors)
    assert result.filtered == tuple(colors)
    assert result.excluded == ()
    assert result.summary.exclusion_reasons == ()


def test_filter_formats():
    colors = [C("#fff"), C("rgb(1, 2, 3)", "rgb"), C("red", "named")]
    result = _filter(colors, formats=("hex", "rgb"))
    assert [c.value for c in result.filtered] == ["#fff", "rgb(1, 2, 3)"]
    assert result.summary.exclusion_reasons == (("format not included", 1),)
    result = _filter(colors, exclude_formats=("named",))
    assert [c.value for c in result.excluded] == ["red"]
    assert result.summary.exclusion_reasons == (("format excluded", 1),)


def test_filter_lightness_and_saturation_bounds():
    colors = [C("#000000"), C("#ffffff"), C("#ff0000"), C("#808080")]
    result = _filter(colors, min_lightness=10, max_lightness=90)
    assert [c.value for c in result.filtered] == ["#ff0000", "#808080"]
    assert dict(result.summary.exclusion_reasons) == {"too dark": 1, "too light": 1}
    result = _filter(colors, min_saturation=10)
    assert [c.value for c in result.filtered] == ["#ff0000"]
    assert dict(result.summary.exclusion_reasons) == {"too muted": 3}
    result = _filter(colors, max_saturation=50)
    assert dict(result.summary.exclusion_reasons) == {"too vibrant": 1}


def test_filter_hue_range_is_inclusive():
    colors = [C("#ff0000"), C("#00ff00"), C("#0000ff")]
    result = _filter(colors, hue_range=(0, 120))
    assert [c.value for c in result.filtered] == ["#ff0000", "#00ff00"]
    assert result.summary.exclusion_reasons == (("hue out of range", 1),)


def test_filter_unparseable_values_skip_hsl_checks():
    result = _filter([C("bogus", "unknown")], min_lightness=50)
    assert result.summary.kept == 1


def test_filter_duplicates_invalid_and_transparent():
    colors = [
        C("#ff0000"),
        C("#FF0000"),
        C("rgba(0, 0, 0, 0)", "rgba"),
        C("transparent", "named"),
        C("#11223300"),
        C("bogus", "unknown"),
    ]
    result = _filter(colors, exclude_duplicates=True, exclude_invalid=True,
                     exclude_transparent=True)
    assert [c.value for c in result.filtered] == ["#ff0000"]
    reasons = dict(result.summary.exclusion_reasons)
    assert reasons["duplicate"] == 1
    assert reasons["transparent"] == 3
    assert reasons["invalid format"] == 2
    assert result.summary.total == 6
    assert result.summary.kept == 1
    assert result.summary.excluded == 5


def test_filter_custom_pattern():
    colors = [C("#FF0000"), C("#000000")]
    result = _filter(colors, custom_pattern="^#ff")
    assert [c.value for c in result.filtered] == ["#FF0000"]
    assert result.summary.exclusion_reasons == (("pattern mismatch", 1),)


def test_filter_invalid_pattern_is_ignored():
    colors = [C("#FF0000"), C("#000000")]
    assert _filter(colors, custom_pattern="(").summary.kept == 2


@pytest.mark.parametrize(
    "value, expected",
    [
        ("transparent", True),
        ("rgba(1, 2, 3, 0)", True),
        ("hsla(1, 2%, 3%, 0.0)", True),
        ("#12345600", True),
        ("rgba(1, 2, 3, 0.5)", False),
        ("#123456ff", False),
        ("#000", False),
    ],
)
def test_is_transparent(value, expected):
    assert filter_mod.is_transparent(value) is expected


# ──────────────────────────────────────────────────────────────────────────────
# Validate
# ──────────────────────────────────────────────────────────────────────────────
def test_suggest_color_name():
    assert validate_mod.suggest_color_name("gren") == "green"
    assert validate_mod.suggest_color_name("green") is None
    assert validate_mod.suggest_color_name("#fff") is None
    assert validate_mod.suggest_color_name("zzzzzz") is None


def test_validate_format_issues_and_summary():
    colors = [C("#ff0000"), C("gren", "unknown"), C("#ff", "unknown")]
    report = validate_mod.validate_colors(colors)
    ok, typo, short = report.colors
    assert ok.valid is True
    assert ok.issues == ()
    assert typo.valid is False
    assert typo.issues[0].message == "Invalid color format: gren"
    assert typo.suggestions == ("Did you mean 'green' (#008000)?",)
    assert short.suggestions == ("Use a valid color format (hex, rgb, hsl, etc.)",)
    s = report.summary
    assert (s.total, s.valid, s.invalid, s.errors, s.warnings) == (3, 1, 2, 2, 0)
    assert report.timestamp


def test_validate_allowed_formats_is_a_warning():
    opts = validate_mod.ValidationOptions(allowed_formats=("hex",))
    [res] = validate_mod.validate_colors([C("rgb(1, 2, 3)", "rgb")], opts).colors
    assert res.valid is True
    [issue] = res.issues
    assert issue.severity == "warning"
    assert issue.message == "Format RGB not in allowed formats"
    assert issue.suggestion == "Use one of: HEX"


def test_validate_contrast_levels():
    opts = validate_mod.ValidationOptions(check_contrast=True, contrast_background="#ffffff")
    black, mid, low = validate_mod.validate_colors(
        [C("#000000"), C("#767676"), C("#777777")], opts
    ).colors

    assert black.accessibility_level == "AAA"
    assert black.contrast_ratio == pytest.approx(21.0)
    assert black.issues == ()

    assert mid.accessibility_level == "AA"
    [info] = mid.issues
    assert info.severity == "info"
    assert "fails WCAG AAA (minimum 7.0:1)" in info.message

    assert low.accessibility_level == "fail"
    [warn] = low.issues
    assert warn.severity == "warning"
    assert warn.message == "Contrast ratio 4.48:1 fails WCAG AA (minimum 4.5:1)"


def test_validate_contrast_needs_background():
    opts = validate_mod.ValidationOptions(check_contrast=True)
    [res] = validate_mod.validate_colors([C("#000000")], opts).colors
    assert res.contrast_ratio is None
    assert res.accessibility_level is None


def test_validate_accessibility_hints():
    opts = validate_mod.ValidationOptions(check_accessibility=True)
    light, dark, gray = validate_mod.validate_colors(
        [C("#fefefe"), C("#000000"), C("#808080")], opts
    ).colors
    assert light.issues[0].message == "Very light color may be difficult to see"
    assert dark.issues[0].message == "Very dark color may be difficult to see"
    assert gray.issues[0].severity == "info"
    assert all(r.valid for r in (light, dark, gray))


def test_validate_color_blindness_hints():
    opts = validate_mod.ValidationOptions(check_color_blindness=True)
    red, green, blue = validate_mod.validate_colors(
        [C("#ff0000"), C("#00ff00"), C("#0000ff")], opts
    ).colors
    assert red.issues[0].message.startswith("Red colors")
    assert green.issues[0].message.startswith("Green colors")
    assert blue.issues == ()


def test_validate_custom_rules():
    def explode(_value):
        raise RuntimeError("rule bug")

    rules = (
        validate_mod.ValidationRule("no-hex", "Avoid hex", lambda v: not v.startswith("#"),
                                    severity="error", suggestion="Use a token"),
        validate_mod.ValidationRule("broken", "Always raises", explode),
    )
    opts = validate_mod.ValidationOptions(custom_rules=rules)
    [res] = validate_mod.validate_colors([C("#fff")], opts).colors
    assert res.valid is False
    [issue] = res.issues
    assert issue.type == "custom"
    assert issue.message == "no-hex: Avoid hex"
    assert res.suggestions == ("Use a token",)
