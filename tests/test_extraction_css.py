# tests/test_extraction_css.py


from __future__ import annotations

import importlib

import pytest

"""
css / scss / less / stylus extractor tests
==========================================

Does: Token extraction with block-comment exclusion, 1-based positions,
      trimmed-line context, per-line failure isolation, and Stylus named colors.
"""

css_mod = importlib.import_module("color_literal_extractor.extraction.formats.css")
stylus_mod = importlib.import_module("color_literal_extractor.extraction.formats.stylus")


# ──────────────────────────────────────────────────────────────────────────────
# CSS family
# ──────────────────────────────────────────────────────────────────────────────
def test_css_all_formats_in_line_order():
    src = (
        ".a { color: #ff0000; background: rgb(0, 255, 0); }\n"
        ".b { border-color: rgba(0, 0, 255, 0.5); fill: hsl(120, 100%, 50%); }\n"
        ".c { outline-color: hsla(60, 100%, 50%, 0.8); }"
    )
    result = css_mod.extract_from_css(src)
    assert [(c.value, c.format) for c in result] == [
        ("#ff0000", "hex"),
        ("rgb(0, 255, 0)", "rgb"),
        ("rgba(0, 0, 255, 0.5)", "rgba"),
        ("hsl(120, 100%, 50%)", "hsl"),
        ("hsla(60, 100%, 50%, 0.8)", "hsla"),
    ]
    assert [c.position.line for c in result] == [1, 1, 2, 2, 3]


def test_css_position_and_context():
    [color] = css_mod.extract_from_css("  .a { color: #ff0000; }  ")
    assert color.position.line == 1
    assert color.position.column == 15
    assert color.context == ".a { color: #ff0000; }"


def test_css_skips_tokens_inside_block_comment():
    result = css_mod.extract_from_css("/* #000 */ .b { color: #fff; } /* rgb(1, 2, 3)")
    assert [c.value for c in result] == ["#fff"]


def test_css_keeps_repeats_on_same_line():
    result = css_mod.extract_from_css(".a { color: #fff; border-color: #fff; }")
    assert [c.value for c in result] == ["#fff", "#fff"]


@pytest.mark.parametrize("bad", ["#gggggg", "#ab", "rgb(1, 2)", "hsl(10, 20, 30)"])
def test_css_ignores_non_literals(bad):
    assert css_mod.extract_from_css(f".a {{ color: {bad}; }}") == []


def test_css_extracts_out_of_range_literal():
    assert [c.value for c in css_mod.extract_from_css("a { color: rgb(300, 0, 0); }")] == [
        "rgb(300, 0, 0)"
    ]


def test_css_empty_input():
    assert css_mod.extract_from_css("") == []
    assert css_mod.extract_from_css("\n\n") == []


def test_scss_and_less_share_css_rules():
    src = "$brand: #336699;\n@accent: rgba(0, 0, 0, 0.2);"
    expected = css_mod.extract_from_css(src)
    assert css_mod.extract_from_scss(src) == expected
    assert css_mod.extract_from_less(src) == expected
    assert [c.value for c in expected] == ["#336699", "rgba(0, 0, 0, 0.2)"]


def test_failing_line_is_skipped(monkeypatch):
    real = css_mod.iter_color_tokens

    def flaky(line):
        if "boom" in line:
            raise ValueError("bad line")
        return real(line)

    monkeypatch.setattr(css_mod, "iter_color_tokens", flaky)
    src = "a { color: #111; }\nboom { color: #222; }\nb { color: #333; }"
    result = css_mod.extract_from_css(src)
    assert [c.value for c in result] == ["#111", "#333"]
    assert [c.position.line for c in result] == [1, 3]


# ──────────────────────────────────────────────────────────────────────────────
# Stylus
# ──────────────────────────────────────────────────────────────────────────────
STYLUS_SAMPLE = "\n".join(
    [
        "$primary = #ff0000",
        "accent = red",
        "  color white",
        "  background lighten(blue, 10%)",
        "  border 1px solid black",
    ]
)


def test_stylus_tokens_and_named_colors():
    result = stylus_mod.extract_from_stylus(STYLUS_SAMPLE)
    assert [(c.value, c.format) for c in result] == [
        ("#ff0000", "hex"),
        ("red", "named"),
        ("white", "named"),
        ("blue", "named"),
        ("black", "named"),
    ]


def test_stylus_contexts():
    result = stylus_mod.extract_from_stylus(STYLUS_SAMPLE)
    assert [c.context for c in result] == [
        "Stylus variable",
        "Stylus variable",
        "Stylus property",
        "Stylus function",
        "Stylus property",
    ]


def test_stylus_named_color_positions():
    result = stylus_mod.extract_from_stylus("accent = red\n  color white")
    assert [(c.position.line, c.position.column) for c in result] == [(1, 10), (2, 9)]


def test_stylus_ignores_line_comments_and_plain_words():
    src = "// color red\n  display block\n  font-family serif"
    assert stylus_mod.extract_from_stylus(src) == []


def test_stylus_transparent_is_named():
    [color] = stylus_mod.extract_from_stylus("  background transparent")
    assert color.value == "transparent"
    assert color.format == "named"


@pytest.mark.parametrize(
    "line, kind",
    [
        ("  background lighten(red, 10%)", "function"),
        ("$x = 1", "variable"),
        ("  color red", "property"),
        ("  .btn", "declaration"),
    ],
)
def test_stylus_context_kind(line, kind):
    assert stylus_mod.stylus_context_kind(line) == kind
