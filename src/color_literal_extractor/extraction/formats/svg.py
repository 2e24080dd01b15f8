"""
svg.py
======

Does: Extract paint values from SVG: presentation attributes (fill, stroke,
      stop-color, flood-color, lighting-color, color) plus raw color tokens in
      style attributes, <style> blocks and element text. XML comments are
      followed across lines; tokens inside url(...) references are skipped.
Returns: list[Color] ordered by line then column, unique per (value, line).
Used By: Orchestrator dispatch (svg, xml).
"""

from __future__ import annotations

import re
from typing import List

from color_literal_extractor.extraction.color.constants import (
    SVG_COLOR_ATTRIBUTES,
    SVG_NAMED_VALUES,
)
from color_literal_extractor.extraction.color.conversion import detect_color_format
from color_literal_extractor.extraction.color.vocab import get_stylus_color_names
from color_literal_extractor.extraction.formats.scanning import (
    dedupe_by_value_line,
    in_spans,
    iter_color_tokens,
    make_color,
    scan_lines,
    track_delimited_spans,
)
from color_literal_extractor.extraction.types import Color

__all__ = ["extract_from_svg", "is_valid_svg_color", "SvgScanner"]

_COMMENT_OPEN = re.compile(r"<!--")
_COMMENT_CLOSE = re.compile(r"-->")
_ATTRIBUTE_RE = re.compile(
    r"(?<![\w-])(?:" + "|".join(re.escape(a) for a in SVG_COLOR_ATTRIBUTES) + r")"
    r"""\s*=\s*["'](?P<value>[^"']+)["']"""
)
_HEX_VALUE = re.compile(r"^#[0-9a-fA-F]{3,8}$")
_OPEN_URL = re.compile(r"url\(\s*[^)]*$", re.IGNORECASE)


def is_valid_svg_color(value: str) -> bool:
    """Does: Accept hex, SVG paint keywords, and rgb/hsl/url()/inherit values."""
    v = value.strip()
    if _HEX_VALUE.match(v):
        return True
    lowered = v.lower()
    if lowered in SVG_NAMED_VALUES:
        return True
    return lowered.startswith(("rgb", "hsl", "url(", "inherit"))


def _attribute_format(value: str) -> str:
    fmt = detect_color_format(value)
    if fmt == "unknown" and value.lower() in get_stylus_color_names():
        return "named"
    return fmt


class SvgScanner:
    """Line scanner carrying XML comment state between lines."""

    def __init__(self) -> None:
        self.in_comment = False

    def __call__(self, line: str, line_no: int) -> List[Color]:
        comments, self.in_comment = track_delimited_spans(
            line, _COMMENT_OPEN, _COMMENT_CLOSE, self.in_comment
        )
        context = line.strip()
        found: List[Color] = []

        for m in _ATTRIBUTE_RE.finditer(line):
            idx = m.start("value")
            raw = m.group("value")
            value = raw.strip()
            if in_spans(m.start(), comments) or not is_valid_svg_color(value):
                continue
            idx += len(raw) - len(raw.lstrip())
            found.append(make_color(value, line_no, idx, context, _attribute_format(value)))

        for idx, value in iter_color_tokens(line):
            if in_spans(idx, comments) or _OPEN_URL.search(line[:idx]):
                continue
            found.append(make_color(value, line_no, idx, context))
        return found


def extract_from_svg(content: str) -> List[Color]:
    """Does: Attribute paints plus raw tokens, outside comments and url() references."""
    return dedupe_by_value_line(scan_lines(content, SvgScanner(), "svg"))
