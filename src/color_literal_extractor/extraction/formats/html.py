"""
html.py
=======

Does: Extract color literals from HTML that appear in styling positions only:
      inside style="..." values, inside <style> blocks, or after a CSS color
      property keyword. Comments (<!-- -->) are followed across lines.
Returns: list[Color] ordered by line then column, unique per (value, line).
Used By: Orchestrator dispatch (html).
"""

from __future__ import annotations

import re
from typing import List

from color_literal_extractor.extraction.color.constants import HTML_PROPERTY_KEYWORDS
from color_literal_extractor.extraction.formats.scanning import (
    Predicate,
    Span,
    any_predicate,
    dedupe_by_value_line,
    in_spans,
    iter_color_tokens,
    make_color,
    scan_lines,
    track_delimited_spans,
)
from color_literal_extractor.extraction.types import Color

__all__ = ["extract_from_html", "HtmlScanner"]

_COMMENT_OPEN = re.compile(r"<!--")
_COMMENT_CLOSE = re.compile(r"-->")
_STYLE_OPEN = re.compile(r"<style\b[^>]*>", re.IGNORECASE)
_STYLE_CLOSE = re.compile(r"</style\s*>", re.IGNORECASE)
_INSIDE_TAG = re.compile(r"<[^>]*$")

_OPEN_STYLE_ATTR = re.compile(r"""style\s*=\s*["'][^"']*$""", re.IGNORECASE)
_PROPERTY_BEFORE = re.compile(
    r"(?:" + "|".join(re.escape(k) for k in HTML_PROPERTY_KEYWORDS) + r")\s*:\s*[^;]*$",
    re.IGNORECASE,
)


def in_style_attribute(line: str, index: int) -> bool:
    return bool(_OPEN_STYLE_ATTR.search(line[:index]))


def after_property_keyword(line: str, index: int) -> bool:
    return bool(_PROPERTY_BEFORE.search(line[:index]))


class HtmlScanner:
    """Line scanner carrying <!-- --> and <style> state between lines."""

    def __init__(self) -> None:
        self.in_comment = False
        self.in_style = False

    def __call__(self, line: str, line_no: int) -> List[Color]:
        comments, self.in_comment = track_delimited_spans(
            line, _COMMENT_OPEN, _COMMENT_CLOSE, self.in_comment
        )

        def inert_tag(index: int) -> bool:
            return in_spans(index, comments) or bool(_INSIDE_TAG.search(line[:index]))

        styles, self.in_style = track_delimited_spans(
            line, _STYLE_OPEN, _STYLE_CLOSE, self.in_style, skip_opener=inert_tag
        )

        def in_style_block(_line: str, index: int, _spans: List[Span] = styles) -> bool:
            return in_spans(index, _spans)

        predicates: List[Predicate] = [in_style_attribute, in_style_block, after_property_keyword]
        context = line.strip()
        return [
            make_color(value, line_no, idx, context)
            for idx, value in iter_color_tokens(line)
            if not in_spans(idx, comments) and any_predicate(predicates, line, idx)
        ]


def extract_from_html(content: str) -> List[Color]:
    """Does: Colors in style attributes, <style> blocks and property declarations."""
    return dedupe_by_value_line(scan_lines(content, HtmlScanner(), "html"))
