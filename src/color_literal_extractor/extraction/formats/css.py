"""
css.py
======

Does: Extract hex/rgb/rgba/hsl/hsla literals from CSS, SCSS and LESS sources,
      skipping tokens that sit inside a /* */ comment on their line.
Returns: list[Color] ordered by line then column; context is the trimmed line.
Used By: Orchestrator dispatch (css/scss/less and the unknown-type fallback).
"""

from __future__ import annotations

from typing import List

from color_literal_extractor.extraction.formats.scanning import (
    in_block_comment,
    iter_color_tokens,
    make_color,
    scan_lines,
)
from color_literal_extractor.extraction.types import Color

__all__ = ["extract_from_css", "extract_from_scss", "extract_from_less"]


def _scan_css_line(line: str, line_no: int) -> List[Color]:
    context = line.strip()
    return [
        make_color(value, line_no, idx, context)
        for idx, value in iter_color_tokens(line)
        if not in_block_comment(line, idx)
    ]


def extract_from_css(content: str) -> List[Color]:
    """Does: Every color token on every line, except those inside block comments."""
    return scan_lines(content, _scan_css_line, "css")


def extract_from_scss(content: str) -> List[Color]:
    return extract_from_css(content)


def extract_from_less(content: str) -> List[Color]:
    return extract_from_css(content)
