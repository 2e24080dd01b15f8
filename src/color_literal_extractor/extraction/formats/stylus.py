"""
stylus.py
=========

Does: Extract colors from Stylus sources: the CSS token set plus bare named colors
      in variable assignments, property values, and color-function arguments.
Returns: list[Color] ordered by line then column, one entry per position.
Used By: Orchestrator dispatch (stylus).
"""

from __future__ import annotations

import re
from typing import Dict, Iterator, List, Tuple

from color_literal_extractor.extraction.color.constants import (
    STYLUS_COLOR_FUNCTIONS,
    STYLUS_COLOR_PROPERTIES,
)
from color_literal_extractor.extraction.color.vocab import get_stylus_color_names
from color_literal_extractor.extraction.formats.scanning import (
    in_block_comment,
    iter_color_tokens,
    make_color,
    scan_lines,
)
from color_literal_extractor.extraction.types import Color

__all__ = ["extract_from_stylus", "stylus_context_kind"]

# `$accent = red`, `accent = red`, `$accent: red`
_VARIABLE_RE = re.compile(r"^\s*\$?[\w-]+\s*(?:=|:)\s*(?P<value>[^;\n]+)")
# `color red`, `border: 1px solid black`, `background-color tomato`
_PROPERTY_RE = re.compile(
    r"^\s*(?:" + "|".join(re.escape(p) for p in STYLUS_COLOR_PROPERTIES) + r")(?:-[\w-]+)?"
    r"\s*:?\s+(?P<value>[^;\n]+)"
)
# `lighten(red, 10%)`
_FUNCTION_RE = re.compile(
    r"(?<![\w-])(?:" + "|".join(re.escape(f) for f in STYLUS_COLOR_FUNCTIONS) + r")"
    r"\s*\(\s*(?P<value>[^,)]+)"
)
_WORD_RE = re.compile(r"(?<![#\w-])[A-Za-z]+(?![\w-])")


def stylus_context_kind(line: str) -> str:
    """Does: Label a Stylus line as variable, function, property or declaration."""
    if _FUNCTION_RE.search(line):
        return "function"
    if re.match(r"^\s*\$[\w-]+\s*=", line) or re.match(r"^\s*[\w-]+\s*=", line):
        return "variable"
    if _PROPERTY_RE.match(line):
        return "property"
    return "declaration"


def _named_in(segment: str, offset: int) -> Iterator[Tuple[int, str]]:
    names = get_stylus_color_names()
    for m in _WORD_RE.finditer(segment):
        if m.group(0).lower() in names:
            yield offset + m.start(), m.group(0)


def _named_candidates(line: str) -> Iterator[Tuple[int, str]]:
    for m in _FUNCTION_RE.finditer(line):
        yield from _named_in(m.group("value"), m.start("value"))
    m = _PROPERTY_RE.match(line) or _VARIABLE_RE.match(line)
    if m:
        yield from _named_in(m.group("value"), m.start("value"))


def _scan_stylus_line(line: str, line_no: int) -> List[Color]:
    context = f"Stylus {stylus_context_kind(line)}"
    by_pos: Dict[int, Color] = {}
    for idx, value in iter_color_tokens(line):
        if not in_block_comment(line, idx):
            by_pos.setdefault(idx, make_color(value, line_no, idx, context))
    if line.lstrip().startswith("//"):
        return list(by_pos.values())
    for idx, value in _named_candidates(line):
        if idx in by_pos or in_block_comment(line, idx) or "//" in line[:idx]:
            continue
        by_pos[idx] = make_color(value, line_no, idx, context, fmt="named")
    return list(by_pos.values())


def extract_from_stylus(content: str) -> List[Color]:
    """Does: CSS tokens plus named colors in Stylus value positions (block comments skipped)."""
    return scan_lines(content, _scan_stylus_line, "stylus")
