"""
javascript.py
=============

Does: Extract color literals from JavaScript/TypeScript lines that look like
      styling code (style keywords, CSS-in-JS markers, style objects, style
      variables, theme access). Comments and non-style strings are ignored.
      Two passes per line: raw color tokens, then quoted string literals whose
      content parses as a color.
Returns: list[Color] ordered by line then column, unique per (value, line).
Used By: Orchestrator dispatch (javascript/typescript).
"""

from __future__ import annotations

import re
from typing import Iterator, List, Tuple

from color_literal_extractor.extraction.color.constants import (
    JS_CSS_IN_JS_SOURCES,
    JS_OBJECT_STYLE_PROPERTIES,
    JS_STYLE_KEYWORDS,
    JS_STYLE_VARIABLE_NAMES,
)
from color_literal_extractor.extraction.color.conversion import detect_color_format, parse_color
from color_literal_extractor.extraction.formats.scanning import (
    Predicate,
    any_predicate,
    dedupe_by_value_line,
    in_block_comment,
    iter_color_tokens,
    make_color,
    scan_lines,
)
from color_literal_extractor.extraction.types import Color

__all__ = [
    "extract_from_javascript",
    "extract_from_typescript",
    "is_comment",
    "STYLE_PREDICATES",
]

_KEYWORDS_LOWER = tuple(k.lower() for k in JS_STYLE_KEYWORDS)
_CSS_IN_JS = tuple(re.compile(src) for src in JS_CSS_IN_JS_SOURCES)
_OPEN_OBJECT = re.compile(r"\{[^}]*$")
_OBJECT_STYLE_PROP = re.compile(
    r"(?:" + "|".join(JS_OBJECT_STYLE_PROPERTIES) + r")\s*:", re.IGNORECASE
)
_STYLE_VARIABLE = re.compile(
    r"(?:const|let|var)\s+(?:" + "|".join(JS_STYLE_VARIABLE_NAMES) + r")\w*\s*=",
    re.IGNORECASE,
)
_THEME_ACCESS = re.compile(r"(?:theme|colors|palette|style)\s*[.:]", re.IGNORECASE)
_STRING_LITERAL = re.compile(r"""(['"`])([^'"`]*?)\1""")


# ── Comment exclusion ────────────────────────────────────────────────────────
def is_comment(line: str, index: int) -> bool:
    """Does: True for matches after '//', inside an open '/*', or on comment lines."""
    stripped = line.lstrip()
    if stripped.startswith(("//", "/*", "*")):
        return True
    if "//" in line[:index]:
        return True
    return in_block_comment(line, index)


# ── Style-context predicates (evaluated in order) ────────────────────────────
def has_style_keyword(line: str, _index: int) -> bool:
    lowered = line.lower()
    return any(k in lowered for k in _KEYWORDS_LOWER)


def has_css_in_js_marker(line: str, _index: int) -> bool:
    return any(p.search(line) for p in _CSS_IN_JS)


def in_style_object(line: str, index: int) -> bool:
    return bool(_OPEN_OBJECT.search(line[:index]) and _OBJECT_STYLE_PROP.search(line))


def is_style_variable(line: str, _index: int) -> bool:
    return bool(_STYLE_VARIABLE.search(line))


def has_theme_access(line: str, _index: int) -> bool:
    return bool(_THEME_ACCESS.search(line))


STYLE_PREDICATES: Tuple[Predicate, ...] = (
    has_style_keyword,
    has_css_in_js_marker,
    in_style_object,
    is_style_variable,
    has_theme_access,
)


# ── Passes ───────────────────────────────────────────────────────────────────
def _string_literal_colors(line: str) -> Iterator[Tuple[int, str]]:
    for m in _STRING_LITERAL.finditer(line):
        raw = m.group(2)
        value = raw.strip()
        if not value or detect_color_format(value) == "unknown":
            continue
        if parse_color(value) is None:
            continue
        yield m.start(2) + (len(raw) - len(raw.lstrip())), value


def _scan_js_line(line: str, line_no: int) -> List[Color]:
    if not line.strip():
        return []
    context = line.strip()
    found: List[Color] = []
    candidates = list(iter_color_tokens(line)) + list(_string_literal_colors(line))
    for idx, value in candidates:
        if is_comment(line, idx):
            continue
        if any_predicate(STYLE_PREDICATES, line, idx):
            found.append(make_color(value, line_no, idx, context))
    return found


def extract_from_javascript(content: str) -> List[Color]:
    """Does: Style-context colors from JS/TS source (raw tokens + quoted literals)."""
    return dedupe_by_value_line(scan_lines(content, _scan_js_line, "javascript"))


def extract_from_typescript(content: str) -> List[Color]:
    return extract_from_javascript(content)
