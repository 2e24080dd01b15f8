"""
scanning.py
===========

Does: Shared line-scanning helpers for every format extractor: token finders for
      hex/rgb/rgba/hsl/hsla literals, comment-span tracking, and small boolean
      context predicates that extractors combine in order.
Returns: Token tuples, span lists, booleans and Color records.
Used By: css, stylus, html, javascript and svg extractors.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from color_literal_extractor.extraction.color.constants import TOKEN_SOURCES
from color_literal_extractor.extraction.color.conversion import detect_color_format
from color_literal_extractor.extraction.general.utils.log import debug
from color_literal_extractor.extraction.types import Color, Position

__all__ = [
    "Token",
    "Span",
    "Predicate",
    "iter_color_tokens",
    "in_block_comment",
    "in_spans",
    "track_delimited_spans",
    "any_predicate",
    "make_color",
    "scan_lines",
    "dedupe_by_value_line",
]

logger = logging.getLogger(__name__)

Token = Tuple[int, str]           # (0-based start index, literal)
Span = Tuple[int, int]            # [start, end) within a line
Predicate = Callable[[str, int], bool]

_TOKEN_PATTERNS = tuple((name, re.compile(src)) for name, src in TOKEN_SOURCES)


# ── 1) Tokens ────────────────────────────────────────────────────────────────
def iter_color_tokens(line: str) -> Iterator[Token]:
    """Does: Yield (index, literal) for every functional/hex token on a line, left to right."""
    found: List[Token] = []
    for _name, pattern in _TOKEN_PATTERNS:
        found.extend((m.start(), m.group(0)) for m in pattern.finditer(line))
    found.sort(key=lambda t: t[0])
    yield from found


# ── 2) Comment / block spans ─────────────────────────────────────────────────
def in_block_comment(line: str, index: int) -> bool:
    """Does: True when an unclosed '/*' precedes `index` on the same line."""
    before = line[:index]
    return before.rfind("/*") > before.rfind("*/")


def in_spans(index: int, spans: Sequence[Span]) -> bool:
    return any(start <= index < end for start, end in spans)


def track_delimited_spans(
    line: str,
    opener: re.Pattern[str],
    closer: re.Pattern[str],
    inside: bool,
    skip_opener: Optional[Callable[[int], bool]] = None,
) -> Tuple[List[Span], bool]:
    """Does: Compute the parts of `line` inside an opener/closer pair.

    `inside` carries state from the previous line; the updated state is returned
    so callers can follow blocks (comments, <style>) across lines.
    Openers whose start index satisfies `skip_opener` are not treated as openers.
    Returns: (spans, inside_after_line).
    """
    spans: List[Span] = []
    pos = 0
    start: Optional[int] = 0 if inside else None
    while pos <= len(line):
        if start is None:
            m = opener.search(line, pos)
            if not m:
                break
            if skip_opener is not None and skip_opener(m.start()):
                pos = m.end()
                continue
            start, pos = m.start(), m.end()
        else:
            m = closer.search(line, pos)
            if not m:
                spans.append((start, len(line)))
                return spans, True
            spans.append((start, m.end()))
            start, pos = None, m.end()
    if start is not None:
        spans.append((start, len(line)))
        return spans, True
    return spans, False


# ── 3) Predicates ────────────────────────────────────────────────────────────
def any_predicate(predicates: Iterable[Predicate], line: str, index: int) -> bool:
    """Does: Evaluate predicates in order, stopping at the first that holds."""
    return any(p(line, index) for p in predicates)


# ── 4) Records ───────────────────────────────────────────────────────────────
def make_color(
    value: str,
    line_no: int,
    index: int,
    context: Optional[str],
    fmt: Optional[str] = None,
) -> Color:
    """Does: Build a Color with a 1-based position; format defaults to prefix detection."""
    return Color(
        value=value,
        format=fmt or detect_color_format(value),  # type: ignore[arg-type]
        position=Position(line=line_no, column=index + 1),
        context=context,
    )


def scan_lines(
    content: str,
    scan_line: Callable[[str, int], List[Color]],
    topic: str,
) -> List[Color]:
    """Does: Run `scan_line(line, line_no)` on each line, skipping lines that fail.

    Returns: Colors ordered by line, then column (stable).
    """
    colors: List[Color] = []
    if not isinstance(content, str) or not content:
        return colors
    for line_no, line in enumerate(content.split("\n"), start=1):
        try:
            found = scan_line(line, line_no)
        except Exception as e:
            debug(f"line {line_no} skipped: {e}", topic, level="WARNING")
            logger.debug("Line %d skipped", line_no, exc_info=True)
            continue
        found.sort(key=lambda c: c.position.column if c.position else 0)
        colors.extend(found)
    return colors


def dedupe_by_value_line(colors: Iterable[Color]) -> List[Color]:
    """Does: Keep the first Color for each (value, line) pair."""
    seen: set[Tuple[str, int]] = set()
    out: List[Color] = []
    for c in colors:
        key = (c.value, c.position.line if c.position else 0)
        if key in seen:
            continue
        seen.add(key)
        out.append(c)
    return out
