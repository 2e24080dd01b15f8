"""
formats.
=======

Does: Per-language color extractors sharing the line scanner in `scanning`.
Returns: `extract_from_<language>(content) -> list[Color]` functions; none of them raise.
Used By: Orchestrator dispatch and tests.
"""

from .css import extract_from_css, extract_from_less, extract_from_scss
from .html import extract_from_html
from .javascript import extract_from_javascript, extract_from_typescript
from .stylus import extract_from_stylus
from .svg import extract_from_svg

__all__ = [
    "extract_from_css",
    "extract_from_scss",
    "extract_from_less",
    "extract_from_stylus",
    "extract_from_html",
    "extract_from_javascript",
    "extract_from_typescript",
    "extract_from_svg",
]
