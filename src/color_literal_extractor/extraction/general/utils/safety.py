"""
safety.py
=========

Does: Pre-extraction safety checks on raw content (size, line count, estimated
      color count, nested/at-rule complexity) driven by Settings thresholds.
Returns: SafetyResult(proceed, message, warnings).
Used By: Orchestrator callers and the CLI demo before running extraction.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from color_literal_extractor.extraction.color.constants import (
    SAFETY_COLOR_ESTIMATE_LIMIT,
    SAFETY_COMPLEX_PATTERN_LIMIT,
)
from color_literal_extractor.extraction.general.utils.log import debug
from color_literal_extractor.extraction.general.utils.settings import Settings, get_settings

__all__ = ["SafetyResult", "check_content_safety", "estimate_color_count", "count_complex_patterns"]

_COLOR_ESTIMATE_RE = re.compile(r"#[0-9a-fA-F]{3,8}\b|rgba?\(|hsla?\(")
_COMPLEX_RES = (
    re.compile(r"\{[^}]*\{"),   # nested selectors
    re.compile(r"@media"),
    re.compile(r"@keyframes"),
    re.compile(r"@function"),
    re.compile(r"@mixin"),
)


@dataclass(frozen=True)
class SafetyResult:
    proceed: bool
    message: Optional[str] = None
    warnings: Tuple[str, ...] = ()


def estimate_color_count(content: str) -> int:
    """Does: Rough count of hex and functional color tokens (no context checks)."""
    return len(_COLOR_ESTIMATE_RE.findall(content))


def count_complex_patterns(content: str) -> int:
    return sum(len(p.findall(content)) for p in _COMPLEX_RES)


def check_content_safety(content: str, settings: Optional[Settings] = None) -> SafetyResult:
    """Does: Decide whether extraction should run on `content` and collect advisories."""
    settings = settings or get_settings()
    if not settings.safety_enabled:
        return SafetyResult(proceed=True)

    size = len(content.encode("utf-8"))
    if size > settings.safety_file_size_warn_bytes:
        msg = (
            f"Content is {size} bytes, above the "
            f"{settings.safety_file_size_warn_bytes}-byte safety threshold"
        )
        debug(msg, "safety", level="WARNING")
        return SafetyResult(proceed=False, message=msg)

    warnings = []
    lines = content.count("\n") + 1
    if lines > settings.safety_large_output_lines_threshold:
        warnings.append(f"Large input: {lines} lines")
    estimated = estimate_color_count(content)
    if estimated > SAFETY_COLOR_ESTIMATE_LIMIT:
        warnings.append(f"High color count: about {estimated} colors")
    complex_count = count_complex_patterns(content)
    if complex_count > SAFETY_COMPLEX_PATTERN_LIMIT:
        warnings.append(f"Complex content: {complex_count} nested or at-rule patterns")

    for w in warnings:
        debug(w, "safety", level="WARNING")
    return SafetyResult(proceed=True, warnings=tuple(warnings))
