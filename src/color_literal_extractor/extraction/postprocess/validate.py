"""
validate.py
===========

Does: Check Colors for well-formed syntax, allowed formats, WCAG contrast against a
      background, visibility hints, red/green color-blindness hints and caller rules.
      Misspelled keywords ("gren") get a closest-CSS-name suggestion via rapidfuzz.
Returns: ValidationReport with per-color results and summary counts.
Used By: CLI demo and editor commands.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Tuple

from rapidfuzz import fuzz, process

from color_literal_extractor.extraction.color.constants import WCAG_AA, WCAG_AAA
from color_literal_extractor.extraction.color.conversion import (
    RGBColor,
    get_contrast_ratio,
    is_well_formed,
    parse_color_to_hsl,
    rgb_to_hex,
)
from color_literal_extractor.extraction.color.vocab import css3_name_to_rgb, get_css3_color_names
from color_literal_extractor.extraction.types import Color

__all__ = [
    "ValidationRule",
    "ValidationOptions",
    "ValidationIssue",
    "ColorValidationResult",
    "ValidationSummary",
    "ValidationReport",
    "suggest_color_name",
    "validate_colors",
]

logger = logging.getLogger(__name__)

_WORD = re.compile(r"^[A-Za-z]+$")
_FUZZY_CUTOFF = 80

_VISUAL_CUES = "Consider using additional visual cues (patterns, shapes) alongside color"


# ── Records ──────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ValidationRule:
    name: str
    description: str
    test: Callable[[str], bool]
    severity: str = "warning"  # error | warning | info
    suggestion: Optional[str] = None


@dataclass(frozen=True)
class ValidationOptions:
    check_contrast: bool = False
    contrast_background: Optional[str] = None
    min_contrast_aa: Optional[float] = WCAG_AA
    min_contrast_aaa: Optional[float] = WCAG_AAA
    check_format: bool = True
    check_accessibility: bool = False
    check_color_blindness: bool = False
    allowed_formats: Optional[Tuple[str, ...]] = None
    custom_rules: Tuple[ValidationRule, ...] = ()


@dataclass(frozen=True)
class ValidationIssue:
    type: str  # format | contrast | accessibility | custom
    severity: str  # error | warning | info
    message: str
    suggestion: Optional[str] = None


@dataclass(frozen=True)
class ColorValidationResult:
    color: Color
    valid: bool
    issues: Tuple[ValidationIssue, ...]
    suggestions: Tuple[str, ...]
    contrast_ratio: Optional[float] = None
    accessibility_level: Optional[str] = None  # AA | AAA | fail


@dataclass(frozen=True)
class ValidationSummary:
    total: int
    valid: int
    invalid: int
    warnings: int
    errors: int


@dataclass(frozen=True)
class ValidationReport:
    colors: Tuple[ColorValidationResult, ...]
    summary: ValidationSummary
    options: ValidationOptions
    timestamp: str


# =============================================================================
# 1) CHECKS
# =============================================================================
def suggest_color_name(value: str) -> Optional[str]:
    """Does: Closest CSS3 keyword for a word-like value (None when nothing is close)."""
    word = value.strip().lower()
    if not _WORD.match(word):
        return None
    names = get_css3_color_names()
    if word in names:
        return None
    match = process.extractOne(
        word, sorted(names), scorer=fuzz.ratio, score_cutoff=_FUZZY_CUTOFF
    )
    return match[0] if match else None


def _format_issues(color: Color, options: ValidationOptions) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    if not is_well_formed(color.value.lower()):
        suggestion = "Use a valid color format (hex, rgb, hsl, etc.)"
        near = suggest_color_name(color.value)
        if near:
            rgb = css3_name_to_rgb(near)
            hex_hint = f" ({rgb_to_hex(RGBColor(*rgb))})" if rgb else ""
            suggestion = f"Did you mean '{near}'{hex_hint}?"
        issues.append(ValidationIssue(
            "format", "error", f"Invalid color format: {color.value}", suggestion
        ))
    if options.allowed_formats is not None and color.format not in options.allowed_formats:
        allowed = ", ".join(f.upper() for f in options.allowed_formats)
        issues.append(ValidationIssue(
            "format", "warning",
            f"Format {color.format.upper()} not in allowed formats",
            f"Use one of: {allowed}",
        ))
    return issues


def _contrast_issues(
    color: Color, options: ValidationOptions
) -> Tuple[List[ValidationIssue], float, Optional[str]]:
    ratio = get_contrast_ratio(color.value, options.contrast_background or "")
    issues: List[ValidationIssue] = []
    level: Optional[str] = None
    aa, aaa = options.min_contrast_aa, options.min_contrast_aaa

    if aa:
        if ratio < aa:
            level = "fail"
            issues.append(ValidationIssue(
                "contrast", "warning",
                f"Contrast ratio {ratio:.2f}:1 fails WCAG AA (minimum {aa}:1)",
                "Increase contrast by making the color darker or lighter",
            ))
        else:
            level = "AA"
    if aaa:
        if ratio < aaa:
            if level != "fail":
                issues.append(ValidationIssue(
                    "contrast", "info",
                    f"Contrast ratio {ratio:.2f}:1 fails WCAG AAA (minimum {aaa}:1)",
                    "For AAA compliance, increase contrast further",
                ))
        else:
            level = "AAA"
    return issues, ratio, level


def _accessibility_issues(value: str) -> List[ValidationIssue]:
    hsl = parse_color_to_hsl(value)
    if hsl is None:
        return []
    issues: List[ValidationIssue] = []
    if hsl.l > 95:
        issues.append(ValidationIssue(
            "accessibility", "warning", "Very light color may be difficult to see",
            "Consider using a darker shade for better visibility",
        ))
    if hsl.l < 5:
        issues.append(ValidationIssue(
            "accessibility", "warning", "Very dark color may be difficult to see",
            "Consider using a lighter shade for better visibility",
        ))
    if hsl.s < 5 and 40 < hsl.l < 60:
        issues.append(ValidationIssue(
            "accessibility", "info", "Low saturation color may appear gray to some users",
            "Consider increasing saturation for better color distinction",
        ))
    return issues


def _color_blindness_issues(value: str) -> List[ValidationIssue]:
    hsl = parse_color_to_hsl(value)
    if hsl is None or hsl.s <= 50:
        return []
    issues: List[ValidationIssue] = []
    if hsl.h <= 30 or hsl.h >= 330:
        issues.append(ValidationIssue(
            "accessibility", "info",
            "Red colors may be problematic for users with red-green color blindness",
            _VISUAL_CUES,
        ))
    if 90 <= hsl.h <= 150:
        issues.append(ValidationIssue(
            "accessibility", "info",
            "Green colors may be problematic for users with red-green color blindness",
            _VISUAL_CUES,
        ))
    return issues


def _custom_issues(value: str, rules: Sequence[ValidationRule]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for rule in rules:
        try:
            passed = rule.test(value)
        except Exception:
            logger.debug("Validation rule %r raised; ignored", rule.name, exc_info=True)
            continue
        if not passed:
            issues.append(ValidationIssue(
                "custom", rule.severity, f"{rule.name}: {rule.description}", rule.suggestion
            ))
    return issues


# =============================================================================
# 2) REPORT
# =============================================================================
def _validate_one(color: Color, options: ValidationOptions) -> ColorValidationResult:
    issues: List[ValidationIssue] = []
    ratio: Optional[float] = None
    level: Optional[str] = None

    if options.check_format:
        issues.extend(_format_issues(color, options))
    if options.check_contrast and options.contrast_background:
        contrast, ratio, level = _contrast_issues(color, options)
        issues.extend(contrast)
    if options.check_accessibility:
        issues.extend(_accessibility_issues(color.value))
    if options.check_color_blindness:
        issues.extend(_color_blindness_issues(color.value))
    issues.extend(_custom_issues(color.value, options.custom_rules))

    suggestions = tuple(dict.fromkeys(i.suggestion for i in issues if i.suggestion))
    return ColorValidationResult(
        color=color,
        valid=not any(i.severity == "error" for i in issues),
        issues=tuple(issues),
        suggestions=suggestions,
        contrast_ratio=ratio,
        accessibility_level=level,
    )


def validate_colors(
    colors: Sequence[Color], options: Optional[ValidationOptions] = None
) -> ValidationReport:
    """Does: Validate each Color and summarize valid/invalid counts and issue severities."""
    options = options or ValidationOptions()
    results = tuple(_validate_one(c, options) for c in colors)
    summary = ValidationSummary(
        total=len(results),
        valid=sum(1 for r in results if r.valid),
        invalid=sum(1 for r in results if not r.valid),
        warnings=sum(1 for r in results for i in r.issues if i.severity == "warning"),
        errors=sum(1 for r in results for i in r.issues if i.severity == "error"),
    )
    return ValidationReport(
        colors=results,
        summary=summary,
        options=options,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
