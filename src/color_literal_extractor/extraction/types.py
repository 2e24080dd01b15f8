"""
types.py
========

Does: Define the shared value types of the extraction layer (Color, Position,
      ColorFormat, FileType, ParseError, ExtractionResult).
Returns: Frozen dataclasses and Literal aliases only (no behavior).
Used By: Format extractors, orchestrator, converter, analysis and post-processing.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal

__all__ = [
    "ColorFormat",
    "FileType",
    "ParseErrorType",
    "COLOR_FORMATS",
    "FILE_TYPES",
    "Position",
    "Color",
    "ParseError",
    "ExtractionMetadata",
    "ExtractionResult",
    "to_dict",
]
__docformat__ = "google"

# ── Closed enumerations ──────────────────────────────────────────────────────
ColorFormat = Literal["hex", "rgb", "rgba", "hsl", "hsla", "named", "unknown"]
FileType = Literal[
    "css", "scss", "less", "stylus", "html", "javascript", "typescript", "svg", "unknown"
]
ParseErrorType = Literal["syntax-error", "validation-error", "parse-error", "timeout-error"]

COLOR_FORMATS: tuple[str, ...] = ("hex", "rgb", "rgba", "hsl", "hsla", "named", "unknown")
FILE_TYPES: tuple[str, ...] = (
    "css", "scss", "less", "stylus", "html", "javascript", "typescript", "svg", "unknown",
)


# ── Extracted values ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Position:
    """1-based line/column of the first character of a color literal."""

    line: int
    column: int


@dataclass(frozen=True)
class Color:
    """A color literal as it was found in source text.

    `value` is kept verbatim; nothing downstream rewrites it.
    """

    value: str
    format: ColorFormat
    position: Position | None = None
    context: str | None = None


# ── Extraction results ───────────────────────────────────────────────────────
@dataclass(frozen=True)
class ParseError:
    type: ParseErrorType
    message: str
    filepath: str | None = None
    line: int | None = None
    column: int | None = None
    context: str | None = None


@dataclass(frozen=True)
class ExtractionMetadata:
    file_type: FileType
    total_lines: int
    processed_lines: int
    processing_time_ms: float


@dataclass(frozen=True)
class ExtractionResult:
    success: bool
    colors: tuple[Color, ...] = ()
    errors: tuple[ParseError, ...] = ()
    warnings: tuple[str, ...] = ()
    metadata: ExtractionMetadata | None = None


def to_dict(obj: Any) -> dict[str, Any]:
    """Does: Convert any result dataclass into a plain JSON-friendly dict."""
    return asdict(obj)

