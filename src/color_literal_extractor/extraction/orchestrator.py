# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Map editor language ids to file types, dispatch content to the matching
      format extractor, and wrap the outcome in an ExtractionResult (errors,
      warnings, truncation, advisory timeout, metadata).
Returns:
  - determine_file_type(language_id) -> FileType
  - get_extractor(file_type) -> Callable[[str], list[Color]]
  - extract_colors(content, language_id, ...) -> ExtractionResult
Used by: CLI demo, editor integrations, and tests.
"""

import logging
import time
from typing import Callable, Dict, List, Optional

from color_literal_extractor.extraction.formats.css import (
    extract_from_css,
    extract_from_less,
    extract_from_scss,
)
from color_literal_extractor.extraction.formats.html import extract_from_html
from color_literal_extractor.extraction.formats.javascript import (
    extract_from_javascript,
    extract_from_typescript,
)
from color_literal_extractor.extraction.formats.stylus import extract_from_stylus
from color_literal_extractor.extraction.formats.svg import extract_from_svg
from color_literal_extractor.extraction.general.utils.log import debug
from color_literal_extractor.extraction.types import (
    Color,
    ExtractionMetadata,
    ExtractionResult,
    FileType,
    ParseError,
)

logger = logging.getLogger(__name__)

__all__ = ["Extractor", "determine_file_type", "get_extractor", "extract_colors"]

Extractor = Callable[[str], List[Color]]

# ── 1) Language ids → file types ─────────────────────────────────────────────
_LANGUAGE_IDS: Dict[str, FileType] = {
    "css": "css",
    "scss": "scss",
    "sass": "scss",
    "less": "less",
    "stylus": "stylus",
    "styl": "stylus",
    "html": "html",
    "htm": "html",
    "javascript": "javascript",
    "javascriptreact": "javascript",
    "js": "javascript",
    "jsx": "javascript",
    "typescript": "typescript",
    "typescriptreact": "typescript",
    "ts": "typescript",
    "tsx": "typescript",
    "svg": "svg",
    "xml": "svg",
}

# ── 2) File types → extractors ───────────────────────────────────────────────
_EXTRACTORS: Dict[str, Extractor] = {
    "css": extract_from_css,
    "scss": extract_from_scss,
    "less": extract_from_less,
    "stylus": extract_from_stylus,
    "html": extract_from_html,
    "javascript": extract_from_javascript,
    "typescript": extract_from_typescript,
    "svg": extract_from_svg,
}


def determine_file_type(language_id: Optional[str]) -> FileType:
    """Does: Map an editor language id (case-insensitive) to a FileType, else 'unknown'."""
    if not language_id:
        return "unknown"
    return _LANGUAGE_IDS.get(language_id.strip().lower(), "unknown")


def get_extractor(file_type: str) -> Extractor:
    """Does: Return the extractor for `file_type`; unknown types fall back to CSS."""
    extractor = _EXTRACTORS.get(file_type)
    if extractor is None:
        logger.warning("No extractor for file type %r; falling back to CSS", file_type)
        return extract_from_css
    return extractor


# ── 3) Entry point ───────────────────────────────────────────────────────────
def extract_colors(
    content: str,
    language_id: Optional[str],
    *,
    filepath: Optional[str] = None,
    max_colors: Optional[int] = None,
    timeout_ms: Optional[int] = None,
    include_metadata: bool = False,
) -> ExtractionResult:
    """Does: Extract colors from `content` for the given language id.

    Never raises. `max_colors` truncates the list (with a warning); `timeout_ms`
    is advisory and only produces a warning once the scan has finished.
    """
    started = time.perf_counter()
    file_type = determine_file_type(language_id)
    warnings: List[str] = []
    errors: List[ParseError] = []

    if not isinstance(content, str) or not content.strip():
        errors.append(
            ParseError(type="validation-error", message="Content is empty or invalid",
                       filepath=filepath)
        )
        return ExtractionResult(success=False, errors=tuple(errors))

    if file_type == "unknown":
        warnings.append(f"Unknown language id {language_id!r}; parsed as CSS")

    extractor = get_extractor(file_type)
    try:
        colors = extractor(content)
    except Exception as e:  # extractors are line-guarded; this is the last net
        logger.exception("Extractor for %s failed", file_type)
        errors.append(ParseError(type="parse-error", message=str(e), filepath=filepath))
        colors = []

    if max_colors is not None and max_colors >= 0 and len(colors) > max_colors:
        warnings.append(f"Found {len(colors)} colors; truncated to {max_colors}")
        colors = colors[:max_colors]

    elapsed_ms = (time.perf_counter() - started) * 1000
    if timeout_ms is not None and elapsed_ms > timeout_ms:
        warnings.append(f"Extraction took {elapsed_ms:.0f}ms (limit {timeout_ms}ms)")

    for w in warnings:
        debug(w, "orchestrator", level="WARNING")

    metadata = None
    if include_metadata:
        total_lines = content.count("\n") + 1
        metadata = ExtractionMetadata(
            file_type=file_type,
            total_lines=total_lines,
            processed_lines=total_lines,
            processing_time_ms=elapsed_ms,
        )

    return ExtractionResult(
        success=not errors,
        colors=tuple(colors),
        errors=tuple(errors),
        warnings=tuple(warnings),
        metadata=metadata,
    )


if __name__ == "__main__":
    # Load env at runtime only (no import side effects)
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    sample = ".btn { color: #ff0000; background: rgba(0, 0, 255, 0.5); }"
    result = extract_colors(sample, "css", include_metadata=True)
    for color in result.colors:
        print(color.value, color.format, color.position)
