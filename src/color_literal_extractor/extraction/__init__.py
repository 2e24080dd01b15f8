# color_literal_extractor/extraction/__init__.py

"""
extraction.
==========

Does: Public surface of the extraction stack: the dispatcher entry point, the
      shared value types, and the format extractors.
Returns: Re-exports only.
Used by: CLI demo, editor integrations, and tests.
"""
from __future__ import annotations

from .orchestrator import determine_file_type, extract_colors, get_extractor
from .types import Color, ExtractionResult, ParseError, Position, to_dict

__all__ = [
    "Color",
    "Position",
    "ParseError",
    "ExtractionResult",
    "to_dict",
    "determine_file_type",
    "get_extractor",
    "extract_colors",
]
__docformat__ = "google"
