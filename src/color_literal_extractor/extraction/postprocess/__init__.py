"""
postprocess.
===========

Does: Operations on extracted colors after the scan: sort, dedupe, filter, validate.
Used By: CLI demo and editor commands.
"""

from .dedupe import dedupe_colors
from .filter import FilterOptions, filter_colors
from .sort import SORT_MODES, sort_colors
from .validate import ValidationOptions, ValidationRule, validate_colors

__all__ = [
    "SORT_MODES",
    "sort_colors",
    "dedupe_colors",
    "FilterOptions",
    "filter_colors",
    "ValidationOptions",
    "ValidationRule",
    "validate_colors",
]
