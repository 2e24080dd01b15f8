"""
color_literal_extractor
=======================

Does: Root package initializer for the color literal extractor project.
Returns: Exposes the `extraction` subpackage through a stable namespace.
Used by: All higher-level imports starting from `color_literal_extractor.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
