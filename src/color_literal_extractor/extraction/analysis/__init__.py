"""
analysis.
========

Does: Palette analytics over extracted Colors: statistics and anomalies, patterns,
      clusters and gaps, harmony/temperature/mood/accessibility/usage.
Returns: Frozen dataclass records (serializable with `types.to_dict`).
Used By: CLI demo and editor reports.
"""

from .palette import (
    analyze_palette,
    assess_accessibility,
    detect_color_harmony,
    determine_mood,
    determine_temperature,
    summarize_usage,
)
from .patterns import cluster_colors, detect_color_gaps, detect_color_patterns
from .statistics import calculate_color_statistics, detect_color_anomalies

__all__ = [
    "calculate_color_statistics",
    "detect_color_anomalies",
    "detect_color_patterns",
    "cluster_colors",
    "detect_color_gaps",
    "detect_color_harmony",
    "determine_temperature",
    "determine_mood",
    "assess_accessibility",
    "summarize_usage",
    "analyze_palette",
]
