"""
dedupe.py
=========

Does: Drop repeated color lines, comparing trimmed text and keeping the first occurrence.
Used By: CLI demo and editor commands.
"""

from __future__ import annotations

from typing import List, Sequence

__all__ = ["dedupe_colors"]


def dedupe_colors(lines: Sequence[str]) -> List[str]:
    """Does: Keep the first line for each trimmed value; blank lines are removed."""
    seen: set[str] = set()
    out: List[str] = []
    for line in lines:
        key = line.strip()
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(line)
    return out
