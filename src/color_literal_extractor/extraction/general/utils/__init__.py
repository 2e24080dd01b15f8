# color_literal_extractor/extraction/general/utils/__init__.py
"""

Does: Provide config loading, typed settings, debug logging and safety checks for the extraction stack.
Returns: Public API via load_config/get_settings, debug/reload_topics and check_content_safety.
Used by: Orchestrator callers, CLI demo, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
)
from .log import (
    debug,
    reload_topics,
)
from .safety import SafetyResult, check_content_safety
from .settings import Settings, get_settings, load_settings

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Settings
    "Settings",
    "get_settings",
    "load_settings",
    # Logging helpers
    "debug",
    "reload_topics",
    # Safety
    "SafetyResult",
    "check_content_safety",
]
