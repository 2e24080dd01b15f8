"""
general.
=======

Does: Cross-cutting helpers (config loading, settings, debug logging, safety checks).
"""
