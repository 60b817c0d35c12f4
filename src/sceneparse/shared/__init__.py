"""sceneparse Shared Module.

This package contains shared constants, logging helpers and error handling used across sceneparse.
"""

__all__ = ["constants", "errors", "logging"]
