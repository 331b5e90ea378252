"""Utility module for common helper functions.

Import directly from submodules when needed:
  - from launchvm.utils.logging_setup import ...
  - from launchvm.utils.paths import ...
"""

# Only export module names, not individual functions
__all__ = [
    "logging_setup",
    "paths",
]
