"""Shared constants for contexterror.

Centralized defaults used by the context marker and the resource helpers.
Placing them here avoids circular imports between the diagnostics and
resources layers and gives one place to read every limit.

Constants are grouped by domain:
- Display limits: How much surrounding context a diagnostic shows
- Marker text: Delimiters and ellipsis inserted into marked context
- Input limits: Size and naming constraints for loaded resources
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Display limits
    "DEFAULT_MAX_LENGTH",
    # Marker text
    "OPEN_MARKER",
    "CLOSE_MARKER",
    "ELLIPSIS",
    # Input limits
    "JSON_EXTENSION",
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# DISPLAY LIMITS
# ============================================================================

# Marked context at or above this many characters is trimmed.
# 50 keeps a diagnostic on one terminal line next to its "Where:" prefix.
DEFAULT_MAX_LENGTH: int = 50

# ============================================================================
# MARKER TEXT
# ============================================================================

# Inserted immediately before the first marked character.
OPEN_MARKER: str = " > "

# Inserted immediately after the last marked character.
CLOSE_MARKER: str = " < "

# Replaces each side of the context that lost characters to trimming.
ELLIPSIS: str = "..."

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Resources opened through contexterror.resources must carry this suffix.
JSON_EXTENSION: str = ".json"

# Default maximum resource size in characters (10 MB of ASCII).
# Prevents unbounded memory allocation when reading untrusted files.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
