"""Core utilities shared by the diagnostics and resources layers.

Exports:
    Position: Bounds-checked index into a specific string
    Range: Order-independent pair of Positions over one string
    BabelImportError: Raised when locale-aware text is requested without Babel
"""

from .babel_compat import BabelImportError
from .position import Position, Range

__all__ = ["BabelImportError", "Position", "Range"]
