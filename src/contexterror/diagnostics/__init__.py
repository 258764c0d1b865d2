"""Diagnostic values, the context marking pipeline and the raisable wrapper.

Provides the two diagnostic kinds (plain and context-marked), one exception
type that carries either, and the templates used at the resource boundary.
"""

from .context import ContextMarker, MarkedContext, extract, make_context_error, mark, trim
from .errors import ContextualError
from .templates import ErrorTemplate
from .value import ErrorValue, make_error

__all__ = [
    "ContextMarker",
    "ContextualError",
    "ErrorTemplate",
    "ErrorValue",
    "MarkedContext",
    "extract",
    "make_context_error",
    "make_error",
    "mark",
    "trim",
]
