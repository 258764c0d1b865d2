"""contexterror - Bounded, human-readable diagnostics that point into text.

Builds messages for parsers, validators and lexers that say what is wrong and
show where it is in the input:

    contexterror.context_error
      Where: character 'l' in context 'examp > l < le'.
      What: Misspelling.

Public API:
    make_error - Plain where/what diagnostic
    make_context_error - Diagnostic marking a character or span in a context
    ErrorValue - Immutable diagnostic; render() produces the message
    ContextualError - Exception wrapping an ErrorValue
    Position, Range - Validated locations within a context string

Submodules:
    contexterror.diagnostics.context - extract/mark/trim pipeline stages
    contexterror.resources - JSON file access reporting ContextualError
    contexterror.core.babel_compat - Optional Babel integration
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import Position, Range
from .diagnostics import (
    ContextMarker,
    ContextualError,
    ErrorValue,
    MarkedContext,
    extract,
    make_context_error,
    make_error,
    mark,
    trim,
)
from .enums import ErrorKind, SubjectKind

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("contexterror")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ContextMarker",
    "ContextualError",
    "ErrorKind",
    "ErrorValue",
    "MarkedContext",
    "Position",
    "Range",
    "SubjectKind",
    "__version__",
    "extract",
    "make_context_error",
    "make_error",
    "mark",
    "trim",
]
