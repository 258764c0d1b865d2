"""Enumerations for contexterror type-safe constants.

Uses StrEnum for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.
"""

from enum import StrEnum

__all__ = ["ErrorKind", "SubjectKind"]


class ErrorKind(StrEnum):
    """Discriminator naming which factory produced an ErrorValue.

    The value is written verbatim as the first line of the rendered
    message, so downstream handlers can tell the kinds apart without
    catching different exception types.
    """

    BASE = "contexterror.error"
    """Plain where/what diagnostic: make_error()"""

    CONTEXT = "contexterror.context_error"
    """Diagnostic whose location is a marked context: make_context_error()"""


class SubjectKind(StrEnum):
    """What a context diagnostic points at.

    StrEnum provides automatic string conversion: str(SubjectKind.STRING) == "string"
    """

    CHARACTER = "character"
    """A single position: make_context_error(context, pos, ...)"""

    STRING = "string"
    """A span between two positions: make_context_error(context, start, end, ...)"""
