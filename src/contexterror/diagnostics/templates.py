"""Error message templates.

Centralized templates for the diagnostics raised at the resource boundary.
Exception constructors receive finished ErrorValues from here instead of
formatting text inline, which keeps the wording testable in one place.
"""

from contexterror.constants import JSON_EXTENSION
from contexterror.core.babel_compat import format_number

from .value import ErrorValue, make_error

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    Every template returns a BASE kind ErrorValue; none of them carry
    context marking.
    """

    @staticmethod
    def wrong_extension(where: str, path: str) -> ErrorValue:
        """Resource path does not end in the JSON extension.

        Args:
            where: Function reporting the failure
            path: Offending path
        """
        msg = f"Couldn't open json file: {path}. The extension is not '{JSON_EXTENSION}'"
        return make_error(where, msg)

    @staticmethod
    def file_not_found(where: str, path: str, reason: str = "") -> ErrorValue:
        """Resource could not be opened.

        Args:
            where: Function reporting the failure
            path: Path that failed to open
            reason: Operating system explanation, if any
        """
        msg = f"Couldn't open json file at path: {path}. Does it exist?"
        if reason:
            msg = f"{msg} ({reason})"
        return make_error(where, msg)

    @staticmethod
    def too_large(where: str, max_size: int, locale: str | None = None) -> ErrorValue:
        """Resource content exceeds the configured limit.

        Args:
            where: Function reporting the failure
            max_size: Configured limit in characters
            locale: Locale for number rendering (requires Babel), or None
        """
        msg = (
            "The JSON object is too large. "
            f"The current maximum string size is {format_number(max_size, locale)}"
        )
        return make_error(where, msg)

    @staticmethod
    def write_failed(where: str, path: str, reason: str = "") -> ErrorValue:
        """Resource could not be opened for writing."""
        msg = f"Couldn't open json file for writing: {path}. Does it exist?"
        if reason:
            msg = f"{msg} ({reason})"
        return make_error(where, msg)

    @staticmethod
    def unreadable(where: str, path: str, reason: str) -> ErrorValue:
        """Resource opened but its content could not be read or decoded."""
        msg = f"Couldn't read json file: {path} ({reason})"
        return make_error(where, msg)
