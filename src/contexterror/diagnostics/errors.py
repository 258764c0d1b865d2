"""Exception wrapper for ErrorValue.

There is one raisable type. Callers distinguish kinds through the
ErrorKind tag carried by the wrapped value, never by exception class.
"""

from contexterror.enums import ErrorKind

from .value import ErrorValue

__all__ = ["ContextualError"]


class ContextualError(Exception):
    """Exception carrying an ErrorValue.

    ``str(exc)`` is the rendered message of the wrapped value.

    Attributes:
        value: The diagnostic being raised

    Example:
        >>> from contexterror import make_context_error
        >>> try:
        ...     raise ContextualError(make_context_error("examplle", 5, "Misspelling"))
        ... except ContextualError as e:
        ...     e.kind
        <ErrorKind.CONTEXT: 'contexterror.context_error'>
    """

    def __init__(self, value: ErrorValue) -> None:
        """Initialize ContextualError.

        Args:
            value: Diagnostic to raise
        """
        self.value = value
        super().__init__(value.render())

    @property
    def kind(self) -> ErrorKind:
        return self.value.kind

    @property
    def location(self) -> str:
        return self.value.location

    @property
    def problem(self) -> str:
        return self.value.problem
