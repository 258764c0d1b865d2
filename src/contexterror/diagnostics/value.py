"""Immutable two-part diagnostic value.

An ErrorValue answers two questions, where the problem was found and what
the problem is, and renders both into one deterministic message.
"""

from dataclasses import dataclass

from contexterror.enums import ErrorKind

__all__ = ["ErrorValue", "make_error"]


@dataclass(frozen=True, slots=True)
class ErrorValue:
    """Structured diagnostic with a location, a problem and a kind tag.

    Construction never fails; both strings may be empty.

    Attributes:
        location: Free-text description of where the problem was found
        problem: Free-text description of what is wrong
        kind: Discriminator written as the first line of the message

    Example:
        >>> value = ErrorValue("quickstart.py, main()", "Example error")
        >>> print(value.render())
        <BLANKLINE>
        contexterror.error
          Where: quickstart.py, main().
          What: Example error.
        <BLANKLINE>
    """

    location: str
    problem: str
    kind: ErrorKind = ErrorKind.BASE

    def __str__(self) -> str:
        """Return the rendered message."""
        return self.render()

    def render(self) -> str:
        """Render the diagnostic as a single message string.

        Format:
            "\\n<kind>\\n  Where: <location>.\\n  What: <problem>.\\n"

        Built from the frozen fields on every call, so repeated calls
        return identical strings.
        """
        return f"\n{self.kind}\n  Where: {self.location}.\n  What: {self.problem}.\n"


def make_error(location_or_problem: str, problem: str | None = None) -> ErrorValue:
    """Create a plain (non-context) diagnostic.

    Called with one argument, that argument is the problem and the location
    is empty. Called with two, they are the location and the problem.

    Example:
        >>> make_error("Example error").location
        ''
        >>> make_error("main()", "Example error").location
        'main()'
    """
    if problem is None:
        return ErrorValue("", location_or_problem)
    return ErrorValue(location_or_problem, problem)
