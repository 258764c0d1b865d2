"""Quickstart Example - Pointing at Problems in Text.

CORE ONLY: This example works WITHOUT Babel. Install with:
    pip install contexterror

Demonstrates:

1. A plain where/what error
2. Marking a single bad character
3. Marking a bad substring
4. Trimming long context (front and back)
5. Raising and catching diagnostics
"""

from __future__ import annotations


def example_1_plain_error() -> None:
    """Runtime error with some information on where it occurred."""
    from contexterror import ContextualError, make_error

    try:
        raise ContextualError(make_error("quickstart.py, example_1_plain_error()", "Example error"))
    except ContextualError as e:
        print(e)


def example_2_character() -> None:
    """Show which character caused an error."""
    from contexterror import ContextualError, make_context_error

    context = "examplle"
    try:
        raise ContextualError(make_context_error(context, 6, "Misspelling"))
    except ContextualError as e:
        print(e)


def example_3_substring() -> None:
    """Mark a substring; endpoints may come in either order."""
    from contexterror import ContextualError, make_context_error

    context = "examplle"
    try:
        raise ContextualError(make_context_error(context, 7, 5, "Misspelling"))
    except ContextualError as e:
        print(e)


def example_4_trimming() -> None:
    """Long context is trimmed around the marker, never through it."""
    from contexterror import make_context_error

    short = "This is a long sentience we can use to demonstrate trimming."
    print(make_context_error(short, 19, "Misspelling").render())

    longer = (
        "This is an even longer sentence we can use to demonstriate "
        "trimming from both ends of the string."
    )
    print(make_context_error(longer, 54, "Misspelling").render())


def example_5_positions() -> None:
    """Validated positions carry their source and line/column."""
    from contexterror import Position, make_context_error

    source = '{\n  "name": "value",,\n}'
    bad = Position(source, source.index(",,") + 1)
    print(f"line {bad.line}, column {bad.column}")
    print(make_context_error(source, bad, "Unexpected ','").render())


if __name__ == "__main__":
    example_1_plain_error()
    example_2_character()
    example_3_substring()
    example_4_trimming()
    example_5_positions()
