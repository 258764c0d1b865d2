"""Validated positions and ranges over a context string.

A Position is an index paired with the exact string it indexes, so it can
never be applied to a different string by accident. A Range is two
Positions over the same string, in either order.

Design Philosophy:
    - Position and Range are immutable (frozen dataclasses)
    - Construction validates; everything derived afterwards is total
    - The end-of-string position (index == len(source)) is valid
    - Ranges are normalized (ordered) before any slicing happens

Example:
    >>> text = "examplle"
    >>> start = Position(text, 5)
    >>> end = start.advance(2)
    >>> Range(end, start).normalized()
    (5, 7)
"""

from dataclasses import dataclass

__all__ = ["Position", "Range", "clamp_index", "normalize_range"]


def clamp_index(source: str, index: int) -> int:
    """Clamp a raw index into [0, len(source)].

    Example:
        >>> clamp_index("abc", -4)
        0
        >>> clamp_index("abc", 9)
        3
    """
    return max(0, min(index, len(source)))


def normalize_range(source: str, start: int, end: int) -> tuple[int, int]:
    """Return (low, high) with both indices clamped into source and ordered.

    Example:
        >>> normalize_range("examplle", 7, 5)
        (5, 7)
    """
    first = clamp_index(source, start)
    second = clamp_index(source, end)
    if first <= second:
        return first, second
    return second, first


@dataclass(frozen=True, slots=True)
class Position:
    """Bounds-checked location within a specific source string.

    Attributes:
        source: The string this position belongs to
        index: Character offset, 0 <= index <= len(source)

    Example:
        >>> pos = Position("hello", 1)
        >>> pos.current
        'e'
        >>> Position("hello", 5).is_eof
        True
    """

    source: str
    index: int

    def __post_init__(self) -> None:
        """Validate that index lies within the source.

        Raises:
            ValueError: If index is negative or past the end-of-string position.
        """
        if self.index < 0:
            msg = f"Position.index must be >= 0, got {self.index}"
            raise ValueError(msg)
        if self.index > len(self.source):
            msg = f"Position.index ({self.index}) must be <= len(source) ({len(self.source)})"
            raise ValueError(msg)

    @classmethod
    def clamped(cls, source: str, index: int) -> "Position":
        """Build a Position, clamping index into range instead of raising."""
        return cls(source, clamp_index(source, index))

    @property
    def is_eof(self) -> bool:
        """True at the end-of-string position."""
        return self.index >= len(self.source)

    @property
    def current(self) -> str:
        """Character at this position, or "" at end of string."""
        if self.is_eof:
            return ""
        return self.source[self.index]

    @property
    def line(self) -> int:
        """1-indexed line number, counting LF line endings."""
        return self.source.count("\n", 0, self.index) + 1

    @property
    def column(self) -> int:
        """1-indexed column number measured from the most recent LF."""
        line_start = self.source.rfind("\n", 0, self.index)
        return self.index - line_start

    def advance(self, count: int = 1) -> "Position":
        """Return a new Position moved by count, clamped to the source.

        Negative counts move backward.
        """
        return Position.clamped(self.source, self.index + count)

    def belongs_to(self, source: str) -> bool:
        """True if this position was derived from source."""
        return self.source is source or self.source == source


@dataclass(frozen=True, slots=True)
class Range:
    """Two positions over the same source, in either order.

    ``end`` conventionally denotes one past the last included character.
    ``start == end`` denotes the single character at ``start``.

    Attributes:
        start: First position as supplied by the caller
        end: Second position as supplied by the caller
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        """Validate that both positions index the same source.

        Raises:
            ValueError: If the positions come from different strings.
        """
        if not self.start.belongs_to(self.end.source):
            msg = "Range positions must belong to the same source string"
            raise ValueError(msg)

    @classmethod
    def of(cls, source: str, start: int, end: int) -> "Range":
        """Build a Range from raw indices, validating both."""
        return cls(Position(source, start), Position(source, end))

    @property
    def source(self) -> str:
        return self.start.source

    @property
    def is_single(self) -> bool:
        """True when the range denotes one position rather than a span."""
        return self.start.index == self.end.index

    @property
    def is_reversed(self) -> bool:
        return self.start.index > self.end.index

    def normalized(self) -> tuple[int, int]:
        """Return (low, high) indices in ascending order."""
        return normalize_range(self.source, self.start.index, self.end.index)
