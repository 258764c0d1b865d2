"""Context marking pipeline.

Turns a context string, a character range and a problem description into a
CONTEXT kind ErrorValue whose location shows the offending text marked in
place:

    character 'l' in context 'examp > l < le'

Four stages, each usable on its own:

    extract  - the substring the range denotes (never raises)
    mark     - a copy of the context with delimiters around the range
    trim     - the marked context cut down to a display length, cutting
               only the surrounding text and never the marked span
    make_context_error - all of the above, wrapped in an ErrorValue

Every stage is total: indices outside the context are clamped, reversed
ranges are normalized, and an empty context yields empty output.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import overload

from contexterror.constants import CLOSE_MARKER, DEFAULT_MAX_LENGTH, ELLIPSIS, OPEN_MARKER
from contexterror.core.position import Position, Range, normalize_range
from contexterror.enums import ErrorKind, SubjectKind

from .value import ErrorValue

__all__ = [
    "ContextMarker",
    "MarkedContext",
    "extract",
    "make_context_error",
    "mark",
    "trim",
]

logger = logging.getLogger(__name__)

Endpoint = Position | int


@dataclass(frozen=True, slots=True)
class MarkedContext:
    """A context split around its marked span.

    The parts are kept apart so trimming can shorten ``before`` and ``after``
    without ever touching ``span``. ``str()`` joins them with the delimiters.

    Attributes:
        before: Context preceding the span
        span: The marked characters (may be empty at end of string)
        after: Context following the span

    Example:
        >>> str(MarkedContext("examp", "l", "le"))
        'examp > l < le'
        >>> str(MarkedContext())
        ''
    """

    before: str = ""
    span: str = ""
    after: str = ""

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    @property
    def is_empty(self) -> bool:
        """True only for the result of marking an empty context."""
        return not (self.before or self.span or self.after)

    @property
    def text(self) -> str:
        """Flat display string with delimiters, or "" when empty."""
        if self.is_empty:
            return ""
        return f"{self.before}{OPEN_MARKER}{self.span}{CLOSE_MARKER}{self.after}"


def extract(context: str, start: Endpoint | Range, end: Endpoint | None = None) -> str:
    """Return the substring a range denotes.

    Rules:
        - ``start == end``: the single character there, or "" at end of string
        - empty context, or an endpoint at end of string: ""
        - otherwise ``context[low:high]`` of the normalized range, so
          ``extract(c, a, b) == extract(c, b, a)``

    ``start`` may be a Range instead of a pair of endpoints, and a lone
    endpoint means ``end == start``. Out-of-range indices are clamped first.

    Example:
        >>> extract("examplle", 6, 6)
        'l'
        >>> extract("examplle", 7, 5)
        'll'
        >>> extract("examplle", 8, 8)
        ''
        >>> extract("examplle", Range.of("examplle", 7, 5))
        'll'
    """
    if not context:
        return ""

    low, high = normalize_range(context, *_endpoints(context, start, end))
    size = len(context)

    if low == high:
        return context[low] if low < size else ""
    if high == size:
        return ""
    return context[low:high]


def mark(context: str, start: Endpoint | Range, end: Endpoint | None = None) -> MarkedContext:
    """Mark a range inside a copy of the context.

    OPEN_MARKER goes immediately before the normalized start and CLOSE_MARKER
    immediately after the normalized end. ``start == end`` marks the single
    character at that position. Endpoints are read as in ``extract``.

    The result is not trimmed here. ``trim`` leaves a value alone when its
    span is at least as long as the display limit, so a long offending
    substring always stays fully visible.

    Example:
        >>> str(mark("examplle", 5, 6))
        'examp > l < le'
        >>> str(mark("examplle", 7, 5))
        'examp > ll < e'
        >>> mark("", 0, 0).is_empty
        True
    """
    if not context:
        return MarkedContext()

    low, high = normalize_range(context, *_endpoints(context, start, end))
    if low == high:
        high = min(low + 1, len(context))

    return MarkedContext(context[:low], context[low:high], context[high:])


def _cut_quotas(available_before: int, available_after: int, quota: int) -> tuple[int, int]:
    """Split characters to cut between the two sides of the span.

    Each side owes ``quota`` characters. Whatever one side cannot give
    (because it runs out) is taken from the other side instead.

    Returns:
        (cut_before, cut_after), each bounded by what that side holds
    """
    spare_before = quota - min(quota, available_before)
    spare_after = quota - min(quota, available_after)
    cut_before = min(available_before, quota + spare_after)
    cut_after = min(available_after, quota + spare_before)
    return cut_before, cut_after


def trim(marked: MarkedContext, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Shorten a marked context for display.

    Values shorter than ``max_length`` come back unchanged. Otherwise each
    side owes ``ceil((length - max_length) / 2)`` characters, taken from the
    far end of ``before`` and of ``after`` so the text nearest the span
    survives. A side that runs out passes its remaining quota to the other.
    ELLIPSIS replaces each side that actually lost characters.

    A cut that would not make the display shorter than the input (a value
    just over the limit loses fewer characters than the ellipses add) is
    skipped and the value comes back unchanged.

    The span and both delimiters are never cut. A span at least
    ``max_length`` long is returned untrimmed.

    Args:
        marked: Output of ``mark``
        max_length: Display length at which trimming starts

    Returns:
        Display string

    Example:
        >>> trim(mark("examplle", 5, 6))
        'examp > l < le'
    """
    text = marked.text
    length = len(text)

    if length < max_length:
        return text

    if len(marked.span) >= max_length:
        logger.debug(
            "Marked span (%d chars) exceeds display limit %d; leaving context untrimmed",
            len(marked.span),
            max_length,
        )
        return text

    quota = math.ceil((length - max_length) / 2)
    cut_before, cut_after = _cut_quotas(len(marked.before), len(marked.after), quota)

    before = marked.before[cut_before:]
    after = marked.after[: len(marked.after) - cut_after]
    prefix = ELLIPSIS if cut_before else ""
    suffix = ELLIPSIS if cut_after else ""
    trimmed = f"{prefix}{before}{OPEN_MARKER}{marked.span}{CLOSE_MARKER}{after}{suffix}"

    if len(trimmed) >= length:
        logger.debug("Trim of %d chars would not shorten it; leaving context untrimmed", length)
        return text

    logger.debug(
        "Trimmed marked context from %d to %d chars (%d before span, %d after)",
        length,
        len(trimmed),
        cut_before,
        cut_after,
    )
    return trimmed


def _resolve_index(context: str, position: Endpoint) -> int:
    """Turn a Position or raw index into an index into context.

    A Position over a different string is not rejected: its index is applied
    to context (and clamped later) with a warning.
    """
    if isinstance(position, Position):
        if not position.belongs_to(context):
            logger.warning(
                "Position at index %d belongs to a different string; "
                "applying its index to the given context",
                position.index,
            )
        return position.index
    return position


def _endpoints(context: str, start: Endpoint | Range, end: Endpoint | None) -> tuple[int, int]:
    """Resolve the endpoint forms accepted by the stages to a raw index pair.

    Raises:
        TypeError: A Range combined with a separate end
    """
    if isinstance(start, Range):
        if end is not None:
            msg = "A Range already holds both endpoints; end must be omitted"
            raise TypeError(msg)
        if not start.start.belongs_to(context):
            logger.warning(
                "Range %d..%d belongs to a different string; "
                "applying its indices to the given context",
                start.start.index,
                start.end.index,
            )
        return start.start.index, start.end.index

    low = _resolve_index(context, start)
    high = low if end is None else _resolve_index(context, end)
    return low, high


def _bind_arguments(
    caller: str,
    args: tuple[object, ...],
    position: Endpoint | Range | None,
    problem: str | None,
    max_length: int | None,
) -> tuple[Endpoint | Range, Endpoint | None, str, int | None]:
    """Sort the call forms of make_context_error into named parts.

    Accepted after the context, positionally:
        position, problem[, max_length]
        start, end, problem[, max_length]
    ``position``, ``problem`` and ``max_length`` may also come by keyword,
    each at most once.

    Raises:
        TypeError: Missing, duplicated or mistyped parts
    """
    rest = list(args)

    if position is not None:
        if rest and not isinstance(rest[0], str):
            msg = f"{caller}() got multiple values for argument 'position'"
            raise TypeError(msg)
        rest.insert(0, position)

    if not rest:
        msg = f"{caller}() missing required argument: 'position'"
        raise TypeError(msg)

    start = rest.pop(0)
    if not isinstance(start, (Position, int, Range)):
        msg = f"{caller}() position must be a Position, int or Range, got {type(start).__name__}"
        raise TypeError(msg)

    end: Endpoint | None = None
    candidate = rest[0] if rest else None
    if isinstance(candidate, (Position, int)):
        end = candidate
        rest.pop(0)

    candidate = rest[0] if rest else None
    if isinstance(candidate, str):
        if problem is not None:
            msg = f"{caller}() got multiple values for argument 'problem'"
            raise TypeError(msg)
        problem = candidate
        rest.pop(0)

    if rest:
        candidate = rest.pop(0)
        if max_length is not None:
            msg = f"{caller}() got multiple values for argument 'max_length'"
            raise TypeError(msg)
        if not isinstance(candidate, int):
            msg = f"{caller}() max_length must be an int, got {type(candidate).__name__}"
            raise TypeError(msg)
        max_length = candidate

    if rest:
        msg = f"{caller}() got {len(rest)} unexpected positional argument(s)"
        raise TypeError(msg)
    if problem is None:
        msg = f"{caller}() missing required argument: 'problem'"
        raise TypeError(msg)

    return start, end, problem, max_length


def _build_context_error(
    context: str,
    start: Endpoint | Range,
    end: Endpoint | None,
    problem: str,
    max_length: int,
) -> ErrorValue:
    low, high = normalize_range(context, *_endpoints(context, start, end))
    subject = SubjectKind.CHARACTER if low == high else SubjectKind.STRING
    substring = extract(context, low, high)
    display = trim(mark(context, low, high), max_length)
    return ErrorValue(
        location=f"{subject} '{substring}' in context '{display}'",
        problem=problem,
        kind=ErrorKind.CONTEXT,
    )


@overload
def make_context_error(
    context: str,
    position: Endpoint | Range,
    /,
    problem: str,
    max_length: int = ...,
) -> ErrorValue: ...


@overload
def make_context_error(
    context: str,
    start: Endpoint,
    end: Endpoint,
    /,
    problem: str,
    max_length: int = ...,
) -> ErrorValue: ...


@overload
def make_context_error(
    context: str,
    *,
    position: Endpoint | Range,
    problem: str,
    max_length: int = ...,
) -> ErrorValue: ...


def make_context_error(
    context: str,
    *args: object,
    position: Endpoint | Range | None = None,
    problem: str | None = None,
    max_length: int | None = None,
) -> ErrorValue:
    """Build a CONTEXT diagnostic marking a character or span.

    Call forms:
        make_context_error(context, position, problem, max_length=50)
        make_context_error(context, start, end, problem, max_length=50)
        make_context_error(context, position=..., problem=...)

    A position is a Position, a raw index, or a Range holding both
    endpoints. The location reads ``character '<c>' in context '<display>'``
    when the range is a single position and ``string '<s>' in context
    '<display>'`` otherwise, where display is the marked context trimmed to
    max_length. Endpoint order does not matter.

    Never raises for any index values. Endpoints are clamped into the
    context, and a Position or Range over another string is applied by
    index with a warning.

    Raises:
        TypeError: The arguments match none of the call forms

    Example:
        >>> make_context_error("examplle", 5, "Misspelling").location
        "character 'l' in context 'examp > l < le'"
        >>> make_context_error("examplle", Range.of("examplle", 7, 5), "Misspelling").location
        "string 'll' in context 'examp > ll < e'"
    """
    start, end, problem, max_length = _bind_arguments(
        "make_context_error", args, position, problem, max_length
    )
    if max_length is None:
        max_length = DEFAULT_MAX_LENGTH
    return _build_context_error(context, start, end, problem, max_length)


@dataclass(frozen=True, slots=True)
class ContextMarker:
    """Context marking pipeline with a fixed display limit.

    Example:
        >>> marker = ContextMarker(max_length=20)
        >>> marker.build("a fairly long line of input text", 9, "Odd word").location
        "character 'l' in context '... > l < ong line of i...'"
    """

    max_length: int = DEFAULT_MAX_LENGTH

    def __post_init__(self) -> None:
        if self.max_length <= 0:
            msg = "max_length must be positive"
            raise ValueError(msg)

    def extract(self, context: str, start: Endpoint | Range, end: Endpoint | None = None) -> str:
        return extract(context, start, end)

    def mark(
        self, context: str, start: Endpoint | Range, end: Endpoint | None = None
    ) -> MarkedContext:
        return mark(context, start, end)

    def trim(self, marked: MarkedContext) -> str:
        return trim(marked, self.max_length)

    @overload
    def build(self, context: str, position: Endpoint | Range, /, problem: str) -> ErrorValue: ...

    @overload
    def build(
        self, context: str, start: Endpoint, end: Endpoint, /, problem: str
    ) -> ErrorValue: ...

    @overload
    def build(self, context: str, *, position: Endpoint | Range, problem: str) -> ErrorValue: ...

    def build(
        self,
        context: str,
        *args: object,
        position: Endpoint | Range | None = None,
        problem: str | None = None,
    ) -> ErrorValue:
        """Build a CONTEXT diagnostic using this marker's limit.

        Takes the call forms of make_context_error without max_length.

        Raises:
            TypeError: The arguments match none of the call forms
        """
        start, end, problem, _ = _bind_arguments(
            "build", args, position, problem, self.max_length
        )
        return _build_context_error(context, start, end, problem, self.max_length)
