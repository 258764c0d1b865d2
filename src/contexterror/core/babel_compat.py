"""Babel compatibility layer for optional dependency handling.

Provides lazy import infrastructure for Babel so the core marking pipeline
never imports it.

Design Rationale:
    contexterror supports two installation modes:
    - Core only: `pip install contexterror` (no external dependencies)
    - Localized messages: `pip install contexterror[babel]` (adds Babel)

    This module ensures that:
    1. Core-only installations never trigger Babel imports
    2. Callers asking for locale-aware text get a consistent, helpful error
       when Babel is missing
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from contexterror.core.babel_compat import get_babel_numbers

    def describe_limit(limit: int, locale: str) -> str:
        numbers = get_babel_numbers()  # Raises BabelImportError if missing
        return numbers.format_decimal(limit, locale=locale)
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale


# pylint: disable=redefined-builtin,unnecessary-ellipsis
# Reason: Protocol definitions mirror Babel's API which uses 'format' parameter name
class BabelNumbersProtocol(Protocol):
    """Protocol for the subset of babel.numbers used by contexterror."""

    def format_decimal(
        self,
        number: int | float | Decimal,
        format: str | None = None,
        locale: Locale | str | None = None,
    ) -> str:
        """Format decimal number with locale-specific formatting."""
        ...
# pylint: enable=redefined-builtin,unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "format_number",
    "get_babel_numbers",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install contexterror[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed (cached)."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_babel_numbers() -> BabelNumbersProtocol:
    """Get the babel.numbers module.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers


def format_number(value: int, locale: str | None = None) -> str:
    """Render an integer for a human-facing message.

    Without a locale the plain decimal digits are returned and Babel is never
    touched. With a locale the grouping rules of that locale apply.

    Args:
        value: Number to render
        locale: Locale code such as "en_US" or "de_DE", or None

    Returns:
        Rendered number

    Raises:
        BabelImportError: If a locale is given and Babel is not installed

    Example:
        >>> format_number(10485760)
        '10485760'
        >>> format_number(10485760, "en_US")
        '10,485,760'
    """
    if locale is None:
        return str(value)
    return get_babel_numbers().format_decimal(value, locale=locale)
