"""JSON resource access at the diagnostics boundary.

Opens, reads and writes ``.json`` files and reports every failure as a BASE
kind ErrorValue wrapped in ContextualError. Operating system errors never
cross this boundary in their raw form.

Components:
    is_json_extension - Suffix check used before any file is touched
    open_json_file - Open a JSON file, translating failures
    read_json_text - Read a JSON file with a size limit
    write_json_text - Replace a JSON file's contents
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from contexterror.constants import JSON_EXTENSION, MAX_SOURCE_SIZE
from contexterror.diagnostics import ContextualError, ErrorTemplate

__all__ = [
    "is_json_extension",
    "open_json_file",
    "read_json_text",
    "write_json_text",
]

logger = logging.getLogger(__name__)

_OPEN_WHERE = "contexterror.resources.open_json_file"
_READ_WHERE = "contexterror.resources.read_json_text"
_WRITE_WHERE = "contexterror.resources.write_json_text"


def is_json_extension(path: str | Path) -> bool:
    """Check whether a path ends in the JSON extension (case sensitive).

    Example:
        >>> is_json_extension("config.json")
        True
        >>> is_json_extension("config.JSON")
        False
        >>> is_json_extension(".jso")
        False
    """
    return str(path).endswith(JSON_EXTENSION)


def open_json_file(path: str | Path, mode: str = "r") -> IO[str]:
    """Open a JSON file in text mode.

    Args:
        path: File path; must end in ".json"
        mode: Text open mode ("r", "w", "a", ...)

    Returns:
        Open text file object (caller closes it)

    Raises:
        ContextualError: Wrong extension, or the file could not be opened
    """
    if not is_json_extension(path):
        logger.debug("Rejected non-JSON path: %s", path)
        raise ContextualError(ErrorTemplate.wrong_extension(_OPEN_WHERE, str(path)))

    try:
        return Path(path).open(mode, encoding="utf-8")
    except OSError as e:
        logger.debug("Failed to open %s (%s): %s", path, mode, e)
        if "r" in mode and "+" not in mode:
            value = ErrorTemplate.file_not_found(_OPEN_WHERE, str(path), e.strerror or "")
        else:
            value = ErrorTemplate.write_failed(_OPEN_WHERE, str(path), e.strerror or "")
        raise ContextualError(value) from e


def read_json_text(
    path: str | Path,
    *,
    max_size: int = MAX_SOURCE_SIZE,
    locale: str | None = None,
) -> str:
    """Read a JSON file's text, enforcing a size limit.

    Args:
        path: File path; must end in ".json"
        max_size: Maximum content length in characters
        locale: Locale used to render numbers in the "too large" message.
            Requires the ``babel`` extra when given.

    Returns:
        File contents

    Raises:
        ContextualError: Wrong extension, missing file, unreadable file, or
            content longer than max_size
    """
    with open_json_file(path) as stream:
        try:
            # Read one past the limit so oversized files are detected
            # without loading them whole.
            text = stream.read(max_size + 1)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to read %s: %s", path, e)
            raise ContextualError(
                ErrorTemplate.unreadable(_READ_WHERE, str(path), str(e))
            ) from e

    if len(text) > max_size:
        raise ContextualError(ErrorTemplate.too_large(_READ_WHERE, max_size, locale))

    logger.debug("Read %d chars from %s", len(text), path)
    return text


def write_json_text(path: str | Path, text: str) -> None:
    """Replace a JSON file's contents with text.

    An empty path is not an error: the write is skipped with a warning.

    Raises:
        ContextualError: Wrong extension, or the file could not be opened
    """
    if not str(path):
        logger.warning("Attempting to write json text to empty path.")
        return

    try:
        with open_json_file(path, "w") as stream:
            stream.write(text)
    except OSError as e:
        logger.debug("Failed to write %s: %s", path, e)
        raise ContextualError(
            ErrorTemplate.write_failed(_WRITE_WHERE, str(path), e.strerror or "")
        ) from e

    logger.debug("Wrote %d chars to %s", len(text), path)
