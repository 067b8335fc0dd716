"""
Character validation for path strings.

Defines the illegal character sets and the validation entry point called by
every other path operation before it inspects path content.
"""

import logging

from portpath.core.errors import InvalidArgumentError, InvalidPathFormatError

logger = logging.getLogger(__name__)

_CONTROL_CHARS = tuple(chr(code) for code in range(0x20))

# Ordered tuples back the public accessors; frozensets back membership tests.
_BASE_ORDERED = ('"', "<", ">", "|") + _CONTROL_CHARS
_STRICT_ORDERED = _BASE_ORDERED + ("*", "?")
_FILE_NAME_ORDERED = ('"', "<", ">", "|") + _CONTROL_CHARS + (":", "*", "?", "\\", "/")

BASE_INVALID_PATH_CHARS = frozenset(_BASE_ORDERED)
STRICT_INVALID_PATH_CHARS = frozenset(_STRICT_ORDERED)
INVALID_FILE_NAME_CHARS = frozenset(_FILE_NAME_ORDERED)

# Trailing characters a file system drops from names: tab, LF, VT, FF, CR,
# space, NEL and no-break space.
TRIM_END_CHARS = "\t\n\v\f\r \x85\xa0"


def get_invalid_path_chars() -> list[str]:
    """Return the characters that are never allowed in a path."""
    return list(_BASE_ORDERED)


def get_invalid_file_name_chars() -> list[str]:
    """Return the characters that are never allowed in a file name."""
    return list(_FILE_NAME_ORDERED)


def has_illegal_characters(path: str | None, check_additional: bool = False) -> bool:
    """
    Check whether a path contains an illegal character.

    Args:
        path: Path to scan.
        check_additional: Also reject the wildcard characters '*' and '?'.

    Returns:
        True if any character of path is in the active illegal set.

    Raises:
        InvalidArgumentError: If path is None.
    """
    if path is None:
        raise InvalidArgumentError("path")
    illegal = STRICT_INVALID_PATH_CHARS if check_additional else BASE_INVALID_PATH_CHARS
    return any(ch in illegal for ch in path)


def has_illegal_file_name_characters(name: str | None) -> bool:
    """Check whether a file name contains a character illegal in file names."""
    if name is None:
        raise InvalidArgumentError("name")
    return any(ch in INVALID_FILE_NAME_CHARS for ch in name)


def _illegal_chars_in(text: str, illegal: frozenset[str]) -> list[str]:
    return sorted({ch for ch in text if ch in illegal})


def check_invalid_path_chars(path: str | None, check_additional: bool = False) -> None:
    """
    Validate a path before it is parsed.

    Args:
        path: Path to validate.
        check_additional: Also reject '*' and '?'.

    Raises:
        InvalidArgumentError: If path is None.
        InvalidPathFormatError: If path contains illegal characters.
    """
    if path is None:
        raise InvalidArgumentError("path")

    if has_illegal_characters(path, check_additional):
        illegal = STRICT_INVALID_PATH_CHARS if check_additional else BASE_INVALID_PATH_CHARS
        found = _illegal_chars_in(path, illegal)
        logger.debug(f"Rejected path {path!r}: illegal characters {found!r}")
        raise InvalidPathFormatError(path, found)


def check_invalid_file_name_chars(name: str | None) -> None:
    """
    Validate a bare file name (no directory part).

    Raises:
        InvalidArgumentError: If name is None.
        InvalidPathFormatError: If name contains characters illegal in file names.
    """
    if name is None:
        raise InvalidArgumentError("name")

    if has_illegal_file_name_characters(name):
        found = _illegal_chars_in(name, INVALID_FILE_NAME_CHARS)
        logger.debug(f"Rejected file name {name!r}: illegal characters {found!r}")
        raise InvalidPathFormatError(name, found)


def trim_path_end(path: str | None) -> str | None:
    """Strip trailing whitespace-class characters from TRIM_END_CHARS only."""
    if path is None:
        return None
    return path.rstrip(TRIM_END_CHARS)
