"""
Extension reading and rewriting.

All scans walk backward from the last character and test for '.' before
testing for a separator at each position.
"""

from portpath.core.platform import SeparatorConfig
from portpath.core.validation import check_invalid_path_chars


def _find_extension_dot(path: str, separators: SeparatorConfig) -> int:
    """Return the index of the last '.' in the final segment, or -1."""
    for i in range(len(path) - 1, -1, -1):
        ch = path[i]
        if ch == ".":
            return i
        if separators.is_segment_boundary(ch):
            break
    return -1


def get_extension(path: str | None, separators: SeparatorConfig) -> str | None:
    """
    Get the extension of a path, including the leading period.

    Args:
        path: Path to inspect.
        separators: Separator configuration of the target platform.

    Returns:
        The extension such as ".txt"; "" if the final segment has no
        extension or ends with a period; None if path is None.

    Raises:
        InvalidPathFormatError: If path contains illegal characters.
    """
    if path is None:
        return None

    check_invalid_path_chars(path)

    dot = _find_extension_dot(path, separators)
    if dot == -1 or dot == len(path) - 1:
        return ""
    return path[dot:]


def change_extension(
    path: str | None, extension: str | None, separators: SeparatorConfig
) -> str | None:
    """
    Replace, add or remove the extension of a path.

    Args:
        path: Path to rewrite.
        extension: New extension, with or without leading period. None
            removes the current extension.
        separators: Separator configuration of the target platform.

    Returns:
        The rewritten path; path itself when it is empty; None if path is None.

    Raises:
        InvalidPathFormatError: If path contains illegal characters.
    """
    if path is None:
        return None

    check_invalid_path_chars(path)

    dot = _find_extension_dot(path, separators)
    base = path[:dot] if dot != -1 else path

    if len(path) == 0:
        return path
    if extension is None:
        return base
    if len(extension) == 0 or extension[0] != ".":
        base += "."
    return base + extension


def has_extension(path: str | None, separators: SeparatorConfig) -> bool:
    """Check whether the final segment of a path has a non-empty extension."""
    if path is None:
        return False

    check_invalid_path_chars(path)

    dot = _find_extension_dot(path, separators)
    return dot != -1 and dot != len(path) - 1


def get_file_name_without_extension(
    path: str | None, separators: SeparatorConfig
) -> str | None:
    """Get the final segment of a path without its extension."""
    if path is None:
        return None

    check_invalid_path_chars(path)

    start = 0
    for i in range(len(path) - 1, -1, -1):
        if separators.is_segment_boundary(path[i]):
            start = i + 1
            break
    name = path[start:]
    dot = name.rfind(".")
    return name[:dot] if dot != -1 else name
