"""
Root-prefix length of a path.

The root is the leading drive, UNC share or absolute-root marker. Directory
scans elsewhere never step before it.
"""

from portpath.core.platform import SeparatorConfig
from portpath.core.validation import check_invalid_path_chars

# A UNC root spans two names after the leading double separator.
_UNC_NAME_COUNT = 2


def get_root_length(path: str, separators: SeparatorConfig) -> int:
    """
    Compute the length of the root prefix of a path.

    Windows roots:
        ``\\\\server\\share`` -> up to (not including) the separator after share
        ``\\foo`` -> 1
        ``C:\\foo`` -> 3, ``C:foo`` -> 2

    POSIX roots:
        ``/foo`` -> 1

    Args:
        path: Path to inspect.
        separators: Separator configuration of the target platform.

    Returns:
        Root length, always between 0 and len(path).

    Raises:
        InvalidArgumentError: If path is None.
        InvalidPathFormatError: If path contains illegal characters.
    """
    check_invalid_path_chars(path)

    length = len(path)
    if separators.is_windows:
        return _windows_root_length(path, length, separators)

    if length >= 1 and separators.is_directory_separator(path[0]):
        return 1
    return 0


def _windows_root_length(path: str, length: int, separators: SeparatorConfig) -> int:
    i = 0
    if length >= 1 and separators.is_directory_separator(path[0]):
        # UNC name or directory off the current drive's root
        i = 1
        if length >= 2 and separators.is_directory_separator(path[1]):
            i = 2
            remaining = _UNC_NAME_COUNT
            while i < length:
                if separators.is_directory_separator(path[i]):
                    remaining -= 1
                    if remaining == 0:
                        break
                i += 1
    elif length >= 2 and path[1] == separators.volume_separator:
        # Drive letter: C: or C:\
        i = 2
        if length >= 3 and separators.is_directory_separator(path[2]):
            i = 3
    return i


def is_path_rooted(path: str | None, separators: SeparatorConfig) -> bool:
    """
    Check whether a path starts with a root.

    Drive-relative Windows paths such as ``C:foo`` count as rooted.
    """
    if path is None:
        return False

    check_invalid_path_chars(path)

    length = len(path)
    if length >= 1 and separators.is_directory_separator(path[0]):
        return True
    return separators.is_windows and length >= 2 and path[1] == separators.volume_separator
