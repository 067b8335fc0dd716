"""
Parent-directory extraction.

The walk toward the parent stops at the root reported by get_root_length, so a
root path has no parent.
"""

import logging

from portpath.core.errors import PathInvariantError
from portpath.core.platform import SeparatorConfig
from portpath.core.resolution import Normalizer, normalize_path_noop
from portpath.core.root_length import get_root_length
from portpath.core.validation import check_invalid_path_chars

logger = logging.getLogger(__name__)


def get_directory_name(
    path: str | None,
    separators: SeparatorConfig,
    normalizer: Normalizer = normalize_path_noop,
) -> str | None:
    """
    Get the directory part of a path.

    Removes the last element of the path: everything from the last directory
    separator after the root onward. Examples on POSIX: ``/usr/local/bin`` ->
    ``/usr/local``, ``/usr`` -> ``/``, ``/`` -> None.

    Args:
        path: Path to inspect.
        separators: Separator configuration of the target platform.
        normalizer: Collaborator applied before the root is computed. Must
            return a path no longer than its input.

    Returns:
        The directory part, or None if path is None or denotes a root.

    Raises:
        InvalidPathFormatError: If path contains illegal characters.
        PathInvariantError: If the normalizer breaks its contract.
    """
    if path is None:
        return None

    check_invalid_path_chars(path)

    normalized = normalizer(path)
    if not isinstance(normalized, str) or len(normalized) > len(path):
        raise PathInvariantError(
            f"Normalizer returned {normalized!r} for {path!r}; expected a path "
            f"no longer than the input"
        )

    root = get_root_length(normalized, separators)
    length = len(normalized)

    if length < root:
        raise PathInvariantError(
            f"Root length {root} exceeds path length {length} for {normalized!r}"
        )
    if length == root:
        logger.debug(f"Path {normalized!r} is a root; no parent directory")
        return None

    i = length
    while i > root:
        i -= 1
        if separators.is_directory_separator(normalized[i]):
            break
    return normalized[:i]


def get_file_name(path: str | None, separators: SeparatorConfig) -> str | None:
    """Get the final segment of a path (after the last directory or volume separator)."""
    if path is None:
        return None

    check_invalid_path_chars(path)

    for i in range(len(path) - 1, -1, -1):
        if separators.is_segment_boundary(path[i]):
            return path[i + 1:]
    return path
