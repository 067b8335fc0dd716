"""
Path resolution collaborators.

Full-path resolution and normalization need a file-system aware resolver that
this package does not provide. Both raise UnsupportedOperationError. The no-op
normalizer is what directory-name extraction uses by default.
"""

from collections.abc import Callable

from portpath.core.errors import UnsupportedOperationError

Normalizer = Callable[[str], str]


def get_full_path(path: str) -> str:
    """
    Expand a path to a fully qualified path.

    Raises:
        UnsupportedOperationError: Always.
    """
    raise UnsupportedOperationError("get_full_path")


def normalize_path(path: str, unused: bool = False) -> str:
    """
    Normalize a path (collapse separators, resolve '.' and '..').

    Raises:
        UnsupportedOperationError: Always.
    """
    raise UnsupportedOperationError("normalize_path")


def normalize_path_noop(path: str) -> str:
    """Return path unchanged."""
    return path
