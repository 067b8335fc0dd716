"""
portpath - platform-aware path-string manipulation.

Extracts or rewrites path components (extension, parent directory, root
prefix) for Windows or POSIX conventions without touching the file system.
"""

from portpath.core import (
    BASE_INVALID_PATH_CHARS,
    INVALID_FILE_NAME_CHARS,
    POSIX_SEPARATORS,
    STRICT_INVALID_PATH_CHARS,
    TRIM_END_CHARS,
    WINDOWS_SEPARATORS,
    ConfigError,
    InvalidArgumentError,
    InvalidPathFormatError,
    PathInvariantError,
    Platform,
    PortPathConfig,
    PortPathError,
    SeparatorConfig,
    UnsupportedOperationError,
    change_extension,
    check_invalid_file_name_chars,
    check_invalid_path_chars,
    get_directory_name,
    get_extension,
    get_file_name,
    get_file_name_without_extension,
    get_full_path,
    get_invalid_file_name_chars,
    get_invalid_path_chars,
    get_root_length,
    has_extension,
    has_illegal_characters,
    has_illegal_file_name_characters,
    is_path_rooted,
    load_config,
    normalize_path,
    normalize_path_noop,
    trim_path_end,
)
from portpath.services import PathService

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "PathService",
    "Platform",
    "SeparatorConfig",
    "WINDOWS_SEPARATORS",
    "POSIX_SEPARATORS",
    "PortPathConfig",
    "load_config",
    "PortPathError",
    "InvalidArgumentError",
    "InvalidPathFormatError",
    "UnsupportedOperationError",
    "PathInvariantError",
    "ConfigError",
    "BASE_INVALID_PATH_CHARS",
    "STRICT_INVALID_PATH_CHARS",
    "INVALID_FILE_NAME_CHARS",
    "TRIM_END_CHARS",
    "has_illegal_characters",
    "has_illegal_file_name_characters",
    "check_invalid_path_chars",
    "check_invalid_file_name_chars",
    "get_invalid_path_chars",
    "get_invalid_file_name_chars",
    "trim_path_end",
    "get_root_length",
    "is_path_rooted",
    "get_extension",
    "change_extension",
    "has_extension",
    "get_file_name",
    "get_file_name_without_extension",
    "get_directory_name",
    "get_full_path",
    "normalize_path",
    "normalize_path_noop",
]
