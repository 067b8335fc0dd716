"""
Core Layer - character validation, root length, extension and directory-name parsing.
"""

from portpath.core.config import (
    LoggingConfig,
    PlatformConfig,
    PortPathConfig,
    configure_logging,
    detect_host_platform,
    load_config,
)
from portpath.core.directory_name import get_directory_name, get_file_name
from portpath.core.errors import (
    ConfigError,
    InvalidArgumentError,
    InvalidPathFormatError,
    PathInvariantError,
    PortPathError,
    UnsupportedOperationError,
)
from portpath.core.extension import (
    change_extension,
    get_extension,
    get_file_name_without_extension,
    has_extension,
)
from portpath.core.platform import (
    POSIX_SEPARATORS,
    WINDOWS_SEPARATORS,
    Platform,
    SeparatorConfig,
)
from portpath.core.resolution import (
    Normalizer,
    get_full_path,
    normalize_path,
    normalize_path_noop,
)
from portpath.core.root_length import get_root_length, is_path_rooted
from portpath.core.validation import (
    BASE_INVALID_PATH_CHARS,
    INVALID_FILE_NAME_CHARS,
    STRICT_INVALID_PATH_CHARS,
    TRIM_END_CHARS,
    check_invalid_file_name_chars,
    check_invalid_path_chars,
    get_invalid_file_name_chars,
    get_invalid_path_chars,
    has_illegal_characters,
    has_illegal_file_name_characters,
    trim_path_end,
)

__all__ = [
    # Config
    "PortPathConfig",
    "PlatformConfig",
    "LoggingConfig",
    "load_config",
    "configure_logging",
    "detect_host_platform",
    # Platform
    "Platform",
    "SeparatorConfig",
    "WINDOWS_SEPARATORS",
    "POSIX_SEPARATORS",
    # Errors
    "PortPathError",
    "InvalidArgumentError",
    "InvalidPathFormatError",
    "UnsupportedOperationError",
    "PathInvariantError",
    "ConfigError",
    # Validation
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
    # Root length
    "get_root_length",
    "is_path_rooted",
    # Extension
    "get_extension",
    "change_extension",
    "has_extension",
    "get_file_name_without_extension",
    # Directory name
    "get_directory_name",
    "get_file_name",
    # Resolution
    "Normalizer",
    "get_full_path",
    "normalize_path",
    "normalize_path_noop",
]
