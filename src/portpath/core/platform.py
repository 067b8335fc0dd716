"""
Platform and separator configuration.

A SeparatorConfig is built once from a Platform value and passed to every
path operation. Nothing in the core looks at the host operating system.
"""

from dataclasses import dataclass
from enum import Enum


class Platform(Enum):
    """Path conventions a SeparatorConfig can describe."""

    WINDOWS = "windows"
    POSIX = "posix"

    @classmethod
    def from_name(cls, name: str) -> "Platform":
        """
        Look up a platform by its case-insensitive name.

        Raises:
            ValueError: If name matches no platform.
        """
        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown platform '{name}'. Valid values: {valid}")


# Limits mirror the host conventions: MAX_PATH / MAX_DIRECTORY on Windows,
# PATH_MAX on POSIX.
WINDOWS_MAX_PATH = 260
WINDOWS_MAX_DIRECTORY_LENGTH = 255
POSIX_MAX_PATH = 4096
POSIX_MAX_DIRECTORY_LENGTH = 4096


@dataclass(frozen=True)
class SeparatorConfig:
    """
    Separator characters and length limits for one platform.

    Attributes:
        platform: Platform the values were derived from.
        directory_separator: Primary directory separator.
        alt_directory_separator: Alternate directory separator.
        volume_separator: Separator between a volume name and the rest of a path.
        path_separator: Separator between entries of a path list (PATH).
        max_path: Maximum path length.
        max_directory_length: Maximum directory name length.
    """

    platform: Platform
    directory_separator: str
    alt_directory_separator: str
    volume_separator: str
    path_separator: str
    max_path: int
    max_directory_length: int

    @classmethod
    def for_platform(cls, platform: Platform) -> "SeparatorConfig":
        """Build the separator configuration for a platform."""
        if platform is Platform.WINDOWS:
            return cls(
                platform=platform,
                directory_separator="\\",
                alt_directory_separator="/",
                volume_separator=":",
                path_separator=";",
                max_path=WINDOWS_MAX_PATH,
                max_directory_length=WINDOWS_MAX_DIRECTORY_LENGTH,
            )
        return cls(
            platform=platform,
            directory_separator="/",
            alt_directory_separator="\\",
            volume_separator="/",
            path_separator=":",
            max_path=POSIX_MAX_PATH,
            max_directory_length=POSIX_MAX_DIRECTORY_LENGTH,
        )

    @property
    def is_windows(self) -> bool:
        return self.platform is Platform.WINDOWS

    def is_directory_separator(self, ch: str) -> bool:
        """Check if ch is the primary or alternate directory separator."""
        return ch == self.directory_separator or ch == self.alt_directory_separator

    def is_segment_boundary(self, ch: str) -> bool:
        """Check if ch ends a file name when scanning backward."""
        return (
            ch == self.directory_separator
            or ch == self.alt_directory_separator
            or ch == self.volume_separator
        )


WINDOWS_SEPARATORS = SeparatorConfig.for_platform(Platform.WINDOWS)
POSIX_SEPARATORS = SeparatorConfig.for_platform(Platform.POSIX)
