"""
Path service bound to one separator configuration.

Wraps the core functions so callers construct the configuration once and then
call operations without passing separators each time.
"""

import logging
from typing import Optional

from portpath.core import directory_name, extension, resolution, root_length, validation
from portpath.core.config import PortPathConfig
from portpath.core.platform import Platform, SeparatorConfig
from portpath.core.resolution import Normalizer, normalize_path_noop

logger = logging.getLogger(__name__)


class PathService:
    """
    Path-string operations for a single platform.

    Holds only frozen configuration and a normalizer reference, so one
    instance can be shared between threads.

    Attributes:
        separators: Separator configuration every operation uses.
        check_additional: Default strictness for validate().
    """

    def __init__(
        self,
        separators: SeparatorConfig,
        normalizer: Normalizer = normalize_path_noop,
        check_additional: bool = False,
    ):
        """
        Initialize the service.

        Args:
            separators: Separator configuration of the target platform.
            normalizer: Normalization collaborator for get_directory_name.
            check_additional: Reject '*' and '?' in validate() by default.
        """
        self._separators = separators
        self._normalizer = normalizer
        self._check_additional = check_additional

    @classmethod
    def from_platform(
        cls, platform: Platform, normalizer: Normalizer = normalize_path_noop
    ) -> "PathService":
        return cls(SeparatorConfig.for_platform(platform), normalizer=normalizer)

    @classmethod
    def from_config(
        cls, config: PortPathConfig, normalizer: Normalizer = normalize_path_noop
    ) -> "PathService":
        """Create a service from loaded configuration."""
        separators = config.separators()
        logger.debug(
            f"PathService configured for {separators.platform.value} "
            f"(check_additional={config.platform.check_additional})"
        )
        return cls(
            separators,
            normalizer=normalizer,
            check_additional=config.platform.check_additional,
        )

    @property
    def separators(self) -> SeparatorConfig:
        return self._separators

    @property
    def platform(self) -> Platform:
        return self._separators.platform

    @property
    def check_additional(self) -> bool:
        return self._check_additional

    def validate(self, path: Optional[str], check_additional: Optional[bool] = None) -> None:
        """Raise if path is None or holds illegal characters."""
        strict = self._check_additional if check_additional is None else check_additional
        validation.check_invalid_path_chars(path, strict)

    def has_illegal_characters(self, path: str, check_additional: Optional[bool] = None) -> bool:
        strict = self._check_additional if check_additional is None else check_additional
        return validation.has_illegal_characters(path, strict)

    def get_root_length(self, path: str) -> int:
        result = root_length.get_root_length(path, self._separators)
        logger.debug(f"get_root_length({path!r}) -> {result}")
        return result

    def get_root(self, path: str) -> str:
        """Return the root prefix of path ("" for a relative path)."""
        return path[: self.get_root_length(path)]

    def is_path_rooted(self, path: Optional[str]) -> bool:
        return root_length.is_path_rooted(path, self._separators)

    def get_extension(self, path: Optional[str]) -> Optional[str]:
        result = extension.get_extension(path, self._separators)
        logger.debug(f"get_extension({path!r}) -> {result!r}")
        return result

    def change_extension(self, path: Optional[str], new_extension: Optional[str]) -> Optional[str]:
        result = extension.change_extension(path, new_extension, self._separators)
        logger.debug(f"change_extension({path!r}, {new_extension!r}) -> {result!r}")
        return result

    def has_extension(self, path: Optional[str]) -> bool:
        return extension.has_extension(path, self._separators)

    def get_file_name(self, path: Optional[str]) -> Optional[str]:
        return directory_name.get_file_name(path, self._separators)

    def get_file_name_without_extension(self, path: Optional[str]) -> Optional[str]:
        return extension.get_file_name_without_extension(path, self._separators)

    def get_directory_name(self, path: Optional[str]) -> Optional[str]:
        result = directory_name.get_directory_name(path, self._separators, self._normalizer)
        logger.debug(f"get_directory_name({path!r}) -> {result!r}")
        return result

    def iter_parents(self, path: str) -> list[str]:
        """
        Ascend from path to its root.

        Returns:
            Successive get_directory_name results, nearest parent first.
            Ends at the root (or "" for a relative path).
        """
        parents = []
        current = self.get_directory_name(path)
        while current is not None:
            parents.append(current)
            current = self.get_directory_name(current)
        return parents

    def get_full_path(self, path: str) -> str:
        return resolution.get_full_path(path)

    def normalize_path(self, path: str, unused: bool = False) -> str:
        return resolution.normalize_path(path, unused)
