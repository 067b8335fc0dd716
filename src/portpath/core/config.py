"""
Configuration module for portpath.

Supports loading from YAML/JSON files with environment variable overrides.
Default values are loaded from the packaged defaults.yaml.
"""

import json
import logging
import os
import sys
from dataclasses import asdict, dataclass, field, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml

from portpath.core.errors import ConfigError
from portpath.core.platform import Platform, SeparatorConfig

logger = logging.getLogger(__name__)

_DEFAULTS_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"

AUTO_PLATFORM = "auto"

# Name of the handler configure_logging owns on the package logger
_HANDLER_NAME = "portpath"


@lru_cache(maxsize=1)
def _packaged_defaults() -> dict[str, Any]:
    """Read defaults.yaml once; an unreadable file leaves built-in fallbacks."""
    try:
        data = yaml.safe_load(_DEFAULTS_CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Packaged defaults unavailable ({_DEFAULTS_CONFIG_PATH}): {e}")
        return {}
    return data if isinstance(data, dict) else {}


def _default(section: str, key: str, fallback: Any) -> Any:
    return _packaged_defaults().get(section, {}).get(key, fallback)


def detect_host_platform() -> Platform:
    """Pick the platform whose conventions match the running interpreter."""
    if sys.platform == "win32":
        return Platform.WINDOWS
    return Platform.POSIX


def resolve_platform_name(name: Any) -> Platform:
    """
    Resolve a configured platform name.

    "auto" resolves to the host platform.

    Raises:
        ConfigError: If name is not a string or not a known platform.
    """
    if not isinstance(name, str):
        raise ConfigError(f"Platform name must be a string, got {name!r}")
    if name.strip().lower() == AUTO_PLATFORM:
        return detect_host_platform()
    try:
        return Platform.from_name(name)
    except ValueError as e:
        raise ConfigError(str(e)) from e


def resolve_log_level(level: Any) -> int:
    """
    Resolve a logging level name such as "debug" or "WARNING".

    Raises:
        ConfigError: If level is not a known level name.
    """
    if isinstance(level, str):
        value = logging.getLevelName(level.strip().upper())
        if isinstance(value, int):
            return value
    raise ConfigError(f"Unknown logging level {level!r}")


@dataclass
class PlatformConfig:
    """Target path platform and validation strictness."""

    name: str = field(default_factory=lambda: _default("platform", "name", AUTO_PLATFORM))
    check_additional: bool = field(
        default_factory=lambda: _default("platform", "check_additional", False)
    )

    def __post_init__(self) -> None:
        resolve_platform_name(self.name)
        if not isinstance(self.check_additional, bool):
            raise ConfigError(
                f"platform.check_additional must be true or false, got {self.check_additional!r}"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = field(default_factory=lambda: _default("logging", "level", "WARNING"))
    format: str = field(
        default_factory=lambda: _default(
            "logging", "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )

    def __post_init__(self) -> None:
        resolve_log_level(self.level)
        if not isinstance(self.format, str):
            raise ConfigError(f"logging.format must be a string, got {self.format!r}")


def _build_section(section_cls: type, name: str, raw: Any) -> Any:
    """Build one config section, rejecting non-mappings and unknown keys."""
    if not isinstance(raw, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping, got {type(raw).__name__}")
    known = {f.name for f in fields(section_cls)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown keys in config section '{name}': {', '.join(map(str, unknown))}")
    return section_cls(**raw)


@dataclass
class PortPathConfig:
    """Main configuration class for portpath."""

    platform: PlatformConfig = field(default_factory=PlatformConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, path: Path | str) -> "PortPathConfig":
        """
        Load configuration from a YAML or JSON file.

        Args:
            path: Path to the configuration file (.yaml, .yml, or .json)

        Returns:
            PortPathConfig instance with loaded values

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ValueError: If the file format is unsupported
            ConfigError: If the file cannot be parsed or holds invalid values
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        content = path.read_text(encoding="utf-8")

        try:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(content) or {}
            elif path.suffix == ".json":
                data = json.loads(content) if content.strip() else {}
            else:
                raise ValueError(f"Unsupported config file format: {path.suffix}")
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to parse config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping at top level")
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "PortPathConfig":
        """Create PortPathConfig from a dictionary."""
        config = cls()

        if "platform" in data:
            config.platform = _build_section(PlatformConfig, "platform", data["platform"])
        if "logging" in data:
            config.logging = _build_section(LoggingConfig, "logging", data["logging"])

        return config

    def apply_env_overrides(self) -> "PortPathConfig":
        """
        Apply environment variable overrides to the configuration.

        Environment variables follow the pattern: PORTPATH_<SECTION>_<KEY>
        Examples:
            - PORTPATH_PLATFORM_NAME
            - PORTPATH_LOGGING_LEVEL

        Returns:
            Self with environment overrides applied

        Raises:
            ConfigError: If an override holds an invalid value
        """
        platform_overrides: dict[str, Any] = {}
        logging_overrides: dict[str, Any] = {}

        if "PORTPATH_PLATFORM_NAME" in os.environ:
            platform_overrides["name"] = os.environ["PORTPATH_PLATFORM_NAME"]
        if "PORTPATH_PLATFORM_CHECK_ADDITIONAL" in os.environ:
            platform_overrides["check_additional"] = _parse_bool(
                os.environ["PORTPATH_PLATFORM_CHECK_ADDITIONAL"]
            )
        if "PORTPATH_LOGGING_LEVEL" in os.environ:
            logging_overrides["level"] = os.environ["PORTPATH_LOGGING_LEVEL"]
        if "PORTPATH_LOGGING_FORMAT" in os.environ:
            logging_overrides["format"] = os.environ["PORTPATH_LOGGING_FORMAT"]

        # Rebuild sections so overrides go through the same validation as files
        if platform_overrides:
            self.platform = PlatformConfig(**{**asdict(self.platform), **platform_overrides})
        if logging_overrides:
            self.logging = LoggingConfig(**{**asdict(self.logging), **logging_overrides})

        return self

    def platform_value(self) -> Platform:
        """Resolve the configured platform name ("auto" is the host platform)."""
        return resolve_platform_name(self.platform.name)

    def separators(self) -> SeparatorConfig:
        """Build the SeparatorConfig for the configured platform."""
        return SeparatorConfig.for_platform(self.platform_value())

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        return asdict(self)


def _parse_bool(value: str) -> bool:
    """Parse a string to boolean."""
    return value.lower() in ("true", "1", "yes", "on")


def configure_logging(config: LoggingConfig) -> None:
    """
    Apply a LoggingConfig to the portpath logger hierarchy.

    Repeated calls keep a single portpath handler, replacing the previous one
    so the current format and the current sys.stderr apply.
    """
    level = resolve_log_level(config.level)

    package_logger = logging.getLogger("portpath")
    package_logger.setLevel(level)

    for existing in [h for h in package_logger.handlers if h.get_name() == _HANDLER_NAME]:
        package_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(config.format))
    package_logger.addHandler(handler)


def load_config(
    config_path: Optional[Path | str] = None, apply_env: bool = True
) -> PortPathConfig:
    """
    Load configuration with optional environment variable overrides.

    Args:
        config_path: Optional path to config file. If None, uses defaults.
        apply_env: Whether to apply environment variable overrides.

    Returns:
        PortPathConfig instance
    """
    if config_path:
        config = PortPathConfig.from_file(config_path)
    else:
        config = PortPathConfig()

    if apply_env:
        config.apply_env_overrides()

    return config
