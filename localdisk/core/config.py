"""localdisk runtime configuration and settings."""
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from localdisk.core.errors import ConfigValidationError

DEFAULT_SYSFS_ROOT = "/sys/class/block"

# Config search paths (ordered by proximity to current run)
CONFIG_PATHS = [
    "./localdisk.yml",
    str(Path.home() / ".config" / "localdisk" / "localdisk.yml"),
    "/etc/localdisk/localdisk.yml",
]

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class LocalDiskConfig:
    """Runtime configuration for localdisk.

    Attributes:
        sysfs_root: Directory holding one entry per block device
        mock: Use canned in-memory disks instead of libstoragemgmt and sysfs
        verbose: Log attribute read failures at debug level
        log_file: Also write log records to this file
    """

    sysfs_root: str = DEFAULT_SYSFS_ROOT
    mock: bool = False
    verbose: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "LocalDiskConfig":
        """Create config from a parsed YAML document.

        Raises:
            ConfigValidationError: unknown keys or wrong value types
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise ConfigValidationError(f"Unknown config keys: {', '.join(unknown)}")

        for key in ("mock", "verbose"):
            if key in data and not isinstance(data[key], bool):
                raise ConfigValidationError(f"'{key}' must be true or false")
        for key in ("sysfs_root", "log_file"):
            if data.get(key) is not None and not isinstance(data[key], str):
                raise ConfigValidationError(f"'{key}' must be a string")

        return cls(**data)

    @classmethod
    def from_file(cls, path: Path) -> "LocalDiskConfig":
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigValidationError(f"Unable to read config file {path}: {e.strerror}") from e
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}") from e

        # Handle empty config file
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigValidationError(f"Config file {path} must contain a mapping")
        return cls.from_mapping(data)

    def apply_env(self) -> "LocalDiskConfig":
        """Override settings from environment variables.

        Environment variables:
            LOCALDISK_SYSFS_ROOT: sysfs block class directory
            LOCALDISK_MOCK: "1" to use canned disks
            LOCALDISK_VERBOSE: "1" for debug logging
            LOCALDISK_LOG_FILE: log file path
        """
        if sysfs_root := os.environ.get("LOCALDISK_SYSFS_ROOT"):
            self.sysfs_root = sysfs_root
        if (mock := os.environ.get("LOCALDISK_MOCK")) is not None:
            self.mock = _env_flag(mock)
        if (verbose := os.environ.get("LOCALDISK_VERBOSE")) is not None:
            self.verbose = _env_flag(verbose)
        if log_file := os.environ.get("LOCALDISK_LOG_FILE"):
            self.log_file = log_file
        return self


def find_config(config_path: Optional[str] = None) -> Optional[Path]:
    """Locate the active configuration file, if any."""
    if config_path:
        return Path(config_path)

    if env_config := os.environ.get("LOCALDISK_CONFIG"):
        return Path(env_config)

    for path in CONFIG_PATHS:
        if Path(path).exists():
            return Path(path)

    return None


def load_config(config_path: Optional[str] = None) -> LocalDiskConfig:
    """Build configuration from defaults, config file, then environment.

    Raises:
        FileNotFoundError: an explicitly requested file does not exist
        ConfigValidationError: the file is unreadable or malformed
    """
    path = find_config(config_path)
    if path is None:
        config = LocalDiskConfig()
    elif not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    else:
        config = LocalDiskConfig.from_file(path)
    return config.apply_env()


# Global config instance (can be overridden)
_config: Optional[LocalDiskConfig] = None


def get_config() -> LocalDiskConfig:
    """Get the global localdisk configuration.

    Returns:
        LocalDiskConfig instance (loaded from file and environment if not set)
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[LocalDiskConfig]):
    """Set the global localdisk configuration.

    Args:
        config: LocalDiskConfig instance to use globally, or None to reset
    """
    global _config
    _config = config
