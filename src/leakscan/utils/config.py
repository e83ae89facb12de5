"""Configuration management with multiple sources."""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, List
from dataclasses import dataclass, field

from .logger import get_logger
from .exceptions import ConfigError, InvalidConfigError, MissingConfigError

logger = get_logger(__name__)


@dataclass
class ScanConfig:
    """Scan configuration options."""
    workers: int = 1


@dataclass
class PatternConfig:
    """Detector catalog options."""
    builtin: bool = True
    custom: Dict[str, str] = field(default_factory=dict)
    disabled: List[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    """Output configuration."""
    format: str = "txt"
    directory: str = "."
    verbose: bool = False


def _to_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


class Config:
    """
    Configuration manager.

    Priority (highest to lowest):
    1. CLI arguments (applied by the caller)
    2. Explicit config file (--config)
    3. Environment variables
    4. Project config (.leakscan.yml)
    5. User config (~/.leakscan/config.yml)
    6. Default values
    """

    CONFIG_FILENAME = ".leakscan.yml"
    USER_CONFIG_DIR = Path.home() / ".leakscan"
    USER_CONFIG_FILE = USER_CONFIG_DIR / "config.yml"

    def __init__(self):
        self.scan = ScanConfig()
        self.patterns = PatternConfig()
        self.output = OutputConfig()

        self._load_user_config()
        self._load_project_config()
        self._load_env_config()

        logger.debug("Configuration initialized")

    def _load_user_config(self) -> None:
        """Load user-level configuration."""
        if not self.USER_CONFIG_FILE.exists():
            logger.debug("No user config found")
            return

        try:
            with open(self.USER_CONFIG_FILE) as f:
                config = yaml.safe_load(f)

            if config:
                self._apply_config(config)
                logger.info(f"Loaded user config: {self.USER_CONFIG_FILE}")

        except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
            logger.warning(f"Failed to load user config: {e}")

    def _load_project_config(self) -> None:
        """Load project-level configuration from cwd or its parents."""
        current = Path.cwd()

        for parent in [current] + list(current.parents):
            config_file = parent / self.CONFIG_FILENAME

            if config_file.exists():
                try:
                    with open(config_file) as f:
                        config = yaml.safe_load(f)

                    if config:
                        self._apply_config(config)
                        logger.info(f"Loaded project config: {config_file}")
                    return

                except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
                    logger.warning(f"Failed to load project config: {e}")
                    return

        logger.debug("No project config found")

    def _load_env_config(self) -> None:
        """Load configuration from environment variables."""
        env_mappings = {
            "LEAKSCAN_WORKERS": ("scan", "workers", int),
            "LEAKSCAN_OUTPUT_FORMAT": ("output", "format", str),
            "LEAKSCAN_OUTPUT_DIR": ("output", "directory", str),
            "LEAKSCAN_VERBOSE": ("output", "verbose", _to_bool),
        }

        for env_var, (section, key, converter) in env_mappings.items():
            value = os.getenv(env_var)
            if value:
                try:
                    converted = converter(value)
                    setattr(getattr(self, section), key, converted)
                    logger.debug(f"Loaded from env: {env_var}={converted}")
                except ValueError as e:
                    logger.warning(f"Invalid env var {env_var}={value}: {e}")

    def _apply_config(self, config: Dict[str, Any]) -> None:
        """Apply configuration dictionary."""
        if not isinstance(config, dict):
            raise InvalidConfigError(
                "Configuration must be a mapping",
                details={"got": type(config).__name__},
            )

        if "scan" in config:
            scan_conf = config["scan"] or {}
            if "workers" in scan_conf:
                self.scan.workers = int(scan_conf["workers"])

        if "patterns" in config:
            pat_conf = config["patterns"] or {}
            if "builtin" in pat_conf:
                self.patterns.builtin = bool(pat_conf["builtin"])
            if "custom" in pat_conf:
                self.patterns.custom = pat_conf["custom"] or {}
            if "disabled" in pat_conf:
                self.patterns.disabled = list(pat_conf["disabled"] or [])

        if "output" in config:
            out_conf = config["output"] or {}
            if "format" in out_conf:
                self.output.format = str(out_conf["format"])
            if "directory" in out_conf:
                self.output.directory = str(out_conf["directory"])
            if "verbose" in out_conf:
                self.output.verbose = bool(out_conf["verbose"])

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key."""
        parts = key.split(".")

        if len(parts) != 2:
            raise InvalidConfigError(
                f"Invalid config key: {key}",
                suggestion="Use format: section.key (e.g., scan.workers)"
            )

        section, attr = parts

        if section not in ("scan", "patterns", "output"):
            return default

        section_obj = getattr(self, section)
        return getattr(section_obj, attr, default)

    def validate(self) -> None:
        """Validate configuration values."""
        errors = []

        if self.scan.workers < 1:
            errors.append("scan.workers must be >= 1")

        if not isinstance(self.patterns.custom, dict):
            errors.append("patterns.custom must be a mapping of label to regex")

        if errors:
            raise InvalidConfigError(
                "Configuration validation failed",
                details={"errors": errors},
                suggestion="Check your .leakscan.yml file"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "scan": {
                "workers": self.scan.workers,
            },
            "patterns": {
                "builtin": self.patterns.builtin,
                "custom": dict(self.patterns.custom),
                "disabled": list(self.patterns.disabled),
            },
            "output": {
                "format": self.output.format,
                "directory": self.output.directory,
                "verbose": self.output.verbose,
            },
        }

    @classmethod
    def create_user_config(cls, overwrite: bool = False) -> Path:
        """Create default user configuration file."""
        if cls.USER_CONFIG_FILE.exists() and not overwrite:
            raise ConfigError(
                f"User config already exists: {cls.USER_CONFIG_FILE}",
                suggestion="Use --overwrite to replace it"
            )

        cls.USER_CONFIG_DIR.mkdir(parents=True, exist_ok=True)

        default_config = Config()

        with open(cls.USER_CONFIG_FILE, "w") as f:
            yaml.dump(default_config.to_dict(), f, default_flow_style=False, sort_keys=False)

        logger.info(f"Created user config: {cls.USER_CONFIG_FILE}")
        return cls.USER_CONFIG_FILE


def init_config(config_path: Optional[Path] = None) -> Config:
    """
    Initialize configuration.

    Args:
        config_path: Optional explicit config file path

    Returns:
        Validated Config object
    """
    config = Config()

    if config_path:
        if not config_path.exists():
            raise MissingConfigError(
                f"Config file not found: {config_path}",
                suggestion="Check the file path or create a new config"
            )

        try:
            with open(config_path) as f:
                explicit_config = yaml.safe_load(f)

            if explicit_config:
                config._apply_config(explicit_config)
                logger.info(f"Loaded explicit config: {config_path}")

        except ConfigError:
            raise
        except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
            raise ConfigError(
                f"Failed to load config: {config_path}",
                details={"error": str(e)}
            )

    config.validate()

    return config
