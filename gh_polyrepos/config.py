"""Configuration management for gh-polyrepos."""

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from gh_polyrepos.models import Config
from gh_polyrepos.utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_FILE_NAME = ".gh-polyrepos.config.json"
ROOT_DIR_ENV_VAR = "GH_POLYREPOS_ROOT_DIR"

# Accepted spellings of each config key, mapped to the stored JSON key
CONFIG_KEYS = {
    "rootDir": "rootDir",
    "root_dir": "rootDir",
    "root-dir": "rootDir",
}


class ConfigError(Exception):
    """Configuration error."""
    pass


class ConfigManager:
    """Reads and rewrites the JSON config file in the working directory."""

    def __init__(self, path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            path: Config file path; defaults to the config file in the
                current working directory, resolved on each access
        """
        self._path = Path(path) if path else None
        self._config: Optional[Config] = None

    @property
    def config_path(self) -> Path:
        """Path of the config file."""
        if self._path is not None:
            return self._path
        return Path.cwd() / CONFIG_FILE_NAME

    def _load_json_file(self) -> Dict[str, Any]:
        """Load and parse the config document.

        Returns:
            Parsed document, empty if the file does not exist

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object
        """
        path = self.config_path
        if not path.exists():
            return {}

        logger.debug(f"Loading config file: {path}")

        try:
            with open(path, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Failed to parse JSON file {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to load config file {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        logger.debug(f"Loaded config with keys: {list(data.keys())}")
        return data

    def _apply_env_overrides(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to config data."""
        value = os.getenv(ROOT_DIR_ENV_VAR)
        if value:
            data = {**data, "rootDir": value}
            logger.debug(f"Applied env override: rootDir = {value}")
        return data

    def load_config(self) -> Config:
        """Load configuration from the config file and environment.

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If configuration is invalid
        """
        data = self._apply_env_overrides(self._load_json_file())

        try:
            self._config = Config.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.config_path}: {e}")

        return self._config

    def get_config(self) -> Config:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def reload_config(self) -> Config:
        """Reload configuration from disk."""
        self._config = None
        return self.load_config()

    def get_config_value(self, key: str) -> Any:
        """Get configuration value by key.

        Args:
            key: Config key (``rootDir`` or ``root_dir``)

        Returns:
            Configuration value

        Raises:
            ConfigError: If key is not known
        """
        json_key = CONFIG_KEYS.get(key, key)
        values = self.get_config().model_dump(by_alias=True)
        if json_key not in values:
            raise ConfigError(f"Configuration key not found: {key}")
        return values[json_key]

    def set_config_value(self, key: str, value: Any) -> None:
        """Set configuration value and rewrite the whole file.

        Args:
            key: Config key
            value: Value to set

        Raises:
            ConfigError: If configuration cannot be saved
        """
        json_key = CONFIG_KEYS.get(key, key)
        data = self._load_json_file()
        data[json_key] = value

        path = self.config_path
        try:
            with open(path, "w") as f:
                json.dump(data, f, indent=2)
                f.write("\n")
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}")

        logger.info(f"Configuration saved to {path}: {json_key} = {value}")
        self.reload_config()

    def resolve_root_dir(self, prompt_root_dir: Callable[[], str]) -> Path:
        """Determine the root directory to traverse.

        A saved ``rootDir`` is used as is. Without one the operator is asked
        and the answer is saved.

        Args:
            prompt_root_dir: Asks the operator for the root directory

        Returns:
            Root directory path
        """
        cached = self.get_config().root_dir
        if cached:
            logger.debug(f"Using saved root directory: {cached}")
            return Path(cached)

        root_dir = prompt_root_dir().strip()
        if root_dir:
            self.set_config_value("rootDir", root_dir)

        return Path(root_dir)


config_manager = ConfigManager()


def get_config() -> Config:
    """Get current configuration."""
    return config_manager.get_config()
