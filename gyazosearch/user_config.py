"""
User configuration management for Gyazo Search.

Supports configuration from multiple sources (in order of priority):
1. Runtime parameters (highest priority)
2. Environment variables
3. User config file (~/.gyazosearch/config.json)
4. Default values from config.py (lowest priority)

Configuration file location: ~/.gyazosearch/config.json

Example config.json:
{
    "access_token": "your-gyazo-access-token",
    "per_page": 20,
    "debounce_ms": 500,
    "grid_columns": 5,
    "request_timeout": 10.0,
    "api_base_url": null
}
"""

import json
import os
from pathlib import Path
from typing import Any, Optional
import logging

from .config import (
    API_BASE_URL,
    CONFIG_DIR,
    DEFAULT_PER_PAGE,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_GRID_COLUMNS,
    DEFAULT_TIMEOUT,
)
from .utils.validators import validate_grid_columns, validate_per_page

logger = logging.getLogger(__name__)


class UserConfig:
    """
    Manages user configuration from file and environment variables.

    Attributes are lazy-loaded and cached for performance.
    """

    _instance: Optional['UserConfig'] = None
    _config_data: Optional[dict] = None

    def __new__(cls):
        """Singleton pattern to ensure one config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        env_dir = os.getenv('GYAZOSEARCH_CONFIG_DIR')
        if env_dir:
            return Path(env_dir)

        return Path(CONFIG_DIR)

    @property
    def config_file_path(self) -> Path:
        """Get the configuration file path."""
        return self.config_dir / 'config.json'

    def _load_config_file(self) -> dict:
        """Load configuration from JSON file."""
        if not self.config_file_path.exists():
            return {}

        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
                logger.debug(f"Loaded configuration from {self.config_file_path}")
                return data
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config file {self.config_file_path}: {e}")
            return {}

    def _get_config_data(self) -> dict:
        """Get cached config data (lazy loading)."""
        if self._config_data is None:
            self._config_data = self._load_config_file()
        return self._config_data

    def reload(self):
        """Reload configuration from file."""
        self._config_data = None

    def get(self, key: str, default: Any = None, env_var: Optional[str] = None,
            parse_env: bool = True) -> Any:
        """
        Get a configuration value with priority:
        1. Environment variable (if env_var specified)
        2. Config file
        3. Default value

        Args:
            key: Configuration key
            default: Default value if not found
            env_var: Optional environment variable name to check
            parse_env: Parse the environment value as JSON when possible

        Returns:
            Configuration value
        """
        if env_var:
            env_value = os.getenv(env_var)
            if env_value is not None:
                if not parse_env:
                    return env_value
                try:
                    return json.loads(env_value)
                except (json.JSONDecodeError, TypeError):
                    return env_value

        config_data = self._get_config_data()
        if key in config_data and config_data[key] is not None:
            return config_data[key]

        return default

    @property
    def access_token(self) -> str:
        """Gyazo API access token ('' when not configured)."""
        # Tokens are opaque strings; never JSON-decode them
        value = self.get('access_token', default='', env_var='GYAZO_ACCESS_TOKEN', parse_env=False)
        return str(value).strip()

    @property
    def has_access_token(self) -> bool:
        return bool(self.access_token)

    @property
    def per_page(self) -> int:
        """Number of images fetched per page (default when the configured value is invalid)."""
        value = self.get('per_page', default=DEFAULT_PER_PAGE, env_var='GYAZOSEARCH_PER_PAGE')
        is_valid, error = validate_per_page(value)
        if not is_valid:
            logger.warning(f"Ignoring per_page={value!r}: {error}")
            return DEFAULT_PER_PAGE
        return value

    @property
    def debounce_ms(self) -> int:
        """Search box quiescence window in milliseconds."""
        return int(self.get('debounce_ms', default=DEFAULT_DEBOUNCE_MS, env_var='GYAZOSEARCH_DEBOUNCE_MS'))

    @property
    def grid_columns(self) -> int:
        """Default number of grid columns in the GUI; one of the offered grid sizes."""
        value = self.get('grid_columns', default=DEFAULT_GRID_COLUMNS, env_var='GYAZOSEARCH_GRID_COLUMNS')
        is_valid, error = validate_grid_columns(value)
        if not is_valid:
            logger.warning(f"Ignoring grid_columns={value!r}: {error}")
            return DEFAULT_GRID_COLUMNS
        return value

    @property
    def request_timeout(self) -> float:
        """Seconds before an API request is abandoned."""
        return float(self.get('request_timeout', default=DEFAULT_TIMEOUT, env_var='GYAZOSEARCH_TIMEOUT'))

    @property
    def api_base_url(self) -> str:
        """Base URL of the Gyazo API."""
        return self.get('api_base_url', default=API_BASE_URL, env_var='GYAZOSEARCH_API_BASE_URL',
                        parse_env=False)

    def masked_token(self) -> str:
        """Return the access token with all but the last four characters hidden."""
        token = self.access_token
        if not token:
            return '(not set)'
        if len(token) <= 4:
            return '*' * len(token)
        return '*' * (len(token) - 4) + token[-4:]

    def _write_config_file(self, data: dict) -> bool:
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to write config file {self.config_file_path}: {e}")
            return False
        self._config_data = data
        return True

    def set_access_token(self, token: str) -> bool:
        """
        Persist an access token to the user config file.

        Other keys already present in the file are kept.

        Returns:
            True if the file was written
        """
        data = dict(self._get_config_data())
        data['access_token'] = token.strip()
        if self._write_config_file(data):
            logger.info(f"Saved access token to {self.config_file_path}")
            return True
        return False

    def create_example_config(self):
        """Create an example configuration file."""
        example_config = {
            "_comment": "Gyazo Search User Configuration",
            "access_token": "",
            "per_page": DEFAULT_PER_PAGE,
            "debounce_ms": DEFAULT_DEBOUNCE_MS,
            "grid_columns": DEFAULT_GRID_COLUMNS,
            "request_timeout": DEFAULT_TIMEOUT,
            "api_base_url": None,
        }

        if self._write_config_file(example_config):
            logger.info(f"Created example config file at {self.config_file_path}")
            return True
        return False


# Global instance
_user_config = UserConfig()


def get_user_config() -> UserConfig:
    """Get the global UserConfig instance."""
    return _user_config
