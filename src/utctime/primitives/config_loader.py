"""
ConfigLoader Primitive

Loads utctime settings files with validation and environment variable substitution.
"""

import json
import os
import re
from pathlib import Path
from typing import Optional, Union

from utctime.primitives.errors import ConfigError
from utctime.primitives.json_validator import JSONValidator


class ConfigLoader:
    """Loads and validates JSON settings files"""

    # Environment variable pattern: ${VAR_NAME}
    ENV_VAR_PATTERN = r"\$\{([^}]+)\}"

    def __init__(self):
        self.validator = JSONValidator()

    def read(self, config_path: str) -> dict:
        """
        Read a JSON file into a dict

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigError: If JSON is malformed or the document is not an object
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {config_path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Config is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError("Config validation failed: root: must be a JSON object")
        return data

    def load(self, config_path: str, schema: Optional[dict] = None) -> dict:
        """
        Load configuration file with optional validation and env var substitution

        Args:
            config_path: Path to the JSON config file
            schema: JSON schema for validation. Defaults to the settings schema.

        Returns:
            dict: Loaded and processed configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigError: If JSON is malformed, fails validation, or an env var is undefined
        """
        config = self.read(config_path)
        config = self._substitute_env_vars(config)

        is_valid, error_messages = self.validator.validate(
            config, schema if schema is not None else JSONValidator.SETTINGS_SCHEMA
        )
        if not is_valid:
            # Report first validation error for clarity
            raise ConfigError(f"Config validation failed: {error_messages[0]}")

        return config

    def _substitute_env_vars(
        self, data: Union[dict, list, str, int, float, bool, None]
    ) -> Union[dict, list, str, int, float, bool, None]:
        """
        Recursively substitute ${VAR_NAME} references in config data

        Raises:
            ConfigError: If environment variable is not defined
        """
        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]
        elif isinstance(data, str):
            matches = re.findall(self.ENV_VAR_PATTERN, data)

            for var_name in matches:
                if var_name not in os.environ:
                    raise ConfigError(f"Environment variable '{var_name}' is not defined")
                data = data.replace(f"${{{var_name}}}", os.environ[var_name])

            return data
        else:
            return data
