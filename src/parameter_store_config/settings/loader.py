"""Settings loader for environment variables and YAML files."""

import os
from collections.abc import Mapping
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

from ruamel.yaml import YAML

from ..errors import ConfigMergeError, InvalidArgumentError
from .schema import ParameterStoreSettings, validate_settings

logger = logging.getLogger(__name__)

SETTINGS_SECTION = 'parameter_store'

ENV_PREFIX = 'PARAMETER_STORE_'

ENV_SETTINGS = [
    'root_path',
    'region',
    'profile',
    'parse_string_list_as_list',
    'fail_if_cant_load',
    'max_attempts',
    'connect_timeout',
    'read_timeout',
]

DEFAULT_SETTINGS: Dict[str, Any] = {
    'parse_string_list_as_list': False,
    'fail_if_cant_load': False,
}


class SettingsLoader:
    """Handles loading and merging settings from multiple sources."""

    def load_from_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load the ``parameter_store`` section of a YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Settings dictionary (empty if the section is missing)

        Raises:
            FileNotFoundError: If config file doesn't exist
            InvalidArgumentError: If the document or its section is not a mapping
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            yaml = YAML(typ='safe')
            with open(config_path, 'r') as f:
                config = yaml.load(f) or {}
        except Exception as e:
            logger.error(f"Invalid YAML in {config_path}: {e}")
            raise

        if not isinstance(config, Mapping):
            raise InvalidArgumentError(
                f"Configuration file {config_path} must contain a mapping, got {type(config).__name__}"
            )

        section = config.get(SETTINGS_SECTION) or {}
        if not isinstance(section, Mapping):
            raise InvalidArgumentError(
                f"Section '{SETTINGS_SECTION}' in {config_path} must be a mapping, "
                f"got {type(section).__name__}"
            )

        logger.info(f"Loaded settings from {config_path}")
        return dict(section)

    def load_from_env(self, environ: Optional[Mapping] = None) -> Dict[str, Any]:
        """Load settings from ``PARAMETER_STORE_*`` environment variables.

        The region falls back to AWS_REGION and AWS_DEFAULT_REGION.
        """
        environ = os.environ if environ is None else environ
        config = {}

        for name in ENV_SETTINGS:
            value = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if value:
                config[name] = value

        if 'region' not in config:
            region = environ.get('AWS_REGION') or environ.get('AWS_DEFAULT_REGION')
            if region:
                config['region'] = region

        return config

    def merge(self, *configs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge settings dictionaries; later ones take precedence."""
        result = {}

        for config in configs:
            if config:
                result = self.deep_merge(result, config)

        return result

    def deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """
        Deep merge two dictionaries, with override taking precedence.

        Merge rules:
        - Dictionaries are merged recursively
        - None values in override are ignored
        - All other values replace

        Raises:
            ConfigMergeError: If merge operation fails
        """
        try:
            result = deepcopy(base)

            for key, value in override.items():
                if value is None:
                    continue
                if (key in result and
                        isinstance(result[key], Mapping) and
                        isinstance(value, Mapping)):
                    result[key] = self.deep_merge(result[key], value)
                else:
                    result[key] = deepcopy(value)

            return result

        except Exception as e:
            raise ConfigMergeError(f"Failed to merge configurations: {e}") from e


def load_settings(
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping] = None,
    **override_values
) -> ParameterStoreSettings:
    """Load settings from multiple sources with precedence.

    Precedence order (highest to lowest):
    1. Explicit override values passed as kwargs (None is ignored)
    2. User-provided YAML file
    3. Environment variables
    4. Built-in defaults

    Args:
        config_path: Optional path to a YAML file with a ``parameter_store`` section
        environ: Environment mapping, defaults to os.environ
        **override_values: Explicit setting overrides

    Returns:
        Validated settings

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        InvalidArgumentError: If the merged settings are invalid
    """
    loader = SettingsLoader()

    env_config = loader.load_from_env(environ)
    file_config = loader.load_from_file(config_path) if config_path else {}

    merged = loader.merge(
        DEFAULT_SETTINGS,
        env_config,
        file_config,
        override_values,
    )

    settings = validate_settings(merged)
    logger.info(f"Loaded Parameter Store settings for '{settings.root_path}'")
    return settings
