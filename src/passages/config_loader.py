"""YAML configuration loading and validation.

This module loads project settings from .passage-sync/config.yaml. Every
field is optional; a missing file means "use the defaults".

Configuration file structure:
    notes_dir: "./notes"
    collection: "passages"
    concurrency: 10
    ascending: false
    strict_dates: false
"""

from typing import Any, Dict

import yaml

from .errors import ConfigError, FilesystemError
from .models import LoaderConfig


class ConfigLoader:
    """Handles configuration file loading and validation."""

    DEFAULT_CONFIG_PATH = '.passage-sync/config.yaml'

    STRING_FIELDS = ('notes_dir', 'collection')
    BOOL_FIELDS = ('ascending', 'strict_dates')

    @classmethod
    def load(cls, config_path: str = DEFAULT_CONFIG_PATH) -> LoaderConfig:
        """Load and validate configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            LoaderConfig with file values applied over the defaults

        Raises:
            FilesystemError: If the file exists but cannot be read
            ConfigError: If the configuration is invalid or malformed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            return LoaderConfig()
        except PermissionError:
            raise FilesystemError(config_path, 'read', 'Permission denied')
        except OSError as e:
            raise FilesystemError(config_path, 'read', str(e))

        if not content.strip():
            return LoaderConfig()

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {e}")

        if config_dict is None:
            return LoaderConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._parse_config(config_dict)

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> LoaderConfig:
        config = LoaderConfig()

        for name in cls.STRING_FIELDS:
            if name in config_dict:
                value = config_dict[name]
                if not isinstance(value, str) or not value.strip():
                    raise ConfigError("must be a non-empty string", name)
                setattr(config, name, value.strip())

        for name in cls.BOOL_FIELDS:
            if name in config_dict:
                value = config_dict[name]
                if not isinstance(value, bool):
                    raise ConfigError("must be true or false", name)
                setattr(config, name, value)

        if 'concurrency' in config_dict:
            concurrency = config_dict['concurrency']
            # bool is an int subclass
            if isinstance(concurrency, bool) or not isinstance(concurrency, int) or concurrency < 1:
                raise ConfigError("must be a positive integer", 'concurrency')
            config.concurrency = concurrency

        return config
