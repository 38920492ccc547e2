#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASMplot v0.1.0

Configuration parser: YAML config loading, merging, and validation.

Author: ASMplot Development Team
License: See README.md
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..errors import ConfigValidationError
from .schema import DEFAULT_SECTIONS, default_config, validate_config

_ENV_PATTERN = re.compile(r'\$\{([^}:]+)(?::-(.*?))?\}')


class ConfigParser:
    """
    Parse and validate ASMplot configuration files.

    Features:
    - Load YAML configuration files
    - Merge with default values
    - Environment variable substitution (${VAR} and ${VAR:-default})
    - CLI parameter overrides
    - Schema validation
    - Dotted notation access (e.g., config.get('execution.threads'))
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration parser.

        Args:
            config_file: Path to YAML configuration file (optional)
        """
        self.config_file = Path(config_file) if config_file else None
        self._config: Dict[str, Any] = default_config()

        if self.config_file:
            self._load_user_config()

    def _load_user_config(self):
        """Load and merge user configuration file."""
        if not self.config_file.exists():
            raise ConfigValidationError(
                f"Configuration file not found: {self.config_file}"
            )

        try:
            with open(self.config_file, 'r') as f:
                user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(
                f"Invalid YAML in config file {self.config_file}: {e}"
            )

        if user_config is None:
            return
        if not isinstance(user_config, dict):
            raise ConfigValidationError(
                f"Config file {self.config_file} must contain a mapping at the top level"
            )
        for name in DEFAULT_SECTIONS:
            if name in user_config and not isinstance(user_config[name], dict):
                raise ConfigValidationError(
                    f"Config section '{name}' must be a mapping "
                    f"(got {user_config[name]!r} in {self.config_file})"
                )

        # User values override defaults
        self._config = self._deep_merge(self._config, user_config)
        self._config = self._substitute_env_vars(self._config)

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries.

        Args:
            base: Base dictionary (defaults)
            override: Override dictionary (user values)

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _substitute_env_vars(self, config: Any) -> Any:
        """
        Recursively substitute environment variables in configuration.

        Supports:
        - ${VAR}: Replace with environment variable VAR
        - ${VAR:-default}: Replace with VAR, or 'default' if not set

        A value consisting of a single reference is re-read as YAML, so
        ``threads: ${NSLOTS:-4}`` yields an integer.
        """
        if isinstance(config, dict):
            return {k: self._substitute_env_vars(v) for k, v in config.items()}

        elif isinstance(config, list):
            return [self._substitute_env_vars(item) for item in config]

        elif isinstance(config, str):
            def replace_var(match):
                return os.environ.get(match.group(1), match.group(2) or '')

            substituted = _ENV_PATTERN.sub(replace_var, config)
            if substituted != config and _ENV_PATTERN.fullmatch(config):
                return yaml.safe_load(substituted) if substituted else None
            return substituted

        else:
            return config

    def merge_cli_overrides(self, overrides: Dict[str, Any]):
        """
        Merge command-line overrides into configuration.

        Args:
            overrides: Dictionary of override values. Keys use dotted notation
                      (e.g., 'execution.threads'); None values are skipped.
        """
        for key, value in overrides.items():
            if value is None:
                continue

            keys = key.split('.')
            target = self._config
            for k in keys[:-1]:
                if k not in target:
                    target[k] = {}
                target = target[k]

            target[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Supports dotted notation for nested access.

        Args:
            key: Configuration key (e.g., 'plot.width')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self._config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_plot_config(self) -> Dict[str, Any]:
        """Get plot configuration section."""
        return self._config.get('plot', {})

    def get_execution_config(self) -> Dict[str, Any]:
        """Get execution configuration section."""
        return self._config.get('execution', {})

    def get_tools_config(self) -> Dict[str, Any]:
        """Get external tools configuration section."""
        return self._config.get('tools', {})

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return self._config.copy()

    def validate(self) -> bool:
        """
        Validate configuration against the schema.

        Returns:
            True if valid

        Raises:
            ConfigValidationError: If validation fails
        """
        errors = validate_config(self._config)
        if errors:
            source = self.config_file or "built-in defaults"
            raise ConfigValidationError(
                f"Invalid configuration ({source}): " + "; ".join(errors)
            )
        return True

    def __repr__(self) -> str:
        """String representation."""
        return f"ConfigParser(config_file={self.config_file})"

# ASMplot v0.1.0
# Any usage is subject to this software's license.
