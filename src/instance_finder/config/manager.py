# src/instance_finder/config/manager.py
import copy
import json
import os
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from instance_finder.config.schemas import AppConfig
from instance_finder.domain.core.exceptions import ConfigurationError

CONFIG_DIR_ENV = "INSTANCE_FINDER_CONFDIR"
CONFIG_FILENAME = "instance_finder.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "aws": {
        "region": "${AWS_REGION:us-east-1}",
        "profile": "${AWS_PROFILE:}",
        "endpoint_url": "${AWS_ENDPOINT_URL:}",
        "max_attempts": 0,
    },
    "logging": {
        "level": "${LOG_LEVEL:WARNING}",
        "destination": "${LOG_DESTINATION:stdout}",
        "file_path": "${INSTANCE_FINDER_LOGDIR:logs}/instance_finder.log",
        "max_size_mb": 10,
        "backup_count": 5,
    },
    "timeout_seconds": "${INSTANCE_FINDER_TIMEOUT:30}",
}

# Environment variables applied after the config file (highest priority)
ENV_MAPPINGS: Dict[str, Tuple[str, ...]] = {
    "AWS_REGION": ("aws", "region"),
    "AWS_PROFILE": ("aws", "profile"),
    "AWS_ENDPOINT_URL": ("aws", "endpoint_url"),
    "INSTANCE_FINDER_TIMEOUT": ("timeout_seconds",),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_DESTINATION": ("logging", "destination"),
}


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if key in target and isinstance(target[key], dict) and isinstance(value, dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying user configuration file overrides
    - Applying environment variable overrides
    - Variable interpolation
    - Typed validation into AppConfig
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to configuration file. If not provided,
                        will look in INSTANCE_FINDER_CONFDIR/instance_finder.json

        Raises:
            ConfigurationError: If the configuration file cannot be loaded
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        if config_file:
            self._load_config_file(config_file)
        else:
            default_config_path = os.path.join(
                os.environ.get(CONFIG_DIR_ENV, ''),
                CONFIG_FILENAME
            )
            if os.environ.get(CONFIG_DIR_ENV) and os.path.exists(default_config_path):
                self._load_config_file(default_config_path)

        self._load_env_vars()

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            with open(config_path, 'r') as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}")
        if not isinstance(user_config, dict):
            raise ConfigurationError(
                f"Failed to load configuration: {config_path} must contain a JSON object"
            )
        _deep_update(self._config, user_config)

    def _load_env_vars(self) -> None:
        """Load and apply environment variable overrides."""
        for env_var, path in ENV_MAPPINGS.items():
            if env_var in os.environ:
                self._set_nested_value(self._config, path, os.environ[env_var])

    def _set_nested_value(self, config: Dict[str, Any], path: tuple, value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate ${VAR} and ${VAR:default} references in configuration values."""
        if isinstance(config, str):
            if config.startswith("${") and "}" in config:
                end = config.index("}")
                var_name = config[2:end]
                rest = config[end + 1:]
                if ":" in var_name:
                    var_name, default = var_name.split(":", 1)
                    return os.environ.get(var_name, default) + rest
                return os.environ.get(var_name, "") + rest
            return config
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with caller-provided values (e.g. CLI flags).

        Args:
            user_config: Partial configuration dictionary; None values are ignored
        """
        _deep_update(self._config, _drop_none(user_config))

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        return self._interpolate_values(self._config)

    def get_typed(self) -> AppConfig:
        """
        Get the configuration validated into its typed schema.

        Raises:
            ConfigurationError: If configuration is invalid with detailed error messages
        """
        try:
            return AppConfig(**self.get_config())
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(errors),
                missing_fields=[
                    '.'.join(str(p) for p in err['loc'])
                    for err in e.errors() if err['type'] == 'missing'
                ],
            )


def _drop_none(values: Dict[str, Any]) -> Dict[str, Any]:
    result = {}
    for key, value in values.items():
        if isinstance(value, dict):
            value = _drop_none(value)
            if value:
                result[key] = value
        elif value is not None:
            result[key] = value
    return result
