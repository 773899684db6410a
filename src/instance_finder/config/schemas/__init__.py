"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .aws_schema import AWSConfig
from .logging_schema import LoggingConfig

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # AWS configuration
    "AWSConfig",
    # Logging configuration
    "LoggingConfig",
]
