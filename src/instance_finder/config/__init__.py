"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import AppConfig, AWSConfig, LoggingConfig, validate_config

# Configuration management
from .manager import ConfigurationManager

__all__ = [
    # Main configuration
    'AppConfig',
    'validate_config',

    # Specific configurations
    'AWSConfig',
    'LoggingConfig',

    # Configuration management
    'ConfigurationManager',
]
