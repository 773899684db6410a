"""Main application configuration schema."""

import math
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from .aws_schema import AWSConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    aws: AWSConfig = Field(default_factory=lambda: AWSConfig())
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    timeout_seconds: float = Field(
        30.0, description="Connect and read timeout applied to each inventory call, in seconds"
    )

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Validate timeout.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If timeout is not a finite positive number
        """
        if not math.isfinite(v) or v <= 0:
            raise ValueError("Timeout must be a finite positive number")
        return v


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    return AppConfig(**config)
