"""AWS client configuration schema."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class AWSConfig(BaseModel):
    """Region, profile and endpoint used to build the EC2 and SSM clients."""

    region: str = Field("us-east-1", description="AWS region")
    profile: Optional[str] = Field(None, description="Named profile from the shared credentials file")
    endpoint_url: Optional[str] = Field(None, description="Override endpoint URL (e.g. a local emulator)")
    max_attempts: int = Field(0, description="Retry attempts for each request (0 disables retries)")

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        """Validate region."""
        if not v:
            raise ValueError("AWS region is required")
        return v

    @field_validator("profile", "endpoint_url")
    @classmethod
    def empty_as_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty strings from interpolated defaults as unset."""
        return v or None

    @field_validator("max_attempts")
    @classmethod
    def validate_max_attempts(cls, v: int) -> int:
        """Validate retry attempts."""
        if v < 0 or v > 10:
            raise ValueError("max_attempts must be between 0 and 10")
        return v
