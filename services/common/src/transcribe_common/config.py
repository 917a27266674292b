"""Shared configuration models for infrastructure components."""

from pydantic import BaseModel, Field


class AWSConfig(BaseModel, frozen=True):
    """AWS client configuration."""

    region: str = "us-east-1"
    endpoint_url: str | None = None
    connect_timeout: float = Field(default=10.0, gt=0)
    read_timeout: float = Field(default=10.0, gt=0)
    max_attempts: int = Field(default=1, ge=1)
