"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field, field_validator
from transcribe_common import AWSConfig

from domain.job_naming import JobNameStrategy
from domain.models import MediaFormat

DEFAULT_SUPPORTED_FORMATS = "mp4,mp3,wav"


class TranscribeJobConfig(BaseModel, frozen=True):
    """Parameters applied to every submitted transcription job."""

    output_bucket: str = Field(min_length=1)
    output_key_prefix: str = ""
    language_code: str = "en-US"
    supported_formats: frozenset[MediaFormat] = frozenset(
        {MediaFormat.MP4, MediaFormat.MP3, MediaFormat.WAV}
    )
    job_name_strategy: JobNameStrategy = JobNameStrategy.STEM

    @field_validator("supported_formats", mode="before")
    @classmethod
    def _split_formats(cls, value):
        if isinstance(value, str):
            return frozenset(f.strip().lower() for f in value.split(",") if f.strip())
        return value

    @field_validator("output_key_prefix")
    @classmethod
    def _strip_leading_slash(cls, value: str) -> str:
        return value.lstrip("/")


class InvocationConfig(BaseModel, frozen=True):
    """Timing limits of a single invocation."""

    input_bucket: str = ""
    invocation_timeout_seconds: float = Field(default=600.0, gt=0)
    request_timeout_seconds: float = Field(default=10.0, gt=0)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    aws: AWSConfig
    transcribe: TranscribeJobConfig
    invocation: InvocationConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    invocation = InvocationConfig(
        input_bucket=os.getenv("INPUT_BUCKET", ""),
        invocation_timeout_seconds=os.getenv("INVOCATION_TIMEOUT_SECONDS", "600"),
        request_timeout_seconds=os.getenv("REQUEST_TIMEOUT_SECONDS", "10"),
    )
    return AppConfig(
        aws=AWSConfig(
            region=os.getenv("AWS_REGION", "us-east-1"),
            endpoint_url=os.getenv("TRANSCRIBE_ENDPOINT_URL") or None,
            connect_timeout=invocation.request_timeout_seconds,
            read_timeout=invocation.request_timeout_seconds,
        ),
        transcribe=TranscribeJobConfig(
            output_bucket=os.getenv("OUTPUT_BUCKET", ""),
            output_key_prefix=os.getenv("OUTPUT_KEY_PREFIX", ""),
            language_code=os.getenv("LANGUAGE_CODE", "en-US"),
            supported_formats=os.getenv("SUPPORTED_FORMATS", DEFAULT_SUPPORTED_FORMATS),
            job_name_strategy=os.getenv("JOB_NAME_STRATEGY", JobNameStrategy.STEM),
        ),
        invocation=invocation,
    )
