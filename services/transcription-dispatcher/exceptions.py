"""Custom exceptions for the transcription-dispatcher service."""

from enum import StrEnum
from typing import Any

from transcribe_common import TranscribeCommonError


class ErrorKind(StrEnum):
    """Whether a failed submission is worth redelivering."""

    TRANSIENT = "transient"
    PERMANENT = "permanent"


class DispatchError(TranscribeCommonError):
    """Base class for every failure surfaced by the dispatcher."""

    bucket_name: str | None = None
    object_key: str | None = None
    event_id: str | None = None
    job_name: str | None = None

    def attach(
        self,
        bucket_name: str,
        object_key: str,
        event_id: str | None = None,
        job_name: str | None = None,
    ) -> "DispatchError":
        """Records which notification the failure belongs to."""
        self.bucket_name = bucket_name
        self.object_key = object_key
        self.event_id = event_id
        if job_name is not None:
            self.job_name = job_name
        return self

    def log_fields(self) -> dict[str, Any]:
        return {
            "bucket_name": self.bucket_name,
            "object_key": self.object_key,
            "event_id": self.event_id,
            "job_name": self.job_name,
        }


class MalformedEventError(DispatchError):
    """Raised when a notification record is missing required fields."""

    def __init__(
        self,
        reason: str,
        record: Any = None,
        cause: Exception | None = None,
    ):
        self.reason = reason
        self.record = record
        super().__init__(f"Malformed notification event: {reason}", cause)


class UnexpectedBucketError(MalformedEventError):
    """Raised when a notification names a bucket other than the input bucket."""

    def __init__(self, bucket_name: str, expected_bucket: str):
        self.bucket_name = bucket_name
        self.expected_bucket = expected_bucket
        super().__init__(
            f"bucket '{bucket_name}' is not the input bucket '{expected_bucket}'"
        )


class UnsupportedFormatError(DispatchError):
    """Raised when an object's extension is not a supported media format."""

    def __init__(self, object_key: str, media_format: str, supported: frozenset[str]):
        self.object_key = object_key
        self.media_format = media_format
        self.supported = supported
        super().__init__(
            f"Unsupported media format '{media_format}' for '{object_key}' "
            f"(supported: {', '.join(sorted(supported))})"
        )


class TranscriptionServiceError(DispatchError):
    """Raised when the transcription service refuses or fails a job submission."""

    def __init__(
        self,
        job_name: str,
        kind: ErrorKind,
        reason: str,
        cause: Exception | None = None,
    ):
        self.job_name = job_name
        self.kind = kind
        self.reason = reason
        super().__init__(
            f"Failed to start transcription job '{job_name}' ({kind}): {reason}",
            cause,
        )

    @property
    def retryable(self) -> bool:
        return self.kind == ErrorKind.TRANSIENT


class InvocationDeadlineError(TranscriptionServiceError):
    """Raised when too little invocation time is left to call the service safely."""

    def __init__(self, job_name: str, remaining_seconds: float):
        self.remaining_seconds = remaining_seconds
        super().__init__(
            job_name,
            ErrorKind.TRANSIENT,
            f"only {remaining_seconds:.2f}s left before the invocation deadline",
        )
