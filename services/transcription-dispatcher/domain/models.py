"""Domain models for the transcription dispatcher."""

from enum import StrEnum

from pydantic import BaseModel, Field


class MediaFormat(StrEnum):
    """Media formats accepted by the transcription service."""

    MP3 = "mp3"
    MP4 = "mp4"
    WAV = "wav"
    FLAC = "flac"
    OGG = "ogg"
    AMR = "amr"
    WEBM = "webm"
    M4A = "m4a"


class NotificationEvent(BaseModel, frozen=True):
    """A single object-created notification for the input bucket."""

    bucket_name: str = Field(min_length=1)
    object_key: str = Field(min_length=1)
    event_id: str | None = None
    event_name: str | None = None
    size: int | None = None


class JobDescriptor(BaseModel, frozen=True):
    """Parameters of one transcription job request."""

    job_name: str
    media_uri: str
    media_format: MediaFormat
    language_code: str
    output_bucket: str
    output_key: str | None = None
    output_location: str


class SubmissionStatus(StrEnum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class RejectionReason(StrEnum):
    ALREADY_EXISTS = "already_exists"
    INVALID_REQUEST = "invalid_request"
    QUOTA_EXCEEDED = "quota_exceeded"
    SERVICE_UNAVAILABLE = "service_unavailable"


class SubmissionResult(BaseModel, frozen=True):
    """Outcome reported by the transcription service for a job request."""

    status: SubmissionStatus
    job_name: str
    job_id: str | None = None
    rejection: RejectionReason | None = None
    detail: str | None = None

    @classmethod
    def accepted(cls, job_name: str, job_id: str | None = None) -> "SubmissionResult":
        return cls(status=SubmissionStatus.ACCEPTED, job_name=job_name, job_id=job_id)

    @classmethod
    def rejected(
        cls, job_name: str, rejection: RejectionReason, detail: str | None = None
    ) -> "SubmissionResult":
        return cls(
            status=SubmissionStatus.REJECTED,
            job_name=job_name,
            rejection=rejection,
            detail=detail,
        )


class DispatchStatus(StrEnum):
    SUBMITTED = "submitted"
    ALREADY_SUBMITTED = "already_submitted"


class DispatchOutcome(BaseModel, frozen=True):
    """Successful result of dispatching one notification."""

    status: DispatchStatus
    job_name: str
    media_uri: str
    media_format: MediaFormat
    job_id: str | None = None
    event_id: str | None = None
