import threading

import pytest

from domain import (
    JobDescriptor,
    JobNameBuilder,
    MediaFormat,
    RejectionReason,
    SubmissionResult,
)
from handlers import Dispatcher
from infrastructure import S3StorageLocator
from infrastructure.interfaces import TranscriptionService


class FakeTranscriptionService(TranscriptionService):
    """In-memory service that enforces job name uniqueness like Transcribe."""

    def __init__(self) -> None:
        self.calls: list[JobDescriptor] = []
        self.jobs: dict[str, JobDescriptor] = {}
        self.next_rejection: RejectionReason | None = None
        self._lock = threading.Lock()

    def create_job(self, descriptor: JobDescriptor) -> SubmissionResult:
        with self._lock:
            self.calls.append(descriptor)
            if self.next_rejection is not None:
                return SubmissionResult.rejected(
                    descriptor.job_name, self.next_rejection, "forced rejection"
                )
            if descriptor.job_name in self.jobs:
                return SubmissionResult.rejected(
                    descriptor.job_name,
                    RejectionReason.ALREADY_EXISTS,
                    "ConflictException: The requested job name already exists.",
                )
            self.jobs[descriptor.job_name] = descriptor
            return SubmissionResult.accepted(descriptor.job_name, descriptor.job_name)


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class FakeLambdaContext:
    aws_request_id = "req-1"

    def __init__(self, remaining_ms: int) -> None:
        self.remaining_ms = remaining_ms

    def get_remaining_time_in_millis(self) -> int:
        return self.remaining_ms


@pytest.fixture
def service() -> FakeTranscriptionService:
    return FakeTranscriptionService()


@pytest.fixture
def dispatcher(service: FakeTranscriptionService) -> Dispatcher:
    return Dispatcher(
        transcription_service=service,
        storage=S3StorageLocator(),
        job_names=JobNameBuilder(),
        output_bucket="out",
        language_code="en-US",
        supported_formats=frozenset({MediaFormat.MP4, MediaFormat.MP3, MediaFormat.WAV}),
        request_timeout=5.0,
    )


def s3_record(bucket: str, key: str, request_id: str = "REQ123") -> dict:
    return {
        "eventVersion": "2.1",
        "eventSource": "aws:s3",
        "eventName": "ObjectCreated:Put",
        "responseElements": {"x-amz-request-id": request_id},
        "s3": {
            "bucket": {"name": bucket, "arn": f"arn:aws:s3:::{bucket}"},
            "object": {"key": key, "size": 1024, "sequencer": "0055AED6DCD90281E5"},
        },
    }
