"""Domain layer exports."""

from .deadline import Deadline
from .event_parser import iter_records, parse_record
from .job_naming import JobNameBuilder, JobNameStrategy, media_suffix
from .models import (
    DispatchOutcome,
    DispatchStatus,
    JobDescriptor,
    MediaFormat,
    NotificationEvent,
    RejectionReason,
    SubmissionResult,
    SubmissionStatus,
)

__all__ = [
    "Deadline",
    "DispatchOutcome",
    "DispatchStatus",
    "JobDescriptor",
    "JobNameBuilder",
    "JobNameStrategy",
    "MediaFormat",
    "NotificationEvent",
    "RejectionReason",
    "SubmissionResult",
    "SubmissionStatus",
    "iter_records",
    "media_suffix",
    "parse_record",
]
