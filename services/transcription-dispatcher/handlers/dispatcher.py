"""Handler that turns object-created notifications into transcription jobs."""

from collections.abc import Mapping
from typing import Any

from transcribe_common.logging import setup_logging

from domain import (
    Deadline,
    DispatchOutcome,
    DispatchStatus,
    JobDescriptor,
    JobNameBuilder,
    MediaFormat,
    NotificationEvent,
    RejectionReason,
    SubmissionStatus,
    media_suffix,
    parse_record,
)
from exceptions import (
    DispatchError,
    ErrorKind,
    InvocationDeadlineError,
    MalformedEventError,
    TranscriptionServiceError,
    UnexpectedBucketError,
    UnsupportedFormatError,
)
from infrastructure.interfaces import StorageLocator, TranscriptionService

logger = setup_logging()


class Dispatcher:
    """Validates one notification and submits its transcription job."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        storage: StorageLocator,
        job_names: JobNameBuilder,
        output_bucket: str,
        language_code: str,
        supported_formats: frozenset[MediaFormat],
        request_timeout: float,
        output_key_prefix: str = "",
        input_bucket: str = "",
    ):
        self._transcription_service = transcription_service
        self._storage = storage
        self._job_names = job_names
        self._output_bucket = output_bucket
        self._output_key_prefix = output_key_prefix
        self._language_code = language_code
        self._supported_formats = supported_formats
        self._request_timeout = request_timeout
        self._input_bucket = input_bucket

    def handle(
        self, record: Mapping[str, Any], deadline: Deadline | None = None
    ) -> DispatchOutcome:
        """
        Submits a transcription job for a single object-created record.

        Args:
            record: A ``{"bucket", "key"}`` record or an S3 notification record.
            deadline: Remaining time of the invocation, if bounded.

        Returns:
            DispatchOutcome; a job that already exists counts as submitted.

        Raises:
            MalformedEventError: If bucket or key cannot be extracted.
            UnsupportedFormatError: If the key's extension is not supported.
            TranscriptionServiceError: If the service refuses or fails the job.
        """
        event = parse_record(record)
        try:
            return self._submit(event, deadline)
        except DispatchError as e:
            e.attach(
                event.bucket_name,
                event.object_key,
                event.event_id,
                self._job_names.build(event.object_key),
            )
            raise

    def _submit(
        self, event: NotificationEvent, deadline: Deadline | None
    ) -> DispatchOutcome:
        descriptor = self.describe(event)

        if deadline is not None and deadline.remaining() < self._request_timeout:
            logger.error(
                "Not enough time left to submit job",
                extra={
                    "job_name": descriptor.job_name,
                    "remaining_seconds": deadline.remaining(),
                },
            )
            raise InvocationDeadlineError(descriptor.job_name, deadline.remaining())

        result = self._transcription_service.create_job(descriptor)

        if result.status == SubmissionStatus.ACCEPTED:
            status = DispatchStatus.SUBMITTED
        elif result.rejection == RejectionReason.ALREADY_EXISTS:
            logger.info(
                "Transcription job already exists, treating as submitted",
                extra={
                    "job_name": descriptor.job_name,
                    "media_uri": descriptor.media_uri,
                    "event_id": event.event_id,
                },
            )
            status = DispatchStatus.ALREADY_SUBMITTED
        else:
            kind = (
                ErrorKind.PERMANENT
                if result.rejection == RejectionReason.INVALID_REQUEST
                else ErrorKind.TRANSIENT
            )
            logger.error(
                "Transcription job rejected",
                extra={
                    "job_name": descriptor.job_name,
                    "rejection": result.rejection,
                    "detail": result.detail,
                    "error_kind": kind,
                },
            )
            raise TranscriptionServiceError(
                descriptor.job_name,
                kind,
                result.detail or str(result.rejection),
            )

        if deadline is not None and deadline.expired():
            # The runtime is about to abort us; fail so the event is redelivered.
            raise InvocationDeadlineError(descriptor.job_name, 0.0)

        logger.info(
            "Transcription job dispatched",
            extra={
                "job_name": descriptor.job_name,
                "status": status,
                "event_id": event.event_id,
            },
        )
        return DispatchOutcome(
            status=status,
            job_name=descriptor.job_name,
            job_id=result.job_id,
            media_uri=descriptor.media_uri,
            media_format=descriptor.media_format,
            event_id=event.event_id,
        )

    def describe(self, event: NotificationEvent) -> JobDescriptor:
        """
        Derives and validates the job descriptor for a notification.

        Raises:
            UnexpectedBucketError: If the bucket is not the configured input bucket.
            MalformedEventError: If the key has no extension.
            UnsupportedFormatError: If the extension is not a supported format.
        """
        logger.info(
            "Processing notification",
            extra={
                "bucket_name": event.bucket_name,
                "object_key": event.object_key,
                "event_id": event.event_id,
            },
        )

        if self._input_bucket and event.bucket_name != self._input_bucket:
            raise UnexpectedBucketError(event.bucket_name, self._input_bucket)

        suffix = media_suffix(event.object_key)
        if not suffix:
            raise MalformedEventError(
                f"object key '{event.object_key}' has no file extension"
            )

        supported = {f.value for f in self._supported_formats}
        if suffix not in supported:
            logger.warning(
                "Unsupported media format",
                extra={"object_key": event.object_key, "media_format": suffix},
            )
            raise UnsupportedFormatError(event.object_key, suffix, frozenset(supported))

        output_key = None
        if self._output_key_prefix:
            output_key = self._output_key_prefix.rstrip("/") + "/"

        return JobDescriptor(
            job_name=self._job_names.build(event.object_key),
            media_uri=self._storage.object_uri(event.bucket_name, event.object_key),
            media_format=MediaFormat(suffix),
            language_code=self._language_code,
            output_bucket=self._output_bucket,
            output_key=output_key,
            output_location=self._storage.location(
                self._output_bucket, output_key or ""
            ),
        )
