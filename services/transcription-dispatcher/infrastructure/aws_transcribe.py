"""AWS Transcribe implementation of the TranscriptionService interface."""

from botocore.exceptions import BotoCoreError, ClientError
from transcribe_common.logging import setup_logging

from domain.models import JobDescriptor, RejectionReason, SubmissionResult
from exceptions import ErrorKind, TranscriptionServiceError

from .interfaces import TranscriptionService

logger = setup_logging()

_REJECTION_BY_CODE = {
    "ConflictException": RejectionReason.ALREADY_EXISTS,
    "BadRequestException": RejectionReason.INVALID_REQUEST,
    "LimitExceededException": RejectionReason.QUOTA_EXCEEDED,
    "ThrottlingException": RejectionReason.QUOTA_EXCEEDED,
    "TooManyRequestsException": RejectionReason.QUOTA_EXCEEDED,
}


class AWSTranscribeService(TranscriptionService):
    """Starts batch transcription jobs with Amazon Transcribe."""

    def __init__(self, client):
        self._client = client

    def create_job(self, descriptor: JobDescriptor) -> SubmissionResult:
        """
        Calls ``StartTranscriptionJob`` once.

        API rejections are returned as rejected results. Transport failures
        (timeouts, connection errors) raise a transient error since the job
        may or may not have been created.
        """
        params = {
            "TranscriptionJobName": descriptor.job_name,
            "Media": {"MediaFileUri": descriptor.media_uri},
            "MediaFormat": descriptor.media_format.value,
            "LanguageCode": descriptor.language_code,
            "OutputBucketName": descriptor.output_bucket,
        }
        if descriptor.output_key:
            params["OutputKey"] = descriptor.output_key

        try:
            response = self._client.start_transcription_job(**params)
        except ClientError as e:
            error = e.response.get("Error", {})
            code = error.get("Code", "Unknown")
            rejection = _REJECTION_BY_CODE.get(code, RejectionReason.SERVICE_UNAVAILABLE)
            logger.warning(
                "Transcribe rejected job",
                extra={
                    "job_name": descriptor.job_name,
                    "error_code": code,
                    "rejection": rejection,
                },
            )
            return SubmissionResult.rejected(
                descriptor.job_name,
                rejection,
                f"{code}: {error.get('Message', '')}".rstrip(": "),
            )
        except BotoCoreError as e:
            logger.exception(
                "Transcribe request failed",
                extra={"job_name": descriptor.job_name},
            )
            raise TranscriptionServiceError(
                descriptor.job_name, ErrorKind.TRANSIENT, str(e), e
            ) from e

        job = response.get("TranscriptionJob", {})
        logger.info(
            "Transcribe accepted job",
            extra={
                "job_name": descriptor.job_name,
                "job_status": job.get("TranscriptionJobStatus"),
            },
        )
        return SubmissionResult.accepted(
            descriptor.job_name, job.get("TranscriptionJobName", descriptor.job_name)
        )
