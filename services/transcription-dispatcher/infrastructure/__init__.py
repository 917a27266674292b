"""Infrastructure layer exports."""

from transcribe_common.infrastructure import S3StorageLocator

from .aws_transcribe import AWSTranscribeService

__all__ = ["AWSTranscribeService", "S3StorageLocator"]
