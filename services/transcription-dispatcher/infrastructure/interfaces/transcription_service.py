"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from domain.models import JobDescriptor, SubmissionResult


class TranscriptionService(ABC):
    """Abstract base class for asynchronous transcription backends."""

    @abstractmethod
    def create_job(self, descriptor: JobDescriptor) -> SubmissionResult:
        """
        Requests creation of a transcription job.

        Args:
            descriptor: The job parameters.

        Returns:
            An accepted result with the assigned job id, or a rejected result
            classified by reason.

        Raises:
            TranscriptionServiceError: If the service could not be reached.
        """
        pass
