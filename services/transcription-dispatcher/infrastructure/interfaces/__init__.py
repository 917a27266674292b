"""Infrastructure interface exports."""

from transcribe_common.infrastructure.interfaces import StorageLocator

from .transcription_service import TranscriptionService

__all__ = ["StorageLocator", "TranscriptionService"]
