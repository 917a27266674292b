"""Exceptions shared across transcription services."""


class TranscribeCommonError(Exception):
    """Base class for errors raised by transcription services."""

    retryable: bool = False

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)
