from transcribe_common.config import AWSConfig
from transcribe_common.exceptions import TranscribeCommonError
from transcribe_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "AWSConfig",
    "TranscribeCommonError",
]
