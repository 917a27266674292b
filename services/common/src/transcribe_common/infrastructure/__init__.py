from transcribe_common.infrastructure.interfaces import StorageLocator
from transcribe_common.infrastructure.s3_locator import S3StorageLocator

__all__ = ["StorageLocator", "S3StorageLocator"]
