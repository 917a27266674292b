"""S3 implementation of the StorageLocator interface."""

from transcribe_common.infrastructure.interfaces import StorageLocator


class S3StorageLocator(StorageLocator):
    """Builds ``s3://`` URIs for objects and buckets."""

    def object_uri(self, bucket_name: str, object_name: str) -> str:
        return f"s3://{bucket_name}/{object_name}"

    def location(self, bucket_name: str, prefix: str = "") -> str:
        if not prefix:
            return f"s3://{bucket_name}"
        return f"s3://{bucket_name}/{prefix}"
