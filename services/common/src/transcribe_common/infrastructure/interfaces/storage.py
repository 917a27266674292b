"""Abstract interface for locating objects in storage."""

from abc import ABC, abstractmethod


class StorageLocator(ABC):
    """Abstract base class for building storage locators from bucket/key pairs."""

    @abstractmethod
    def object_uri(self, bucket_name: str, object_name: str) -> str:
        """
        Builds the URI of a stored object without reading it.

        Args:
            bucket_name: The storage bucket name.
            object_name: The object path/name in storage.

        Returns:
            The object URI understood by downstream services.
        """

    @abstractmethod
    def location(self, bucket_name: str, prefix: str = "") -> str:
        """
        Builds the URI of a bucket, optionally narrowed to a key prefix.

        Args:
            bucket_name: The storage bucket name.
            prefix: Optional key prefix inside the bucket.

        Returns:
            The location URI.
        """
