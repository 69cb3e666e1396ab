"""Abstract interface for object store operations."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class ObjectStore(ABC):
    """Abstract base class for bucket-scoped object storage backends."""

    @abstractmethod
    def put_object(
        self,
        object_name: str,
        data: bytes | BinaryIO,
        content_type: str,
    ) -> None:
        """
        Stores an object.

        Args:
            object_name: The destination key in the bucket.
            data: Raw bytes, or a readable binary stream of unknown length.
            content_type: MIME type recorded on the object.
        """

    @abstractmethod
    def remove_objects(self, object_names: list[str]) -> None:
        """
        Removes objects from the bucket.

        Args:
            object_names: Keys to delete.
        """

    @abstractmethod
    def presigned_get_object(self, object_name: str, expiry_seconds: int) -> str:
        """
        Returns a time-limited read URL for an object.

        Args:
            object_name: The object key.
            expiry_seconds: URL lifetime; 0 selects the store's default.
        """
