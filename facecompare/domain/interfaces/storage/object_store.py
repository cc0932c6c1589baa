"""Object store interface for template images."""
from abc import ABC, abstractmethod
from typing import List


class ObjectStore(ABC):
    """Interface for storing and listing image objects in a bucket."""

    @abstractmethod
    async def put_object(self, bucket: str, key: str, body: bytes) -> None:
        """
        Write ``body`` as a new object, replacing any object with the same key.

        Args:
            bucket: Bucket to write to
            key: Object key
            body: Object contents

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def list_keys(self, bucket: str) -> List[str]:
        """
        List object keys in a bucket, in the order the store returns them.

        Args:
            bucket: Bucket to list

        Raises:
            StorageError: If the listing fails
        """
        pass
