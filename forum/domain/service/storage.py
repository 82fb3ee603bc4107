"""Object storage interface."""

from typing import BinaryIO


class Storage:
    """Generic object storage interface for all backends."""

    async def write(self, path: str, data: bytes | BinaryIO) -> bool:
        """Store an object.

        Args:
            path: Object key inside the configured bucket
            data: Object content, raw bytes or a binary stream

        Returns:
            True once the object is stored
        """
        raise NotImplementedError

    async def delete(self, path: str) -> bool:
        """Delete an object.

        Deleting an object that does not exist is not an error.

        Args:
            path: Object key inside the configured bucket

        Returns:
            True once the object is gone
        """
        raise NotImplementedError
