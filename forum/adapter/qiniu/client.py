"""Qiniu object storage client.

Uploads go to the zone's upload host as a multipart form signed with a
one-hour upload token. Deletes go to the management host signed with a
QBox access token.
"""

from pathlib import PurePosixPath
from typing import Any, BinaryIO

import httpx
import logfire

from forum.adapter.error import StorageServiceError, StorageTransportError
from forum.adapter.qiniu.auth import (
    build_access_token,
    build_upload_token,
    encode_entry_uri,
)
from forum.config import StorageSettings
from forum.domain.service.storage import Storage
from forum.util.error import ConfigurationError

# Zone code -> upload host
ZONES: dict[str, str] = {
    "z0": "up.qiniup.com",
    "z1": "up-z1.qiniup.com",
    "z2": "up-z2.qiniup.com",
    "na0": "up-na0.qiniup.com",
    "as0": "up-as0.qiniup.com",
}

# 612: object to delete does not exist
SUCCESS_STATUS_CODES = frozenset({200, 612})

# 60 days overall, 10 seconds to connect
REQUEST_TIMEOUT = httpx.Timeout(5184000.0, connect=10.0)


class QiniuStorage(Storage):
    """Base class for Qiniu storage clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealQiniuStorage(QiniuStorage):
    """Qiniu storage client talking to the real service."""

    def __init__(
        self,
        settings: StorageSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Qiniu storage client.

        Args:
            settings: Storage settings (credentials, bucket, zone)
            transport: Optional httpx transport, replaces the network in tests

        Raises:
            ConfigurationError: If credentials or bucket are missing or the
                zone is unknown
        """
        if not settings.access_key:
            raise ConfigurationError("Qiniu access key must be configured")
        if not settings.secret_key:
            raise ConfigurationError("Qiniu secret key must be configured")
        if not settings.bucket:
            raise ConfigurationError("Qiniu bucket must be configured")
        if settings.zone not in ZONES:
            raise ConfigurationError(
                f"Unknown Qiniu zone {settings.zone!r}, "
                f"expected one of: {', '.join(ZONES)}"
            )

        self.access_key = settings.access_key
        self.secret_key = settings.secret_key
        self.bucket = settings.bucket
        self.zone = settings.zone
        self.upload_host = ZONES[settings.zone]
        self.management_host = settings.management_host
        self.verify_tls = settings.verify_tls

        self._transport = transport

    async def write(self, path: str, data: bytes | BinaryIO) -> bool:
        """Upload an object to the bucket.

        Args:
            path: Object key
            data: Object content, raw bytes or a binary stream

        Returns:
            True on success

        Raises:
            StorageTransportError: If no response was received
            StorageServiceError: If Qiniu rejected the upload
        """
        with logfire.span("qiniu.write", bucket=self.bucket, path=path):
            token = build_upload_token(
                self.access_key, self.secret_key, self.bucket, path
            )
            fields = {
                "key": path,
                "token": token,
            }
            files = {
                "file": (PurePosixPath(path).name or path, data),
            }
            headers = {
                "Host": self.upload_host,
            }

            result = await self._request(
                "POST",
                f"https://{self.upload_host}/",
                data=fields,
                files=files,
                headers=headers,
            )

            logfire.info("Object uploaded", bucket=self.bucket, path=path)
            return result

    async def delete(self, path: str) -> bool:
        """Delete an object from the bucket.

        A missing object (status 612) counts as deleted.

        Args:
            path: Object key

        Returns:
            True on success

        Raises:
            StorageTransportError: If no response was received
            StorageServiceError: If Qiniu rejected the delete
        """
        with logfire.span("qiniu.delete", bucket=self.bucket, path=path):
            request_path = f"/delete/{encode_entry_uri(self.bucket, path)}"
            access_token = build_access_token(
                self.access_key, self.secret_key, request_path
            )
            headers = {
                "Host": self.management_host,
                "Content-Type": "application/x-www-form-urlencoded",
                "Authorization": f"QBox {access_token}",
            }

            result = await self._request(
                "POST",
                f"https://{self.management_host}{request_path}",
                headers=headers,
            )

            logfire.info("Object deleted", bucket=self.bucket, path=path)
            return result

    async def _request(
        self,
        method: str,
        url: str,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> bool:
        """Send a single request to Qiniu.

        Each call opens its own client so the connection is released on
        every exit path. Nothing is retried.

        Args:
            method: HTTP method
            url: Request URL
            data: Form fields
            files: Multipart file parts
            headers: Extra request headers

        Returns:
            True if Qiniu reported success

        Raises:
            StorageTransportError: If no response was received
            StorageServiceError: If Qiniu answered with an error status
        """
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                verify=self.verify_tls,
                timeout=REQUEST_TIMEOUT,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    data=data,
                    files=files,
                    headers=headers,
                )
        except httpx.TransportError as e:
            logfire.error(
                "Qiniu request failed",
                method=method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StorageTransportError(
                f"Request to {url} failed: {type(e).__name__}: {e}"
            ) from e

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> bool:
        """Interpret a Qiniu response.

        Args:
            response: HTTP response

        Returns:
            True for status 200 or 612

        Raises:
            StorageServiceError: For any other status, carrying Qiniu's
                error message
        """
        if response.status_code in SUCCESS_STATUS_CODES:
            return True

        message = _error_message(response)
        logfire.error(
            "Qiniu returned an error",
            status_code=response.status_code,
            error=message,
        )
        raise StorageServiceError(response.status_code, message)


def _error_message(response: httpx.Response) -> str:
    """Extract the error message from a Qiniu error response."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])

    return response.text or f"HTTP {response.status_code}"


class MockQiniuStorage(QiniuStorage):
    """Mock Qiniu storage for testing.

    Keeps objects in memory without making real API calls.
    """

    def __init__(self) -> None:
        """Initialize mock storage with an empty bucket."""
        # Don't call super().__init__() - mock doesn't need real config
        self.objects: dict[str, bytes] = {}

    async def write(self, path: str, data: bytes | BinaryIO) -> bool:
        """Store object content in memory."""
        content = data if isinstance(data, bytes) else data.read()
        self.objects[path] = bytes(content)
        return True

    async def delete(self, path: str) -> bool:
        """Remove object from memory, missing objects included."""
        self.objects.pop(path, None)
        return True
