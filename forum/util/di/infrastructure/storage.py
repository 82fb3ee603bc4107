"""Storage infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.qiniu.client import QiniuStorage, RealQiniuStorage
from forum.config import StorageSettings
from forum.domain.service.storage import Storage
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_httpx


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_qiniu_storage(self, storage_settings: StorageSettings) -> QiniuStorage:
        """Provide Qiniu storage client.

        Returns:
            Qiniu storage client

        Raises:
            ConfigurationError: If credentials are missing or the zone is unknown
        """
        # Instrument outbound HTTP for observability
        instrument_httpx()
        return RealQiniuStorage(storage_settings)

    @provide(scope=Scope.APP)
    def get_storage(self, qiniu_storage: QiniuStorage) -> Storage:
        """Expose the Qiniu client through the generic storage interface."""
        return qiniu_storage
