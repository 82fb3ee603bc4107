"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class StorageError(ProviderError):
    """Object storage operation failed."""

    pass


class StorageTransportError(StorageError):
    """No response was received from the storage service."""

    pass


class StorageServiceError(StorageError):
    """The storage service answered with an error status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)
