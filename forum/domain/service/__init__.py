"""Domain services."""

from .storage import Storage

__all__ = [
    "Storage",
]
