"""Base class for value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    Value objects are immutable and compared by value, not identity.
    The wrapped value is accessed via ``.root`` and ``model_dump()`` returns
    the primitive, not a dict.
    """

    model_config = ConfigDict(
        frozen=True,
    )

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
