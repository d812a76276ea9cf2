"""Base class for single-value wrappers in the domain."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, compared by value.

    The wrapped value is accessed via ``.root`` and ``model_dump()`` returns
    the primitive, so a ``Slug`` serializes as a plain string.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
