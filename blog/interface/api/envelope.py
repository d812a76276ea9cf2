"""Uniform response wrapper."""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Every response body: ``{success, message?, data?, error?}``.

    Keys that are not set are left out of the serialized body.
    """

    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    error: Optional[str] = None

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value is not None}


def ok(data: Optional[T] = None, message: Optional[str] = None) -> Envelope[T]:
    """Wrap a successful result."""
    return Envelope(success=True, message=message, data=data)
