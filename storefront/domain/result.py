"""Uniform outcome type returned by the GraphQL client and every service operation."""

from enum import StrEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorKind(StrEnum):
    """Why a ``Result`` failed.

    Missing credentials are raised as ``ConfigurationError`` and a null entity is
    a successful ``Result`` with no data, so neither has a kind here.
    """

    transport = "transport"  # network failure, non-2xx, unparseable body
    graphql = "graphql"  # top-level ``errors`` in a 2xx response
    user = "user"  # ``userErrors`` / ``customerUserErrors`` on a mutation
    unauthorized = "unauthorized"  # invalid or expired customer token


class Result(BaseModel, Generic[T]):
    """Either ``data`` (success) or a ``message`` with optional raw ``errors``.

    A successful read whose entity resolved to null has ``success=True`` and
    ``data=None``; use :attr:`not_found` to tell it apart from a real payload.
    """

    success: bool
    data: T | None = None
    message: str | None = None
    errors: list[dict[str, Any]] = Field(default_factory=list)
    kind: ErrorKind | None = None

    @property
    def not_found(self) -> bool:
        return self.success and self.data is None

    @classmethod
    def ok(cls, data: T | None) -> "Result[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls,
        kind: ErrorKind,
        message: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> "Result[T]":
        return cls(success=False, kind=kind, message=message, errors=errors or [])

    def carry(self) -> "Result[Any]":
        """Re-wrap a failure so it can be returned from an operation of another type."""
        return Result[Any](
            success=False, kind=self.kind, message=self.message, errors=self.errors
        )
