"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case: one request in, one response out.

    Failures are raised as typed errors from ``signin.application.error``,
    ``signin.domain.error`` or ``signin.util.jwt``; use cases never retry.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
