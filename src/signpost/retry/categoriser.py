"""Error categorisers - decide which failures are worth retrying."""

import asyncio
from abc import ABC, abstractmethod

import aiohttp

from ..domain.exceptions import (
    ApiResponseError,
    MalformedResponseError,
    SigningError,
)
from ..domain.retry import ErrorCategory, StatusCodePolicy


class BaseErrorCategoriser(ABC):
    """Abstract base class for error categorisers."""

    @abstractmethod
    def categorise(self, error: Exception) -> ErrorCategory:
        pass

    def is_transient(self, error: Exception) -> bool:
        """Convenience check used by the executor."""
        return self.categorise(error) == ErrorCategory.TRANSIENT


class RetryEverythingCategoriser(BaseErrorCategoriser):
    """Treats every failure as transient. This is the executor default."""

    def categorise(self, error: Exception) -> ErrorCategory:
        return ErrorCategory.TRANSIENT


class ErrorCategoriser(BaseErrorCategoriser):
    """Categorises HTTP and network errors using a StatusCodePolicy."""

    def __init__(self, policy: StatusCodePolicy | None = None) -> None:
        self.policy = policy if policy is not None else StatusCodePolicy()

    def categorise(self, error: Exception) -> ErrorCategory:
        match error:
            case ApiResponseError(status=status) | aiohttp.ClientResponseError(
                status=status
            ):
                return self.policy.categorise_status(status)
            case MalformedResponseError():
                return ErrorCategory.TRANSIENT
            case SigningError():
                return ErrorCategory.PERMANENT
            # SSL errors subclass ClientConnectorError, so they go first
            case aiohttp.ClientSSLError():
                return ErrorCategory.PERMANENT
            case (
                asyncio.TimeoutError()
                | aiohttp.ClientConnectionError()
                | aiohttp.ClientPayloadError()
            ):
                return ErrorCategory.TRANSIENT
            case _:
                return self.policy.unknown_category()
