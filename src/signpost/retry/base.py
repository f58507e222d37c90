"""Base interface for retry executors."""

import asyncio
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar

from ..domain.retry import RetryPolicy

T = TypeVar("T")


class BaseRetryExecutor(ABC):
    """Abstract base class for retry executors.

    This interface defines the contract for retry executors, allowing
    different retry strategies (e.g., exponential backoff, no retry)
    to be used interchangeably via dependency injection.
    """

    @abstractmethod
    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        policy: RetryPolicy | None = None,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> T:
        """Execute an async operation with retry logic.

        Args:
            operation: Zero-argument async callable to execute.
            policy: Retry policy for this call (implementation-specific default).
            cancel_event: When set, pending and future attempts are abandoned.

        Returns:
            The result of the operation.

        Raises:
            Exception: The last exception if all attempts fail.
        """
        pass
