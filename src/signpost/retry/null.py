"""Null object implementation of retry executor."""

import asyncio
from typing import Awaitable, Callable, TypeVar

from ..domain.retry import RetryPolicy
from .base import BaseRetryExecutor

T = TypeVar("T")


class NullRetryExecutor(BaseRetryExecutor):
    """Runs the operation exactly once; the policy is ignored."""

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        policy: RetryPolicy | None = None,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> T:
        return await operation()
