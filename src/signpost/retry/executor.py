"""Retry executor with exponential backoff and jitter."""

import asyncio
import typing as t

from ..domain.exceptions import (
    RetryCancelledError,
    RetryConfigurationError,
    RetryError,
)
from ..domain.retry import RetryPolicy
from ..infrastructure.logging import get_logger
from ..reporting import ErrorInfo
from .base import BaseRetryExecutor
from .categoriser import BaseErrorCategoriser, RetryEverythingCategoriser

if t.TYPE_CHECKING:
    import loguru

T = t.TypeVar("T")


class RetryExecutor(BaseRetryExecutor):
    """Runs async operations, retrying failures with exponential backoff.

    The executor holds no per-call state, so one instance can serve any
    number of concurrent calls.
    """

    def __init__(
        self,
        logger: "loguru.Logger" = get_logger(__name__),
        categoriser: BaseErrorCategoriser | None = None,
    ) -> None:
        """
        Initialise retry executor.

        Args:
            logger: Logger for recording retry events
            categoriser: Decides which errors are retried. If None, every
                        error is treated as transient.
        """
        self.logger = logger
        self.categoriser = (
            categoriser if categoriser is not None else RetryEverythingCategoriser()
        )

    async def execute(
        self,
        operation: t.Callable[[], t.Awaitable[T]],
        policy: RetryPolicy | None = None,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> T:
        """
        Execute async operation, retrying on failure.

        Args:
            operation: Zero-argument async callable to execute
            policy: Retry policy; defaults to ``RetryPolicy()``
            cancel_event: Optional event that aborts the call when set

        Returns:
            Result of the first successful attempt

        Raises:
            RetryConfigurationError: If policy.max_attempts is below 1
            RetryCancelledError: If cancel_event is set before completion
            Exception: The last exception, unchanged, once attempts run out,
                      or immediately on a non-transient error
        """
        policy = policy if policy is not None else RetryPolicy()
        if policy.max_attempts < 1:
            raise RetryConfigurationError(
                f"max_attempts must be at least 1, got {policy.max_attempts}"
            )

        last_exception: Exception | None = None

        for attempt in range(1, policy.max_attempts + 1):
            if cancel_event is not None and cancel_event.is_set():
                raise RetryCancelledError(
                    f"Cancelled before attempt {attempt}"
                ) from last_exception

            try:
                return await operation()

            except Exception as e:
                last_exception = e

                if attempt >= policy.max_attempts:
                    if policy.max_attempts > 1:
                        error_info = ErrorInfo.from_exception(e)
                        self.logger.bind(error=error_info.model_dump()).error(
                            f"Operation failed after {policy.max_attempts} "
                            f"attempts: {e}"
                        )
                    raise

                if not self.categoriser.is_transient(e):
                    self.logger.debug(f"Non-transient error, not retrying: {e}")
                    raise

                self._notify(policy, e, attempt)

                delay = policy.calculate_delay(attempt - 1)
                # An observer reports the retry itself
                if policy.on_retry is None:
                    log = self.logger.warning
                else:
                    log = self.logger.debug
                log(
                    f"Retrying operation (attempt {attempt + 1}/"
                    f"{policy.max_attempts}) in {delay:.2f}s: {e}"
                )

                await self._sleep(delay, cancel_event, e)

        # Unreachable: the loop either returns or raises
        raise RetryError("Retry loop completed without returning or raising")

    def _notify(self, policy: RetryPolicy, error: Exception, attempt: int) -> None:
        if policy.on_retry is None:
            return
        try:
            policy.on_retry.on_retry(error, attempt)
        except Exception:
            self.logger.exception("Retry observer raised; ignoring")

    async def _sleep(
        self, delay: float, cancel_event: asyncio.Event | None, error: Exception
    ) -> None:
        """Wait out the backoff delay, waking early if cancelled."""
        if cancel_event is None:
            await asyncio.sleep(delay)
            return

        try:
            await asyncio.wait_for(cancel_event.wait(), timeout=delay)
        except asyncio.TimeoutError:
            return
        raise RetryCancelledError("Cancelled while waiting to retry") from error


async def retry(
    operation: t.Callable[[], t.Awaitable[T]],
    policy: RetryPolicy | None = None,
    **policy_fields: t.Any,
) -> T:
    """Run ``operation`` with a default RetryExecutor.

    Policy fields may be given as keyword arguments instead of a policy:

        await retry(fetch, max_attempts=2, initial_delay=1.0, max_delay=5.0)
    """
    if policy is None:
        policy = RetryPolicy(**policy_fields)
    elif policy_fields:
        raise TypeError("Pass either a policy or policy fields, not both")
    return await RetryExecutor().execute(operation, policy)
