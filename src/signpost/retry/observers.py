"""Retry observers - notification hooks called before each retry."""

import typing as t
from abc import ABC, abstractmethod

from ..reporting import safe_serialize

if t.TYPE_CHECKING:
    import loguru


class RetryObserver(ABC):
    """Receives a notification each time a failed attempt will be retried.

    Implementations must be synchronous and quick. They cannot influence
    the retry decision; anything they raise is logged and discarded by
    the executor.
    """

    @abstractmethod
    def on_retry(self, error: Exception, attempt: int) -> None:
        """Called after ``attempt`` (1-indexed) failed with ``error``."""
        pass


class NullRetryObserver(RetryObserver):
    """Null object implementation of observer that does nothing."""

    def on_retry(self, error: Exception, attempt: int) -> None:
        pass


class CallbackRetryObserver(RetryObserver):
    """Adapts a plain ``(error, attempt)`` callable to the observer interface."""

    def __init__(self, callback: t.Callable[[Exception, int], None]) -> None:
        self.callback = callback

    def on_retry(self, error: Exception, attempt: int) -> None:
        self.callback(error, attempt)


class LoggingRetryObserver(RetryObserver):
    """Logs each retry as a warning with caller-supplied context."""

    def __init__(
        self,
        logger: "loguru.Logger",
        label: str = "Operation",
        **context: t.Any,
    ) -> None:
        self.logger = logger
        self.label = label
        self.context = context

    def on_retry(self, error: Exception, attempt: int) -> None:
        self.logger.bind(**self.context, error=safe_serialize(error)).warning(
            f"{self.label} retry attempt {attempt} after error: {error}"
        )
