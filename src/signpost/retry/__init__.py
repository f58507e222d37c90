"""Retry execution - executors, observers and error categorisers."""

from .base import BaseRetryExecutor
from .categoriser import (
    BaseErrorCategoriser,
    ErrorCategoriser,
    RetryEverythingCategoriser,
)
from .executor import RetryExecutor, retry
from .null import NullRetryExecutor
from .observers import (
    CallbackRetryObserver,
    LoggingRetryObserver,
    NullRetryObserver,
    RetryObserver,
)

__all__ = [
    # Executors
    "BaseRetryExecutor",
    "RetryExecutor",
    "NullRetryExecutor",
    "retry",
    # Observers
    "RetryObserver",
    "NullRetryObserver",
    "CallbackRetryObserver",
    "LoggingRetryObserver",
    # Categorisers
    "BaseErrorCategoriser",
    "ErrorCategoriser",
    "RetryEverythingCategoriser",
]
