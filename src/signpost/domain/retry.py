"""Domain models for retry policies and error classification."""

import random
import typing as t
from dataclasses import dataclass, field
from enum import Enum

if t.TYPE_CHECKING:
    from ..retry.observers import RetryObserver


class ErrorCategory(Enum):
    """Classification of operation errors for retry decisions."""

    TRANSIENT = "transient"  # Temporary, should retry
    PERMANENT = "permanent"  # Won't fix itself, don't retry
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class RetryPolicy:
    """Per-call configuration for the retry executor.

    Delays are in seconds. ``initial_delay`` and ``max_delay`` are expected
    to be non-negative; the executor does not check them.
    """

    max_attempts: int = 3
    initial_delay: float = 1.0
    max_delay: float = 10.0
    backoff_factor: float = 2.0
    max_jitter: float = 0.2  # Upper bound of the uniform jitter added to each delay
    on_retry: "RetryObserver | None" = None

    def backoff_delay(self, retry_index: int) -> float:
        """
        Calculate the backoff delay before a retry, without jitter.

        Formula: min(initial_delay * (backoff_factor ^ retry_index), max_delay)

        Args:
            retry_index: 0 for the first retry, 1 for the second, ...

        Returns:
            Delay in seconds

        Examples:
            >>> policy = RetryPolicy(initial_delay=1.0, backoff_factor=2.0)
            >>> policy.backoff_delay(0)
            1.0
            >>> policy.backoff_delay(3)
            8.0
        """
        delay = self.initial_delay * (self.backoff_factor**retry_index)
        return min(delay, self.max_delay)

    def calculate_delay(self, retry_index: int) -> float:
        """Backoff delay plus uniform jitter in [0, max_jitter]."""
        return self.backoff_delay(retry_index) + random.uniform(0, self.max_jitter)


@dataclass
class StatusCodePolicy:
    """Policy for deciding which HTTP failures are worth retrying.

    Users can customise status codes and whether unknown errors retry.
    """

    # HTTP status codes that indicate transient errors
    transient_status_codes: frozenset[int] = field(
        default_factory=lambda: frozenset(
            {
                408,  # Request Timeout
                429,  # Too Many Requests
                500,  # Internal Server Error
                502,  # Bad Gateway
                503,  # Service Unavailable
                504,  # Gateway Timeout
            }
        )
    )

    # HTTP status codes that indicate permanent errors
    permanent_status_codes: frozenset[int] = field(
        default_factory=lambda: frozenset(
            {
                400,  # Bad Request
                401,  # Unauthorised
                403,  # Forbidden
                404,  # Not Found
                405,  # Method Not Allowed
                410,  # Gone
            }
        )
    )

    # Whether to retry on unknown errors (conservative default: False)
    retry_unknown_errors: bool = False

    def categorise_status(self, status_code: int) -> ErrorCategory:
        """
        Categorise an HTTP status code.

        Permanent codes take precedence over transient codes. Other codes
        are transient only when retry_unknown_errors is set.
        """
        if status_code in self.permanent_status_codes:
            return ErrorCategory.PERMANENT
        if status_code in self.transient_status_codes:
            return ErrorCategory.TRANSIENT
        return self.unknown_category()

    def unknown_category(self) -> ErrorCategory:
        if self.retry_unknown_errors:
            return ErrorCategory.TRANSIENT
        return ErrorCategory.UNKNOWN
